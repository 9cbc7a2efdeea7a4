"""
Dynamic Trigger Errors

All failures raised by the plugin derive from DynamicTriggerError.
None of them are retried; any of them aborts the deployment.
"""


class DynamicTriggerError(Exception):
    """Base exception for dynamic trigger errors"""
    pass


class ConfigMissingError(DynamicTriggerError):
    """Raised when custom.dynamicTrigger is absent"""

    def __init__(self, message: str = 'SLSAWSLambdaDynamicTrigger - plugin configuration is missing.'):
        super().__init__(message)


class ConfigInvalidError(DynamicTriggerError):
    """Raised when the plugin configuration has the wrong shape"""

    def __init__(self, reason: str = None):
        message = (
            'SLSAWSLambdaDynamicTrigger - plugin configuration is not valid. '
            'Please look into the README.md for the details.'
        )
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.reason = reason


class MissingParameterError(DynamicTriggerError):
    """Raised when a configured SSM path is not in the GetParameters response"""

    def __init__(self, ssm_path: str, function_name: str = None):
        message = f"SSM parameter {ssm_path} not found"
        if function_name is not None:
            message = f"{message} (function: {function_name})"
        super().__init__(message)
        self.ssm_path = ssm_path
        self.function_name = function_name


class UnsupportedServiceError(DynamicTriggerError):
    """Raised when an ARN points at a service other than sns, sqs or kinesis"""

    def __init__(self, arn: str, message: str = None):
        super().__init__(
            message or 'Wrong aws service in arn. Only sns, sqs and kinesis can be handled.'
        )
        self.arn = arn


class MalformedArnError(UnsupportedServiceError):
    """Raised when a trigger entry cannot be parsed as an ARN at all"""

    def __init__(self, arn: str):
        super().__init__(
            arn,
            f"Malformed arn {arn!r}. Only sns, sqs and kinesis can be handled.",
        )
