"""
Dynamic trigger registration for serverless functions.

Fetches comma separated ARN lists from SSM Parameter Store at deployment
time and turns them into sns, sqs and stream events of the configured
functions.
"""

from .errors import (
    DynamicTriggerError,
    ConfigMissingError,
    ConfigInvalidError,
    MissingParameterError,
    UnsupportedServiceError,
    MalformedArnError,
)
from .config import PluginConfig, TriggerConfigEntry, validate_config
from .fetcher import FetchedFunctionConfig, fetch_trigger_values
from .registrar import EventCategory, build_trigger_events, parse_arn, register_triggers
from .plugin import DynamicTriggerPlugin

__all__ = [
    'DynamicTriggerError',
    'ConfigMissingError',
    'ConfigInvalidError',
    'MissingParameterError',
    'UnsupportedServiceError',
    'MalformedArnError',
    'PluginConfig',
    'TriggerConfigEntry',
    'validate_config',
    'FetchedFunctionConfig',
    'fetch_trigger_values',
    'EventCategory',
    'build_trigger_events',
    'parse_arn',
    'register_triggers',
    'DynamicTriggerPlugin',
]
