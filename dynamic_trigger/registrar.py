"""
Trigger Registrar

Turns a comma separated list of ARNs into serverless event definitions:

    arn:aws:sns:eu-west-2:123456654321:topic1  ->  {'sns': 'arn:aws:sns:...'}
    arn:aws:sqs:eu-west-2:123456654321:queue1  ->  {'sqs': 'arn:aws:sqs:...'}
    arn:aws:kinesis:eu-west-2:123456654321:stream/s1  ->  {'stream': 'arn:aws:kinesis:...'}

Only sns, sqs and kinesis ARNs are supported.
"""

import logging
from enum import Enum
from typing import Dict, Iterable, List, NamedTuple

from .errors import MalformedArnError, UnsupportedServiceError
from .fetcher import FetchedFunctionConfig

logger = logging.getLogger(__name__)

ARN_SEPARATOR = ','
ARN_FIELD_COUNT = 6
LOG_PREFIX = 'SLSPluginSNSEventReg'


class EventCategory(str, Enum):
    SNS = 'sns'
    SQS = 'sqs'
    STREAM = 'stream'


# AWS service token -> serverless event type
SERVICE_MAP: Dict[str, EventCategory] = {
    'sns': EventCategory.SNS,
    'sqs': EventCategory.SQS,
    'kinesis': EventCategory.STREAM,
}


class Arn(NamedTuple):
    partition: str
    service: str
    region: str
    account: str
    resource: str


def parse_arn(text: str) -> Arn:
    """
    Split an ARN into its fields.

    The resource part may itself contain colons, so the text is split
    at most five times.

    Raises:
        MalformedArnError: If the text is not arn:partition:service:region:account:resource
    """
    fields = text.split(':', ARN_FIELD_COUNT - 1)
    if len(fields) != ARN_FIELD_COUNT or fields[0] != 'arn':
        raise MalformedArnError(text)
    return Arn(*fields[1:])


def classify(arn: str) -> EventCategory:
    """Map an ARN to the event category it triggers"""
    service = parse_arn(arn).service
    category = SERVICE_MAP.get(service)
    if category is None:
        raise UnsupportedServiceError(arn)
    return category


def split_arns(value: str) -> List[str]:
    # No trimming; empty segments are rejected by parse_arn()
    return value.split(ARN_SEPARATOR)


def build_trigger_events(value: str) -> List[Dict[str, str]]:
    """
    Build the event list for a raw SSM parameter value.

    Raises:
        UnsupportedServiceError: If any ARN is not sns, sqs or kinesis
    """
    return [{classify(arn).value: arn} for arn in split_arns(value)]


def register_triggers(
    fetched: Iterable[FetchedFunctionConfig],
    function_names: Iterable[str],
) -> Dict[str, List[Dict[str, str]]]:
    """
    Compute the new event list of every function that has fetched triggers.

    Functions are visited in the order of function_names; each one binds to
    the first fetched entry with the same name. Functions without an entry
    are left out of the result.

    Args:
        fetched: Output of fetch_trigger_values()
        function_names: Names of the functions defined by the service

    Returns:
        dict: function name -> list of events

    Raises:
        UnsupportedServiceError: On the first unsupported ARN; nothing is returned
    """
    fetched = list(fetched)
    registered = {}

    for name in function_names:
        found = next((config for config in fetched if config.name == name), None)
        if found is None:
            continue

        events = build_trigger_events(found.value)
        registered[name] = events
        arns = ','.join(arn for event in events for arn in event.values())
        logger.info(f"{LOG_PREFIX} - triggers will be registered for function {name}: {arns}")

    return registered
