"""Unit tests for ARN parsing and trigger registration."""

import logging

import pytest

from dynamic_trigger.errors import MalformedArnError, UnsupportedServiceError
from dynamic_trigger.fetcher import FetchedFunctionConfig
from dynamic_trigger.registrar import (
    Arn,
    EventCategory,
    build_trigger_events,
    classify,
    parse_arn,
    register_triggers,
)

SNS_ARN = 'arn:aws:sns:foo-bar-10:123456654321:id1'
SQS_ARN = 'arn:aws:sqs:foo-bar-10:123456654321:id2'
KINESIS_ARN = 'arn:aws:kinesis:foo-bar-10:123456654321:id3'


def fetched(name, value, ssm_path='/stage/dynamic-trigger'):
    return FetchedFunctionConfig(name=name, ssm_path=ssm_path, value=value)


def test_parse_arn_fields() -> None:
    assert parse_arn('arn:aws:kinesis:eu-west-2:123456654321:stream/orders') == Arn(
        partition='aws',
        service='kinesis',
        region='eu-west-2',
        account='123456654321',
        resource='stream/orders',
    )


def test_parse_arn_keeps_colons_in_resource() -> None:
    arn = parse_arn('arn:aws:sns:eu-west-2:123456654321:topic:subscription-id')

    assert arn.resource == 'topic:subscription-id'


@pytest.mark.parametrize('text', [
    '',
    'arn:aws:sns',
    'arn:aws:sns:eu-west-2:123456654321',
    'urn:aws:sns:eu-west-2:123456654321:topic',
    ' arn:aws:sns:eu-west-2:123456654321:topic',
])
def test_parse_arn_rejects_malformed_input(text) -> None:
    with pytest.raises(MalformedArnError):
        parse_arn(text)


@pytest.mark.parametrize('arn, category', [
    (SNS_ARN, EventCategory.SNS),
    (SQS_ARN, EventCategory.SQS),
    (KINESIS_ARN, EventCategory.STREAM),
])
def test_classify(arn, category) -> None:
    assert classify(arn) is category


def test_classify_unknown_service() -> None:
    with pytest.raises(UnsupportedServiceError, match='Only sns, sqs and kinesis can be handled'):
        classify('arn:aws:unknown:r:a:id1')


def test_malformed_arn_is_an_unsupported_service() -> None:
    with pytest.raises(UnsupportedServiceError):
        classify('not-an-arn')


def test_build_trigger_events_in_order() -> None:
    value = 'arn:aws:sns:r:a:id1,arn:aws:sqs:r:a:id2,arn:aws:kinesis:r:a:id3'

    assert build_trigger_events(value) == [
        {'sns': 'arn:aws:sns:r:a:id1'},
        {'sqs': 'arn:aws:sqs:r:a:id2'},
        {'stream': 'arn:aws:kinesis:r:a:id3'},
    ]


def test_build_trigger_events_keeps_duplicates() -> None:
    assert build_trigger_events(f"{SNS_ARN},{SNS_ARN}") == [{'sns': SNS_ARN}, {'sns': SNS_ARN}]


@pytest.mark.parametrize('value', [f"{SNS_ARN},", f",{SNS_ARN}", f"{SNS_ARN}, {SQS_ARN}"])
def test_build_trigger_events_does_not_clean_up_segments(value) -> None:
    with pytest.raises(UnsupportedServiceError):
        build_trigger_events(value)


def test_register_triggers_returns_events_per_function() -> None:
    registered = register_triggers(
        [fetched('handler', f"{SNS_ARN},{SQS_ARN},{KINESIS_ARN}")],
        ['handler', 'other'],
    )

    assert registered == {
        'handler': [{'sns': SNS_ARN}, {'sqs': SQS_ARN}, {'stream': KINESIS_ARN}],
    }


def test_register_triggers_follows_function_order() -> None:
    registered = register_triggers(
        [fetched('b', SQS_ARN), fetched('a', SNS_ARN)],
        ['a', 'b'],
    )

    assert list(registered) == ['a', 'b']


def test_register_triggers_first_match_wins() -> None:
    registered = register_triggers(
        [fetched('handler', SNS_ARN, '/a'), fetched('handler', SQS_ARN, '/b')],
        ['handler'],
    )

    assert registered == {'handler': [{'sns': SNS_ARN}]}


def test_register_triggers_skips_unknown_functions() -> None:
    assert register_triggers([fetched('handler', SNS_ARN)], ['other']) == {}


def test_register_triggers_aborts_on_unsupported_service() -> None:
    with pytest.raises(UnsupportedServiceError):
        register_triggers(
            [fetched('a', SNS_ARN), fetched('b', 'arn:aws:unknown:r:a:id1')],
            ['a', 'b'],
        )


def test_register_triggers_logs_bound_arns(caplog) -> None:
    with caplog.at_level(logging.INFO, logger='dynamic_trigger.registrar'):
        register_triggers([fetched('handler', f"{SNS_ARN},{SQS_ARN}")], ['handler'])

    assert f"SLSPluginSNSEventReg - triggers will be registered for function handler: {SNS_ARN},{SQS_ARN}" in caplog.text
