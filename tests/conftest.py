"""Test configuration and fixtures."""

import boto3
import pytest
from botocore.stub import Stubber

SSM_PATH = '/stage/dynamic-trigger'


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Keep the tests away from real AWS credentials."""
    monkeypatch.setenv('AWS_ACCESS_KEY_ID', 'testing')
    monkeypatch.setenv('AWS_SECRET_ACCESS_KEY', 'testing')
    monkeypatch.setenv('AWS_SESSION_TOKEN', 'testing')
    monkeypatch.delenv('AWS_PROFILE', raising=False)


@pytest.fixture
def ssm_client():
    return boto3.client('ssm', region_name='eu-west-2')


@pytest.fixture
def ssm_stub(ssm_client):
    with Stubber(ssm_client) as stubber:
        yield stubber
        stubber.assert_no_pending_responses()


def _parameters_response(values, invalid=None):
    response = {
        'Parameters': [
            {'Name': name, 'Value': value, 'Type': 'StringList'}
            for name, value in values.items()
        ],
    }
    # ParameterNameList has a minimum length of one
    if invalid:
        response['InvalidParameters'] = list(invalid)
    return response


@pytest.fixture
def parameters_response():
    """Build a GetParameters response from a {name: value} dict."""
    return _parameters_response


@pytest.fixture
def plugin_config_block():
    return {
        'region': 'foo-bar-10',
        'functions': [{'name': 'handler', 'ssmPath': SSM_PATH}],
    }


@pytest.fixture
def service(plugin_config_block):
    return {
        'service': 'demo',
        'custom': {'dynamicTrigger': plugin_config_block},
        'functions': {'handler': {'handler': 'index.handler', 'events': []}},
    }
