"""
Trigger Fetcher

Reads the trigger ARN lists of all configured functions from SSM
Parameter Store in a single GetParameters call.
"""

import logging
from typing import Any, Dict, List

import boto3
from pydantic import BaseModel, ConfigDict

from .config import PluginConfig
from .errors import MissingParameterError

logger = logging.getLogger(__name__)


class FetchedFunctionConfig(BaseModel):
    """A configured function together with the raw value of its SSM parameter"""

    model_config = ConfigDict(frozen=True)

    name: str
    ssm_path: str
    value: str


def create_ssm_client(region: str, profile: str = None):
    """Build an SSM client for the given region (and optional named profile)"""
    session = boto3.Session(region_name=region, profile_name=profile)
    return session.client('ssm')


def fetch_trigger_values(config: PluginConfig, ssm_client) -> List[FetchedFunctionConfig]:
    """
    Fetch the parameter value for every configured function.

    Args:
        config: Validated plugin configuration
        ssm_client: boto3 SSM client

    Returns:
        list: One FetchedFunctionConfig per configured function, in config order

    Raises:
        MissingParameterError: If a configured path is not in the response
        botocore.exceptions.ClientError: On AWS API failure (not retried)
    """
    if not config.functions:
        logger.info("No functions configured, skipping SSM lookup")
        return []

    names = config.ssm_paths
    logger.info(f"Fetching {len(names)} SSM parameter(s): {', '.join(names)}")
    response = ssm_client.get_parameters(Names=names)

    parameters: Dict[str, Any] = {}
    for parameter in response.get('Parameters', []):
        parameters[parameter['Name']] = parameter['Value']

    invalid = response.get('InvalidParameters', [])
    if invalid:
        logger.warning(f"SSM reported invalid parameters: {', '.join(invalid)}")

    fetched = []
    for entry in config.functions:
        if entry.ssm_path not in parameters:
            raise MissingParameterError(entry.ssm_path, entry.name)
        fetched.append(FetchedFunctionConfig(
            name=entry.name,
            ssm_path=entry.ssm_path,
            value=parameters[entry.ssm_path],
        ))

    return fetched
