"""
Plugin Configuration

Validates the custom.dynamicTrigger block of a service definition:

    custom:
      dynamicTrigger:
        region: "eu-west-2"          # optional, falls back to AWS_DEFAULT_REGION
        functions:
          - name: "handler"
            ssmPath: "/dev/dynamic-trigger"

The shape checks are done by hand so that no value is coerced; the
validated result is returned as frozen pydantic models.
"""

import os
import logging
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .errors import ConfigInvalidError, ConfigMissingError

logger = logging.getLogger(__name__)

REGION_ENV_VAR = 'AWS_DEFAULT_REGION'


class TriggerConfigEntry(BaseModel):
    """One function and the SSM path holding its trigger ARNs"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    ssm_path: str = Field(alias='ssmPath')


class PluginConfig(BaseModel):
    """Validated custom.dynamicTrigger block"""

    model_config = ConfigDict(frozen=True)

    region: str
    functions: Tuple[TriggerConfigEntry, ...] = ()

    @property
    def function_names(self):
        return [entry.name for entry in self.functions]

    @property
    def ssm_paths(self):
        return [entry.ssm_path for entry in self.functions]


def resolve_region(block: Dict[str, Any], default_region: Optional[str] = None) -> Any:
    """
    Return the configured region, or the fallback when it is unset.

    The fallback is default_region when given, otherwise the
    AWS_DEFAULT_REGION environment variable. The result may be None;
    rejecting that is left to validate_config().
    """
    region = block.get('region')
    if region:
        return region
    if default_region is None:
        default_region = os.environ.get(REGION_ENV_VAR)
    logger.debug(f"Region not configured, falling back to {default_region!r}")
    return default_region


def _check_function_entry(index: int, entry: Any) -> None:
    if type(entry) is not dict:
        raise ConfigInvalidError(f"functions[{index}] must be a mapping")
    for field in ('name', 'ssmPath'):
        if field not in entry:
            raise ConfigInvalidError(f"functions[{index}].{field} is missing")
        if not isinstance(entry[field], str):
            raise ConfigInvalidError(f"functions[{index}].{field} must be a string")


def validate_config(block: Optional[Dict[str, Any]], default_region: Optional[str] = None) -> PluginConfig:
    """
    Validate and normalize the plugin configuration block.

    Args:
        block: Value of custom.dynamicTrigger (may be None)
        default_region: Region to use when the block has none

    Returns:
        PluginConfig with the region resolved

    Raises:
        ConfigMissingError: If the block is absent (None or another falsy non-mapping)
        ConfigInvalidError: If functions or region have the wrong shape
    """
    # An empty mapping is present, just invalid
    if not block and not isinstance(block, dict):
        raise ConfigMissingError()
    if not isinstance(block, dict):
        raise ConfigInvalidError('dynamicTrigger must be a mapping')

    region = resolve_region(block, default_region)

    functions = block.get('functions')
    if not isinstance(functions, (list, tuple)):
        raise ConfigInvalidError('functions must be a list')
    if not isinstance(region, str):
        raise ConfigInvalidError(f"region must be a string (set region or {REGION_ENV_VAR})")

    for index, entry in enumerate(functions):
        _check_function_entry(index, entry)

    return PluginConfig(
        region=region,
        functions=tuple(
            TriggerConfigEntry(name=entry['name'], ssm_path=entry['ssmPath'])
            for entry in functions
        ),
    )
