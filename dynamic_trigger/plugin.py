"""
Dynamic Trigger Plugin

Registers lambda function triggers (events) stored in SSM Parameter Store.
At deployment time, right before the events are compiled:

1. Fetches the parameter configured for each function. Its value must be
   a comma separated list of ARNs.
2. Parses the individual ARNs.
3. Replaces the events of the configured functions with the parsed triggers.

This makes it possible to wire the same function to different topics,
queues or streams on different stages, e.g.

    Name:  /dev/dynamic-trigger
    Value: arn:aws:sns:eu-west-2:123456654321:topic1,arn:aws:sns:eu-west-2:123456654321:topic2
"""

import logging
from typing import Any, Callable, Dict, List

from .config import PluginConfig, validate_config
from .fetcher import create_ssm_client, fetch_trigger_values
from .registrar import LOG_PREFIX, register_triggers

logger = logging.getLogger(__name__)

CONFIG_KEY = 'dynamicTrigger'
HOOK_NAME = 'before:package:compileEvents'


class DynamicTriggerPlugin:
    """
    Hook provider for the service packaging lifecycle.

    The service is the framework's service definition as a dict with at least:

        {
            "custom": {"dynamicTrigger": {...}},
            "functions": {"handler": {"events": [...]}, ...}
        }

    The configuration is validated on construction, so a bad configuration
    aborts before any hook runs.
    """

    def __init__(self, service: Dict[str, Any], ssm_client=None, default_region: str = None,
                 profile: str = None):
        self.service = service
        custom = service.get('custom') or {}
        self.config: PluginConfig = validate_config(custom.get(CONFIG_KEY), default_region)
        self.ssm_client = ssm_client or create_ssm_client(self.config.region, profile)
        self.hooks: Dict[str, Callable[[], Any]] = {
            HOOK_NAME: self.before_compile_events,
        }

    def run_hook(self, name: str) -> Any:
        hook = self.hooks.get(name)
        if hook is None:
            logger.debug(f"No handler for hook {name}")
            return None
        return hook()

    def before_compile_events(self) -> Dict[str, List[Dict[str, str]]]:
        """
        Replace the events of the configured functions with their stored triggers.

        Every function's events are computed before any of them is written,
        so a failure leaves the service definition untouched.

        Returns:
            dict: function name -> events that were applied
        """
        logger.info(
            f"{LOG_PREFIX} - the functions the triggers will be registered for: {', '.join(self.config.function_names)}"
        )
        fetched = fetch_trigger_values(self.config, self.ssm_client)

        functions = self.service.get('functions') or {}
        registered = register_triggers(fetched, functions.keys())

        for name, events in registered.items():
            functions[name]['events'] = events

        return registered
