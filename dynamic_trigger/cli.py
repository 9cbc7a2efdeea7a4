#!/usr/bin/env python3
"""
Run the dynamic trigger hook against a service definition.

Usage:
    serverless print --format json > service.json
    dynamic-trigger service.json --output service.resolved.json
    dynamic-trigger service.json --region eu-west-2 --profile dev

Environment Variables:
    AWS_DEFAULT_REGION (used when the config has no region), AWS_PROFILE
"""
import sys
import json
import argparse
import logging

from botocore.exceptions import BotoCoreError, ClientError
from dotenv import load_dotenv

from .errors import DynamicTriggerError
from .plugin import HOOK_NAME, DynamicTriggerPlugin

logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(
        description='Register function triggers stored in SSM Parameter Store'
    )
    parser.add_argument('service', help='Path to the service definition (JSON)')
    parser.add_argument('--output', help='Write the updated service definition here (default: stdout)')
    parser.add_argument('--region', help='Fallback region when custom.dynamicTrigger.region is unset')
    parser.add_argument('--profile', help='AWS named profile for the SSM client')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    return parser.parse_args(argv)


def load_service(path):
    with open(path, 'r') as f:
        return json.load(f)


def write_service(service, path=None):
    text = json.dumps(service, indent=2)
    if path:
        with open(path, 'w') as f:
            f.write(text + '\n')
        logger.info(f"Wrote updated service definition to {path}")
    else:
        sys.stdout.write(text + '\n')


def main(argv=None):
    load_dotenv()
    args = parse_arguments(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    try:
        service = load_service(args.service)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Cannot read service definition {args.service}: {e}")
        return 1

    try:
        plugin = DynamicTriggerPlugin(service, default_region=args.region, profile=args.profile)
        plugin.run_hook(HOOK_NAME)
    except DynamicTriggerError as e:
        logger.error(str(e))
        return 1
    except (ClientError, BotoCoreError) as e:
        logger.error(f"SSM request failed: {e}")
        return 1

    write_service(service, args.output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
