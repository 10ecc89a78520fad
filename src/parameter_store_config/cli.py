#!/usr/bin/env python3
"""
Parameter Store Configuration CLI
Load a Parameter Store hierarchy and print the flattened configuration keys.
"""

import argparse
import json
import sys
import logging
from typing import Dict, List, Optional

import yaml
from ruamel.yaml.error import YAMLError

from .configuration import Configuration, ConfigurationBuilder
from .errors import ConfigMergeError, InvalidArgumentError, RemoteFetchError
from .log import configure_logging
from .parameter_store import ParameterStoreSource
from .settings import ParameterStoreSettings, load_settings

logger = logging.getLogger(__name__)

REDACTED = '******'


class ParameterStoreCLI:
    """Command line front end for loading Parameter Store configuration."""

    def __init__(self):
        self.configuration: Optional[Configuration] = None
        self.secure_keys = set()
        self.args = None

    def setup(self, settings: ParameterStoreSettings, client=None) -> int:
        """Create the source and load the configuration."""
        try:
            source = ParameterStoreSource.from_settings(
                settings,
                client=client,
                logger_factory=logging.getLogger,
            )
            self.configuration = ConfigurationBuilder().add(source).build()
        except InvalidArgumentError as e:
            print(f"Error: {e}")
            return 1
        except RemoteFetchError as e:
            logger.error(f"Failed to load parameters: {e}")
            print(f"Error: {e}")
            return 1

        for provider in self.configuration.providers:
            self.secure_keys.update(getattr(provider, 'secure_keys', ()))

        if self.args and self.args.verbose:
            print(f"✓ Loaded {len(self.configuration.keys())} keys from {settings.root_path}")
        return 0

    def dump(
        self,
        output_format: str = 'json',
        output_file: Optional[str] = None,
        redact: bool = False
    ) -> int:
        """Print every loaded key."""
        if not self.configuration:
            print("Error: No configuration loaded")
            return 1

        data = self.configuration.as_dict()
        if redact:
            data = {
                key: REDACTED if key in self.secure_keys else value
                for key, value in data.items()
            }

        if output_format == 'json':
            output_data = json.dumps(data, indent=2)
        elif output_format == 'yaml':
            output_data = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
        elif output_format == 'env':
            output_data = self._format_env(data)
        elif output_format == 'table':
            output_data = self._format_table(data)
        else:
            print(f"Error: Unsupported output format: {output_format}")
            return 1

        if output_file:
            with open(output_file, 'w') as f:
                f.write(output_data)
                if not output_data.endswith('\n'):
                    f.write('\n')
            if self.args and self.args.verbose:
                print(f"✓ Output saved to {output_file}")
        else:
            print(output_data.rstrip('\n'))

        return 0

    def get(self, key: str) -> int:
        """Print a single value."""
        if not self.configuration:
            print("Error: No configuration loaded")
            return 1

        value = self.configuration.get(key)
        if value is None:
            print(f"Error: Key '{key}' not found")
            return 1

        print(value)
        return 0

    def _format_env(self, data: Dict[str, str]) -> str:
        """Format keys as environment variable assignments (':' becomes '__')."""
        lines = []
        for key, value in data.items():
            lines.append(f"{key.replace(':', '__')}={value}")
        return "\n".join(lines)

    def _format_table(self, data: Dict[str, str]) -> str:
        if not data:
            return "(no parameters)"

        width = max(len(key) for key in data)
        lines = [f"{'KEY'.ljust(width)}  VALUE", f"{'-' * width}  -----"]
        for key, value in data.items():
            lines.append(f"{key.ljust(width)}  {value}")
        return "\n".join(lines)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='parameter-store-config',
        description='Load configuration from AWS Systems Manager Parameter Store',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  parameter-store-config --root-path /app/prod dump
  parameter-store-config --root-path /app/prod --expand-lists dump --output yaml
  parameter-store-config --root-path /app/prod get app:prod:db:host
        """
    )

    # Global options
    parser.add_argument('--root-path', help='Parameter hierarchy to load (e.g. /app/prod)')
    parser.add_argument('--region', help='AWS region (default: from settings or AWS_DEFAULT_REGION)')
    parser.add_argument('--profile', help='AWS profile')
    parser.add_argument('--config', help='Settings file path (YAML)')
    parser.add_argument('--expand-lists', action='store_true',
                        help='Expand StringList values into indexed keys')
    parser.add_argument('--fail-if-cant-load', action='store_true',
                        help='Exit with an error if parameters cannot be loaded')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')
    parser.add_argument('-q', '--quiet', action='store_true', help='Quiet mode')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Dump command
    dump_parser = subparsers.add_parser('dump', help='Print all loaded keys')
    dump_parser.add_argument('--output', choices=['json', 'yaml', 'env', 'table'], default='json',
                             help='Output format (default: json)')
    dump_parser.add_argument('--output-file', help='Save output to file')
    dump_parser.add_argument('--redact', action='store_true',
                             help='Mask values loaded from SecureString parameters')

    # Get command
    get_parser = subparsers.add_parser('get', help='Print a single value')
    get_parser.add_argument('key', help='Flat configuration key (e.g. app:db:host)')

    return parser


def main(argv: Optional[List[str]] = None, client=None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.verbose and args.quiet:
        print("Error: Cannot use both --verbose and --quiet")
        return 1

    configure_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        settings = load_settings(
            args.config,
            root_path=args.root_path,
            region=args.region,
            profile=args.profile,
            parse_string_list_as_list=True if args.expand_lists else None,
            fail_if_cant_load=True if args.fail_if_cant_load else None,
        )
    except (InvalidArgumentError, ConfigMergeError, FileNotFoundError, YAMLError) as e:
        print(f"Error: {e}")
        return 1

    cli = ParameterStoreCLI()
    cli.args = args

    status = cli.setup(settings, client=client)
    if status:
        return status

    try:
        if args.command == 'dump':
            return cli.dump(
                output_format=args.output,
                output_file=args.output_file,
                redact=args.redact,
            )
        elif args.command == 'get':
            return cli.get(args.key)
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 1


if __name__ == '__main__':
    sys.exit(main())
