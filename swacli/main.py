#!/usr/bin/env python3
"""
Static web app command-line tool.

Resolves startup script references (npm/yarn/npx scripts or file paths)
and launches them with one-shot cleanup on process exit.
"""

import sys

from rich.console import Console
from rich.panel import Panel

from . import VERSION
from .cli import (
    create_argument_parser,
    show_custom_help,
    handle_version
)
from .command_handler import CommandHandler
from .configuration_manager import ConfigurationManager
from .logger import logger, setup_logging
from .utils import argv

# Commands that don't need the configuration file
NO_CONFIG_COMMANDS = {'version', 'help'}

# Command line options merged into the effective configuration
CLI_CONFIG_OPTIONS = ('app_location', 'run', 'port', 'host', 'app_devserver_url')

FALSE_VALUES = ('false', '0', 'no', 'off')


def is_verbose(tokens=None):
    """
    Check for --verbose before argparse runs.

    A bare switch or a following non-flag token counts as enabled;
    an explicit false-like value does not.
    """
    value = argv('--verbose', tokens)
    if value is None:
        return False
    if value is True:
        return True
    return value.lower() not in FALSE_VALUES


def log_file_option(tokens=None):
    """Get the --log-file path before argparse runs, or None."""
    value = argv('--log-file', tokens)
    return value if isinstance(value, str) else None


def collect_cli_options(args):
    """
    Collect configuration overrides given on the command line.

    Args:
        args: Parsed command line arguments

    Returns:
        dict: SWACLIConfig field -> value (None when not given)
    """
    options = {name: getattr(args, name, None) for name in CLI_CONFIG_OPTIONS}
    options['verbose'] = True if args.verbose else None
    return options


def load_configuration(args, console):
    """
    Load and validate the effective configuration.

    Args:
        args: Parsed command line arguments
        console: Rich console instance

    Returns:
        tuple: (ConfigurationManager, SWACLIConfig)
    """
    config_manager = ConfigurationManager(args.config)
    if args.config and not config_manager.config:
        logger.warn(f"Configuration file {args.config} is missing or empty, using defaults.")

    config = config_manager.build_config(args.config_name, collect_cli_options(args))
    if config is None:
        error_text = (f"Configuration: {args.config_name} not found.\n"
                      f"Please check your {config_manager.config_file_path} config file.")
        console.print(Panel.fit(error_text, title="Configuration Error"))
        sys.exit(1)

    if not config_manager.validate_config(config):
        error_text = f"Invalid configuration: port={config.port!r} host={config.host!r}"
        console.print(Panel.fit(error_text, title="Configuration Error"))
        sys.exit(1)

    return config_manager, config


def main():
    """Main entry point for swacli."""
    # Logging has to be configured before argparse runs
    setup_logging(verbose=is_verbose(), log_file_path=log_file_option())

    console = Console()
    parser = create_argument_parser()
    args = parser.parse_args()

    if args.help or not args.command:
        show_custom_help()
        sys.exit(0)

    if args.command == 'version':
        handle_version(VERSION)
        sys.exit(0)

    if args.command in NO_CONFIG_COMMANDS:
        config_manager, config = None, None
    else:
        config_manager, config = load_configuration(args, console)

    command_handler = CommandHandler(args, console, config_manager, config)
    sys.exit(command_handler.execute())


if __name__ == "__main__":
    main()
