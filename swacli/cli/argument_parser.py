"""
Argument parser module for swacli.
Handles all command-line argument parsing and subcommand configuration.
"""

import argparse


def create_argument_parser():
    """Create and return the main argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog='swacli',
        description='Static web app command-line tool',
        add_help=False
    )

    # Global arguments
    parser.add_argument(
        "--config",
        help="Path to swa-cli.config.json (defaults to the current directory)",
        type=str,
        default=None
    )
    parser.add_argument(
        "--config-name",
        help="Name of the configuration to use from the config file",
        type=str,
        default=None
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) logging"
    )
    parser.add_argument(
        "--log-file",
        help="Also write log records to this file",
        type=str,
        default=None
    )
    parser.add_argument(
        "-h", "--help",
        action="store_true",
        help="Show this help message and exit"
    )

    # Create subparsers
    subparsers = parser.add_subparsers(dest='command', help='Sub-command help')

    _add_help_command(subparsers)
    _add_start_commands(subparsers)
    _add_utility_commands(subparsers)

    return parser


def _add_help_command(subparsers):
    """Add global help command."""
    help_parser = subparsers.add_parser('help', help='Show detailed help for specific commands')
    help_parser.add_argument('topic', nargs='?',
                             choices=['start', 'resolve', 'show-settings'],
                             help='Command to show help for')


def _add_start_commands(subparsers):
    """Add commands that resolve and launch startup scripts."""

    start_parser = subparsers.add_parser('start', help='Run the app startup script')
    start_parser.add_argument('app_location', nargs='?', default=None,
                              help='Folder containing the app source code')
    start_parser.add_argument('--run', default=None,
                              help='Startup script: npm:<script>, yarn:<script>, npx:<bin> or a file path')
    start_parser.add_argument('--port', type=int, default=None, help='Port for the app')
    start_parser.add_argument('--host', default=None, help='Host address for the app')
    start_parser.add_argument('--app-devserver-url', dest='app_devserver_url', default=None,
                              help='Connect to a running app dev server at this URL')
    start_parser.add_argument('--dry-run', action='store_true', default=False,
                              help='Print the resolved command instead of running it')

    resolve_parser = subparsers.add_parser('resolve', help='Resolve a startup script to a command')
    resolve_parser.add_argument('startup_script',
                                help='npm:<script>, yarn:<script>, npx:<bin> or a file path')
    resolve_parser.add_argument('--app-location', dest='app_location', default=None,
                                help='Base folder for relative script paths')
    resolve_parser.add_argument('--format', choices=['text', 'json'], default='text',
                                help='Output format (text or json)')


def _add_utility_commands(subparsers):
    """Add configuration and information commands."""

    show_settings_parser = subparsers.add_parser('show-settings', help='Show the effective configuration')
    show_settings_parser.add_argument('--format', choices=['table', 'json'], default='table',
                                      help='Output format (table or json)')

    subparsers.add_parser('version', help='Show version information')
