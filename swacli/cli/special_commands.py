"""
Special command handlers for swacli.
Handles commands that don't launch anything.
"""

import json

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

SETTING_DESCRIPTIONS = {
    'app_location': 'Folder containing the app source code',
    'api_location': 'Folder containing the API source code',
    'output_location': 'Folder containing the built app',
    'run': 'Startup script reference',
    'port': 'Port for the app',
    'host': 'Host address for the app',
    'app_devserver_url': 'Running app dev server URL',
    'verbose': 'Verbose logging',
}


def handle_version(version=None):
    """Display version information."""
    console = Console()

    version_table = Table.grid(padding=(0, 3))
    version_table.add_column(style="bold cyan", no_wrap=True, min_width=12)
    version_table.add_column(style="white")

    version_table.add_row("Tool:", "swacli")
    version_table.add_row("Version:", version or "unknown")
    version_table.add_row("Description:", "Static web app startup script helper")

    console.print(Panel(
        version_table,
        title="[bold cyan]Version Information[/bold cyan]",
        border_style="cyan",
        padding=(1, 2)
    ))


def handle_show_settings(configuration_manager, config, config_name=None, format_output=None):
    """Display the effective configuration settings."""
    console = Console()

    if format_output == 'json':
        settings_data = {
            'config_file': configuration_manager.config_file_path,
            'config_name': config_name,
            'settings': config.to_dict(),
        }
        print(json.dumps(settings_data, indent=2))
        return

    settings_table = Table(title="Effective Configuration Settings")
    settings_table.add_column("Setting", style="bold cyan", no_wrap=True)
    settings_table.add_column("Value", style="white")
    settings_table.add_column("Description", style="dim white")

    settings_table.add_row("config_file", configuration_manager.config_file_path, "Configuration file")
    settings_table.add_row("config_name", config_name or "None", "Configuration in use")

    for key, value in config.to_dict().items():
        settings_table.add_row(key, str(value), SETTING_DESCRIPTIONS.get(key, 'Configuration setting'))

    console.print(settings_table)
    print()

    if configuration_manager.list_configurations():
        configuration_manager.show_configurations()
