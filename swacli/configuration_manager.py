import json
import os
from dataclasses import asdict, dataclass, fields
from typing import Optional

import yaml
from rich.console import Console
from rich.table import Table
from rich import box

from .logger import logger

DEFAULT_CONFIG_FILE = 'swa-cli.config.json'
YAML_EXTENSIONS = ('.yml', '.yaml')
DEFAULT_PORT = 4280
DEFAULT_HOST = 'localhost'

# swa-cli.config.json key -> SWACLIConfig field
CONFIG_KEY_MAP = {
    'appLocation': 'app_location',
    'apiLocation': 'api_location',
    'outputLocation': 'output_location',
    'run': 'run',
    'port': 'port',
    'host': 'host',
    'appDevserverUrl': 'app_devserver_url',
    'verbose': 'verbose',
}

ENV_OVERRIDES = {
    'SWA_CLI_APP_LOCATION': 'app_location',
    'SWA_CLI_API_LOCATION': 'api_location',
    'SWA_CLI_OUTPUT_LOCATION': 'output_location',
    'SWA_CLI_RUN': 'run',
    'SWA_CLI_PORT': 'port',
    'SWA_CLI_HOST': 'host',
    'SWA_CLI_APP_DEVSERVER_URL': 'app_devserver_url',
}


@dataclass
class SWACLIConfig:
    """Effective options for a single swacli run."""
    app_location: Optional[str] = None
    api_location: Optional[str] = None
    output_location: Optional[str] = None
    run: Optional[str] = None
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    app_devserver_url: Optional[str] = None
    verbose: bool = False

    def to_dict(self):
        return asdict(self)


class ConfigurationManager:
    def __init__(self, config_file_path=None):
        self.config_file_path = config_file_path or os.path.join(os.getcwd(), DEFAULT_CONFIG_FILE)
        self.config = self._read_config_file()
        self.configurations = self.config.get('configurations', {}) if self.config else {}

    def _read_config_file(self):
        """
        Read and parse the config file.

        .yml/.yaml files are loaded as YAML, anything else as JSON. An
        unreadable or malformed file is treated as an empty configuration.

        Returns:
            dict: The parsed configuration
        """
        if not os.path.exists(self.config_file_path):
            logger.silly(f"No configuration file found at {self.config_file_path}")
            return {}
        try:
            with open(self.config_file_path, 'r') as file:
                if self.config_file_path.lower().endswith(YAML_EXTENSIONS):
                    data = yaml.safe_load(file)
                else:
                    data = json.load(file)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            logger.warn(f"Unable to read {self.config_file_path}: {e}")
            return {}
        if not isinstance(data, dict):
            return {}
        return data

    def list_configurations(self):
        """
        Get all named configurations from the config file.

        Returns:
            dict: Configuration name -> raw configuration dict
        """
        return {name: value for name, value in self.configurations.items() if isinstance(value, dict)}

    def get_configuration_names(self):
        return sorted(self.list_configurations().keys())

    def get_default_configuration_name(self):
        """
        Get the configuration used when none is requested by name.

        Returns:
            str: The only configured name, or None if there are zero or several
        """
        names = self.get_configuration_names()
        return names[0] if len(names) == 1 else None

    def get_raw_configuration(self, name):
        """
        Get the raw configuration entry for a name.

        Args:
            name (str): The configuration name

        Returns:
            dict: The configuration entry or None if not found
        """
        return self.list_configurations().get(name)

    def build_config(self, name=None, cli_options=None):
        """
        Build the effective configuration.

        Precedence: defaults < config file entry < environment < CLI options.

        Args:
            name (str): Configuration name (defaults to the only configured entry)
            cli_options (dict): Options given on the command line; None values are ignored

        Returns:
            SWACLIConfig: The merged configuration, or None if name is unknown
        """
        values = {}

        name = name or self.get_default_configuration_name()
        if name:
            raw = self.get_raw_configuration(name)
            if raw is None:
                return None
            logger.silly(f"Using configuration \"{name}\" from {self.config_file_path}")
            for key, value in raw.items():
                field_name = CONFIG_KEY_MAP.get(key)
                if field_name:
                    values[field_name] = value

        for env_name, field_name in ENV_OVERRIDES.items():
            env_value = os.environ.get(env_name)
            if env_value:
                values[field_name] = env_value

        known_fields = {f.name for f in fields(SWACLIConfig)}
        for key, value in (cli_options or {}).items():
            if key in known_fields and value is not None:
                values[key] = value

        if 'port' in values:
            try:
                values['port'] = int(values['port'])
            except (TypeError, ValueError):
                pass

        return SWACLIConfig(**values)

    def validate_config(self, config):
        """
        Validate an effective configuration.

        Args:
            config (SWACLIConfig): Configuration to validate

        Returns:
            bool: True if the port and host are usable
        """
        port = config.port
        if isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536:
            return False
        if not config.host or not str(config.host).strip():
            return False
        return True

    def show_configurations(self):
        """Display a table of all configurations in the config file."""
        console = Console()
        configurations = self.list_configurations()

        table = Table(title=f"Configurations in {self.config_file_path}", box=box.ROUNDED)
        table.add_column("Name", style="bold cyan", no_wrap=True)
        table.add_column("App Location", style="magenta")
        table.add_column("Run", style="yellow")
        table.add_column("Port", justify="right", style="green")

        for name in sorted(configurations):
            item = configurations[name]
            table.add_row(
                name,
                str(item.get('appLocation', '')),
                str(item.get('run', '')),
                str(item.get('port', DEFAULT_PORT))
            )

        console.print(table)
