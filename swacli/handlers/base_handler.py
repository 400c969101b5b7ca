"""
Base handler class providing common functionality for all command handlers.
"""

from abc import ABC

from rich.panel import Panel


class BaseHandler(ABC):
    """Abstract base class for all command handlers."""

    def __init__(self, args, console, configuration_manager, config):
        """
        Initialize the base handler with common dependencies.

        Args:
            args: Parsed command line arguments
            console: Rich console instance for output formatting
            configuration_manager: ConfigurationManager for the config file in use
            config: Effective SWACLIConfig for this run
        """
        self.args = args
        self.console = console
        self.configuration_manager = configuration_manager
        self.config = config

    def _print_error(self, message, title="Error"):
        """Render an error message in a panel."""
        self.console.print(Panel.fit(message, title=title, border_style="red"))
