"""
Help handler for swacli global help system.

Provides detailed help and examples for the main commands.
"""

from .base_handler import BaseHandler
from ..cli.help_system import show_custom_help, show_topic_help


class HelpHandler(BaseHandler):
    """Handler for global help command."""

    def handle_help(self):
        """Handle help command for various topics."""
        topic = getattr(self.args, 'topic', None)
        if not topic:
            show_custom_help()
        else:
            show_topic_help(topic, self.console)
        return 0
