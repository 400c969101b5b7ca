"""
Handlers package for swacli command processing.
"""

from .base_handler import BaseHandler
from .start_handler import StartHandler
from .help_handler import HelpHandler

__all__ = [
    'BaseHandler',
    'StartHandler',
    'HelpHandler',
]
