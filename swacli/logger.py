"""
swacli - Logging Infrastructure Module

Rich console logging plus an optional plain file log, and the SwaLogger
facade used across the CLI (info/warn/silly/error with a fatal flag).
"""

import logging
import os
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

LOGGER_NAME = "swacli"

console = Console(
    theme=Theme({
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "silly": "dim magenta"
    }),
    highlight=False,
    stderr=True
)


def is_debug_env() -> bool:
    """Check the SWA_CLI_DEBUG environment variable."""
    return os.environ.get('SWA_CLI_DEBUG', '').lower() in ('true', '1', 'yes', 'silly')


class SwaLogger:
    """Thin facade over the swacli stdlib logger."""

    def __init__(self, name: str = LOGGER_NAME):
        self._log = logging.getLogger(name)

    def info(self, message: str) -> None:
        self._log.info(message)

    def warn(self, message: str) -> None:
        self._log.warning(message)

    def silly(self, message: str) -> None:
        """Debug-level detail, only visible with --verbose or SWA_CLI_DEBUG."""
        self._log.debug(message)

    def error(self, message: str, fatal: bool = False) -> None:
        """
        Log an error message.

        Args:
            message (str): The message to log
            fatal (bool): Terminate the process with exit status 1 after logging
        """
        self._log.error(message)
        if fatal:
            sys.exit(1)


logger = SwaLogger()


def setup_logging(verbose: bool = False, log_file_path: Optional[str] = None) -> Console:
    """
    Set up logging: Rich console handler, plus a standard file handler if requested.

    Returns:
        Console: The Rich console used by the console handler
    """
    console_handler = RichHandler(
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=False,
        markup=False,
        keywords=[]
    )
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    handlers = [console_handler]

    if log_file_path:
        file_handler = logging.FileHandler(log_file_path)
        file_handler.setFormatter(
            logging.Formatter(
                fmt='%(asctime)s %(levelname)-8s : %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.DEBUG if (verbose or is_debug_env()) else logging.INFO,
        handlers=handlers,
        force=True
    )

    return console
