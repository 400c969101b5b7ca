"""
Command-line helper utilities for swacli.

Provides argv flag lookup, one-shot process exit registration and
startup script command resolution.
"""

import atexit
import os
import signal
import sys
import threading
from typing import Callable, List, Optional, Union

from .logger import logger as default_logger

FlagValue = Union[str, bool, None]

PACKAGE_MANAGER_RUN_BINARIES = ('npm', 'yarn')
PACKAGE_MANAGER_EXEC_BINARIES = ('npx',)

# Dispositions replaced rather than chained when a cleanup handler is installed
_DEFAULT_DISPOSITIONS = (signal.SIG_DFL, signal.SIG_IGN, signal.default_int_handler, None)


def argv(flag: str, args: Optional[List[str]] = None) -> FlagValue:
    """
    Retrieve the value of a single flag from a list of command-line tokens.

    Usage:
        # ./server --port 4242
        port = argv('--port')

    Args:
        flag (str): The flag name to look up, e.g. '--port'
        args (list): Tokens to scan (defaults to sys.argv)

    Returns:
        str, bool or None:
        - '--key=value' or '--key value' returns the value as a string
        - '--key' followed by another flag (or nothing) returns True
        - '--key=' or a flag that is not present returns None
    """
    tokens = sys.argv if args is None else args

    for index, entry in enumerate(tokens):
        if not entry.startswith('--'):
            continue

        # ex: --key=value
        if '=' in entry:
            # ex: --key=a=b --> a
            key, value = entry.split('=')[:2]
            if flag == key.strip():
                value = value.strip()
                return value if value else None
            continue

        # ex: --key value, --key
        if flag == entry.strip():
            if index + 1 >= len(tokens):
                return True
            next_entry = tokens[index + 1].strip()
            if next_entry.startswith('--'):
                return True
            if next_entry:
                return next_entry

    return None


class ProcessExitRegistrar:
    """
    Run a cleanup callback at most once on SIGINT, SIGTERM or interpreter exit.

    The terminated guard is claimed with a non-blocking lock acquire before the
    callback runs, so repeated or re-entrant triggers never invoke it twice.
    """

    SIGNALS = (signal.SIGINT, signal.SIGTERM)

    def __init__(self, fn: Callable[[], None]):
        self.fn = fn
        self.terminated = False
        self._lock = threading.Lock()
        self._previous_handlers = {}

    def register(self) -> 'ProcessExitRegistrar':
        """Subscribe to the interrupt, terminate and normal-exit channels."""
        for signum in self.SIGNALS:
            self._previous_handlers[signum] = signal.getsignal(signum)
            signal.signal(signum, self._handle_signal)
        atexit.register(self.run)
        return self

    def run(self) -> bool:
        """
        Invoke the callback unless it has already run.

        Returns:
            bool: True if the callback was invoked by this call
        """
        # One-shot test-and-set: the lock is never released once taken
        if not self._lock.acquire(blocking=False):
            return False
        self.terminated = True
        self.fn()
        return True

    def _handle_signal(self, signum, frame):
        self.run()
        previous = self._previous_handlers.get(signum)
        if callable(previous) and previous not in _DEFAULT_DISPOSITIONS:
            previous(signum, frame)


def register_process_exit(fn: Callable[[], None]) -> ProcessExitRegistrar:
    """Register fn to run exactly once when the process terminates."""
    return ProcessExitRegistrar(fn).register()


def create_startup_script_command(startup_script: str, options, logger=None) -> Optional[str]:
    """
    Convert a startup script reference into a runnable command.

    Args:
        startup_script (str): 'npm:<script>', 'yarn:<script>', 'npx:<bin>' or a file path
        options: Configuration exposing an optional app_location base directory
        logger: Logger with an error(message, fatal) method

    Returns:
        str or None: Package manager command, absolute script path, or None
    """
    logger = logger or default_logger

    if ':' in startup_script:
        binary, *script_parts = startup_script.split(':')
        script = ':'.join(script_parts)
        if binary in PACKAGE_MANAGER_RUN_BINARIES:
            return f"{binary} run {script} --if-present"
        if binary in PACKAGE_MANAGER_EXEC_BINARIES:
            return f"{binary} {script}"
        return None

    if not os.path.isabs(startup_script):
        cwd = getattr(options, 'app_location', None) or os.getcwd()
        startup_script = os.path.abspath(os.path.join(cwd, startup_script))

    if os.path.exists(startup_script):
        return startup_script

    logger.error(f'Script file "{startup_script}" was not found.', fatal=True)
    return None
