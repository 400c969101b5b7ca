"""
Startup script command handlers for swacli.

This module contains handlers that resolve startup script references and
launch the resulting command.
"""

import json
import os
import shlex
import subprocess

from .base_handler import BaseHandler
from ..logger import logger
from ..utils import create_startup_script_command, register_process_exit


class StartHandler(BaseHandler):
    """Handler for start and resolve commands."""

    def handle_start(self):
        """Handle start command - resolve the configured startup script and run it."""
        startup_script = self.config.run
        if not startup_script:
            logger.info("No startup script configured, nothing to start.")
            return 0

        command = create_startup_script_command(startup_script, self.config)
        if command is None:
            self._print_unresolved(startup_script)
            return 1

        if getattr(self.args, 'dry_run', False):
            print(command)
            return 0

        cwd = self.config.app_location or os.getcwd()
        if not os.path.isdir(cwd):
            self._print_error(f"App location \"{cwd}\" is not a directory.", title="Configuration Error")
            return 1

        shell_command = command if ':' in startup_script else shlex.quote(command)
        logger.info(f"Running startup script: {shell_command}")
        logger.silly(f"Working directory: {cwd}")

        # Registered before Popen; a signal in between is caught by the terminated check
        processes = []
        registrar = register_process_exit(lambda: self._terminate(processes))
        process = subprocess.Popen(shell_command, shell=True, cwd=cwd)
        processes.append(process)
        if registrar.terminated:
            self._terminate(processes)

        returncode = process.wait()
        logger.silly(f"Startup script exited with code {returncode}")
        return returncode

    def handle_resolve(self):
        """Handle resolve command - print the command a startup script maps to."""
        startup_script = self.args.startup_script
        command = create_startup_script_command(startup_script, self.config)
        if command is None:
            self._print_unresolved(startup_script)
            return 1

        if getattr(self.args, 'format', 'text') == 'json':
            print(json.dumps({'startup_script': startup_script, 'command': command}, indent=2))
        else:
            print(command)
        return 0

    def _print_unresolved(self, startup_script):
        self._print_error(
            f"Unable to resolve startup script \"{startup_script}\".\n"
            "Expected npm:<script>, yarn:<script>, npx:<bin> or a file path.",
            title="Startup Script Error"
        )

    @staticmethod
    def _terminate(processes):
        for process in processes:
            if process.poll() is None:
                logger.silly(f"Terminating startup script (pid {process.pid})")
                process.terminate()
