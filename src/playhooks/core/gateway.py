"""Execution gateway: runs one configured command and logs the outcome.

Failures never reach the caller. The event source that triggered the
dispatch always gets control back, whatever the external command does.
"""

from __future__ import annotations

import logging
from typing import Mapping

from .config_model import ShellEventsConfig
from .ports import ProcessLauncher

logger = logging.getLogger(__name__)

BASH = "/bin/bash"


class ExecutionGateway:
    """Spawns a process per command and waits for it on the calling thread."""

    def __init__(self, config: ShellEventsConfig, launcher: ProcessLauncher | None = None):
        if launcher is None:
            from ..adapters.process_launcher import SubprocessLauncher

            launcher = SubprocessLauncher()
        self._config = config
        self._launcher = launcher

    @property
    def config(self) -> ShellEventsConfig:
        return self._config

    def build_argv(self, command: str) -> list[str]:
        """Turn a command string into the argv to launch.

        With ``execute_with_bash`` the trimmed command is a single script
        argument to bash. Otherwise it is split on whitespace, with no
        quoting rules and no shell expansion.
        """
        command = command.strip()
        if self._config.execute_with_bash:
            return [BASH, "-c", command]
        return command.split()

    def execute(self, command: str | None, env: Mapping[str, str] | None = None) -> None:
        """Run ``command`` with ``env`` added to the environment, if enabled."""
        if not self._config.enabled:
            return
        if command is None or not command.strip():
            return

        argv = self.build_argv(command)
        try:
            process = self._launcher.launch(argv, dict(env or {}))
            exit_code = process.wait()
        except Exception:
            logger.exception("Failed executing command: %s", command)
            return

        if exit_code == 0:
            logger.debug("Executed shell command: %s -> %s", command, exit_code)
        else:
            logger.warning("Executed shell command: %s -> %s", command, exit_code)
