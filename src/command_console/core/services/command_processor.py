"""
Interactive session loop.

Each turn reads one line, resolves it to a registered command, checks the
command's guard, collects its parameters, validates them and either executes
the command or reports the failures. Turns are strictly sequential and the
loop ends once the ``exit`` command has been selected.
"""

from __future__ import annotations

import asyncio
import datetime
from collections.abc import Callable
from typing import Any

from command_console.core.common.logging_utils import get_logger, redact
from command_console.core.common.utils import resolve
from command_console.core.config.app_config import AppConfig
from command_console.core.domain.command import Command
from command_console.core.domain.commands.command_registry import (
    EXIT_COMMAND_NAME,
    HELP_COMMAND_NAME,
    CommandRegistry,
)
from command_console.core.services.masked_input import read_masked

logger = get_logger(__name__)

INVALID_COMMAND_MESSAGE = (
    f"Invalid command.  Type '{HELP_COMMAND_NAME}' to list available commands.  "
    "Commands are case sensitive."
)
INVALID_PARAMETERS_MESSAGE = (
    "Invalid command parameter values detected.  Please try again."
)
EXIT_MESSAGE = "Exiting."

SessionHook = Callable[[], Any]


def no_op_hook() -> None:
    """Default startup and shutdown hook."""


class CommandProcessor:
    """Drives a session against a command registry.

    ``startup`` runs before the banner and ``shutdown`` after the exit message.
    Either may be a plain function or a coroutine function.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        config: AppConfig | None = None,
        *,
        startup: SessionHook = no_op_hook,
        shutdown: SessionHook = no_op_hook,
    ) -> None:
        self._registry = registry
        self._config = config or AppConfig()
        self._console = registry.console
        self._startup = startup
        self._shutdown = shutdown

    async def run(self) -> None:
        """Run turns until the exit command has been selected or input ends.

        The shutdown hook runs once the session has started, even when a turn
        raises. A failing startup hook ends the run before the banner.
        """
        await resolve(self._startup())
        try:
            await self._run_turns()
        finally:
            await resolve(self._shutdown())
            logger.debug("session_shutdown_complete")

    async def _run_turns(self) -> None:
        if self._config.console.show_banner:
            self._write_banner()

        exit_command = self._registry.get_command(EXIT_COMMAND_NAME)
        selected: Command | None = None
        logger.info("session_started", commands=len(self._registry))

        # exit's own guard, parameters and action still run before this check
        while selected is not exit_command:
            self._console.write(self._config.console.prompt)
            try:
                line = self._console.read_line()
            except EOFError:
                self._console.write_line()
                logger.info("session_input_closed")
                break

            if not line.strip():
                continue

            command = self._registry.get_command(line)
            if command is None:
                logger.debug("command_not_found", input=line)
                self._console.write_line(INVALID_COMMAND_MESSAGE)
                self._console.write_line()
                continue

            selected = command
            await self.process_command(command)

        self._console.write_line(EXIT_MESSAGE)
        logger.info("session_ended")

    async def process_command(self, command: Command) -> bool:
        """
        Run one turn for an already selected command.

        Any exception raised along the way is reported to the user and
        swallowed, so a misbehaving command never ends the session.

        Returns:
            True if the command was executed, False otherwise
        """
        log = logger.bind(command=command.name)
        try:
            if not await command.check_can_execute():
                log.debug("command_guard_failed")
                self._console.write_line(
                    "This command is not valid in the current state.  "
                    f"Reason: {command.cannot_execute_message}"
                )
                self._console.write_line()
                return False

            self._collect_parameters(command)

            failed = await command.failed_parameters()
            if failed:
                log.debug(
                    "command_validation_failed",
                    parameters=[parameter.name for parameter in failed],
                )
                self._console.write_line(INVALID_PARAMETERS_MESSAGE)
                for parameter in failed:
                    self._console.write_line(
                        f"* {parameter.validation_failure_message}"
                    )
                self._console.write_line()
                return False

            await command.execute()
            self._console.write_line()
            log.debug("command_executed")
            return True
        except Exception as e:
            log.debug("command_failed", exc_info=True)
            self._console.write_line(f"Unexpected error.  Details: {e}")
            self._console.write_line()
            return False

    def _collect_parameters(self, command: Command) -> None:
        for parameter in command.parameters:
            marker = "*" if parameter.is_required else ""
            self._console.write(f"{parameter.prompt}{marker}: ")
            if parameter.is_password:
                parameter.value = read_masked(
                    self._console, self._config.console.password_mask
                )
                shown = redact(parameter.value)
            else:
                parameter.value = self._console.read_line()
                shown = parameter.value
            logger.debug(
                "parameter_collected",
                command=command.name,
                parameter=parameter.name,
                value=shown,
            )

    def _write_banner(self) -> None:
        identity = self._config.identity
        year = datetime.date.today().year
        self._console.write_line(
            f"{identity.title} Command Line Interface (CLI) Version {identity.version}"
        )
        self._console.write_line(
            f"Copyright © {year} by {identity.company}.  All rights reserved."
        )
        self._console.write_line()
        self._console.write_line(
            f"Type '{HELP_COMMAND_NAME}' to list available commands.  "
            "Commands are case sensitive."
        )
        self._console.write_line()


async def run_session(
    registry: CommandRegistry,
    config: AppConfig | None = None,
    *,
    startup: SessionHook = no_op_hook,
    shutdown: SessionHook = no_op_hook,
) -> None:
    """Run a session on ``registry`` until exit is selected."""
    await CommandProcessor(
        registry, config, startup=startup, shutdown=shutdown
    ).run()


def run(
    registry: CommandRegistry,
    config: AppConfig | None = None,
    *,
    startup: SessionHook = no_op_hook,
    shutdown: SessionHook = no_op_hook,
) -> None:
    """Blocking entry point for applications without an event loop."""
    asyncio.run(run_session(registry, config, startup=startup, shutdown=shutdown))
