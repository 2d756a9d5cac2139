"""
Registry for interactive commands.

The registry owns every command of a session, keyed by name, and always holds
the three built-in commands which cannot be removed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from command_console.core.common.exceptions import DuplicateNameError
from command_console.core.domain.commands.builtin_commands import (
    create_clear_command,
    create_exit_command,
    create_help_command,
)

if TYPE_CHECKING:
    from command_console.core.domain.command import Command
    from command_console.core.interfaces.console_interface import IConsole

logger = logging.getLogger(__name__)

HELP_COMMAND_NAME = "help"
CLEAR_COMMAND_NAME = "clear"
EXIT_COMMAND_NAME = "exit"

BUILTIN_COMMAND_NAMES = frozenset(
    {HELP_COMMAND_NAME, CLEAR_COMMAND_NAME, EXIT_COMMAND_NAME}
)


class CommandRegistry:
    """
    Registry of named commands for one session.

    Built-in commands print through ``console``, which is also the surface the
    session loop should use.
    """

    def __init__(self, console: IConsole) -> None:
        """Initialize the registry with the built-in commands."""
        self._console = console
        self._commands: dict[str, Command] = {}

        self.add_command(HELP_COMMAND_NAME, create_help_command(self))
        self.add_command(CLEAR_COMMAND_NAME, create_clear_command(console))
        self.add_command(EXIT_COMMAND_NAME, create_exit_command())

    @property
    def console(self) -> IConsole:
        return self._console

    @property
    def commands(self) -> tuple[Command, ...]:
        """Snapshot of the registered commands in insertion order."""
        return tuple(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    @staticmethod
    def is_builtin(name: str) -> bool:
        return name in BUILTIN_COMMAND_NAMES

    def add_command(self, name: str, command: Command) -> Command:
        """
        Register a command.

        Args:
            name: The unique name of the command
            command: The command to register

        Returns:
            The registered command, so parameters can be chained onto it

        Raises:
            DuplicateNameError: If the name is already registered
        """
        if name in self._commands:
            raise DuplicateNameError(name)

        command.name = name
        self._commands[name] = command
        logger.debug("Registered command: %s", name)
        return command

    def remove_command(self, name: str) -> Command | None:
        """
        Remove and return a command.

        Built-in commands are never removed.

        Returns:
            The removed command, or None if it is absent or built-in
        """
        if self.is_builtin(name):
            logger.debug("Refusing to remove built-in command: %s", name)
            return None
        return self._commands.pop(name, None)

    def get_command(self, name: str) -> Command | None:
        """Return the named command, or None if it is not registered."""
        return self._commands.get(name)
