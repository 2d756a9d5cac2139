from command_console.core.domain.commands.command_registry import (
    BUILTIN_COMMAND_NAMES,
    CLEAR_COMMAND_NAME,
    EXIT_COMMAND_NAME,
    HELP_COMMAND_NAME,
    CommandRegistry,
)

__all__ = [
    "BUILTIN_COMMAND_NAMES",
    "CLEAR_COMMAND_NAME",
    "EXIT_COMMAND_NAME",
    "HELP_COMMAND_NAME",
    "CommandRegistry",
]
