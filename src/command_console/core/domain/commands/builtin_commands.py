"""Factories for the built-in help, clear and exit commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from command_console.core.domain.command import Command

if TYPE_CHECKING:
    from command_console.core.domain.commands.command_registry import CommandRegistry
    from command_console.core.interfaces.console_interface import IConsole


def create_help_command(registry: CommandRegistry) -> Command:
    """List every registered command with its parameters."""

    def show_help(command: Command) -> None:
        console = registry.console
        console.write_line("Commands and Parameters:")
        # snapshot; a command may add or remove commands while help is listed
        for cmd in registry.commands:
            console.write_line(f"{cmd.name} - {cmd.description}")
            for parameter in cmd.parameters:
                marker = " * " if parameter.is_required else ""
                console.write_line(
                    f"\t{parameter.prompt}{marker} - {parameter.description}"
                )
        console.write_line()
        console.write_line("* Required parameter value.")

    return Command(description="Displays application command usage.", action=show_help)


def create_clear_command(console: IConsole) -> Command:
    def clear_console(command: Command) -> None:
        console.clear()

    return Command(description="Clears the console window.", action=clear_console)


def create_exit_command() -> Command:
    # Selecting exit ends the session loop; the action itself does nothing.
    return Command(description="Exits the application.")
