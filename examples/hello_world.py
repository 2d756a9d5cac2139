"""
Minimal interactive application.

Registers a ``speak`` command that echoes its phrase parameter, then runs the
session loop on the process terminal until ``exit`` is entered.

    CONSOLE_APP_TITLE="Hello World" python examples/hello_world.py
"""

import logging
import sys

from command_console import (
    Command,
    CommandRegistry,
    Parameter,
    TerminalConsole,
    load_config,
    run,
)
from command_console.core.common.logging_utils import configure_logging


def build_registry(console: TerminalConsole) -> CommandRegistry:
    registry = CommandRegistry(console)

    def speak(command: Command) -> None:
        console.write_line(command.get_parameter("phrase").value)

    registry.add_command(
        "speak",
        Command(
            description="Outputs the phrase parameter to the console window.",
            action=speak,
        ),
    ).add_parameter(
        "phrase",
        Parameter(
            prompt="Phrase",
            description="The phrase to output to the console window.",
            validation_failure_message="Phrase cannot be null or whitespace.",
            validator=lambda value: bool(value and value.strip()),
        ),
    )
    return registry


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    config = load_config(argv[0] if argv else None)
    configure_logging(
        level=getattr(logging, config.logging.level.value),
        log_file=config.logging.log_file,
    )

    run(build_registry(TerminalConsole()), config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
