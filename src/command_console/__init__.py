"""Interactive command-line session engine.

Register named commands with validated parameters on a ``CommandRegistry`` and
hand the registry to ``CommandProcessor`` (or ``run``) to drive the
prompt/collect/validate/execute loop until ``exit`` is selected.
"""

from command_console.core.common.exceptions import (
    CommandConsoleError,
    ConfigurationError,
    DuplicateNameError,
)
from command_console.core.config.app_config import AppConfig, load_config
from command_console.core.domain.command import Command
from command_console.core.domain.commands.command_registry import (
    CLEAR_COMMAND_NAME,
    EXIT_COMMAND_NAME,
    HELP_COMMAND_NAME,
    CommandRegistry,
)
from command_console.core.domain.parameter import Parameter
from command_console.core.services.command_processor import (
    CommandProcessor,
    run,
    run_session,
)
from command_console.core.services.terminal_console import TerminalConsole

__all__ = [
    "CLEAR_COMMAND_NAME",
    "EXIT_COMMAND_NAME",
    "HELP_COMMAND_NAME",
    "AppConfig",
    "Command",
    "CommandConsoleError",
    "CommandProcessor",
    "CommandRegistry",
    "ConfigurationError",
    "DuplicateNameError",
    "Parameter",
    "TerminalConsole",
    "load_config",
    "run",
    "run_session",
]
