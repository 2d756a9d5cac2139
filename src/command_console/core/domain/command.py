"""
Command domain model.

A command is a named, user-invokable unit of work. It owns its parameters,
a guard deciding whether it can run in the current state, and the action
performed when it does run.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from command_console.core.common.exceptions import DuplicateNameError
from command_console.core.common.utils import resolve
from command_console.core.domain.parameter import Parameter

logger = logging.getLogger(__name__)

Guard = Callable[[], bool | Awaitable[bool]]
Action = Callable[["Command"], Any]


def always_executable() -> bool:
    """Default guard: the command can always run."""
    return True


def no_action(command: Command) -> None:
    """Default action: do nothing."""


@dataclass(eq=False)
class Command:
    """
    A named unit of work with guarded executability and owned parameters.

    ``name`` is assigned by the registry when the command is added.
    ``action`` receives the command itself so it can read parameter values
    through :meth:`get_parameter`.
    """

    description: str = ""
    can_execute: Guard = always_executable
    cannot_execute_message: str = ""
    action: Action = no_action
    name: str = field(default="", init=False)
    _parameters: dict[str, Parameter] = field(
        default_factory=dict, init=False, repr=False
    )

    @property
    def parameters(self) -> tuple[Parameter, ...]:
        """Parameters in registration order."""
        return tuple(self._parameters.values())

    def add_parameter(self, name: str, parameter: Parameter) -> Command:
        """
        Add a parameter to this command.

        Args:
            name: The parameter name, unique within this command
            parameter: The parameter to add

        Returns:
            This command, so additions can be chained

        Raises:
            DuplicateNameError: If a parameter with this name already exists
        """
        if name in self._parameters:
            raise DuplicateNameError(name)

        parameter.name = name
        self._parameters[name] = parameter
        return self

    def remove_parameter(self, name: str) -> Parameter | None:
        """Remove and return the named parameter, or None if it is absent."""
        return self._parameters.pop(name, None)

    def get_parameter(self, name: str) -> Parameter | None:
        """Return the named parameter, or None if it is absent."""
        return self._parameters.get(name)

    async def check_can_execute(self) -> bool:
        """Evaluate the guard."""
        return bool(await resolve(self.can_execute()))

    async def failed_parameters(self) -> list[Parameter]:
        """
        Validate every parameter and return the ones that failed.

        All parameters are evaluated, each exactly once, so every failure can
        be reported individually.
        """
        failed: list[Parameter] = []
        for parameter in self.parameters:
            if not await parameter.validate():
                failed.append(parameter)
        return failed

    async def validate(self) -> bool:
        """Return True only if all parameters pass validation."""
        return not await self.failed_parameters()

    async def execute(self) -> None:
        """Invoke the action with this command."""
        logger.debug("Executing command %s", self.name)
        await resolve(self.action(self))
