from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from command_console.core.common.utils import resolve

logger = logging.getLogger(__name__)

Validator = Callable[[str | None], bool | Awaitable[bool]]


def always_valid(value: str | None) -> bool:
    """Default validator: every value passes."""
    return True


@dataclass(eq=False)
class Parameter:
    """
    A named input slot collected interactively before its command executes.

    ``name`` is assigned by the owning command when the parameter is added and
    must not be changed afterwards. ``is_required`` only annotates prompts and
    help output; enforcing it is up to ``validator``.
    """

    prompt: str = ""
    description: str = ""
    is_required: bool = True
    is_password: bool = False
    validation_failure_message: str = ""
    validator: Validator = always_valid
    value: str | None = None
    name: str = field(default="", init=False)

    async def validate(self) -> bool:
        """Run the validator against the current value.

        Setting ``value`` never validates; this is always an explicit step.
        """
        result = bool(await resolve(self.validator(self.value)))
        if not result:
            logger.debug("Parameter %s failed validation", self.name)
        return result
