from __future__ import annotations

import inspect
from typing import Any


async def resolve(value: Any) -> Any:
    """
    Await a value if it is awaitable, otherwise return it unchanged.

    Guards, validators and actions may be plain callables or coroutine
    functions; callers pass the raw call result through here.

    Args:
        value: The result of invoking a strategy callable.

    Returns:
        The resolved value.
    """
    if inspect.isawaitable(value):
        return await value
    return value
