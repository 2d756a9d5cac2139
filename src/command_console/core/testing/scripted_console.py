from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from command_console.core.interfaces.console_interface import IConsole


class ScriptedConsole(IConsole):
    """
    In-memory console fed from pre-scripted input.

    Lines and keystrokes are consumed in order; once a queue is empty the
    next read raises ``EOFError``. Everything written is kept in ``output``.
    """

    def __init__(
        self, lines: Iterable[str] = (), keys: Iterable[str] = ()
    ) -> None:
        self._lines: deque[str] = deque(lines)
        self._keys: deque[str] = deque(keys)
        self.output: list[str] = []
        self.clear_count = 0

    def feed_lines(self, *lines: str) -> None:
        self._lines.extend(lines)

    def feed_keys(self, keys: Iterable[str]) -> None:
        """Queue keystrokes; a string queues one key per character."""
        self._keys.extend(keys)

    def write(self, text: str) -> None:
        self.output.append(text)

    def write_line(self, text: str = "") -> None:
        self.output.append(text + "\n")

    def read_line(self) -> str:
        if not self._lines:
            raise EOFError("No scripted input left")
        return self._lines.popleft()

    def read_key(self) -> str:
        if not self._keys:
            raise EOFError("No scripted keys left")
        return self._keys.popleft()

    def clear(self) -> None:
        self.clear_count += 1
        self.output.clear()

    @property
    def text(self) -> str:
        """All output written so far as one string."""
        return "".join(self.output)

    @property
    def lines(self) -> list[str]:
        """Output split into display lines."""
        return self.text.splitlines()
