"""
Console interface.

The session engine talks to the user exclusively through this surface, so
any terminal, test double or remote transport can host a session.
"""

from __future__ import annotations

import abc


class IConsole(abc.ABC):
    """Line-oriented display surface with raw keystroke input."""

    @abc.abstractmethod
    def write(self, text: str) -> None:
        """Write text without a trailing newline."""

    @abc.abstractmethod
    def write_line(self, text: str = "") -> None:
        """Write text followed by a newline."""

    @abc.abstractmethod
    def read_line(self) -> str:
        """Read one line of input, without the trailing newline.

        Raises:
            EOFError: If the input source is exhausted
        """

    @abc.abstractmethod
    def read_key(self) -> str:
        """Read a single keypress without echoing it.

        Returns:
            The character produced by the key

        Raises:
            EOFError: If the input source is exhausted
        """

    @abc.abstractmethod
    def clear(self) -> None:
        """Clear the display."""
