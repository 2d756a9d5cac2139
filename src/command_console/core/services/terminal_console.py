"""Console surface backed by the process terminal."""

from __future__ import annotations

import codecs
import os
import sys
from typing import TextIO

from command_console.core.interfaces.console_interface import IConsole
from command_console.core.services.masked_input import BACKSPACE_KEY, KILL_LINE_KEY

CTRL_C = "\x03"
CLEAR_SEQUENCE = "\x1b[2J\x1b[H"


class TerminalConsole(IConsole):
    """IConsole over stdin/stdout with raw single-key reads."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout

    def write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def write_line(self, text: str = "") -> None:
        self.write(text + "\n")

    def read_line(self) -> str:
        line = self._stdin.readline()
        if not line:
            raise EOFError("End of input")
        return line.rstrip("\r\n")

    def read_key(self) -> str:
        if os.name == "nt":
            import msvcrt

            key = msvcrt.getwch()
        elif self._stdin.isatty():
            key = self._read_posix_key()
        else:
            # Piped input has no raw mode; keys arrive as buffered characters
            key = self._stdin.read(1)
            if not key:
                raise EOFError("End of input")
            if key == "\n":
                key = "\r"

        if key == CTRL_C:
            raise KeyboardInterrupt
        return key

    def _read_posix_key(self) -> str:
        """Read one key in raw mode straight from the descriptor.

        The text layer of stdin would hold back and translate ``\\r``, so
        bytes are read with ``os.read`` and decoded here. The terminal's own
        erase and kill characters are mapped to the backspace and kill-line
        keys.
        """
        import termios
        import tty

        fd = self._stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        control_chars = old_settings[6]
        # a NUL control character means the function is disabled
        translations = {
            char: key
            for char, key in (
                (control_chars[termios.VERASE], BACKSPACE_KEY),
                (control_chars[termios.VKILL], KILL_LINE_KEY),
            )
            if char != b"\x00"
        }
        decoder = codecs.getincrementaldecoder(
            getattr(self._stdin, "encoding", None) or "utf-8"
        )(errors="replace")

        try:
            tty.setraw(fd)
            key = ""
            while not key:
                data = os.read(fd, 1)
                if not data:
                    raise EOFError("End of input")
                pending, _ = decoder.getstate()
                if not pending and data in translations:
                    return translations[data]
                key = decoder.decode(data)
            return key
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    def clear(self) -> None:
        if os.name == "nt":
            os.system("cls")
        else:
            self.write(CLEAR_SEQUENCE)
