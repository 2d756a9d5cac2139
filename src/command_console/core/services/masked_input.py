"""Masked keystroke entry for password parameters."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from command_console.core.interfaces.console_interface import IConsole

ENTER_KEY = "\r"
BACKSPACE_KEY = "\b"
KILL_LINE_KEY = "\x7f"
# NUL, ESC, TAB and LF are swallowed without echo
FILTERED_KEYS = frozenset({"\x00", "\x1b", "\t", "\n"})

ERASE_SEQUENCE = "\b \b"


def read_masked(console: IConsole, mask: str = "*") -> str:
    """
    Read keystrokes until Enter, echoing ``mask`` for each accepted character.

    Backspace drops the last character, the kill-line key drops them all, and
    each dropped character is erased from the display.

    Args:
        console: The console supplying raw keystrokes
        mask: The character echoed in place of each typed character

    Returns:
        The entered text, in typing order
    """
    typed: list[str] = []

    while (key := console.read_key()) != ENTER_KEY:
        if key == BACKSPACE_KEY:
            if typed:
                typed.pop()
                console.write(ERASE_SEQUENCE)
        elif key == KILL_LINE_KEY:
            while typed:
                typed.pop()
                console.write(ERASE_SEQUENCE)
        elif key in FILTERED_KEYS:
            continue
        else:
            typed.append(key)
            console.write(mask)

    console.write_line()
    return "".join(typed)
