"""Testing helpers for applications built on the command console."""

from command_console.core.testing.scripted_console import ScriptedConsole

__all__ = ["ScriptedConsole"]
