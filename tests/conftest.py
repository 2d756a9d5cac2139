import pytest

from command_console.core.config.app_config import (
    AppConfig,
    AppIdentityConfig,
)
from command_console.core.domain.commands.command_registry import CommandRegistry
from command_console.core.testing import ScriptedConsole


@pytest.fixture
def console() -> ScriptedConsole:
    return ScriptedConsole()


@pytest.fixture
def registry(console: ScriptedConsole) -> CommandRegistry:
    return CommandRegistry(console)


@pytest.fixture
def app_config() -> AppConfig:
    """A config with a fixed identity so banner output is predictable."""
    return AppConfig(
        identity=AppIdentityConfig(
            title="Test App", version="1.2.3", company="Test Company"
        )
    )
