import pytest

from command_console.core.common.exceptions import DuplicateNameError
from command_console.core.domain.command import Command
from command_console.core.domain.parameter import Parameter


def failing(message: str) -> Parameter:
    return Parameter(validation_failure_message=message, validator=lambda value: False)


@pytest.mark.asyncio
async def test_command_defaults():
    command = Command()

    assert command.description == ""
    assert command.cannot_execute_message == ""
    assert command.parameters == ()
    assert await command.check_can_execute() is True
    assert await command.validate() is True
    assert await command.execute() is None


def test_add_get_remove_parameters():
    first, second = Parameter(), Parameter()
    command = Command().add_parameter("param1", first).add_parameter("param2", second)

    assert command.parameters == (first, second)
    assert first.name == "param1"
    assert command.get_parameter("param2") is second
    assert command.get_parameter("missing") is None

    assert command.remove_parameter("param1") is first
    assert command.remove_parameter("param1") is None
    assert command.parameters == (second,)


def test_add_duplicate_parameter_raises():
    original = Parameter(prompt="original")
    command = Command().add_parameter("name", original)

    with pytest.raises(DuplicateNameError) as exc_info:
        command.add_parameter("name", Parameter(prompt="other"))

    assert exc_info.value.name == "name"
    assert "'name' already exists" in str(exc_info.value)
    assert command.get_parameter("name") is original
    assert len(command.parameters) == 1


@pytest.mark.asyncio
async def test_execute_passes_command_to_action():
    received = []
    command = Command(action=received.append)

    await command.execute()

    assert received == [command]


@pytest.mark.asyncio
async def test_async_action_and_guard_are_awaited():
    events = []

    async def guard():
        return False

    async def action(command):
        events.append(command.name)

    command = Command(can_execute=guard, action=action)
    command.name = "test"

    assert await command.check_can_execute() is False
    await command.execute()
    assert events == ["test"]


@pytest.mark.asyncio
async def test_validate_fails_when_any_parameter_fails():
    command = (
        Command()
        .add_parameter("ok", Parameter())
        .add_parameter("bad", failing("Bad value."))
    )

    assert await command.validate() is False
    assert command.get_parameter("bad").validation_failure_message == "Bad value."


@pytest.mark.asyncio
async def test_failed_parameters_evaluates_every_parameter_once():
    calls = []

    def tracking(result):
        def validator(value):
            calls.append(value)
            return result

        return validator

    first = Parameter(validator=tracking(False))
    second = Parameter(validator=tracking(True))
    third = Parameter(validator=tracking(False))
    first.value, second.value, third.value = "a", "b", "c"
    command = (
        Command()
        .add_parameter("first", first)
        .add_parameter("second", second)
        .add_parameter("third", third)
    )

    failed = await command.failed_parameters()

    assert failed == [first, third]
    assert sorted(calls) == ["a", "b", "c"]
