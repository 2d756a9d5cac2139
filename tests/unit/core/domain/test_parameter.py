import pytest

from command_console.core.domain.parameter import Parameter


def test_parameter_defaults():
    parameter = Parameter()

    assert parameter.name == ""
    assert parameter.is_required is True
    assert parameter.is_password is False
    assert parameter.value is None


@pytest.mark.asyncio
async def test_validate_without_validator_passes():
    assert await Parameter().validate() is True


@pytest.mark.asyncio
async def test_validate_passes_current_value_to_validator():
    seen = []
    parameter = Parameter(validator=lambda value: seen.append(value) or True)
    parameter.value = "abc"

    assert await parameter.validate() is True
    assert seen == ["abc"]


@pytest.mark.asyncio
async def test_setting_value_does_not_validate():
    calls = []
    parameter = Parameter(validator=lambda value: calls.append(value) or False)

    parameter.value = "x"

    assert calls == []
    assert await parameter.validate() is False
    assert calls == ["x"]


@pytest.mark.asyncio
async def test_async_validator_is_awaited():
    async def not_blank(value):
        return bool(value and value.strip())

    parameter = Parameter(validator=not_blank)
    parameter.value = "   "
    assert await parameter.validate() is False

    parameter.value = "hello"
    assert await parameter.validate() is True
