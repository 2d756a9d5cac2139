import logging
from pathlib import Path

import pytest

from command_console.core.common.logging_utils import (
    EnvironmentTaggingFormatter,
    configure_logging,
    get_logger,
    redact,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, filters, level = list(root.handlers), list(root.filters), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.filters[:] = filters
    root.setLevel(level)


@pytest.mark.parametrize(
    ("value", "kwargs", "expected"),
    [
        ("hunter2", {}, "***"),
        ("", {}, ""),
        (None, {}, None),
        ("secret", {"mask": "#"}, "#"),
        ("abcdefgh", {}, "***"),
    ],
)
def test_redact(value, kwargs, expected):
    assert redact(value, **kwargs) == expected


def test_formatter_tags_records_as_test():
    formatter = EnvironmentTaggingFormatter(fmt="[%(env_tag)s] %(message)s")
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello", None, None)

    assert formatter.format(record) == "[test] hello"


def test_configure_logging_writes_structured_events_to_file(
    tmp_path: Path, restore_root_logger
):
    log_file = tmp_path / "session.log"

    configure_logging(level=logging.DEBUG, log_file=str(log_file))
    get_logger("command_console.tests").info("command_executed", command="speak")
    for handler in logging.getLogger().handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "[test]" in content
    assert "event='command_executed'" in content
    assert "command='speak'" in content
