"""Unit tests for structured logging setup."""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Iterator

import pytest

from stepchain.config import StepchainSettings
from stepchain.logging import JsonFormatter, configure_from_settings, configure_logging


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    library_level = logging.getLogger("stepchain").level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
    logging.getLogger("stepchain").setLevel(library_level)


def test_json_formatter_includes_extra_fields() -> None:
    record = logging.LogRecord(
        name="stepchain.core.compose",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=1,
        msg="Running step",
        args=(),
        exc_info=None,
    )
    record.step = "ensure_of_age"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "DEBUG"
    assert payload["logger"] == "stepchain.core.compose"
    assert payload["message"] == "Running step"
    assert payload["extra"] == {"step": "ensure_of_age"}


def test_configure_logging_writes_json_lines() -> None:
    stream = io.StringIO()
    configure_logging("info", stream=stream)

    logging.getLogger("stepchain.test").info("hello", extra={"workflow": "w"})

    line = json.loads(stream.getvalue().strip())
    assert line["message"] == "hello"
    assert line["extra"] == {"workflow": "w"}


def test_trace_steps_enables_library_debug() -> None:
    stream = io.StringIO()
    configure_logging("WARNING", fmt="plain", trace_steps=True, stream=stream)

    logging.getLogger("stepchain.core.compose").debug("Running step")
    logging.getLogger("elsewhere").debug("quiet")

    output = stream.getvalue()
    assert "Running step" in output
    assert "quiet" not in output


def test_configure_from_settings_applies_level(clean_env, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "ERROR")

    settings = configure_from_settings()

    assert isinstance(settings, StepchainSettings)
    assert logging.getLogger().level == logging.ERROR
    assert logging.getLogger("stepchain").level == logging.NOTSET
