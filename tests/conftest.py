"""Test configuration and fixtures."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

import pytest

from stepchain.core.errors import StepFailure

STEPCHAIN_ENV_VARS = ("LOG_LEVEL", "STEPCHAIN_LOG_FORMAT", "STEPCHAIN_TRACE_STEPS")


class Recorder:
    """A continuation that records every call it receives.

    `await recorder.wait()` blocks until the next call arrives.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[object, Any]] = []
        self._delivered = asyncio.Event()

    def __call__(self, failure: object, value: Any = None) -> None:
        self.calls.append((failure, value))
        self._delivered.set()

    async def wait(self, timeout: float = 1.0) -> tuple[object, Any]:
        await asyncio.wait_for(self._delivered.wait(), timeout)
        self._delivered.clear()
        return self.calls[-1]


@pytest.fixture
def recorder() -> Recorder:
    """Provide a fresh recording continuation."""
    return Recorder()


@pytest.fixture
def clean_env(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Run in an empty directory with no stepchain variables set."""
    for name in STEPCHAIN_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _head(items: list[Any]) -> Any:
    if not items:
        raise StepFailure("Can't get head of empty array.")
    return items[0]


@pytest.fixture
def head() -> Callable[[list[Any]], Any]:
    """Provide a direct-style `head` that fails on an empty list."""
    return _head
