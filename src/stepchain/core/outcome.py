from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .errors import StepFailure


@dataclass(frozen=True, slots=True)
class Outcome:
    """The result of a single step: a failure or a value, never both.

    `None` marks the absent side, which is also what a continuation receives.
    """

    failure: object = None
    value: Any = None

    def __post_init__(self) -> None:
        if self.failure is not None and self.value is not None:
            raise ValueError("An outcome cannot carry both a failure and a value")

    @property
    def ok(self) -> bool:
        return self.failure is None

    @staticmethod
    def success(value: Any) -> Outcome:
        return Outcome(failure=None, value=value)

    @staticmethod
    def failed(reason: object) -> Outcome:
        if reason is None:
            raise ValueError("A failure reason must not be None")
        return Outcome(failure=reason, value=None)

    @staticmethod
    def from_exception(exc: Exception) -> Outcome:
        """Map a raised exception to the failure it signals.

        `StepFailure` unwraps to its reason; anything else is the failure itself.
        """

        if isinstance(exc, StepFailure):
            return Outcome.failed(exc.reason)
        return Outcome.failed(exc)

    def as_args(self) -> tuple[object, Any]:
        """Arguments for a continuation call, `(failure, value)`."""

        return (self.failure, self.value)


def settle(f: Callable[..., Any], *args: Any, **kwargs: Any) -> Outcome:
    """Call a direct-style function once and capture how it completed."""

    try:
        value = f(*args, **kwargs)
    except Exception as exc:
        return Outcome.from_exception(exc)
    return Outcome.success(value)
