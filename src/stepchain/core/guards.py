"""Predicate guards.

A guard is a direct-style step built from a predicate and a fixed failure
reason: it hands its input straight back when the predicate holds and raises
`StepFailure(reason)` when it does not.

    ensure_of_age = partial(ensure, lambda age: age > 17, "must be 18+")
    ensure_of_age(20)  # -> 20
    ensure_of_age(16)  # raises StepFailure("must be 18+")
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from .errors import StepFailure

T = TypeVar("T")


def ensure(predicate: Callable[[T], bool], failure: object, value: T) -> T:
    # A raising predicate propagates as-is; only a falsy result is a failure.
    if predicate(value):
        return value
    raise StepFailure(failure)


def guard(
    predicate: Callable[[T], bool], failure: object, *, name: str | None = None
) -> Callable[[T], T]:
    """Bind `ensure` to a predicate and failure reason.

    Equivalent to `functools.partial(ensure, predicate, failure)`, but the
    reason is validated up front and the guard gets a readable `__name__`.
    """

    if failure is None:
        raise ValueError("A guard needs a failure reason")

    def _guard(value: T) -> T:
        return ensure(predicate, failure, value)

    _guard.__name__ = name or f"ensure_{getattr(predicate, '__name__', 'predicate')}"
    _guard.__qualname__ = _guard.__name__
    return _guard
