"""Unit tests for predicate guards."""

from __future__ import annotations

from functools import partial

import pytest

from stepchain.core.errors import StepFailure
from stepchain.core.guards import ensure, guard


def _is_adult(age: int) -> bool:
    return age > 17


def test_ensure_returns_input_unchanged_when_predicate_holds() -> None:
    payload = {"name": "Ada"}
    assert ensure(lambda p: "name" in p, "needs a name", payload) is payload


def test_ensure_raises_the_exact_failure_reason() -> None:
    reason = {"code": 422, "field": "age"}
    with pytest.raises(StepFailure) as info:
        ensure(_is_adult, reason, 16)
    assert info.value.reason is reason


def test_partial_ensure_is_a_reusable_guard() -> None:
    ensure_of_age = partial(ensure, _is_adult, "must be 18+")

    assert ensure_of_age(20) == 20
    assert ensure_of_age(18) == 18
    with pytest.raises(StepFailure, match="must be 18\\+"):
        ensure_of_age(17)


def test_falsy_non_bool_predicate_result_is_a_failure() -> None:
    with pytest.raises(StepFailure):
        ensure(lambda s: s.strip(), "blank", "   ")


def test_raising_predicate_propagates_unchanged() -> None:
    boom = KeyError("hair_color")

    def predicate(_: object) -> bool:
        raise boom

    with pytest.raises(KeyError) as info:
        ensure(predicate, "should not appear", {})
    assert info.value is boom


def test_guard_names_itself_after_the_predicate() -> None:
    ensure_adult = guard(_is_adult, "must be 18+")
    assert ensure_adult.__name__ == "ensure__is_adult"
    assert ensure_adult(30) == 30

    named = guard(_is_adult, "must be 18+", name="ensure_of_age")
    assert named.__name__ == "ensure_of_age"


def test_guard_rejects_missing_failure_reason() -> None:
    with pytest.raises(ValueError):
        guard(_is_adult, None)


def test_step_failure_rejects_none_reason() -> None:
    with pytest.raises(ValueError):
        StepFailure(None)
