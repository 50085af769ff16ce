"""Fail-fast composition of continuation-style steps.

`pipe(a, b, c)` runs `a`, then `b` with `a`'s value, then `c`. `compose(c, b, a)`
builds the same workflow written right-to-left. The first failure goes
straight to the final continuation and no later step runs.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from .adapters import Continuation, asyncify, step_name
from .errors import ContinuationReusedError
from .outcome import Outcome

logger = logging.getLogger(__name__)

Step = Callable[[Any, Continuation], None]


def _identity(value: Any) -> Any:
    return value


class _StepContinuation:
    """The continuation handed to one step of a running chain.

    A call made while the step is still on the stack is parked in `inline` and
    picked up by the chain loop; a later call resumes the chain from here.
    """

    __slots__ = ("name", "resume", "called", "running", "inline")

    def __init__(self, name: str, resume: Continuation) -> None:
        self.name = name
        self.resume = resume
        self.called = False
        self.running = True
        self.inline: tuple[object, Any] | None = None

    def __call__(self, failure: object = None, value: Any = None) -> None:
        if self.called:
            raise ContinuationReusedError(f"{self.name} called its continuation twice")
        self.called = True
        if self.running:
            self.inline = (failure, value)
        else:
            self.resume(failure, value)


def _run_chain(steps: Sequence[Step], value: Any, final: Continuation, workflow: str) -> None:
    position = 0

    def _advance(failure: object, result: Any) -> None:
        nonlocal position
        # Loops while steps complete inline so long synchronous chains keep a flat stack.
        while True:
            if failure is not None:
                logger.debug(
                    "Workflow short-circuited",
                    extra={
                        "workflow": workflow,
                        "step_index": position - 1,
                        "skipped": len(steps) - position,
                    },
                )
                final(failure, None)
                return
            if position == len(steps):
                logger.debug("Workflow completed", extra={"workflow": workflow})
                final(None, result)
                return

            step = steps[position]
            position += 1
            name = step_name(step)
            logger.debug(
                "Running step",
                extra={"workflow": workflow, "step": name, "step_index": position - 1},
            )

            continuation = _StepContinuation(name, _advance)
            try:
                step(result, continuation)
            except ContinuationReusedError:
                raise
            except Exception as exc:
                if continuation.called:
                    raise
                continuation.called = True
                continuation.inline = Outcome.from_exception(exc).as_args()
            finally:
                continuation.running = False

            if continuation.inline is None:
                return
            failure, result = continuation.inline

    _advance(None, value)


def pipe(*steps: Step, name: str | None = None) -> Step:
    """Chain steps in declared order into a single continuation-style step."""

    chain: tuple[Step, ...] = steps or (asyncify(_identity),)
    workflow_name = name or "+".join(step_name(s) for s in chain)

    def workflow(value: Any, continuation: Continuation) -> None:
        _run_chain(chain, value, continuation, workflow_name)

    workflow.__name__ = workflow_name
    workflow.__qualname__ = workflow_name
    return workflow


def compose(*steps: Step, name: str | None = None) -> Step:
    """Chain steps right-to-left: the last step receives the raw input."""

    return pipe(*reversed(steps), name=name)
