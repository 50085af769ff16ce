"""Adapters between direct-style, continuation-style and async/await steps.

Continuation-style steps take a trailing callback, `continuation(failure, value)`,
and call it exactly once. `None` marks the absent side.
"""

from __future__ import annotations

import asyncio
import functools
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from .errors import ContinuationReusedError
from .outcome import Outcome, settle

logger = logging.getLogger(__name__)

Continuation = Callable[[object, Any], None]

# Strong references to in-flight callbackify tasks.
_pending_tasks: set[asyncio.Task[None]] = set()


def step_name(f: Callable[..., Any]) -> str:
    return getattr(f, "__name__", None) or type(f).__name__


def asyncify(f: Callable[..., Any]) -> Callable[..., None]:
    """Adapt a direct-style function to continuation style.

    The returned step calls `f` once, synchronously, then schedules the
    continuation on the running event loop with `call_soon`. The continuation
    is never invoked inline, so adapted steps have the same timing as steps
    that really wait on I/O.

    A `StepFailure` is delivered as its reason; any other `Exception` is
    delivered as the exception object.
    """

    name = step_name(f)

    @functools.wraps(f)
    def step(*args: Any, **kwargs: Any) -> None:
        if not args or not callable(args[-1]):
            raise TypeError(f"{name}() expects a trailing continuation")
        *leading, continuation = args
        # Fails fast when there is no loop, before `f` has run.
        loop = asyncio.get_running_loop()

        outcome = settle(f, *leading, **kwargs)
        if not outcome.ok:
            logger.debug(
                "Step failed", extra={"step": name, "failure": repr(outcome.failure)}
            )
        loop.call_soon(continuation, *outcome.as_args())

    return step


def callbackify(fn: Callable[..., Awaitable[Any]]) -> Callable[..., None]:
    """Adapt an `async def` function to continuation style.

    The coroutine runs as a task on the running loop; its result or failure
    is delivered the same way `asyncify` delivers them.
    """

    name = step_name(fn)

    @functools.wraps(fn)
    def step(*args: Any, **kwargs: Any) -> None:
        if not args or not callable(args[-1]):
            raise TypeError(f"{name}() expects a trailing continuation")
        *leading, continuation = args
        loop = asyncio.get_running_loop()

        async def _run() -> None:
            try:
                value = await fn(*leading, **kwargs)
            except Exception as exc:
                outcome = Outcome.from_exception(exc)
                logger.debug(
                    "Step failed", extra={"step": name, "failure": repr(outcome.failure)}
                )
            else:
                outcome = Outcome.success(value)
            continuation(*outcome.as_args())

        task = loop.create_task(_run(), name=f"stepchain:{name}")
        _pending_tasks.add(task)
        task.add_done_callback(_pending_tasks.discard)

    return step


async def run_step(step: Callable[..., None], *args: Any, **kwargs: Any) -> Outcome:
    """Invoke a continuation-style step and await its single outcome.

    A step that raises before calling its continuation is treated as having
    failed with that exception.
    """

    loop = asyncio.get_running_loop()
    future: asyncio.Future[Outcome] = loop.create_future()

    def _deliver(failure: object, value: Any = None) -> None:
        if future.cancelled():
            return
        if future.done():
            raise ContinuationReusedError(f"{step_name(step)} called its continuation twice")
        if failure is not None:
            future.set_result(Outcome.failed(failure))
        else:
            future.set_result(Outcome.success(value))

    try:
        step(*args, _deliver, **kwargs)
    except ContinuationReusedError:
        raise
    except Exception as exc:
        if future.done():
            raise
        return Outcome.from_exception(exc)

    return await future
