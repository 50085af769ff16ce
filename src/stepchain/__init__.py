"""stepchain.

Compose direct-style functions and callback-style steps into one fail-fast
pipeline:
- `ensure` / `guard` turn predicates into validating steps
- `asyncify` adapts direct-style functions to continuation style
- `compose` / `pipe` chain steps, short-circuiting on the first failure
"""

__version__ = "0.1.0"

from stepchain.config import StepchainSettings
from stepchain.core import (
    Continuation,
    ContinuationReusedError,
    Outcome,
    Step,
    StepchainError,
    StepFailure,
    asyncify,
    callbackify,
    compose,
    ensure,
    guard,
    pipe,
    run_step,
    settle,
)
from stepchain.logging import configure_from_settings, configure_logging

__all__ = [
    "__version__",
    "Continuation",
    "ContinuationReusedError",
    "Outcome",
    "Step",
    "StepFailure",
    "StepchainError",
    "StepchainSettings",
    "asyncify",
    "callbackify",
    "compose",
    "configure_from_settings",
    "configure_logging",
    "ensure",
    "guard",
    "pipe",
    "run_step",
    "settle",
]
