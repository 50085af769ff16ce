"""Core step adapters and composition."""

from stepchain.core.adapters import Continuation, asyncify, callbackify, run_step
from stepchain.core.compose import Step, compose, pipe
from stepchain.core.errors import ContinuationReusedError, StepchainError, StepFailure
from stepchain.core.guards import ensure, guard
from stepchain.core.outcome import Outcome, settle

__all__ = [
    "Continuation",
    "ContinuationReusedError",
    "Outcome",
    "Step",
    "StepFailure",
    "StepchainError",
    "asyncify",
    "callbackify",
    "compose",
    "ensure",
    "guard",
    "pipe",
    "run_step",
    "settle",
]
