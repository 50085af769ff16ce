from __future__ import annotations


class StepchainError(Exception):
    pass


class StepFailure(StepchainError):
    """Raised by a direct-style step to signal a failure.

    The `reason` is delivered verbatim as the first continuation argument once
    the step is adapted. `None` is reserved for "no failure" and is rejected.
    """

    def __init__(self, reason: object) -> None:
        if reason is None:
            raise ValueError("A failure reason must not be None")
        super().__init__(reason)
        self.reason = reason

    def __str__(self) -> str:
        return str(self.reason)


class ContinuationReusedError(StepchainError):
    """A step invoked its continuation more than once."""
