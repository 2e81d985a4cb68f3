# domain/exceptions.py
from __future__ import annotations

from typing import Any


class StepError(Exception):
    """Base class for failures a step reports back to its driver."""


class MissingPreconditionError(StepError):
    def __init__(self, slot: str):
        self.slot = slot
        super().__init__(
            f"no {slot} in the scenario context; a step that sets the {slot} must run first"
        )


class RequestConstructionError(StepError):
    pass


class AssertionMismatchError(StepError, AssertionError):
    def __init__(self, subject: str, expected: Any, actual: Any):
        self.subject = subject
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {subject}: {expected!r} but {actual!r} given")


class ValidationError(Exception):
    pass
