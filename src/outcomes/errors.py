"""Exception hierarchy for outcomes."""

from __future__ import annotations

from typing import Any


class OutcomesError(Exception):
    """Base exception for all outcomes errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(OutcomesError):
    """Settings resolution or validation failed."""


class MissingValueError(OutcomesError):
    """A value was absent where an outcome expected one.

    Default failure payload for ``of()`` and ``of_lazy()`` when the caller
    supplies no error factory.
    """


class UnwrapError(OutcomesError):
    """``get()`` was called on a Failure whose payload is not an exception.

    The original payload is kept on ``error`` so callers can still inspect it.
    """

    def __init__(self, error: Any, *, hint: str | None = None) -> None:
        super().__init__(str(error), hint=hint)
        self.error = error


class IncompleteTupleError(OutcomesError):
    """Values were requested from a tuple with a failed or skipped slot."""

    def __init__(
        self, message: str, *, index: int, hint: str | None = None
    ) -> None:
        super().__init__(message, hint=hint)
        self.index = index
