"""outcomes: success/failure values without exception-based control flow.

Public API:
    - Outcome, Success, Failure: the result type and its two cases
    - of, of_success, of_failure, of_lazy, of_attempt: factories
    - OutcomeTuple2/3/4, OutcomeList: short-circuiting groupings
    - Settings, resolve_settings: configuration
"""

from __future__ import annotations

import logging

from outcomes.config import Settings, resolve_settings
from outcomes.errors import (
    ConfigurationError,
    IncompleteTupleError,
    MissingValueError,
    OutcomesError,
    UnwrapError,
)
from outcomes.outcome import (
    Failure,
    Outcome,
    Success,
    of,
    of_attempt,
    of_failure,
    of_lazy,
    of_success,
)
from outcomes.tuples import OutcomeList, OutcomeTuple2, OutcomeTuple3, OutcomeTuple4

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("outcomes-lib")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("outcomes").addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "Failure",
    "IncompleteTupleError",
    "MissingValueError",
    "Outcome",
    "OutcomeList",
    "OutcomeTuple2",
    "OutcomeTuple3",
    "OutcomeTuple4",
    "OutcomesError",
    "Settings",
    "Success",
    "UnwrapError",
    "of",
    "of_attempt",
    "of_failure",
    "of_lazy",
    "of_success",
    "resolve_settings",
]
