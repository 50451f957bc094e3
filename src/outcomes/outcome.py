"""Outcome type for explicit, exception-free error handling.

An ``Outcome`` is either a ``Success`` holding a value or a ``Failure``
holding an error, never both and never neither. Failures are ordinary data:
they flow through ``fold``/``map``/``bind``/``map_error``/``bind_error``
untouched and only raise again at ``get()``.

Only ``of_attempt()`` catches exceptions. Every other combinator lets
exceptions raised by its callbacks propagate to the caller.

The naming of the inspection helpers (``success``, ``fail``, ``always``,
``then``) follows promise-style APIs, but everything here is synchronous:
callbacks run inline before the combinator returns.
"""

from __future__ import annotations

import abc
import dataclasses
import logging
from typing import TYPE_CHECKING, Any, Never

from outcomes.config import effective_settings
from outcomes.errors import MissingValueError, UnwrapError
from outcomes.tuples import OutcomeTuple2

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

logger = logging.getLogger(__name__)


class Outcome[V, E](abc.ABC):
    """Base of the closed ``Success | Failure`` hierarchy.

    Do not subclass; construct through ``Success``/``Failure`` or the
    module-level factories.
    """

    __slots__ = ()

    # --- Tag predicates ---

    @property
    def size(self) -> int:
        """Number of outcomes held; always 1."""
        return 1

    def is_success(self) -> bool:
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def is_done(self) -> bool:
        """Always True: outcomes are never pending."""
        return True

    # --- Elimination ---

    @abc.abstractmethod
    def fold[X](
        self, on_success: Callable[[V], X], on_failure: Callable[[E], X]
    ) -> X:
        """Collapse the outcome into a single value.

        Calls ``on_success`` with the value or ``on_failure`` with the error.
        All other transformations are defined in terms of this.
        """

    @abc.abstractmethod
    def get(self) -> V:
        """Return the success value or raise the stored error.

        Raises:
            BaseException: The stored error itself when it is an exception.
            UnwrapError: When the stored error is plain data; the payload is
                available as ``UnwrapError.error``.
        """

    def get_as[T](self, kind: type[T]) -> T | None:
        """Return the payload when it is an instance of ``kind``.

        Looks at the value of a Success or the error of a Failure. Never
        raises. Prefer ``fold`` or a ``match`` on ``Success``/``Failure``
        when the variant is known.
        """
        payload = self.fold(lambda v: v, lambda e: e)
        return payload if isinstance(payload, kind) else None

    def or_(self, fallback: V) -> Outcome[V, Never]:
        """Turn a Failure into ``Success(fallback)``; keep a Success as is."""
        return self.fold(lambda _v: self, lambda _e: Success(fallback))

    # --- Inspection (always returns self) ---

    def on_success(self, fn: Callable[[V], Any]) -> Outcome[V, E]:
        self.fold(fn, lambda _e: None)
        return self

    def on_failure(self, fn: Callable[[E], Any]) -> Outcome[V, E]:
        self.fold(lambda _v: None, fn)
        return self

    def always(self, fn: Callable[[], Any]) -> Outcome[V, E]:
        """Call ``fn`` unconditionally and return ``self``."""
        fn()
        return self

    success = on_success
    fail = on_failure

    # --- Transformation ---

    def map[U](self, transform: Callable[[V], U]) -> Outcome[U, E]:
        """Transform the success value; a Failure passes through unchanged.

        ``transform`` must not return ``None``: a Success always holds a value,
        so a ``None`` result raises ``TypeError``. Use ``bind`` with ``of`` to
        map onto an optional value. The same holds for ``map_using_receiver``,
        the ``map_error`` transform and the ``or_`` fallback.
        """
        return self.fold(lambda v: Success(transform(v)), lambda _e: self)

    def map_using_receiver(
        self, method: str | Callable[..., Any], *args: Any, **kwargs: Any
    ) -> Outcome[Any, E]:
        """Transform the success value by invoking ``method`` on it.

        ``method`` is either the name of a method looked up on the value, or a
        callable taking the value as its first argument (e.g. ``str.upper``).
        Extra arguments are forwarded.

        Example:
            of_success(" padded ").map_using_receiver("strip")
            of_success("a,b").map_using_receiver(str.split, ",")
        """
        if isinstance(method, str):
            name = method
            return self.map(lambda v: getattr(v, name)(*args, **kwargs))
        return self.map(lambda v: method(v, *args, **kwargs))

    then = map
    then_use = map_using_receiver

    def bind[U, E2](
        self, transform: Callable[[V], Outcome[U, E2]]
    ) -> Outcome[U, E | E2]:
        """Chain a computation that itself returns an outcome.

        The result of ``transform`` is returned as is, so nesting never grows
        beyond one level. A Failure passes through unchanged.
        """
        return self.fold(transform, lambda _e: self)

    def map_error[E2](self, transform: Callable[[E], E2]) -> Outcome[V, E2]:
        """Transform the error; a Success passes through unchanged."""
        return self.fold(lambda _v: self, lambda e: Failure(transform(e)))

    def bind_error[E2](
        self, transform: Callable[[E], Outcome[V, E2]]
    ) -> Outcome[V, E2]:
        """Replace a Failure with the outcome returned by ``transform``."""
        return self.fold(lambda _v: self, transform)

    # --- Tupling ---

    def and_[V1, E1](
        self, f: Callable[[], Outcome[V1, E1]]
    ) -> OutcomeTuple2[V, E, V1, E1]:
        """Pair this outcome with the next one, evaluating ``f`` only on success.

        On a Failure ``f`` is never called and the second slot is ``None``.
        """
        if self.is_failure():
            logger.debug("and_ short-circuited after %s", self)
            return OutcomeTuple2(self, None)
        return OutcomeTuple2(self, f())

    # --- Dunder helpers ---

    def __iter__(self) -> Iterator[Any]:
        """Allow ``value, error = outcome``; the missing side is ``None``."""
        return iter(self.fold(lambda v: (v, None), lambda e: (None, e)))

    def __str__(self) -> str:
        return self.fold(lambda v: f"[Success: {v}]", lambda e: f"[Failure: {e}]")


@dataclasses.dataclass(frozen=True, slots=True)
class Success[V](Outcome[V, Never]):
    """A successful outcome holding ``value``."""

    value: V

    def __post_init__(self) -> None:
        if self.value is None:
            raise TypeError("Success requires a value; use of() for optional values")

    @property
    def error(self) -> None:
        return None

    def fold[X](
        self, on_success: Callable[[V], X], on_failure: Callable[[Never], X]
    ) -> X:
        return on_success(self.value)

    def get(self) -> V:
        return self.value


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[E](Outcome[Never, E]):
    """A failed outcome holding ``error``."""

    error: E

    def __post_init__(self) -> None:
        if self.error is None:
            raise TypeError("Failure requires an error payload")

    @property
    def value(self) -> None:
        return None

    def fold[X](
        self, on_success: Callable[[Never], X], on_failure: Callable[[E], X]
    ) -> X:
        return on_failure(self.error)

    def get(self) -> Never:
        logger.debug("get() called on %s", self)
        if isinstance(self.error, BaseException):
            raise self.error
        raise UnwrapError(
            self.error,
            hint="Check is_success() first, or use fold()/or_() to handle failures.",
        )


# --- Factories ---


def of_success[V](value: V) -> Success[V]:
    """Wrap ``value`` in a Success."""
    return Success(value)


def of_failure[E](error: E) -> Failure[E]:
    """Wrap ``error`` in a Failure."""
    return Failure(error)


def _missing() -> MissingValueError:
    return MissingValueError(effective_settings().missing_message)


def of[V](
    value: V | None, on_missing: Callable[[], Any] | None = None
) -> Outcome[V, Any]:
    """Build an outcome from an optional value.

    ``None`` counts as absent. For an absent value the error comes from
    ``on_missing()`` (called at most once, and only then) or defaults to a
    ``MissingValueError``.
    """
    if value is not None:
        return Success(value)
    return Failure(on_missing() if on_missing is not None else _missing())


def of_lazy[V](producer: Callable[[], V | None]) -> Outcome[V, MissingValueError]:
    """Call ``producer`` and build an outcome from what it returns.

    ``None`` becomes a ``MissingValueError`` failure. Exceptions raised by
    ``producer`` are not caught; use ``of_attempt`` for that.
    """
    return of(producer())


def of_attempt[V](
    producer: Callable[..., V], /, *args: Any, **kwargs: Any
) -> Outcome[V, Exception]:
    """Call ``producer`` and capture any raised ``Exception`` as a Failure.

    The failure holds the very exception object that was raised. Exceptions
    outside the ``Exception`` hierarchy (``KeyboardInterrupt``, ``SystemExit``)
    propagate. A ``None`` result counts as absent, as in ``of_lazy``.

    Example:
        of_attempt(int, "42")          # Success(42)
        of_attempt(lambda: 10 // 0)    # Failure(ZeroDivisionError(...))
    """
    log_captured = effective_settings().log_captured
    try:
        result = producer(*args, **kwargs)
    except Exception as exc:
        if log_captured:
            logger.debug(
                "of_attempt captured %s: %s", type(exc).__name__, exc, exc_info=exc
            )
        return Failure(exc)
    return of(result)
