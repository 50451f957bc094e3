"""Fixed-arity groupings of outcomes.

``Outcome.and_`` starts a chain of independent fallible steps; each further
``and_`` appends one slot, up to four. A step runs only while every earlier
slot succeeded, so slots after a failure are ``None``.

Example:
    first, second, third = (
        of_attempt(load_user, uid)
        .and_(lambda: of_attempt(load_prefs, uid))
        .and_(lambda: of_attempt(load_quota, uid))
    )
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from outcomes.errors import IncompleteTupleError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from outcomes.outcome import Outcome

logger = logging.getLogger(__name__)


@runtime_checkable
class OutcomeList(Protocol):
    """Duck-typed protocol shared by single outcomes and outcome tuples."""

    @property
    def size(self) -> int: ...

    def is_success(self) -> bool: ...

    def is_failure(self) -> bool: ...

    def is_done(self) -> bool: ...


class _OutcomeTuple:
    """Behaviour common to every arity."""

    __slots__ = ()

    def _slots(self) -> tuple[Outcome[Any, Any] | None, ...]:
        return tuple(getattr(self, f.name) for f in dataclasses.fields(self))  # type: ignore[arg-type]

    @property
    def size(self) -> int:
        return len(self._slots())

    def is_success(self) -> bool:
        """True iff every slot is present and successful."""
        return all(slot is not None and slot.is_success() for slot in self._slots())

    def is_failure(self) -> bool:
        return not self.is_success()

    def is_done(self) -> bool:
        return True

    def values(self) -> tuple[Any, ...]:
        """Return the success values of all slots.

        Raises:
            IncompleteTupleError: A slot failed or was skipped.
        """
        for index, slot in enumerate(self._slots()):
            if slot is None:
                raise IncompleteTupleError(
                    f"Slot {index} was skipped after an earlier failure",
                    index=index,
                )
            if slot.is_failure():
                raise IncompleteTupleError(
                    f"Slot {index} failed: {slot.error}",  # type: ignore[union-attr]
                    index=index,
                    hint="Inspect the slots directly, or check is_success() first.",
                )
        return tuple(slot.get() for slot in self._slots())  # type: ignore[union-attr]

    def _extend(self, f: Callable[[], Outcome[Any, Any]]) -> Outcome[Any, Any] | None:
        if not self.is_success():
            logger.debug("and_ short-circuited at slot %d", self.size)
            return None
        return f()

    def __iter__(self) -> Iterator[Outcome[Any, Any] | None]:
        return iter(self._slots())


@dataclasses.dataclass(frozen=True, slots=True)
class OutcomeTuple4[V, E, V2, E2, V3, E3, V4, E4](_OutcomeTuple):
    """Four outcomes; the arity cap, so there is no ``and_``."""

    first: Outcome[V, E]
    second: Outcome[V2, E2] | None
    third: Outcome[V3, E3] | None
    fourth: Outcome[V4, E4] | None


@dataclasses.dataclass(frozen=True, slots=True)
class OutcomeTuple3[V, E, V2, E2, V3, E3](_OutcomeTuple):
    """Three outcomes."""

    first: Outcome[V, E]
    second: Outcome[V2, E2] | None
    third: Outcome[V3, E3] | None

    def and_[V4, E4](
        self, f: Callable[[], Outcome[V4, E4]]
    ) -> OutcomeTuple4[V, E, V2, E2, V3, E3, V4, E4]:
        """Append a fourth slot; ``f`` runs only if all three slots succeeded."""
        return OutcomeTuple4(self.first, self.second, self.third, self._extend(f))


@dataclasses.dataclass(frozen=True, slots=True)
class OutcomeTuple2[V, E, V2, E2](_OutcomeTuple):
    """Two outcomes."""

    first: Outcome[V, E]
    second: Outcome[V2, E2] | None

    def and_[V3, E3](
        self, f: Callable[[], Outcome[V3, E3]]
    ) -> OutcomeTuple3[V, E, V2, E2, V3, E3]:
        """Append a third slot; ``f`` runs only if both slots succeeded."""
        return OutcomeTuple3(self.first, self.second, self._extend(f))
