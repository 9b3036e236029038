"""Outer result level: hard failure, or a completed ``Outcome``.

A ``TieredResult[T, E, H]`` is either ``Failed(error)``, a catastrophic error
that must be monitored, or ``Completed(outcome)``, meaning the operation ran
to completion and produced an ``Ok`` or a ``SoftErr``.

Variants order ``Completed`` before ``Failed``; completed results then order
by their inner outcome (``Ok`` before ``SoftErr``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Generic, NoReturn, TypeVar, Union

from src.tiered.errors import UnwrapError
from src.tiered.outcome import E, Ok, Outcome, SoftErr, T, _Variant

H = TypeVar("H")


@dataclass(frozen=True, slots=True)
class Completed(_Variant, Generic[T, E]):
    """The operation finished; the inner outcome says how."""

    outcome: Outcome[T, E]

    _rank: ClassVar[int] = 0
    _family: ClassVar[str] = "tiered"

    def _key(self) -> tuple[int, Any]:
        return (self._rank, self.outcome)

    def is_completed(self) -> bool:
        return True

    def is_failed(self) -> bool:
        return False

    def unwrap(self) -> Outcome[T, E]:
        return self.outcome


@dataclass(frozen=True, slots=True)
class Failed(_Variant, Generic[H]):
    """Hard error. Relayed untouched to the outermost caller."""

    error: H

    _rank: ClassVar[int] = 1
    _family: ClassVar[str] = "tiered"

    def _key(self) -> tuple[int, Any]:
        return (self._rank, self.error)

    def is_completed(self) -> bool:
        return False

    def is_failed(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise UnwrapError(self, f"Called unwrap on Failed: {self.error!r}")


TieredResult = Union[Completed[T, E], Failed[H]]


def ok(value: T) -> Completed[T, Any]:
    """Shorthand for ``Completed(Ok(value))``."""
    return Completed(Ok(value))


def soft_err(error: E) -> Completed[Any, E]:
    """Shorthand for ``Completed(SoftErr(error))``."""
    return Completed(SoftErr(error))


def failed(error: H) -> Failed[H]:
    return Failed(error)


def complete(outcome: Outcome[T, E]) -> Completed[T, E]:
    return Completed(outcome)
