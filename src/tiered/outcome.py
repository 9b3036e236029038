"""Inner result level: success or soft error.

An ``Outcome[T, E]`` is either ``Ok(value)`` or ``SoftErr(error)``. Soft
errors are benign, expected failures (bad input, not found) that are part of
a normal response and must not trigger alerting.

Variants order by tag first (``Ok`` before ``SoftErr``), then by payload.
Equality, ordering and hashing are delegated to the payload, so they work
exactly when the payload type supports them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Generic, NoReturn, TypeVar, Union

from src.tiered.errors import UnwrapError

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


class _Variant:
    """Cross-variant ordering and truth-value guard shared by all variants."""

    __slots__ = ()

    _rank: ClassVar[int]
    _family: ClassVar[str]

    def _key(self) -> tuple[int, Any]:
        raise NotImplementedError

    def _comparable(self, other: object) -> bool:
        return isinstance(other, _Variant) and other._family == self._family

    def __lt__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._key() < other._key()  # type: ignore[attr-defined]

    def __le__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._key() <= other._key()  # type: ignore[attr-defined]

    def __gt__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._key() > other._key()  # type: ignore[attr-defined]

    def __ge__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._key() >= other._key()  # type: ignore[attr-defined]

    def __bool__(self) -> NoReturn:
        raise TypeError(
            f"{type(self).__name__} has no truth value; match on the variant instead"
        )


@dataclass(frozen=True, slots=True)
class Ok(_Variant, Generic[T]):
    """Successful outcome containing a value."""

    value: T

    _rank: ClassVar[int] = 0
    _family: ClassVar[str] = "outcome"

    def _key(self) -> tuple[int, Any]:
        return (self._rank, self.value)

    def is_ok(self) -> bool:
        return True

    def is_soft_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError(self, f"Called unwrap_err on Ok: {self.value!r}")

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[Any], Any]) -> Ok[T]:
        return self


@dataclass(frozen=True, slots=True)
class SoftErr(_Variant, Generic[E]):
    """Benign failure that can be handed back to the user as a valid response."""

    error: E

    _rank: ClassVar[int] = 1
    _family: ClassVar[str] = "outcome"

    def _key(self) -> tuple[int, Any]:
        return (self._rank, self.error)

    def is_ok(self) -> bool:
        return False

    def is_soft_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise UnwrapError(self, f"Called unwrap on SoftErr: {self.error!r}")

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, fn: Callable[[Any], Any]) -> SoftErr[E]:
        return self

    def map_err(self, fn: Callable[[E], U]) -> SoftErr[U]:
        return SoftErr(fn(self.error))


Outcome = Union[Ok[T], SoftErr[E]]
