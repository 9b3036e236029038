"""Exceptions raised by the tiered result library.

These signal programming errors (unwrapping the wrong variant, handing an
operator the wrong kind of value). Soft and hard *domain* errors are never
raised: they travel as values inside ``Completed`` and ``Failed``.
"""

from __future__ import annotations

from typing import Any


class TieredError(Exception):
    """Base class for library errors."""


class UnwrapError(TieredError, ValueError):
    """Raised when unwrapping a variant that holds no success value."""

    def __init__(self, result: Any, message: str) -> None:
        self.result = result
        super().__init__(message)


class PropagationError(TieredError, TypeError):
    """Raised when an operator receives something that is not a result."""


class Propagate(BaseException):  # noqa: N818
    """Early-return signal raised by the propagation operators.

    Carries the already re-wrapped ``TieredResult`` that the enclosing
    ``@propagates`` function returns. Derives from ``BaseException`` so that
    ``except Exception`` blocks in the function body do not intercept it.
    """

    __slots__ = ("result",)

    def __init__(self, result: Any) -> None:
        self.result = result
        super().__init__(f"Propagate({result!r})")
