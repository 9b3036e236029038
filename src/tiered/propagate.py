"""Short-circuit propagation of soft and hard errors.

Python cannot return from the caller inside an expression, so the operators
raise a ``Propagate`` signal carrying the re-wrapped result, and the
``@propagates`` decorator on the enclosing function turns that signal into
the function's return value:

    @propagates
    def load_profile(user_id: str) -> TieredResult[Profile, NotFound, DbError]:
        row = propagate_hard(fetch_row(user_id))       # Failed -> returned as is
        profile = propagate_soft(parse_profile(row))   # SoftErr -> Completed(SoftErr)
        return ok(profile)

Neither operator retries, recovers, or moves an error between tiers.
"""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, TypeVar

from src.tiered.errors import Propagate, PropagationError
from src.tiered.outcome import Ok, Outcome, SoftErr, T
from src.tiered.tiered_result import Completed, Failed, TieredResult

F = TypeVar("F", bound=Callable[..., Any])


def propagate_soft(outcome: Outcome[T, Any]) -> T:
    """Return the ``Ok`` value, or early-return ``Completed(SoftErr(error))``."""
    if isinstance(outcome, Ok):
        return outcome.value
    if isinstance(outcome, SoftErr):
        raise Propagate(Completed(outcome))
    raise PropagationError(
        f"propagate_soft expects Ok or SoftErr, got {type(outcome).__name__}"
    )


def propagate_hard(result: TieredResult[T, Any, Any]) -> T:
    """Return the success value out of both levels, short-circuiting on either tier.

    ``Failed`` is relayed as the very same object; ``Completed`` is handed to
    ``propagate_soft``.
    """
    if isinstance(result, Completed):
        return propagate_soft(result.outcome)
    if isinstance(result, Failed):
        raise Propagate(result)
    raise PropagationError(
        f"propagate_hard expects Completed or Failed, got {type(result).__name__}"
    )


def propagates(func: F) -> F:
    """Let ``propagate_soft``/``propagate_hard`` return early from ``func``.

    Works on plain and ``async`` functions. Only the ``Propagate`` signal is
    caught; any other exception leaves the function unchanged.
    """
    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except Propagate as signal:
                return signal.result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except Propagate as signal:
            return signal.result

    return wrapper  # type: ignore[return-value]
