"""Tier-aware instrumentation for functions returning ``TieredResult``.

Observability tooling should page on hard errors and stay quiet on soft
ones. ``instrument`` logs each returned result at a level chosen by its tier:

- ``Failed``              -> ``hard_error_level`` (ERROR by default)
- ``Completed(SoftErr)``  -> ``soft_error_level`` (INFO by default)
- ``Completed(Ok)``       -> DEBUG, only when ``log_success`` is set

The result itself is returned untouched.
"""

from __future__ import annotations

import functools
import inspect
import logging
from enum import Enum
from typing import Any, Callable, Optional, TypeVar

from src.tiered.config import TieredConfig, levelno
from src.tiered.errors import Propagate, PropagationError
from src.tiered.logging import logger as default_logger
from src.tiered.outcome import Ok, SoftErr
from src.tiered.tiered_result import Completed, Failed

F = TypeVar("F", bound=Callable[..., Any])


class Tier(str, Enum):
    """Classification of a ``TieredResult``."""

    OK = "ok"
    SOFT = "soft"
    HARD = "hard"


def classify(result: Any) -> Tier:
    """Return the tier a ``TieredResult`` belongs to."""
    if isinstance(result, Failed):
        return Tier.HARD
    if isinstance(result, Completed):
        if isinstance(result.outcome, Ok):
            return Tier.OK
        if isinstance(result.outcome, SoftErr):
            return Tier.SOFT
    raise PropagationError(f"Not a TieredResult: {result!r}")


def _record(
    log: logging.Logger, config: TieredConfig, name: str, result: Any
) -> None:
    try:
        tier = classify(result)
    except PropagationError:
        log.warning("`%s` returned a non-tiered value: %r", name, result)
        return
    if tier is Tier.HARD:
        log.log(
            levelno(config.hard_error_level),
            "`%s` failed with hard error: %r",
            name,
            result.error,
        )
    elif tier is Tier.SOFT:
        log.log(
            levelno(config.soft_error_level),
            "`%s` completed with soft error: %r",
            name,
            result.outcome.error,
        )
    elif config.log_success:
        log.debug("`%s` completed: %r", name, result.outcome.value)


def instrument(
    logger: Optional[logging.Logger] = None,
    config: Optional[TieredConfig] = None,
) -> Callable[[F], F]:
    """Decorator logging the tier of every result ``func`` returns.

    Early returns made by ``propagate_soft``/``propagate_hard`` inside ``func``
    are logged too, so the decorator order relative to ``@propagates`` does
    not matter.

    Args:
        logger: Logger to write to, defaults to the ``tiered`` logger
        config: Level settings, defaults to ``TieredConfig()``
    """

    def decorate(func: F) -> F:
        log = logger or default_logger()
        name = func.__qualname__
        settings = config

        def record(result: Any) -> None:
            nonlocal settings
            # environment is read on first call, not at decoration time
            if settings is None:
                settings = TieredConfig()
            _record(log, settings, name, result)

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                try:
                    result = await func(*args, **kwargs)
                except Propagate as signal:
                    record(signal.result)
                    raise
                record(result)
                return result

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                result = func(*args, **kwargs)
            except Propagate as signal:
                record(signal.result)
                raise
            record(result)
            return result

        return wrapper  # type: ignore[return-value]

    return decorate
