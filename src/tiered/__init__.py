"""Two-tier results: soft errors for users, hard errors for operators."""

from src.tiered.config import TieredConfig
from src.tiered.errors import PropagationError, TieredError, UnwrapError
from src.tiered.instrument import Tier, classify, instrument
from src.tiered.outcome import Ok, Outcome, SoftErr
from src.tiered.propagate import propagate_hard, propagate_soft, propagates
from src.tiered.tiered_result import (
    Completed,
    Failed,
    TieredResult,
    complete,
    failed,
    ok,
    soft_err,
)

__all__ = [
    "Ok",
    "SoftErr",
    "Outcome",
    "Completed",
    "Failed",
    "TieredResult",
    "ok",
    "soft_err",
    "failed",
    "complete",
    "propagate_soft",
    "propagate_hard",
    "propagates",
    "Tier",
    "classify",
    "instrument",
    "TieredConfig",
    "TieredError",
    "UnwrapError",
    "PropagationError",
]
