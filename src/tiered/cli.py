"""CLI for the tiered result library.

Provides command-line access to:
- demo: Replay the reference propagation scenarios with tier-aware logging
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass

from src.tiered.config import TieredConfig
from src.tiered.instrument import classify, instrument
from src.tiered.logging import configure_logger
from src.tiered.outcome import Ok, Outcome, SoftErr
from src.tiered.propagate import propagate_hard, propagate_soft, propagates
from src.tiered.tiered_result import Completed, Failed, TieredResult


@dataclass(frozen=True, order=True)
class SoftErrorMarker:
    """A soft error: benign, user-attributable."""

    def __str__(self) -> str:
        return "a soft error"


@dataclass(frozen=True, order=True)
class HardErrorMarker:
    """A hard error: systemic, must be monitored."""

    def __str__(self) -> str:
        return "a real dangerous error"


class Flag:
    """Mutable cell recording whether code after a propagation ran."""

    def __init__(self) -> None:
        self.skipped = True


@instrument()
@propagates
def tries_hard(
    hard_result: TieredResult[None, SoftErrorMarker, HardErrorMarker], flag: Flag
) -> TieredResult[None, SoftErrorMarker, HardErrorMarker]:
    value = propagate_hard(hard_result)
    flag.skipped = False
    return Completed(Ok(value))


@instrument()
@propagates
def tries_soft(
    soft_result: Outcome[None, SoftErrorMarker],
) -> TieredResult[None, SoftErrorMarker, HardErrorMarker]:
    return Completed(Ok(propagate_soft(soft_result)))


HARD_SCENARIOS: list[TieredResult[None, SoftErrorMarker, HardErrorMarker]] = [
    Completed(Ok(None)),
    Completed(SoftErr(SoftErrorMarker())),
    Failed(HardErrorMarker()),
]

SOFT_SCENARIOS: list[Outcome[None, SoftErrorMarker]] = [
    Ok(None),
    SoftErr(SoftErrorMarker()),
]


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="tiered - soft and hard error propagation"
    )
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    subparsers.add_parser("demo", help="Replay the propagation scenarios")

    args = parser.parse_args()

    if args.command == "demo":
        config = TieredConfig()
        configure_logger(args.debug, rich=config.rich_logging, level=config.log_level)
        run_demo()
    else:
        parser.print_help()
        sys.exit(1)


def run_demo() -> None:
    """Run every scenario and print input, output, flag and tier."""
    print("=" * 60)
    print("tiered - Propagation Demo")
    print("=" * 60)
    print()

    rows = []

    print("[1/2] propagate_hard, followed by a flag assignment:")
    for scenario in HARD_SCENARIOS:
        flag = Flag()
        result = tries_hard(scenario, flag)
        tier = classify(result)
        print(f"  {scenario!r}")
        print(f"      -> {result!r} (tier: {tier.value}, skipped: {flag.skipped})")
        rows.append(
            {
                "operator": "propagate_hard",
                "input": repr(scenario),
                "output": repr(result),
                "tier": tier.value,
                "skipped": flag.skipped,
            }
        )
    print()

    print("[2/2] propagate_soft:")
    for outcome in SOFT_SCENARIOS:
        result = tries_soft(outcome)
        tier = classify(result)
        print(f"  {outcome!r}")
        print(f"      -> {result!r} (tier: {tier.value})")
        rows.append(
            {
                "operator": "propagate_soft",
                "input": repr(outcome),
                "output": repr(result),
                "tier": tier.value,
            }
        )
    print()
    print("=" * 60)

    print("JSON output:")
    print(json.dumps(rows, indent=2))


if __name__ == "__main__":
    main()
