#!/usr/bin/env python3
"""Smoke test for the aggregation core.

Builds a small demo dataset, runs the leaderboard and distribution
engines, and checks the headline numbers.

Usage:
    python scripts/smoke_demo.py

Exit codes:
    0: All checks passed
    1: Some checks failed
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from encounterstats.aggregation.distribution import summarize  # noqa: E402
from encounterstats.aggregation.leaderboard import aggregate_players_from_encounters  # noqa: E402
from encounterstats.core.numbers import format_number  # noqa: E402
from encounterstats.models.types import ClassStatsResponse, EncounterListResponse  # noqa: E402

DEMO_ENCOUNTERS = {
    "rows": [
        {
            "id": 1,
            "startedAtMs": 1_700_000_000_000,
            "durationMs": 10_000,
            "players": [
                {"actorId": 1, "name": "Aki", "classSpec": 1, "isPlayer": True,
                 "damageDealt": 1000},
                {"actorId": 2, "name": "Bo", "classSpec": 8, "isPlayer": True,
                 "damageDealt": 150, "healDealt": 4000},
                {"actorId": 900, "isPlayer": False, "damageDealt": 5_000_000},
            ],
        },
        {
            "id": 2,
            "startedAtMs": 1_700_000_600_000,
            "durationMs": 100_000,
            "players": [
                {"actorId": 1, "isPlayer": True, "damageDealt": 5000},
            ],
        },
    ]
}


def _stats(class_spec: int, median: float, maximum: float, outliers=None) -> dict:
    return {
        "class_spec": class_spec,
        "count": 12,
        "avg_dps": median,
        "dps_q1": median * 0.8,
        "dps_median": median,
        "dps_q3": median * 1.2,
        "dps_min": median * 0.5,
        "dps_max": maximum,
        "avg_hps": 0,
        "hps_q1": 0,
        "hps_median": 0,
        "hps_q3": 0,
        "hps_min": 0,
        "hps_max": 0,
        "outliers": outliers or [],
    }


DEMO_CLASS_STATS = {
    "classes": [
        _stats(1, 40, 100),
        _stats(3, 20, 50, [{"type": "dps", "encounterId": 2, "value": 200}]),
        _stats(-1, 999, 10_000),
    ]
}


def check_leaderboard() -> bool:
    """Check the weighted average for the demo leaderboard."""
    payload = EncounterListResponse.model_validate(DEMO_ENCOUNTERS)
    players = aggregate_players_from_encounters(payload.rows)

    if [p.actor_id for p in players] != [1, 2]:
        print(f"FAIL: Unexpected leaderboard order: {[p.actor_id for p in players]}")
        return False

    top = players[0]
    print(f"OK: {len(players)} players aggregated")
    for player in players:
        print(
            f"    {player.name}: avg {format_number(player.average_dps)} dps, "
            f"best {format_number(player.best_dps)}, {player.encounter_count} encounters"
        )

    if top.average_dps != 55:
        print(f"FAIL: Expected weighted average 55, got {top.average_dps}")
        return False

    print("OK: Weighted average is 55")
    return True


def check_distribution() -> bool:
    """Check the shared scale for the demo class statistics."""
    payload = ClassStatsResponse.model_validate(DEMO_CLASS_STATS)
    layout = summarize(payload.classes, "dps")

    if layout.is_empty:
        print("FAIL: Layout is empty")
        return False

    print(f"OK: {len(layout.rows)} specs summarized")
    for row in layout.rows:
        print(
            f"    {row.class_info.name} ({row.class_info.class_name}): "
            f"median {row.quartiles.median} -> {row.positions.median:.1f}%"
        )

    if layout.scale != 0.5 or layout.max_value != 200:
        print(f"FAIL: Expected scale 0.5 / max 200, got {layout.scale} / {layout.max_value}")
        return False

    print("OK: Shared scale is 0.5")
    return True


def main() -> int:
    """Run all smoke checks."""
    print("=" * 60)
    print("encounterstats Smoke Test")
    print("=" * 60)

    checks = [check_leaderboard(), check_distribution()]

    print("=" * 60)
    if all(checks):
        print("All checks passed!")
        return 0

    print("Some checks failed")
    return 1


if __name__ == "__main__":
    sys.exit(main())
