"""Cross-encounter player leaderboard aggregation.

Folds per-encounter actor records into one running aggregate per actor.
Pure functions only: no fetching, no persistence, no module-level state.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import replace
from typing import Iterable, Sequence

from encounterstats.core.numbers import js_round, sanitize_amount
from encounterstats.models.domain import AggregatedActor, EncounterActorRecord
from encounterstats.models.types import EncounterRowDTO

logger = logging.getLogger(__name__)

DEFAULT_METRIC = "averageDps"

# Leaderboard metric name -> AggregatedActor attribute
LEADERBOARD_METRICS: dict[str, str] = {
    "averageDps": "average_dps",
    "bestDps": "best_dps",
    "totalDamage": "total_damage",
    "totalHeal": "total_heal",
    "encounterCount": "encounter_count",
    "totalTaken": "total_taken",
}


def _duration_seconds(raw: float | None) -> int:
    """Whole seconds, never below 1."""
    return max(1, math.floor(sanitize_amount(raw, "encounter_duration_seconds")))


def _now_ms() -> int:
    return int(time.time() * 1000)


def _seed_aggregate(
    record: EncounterActorRecord,
    damage: float,
    heal: float,
    taken: float,
    duration: int,
) -> AggregatedActor:
    """Create an aggregate from an actor's first record."""
    dps = js_round(damage / duration)
    last_seen = record.encounter_started_at_ms
    if last_seen is None:
        last_seen = _now_ms()

    return AggregatedActor(
        actor_id=record.actor_id,
        total_damage=damage,
        total_heal=heal,
        total_taken=taken,
        encounter_count=1,
        total_duration_seconds=duration,
        average_dps=dps,
        best_dps=dps,
        last_seen_at_ms=last_seen,
        name=record.name,
        class_id=record.class_id,
        class_spec=record.class_spec,
        ability_score=record.ability_score,
    )


def _fold(
    existing: AggregatedActor,
    record: EncounterActorRecord,
    damage: float,
    heal: float,
    taken: float,
    duration: int,
) -> AggregatedActor:
    """Fold one more record into an existing aggregate.

    average_dps is recomputed from the cumulative sums on every fold so
    long encounters weigh proportionally more than short ones.
    """
    total_damage = existing.total_damage + damage
    total_duration = existing.total_duration_seconds + duration
    encounter_dps = js_round(damage / duration)

    last_seen = existing.last_seen_at_ms
    if record.encounter_started_at_ms is not None:
        last_seen = max(last_seen, record.encounter_started_at_ms)

    return replace(
        existing,
        total_damage=total_damage,
        total_heal=existing.total_heal + heal,
        total_taken=existing.total_taken + taken,
        encounter_count=existing.encounter_count + 1,
        total_duration_seconds=total_duration,
        average_dps=js_round(total_damage / max(1, total_duration)),
        best_dps=max(existing.best_dps, encounter_dps),
        last_seen_at_ms=last_seen,
        # Display attributes: last non-null value wins
        name=record.name if record.name is not None else existing.name,
        class_id=record.class_id if record.class_id is not None else existing.class_id,
        class_spec=record.class_spec if record.class_spec is not None else existing.class_spec,
        ability_score=(
            record.ability_score if record.ability_score is not None else existing.ability_score
        ),
    )


def aggregate_actors(records: Iterable[EncounterActorRecord]) -> list[AggregatedActor]:
    """Aggregate per-encounter records into a ranked leaderboard.

    Non-player records are dropped. Malformed totals (negative, NaN,
    infinite) are clamped to 0 and the record is still counted.

    Args:
        records: Records in input order.

    Returns:
        One AggregatedActor per distinct actor_id, sorted by average_dps
        descending. Ties keep first-seen order.
    """
    aggregates: dict[int, AggregatedActor] = {}
    skipped = 0

    for record in records:
        if not record.is_player:
            skipped += 1
            continue

        damage = sanitize_amount(record.damage_dealt, "damage_dealt")
        heal = sanitize_amount(record.heal_dealt, "heal_dealt")
        taken = sanitize_amount(record.damage_taken, "damage_taken")
        duration = _duration_seconds(record.encounter_duration_seconds)

        existing = aggregates.get(record.actor_id)
        if existing is None:
            aggregates[record.actor_id] = _seed_aggregate(record, damage, heal, taken, duration)
        else:
            aggregates[record.actor_id] = _fold(existing, record, damage, heal, taken, duration)

    logger.debug(f"Aggregated {len(aggregates)} players ({skipped} non-player records skipped)")

    # sorted() is stable; dict preserves first-seen order for ties
    return sorted(aggregates.values(), key=lambda a: a.average_dps, reverse=True)


def records_from_encounters(encounters: Iterable[EncounterRowDTO]) -> list[EncounterActorRecord]:
    """Flatten encounter rows into per-actor records.

    Duration is taken from the row's durationMs, floored to whole seconds.
    """
    records: list[EncounterActorRecord] = []

    for encounter in encounters:
        duration_ms = sanitize_amount(encounter.durationMs, "durationMs")
        duration_seconds = max(1, math.floor(duration_ms / 1000))

        for player in encounter.players:
            records.append(
                EncounterActorRecord(
                    actor_id=player.actorId,
                    is_player=player.isPlayer,
                    damage_dealt=player.damageDealt,
                    heal_dealt=player.healDealt,
                    damage_taken=player.damageTaken,
                    encounter_duration_seconds=duration_seconds,
                    encounter_started_at_ms=encounter.startedAtMs,
                    name=player.name,
                    class_id=player.classId,
                    class_spec=player.classSpec,
                    ability_score=player.abilityScore,
                )
            )

    return records


def aggregate_players_from_encounters(
    encounters: Iterable[EncounterRowDTO],
) -> list[AggregatedActor]:
    """Aggregate every player seen across a list of encounter rows."""
    return aggregate_actors(records_from_encounters(encounters))


def resolve_metric(metric: str) -> str:
    """Canonical camelCase name for a leaderboard metric.

    Accepts camelCase names (averageDps) or attribute names
    (average_dps). Unknown names fall back to averageDps.
    """
    if metric in LEADERBOARD_METRICS:
        return metric
    for name, attr in LEADERBOARD_METRICS.items():
        if attr == metric:
            return name
    return DEFAULT_METRIC


def get_metric_value(actor: AggregatedActor, metric: str) -> float:
    """Read a leaderboard metric from an aggregate."""
    return getattr(actor, LEADERBOARD_METRICS[resolve_metric(metric)])


def rank_by_metric(
    actors: Sequence[AggregatedActor],
    metric: str = DEFAULT_METRIC,
    limit: int | None = None,
) -> list[AggregatedActor]:
    """Re-rank aggregates by any leaderboard metric.

    Args:
        actors: Aggregates, typically from aggregate_actors.
        metric: Leaderboard metric name.
        limit: Keep only the first N when positive.

    Returns:
        New list sorted descending by metric, stable for ties.
    """
    ranked = sorted(actors, key=lambda a: get_metric_value(a, metric), reverse=True)
    if limit is not None and limit > 0:
        ranked = ranked[:limit]
    return ranked
