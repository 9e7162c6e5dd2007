"""Leaderboard API endpoint.

POST /api/leaderboard/players - Aggregate encounter rows into a player leaderboard
"""

from __future__ import annotations

from fastapi import APIRouter, Query

from encounterstats.aggregation.leaderboard import (
    DEFAULT_METRIC,
    aggregate_players_from_encounters,
    get_metric_value,
    rank_by_metric,
    resolve_metric,
)
from encounterstats.api.settings import get_default_limit
from encounterstats.models.domain import AggregatedActor
from encounterstats.models.types import (
    AggregatedPlayerDetail,
    EncounterListResponse,
    LeaderboardResponse,
)

router = APIRouter()


def _build_player_detail(actor: AggregatedActor, metric: str) -> AggregatedPlayerDetail:
    """Build AggregatedPlayerDetail from an AggregatedActor."""
    return AggregatedPlayerDetail(
        actorId=actor.actor_id,
        name=actor.name,
        classId=actor.class_id,
        classSpec=actor.class_spec,
        abilityScore=actor.ability_score,
        totalDamage=actor.total_damage,
        totalHeal=actor.total_heal,
        totalTaken=actor.total_taken,
        encounterCount=actor.encounter_count,
        totalDurationSeconds=actor.total_duration_seconds,
        averageDps=actor.average_dps,
        bestDps=actor.best_dps,
        lastSeenAtMs=actor.last_seen_at_ms,
        metricValue=get_metric_value(actor, metric),
    )


@router.post("/leaderboard/players", response_model=LeaderboardResponse)
def post_player_leaderboard(
    payload: EncounterListResponse,
    metric: str = Query(DEFAULT_METRIC),
    limit: int | None = Query(None, ge=0),
) -> LeaderboardResponse:
    """Aggregate players across encounters and rank them.

    Args:
        payload: Encounter list as returned by the upstream API.
        metric: Leaderboard metric to rank by.
        limit: Maximum rows; falls back to the configured default.

    Returns:
        LeaderboardResponse with ranked players.
    """
    # Report the metric actually used for ranking
    metric = resolve_metric(metric)

    actors = aggregate_players_from_encounters(payload.rows)
    ranked = rank_by_metric(actors, metric, limit if limit is not None else get_default_limit())

    return LeaderboardResponse(
        metric=metric,
        players=[_build_player_detail(actor, metric) for actor in ranked],
    )
