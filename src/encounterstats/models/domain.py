"""Domain models for encounterstats.

Pure Python dataclasses representing the view-model values produced by
the aggregation core. These models are independent of pydantic and the
HTTP layer; the api package converts them into response types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

# ============================================================================
# Leaderboard Domain
# ============================================================================


@dataclass
class EncounterActorRecord:
    """One actor's performance within one encounter."""

    actor_id: int
    is_player: bool
    damage_dealt: float
    heal_dealt: float
    damage_taken: float
    encounter_duration_seconds: int
    encounter_started_at_ms: int | None = None
    name: str | None = None
    class_id: int | None = None
    class_spec: int | None = None
    ability_score: int | None = None


@dataclass
class AggregatedActor:
    """Running cross-encounter totals for a single actor."""

    actor_id: int
    total_damage: float
    total_heal: float
    total_taken: float
    encounter_count: int
    total_duration_seconds: int
    average_dps: int
    best_dps: int
    last_seen_at_ms: int
    name: str | None = None
    class_id: int | None = None
    class_spec: int | None = None
    ability_score: int | None = None


# ============================================================================
# Distribution Domain
# ============================================================================

Metric = Literal["dps", "hps"]
ClassRole = Literal["damage", "healer", "tank", "damagehealer"]


@dataclass
class QuartileSummary:
    """Five-number summary plus mean for one metric of one bucket."""

    min: float
    q1: float
    median: float
    q3: float
    max: float
    avg: float
    outliers: list[float] = field(default_factory=list)

    @property
    def upper_bound(self) -> float:
        """Largest value this summary places on the axis."""
        return max([self.max, *self.outliers])


@dataclass
class ClassInfo:
    """Display mapping for a class spec."""

    name: str | None
    class_name: str
    color: str
    has_valid_mapping: bool
    role: ClassRole


@dataclass
class BoxPositions:
    """Screen positions (0-100) of a quartile summary on a shared axis.

    Positions are not clamped: an average outside [q1, q3] keeps its
    true offset.
    """

    min: float
    q1: float
    median: float
    q3: float
    max: float
    avg: float
    outliers: list[float] = field(default_factory=list)


@dataclass
class DistributionRow:
    """One ranked class-spec bucket inside a layout."""

    class_spec: int
    count: int
    quartiles: QuartileSummary
    class_info: ClassInfo
    positions: BoxPositions


@dataclass
class ScaledLayout:
    """Ordered buckets sharing one linear axis.

    An empty layout carries no scale: callers must not project values
    against it.
    """

    metric: Metric
    rows: list[DistributionRow] = field(default_factory=list)
    scale: float | None = None
    max_value: float | None = None

    @property
    def is_empty(self) -> bool:
        return not self.rows
