"""Pydantic models for the encounterstats API boundary.

Request models mirror the upstream log API exactly: the encounter list
endpoint speaks camelCase, the class statistics endpoint speaks
snake_case. Renaming a field here is a breaking change.
"""

from typing import Literal

from pydantic import BaseModel, Field

# ============================================================================
# Encounter list endpoint (GET /encounter)
# ============================================================================


class EncounterPlayerDTO(BaseModel):
    """One roster entry inside an encounter row."""

    actorId: int
    name: str | None = None
    classId: int | None = None
    classSpec: int | None = None
    damageDealt: float = 0
    healDealt: float = 0
    damageTaken: float = 0
    abilityScore: int | None = None
    isPlayer: bool


class BossDTO(BaseModel):
    """Boss entry on an encounter row."""

    monsterName: str
    isDefeated: bool


class EncounterRowDTO(BaseModel):
    """Encounter row as returned by the encounter list endpoint."""

    id: int
    startedAtMs: int | None = None
    endedAtMs: int | None = None
    sceneId: int | None = None
    sceneName: str | None = None
    durationMs: int | None = None
    totalDmg: float = 0
    totalHeal: float = 0
    team: str = ""
    teamAvgAbilityScore: float | None = None
    teamDps: float = 0
    bosses: list[BossDTO] = Field(default_factory=list)
    players: list[EncounterPlayerDTO] = Field(default_factory=list)


class EncounterListResponse(BaseModel):
    """Encounter list payload."""

    rows: list[EncounterRowDTO]
    totalCount: int | None = None


# ============================================================================
# Class statistics endpoint (GET /statistics/classes)
# ============================================================================


class OutlierDTO(BaseModel):
    """Pre-identified outlier point for one class spec."""

    type: Literal["dps", "hps"]
    encounterId: int
    value: float


class ClassStatsItem(BaseModel):
    """Precomputed quartile statistics for one class spec."""

    class_spec: int  # -1 when unknown
    count: int = 0
    avg_dps: float
    dps_q1: float
    dps_median: float
    dps_q3: float
    dps_min: float
    dps_max: float
    avg_hps: float
    hps_q1: float
    hps_median: float
    hps_q3: float
    hps_min: float
    hps_max: float
    outliers: list[OutlierDTO] | None = None


class ClassStatsResponse(BaseModel):
    """Class statistics payload."""

    classes: list[ClassStatsItem]


# ============================================================================
# encounterstats responses
# ============================================================================


class AggregatedPlayerDetail(BaseModel):
    """Leaderboard row for API response."""

    actorId: int
    name: str | None
    classId: int | None
    classSpec: int | None
    abilityScore: int | None
    totalDamage: float
    totalHeal: float
    totalTaken: float
    encounterCount: int
    totalDurationSeconds: int
    averageDps: int
    bestDps: int
    lastSeenAtMs: int
    metricValue: float


class LeaderboardResponse(BaseModel):
    """Ranked player leaderboard."""

    metric: str
    players: list[AggregatedPlayerDetail]


class QuartileDetail(BaseModel):
    """Quartile summary (absolute values or 0-100 positions)."""

    min: float
    q1: float
    median: float
    q3: float
    max: float
    avg: float
    outliers: list[float]


class DistributionRowDetail(BaseModel):
    """One ranked class spec in a distribution view."""

    classSpec: int
    count: int
    specName: str | None
    className: str
    role: Literal["damage", "healer", "tank", "damagehealer"]
    color: str
    quartiles: QuartileDetail
    positions: QuartileDetail


class ClassDistributionResponse(BaseModel):
    """Box/whisker layout sharing one axis."""

    metric: Literal["dps", "hps"]
    empty: bool
    scale: float | None
    maxValue: float | None
    rows: list[DistributionRowDetail]
