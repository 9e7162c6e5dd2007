"""Per-class distribution summaries on a shared axis.

Turns precomputed class statistics into a ranked box/whisker layout:
1. Drop the -1 sentinel and specs with no display mapping
2. Pick the five-number summary and outliers for one metric
3. Sort by median, best first (stable)
4. Truncate to an optional limit
5. Derive one scale from the largest max/outlier in the whole set
6. Project every value to a 0-100 position
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from encounterstats.core.classes import class_info, is_displayable_spec
from encounterstats.core.numbers import is_finite_number
from encounterstats.models.domain import (
    BoxPositions,
    DistributionRow,
    Metric,
    QuartileSummary,
    ScaledLayout,
)
from encounterstats.models.types import ClassStatsItem

logger = logging.getLogger(__name__)

METRICS: tuple[Metric, ...] = ("dps", "hps")
AXIS_WIDTH = 100.0


def _check_metric(metric: str) -> None:
    if metric not in METRICS:
        raise ValueError(f"Unsupported metric {metric!r}, expected one of {METRICS}")


def get_quartiles(item: ClassStatsItem, metric: Metric) -> QuartileSummary:
    """Select the summary fields and outliers for one metric.

    Outliers tagged for the other metric are excluded.

    Raises:
        ValueError: If metric is not 'dps' or 'hps'.
    """
    _check_metric(metric)
    outliers = [o.value for o in item.outliers or [] if o.type == metric]

    if metric == "dps":
        return QuartileSummary(
            min=item.dps_min,
            q1=item.dps_q1,
            median=item.dps_median,
            q3=item.dps_q3,
            max=item.dps_max,
            avg=item.avg_dps,
            outliers=outliers,
        )
    return QuartileSummary(
        min=item.hps_min,
        q1=item.hps_q1,
        median=item.hps_median,
        q3=item.hps_q3,
        max=item.hps_max,
        avg=item.avg_hps,
        outliers=outliers,
    )


def _is_well_formed(quartiles: QuartileSummary) -> bool:
    values = [
        quartiles.min,
        quartiles.q1,
        quartiles.median,
        quartiles.q3,
        quartiles.max,
        quartiles.avg,
        *quartiles.outliers,
    ]
    return all(is_finite_number(v) for v in values)


def filter_and_sort(items: Iterable[ClassStatsItem], metric: Metric) -> list[ClassStatsItem]:
    """Keep displayable, well-formed specs and rank them by median.

    Args:
        items: Class statistics in upstream order.
        metric: Metric to rank by.

    Returns:
        Items sorted by median descending; ties keep input order.
    """
    _check_metric(metric)
    kept: list[tuple[ClassStatsItem, QuartileSummary]] = []

    for item in items:
        if not is_displayable_spec(item.class_spec):
            continue
        quartiles = get_quartiles(item, metric)
        if not _is_well_formed(quartiles):
            logger.warning(f"Skipping class_spec={item.class_spec}: non-finite {metric} summary")
            continue
        kept.append((item, quartiles))

    kept.sort(key=lambda pair: pair[1].median, reverse=True)
    return [item for item, _ in kept]


def calculate_scale(items: Sequence[ClassStatsItem], metric: Metric) -> tuple[float, float]:
    """Compute the shared scale for a set of buckets.

    The maximum is taken over every bucket's max and every outlier, so one
    far outlier compresses all rows equally.

    Args:
        items: Buckets that will be rendered together.
        metric: Metric being rendered.

    Returns:
        (scale, max_value) with value * scale in [0, 100].

    Raises:
        ValueError: If items is empty or the maximum is not positive.
    """
    if not items:
        raise ValueError("Cannot compute a scale for an empty set")

    max_value = max(get_quartiles(item, metric).upper_bound for item in items)
    if max_value <= 0:
        raise ValueError(f"Cannot compute a scale for max_value={max_value}")

    return AXIS_WIDTH / max_value, max_value


def project(quartiles: QuartileSummary, scale: float) -> BoxPositions:
    """Convert absolute values into axis positions. No clamping."""
    return BoxPositions(
        min=quartiles.min * scale,
        q1=quartiles.q1 * scale,
        median=quartiles.median * scale,
        q3=quartiles.q3 * scale,
        max=quartiles.max * scale,
        avg=quartiles.avg * scale,
        outliers=[value * scale for value in quartiles.outliers],
    )


def summarize(
    items: Iterable[ClassStatsItem],
    metric: Metric,
    limit: int | None = None,
) -> ScaledLayout:
    """Build a ranked, shared-axis layout for one metric.

    Args:
        items: Class statistics from the upstream API.
        metric: 'dps' or 'hps'.
        limit: Keep only the best N specs when positive.

    Returns:
        ScaledLayout. Empty (no rows, no scale) when nothing survives
        filtering or the largest value is not positive.

    Raises:
        ValueError: If metric is not 'dps' or 'hps'.
    """
    ranked = filter_and_sort(items, metric)

    if limit is not None and limit > 0:
        ranked = ranked[:limit]

    if not ranked:
        return ScaledLayout(metric=metric)

    upper = max(get_quartiles(item, metric).upper_bound for item in ranked)
    if upper <= 0:
        logger.info(f"No positive {metric} values across {len(ranked)} specs, empty layout")
        return ScaledLayout(metric=metric)

    scale, max_value = calculate_scale(ranked, metric)

    rows = []
    for item in ranked:
        quartiles = get_quartiles(item, metric)
        rows.append(
            DistributionRow(
                class_spec=item.class_spec,
                count=item.count,
                quartiles=quartiles,
                class_info=class_info(item.class_spec),
                positions=project(quartiles, scale),
            )
        )

    return ScaledLayout(metric=metric, rows=rows, scale=scale, max_value=max_value)
