"""Class statistics API endpoint.

POST /api/statistics/classes/summary - Rank class specs on a shared box/whisker axis
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query

from encounterstats.aggregation.distribution import summarize
from encounterstats.models.domain import DistributionRow, ScaledLayout
from encounterstats.models.types import (
    ClassDistributionResponse,
    ClassStatsResponse,
    DistributionRowDetail,
    QuartileDetail,
)

router = APIRouter()


def _build_row_detail(row: DistributionRow) -> DistributionRowDetail:
    """Build DistributionRowDetail from a DistributionRow."""
    quartiles = row.quartiles
    positions = row.positions

    return DistributionRowDetail(
        classSpec=row.class_spec,
        count=row.count,
        specName=row.class_info.name,
        className=row.class_info.class_name,
        color=row.class_info.color,
        role=row.class_info.role,
        quartiles=QuartileDetail(
            min=quartiles.min,
            q1=quartiles.q1,
            median=quartiles.median,
            q3=quartiles.q3,
            max=quartiles.max,
            avg=quartiles.avg,
            outliers=quartiles.outliers,
        ),
        positions=QuartileDetail(
            min=positions.min,
            q1=positions.q1,
            median=positions.median,
            q3=positions.q3,
            max=positions.max,
            avg=positions.avg,
            outliers=positions.outliers,
        ),
    )


def _build_response(layout: ScaledLayout) -> ClassDistributionResponse:
    return ClassDistributionResponse(
        metric=layout.metric,
        empty=layout.is_empty,
        scale=layout.scale,
        maxValue=layout.max_value,
        rows=[_build_row_detail(row) for row in layout.rows],
    )


@router.post("/statistics/classes/summary", response_model=ClassDistributionResponse)
def post_class_summary(
    payload: ClassStatsResponse,
    metric: str = Query(...),
    limit: int | None = Query(None, ge=0),
) -> ClassDistributionResponse:
    """Summarize class statistics for one metric.

    Args:
        payload: Class statistics as returned by the upstream API.
        metric: 'dps' or 'hps'.
        limit: Keep only the best N specs.

    Returns:
        ClassDistributionResponse; empty=True with null scale when
        nothing can be displayed.

    Raises:
        HTTPException: 400 if metric is not supported.
    """
    try:
        layout = summarize(payload.classes, metric, limit)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    return _build_response(layout)
