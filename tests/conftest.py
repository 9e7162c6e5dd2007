"""Shared pytest fixtures for encounterstats tests."""

import pytest
from fastapi.testclient import TestClient

from encounterstats.models.types import ClassStatsItem, OutlierDTO


@pytest.fixture
def client():
    """Create a TestClient against a fresh app."""
    from encounterstats.api.app import create_app

    return TestClient(create_app())


@pytest.fixture
def make_class_item():
    """Factory for ClassStatsItem with flat dps/hps summaries."""

    def _make(
        class_spec: int,
        dps_median: float = 100.0,
        dps_max: float | None = None,
        hps_median: float = 10.0,
        hps_max: float | None = None,
        outliers: list[tuple[str, float]] | None = None,
        count: int = 10,
    ) -> ClassStatsItem:
        dps_max = dps_median * 2 if dps_max is None else dps_max
        hps_max = hps_median * 2 if hps_max is None else hps_max
        return ClassStatsItem(
            class_spec=class_spec,
            count=count,
            avg_dps=dps_median,
            dps_q1=dps_median * 0.75,
            dps_median=dps_median,
            dps_q3=dps_median * 1.25,
            dps_min=dps_median * 0.5,
            dps_max=dps_max,
            avg_hps=hps_median,
            hps_q1=hps_median * 0.75,
            hps_median=hps_median,
            hps_q3=hps_median * 1.25,
            hps_min=hps_median * 0.5,
            hps_max=hps_max,
            outliers=[
                OutlierDTO(type=kind, encounterId=i, value=value)
                for i, (kind, value) in enumerate(outliers or [])
            ],
        )

    return _make
