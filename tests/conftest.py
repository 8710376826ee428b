import pandas as pd
import pytest

from rxburnlogic import timeline
from rxburnlogic.prescription import Prescription, PrescriptionCriteria, PrescriptionRange
from rxburnlogic.types import MergedRecord

TZ = "America/Denver"


@pytest.fixture
def h0():
    return pd.Timestamp("2024-06-01T00:00:00Z")


@pytest.fixture
def make_frame(h0):
    """Build a ForecastFrame from one dict of field values per consecutive hour."""

    def _make(rows, start=None):
        t0 = pd.Timestamp(start) if start is not None else h0
        recs = [
            MergedRecord(instant=t0 + pd.Timedelta(hours=i), fields=dict(r))
            for i, r in enumerate(rows)
        ]
        return timeline.to_frame(recs)

    return _make


@pytest.fixture
def prescription():
    # preferred: 40-70F, 25-40% RH, 4-10 mph, from S/SW
    # acceptable: 35-75F, 20-55% RH, 2-15 mph, any direction
    return Prescription(
        preferred=PrescriptionCriteria(
            temperature=PrescriptionRange(min=40, max=70),
            humidity=PrescriptionRange(min=25, max=40),
            wind_speed=PrescriptionRange(min=4, max=10),
            wind_directions={"S", "SW"},
        ),
        acceptable=PrescriptionCriteria(
            temperature=PrescriptionRange(min=35, max=75),
            humidity=PrescriptionRange(min=20, max=55),
            wind_speed=PrescriptionRange(min=2, max=15),
        ),
    )


@pytest.fixture
def grid_payload():
    # Trimmed NWS forecastGridData document (values in degC, km/h, m)
    return {
        "properties": {
            "timeZone": TZ,
            "temperature": {
                "uom": "wmoUnit:degC",
                "values": [
                    {"validTime": "2024-06-01T12:00:00+00:00/PT2H", "value": 20},
                    {"validTime": "2024-06-01T14:00:00+00:00/PT1H", "value": 22.2},
                ],
            },
            "relativeHumidity": {
                "uom": "wmoUnit:percent",
                "values": [
                    {"validTime": "2024-06-01T12:00:00+00:00/PT3H", "value": 35},
                ],
            },
            "windSpeed": {
                "uom": "wmoUnit:km_h-1",
                "values": [
                    {"validTime": "2024-06-01T12:00:00+00:00/PT3H", "value": 12.964},
                ],
            },
            "windDirection": {
                "uom": "wmoUnit:degree_(angle)",
                "values": [
                    {"validTime": "2024-06-01T12:00:00+00:00/PT1H", "value": 200},
                    {"validTime": "2024-06-01T13:00:00+00:00/PT2H", "value": 90},
                ],
            },
        }
    }
