from __future__ import annotations
from typing import Literal, List, Dict, Optional, Any
from dataclasses import dataclass, field
from datetime import date

import pandas as pd

Octant = Literal["N", "NE", "E", "SE", "S", "SW", "W", "NW"]
Status = Literal["preferred", "acceptable", "unsuitable", "insufficient_data"]
SlotStatus = Literal[
    "preferred", "acceptable", "unsuitable", "insufficient_data", "no_data"
]


# Hourly forecast frame
class ForecastFrame(pd.DataFrame):
    """
    Strongly-typed hourly forecast dataframe.

    Expected:
      - DatetimeIndex named 'valid_time', tz-aware (UTC), strictly increasing
      - One column per known field (see canon.FIELDS); missing values are NaN/<NA>
      - After normalisation: 'local_time', 'date', 'hour', 'display'
      - After classification: 'status'
    """

    @property
    def _constructor(self):
        return ForecastFrame

    @property
    def temperature(self) -> pd.Series:
        return self["temperature"]

    @property
    def humidity(self) -> pd.Series:
        return self["humidity"]

    @property
    def wind_speed(self) -> pd.Series:
        return self["wind_speed"]

    @property
    def wind_direction(self) -> pd.Series:
        return self["wind_direction"]

    @property
    def status(self) -> pd.Series:
        return self["status"]


## Raw input
@dataclass(frozen=True)
class RawInterval:
    start: pd.Timestamp  # hour-aligned, UTC
    duration_hours: int
    value: Optional[float]


@dataclass
class RawFieldSeries:
    name: str
    intervals: List[RawInterval] = field(default_factory=list)
    uom: Optional[str] = None

    def __len__(self) -> int:
        return len(self.intervals)


## Merged timeline
@dataclass
class MergedRecord:
    instant: pd.Timestamp
    # only fields that covered this hour have a key; explicit nulls are None
    fields: Dict[str, Optional[float]] = field(default_factory=dict)


## Calendar grid
@dataclass
class HourSlot:
    hour: int  # local hour 0..23
    status: SlotStatus
    record: Optional[Dict[str, Any]] = None


@dataclass
class CalendarDay:
    date: date
    slots: List[HourSlot]

    def slot(self, hour: int) -> HourSlot:
        return self.slots[hour]


@dataclass
class EvaluationResult:
    records: ForecastFrame
    grid: List[CalendarDay]
    tz: str
    location: Optional[str] = None

    def to_records(self) -> List[Dict[str, Any]]:
        """Flat per-hour export; missing values become None."""
        df = self.records.reset_index()
        df = df.astype(object).where(df.notna(), None)
        return df.to_dict(orient="records")  # type: ignore[return-value]
