from __future__ import annotations
import logging
import pandas as pd
from datetime import date
from typing import Any, Dict, List, Optional

from . import canon, exceptions, utils, validate, wind
from .config import EngineConfig, default_config
from .types import CalendarDay, ForecastFrame, HourSlot

logger = logging.getLogger(__name__)

HOURS = range(24)


def _record(instant: pd.Timestamp, row: pd.Series) -> Dict[str, Any]:
    rec: Dict[str, Any] = {canon.INDEX_NAME: instant}
    for k, v in row.items():
        rec[str(k)] = None if pd.isna(v) else v
    rec["wind_octants"] = wind.octants_for(rec.get("wind_direction"))
    return rec


def build_calendar(
    df: ForecastFrame,
    tz: Optional[str] = None,
    *,
    config: Optional[EngineConfig] = None,
) -> List[CalendarDay]:
    """
    Bucket evaluated records by local calendar date and local hour.

    - Dates ascending; each date has 24 slots (hour 0..23).
    - Two records landing in the same bucket (DST fall-back): last one wins.
    - Hours without a record get status 'no_data' and no record, which is
      distinct from a record whose status is 'insufficient_data'.
    """
    validate.assert_forecast_frame(df)
    exceptions.require(
        "status" in df.columns,
        "Frame has no 'status' column; run classify.classify() first.",
        exceptions.FrameError,
    )
    cfg = config or default_config()
    tzname = utils.resolve_tz(tz or df.attrs.get("tz"), cfg.default_tz)
    local = utils.local_index(pd.DatetimeIndex(df.index), tzname)

    buckets: Dict[date, Dict[int, Dict[str, Any]]] = {}
    for instant, lt, (_, row) in zip(df.index, local, df.iterrows()):
        buckets.setdefault(lt.date(), {})[lt.hour] = _record(instant, row)

    days: List[CalendarDay] = []
    for d in sorted(buckets):
        by_hour = buckets[d]
        slots = [
            HourSlot(hour=h, status=by_hour[h]["status"], record=by_hour[h])
            if h in by_hour
            else HourSlot(hour=h, status=canon.NO_DATA)  # type: ignore[arg-type]
            for h in HOURS
        ]
        days.append(CalendarDay(date=d, slots=slots))
    logger.debug(f"Calendar grid: {len(days)} days in {tzname}")
    return days


def status_table(days: List[CalendarDay]) -> pd.DataFrame:
    """Date x hour table of slot statuses, for tabular consumers."""
    out = pd.DataFrame(
        [[s.status for s in d.slots] for d in days],
        index=pd.Index([d.date for d in days], name="date"),
        columns=list(HOURS),
    )
    return out
