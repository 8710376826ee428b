# rxburnlogic/utils.py
from __future__ import annotations
import logging
import numpy as np
import pandas as pd
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from typing import Optional

from . import canon

logger = logging.getLogger(__name__)


def resolve_tz(tz: Optional[str], default: str = canon.DEFAULT_TZ) -> str:
    """Return a usable IANA key, falling back to `default` when tz is missing or unknown."""
    if not tz:
        return default
    try:
        ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Unknown timezone {tz!r}; falling back to {default}")
        return default
    return tz


def to_utc_hour(ts: str | pd.Timestamp) -> pd.Timestamp:
    """Parse an instant, convert to UTC and truncate to the hour. Naive input is taken as UTC."""
    t = pd.Timestamp(ts)
    if t.tzinfo is None:
        t = t.tz_localize("UTC")
    else:
        t = t.tz_convert("UTC")
    return t.floor("h")


def ensure_utc_index(df: pd.DataFrame) -> pd.DataFrame:
    idx = pd.DatetimeIndex(df.index)
    if idx.tz is None:
        df = df.tz_localize("UTC")
    else:
        df = df.tz_convert("UTC")
    df.index.name = canon.INDEX_NAME
    return df


def local_index(idx: pd.DatetimeIndex, tz: str) -> pd.DatetimeIndex:
    if idx.tz is None:
        raise ValueError("Index must be tz-aware for local_index.")
    return idx.tz_convert(ZoneInfo(tz))


def floor_nullable(s: pd.Series) -> pd.Series:
    """Floor to whole numbers as nullable Int64; missing stays <NA>, never 0."""
    vals = pd.to_numeric(s, errors="coerce").astype(float)
    # strip float noise first so 70.99999999 from a unit round-trip floors to 71
    floored = np.floor(np.round(vals.to_numpy(), 6))
    return pd.Series(floored, index=s.index, name=s.name).astype("Int64")


def hour_in_range(hours: pd.Series, start: int, end: int) -> pd.Series:
    """Return mask for hours within [start, end] inclusive. Handles wrap-around."""
    if start <= end:
        return (hours >= start) & (hours <= end)
    else:
        # e.g. 22 -> 04 next day
        return (hours >= start) | (hours <= end)


def empty_hourly_index() -> pd.DatetimeIndex:
    return pd.DatetimeIndex([], tz="UTC", name=canon.INDEX_NAME)
