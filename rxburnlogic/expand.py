from __future__ import annotations
import logging
import re
import pandas as pd
from typing import Mapping, Optional

from . import canon, exceptions, utils
from .types import RawFieldSeries, RawInterval

logger = logging.getLogger(__name__)

# Day and hour components of a duration: ISO 8601 ("P1DT3H", "PT6H", "P2D"),
# bare ("3H") or spelled out ("1 day, 3 hours").
_DAYS_RE = re.compile(r"(\d+)\s*D", re.IGNORECASE)
_HOURS_RE = re.compile(r"(\d+)\s*H", re.IGNORECASE)


def parse_duration(text: str) -> int:
    """
    Decode a duration into whole hours (days * 24 + hours).

    Either component may be absent and counts as 0. A string with neither
    raises MalformedDuration rather than silently expanding to nothing.
    """
    if not isinstance(text, str):
        raise exceptions.MalformedDuration(f"Duration must be a string, got {text!r}")
    days = _DAYS_RE.search(text)
    hours = _HOURS_RE.search(text)
    if days is None and hours is None:
        raise exceptions.MalformedDuration(
            f"Duration {text!r} has no day or hour component."
        )
    total = 0
    if days is not None:
        total += int(days.group(1)) * 24
    if hours is not None:
        total += int(hours.group(1))
    return total


def parse_valid_time(valid_time: str) -> tuple[pd.Timestamp, int]:
    """Split '2024-01-01T00:00:00+00:00/PT3H' into (UTC hour start, hours)."""
    start_s, sep, dur_s = str(valid_time).partition("/")
    if not sep:
        raise exceptions.MalformedDuration(
            f"validTime {valid_time!r} has no '/<duration>' part."
        )
    try:
        start = utils.to_utc_hour(start_s)
    except ValueError as e:
        raise exceptions.IngestError(
            f"validTime {valid_time!r} has an unparseable start: {e}"
        ) from e
    return start, parse_duration(dur_s)


def make_interval(
    start: str | pd.Timestamp, duration: str | int, value: Optional[float]
) -> RawInterval:
    """Build a RawInterval from a start instant and a duration string or hour count."""
    hours = parse_duration(duration) if isinstance(duration, str) else int(duration)
    return RawInterval(start=utils.to_utc_hour(start), duration_hours=hours, value=value)


def interval_from_valid_time(valid_time: str, value: Optional[float]) -> RawInterval:
    start, hours = parse_valid_time(valid_time)
    return RawInterval(start=start, duration_hours=hours, value=value)


def expand_interval(
    start: pd.Timestamp, duration_hours: int, value: Optional[float]
) -> pd.Series:
    """
    One sample per covered hour: start + 0h, +1h, ... +(duration_hours - 1)h,
    each carrying `value` unchanged. duration_hours <= 0 gives an empty Series.
    """
    n = max(int(duration_hours), 0)
    if n == 0:
        return pd.Series([], index=utils.empty_hourly_index(), dtype="float64")
    idx = pd.date_range(
        utils.to_utc_hour(start), periods=n, freq="h", name=canon.INDEX_NAME
    )
    return pd.Series([value] * n, index=idx, dtype="float64")


def expand_field(series: Optional[RawFieldSeries]) -> pd.Series:
    """
    Expand every interval of a field and concatenate in interval order.

    The result is not sorted and may repeat an hour if the source overlaps.
    An absent or empty field gives an empty Series.
    """
    name = series.name if series is not None else None
    parts = [
        expand_interval(iv.start, iv.duration_hours, iv.value)
        for iv in (series.intervals if series is not None else [])
    ]
    parts = [p for p in parts if len(p)]
    if not parts:
        return pd.Series(
            [], index=utils.empty_hourly_index(), dtype="float64", name=name
        )
    out = pd.concat(parts)
    out.index.name = canon.INDEX_NAME
    out.name = name
    return out


def expand_all(raw: Mapping[str, RawFieldSeries]) -> dict[str, pd.Series]:
    out = {name: expand_field(s) for name, s in raw.items()}
    logger.debug(
        "Expanded fields: "
        + ", ".join(f"{k}={len(v)}" for k, v in sorted(out.items()))
    )
    return out
