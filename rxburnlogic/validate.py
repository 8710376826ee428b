from __future__ import annotations
import pandas as pd
from typing import cast

from . import canon, exceptions


def assert_forecast_frame(df: pd.DataFrame) -> None:
    if df.index.name != canon.INDEX_NAME:
        raise exceptions.FrameError(f"Index must be '{canon.INDEX_NAME}'.")
    if not isinstance(df.index, pd.DatetimeIndex):
        raise exceptions.FrameError("Index must be a DatetimeIndex.")
    tz_index = cast(pd.DatetimeIndex, df.index)
    if tz_index.tz is None:
        raise exceptions.FrameError("Index must be tz-aware.")
    if not (tz_index.is_monotonic_increasing and tz_index.is_unique):
        raise exceptions.FrameError("Index must be strictly increasing.")
    for col in canon.FIELDS:
        if col not in df.columns:
            raise exceptions.FrameError(f"Missing required column '{col}'.")


def assert_normalized(df: pd.DataFrame) -> None:
    """Checks a frame carries the local-time columns written by normalize()."""
    assert_forecast_frame(df)
    for col in ("local_time", "date", "hour"):
        if col not in df.columns:
            raise exceptions.FrameError(
                f"Missing '{col}'; run normalize.normalize() first."
            )
