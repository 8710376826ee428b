from __future__ import annotations
import logging
import pandas as pd
from typing import Callable, Optional, TypeVar

from . import canon, utils, validate
from .config import EngineConfig, default_config
from .types import ForecastFrame

logger = logging.getLogger(__name__)

T = TypeVar("T", float, pd.Series)


def c_to_f(c: Optional[T]) -> Optional[T]:
    if c is None:
        return None
    return c * 9.0 / 5.0 + 32.0


def kmh_to_mph(kmh: Optional[T]) -> Optional[T]:
    if kmh is None:
        return None
    return kmh * canon.KMH_TO_MPH


def m_to_ft(m: Optional[T]) -> Optional[T]:
    if m is None:
        return None
    return m * canon.M_TO_FT


CONVERTERS: dict[str, Callable] = {
    "c_to_f": c_to_f,
    "kmh_to_mph": kmh_to_mph,
    "m_to_ft": m_to_ft,
}


def convert_units(df: ForecastFrame) -> ForecastFrame:
    """
    Apply each field's unit conversion and floor to a whole display value.

    Converted columns become nullable Int64 so a missing input stays <NA>.
    Fields without a conversion (percentages, directions) are left untouched.
    """
    out = df.copy()
    for field, key in canon.FIELD_CONVERSIONS.items():
        if field not in out.columns:
            continue
        conv = CONVERTERS[key]
        out[field] = utils.floor_nullable(conv(out[field].astype("float64")))
    return out


def localize(
    df: ForecastFrame, tz: Optional[str], *, config: Optional[EngineConfig] = None
) -> ForecastFrame:
    """
    Add local wall-clock columns derived from the UTC index:
      - local_time: tz-aware timestamp in `tz`
      - date: local calendar date string (config.date_format)
      - hour: local hour 0..23
      - display: human-readable label (config.display_format)
    """
    cfg = config or default_config()
    tzname = utils.resolve_tz(tz, cfg.default_tz)
    local = utils.local_index(pd.DatetimeIndex(df.index), tzname)

    out = df.copy()
    out["local_time"] = local
    out["date"] = local.strftime(cfg.date_format)
    out["hour"] = local.hour.astype(int)
    out["display"] = local.strftime(cfg.display_format)
    out.attrs["tz"] = tzname
    return out


def normalize(
    df: ForecastFrame, tz: Optional[str] = None, *, config: Optional[EngineConfig] = None
) -> ForecastFrame:
    validate.assert_forecast_frame(df)
    out = localize(convert_units(df), tz, config=config)
    logger.debug(f"Normalized {len(out)} records to {out.attrs['tz']}")
    return out
