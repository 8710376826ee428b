from __future__ import annotations
import logging
import math
import numpy as np
import pandas as pd
from typing import Any, Mapping

from . import canon, utils, validate, wind
from .prescription import Prescription, PrescriptionCriteria
from .types import ForecastFrame, Status

logger = logging.getLogger(__name__)


def _missing(v: Any) -> bool:
    if v is None or v is pd.NA:
        return True
    return isinstance(v, float) and math.isnan(v)


def _complete_mask(df: pd.DataFrame) -> pd.Series:
    return df[canon.REQUIRED_FOR_CLASSIFY].notna().all(axis=1)


def _tier_mask(df: pd.DataFrame, crit: PrescriptionCriteria) -> pd.Series:
    return (
        crit.temperature.mask(df["temperature"])
        & crit.humidity.mask(df["humidity"])
        & crit.wind_speed.mask(df["wind_speed"])
        & wind.sector_mask(df["wind_direction"], crit.wind_directions)
    )


def _tier_matches(record: Mapping[str, Any], crit: PrescriptionCriteria) -> bool:
    return (
        crit.temperature.contains(float(record["temperature"]))
        and crit.humidity.contains(float(record["humidity"]))
        and crit.wind_speed.contains(float(record["wind_speed"]))
        and wind.heading_matches(float(record["wind_direction"]), crit.wind_directions)
    )


def status_for(record: Mapping[str, Any], prescription: Prescription) -> Status:
    """Classify one normalised record (degF, %, mph, degrees)."""
    if any(_missing(record.get(f)) for f in canon.REQUIRED_FOR_CLASSIFY):
        return "insufficient_data"
    if _tier_matches(record, prescription.preferred):
        return "preferred"
    if _tier_matches(record, prescription.acceptable):
        return "acceptable"
    return "unsuitable"


def classify(df: ForecastFrame, prescription: Prescription) -> ForecastFrame:
    """
    Add a 'status' column to a normalised frame.

    Order of checks per hour:
      1. any of temperature/humidity/wind_speed/wind_direction missing -> insufficient_data
      2. all preferred conditions hold -> preferred
      3. all acceptable conditions hold -> acceptable
      4. otherwise unsuitable
    """
    validate.assert_forecast_frame(df)
    complete = _complete_mask(df)
    preferred = _tier_mask(df, prescription.preferred)
    acceptable = _tier_mask(df, prescription.acceptable)

    out = df.copy()
    out["status"] = np.select(
        [~complete.to_numpy(), preferred.to_numpy(), acceptable.to_numpy()],
        ["insufficient_data", "preferred", "acceptable"],
        default="unsuitable",
    )
    logger.debug(
        "Classified hours: "
        + ", ".join(f"{k}={v}" for k, v in out["status"].value_counts().items())
    )
    return out


def filter_burn_hours(
    df: ForecastFrame, start: int = canon.DEFAULT_BURN_HOURS[0], end: int = canon.DEFAULT_BURN_HOURS[1]
) -> ForecastFrame:
    """Keep hours whose local hour lies in [start, end], inclusive (default 08 to 20)."""
    validate.assert_normalized(df)
    mask = utils.hour_in_range(df["hour"], start, end)
    return df.loc[mask.to_numpy()]
