from __future__ import annotations
import logging
import math
import pandas as pd
from typing import Iterable, Mapping, Optional

from . import canon, utils
from .types import ForecastFrame, MergedRecord

logger = logging.getLogger(__name__)


def _as_value(v) -> Optional[float]:
    if v is None:
        return None
    f = float(v)
    return None if math.isnan(f) else f


def merge_fields(expanded: Mapping[str, pd.Series]) -> list[MergedRecord]:
    """
    Union per-field hourly samples into one record per distinct instant.

    - Upserts a record per sample and sets fields[name] = value.
    - Within one field the later sample for an hour wins.
    - Fields are visited in sorted-name order, so the result does not
      depend on mapping iteration order.
    - A field that never covered an instant has no key in that record.
    """
    records: dict[pd.Timestamp, MergedRecord] = {}
    for name in sorted(expanded):
        samples = expanded[name]
        for instant, value in zip(pd.DatetimeIndex(samples.index), samples.to_numpy()):
            rec = records.get(instant)
            if rec is None:
                rec = records[instant] = MergedRecord(instant=instant)
            rec.fields[name] = _as_value(value)
    out = [records[k] for k in sorted(records)]
    logger.debug(f"Merged {len(expanded)} fields into {len(out)} hourly records")
    return out


def to_frame(records: Iterable[MergedRecord]) -> ForecastFrame:
    """
    Tabulate merged records as a ForecastFrame.

    Columns are canon.FIELDS followed by any extra field names seen (sorted);
    absent and null values are both NaN here.
    """
    records = list(records)
    extra = sorted(
        {k for r in records for k in r.fields if k not in canon.FIELDS}
    )
    columns = [*canon.FIELDS, *extra]
    if not records:
        out = pd.DataFrame(columns=columns, index=utils.empty_hourly_index(), dtype="float64")
    else:
        idx = pd.DatetimeIndex([r.instant for r in records], name=canon.INDEX_NAME)
        out = pd.DataFrame(
            [r.fields for r in records], index=idx, columns=columns, dtype="float64"
        )
    out = utils.ensure_utc_index(out.sort_index())
    out.__class__ = ForecastFrame
    return out  # type: ignore[return-value]


def merge_to_frame(expanded: Mapping[str, pd.Series]) -> ForecastFrame:
    return to_frame(merge_fields(expanded))
