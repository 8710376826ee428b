from __future__ import annotations
import math
import pandas as pd
from typing import Iterable, Optional

from . import canon, exceptions


def check_octants(octants: Iterable[str]) -> frozenset[str]:
    """Return the selection as a frozenset, rejecting labels outside N..NW."""
    sel = frozenset(o.strip().upper() for o in octants)
    unknown = sorted(sel - set(canon.OCTANTS))
    exceptions.require(
        not unknown,
        f"Unknown wind octant(s): {', '.join(unknown)}. Expected one of: {', '.join(canon.OCTANTS)}.",
        exceptions.PrescriptionError,
    )
    return sel


def _wrap(h: float) -> float:
    return h if 0.0 <= h <= 360.0 else h % 360.0


def heading_matches(heading: Optional[float], octants: Iterable[str]) -> bool:
    """
    True if `heading` (degrees) lies in any selected octant, bounds inclusive.

    An empty selection places no constraint and matches every heading.
    A missing heading never matches a non-empty selection.
    """
    sel = check_octants(octants)
    if not sel:
        return True
    if heading is None or (isinstance(heading, float) and math.isnan(heading)):
        return False
    h = _wrap(float(heading))
    return any(lo <= h <= hi for o in sel for lo, hi in canon.OCTANT_RANGES[o])


def sector_mask(headings: pd.Series, octants: Iterable[str]) -> pd.Series:
    """Vectorised heading_matches over a Series of headings."""
    sel = check_octants(octants)
    h = pd.to_numeric(headings, errors="coerce").astype("float64")
    if not sel:
        return pd.Series(True, index=h.index)
    h = h.where((h >= 0) & (h <= 360), h % 360)
    mask = pd.Series(False, index=h.index)
    for o in sel:
        for lo, hi in canon.OCTANT_RANGES[o]:
            mask |= h.between(lo, hi, inclusive="both")
    return mask


def octants_for(heading: Optional[float]) -> list[str]:
    """All octants containing `heading`; two on a shared boundary degree."""
    if heading is None or (isinstance(heading, float) and math.isnan(heading)):
        return []
    h = _wrap(float(heading))
    return [
        o
        for o in canon.OCTANTS
        if any(lo <= h <= hi for lo, hi in canon.OCTANT_RANGES[o])
    ]
