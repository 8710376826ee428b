from __future__ import annotations
import logging
from typing import Any, Mapping, Optional

from . import classify, expand, grid, ingest, normalize, timeline, utils
from .config import EngineConfig, default_config
from .prescription import Prescription
from .types import EvaluationResult, RawFieldSeries

logger = logging.getLogger(__name__)


def evaluate(
    series: Mapping[str, RawFieldSeries],
    prescription: Prescription,
    tz: Optional[str] = None,
    *,
    location: Optional[str] = None,
    config: Optional[EngineConfig] = None,
) -> EvaluationResult:
    """Run the full pipeline once over already-downloaded field series.

    expand -> merge -> normalise (units, local time) -> classify
    -> optional burn-hours filter -> calendar grid.

    Pure and synchronous: nothing here touches the network or shared state,
    and each call builds its own intermediate frames.
    """
    cfg = config or default_config()
    tzname = utils.resolve_tz(tz, cfg.default_tz)

    expanded = expand.expand_all(series)
    frame = timeline.merge_to_frame(expanded)
    normalized = normalize.normalize(frame, tzname, config=cfg)
    evaluated = classify.classify(normalized, prescription)
    if cfg.burn_hours is not None:
        start, end = cfg.burn_hours
        evaluated = classify.filter_burn_hours(evaluated, start, end)
        logger.debug(f"Kept {len(evaluated)} hours in burn window {start:02d}-{end:02d}")

    days = grid.build_calendar(evaluated, tzname, config=cfg)
    return EvaluationResult(records=evaluated, grid=days, tz=tzname, location=location)


def evaluate_payload(
    payload: Mapping[str, Any],
    prescription: Prescription,
    tz: Optional[str] = None,
    *,
    location: Optional[str] = None,
    config: Optional[EngineConfig] = None,
) -> EvaluationResult:
    """evaluate() straight from an NWS grid document; tz defaults to its 'timeZone'."""
    series = ingest.from_grid_payload(payload)
    return evaluate(
        series,
        prescription,
        tz or ingest.timezone_of(payload),
        location=location,
        config=config,
    )
