from __future__ import annotations
import logging
from typing import Any, Mapping, Optional

from . import canon, exceptions, expand
from .types import RawFieldSeries, RawInterval

logger = logging.getLogger(__name__)


def _properties(payload: Mapping[str, Any]) -> Mapping[str, Any]:
    """Accept the whole grid document or just its 'properties' object."""
    if not isinstance(payload, Mapping):
        raise exceptions.IngestError(
            f"Grid payload must be a mapping, got {type(payload).__name__}."
        )
    props = payload.get("properties", payload)
    if not isinstance(props, Mapping):
        raise exceptions.IngestError("Grid payload 'properties' must be a mapping.")
    return props


def _value(item: Mapping[str, Any], prop: str) -> Optional[float]:
    v = item.get("value")
    if v is None:
        return None
    try:
        return float(v)
    except (TypeError, ValueError) as e:
        raise exceptions.IngestError(
            f"Non-numeric value {v!r} in '{prop}' at {item.get('validTime')!r}."
        ) from e


def _intervals(node: Mapping[str, Any], prop: str) -> list[RawInterval]:
    values = node.get("values")
    if not isinstance(values, list):
        raise exceptions.IngestError(f"Property '{prop}' has no 'values' list.")
    out: list[RawInterval] = []
    for item in values:
        if not isinstance(item, Mapping) or "validTime" not in item:
            raise exceptions.IngestError(f"Entry in '{prop}' is missing 'validTime'.")
        out.append(expand.interval_from_valid_time(item["validTime"], _value(item, prop)))
    return out


def from_grid_payload(
    payload: Mapping[str, Any],
    *,
    property_map: Optional[dict[str, str]] = None,
) -> dict[str, RawFieldSeries]:
    """
    Parse an NWS forecastGridData document into one RawFieldSeries per field.

    - Property names are mapped to fields via canon.GRID_PROPERTY_MAP.
    - Properties absent from the payload are omitted; downstream records just
      lack that field.
    - A declared unit that differs from the one conversions expect raises
      IngestError instead of producing wrong numbers.
    - Malformed validTime durations raise MalformedDuration.
    """
    property_map = property_map or canon.GRID_PROPERTY_MAP
    props = _properties(payload)

    out: dict[str, RawFieldSeries] = {}
    for prop, field in property_map.items():
        node = props.get(prop)
        if node is None:
            logger.debug(f"Grid payload has no '{prop}'; skipping")
            continue
        if not isinstance(node, Mapping):
            raise exceptions.IngestError(f"Property '{prop}' must be a mapping.")
        uom = node.get("uom")
        expected = canon.EXPECTED_UOM.get(field)
        if uom is not None and expected is not None and uom != expected:
            raise exceptions.IngestError(
                f"Property '{prop}' is in {uom}; expected {expected}."
            )
        out[field] = RawFieldSeries(name=field, intervals=_intervals(node, prop), uom=uom)

    logger.debug(f"Ingested {len(out)} of {len(property_map)} grid fields")
    return out


def timezone_of(payload: Mapping[str, Any]) -> Optional[str]:
    """IANA timezone from a points/grid document's 'timeZone', if present."""
    tz = _properties(payload).get("timeZone")
    return tz if isinstance(tz, str) and tz else None
