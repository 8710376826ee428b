from __future__ import annotations
import math
from typing import Any, Mapping, Optional

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from . import exceptions, wind
from .types import Octant


class PrescriptionRange(BaseModel):
    """Inclusive [min, max] bounds over one scalar quantity."""

    model_config = ConfigDict(frozen=True)

    min: float
    max: float

    @model_validator(mode="after")
    def _ordered(self) -> "PrescriptionRange":
        exceptions.require(
            self.min <= self.max,
            f"Range min {self.min} is greater than max {self.max}.",
            exceptions.PrescriptionError,
        )
        return self

    def contains(self, value: Optional[float]) -> bool:
        if value is None or (isinstance(value, float) and math.isnan(value)):
            return False
        return self.min <= value <= self.max

    def mask(self, s: pd.Series) -> pd.Series:
        """Vectorised contains(); missing values are False."""
        vals = pd.to_numeric(s, errors="coerce").astype("float64")
        return vals.between(self.min, self.max, inclusive="both")


class PrescriptionCriteria(BaseModel):
    model_config = ConfigDict(frozen=True)

    temperature: PrescriptionRange  # degF
    humidity: PrescriptionRange  # %
    wind_speed: PrescriptionRange  # mph
    # empty = any heading
    wind_directions: frozenset[Octant] = frozenset()

    @field_validator("wind_directions", mode="before")
    @classmethod
    def _octants(cls, v: Any) -> frozenset[str]:
        if v is None:
            return frozenset()
        if isinstance(v, str):
            v = [v]
        return wind.check_octants(v)


class Prescription(BaseModel):
    """Preferred tier is tried first, then acceptable."""

    model_config = ConfigDict(frozen=True)

    preferred: PrescriptionCriteria
    acceptable: PrescriptionCriteria


## Saved planner settings
class _SettingsRange(BaseModel):
    min: float
    max: float


class _SettingsCriteria(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    temp: _SettingsRange
    rh: _SettingsRange
    wind_speed: _SettingsRange = Field(alias="windSpeed")
    wind_dirs: list[str] = Field(default_factory=list, alias="windDirs")

    def criteria(self) -> PrescriptionCriteria:
        return PrescriptionCriteria(
            temperature=PrescriptionRange(min=self.temp.min, max=self.temp.max),
            humidity=PrescriptionRange(min=self.rh.min, max=self.rh.max),
            wind_speed=PrescriptionRange(min=self.wind_speed.min, max=self.wind_speed.max),
            wind_directions=self.wind_dirs,
        )


class BurnPlannerSettings(BaseModel):
    """
    The planner's saved form blob.

    Shape:
      {propertyName, lat, lon,
       preferred: {temp: {min, max}, rh: {min, max}, windSpeed: {min, max}, windDirs: [...]},
       acceptable: {...}}

    Numbers may arrive as strings, as the form stored them.
    """

    model_config = ConfigDict(populate_by_name=True)

    property_name: str = Field(default="", alias="propertyName")
    lat: Optional[float] = None
    lon: Optional[float] = None
    preferred: _SettingsCriteria
    acceptable: _SettingsCriteria

    @field_validator("lat", "lon", mode="before")
    @classmethod
    def _blank_coord(cls, v: Any) -> Any:
        return None if v == "" else v

    def prescription(self) -> Prescription:
        return Prescription(
            preferred=self.preferred.criteria(),
            acceptable=self.acceptable.criteria(),
        )


def parse_settings(blob: Mapping[str, Any]) -> BurnPlannerSettings:
    try:
        return BurnPlannerSettings.model_validate(dict(blob))
    except ValidationError as e:
        raise exceptions.PrescriptionError(f"Invalid planner settings: {e}") from e


def from_settings(blob: Mapping[str, Any]) -> Prescription:
    """Build a Prescription from the planner's saved settings blob."""
    return parse_settings(blob).prescription()


def to_settings(
    prescription: Prescription,
    *,
    property_name: str = "",
    lat: Optional[float] = None,
    lon: Optional[float] = None,
) -> dict[str, Any]:
    """Inverse of from_settings(): the blob shape the planner saves."""

    def _crit(c: PrescriptionCriteria) -> dict[str, Any]:
        return {
            "temp": {"min": c.temperature.min, "max": c.temperature.max},
            "rh": {"min": c.humidity.min, "max": c.humidity.max},
            "windSpeed": {"min": c.wind_speed.min, "max": c.wind_speed.max},
            "windDirs": sorted(c.wind_directions),
        }

    return {
        "propertyName": property_name,
        "lat": lat,
        "lon": lon,
        "preferred": _crit(prescription.preferred),
        "acceptable": _crit(prescription.acceptable),
    }
