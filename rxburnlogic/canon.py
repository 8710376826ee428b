from __future__ import annotations
from typing import Final, Dict, Tuple

INDEX_NAME: Final[str] = "valid_time"
DEFAULT_TZ: Final[str] = "UTC"

# Closed field set, in column order for every ForecastFrame
FIELDS: Final[list[str]] = [
    "temperature",
    "dewpoint",
    "humidity",
    "wind_speed",
    "wind_direction",
    "sky_cover",
    "precip_probability",
    "mixing_height",
    "transport_wind_speed",
    "transport_wind_direction",
]

# Fields that must all be present before a prescription tier is tried
REQUIRED_FOR_CLASSIFY: Final[list[str]] = [
    "temperature",
    "humidity",
    "wind_speed",
    "wind_direction",
]

# NWS forecastGridData property -> field
GRID_PROPERTY_MAP: Dict[str, str] = {
    "temperature": "temperature",
    "dewpoint": "dewpoint",
    "relativeHumidity": "humidity",
    "windSpeed": "wind_speed",
    "windDirection": "wind_direction",
    "skyCover": "sky_cover",
    "probabilityOfPrecipitation": "precip_probability",
    "mixingHeight": "mixing_height",
    "transportWindsSpeed": "transport_wind_speed",
    "transportWindsDirection": "transport_wind_direction",
}

# field -> unit conversion key (see normalize.CONVERTERS)
FIELD_CONVERSIONS: Dict[str, str] = {
    "temperature": "c_to_f",
    "dewpoint": "c_to_f",
    "wind_speed": "kmh_to_mph",
    "transport_wind_speed": "kmh_to_mph",
    "mixing_height": "m_to_ft",
}

# Units the conversions assume, as declared in the grid payload 'uom'
EXPECTED_UOM: Dict[str, str] = {
    "temperature": "wmoUnit:degC",
    "dewpoint": "wmoUnit:degC",
    "humidity": "wmoUnit:percent",
    "wind_speed": "wmoUnit:km_h-1",
    "wind_direction": "wmoUnit:degree_(angle)",
    "transport_wind_speed": "wmoUnit:km_h-1",
    "transport_wind_direction": "wmoUnit:degree_(angle)",
    "mixing_height": "wmoUnit:m",
}

KMH_TO_MPH: Final[float] = 0.621371
M_TO_FT: Final[float] = 3.28084

# Inclusive degree ranges per compass octant. Neighbours share their boundary degree.
OCTANT_RANGES: Dict[str, Tuple[Tuple[int, int], ...]] = {
    "N": ((338, 360), (0, 22)),
    "NE": ((22, 67),),
    "E": ((67, 112),),
    "SE": ((112, 157),),
    "S": ((157, 202),),
    "SW": ((202, 247),),
    "W": ((247, 292),),
    "NW": ((292, 338),),
}
OCTANTS: Final[list[str]] = list(OCTANT_RANGES)
NO_DATA: Final[str] = "no_data"

# Daylight burn window used by the planner grid (local hours, inclusive)
DEFAULT_BURN_HOURS: Final[Tuple[int, int]] = (8, 20)
