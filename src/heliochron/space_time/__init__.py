from .civil import (
    CivilTimestamp,
    NaiveDateTimeError,
    as_civil,
    ensure_utc,
)
from .julian import (
    JulianDate,
    SinceJ2000,
    civil_from_julian,
    julian_date,
    julian_day_number,
    julian_from_datetime,
    julian_to_datetime,
)

__all__ = [
    "CivilTimestamp",
    "NaiveDateTimeError",
    "as_civil",
    "ensure_utc",
    "JulianDate",
    "SinceJ2000",
    "civil_from_julian",
    "julian_date",
    "julian_day_number",
    "julian_from_datetime",
    "julian_to_datetime",
]
