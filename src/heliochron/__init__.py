"""Solar ephemeris: Julian dates, solar coordinates, and sunrise/sunset times."""

from .formatting import DecimalHours
from .space_time import CivilTimestamp, JulianDate
from .sun import (
    ObserverPosition,
    SolarAngle,
    SolarCoordinates,
    SolarEventError,
    SolarTimes,
    SunNeverRisesError,
    SunNeverSetsError,
)

__all__ = [
    "DecimalHours",
    "CivilTimestamp",
    "JulianDate",
    "ObserverPosition",
    "SolarAngle",
    "SolarCoordinates",
    "SolarEventError",
    "SolarTimes",
    "SunNeverRisesError",
    "SunNeverSetsError",
]
