"""Sunrise, sunset, solar noon and day length for an observer."""

import math
from dataclasses import dataclass
from typing import Optional

from ..constants import HORIZON_DIP_PER_SQRT_METRE, HOURS_PER_DAY, ZERO_ANGLE
from ..formatting import DecimalHours
from ..space_time.civil import CivilLike, CivilTimestamp
from ..space_time.julian import JulianDate
from .angle import SolarAngle
from .coordinates import SolarCoordinates


@dataclass(frozen=True)
class ObserverPosition:
    """A location on Earth for solar event calculations."""

    latitude: float  # in degrees, positive north
    longitude: float  # in degrees, positive east
    altitude: Optional[float] = None  # in metres above sea level
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if not -90 <= self.latitude <= 90:
            raise ValueError("Latitude must be between -90 and 90 degrees")


def horizon_altitude(altitude: Optional[float] = None) -> float:
    """Solar altitude of apparent sunrise and sunset for an observer elevation.

    Args:
        altitude: Observer height above sea level in metres; negative counts as 0

    Returns:
        float: Altitude threshold in degrees
    """
    return ZERO_ANGLE - HORIZON_DIP_PER_SQRT_METRE * math.sqrt(max(altitude or 0, 0))


@dataclass(frozen=True)
class SolarTimes:
    """Times of solar events for a UTC date and an observer position.

    All times are decimal hours since UTC midnight of the date.
    """

    coordinates: SolarCoordinates
    position: ObserverPosition

    @classmethod
    def on(
        cls,
        value: CivilLike,
        latitude: float,
        longitude: float,
        altitude: Optional[float] = None,
    ) -> "SolarTimes":
        return cls(
            SolarCoordinates.on(value),
            ObserverPosition(latitude, longitude, altitude),
        )

    @property
    def angle(self) -> SolarAngle:
        return SolarAngle(self.coordinates, self.position.latitude)

    @property
    def noon(self) -> DecimalHours:
        """Local true midday (solar noon)."""
        h = 12 - self.position.longitude / 15 - self.coordinates.equation_of_time
        return DecimalHours.from_decimal(h)

    @property
    def sunrise(self) -> DecimalHours:
        """Raises SunNeverRisesError or SunNeverSetsError at polar latitudes."""
        h0 = horizon_altitude(self.position.altitude)
        h = self.noon.decimal - self.angle.hour_at(h0) / 15
        return DecimalHours.from_decimal(h)

    @property
    def sunset(self) -> DecimalHours:
        """Raises SunNeverRisesError or SunNeverSetsError at polar latitudes."""
        h0 = horizon_altitude(self.position.altitude)
        h = self.noon.decimal + self.angle.hour_at(h0) / 15
        return DecimalHours.from_decimal(h)

    @property
    def day_length(self) -> DecimalHours:
        """Time between sunrise and sunset."""
        return DecimalHours.from_decimal(self.sunset.decimal - self.sunrise.decimal)


def event_timestamp(value: CivilLike, hours: DecimalHours) -> CivilTimestamp:
    """UTC instant of an event given in decimal hours on the date of value.

    Hours below 0 or from 24 upwards land on the neighbouring day.

    Args:
        value: Date the hours are counted from (time of day is discarded)
        hours: Decimal hours since UTC midnight

    Returns:
        CivilTimestamp: The event instant, to the millisecond
    """
    midnight = SolarCoordinates.on(value).date
    jd = JulianDate.from_civil(midnight).jdate + hours.decimal / HOURS_PER_DAY
    return JulianDate(jd).to_civil()
