"""Low-precision solar position from the Astronomical Almanac.

Accuracy is about 0.01° in declination, which is plenty for rise and set
times but not for anything finer.
"""

import math
from dataclasses import dataclass

from ..constants import DAYS_SINCE_J2000_EPSILON
from ..logging import get_logger
from ..space_time.civil import CivilLike, CivilTimestamp, as_civil
from ..space_time.julian import JulianDate
from ..space_time.trigonometry import arcsin, arctan2, cos, normalize_in, sin

logger = get_logger(__name__)

normalize = normalize_in(0, 360)


@dataclass(frozen=True)
class SolarCoordinates:
    """Position of the Sun on a UTC date.

    Every quantity is derived from :attr:`d` on access. Angles are in
    degrees except right ascension and the equation of time, which are in
    hours.
    """

    date: CivilTimestamp

    @classmethod
    def on(cls, value: CivilLike) -> "SolarCoordinates":
        """Coordinates for the UTC date of value; the time of day is discarded."""
        return cls(as_civil(value).at_midnight())

    @property
    def d(self) -> int:
        """Days since the J2000.0 epoch, rounded up."""
        days = JulianDate.from_civil(self.date).since_j2000.days
        d = math.ceil(days + DAYS_SINCE_J2000_EPSILON)
        logger.debug(f"{self.date.date_string()}: {d} days since J2000.0")
        return d

    @property
    def obliquity(self) -> float:
        """Obliquity of the ecliptic (Earth's axial tilt)."""
        return 23.4397 - 0.00000036 * self.d

    @property
    def mean_longitude(self) -> float:
        return normalize(280.459 + 0.98564736 * self.d)

    @property
    def mean_anomaly(self) -> float:
        return normalize(357.529 + 0.98560028 * self.d)

    @property
    def equation_of_center(self) -> float:
        """Correction for the eccentricity of Earth's orbit."""
        g = self.mean_anomaly
        return 1.914 * sin(g) + 0.0200 * sin(2 * g) + 0.0003 * sin(3 * g)

    @property
    def ecliptic_longitude(self) -> float:
        return normalize(self.mean_longitude + self.equation_of_center)

    @property
    def right_ascension(self) -> float:
        """Right ascension in hours, in [0, 24)."""
        obliquity = self.obliquity
        longitude = self.ecliptic_longitude
        ra = arctan2(cos(obliquity) * sin(longitude), cos(longitude)) / 15
        return (ra + 24) % 24

    @property
    def declination(self) -> float:
        return arcsin(sin(self.obliquity) * sin(self.ecliptic_longitude))

    @property
    def equation_of_time(self) -> float:
        """Apparent minus mean solar time, in hours."""
        return self.mean_longitude / 15 - self.right_ascension
