import math
from dataclasses import dataclass
from datetime import datetime
from typing import NamedTuple, Tuple, Union

from ..constants import DAYS_PER_JULIAN_CENTURY, J2000_JD, MJD_OFFSET
from .civil import CivilLike, CivilTimestamp, as_civil, ensure_utc
from .julian_calc import civil_to_julian, gregorian_to_jdn, julian_to_civil

JD_PRECISION = 9


class SinceJ2000(NamedTuple):
    """Elapsed time since the J2000.0 epoch."""

    days: float
    centuries: float


@dataclass(frozen=True)
class JulianDate:
    """A continuous Julian Date: days since noon UTC, 4713 BCE (proleptic Julian)."""

    jdate: float

    @classmethod
    def from_civil(cls, value: CivilLike) -> "JulianDate":
        """Build from a CivilTimestamp, an aware datetime, or a date (UTC midnight)."""
        return cls(civil_to_julian(as_civil(value)))

    # Alias for from_civil
    from_gregorian = from_civil

    @property
    def day(self) -> int:
        """Integer part of the Julian Date."""
        return math.floor(self.jdate)

    @property
    def date(self) -> float:
        return self.jdate

    @property
    def day_number(self) -> int:
        """Julian Day Number of the civil day this instant falls on."""
        return math.floor(self.jdate + 0.5)

    @property
    def since_j2000(self) -> SinceJ2000:
        days = self.jdate - J2000_JD
        return SinceJ2000(days=days, centuries=days / DAYS_PER_JULIAN_CENTURY)

    def to_julian_century(self) -> float:
        """Julian centuries since J2000.0."""
        return (self.jdate - J2000_JD) / DAYS_PER_JULIAN_CENTURY

    def to_modified_jd(self) -> float:
        """Modified Julian Date (days since 1858-11-17 00:00 UTC)."""
        return self.jdate - MJD_OFFSET

    def to_civil(self) -> CivilTimestamp:
        return julian_to_civil(self.jdate)

    # Alias for to_civil
    to_gregorian = to_civil

    def to_datetime(self) -> datetime:
        return self.to_civil().to_datetime()


def julian_day_number(value: CivilLike) -> int:
    """Julian Day Number of the calendar date of value.

    Args:
        value: CivilTimestamp, aware datetime, or date

    Returns:
        int: Julian Day Number
    """
    ts = as_civil(value)
    return gregorian_to_jdn(ts.year, ts.month, ts.day)


def julian_date(value: CivilLike) -> float:
    """Julian Date of value.

    Args:
        value: CivilTimestamp, aware datetime, or date

    Returns:
        float: Julian Date
    """
    return civil_to_julian(as_civil(value))


def civil_from_julian(jd: float) -> CivilTimestamp:
    """Convert a Julian Date to a UTC CivilTimestamp.

    Args:
        jd: Julian date to convert

    Returns:
        CivilTimestamp: UTC instant, to the millisecond
    """
    return julian_to_civil(jd)


def julian_from_datetime(dt: datetime) -> float:
    """Convert datetime to Julian date.

    Args:
        dt: Timezone-aware datetime to convert

    Returns:
        float: Julian date

    Raises:
        NaiveDateTimeError: If datetime is naive
    """
    dt = ensure_utc(dt)
    return julian_date(dt)


def julian_to_datetime(jd: float) -> datetime:
    """Convert Julian date to datetime.

    Args:
        jd: Julian date to convert

    Returns:
        datetime: UTC datetime, rounded to the millisecond

    Raises:
        ValueError: If the date falls outside the years datetime supports
    """
    return julian_to_civil(jd).to_datetime()


def julian_to_julian_parts(jd: float) -> Tuple[int, float]:
    """Split Julian date into integer and fractional parts.

    Args:
        jd: Julian date to split

    Returns:
        Tuple[int, float]: Integer and fractional parts
    """
    jd_int = math.floor(jd)
    jd_frac = round(jd - jd_int, JD_PRECISION)
    return jd_int, jd_frac


def datetime_to_julian_parts(dt: datetime) -> Tuple[int, float]:
    """Get integer and fractional parts of Julian date.

    Args:
        dt: Datetime to convert

    Returns:
        Tuple[int, float]: Integer and fractional parts
    """
    return julian_to_julian_parts(julian_from_datetime(dt))


def get_julian_components(
    time: Union[float, datetime, CivilTimestamp]
) -> Tuple[int, float]:
    """Convert a time to Julian date integer and fraction components.

    Accepts a datetime, a CivilTimestamp, or a Julian date as a float and
    returns the integer and fractional parts.

    Args:
        time: datetime, CivilTimestamp, or a float Julian date.

    Returns:
        Tuple[int, float]: A tuple of (julian_date_integer, julian_date_fraction)
    """
    if isinstance(time, (datetime, CivilTimestamp)):
        jd = julian_date(time)
    else:
        # Assume time is already a Julian date
        jd = time

    return julian_to_julian_parts(jd)
