"""Julian date calculation module.

This module converts between proleptic Gregorian calendar dates and Julian
dates using the Fliegel–Van Flandern integer algorithm. The day-number part
is exact integer arithmetic, so it holds for dates several millennia before
and after the common era (astronomical year numbering, year 0 = 1 BCE).
"""

import math
from typing import Tuple

from ..constants import HOURS_PER_DAY, MILLISECONDS_PER_DAY
from .civil import CivilTimestamp


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Convert a Gregorian date to Julian Day Number.

    Args:
        year: Astronomical year (0 = 1 BCE)
        month: Month (1-12)
        day: Day of month

    Returns:
        Julian Day Number (the day starting at noon on the given date)
    """
    # Shift January and February to months 13 and 14 of the previous year
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3

    return (
        day
        + (153 * m + 2) // 5
        + 365 * y
        + y // 4
        - y // 100
        + y // 400
        - 32045
    )


def jdn_to_gregorian(jdn: int) -> Tuple[int, int, int]:
    """Convert a Julian Day Number to a Gregorian date.

    Args:
        jdn: Julian Day Number

    Returns:
        Tuple[int, int, int]: year, month, day
    """
    f = jdn + 1401 + (((4 * jdn + 274277) // 146097) * 3) // 4 - 38
    e = 4 * f + 3
    g = (e % 1461) // 4
    h = 5 * g + 2

    day = (h % 153) // 5 + 1
    month = ((h // 153 + 2) % 12) + 1
    year = e // 1461 - 4716 + (14 - month) // 12
    return year, month, day


def day_fraction(hour: int, minute: int, second: int, millisecond: int) -> float:
    """Calculate the fraction of a day from time components.

    Args:
        hour: Hour (0-23)
        minute: Minute (0-59)
        second: Second (0-59)
        millisecond: Millisecond (0-999)

    Returns:
        Fraction of day (0.0 to 0.99999...)
    """
    return (hour + minute / 60 + second / 3600 + millisecond / 3600000) / 24


def jdn_to_julian_date(
    jdn: int, hour: int = 0, minute: int = 0, second: int = 0, millisecond: int = 0
) -> float:
    """Convert a Julian Day Number and a UTC time of day to a Julian Date.

    Args:
        jdn: Julian Day Number
        hour: Hour (0-23)
        minute: Minute (0-59)
        second: Second (0-59)
        millisecond: Millisecond (0-999)

    Returns:
        Julian Date (JD)
    """
    # The JDN starts at noon, the civil day at midnight
    return jdn + day_fraction(hour, minute, second, millisecond) - 0.5


def fraction_to_time(fraction: float) -> Tuple[int, int, int, int]:
    """Split a fraction of a day into hour, minute, second and millisecond.

    Hours, minutes and seconds are truncated; the millisecond is rounded from
    what remains so the result carries no systematic downward bias. A rounded
    millisecond of 1000 is returned as is; see :func:`julian_to_civil`.

    Args:
        fraction: Fraction of day, counted from midnight

    Returns:
        Tuple[int, int, int, int]: hour, minute, second, millisecond
    """
    if fraction < 0:
        fraction += 1

    hour_decimal = fraction * HOURS_PER_DAY
    hour = math.floor(hour_decimal)

    minute_decimal = (hour_decimal - hour) * 60
    minute = math.floor(minute_decimal)

    second_decimal = (minute_decimal - minute) * 60
    second = math.floor(second_decimal)

    millisecond = round((second_decimal - second) * 1000)
    return hour, minute, second, millisecond


def civil_to_julian(ts: CivilTimestamp) -> float:
    """Convert a UTC civil timestamp to a Julian Date.

    Args:
        ts: Timestamp to convert

    Returns:
        Julian Date (JD)
    """
    jdn = gregorian_to_jdn(ts.year, ts.month, ts.day)
    return jdn_to_julian_date(jdn, ts.hour, ts.minute, ts.second, ts.millisecond)


def julian_to_civil(jd: float) -> CivilTimestamp:
    """Convert a Julian Date to a UTC civil timestamp, to the millisecond.

    Args:
        jd: Julian Date

    Returns:
        CivilTimestamp: The UTC instant
    """
    # Days start at midnight, not noon
    shifted = jd + 0.5
    z = math.floor(shifted)
    hour, minute, second, millisecond = fraction_to_time(shifted - z)

    # Rounding the millisecond can carry all the way into the next day
    total_ms = ((hour * 60 + minute) * 60 + second) * 1000 + millisecond
    if total_ms >= MILLISECONDS_PER_DAY:
        z += 1
        total_ms -= MILLISECONDS_PER_DAY

    total_seconds, millisecond = divmod(total_ms, 1000)
    total_minutes, second = divmod(total_seconds, 60)
    hour, minute = divmod(total_minutes, 60)

    year, month, day = jdn_to_gregorian(z)
    return CivilTimestamp(year, month, day, hour, minute, second, millisecond)
