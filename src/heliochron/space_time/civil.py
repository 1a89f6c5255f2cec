from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta, timezone
from typing import Union

import pytz


class NaiveDateTimeError(Exception):
    """Raised when a datetime object has no timezone info."""

    pass


def ensure_utc(dt: datetime) -> datetime:
    """Convert datetime to UTC if it has a timezone.

    Args:
        dt: Datetime to convert

    Returns:
        datetime: UTC datetime

    Raises:
        NaiveDateTimeError: If datetime is naive
    """
    if dt.tzinfo is None:
        raise NaiveDateTimeError("Datetime must have timezone info")
    return dt.astimezone(timezone.utc)


@dataclass(frozen=True, order=True)
class CivilTimestamp:
    """A UTC instant on the proleptic Gregorian calendar.

    Years use astronomical numbering: year 0 is 1 BCE, year -1 is 2 BCE.
    Field order makes comparison chronological. Fields are not range
    checked; callers supply a normalized date.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0

    @classmethod
    def from_datetime(cls, dt: datetime) -> "CivilTimestamp":
        """Build a timestamp from an aware datetime, rounded to the millisecond.

        Raises:
            NaiveDateTimeError: If datetime is naive
        """
        dt = ensure_utc(dt)
        millis = round(dt.microsecond / 1000)
        if millis >= 1000:
            dt = dt.replace(microsecond=0) + timedelta(seconds=1)
            millis = 0
        return cls(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second, millis)

    @classmethod
    def from_date(cls, d: date) -> "CivilTimestamp":
        """Midnight UTC at the start of the given date."""
        return cls(d.year, d.month, d.day)

    def at_midnight(self) -> "CivilTimestamp":
        """Return the same calendar date with the time of day discarded."""
        return replace(self, hour=0, minute=0, second=0, millisecond=0)

    def to_datetime(self) -> datetime:
        """Convert to a UTC-aware datetime.

        Raises:
            ValueError: If the year is outside what datetime can represent
        """
        if not 1 <= self.year <= 9999:
            raise ValueError(
                f"Year {self.year} cannot be represented as a datetime (1..9999)"
            )
        return datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.millisecond * 1000,
            tzinfo=pytz.UTC,
        )

    def isoformat(self) -> str:
        sign = "-" if self.year < 0 else ""
        return (
            f"{sign}{abs(self.year):04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
            f".{self.millisecond:03d}Z"
        )

    def date_string(self) -> str:
        """The calendar date part of :meth:`isoformat`."""
        return self.isoformat().split("T")[0]

    def __str__(self) -> str:
        return self.isoformat()


CivilLike = Union[CivilTimestamp, datetime, date]


def as_civil(value: CivilLike) -> CivilTimestamp:
    """Coerce a timestamp, aware datetime or date into a CivilTimestamp.

    Args:
        value: CivilTimestamp, timezone-aware datetime, or date (taken as UTC midnight)

    Returns:
        CivilTimestamp: The UTC instant

    Raises:
        NaiveDateTimeError: If a naive datetime is given
        TypeError: For any other input type
    """
    if isinstance(value, CivilTimestamp):
        return value
    # datetime is a subclass of date, so it has to be checked first
    if isinstance(value, datetime):
        return CivilTimestamp.from_datetime(value)
    if isinstance(value, date):
        return CivilTimestamp.from_date(value)
    raise TypeError(f"Cannot interpret {type(value).__name__} as a UTC timestamp")
