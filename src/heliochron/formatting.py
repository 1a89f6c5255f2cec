"""Formatting helpers for decimal hours and angles."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class DecimalHours:
    """Hours since UTC midnight as a single float.

    The value is not range-normalized: it may be negative or exceed 24 when
    an event falls on a neighbouring day.
    """

    value: float

    @classmethod
    def from_decimal(cls, hours: float) -> "DecimalHours":
        return cls(hours)

    @property
    def decimal(self) -> float:
        return self.value

    @property
    def hours(self) -> int:
        return math.floor(self.value)

    @property
    def minutes(self) -> int:
        return math.floor((self.value - math.floor(self.value)) * 60)

    @property
    def seconds(self) -> int:
        return math.floor(
            ((self.value - math.floor(self.value)) * 60 - self.minutes) * 60
        )

    @property
    def milliseconds(self) -> int:
        """Millisecond within the current second (0-999)."""
        return math.floor(
            (((self.value - math.floor(self.value)) * 60 - self.minutes) * 60 - self.seconds)
            * 1000
        )

    @property
    def clock(self) -> str:
        """Zero-padded ``HH:MM``."""
        return f"{self.hours:02d}:{self.minutes:02d}"

    @property
    def clock_with_seconds(self) -> str:
        """Zero-padded ``HH:MM:SS``."""
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"

    def __str__(self) -> str:
        return self.clock_with_seconds


def format_latitude(latitude: float) -> str:
    """Format a geographic latitude with N/S designation.

    Args:
        latitude: Latitude in degrees, positive north

    Returns:
        String representing the formatted latitude
    """
    direction = "N" if latitude >= 0 else "S"
    return f"{abs(latitude):.5f}°{direction}"


def format_longitude(longitude: float) -> str:
    """Format a geographic longitude with E/W designation.

    Args:
        longitude: Longitude in degrees, positive east

    Returns:
        String representing the formatted longitude
    """
    direction = "E" if longitude >= 0 else "W"
    return f"{abs(longitude):.5f}°{direction}"


def format_degrees(angle: float, places: int = 2) -> str:
    return f"{angle:.{places}f}°"
