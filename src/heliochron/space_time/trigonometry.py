"""Degree-based trigonometry.

Direct functions take degrees, inverse functions return degrees. The
degree/radian conversions are rounded to 5 decimal places, and so is
angle normalization; solar reference values depend on that rounding.
"""

import math
from typing import Callable

Degree = float

ANGLE_PRECISION = 5


def dtr(d: Degree) -> float:
    """Convert degrees to radians."""
    return round(d * math.pi / 180.0, ANGLE_PRECISION)


def rtd(r: float) -> Degree:
    """Convert radians to degrees."""
    return round(r * 180.0 / math.pi, ANGLE_PRECISION)


def sin(d: Degree) -> float:
    return math.sin(dtr(d))


def cos(d: Degree) -> float:
    return math.cos(dtr(d))


def tan(d: Degree) -> float:
    return math.tan(dtr(d))


def arcsin(x: float) -> Degree:
    return rtd(math.asin(x))


def arccos(x: float) -> Degree:
    return rtd(math.acos(x))


def arctan(x: float) -> Degree:
    return rtd(math.atan(x))


def arccot(x: float) -> Degree:
    return rtd(math.atan(1 / x))


def arctan2(y: float, x: float) -> Degree:
    """Arctangent of y/x in degrees, using the signs of both to pick the quadrant."""
    return rtd(math.atan2(y, x))


def normalize_in(a: Degree, b: Degree) -> Callable[[Degree], Degree]:
    """Build a function that normalizes an angle into the range [a, b).

    Args:
        a: Lower bound in degrees
        b: Upper bound in degrees

    Returns:
        A function mapping any angle to its equivalent in [a, b)
    """
    span = b - a

    def normalize(theta: Degree) -> Degree:
        normalized = math.fmod(math.fmod(theta - a, span) + span, span) + a
        return round(normalized, ANGLE_PRECISION)

    return normalize


def hours_to_degrees(h: float) -> Degree:
    """Convert an hour angle to degrees."""
    return h * 15


def degrees_to_hours(d: Degree) -> float:
    """Convert degrees to an hour angle."""
    return d / 15
