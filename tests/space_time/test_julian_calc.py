"""Tests for Julian date calculation functions."""

import unittest

from heliochron.space_time.civil import CivilTimestamp
from heliochron.space_time.julian_calc import (
    civil_to_julian,
    day_fraction,
    fraction_to_time,
    gregorian_to_jdn,
    jdn_to_gregorian,
    jdn_to_julian_date,
    julian_to_civil,
)

# (year, month, day) -> Julian Day Number
KNOWN_DAY_NUMBERS = [
    ((2000, 1, 1), 2451545),
    ((1969, 7, 20), 2440423),
    ((1970, 1, 1), 2440588),
    ((2025, 1, 1), 2460677),
    ((2100, 1, 1), 2488070),
    ((1858, 11, 17), 2400001),
    ((1582, 10, 15), 2299161),
    ((0, 1, 1), 1721060),
    ((-4713, 11, 24), 0),
]


class TestJulianDateCalculations(unittest.TestCase):
    """Test case for Julian date calculation functions."""

    def test_gregorian_to_jdn(self):
        """Test converting Gregorian dates to Julian Day Numbers."""
        for (year, month, day), expected in KNOWN_DAY_NUMBERS:
            with self.subTest(date=(year, month, day)):
                self.assertEqual(gregorian_to_jdn(year, month, day), expected)

    def test_gregorian_to_jdn_is_integer(self):
        """Day numbers are exact integers, far from the common era too."""
        jdn = gregorian_to_jdn(-3000, 2, 28)
        self.assertIsInstance(jdn, int)
        self.assertEqual(gregorian_to_jdn(-3000, 3, 1) - jdn, 1)

    def test_jdn_to_gregorian(self):
        """Test converting Julian Day Numbers back to Gregorian dates."""
        for date, jdn in KNOWN_DAY_NUMBERS:
            with self.subTest(jdn=jdn):
                self.assertEqual(jdn_to_gregorian(jdn), date)

    def test_leap_days(self):
        """February 29th exists only in Gregorian leap years."""
        self.assertEqual(jdn_to_gregorian(gregorian_to_jdn(2000, 2, 28) + 1), (2000, 2, 29))
        self.assertEqual(jdn_to_gregorian(gregorian_to_jdn(1900, 2, 28) + 1), (1900, 3, 1))
        self.assertEqual(jdn_to_gregorian(gregorian_to_jdn(2024, 2, 28) + 1), (2024, 2, 29))

    def test_day_fraction(self):
        self.assertEqual(day_fraction(0, 0, 0, 0), 0.0)
        self.assertEqual(day_fraction(12, 0, 0, 0), 0.5)
        self.assertEqual(day_fraction(18, 0, 0, 0), 0.75)
        self.assertAlmostEqual(day_fraction(0, 0, 1, 500), 1.5 / 86400, places=12)

    def test_jdn_to_julian_date(self):
        """Test converting JDN with time to Julian Date."""
        # Noon is the start of the Julian day
        self.assertEqual(jdn_to_julian_date(2451545, 12), 2451545.0)
        # Midnight is half a day earlier
        self.assertEqual(jdn_to_julian_date(2451545), 2451544.5)
        self.assertEqual(jdn_to_julian_date(2451545, 18), 2451545.25)

    def test_fraction_to_time(self):
        self.assertEqual(fraction_to_time(0.0), (0, 0, 0, 0))
        self.assertEqual(fraction_to_time(0.5), (12, 0, 0, 0))
        self.assertEqual(fraction_to_time(0.75), (18, 0, 0, 0))
        # Negative drift wraps into the day
        self.assertEqual(fraction_to_time(-0.25), (18, 0, 0, 0))

    def test_civil_to_julian(self):
        """Test converting civil timestamps to Julian dates."""
        self.assertEqual(civil_to_julian(CivilTimestamp(2000, 1, 1, 12)), 2451545.0)
        self.assertAlmostEqual(
            civil_to_julian(CivilTimestamp(1969, 7, 20, 20, 18)), 2440423.34583, places=4
        )

    def test_julian_to_civil(self):
        self.assertEqual(julian_to_civil(2451545.0), CivilTimestamp(2000, 1, 1, 12))
        self.assertEqual(julian_to_civil(2400000.5), CivilTimestamp(1858, 11, 17))

    def test_millisecond_rounding_carries_into_next_day(self):
        """A rounded millisecond of 1000 rolls over the date."""
        result = julian_to_civil(2451545.5 - 1e-9)
        self.assertEqual(result, CivilTimestamp(2000, 1, 2))

    def test_roundtrip_conversion(self):
        """Test converting civil -> Julian date -> civil."""
        timestamps = [
            CivilTimestamp(2025, 8, 29, 18, 30, 15, 123),
            CivilTimestamp(1582, 10, 15),
            CivilTimestamp(1582, 10, 14, 23, 59, 59, 999),
            CivilTimestamp(0, 1, 1),
            CivilTimestamp(-1000, 3, 1, 6, 0, 0, 1),
            CivilTimestamp(2000, 2, 29, 23, 59, 59, 999),
            CivilTimestamp(1858, 11, 17),
            CivilTimestamp(2038, 1, 19, 3, 14, 7),
            CivilTimestamp(9999, 12, 31, 23, 59, 59, 999),
        ]
        for ts in timestamps:
            with self.subTest(ts=ts.isoformat()):
                jd = civil_to_julian(ts)
                back = julian_to_civil(jd)
                self.assertEqual(back, ts)
                self.assertEqual(civil_to_julian(back), jd)

    def test_monotonic(self):
        """Later civil instants have larger Julian dates."""
        timestamps = [
            CivilTimestamp(-500, 6, 1),
            CivilTimestamp(0, 1, 1),
            CivilTimestamp(1582, 10, 15),
            CivilTimestamp(1969, 7, 20, 20, 18),
            CivilTimestamp(1969, 7, 20, 20, 18, 0, 1),
            CivilTimestamp(2000, 1, 1, 12),
            CivilTimestamp(2025, 12, 31, 23, 59, 59, 999),
            CivilTimestamp(2026, 1, 1),
        ]
        self.assertEqual(sorted(timestamps), timestamps)
        jds = [civil_to_julian(ts) for ts in timestamps]
        for earlier, later in zip(jds, jds[1:]):
            self.assertLess(earlier, later)


if __name__ == "__main__":
    unittest.main()
