"""Tests for the sun CLI command."""

import csv
import io
import json
import unittest

from click.testing import CliRunner

from heliochron.cli import cli
from heliochron.cli.sun import solar_row
from heliochron.space_time.civil import CivilTimestamp
from heliochron.sun.times import ObserverPosition

MILAN = ["45.46416", "9.19199"]


class TestSunCLI(unittest.TestCase):
    """Validate solar event tables."""

    def setUp(self):
        self.runner = CliRunner()

    def test_csv_output(self):
        result = self.runner.invoke(
            cli, ["sun", *MILAN, "--date", "2025-01-01", "--format", "csv"]
        )

        self.assertEqual(result.exit_code, 0, msg=result.output)
        rows = list(csv.DictReader(io.StringIO(result.output)))
        self.assertEqual(len(rows), 1)
        self.assertEqual(rows[0]["date"], "2025-01-01")
        self.assertEqual(rows[0]["sunrise"], "07:03:12")
        self.assertEqual(rows[0]["sunset"], "15:50:37")
        self.assertEqual(rows[0]["day_length"], "08:47:24")
        self.assertEqual(rows[0]["status"], "ok")

    def test_text_output(self):
        result = self.runner.invoke(cli, ["sun", *MILAN, "--date", "2025-01-01"])

        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertIn("45.46416°N 9.19199°E", result.output)
        self.assertIn("2025-01-01", result.output)
        self.assertIn("07:03:12", result.output)
        self.assertIn("15:50:37", result.output)

    def test_json_output_for_several_days(self):
        result = self.runner.invoke(
            cli,
            ["sun", *MILAN, "--date", "2025-01-01", "--days", "3", "--format", "json"],
        )

        self.assertEqual(result.exit_code, 0, msg=result.output)
        rows = json.loads(result.output)
        self.assertEqual(
            [row["date"] for row in rows], ["2025-01-01", "2025-01-02", "2025-01-03"]
        )
        self.assertTrue(rows[0]["sunrise_utc"].startswith("2025-01-01T07:03"))
        self.assertAlmostEqual(rows[0]["declination"], -22.96, delta=0.1)

    def test_polar_night_is_reported(self):
        result = self.runner.invoke(
            cli, ["sun", "80", "15", "--date", "2025-01-01", "--format", "json"]
        )

        self.assertEqual(result.exit_code, 0, msg=result.output)
        row = json.loads(result.output)[0]
        self.assertEqual(row["status"], "never rises")
        self.assertIsNone(row["sunrise"])
        self.assertIsNotNone(row["solar_noon"])

    def test_polar_day_in_text_output(self):
        result = self.runner.invoke(
            cli, ["sun", "--date", "2025-01-01", "--", "-80", "0"]
        )

        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertIn("sun never sets", result.output)

    def test_invalid_latitude(self):
        result = self.runner.invoke(cli, ["sun", "95", "0", "--date", "2025-01-01"])
        self.assertEqual(result.exit_code, 2)

    def test_invalid_date(self):
        result = self.runner.invoke(cli, ["sun", *MILAN, "--date", "someday"])
        self.assertEqual(result.exit_code, 2)


class TestSolarRow(unittest.TestCase):
    def test_row_for_time_of_day_uses_its_date(self):
        row = solar_row(
            CivilTimestamp(2025, 1, 1, 18, 45), ObserverPosition(45.46416, 9.19199)
        )
        self.assertEqual(row["date"], "2025-01-01")
        self.assertEqual(row["sunrise"], "07:03:12")
        self.assertAlmostEqual(row["equation_of_time_minutes"], -3.67, delta=0.1)


if __name__ == "__main__":
    unittest.main()
