"""CLI command for sunrise, sunset, solar noon and day length tables."""

import csv
import io
import json
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, TextIO, Union

import click

from ..formatting import format_degrees, format_latitude, format_longitude
from ..logging import get_logger
from ..space_time.civil import CivilTimestamp
from ..space_time.julian import JulianDate
from ..sun import (
    ObserverPosition,
    SolarCoordinates,
    SolarTimes,
    SunNeverRisesError,
    SunNeverSetsError,
    event_timestamp,
)
from .common import parse_date_input

logger = get_logger(__name__)

Row = Dict[str, Union[str, float, None]]

HEADERS = [
    "date",
    "sunrise",
    "solar_noon",
    "sunset",
    "day_length",
    "sunrise_utc",
    "sunset_utc",
    "declination",
    "right_ascension",
    "equation_of_time_minutes",
    "status",
]

STATUS_OK = "ok"
STATUS_NEVER_RISES = "never rises"
STATUS_NEVER_SETS = "never sets"


def _days(start: CivilTimestamp, count: int) -> List[CivilTimestamp]:
    """Consecutive UTC midnights starting at the date of start."""
    jd = JulianDate.from_civil(start.at_midnight()).jdate
    return [JulianDate(jd + offset).to_civil() for offset in range(count)]


def solar_row(day: CivilTimestamp, position: ObserverPosition) -> Row:
    """Collect solar events for one day; polar days are reported in ``status``."""
    times = SolarTimes(SolarCoordinates.on(day), position)
    coordinates = times.coordinates

    row: Row = {
        "date": coordinates.date.date_string(),
        "sunrise": None,
        "solar_noon": times.noon.clock_with_seconds,
        "sunset": None,
        "day_length": None,
        "sunrise_utc": None,
        "sunset_utc": None,
        "declination": round(coordinates.declination, 5),
        "right_ascension": round(coordinates.right_ascension, 5),
        "equation_of_time_minutes": round(coordinates.equation_of_time * 60, 2),
        "status": STATUS_OK,
    }

    try:
        sunrise = times.sunrise
        sunset = times.sunset
    except SunNeverRisesError:
        row["status"] = STATUS_NEVER_RISES
        return row
    except SunNeverSetsError:
        row["status"] = STATUS_NEVER_SETS
        return row

    row["sunrise"] = sunrise.clock_with_seconds
    row["sunset"] = sunset.clock_with_seconds
    row["day_length"] = times.day_length.clock_with_seconds
    row["sunrise_utc"] = event_timestamp(day, sunrise).isoformat()
    row["sunset_utc"] = event_timestamp(day, sunset).isoformat()
    return row


def _write_csv(rows: Iterable[Row], output: TextIO) -> None:
    writer = csv.DictWriter(output, fieldnames=HEADERS)
    writer.writeheader()
    for row in rows:
        writer.writerow(row)


def _write_text(rows: Iterable[Row], position: ObserverPosition) -> None:
    click.echo(
        f"Location: {format_latitude(position.latitude)} "
        f"{format_longitude(position.longitude)}, "
        f"altitude {position.altitude or 0:g} m (times in UTC)"
    )
    click.echo(
        f"{'Date':<10}  {'Sunrise':<8}  {'Noon':<8}  {'Sunset':<8}  "
        f"{'Day':<8}  {'Decl.':>8}  {'EqT min':>7}"
    )
    for row in rows:
        line = (
            f"{row['date']:<10}  {row['sunrise'] or '--':<8}  {row['solar_noon']:<8}  "
            f"{row['sunset'] or '--':<8}  {row['day_length'] or '--':<8}  "
            f"{format_degrees(row['declination']):>8}  "
            f"{row['equation_of_time_minutes']:>7.2f}"
        )
        if row["status"] != STATUS_OK:
            line += f"  sun {row['status']}"
        click.echo(line)


@click.command()
@click.argument("latitude", type=float)
@click.argument("longitude", type=float)
@click.option(
    "--date",
    "-d",
    "date_str",
    help="First UTC date (ISO format or Julian date). Defaults to today.",
)
@click.option(
    "--days",
    type=click.IntRange(min=1),
    default=1,
    help="Number of consecutive days to compute. Defaults to 1.",
)
@click.option(
    "--altitude",
    type=float,
    default=None,
    help="Observer altitude above sea level in metres.",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json", "csv"]),
    default="text",
    help="Output format. Defaults to text.",
)
def sun(
    latitude: float,
    longitude: float,
    date_str: Optional[str],
    days: int,
    altitude: Optional[float],
    fmt: str,
) -> None:
    """Compute sunrise, solar noon, sunset and day length at a location.

    LATITUDE is positive north and LONGITUDE positive east, both in degrees.
    Use "--" before negative coordinates.

    Examples:

       heliochron sun 45.46416 9.19199 --date 2025-01-01

       heliochron sun 78.22 15.65 --date 2025-06-01 --days 7 --format csv

       heliochron sun -- -33.86 151.21 --altitude 50 --format json
    """
    try:
        position = ObserverPosition(latitude, longitude, altitude)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="LATITUDE") from exc

    if date_str is None:
        start = CivilTimestamp.from_datetime(datetime.now(timezone.utc))
    else:
        try:
            start = parse_date_input(date_str)
        except ValueError as exc:
            raise click.BadParameter(str(exc), param_hint="--date") from exc

    logger.info(f"Computing {days} day(s) from {start.date_string()} at {position}")
    rows = [solar_row(day, position) for day in _days(start, days)]

    if fmt == "json":
        click.echo(json.dumps(rows, indent=2))
    elif fmt == "csv":
        buffer = io.StringIO()
        _write_csv(rows, buffer)
        click.echo(buffer.getvalue(), nl=False)
    else:
        _write_text(rows, position)
