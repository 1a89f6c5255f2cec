"""CLI command for Julian date conversions."""

import json
from typing import Dict, Tuple, Union

import click

from ..logging import get_logger
from ..space_time.civil import CivilTimestamp
from ..space_time.julian import JulianDate
from .common import parse_date_input

logger = get_logger(__name__)


def _julian_record(ts: CivilTimestamp) -> Dict[str, Union[str, int, float]]:
    jd = JulianDate.from_civil(ts)
    return {
        "utc": ts.isoformat(),
        "julian_date": jd.date,
        "julian_day_number": jd.day_number,
        "modified_julian_date": jd.to_modified_jd(),
        "julian_centuries_j2000": jd.to_julian_century(),
    }


@click.command()
@click.argument("dates", nargs=-1, required=True)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format. Defaults to text.",
)
def julian(dates: Tuple[str, ...], fmt: str) -> None:
    """Convert dates to Julian Date, Julian Day Number and Modified Julian Date.

    Each DATE is an ISO datetime (UTC unless an offset is given), a bare
    Julian Date number, or "now".

    Examples:

       heliochron julian 2000-01-01T12:00:00

       heliochron julian 2440423.345833 --format json
    """
    records = []
    for date_str in dates:
        try:
            ts = parse_date_input(date_str)
        except ValueError as exc:
            raise click.BadParameter(str(exc), param_hint="DATES") from exc
        logger.debug(f"Parsed {date_str!r} as {ts.isoformat()}")
        records.append(_julian_record(ts))

    if fmt == "json":
        click.echo(json.dumps(records, indent=2))
        return

    for record in records:
        click.echo(f"UTC: {record['utc']}")
        click.echo(f"Julian date: {record['julian_date']:.6f}")
        click.echo(f"Julian day number: {record['julian_day_number']}")
        click.echo(f"Modified Julian date: {record['modified_julian_date']:.6f}")
        click.echo(
            f"Julian centuries since J2000.0: {record['julian_centuries_j2000']:.10f}"
        )
        click.echo("")
