"""
Command-line interface utilities for heliochron.

This module provides logging configuration and date parsing shared by the
heliochron commands.
"""

import logging
import math
from argparse import Namespace
from datetime import datetime, timezone
from typing import Any, Dict, Union

from ..logging import get_logger, set_log_level
from ..space_time.civil import CivilTimestamp
from ..space_time.julian import civil_from_julian

logger = get_logger(__name__)


def configure_logging(args: Union[Dict[str, Any], Namespace]) -> None:
    """
    Configure logging based on command line arguments.

    Args:
        args: Parsed command line arguments (as a dictionary or Namespace)
    """
    if isinstance(args, dict):
        quiet = args.get("quiet", False)
        debug = args.get("debug", False)
        verbosity = args.get("verbose", 0)
    else:
        quiet = getattr(args, "quiet", False)
        debug = getattr(args, "debug", False)
        verbosity = getattr(args, "verbose", 0)

    if quiet:
        log_level = logging.ERROR
    elif debug:
        log_level = logging.DEBUG
    else:
        # 0 -> WARNING, 1 -> INFO, 2+ -> DEBUG
        if verbosity == 0:
            log_level = logging.WARNING
        elif verbosity == 1:
            log_level = logging.INFO
        else:
            log_level = logging.DEBUG

    set_log_level(log_level)

    logger.debug(
        f"Logging configured with level {logging.getLevelName(log_level)}"
    )


def parse_date_input(date_str: str) -> CivilTimestamp:
    """Parse date input in various formats.

    Args:
        date_str: Date string in various formats:
            - Julian date (e.g., "2460676.5")
            - ISO format with timezone (e.g., "2025-01-01T12:00:00+00:00" or "...Z")
            - ISO format without timezone, taken as UTC (e.g., "2025-01-01")
            - "now"

    Returns:
        CivilTimestamp in UTC

    Raises:
        ValueError: If date string is invalid
    """
    if date_str.lower() == "now":
        return CivilTimestamp.from_datetime(datetime.now(timezone.utc))

    try:
        jd = float(date_str.strip("' "))
    except ValueError:
        jd = None

    if jd is not None:
        if not math.isfinite(jd):
            raise ValueError(f"Invalid date format: {date_str}")
        return civil_from_julian(jd)

    iso = date_str.strip()
    if iso.endswith("Z"):
        iso = iso[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(iso)
    except ValueError:
        raise ValueError(f"Invalid date format: {date_str}")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return CivilTimestamp.from_datetime(dt)
