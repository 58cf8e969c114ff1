"""
Configuration constants for weekview.

All paths and tunables live here so the rest of the package never
hard-codes a location. Two environment variables are honoured:

    WEEKVIEW_DATA_DIR    directory holding saved_schedule.json
    WEEKVIEW_LOG_LEVEL   default log level (e.g. DEBUG, INFO, WARNING)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from rich.logging import RichHandler


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

PACKAGE_DIR = Path(__file__).resolve().parent

DATA_DIR = Path(os.environ.get("WEEKVIEW_DATA_DIR") or PACKAGE_DIR / "data")

DEFAULT_STORE_PATH = DATA_DIR / "saved_schedule.json"


# ---------------------------------------------------------------------------
# Timetable layout
# ---------------------------------------------------------------------------

# One row of pasted text has exactly this many tab-separated fields
FIELD_COUNT = 11

# Teaching day: periods 1..PERIOD_COUNT, each PERIOD_MINUTES long
PERIOD_COUNT = 11
PERIOD_MINUTES = 50


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL = os.environ.get("WEEKVIEW_LOG_LEVEL", "WARNING").upper()


def configure_logging(verbose: bool = False) -> None:
    """
    Route all package log records through rich's handler.

    --verbose always wins over WEEKVIEW_LOG_LEVEL.
    """
    level = logging.DEBUG if verbose else getattr(logging, LOG_LEVEL, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )
