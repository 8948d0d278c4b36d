"""Runtime defaults, read from the environment (and a local .env if present)."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Does not override variables that are already set
load_dotenv()

PACKAGED_BOXFILE = Path(__file__).resolve().parent / "boxes.tsv"
DEFAULT_RESULTS = 5
DEFAULT_LOG_LEVEL = "WARNING"


def get_boxfile() -> Path:
    """Catalog used when none is given explicitly."""
    value = os.getenv("BOXFINDER_BOXFILE")
    return Path(value) if value else PACKAGED_BOXFILE


def get_default_results() -> int:
    value = os.getenv("BOXFINDER_RESULTS")
    if not value:
        return DEFAULT_RESULTS
    try:
        results = int(value)
    except ValueError:
        raise ValueError(f"BOXFINDER_RESULTS must be an integer, got '{value}'")
    if results < 1:
        raise ValueError(f"BOXFINDER_RESULTS must be positive, got {results}")
    return results


def get_log_level() -> str:
    level = os.getenv("BOXFINDER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    # getLevelName maps known names to their number and anything else to a string
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"BOXFINDER_LOG_LEVEL must be a logging level name, got '{level}'")
    return level
