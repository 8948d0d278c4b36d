"""Tab-separated box catalog loader."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from pydantic import ValidationError

from boxfinder.errors import DimensionParseError
from boxfinder.models import BoxSize, CatalogEntry, Dimensions, FitMode

logger = logging.getLogger(__name__)

SAME_AS_OUTER = "-"


def parse_dimensions(text: str, source: str | None = None) -> Dimensions:
    """
    Parse "LxWxH" into Dimensions.

    Exactly three non-negative integers separated by a literal 'x' are
    accepted; anything else raises DimensionParseError.
    """
    parts = text.strip().split("x")
    if len(parts) != 3:
        raise DimensionParseError(text, source)
    try:
        length, width, height = (int(p.strip(), 10) for p in parts)
        return Dimensions(length=length, width=width, height=height)
    except (ValueError, ValidationError) as e:
        raise DimensionParseError(text, source) from e


def read_catalog(path: str | Path) -> list[CatalogEntry]:
    """
    Read every box in a catalog file.

    Rows with fewer than three fields, or whose first field starts with
    '#', are skipped. A malformed dimension in any other row is fatal.
    """
    path = Path(path)
    entries: list[CatalogEntry] = []

    with open(path, "r", encoding="utf-8", newline="") as fd:
        reader = csv.reader(fd, delimiter="\t")
        for row in reader:
            lineno = reader.line_num
            if len(row) < 3:
                logger.debug("%s:%d: skipping short row %r", path, lineno, row)
                continue
            if row[0].startswith("#"):
                continue

            where = f"{path}:{lineno}"
            outer = parse_dimensions(row[1], where)
            if row[2].strip() == SAME_AS_OUTER:
                inner = outer
            else:
                inner = parse_dimensions(row[2], where)

            entries.append(CatalogEntry(name=row[0].strip(), outer=outer, inner=inner))

    logger.info("Loaded %d boxes from %s", len(entries), path)
    return entries


def load_catalog(path: str | Path, mode: FitMode) -> list[BoxSize]:
    """Read a catalog and keep the dimensions that matter for mode."""
    mode = FitMode(mode)
    return [entry.to_box(mode) for entry in read_catalog(path)]
