"""Plain-text output for ranked boxes."""

from __future__ import annotations

import math

from boxfinder.models import RankedBox


def format_results(results: list[RankedBox], count: int) -> list[str]:
    """
    One aligned line per result, e.g. " 1. Small - 30 x 20 x 15 (87.50%)".

    The rank column is as wide as the largest rank that could be shown
    for count, so the layout does not shift with the number of matches.
    """
    if not results:
        return []

    rank_width = int(math.log10(max(count, 1))) + 1
    name_width = max(len(r.box.name) for r in results)
    dims_width = max(len(str(r.box.dimensions)) for r in results)

    return [
        f"{r.rank:>{rank_width}}. {r.box.name:<{name_width}} - "
        f"{str(r.box.dimensions):>{dims_width}} ({r.percent:5.2f}%)"
        for r in results
    ]
