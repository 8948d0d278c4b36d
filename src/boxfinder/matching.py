"""Find and rank catalog boxes that fit a target."""

from __future__ import annotations

import logging
import math
from typing import Iterable

from boxfinder.config import DEFAULT_RESULTS
from boxfinder.errors import SidewaysWithoutHeightError
from boxfinder.models import BoxSize, Dimensions, FitMode, RankedBox

logger = logging.getLogger(__name__)


def _divide(num: float, den: float) -> float:
    if den == 0:
        return math.inf
    return num / den


def fill_ratio(box: Dimensions, target: Dimensions, mode: FitMode) -> float:
    """
    Fill ratio used for display.

    2-D queries (target height 0) compare footprints as target/candidate,
    3-D queries compare volumes as candidate/target. Over mode inverts the
    result. The value is not clamped and can exceed 1.
    """
    if target.height == 0:
        ratio = _divide(target.area, box.area)
    else:
        ratio = _divide(box.volume, target.volume)

    if mode is FitMode.OVER:
        ratio = _divide(1, ratio)
    return ratio


def filter_fitting(
    catalog: Iterable[BoxSize], target: Dimensions, mode: FitMode, sideways: bool
) -> list[BoxSize]:
    if mode is FitMode.OVER:
        return [b for b in catalog if b.dimensions.fits_over(target, sideways)]
    return [b for b in catalog if b.dimensions.fits_into(target, sideways)]


def rank_boxes(boxes: list[BoxSize], target: Dimensions, mode: FitMode) -> list[BoxSize]:
    """
    Order fitting boxes, best first.

    Boxes are sorted smallest first by volume (or by footprint area when
    the target has no height). Into mode then reverses that order, so
    equally sized boxes come out in reverse catalog order.
    """
    if target.height != 0:
        ranked = sorted(boxes, key=lambda b: b.dimensions.volume)
    else:
        ranked = sorted(boxes, key=lambda b: b.dimensions.area)

    if mode is FitMode.INTO:
        ranked.reverse()
    return ranked


def find_matches(
    catalog: list[BoxSize],
    target: Dimensions,
    mode: FitMode = FitMode.OVER,
    sideways: bool = False,
    count: int = DEFAULT_RESULTS,
) -> list[RankedBox]:
    """
    Find the best fitting catalog boxes for target.

    Args:
        catalog: Boxes to choose from
        target: Object (over mode) or container (into mode) dimensions
        mode: FitMode.OVER to cover the target, FitMode.INTO to fit inside it
        sideways: Also allow the target's height to swap with length or width
        count: Maximum number of results

    Returns:
        Up to count ranked boxes; empty if nothing fits.
    """
    mode = FitMode(mode)
    if sideways and target.height == 0:
        raise SidewaysWithoutHeightError()
    if count < 1:
        raise ValueError(f"count must be a positive integer, got {count}")

    fitting = filter_fitting(catalog, target, mode, sideways)
    logger.debug(
        "%d of %d boxes fit %s %s (sideways=%s)",
        len(fitting), len(catalog), mode.value, target, sideways,
    )

    ranked = rank_boxes(fitting, target, mode)[:count]
    return [
        RankedBox(box=box, rank=i, ratio=fill_ratio(box.dimensions, target, mode))
        for i, box in enumerate(ranked, start=1)
    ]
