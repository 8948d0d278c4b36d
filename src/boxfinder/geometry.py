"""Orientation helpers for axis-aligned box matching."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Dimensions


def target_orientations(target: "Dimensions", sideways: bool) -> list["Dimensions"]:
    """
    Orientations of the target to test a candidate against.

    Length/width swaps are handled by the footprint check itself, so the
    only extra orientations are "width up" and "length up". They are
    produced from the unrotated target only, never from each other:
    sideways matching is exactly one rotation deep.
    """
    if not sideways:
        return [target]
    return [
        target,
        target.rotate_width_into_height(),
        target.rotate_length_into_height(),
    ]


def height_compatible(inner: int, outer: int) -> bool:
    """Height check where 0 on either side means unconstrained."""
    return inner == 0 or outer == 0 or inner <= outer


def footprint_fits(inner_l: int, inner_w: int, outer_l: int, outer_w: int) -> bool:
    """Whether an inner footprint fits an outer one, either way round."""
    return (inner_l <= outer_l and inner_w <= outer_w) or (
        inner_w <= outer_l and inner_l <= outer_w
    )
