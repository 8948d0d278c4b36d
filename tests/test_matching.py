from __future__ import annotations

import math

import pytest

from boxfinder.errors import SidewaysWithoutHeightError
from boxfinder.matching import fill_ratio, find_matches
from boxfinder.models import BoxSize, Dimensions, FitMode


def dims(length: int, width: int, height: int = 0) -> Dimensions:
    return Dimensions(length=length, width=width, height=height)


def box(name: str, length: int, width: int, height: int = 0) -> BoxSize:
    return BoxSize(name=name, dimensions=dims(length, width, height))


CUBES = [
    box("A", 10, 10, 10),
    box("B", 20, 20, 20),
    box("C", 15, 15, 15),
]


def names(results) -> list[str]:
    return [r.box.name for r in results]


def test_into_lists_largest_first() -> None:
    """Into mode reverses the ascending volume order."""
    results = find_matches(CUBES, dims(25, 25, 25), FitMode.INTO, False, 5)
    assert names(results) == ["B", "C", "A"]
    assert [r.rank for r in results] == [1, 2, 3]
    assert results[0].ratio == pytest.approx(8000 / 15625)


def test_over_lists_smallest_first() -> None:
    results = find_matches(CUBES, dims(5, 5, 5), FitMode.OVER, False, 5)
    assert names(results) == ["A", "C", "B"]
    # Over mode reports target volume / box volume
    assert results[0].ratio == pytest.approx(125 / 1000)
    assert results[0].percent == pytest.approx(12.5)


def test_nothing_fits_is_empty_not_error() -> None:
    assert find_matches(CUBES, dims(25, 25, 25), FitMode.OVER, False, 5) == []
    assert find_matches(CUBES, dims(5, 5, 5), FitMode.INTO, False, 5) == []


def test_sideways_without_height_rejected() -> None:
    with pytest.raises(SidewaysWithoutHeightError):
        find_matches(CUBES, dims(10, 10), FitMode.OVER, True, 5)
    with pytest.raises(SidewaysWithoutHeightError):
        find_matches([], dims(10, 10), FitMode.INTO, True, 5)


def test_count_must_be_positive() -> None:
    with pytest.raises(ValueError):
        find_matches(CUBES, dims(5, 5, 5), FitMode.OVER, False, 0)


def test_truncates_to_count() -> None:
    catalog = [box(f"B{i}", 10 + i, 10 + i, 10 + i) for i in range(5)]
    results = find_matches(catalog, dims(5, 5, 5), FitMode.OVER, False, 2)
    assert names(results) == ["B0", "B1"]


def test_ties_keep_catalog_order_and_into_reverses_it() -> None:
    catalog = [box("X", 10, 10, 10), box("Y", 20, 5, 10), box("Z", 5, 5, 5)]
    over = find_matches(catalog, dims(5, 5, 5), FitMode.OVER, False, 5)
    assert names(over) == ["Z", "X", "Y"]
    into = find_matches(catalog, dims(30, 30, 30), FitMode.INTO, False, 5)
    assert names(into) == ["Y", "X", "Z"]


def test_flat_query_sorts_by_footprint() -> None:
    """Without a target height, volume is ignored and area decides."""
    catalog = [box("tall", 20, 20, 100), box("wide", 30, 30, 1)]
    results = find_matches(catalog, dims(10, 10), FitMode.OVER, False, 5)
    assert names(results) == ["tall", "wide"]


def test_sideways_finds_more_boxes() -> None:
    catalog = [box("tube", 60, 8, 8)]
    target = dims(5, 5, 50)
    assert find_matches(catalog, target, FitMode.OVER, False, 5) == []
    assert names(find_matches(catalog, target, FitMode.OVER, True, 5)) == ["tube"]


def test_mode_accepts_plain_string() -> None:
    results = find_matches(CUBES, dims(25, 25, 25), "into", False, 1)
    assert names(results) == ["B"]


def test_flat_over_ratio_is_not_clamped() -> None:
    ratio = fill_ratio(dims(200, 100, 30), dims(100, 50), FitMode.OVER)
    assert ratio == pytest.approx(4.0)


def test_flat_into_ratio() -> None:
    ratio = fill_ratio(dims(50, 50, 30), dims(100, 50), FitMode.INTO)
    assert ratio == pytest.approx(2.0)


def test_zero_area_box_ratio_is_infinite() -> None:
    assert math.isinf(fill_ratio(dims(0, 0, 0), dims(10, 10), FitMode.INTO))
    assert fill_ratio(dims(0, 0, 0), dims(10, 10), FitMode.OVER) == 0.0
