from __future__ import annotations

import pytest

from tag_cloud.cloud.font_size import CloudEntry, compute_font_sizes, font_size_for
from tag_cloud.cloud.selection import RankedEntry
from tag_cloud.constants import FONT_MAX, FONT_MIN


def test_sample_font_sizes() -> None:
    entries = [RankedEntry("cat", 2), RankedEntry("mat", 1), RankedEntry("the", 3)]
    assert compute_font_sizes(entries) == [
        CloudEntry("cat", 2, 29),
        CloudEntry("mat", 1, 0),
        CloudEntry("the", 3, 48),
    ]


def test_minimum_count_gets_zero() -> None:
    assert font_size_for(5, t_min=5, t_max=10) == 0


def test_maximum_count_gets_font_max() -> None:
    assert font_size_for(10, t_min=5, t_max=10) == FONT_MAX


def test_interpolation_floors() -> None:
    # 37 * 1 / 3 = 12.33...
    assert font_size_for(2, t_min=1, t_max=4) == 12 + FONT_MIN


def test_equal_counts_get_uniform_font_max() -> None:
    entries = [RankedEntry("a", 4), RankedEntry("b", 4)]
    assert [entry.font_size for entry in compute_font_sizes(entries)] == [FONT_MAX, FONT_MAX]


def test_single_entry() -> None:
    assert compute_font_sizes([RankedEntry("solo", 1)]) == [CloudEntry("solo", 1, FONT_MAX)]


def test_empty_entries() -> None:
    assert compute_font_sizes([]) == []


def test_custom_range() -> None:
    entries = [RankedEntry("a", 1), RankedEntry("b", 3)]
    assert [entry.font_size for entry in compute_font_sizes(entries, font_min=10, font_max=20)] == [0, 20]


def test_invalid_range() -> None:
    with pytest.raises(ValueError):
        compute_font_sizes([RankedEntry("a", 1)], font_min=30, font_max=20)


def test_monotonic_and_bounded() -> None:
    entries = [RankedEntry(f"w{count}", count) for count in range(1, 40)]
    sizes = [entry.font_size for entry in compute_font_sizes(entries)]
    assert sizes[0] == 0
    above_min = sizes[1:]
    assert above_min == sorted(above_min)
    assert all(FONT_MIN <= size <= FONT_MAX for size in above_min)
