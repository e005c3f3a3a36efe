"""Tests for the chart and ranking formatters."""

import pytest

from src.domain.models.common import TopEntry
from src.domain.services.formatters import (
    build_ranking,
    format_for_chart,
    format_for_pie_chart,
    top_entry,
)
from src.utils.number_utils import percentage, safe_divide


def test_pie_percentages_sum_to_one_and_sort_descending() -> None:
    """Pie points should be sorted by value with shares summing to 1."""
    points = format_for_pie_chart({"B": 25.0, "A": 50.0, "C": 25.0})

    assert [point.name for point in points] == ["A", "B", "C"]
    assert sum(point.percentage for point in points) == pytest.approx(1.0)
    assert points[0].percentage == pytest.approx(0.5)


def test_pie_chart_with_zero_total_yields_zero_shares() -> None:
    """A zero sum must not divide by zero."""
    points = format_for_pie_chart({"A": 0.0, "B": 0.0})

    assert [point.percentage for point in points] == [0.0, 0.0]


def test_plain_chart_has_no_percentage() -> None:
    points = format_for_chart({"A": 1.0, "B": 3.0})

    assert [point.name for point in points] == ["B", "A"]
    assert points[0].percentage is None


def test_ranking_is_stable_on_ties() -> None:
    """Ties keep insertion order."""
    ranking = build_ranking(
        {"FIRST": 10.0, "SECOND": 10.0, "TOP": 20.0},
        {"FIRST": 2},
    )

    assert [item.name for item in ranking] == ["TOP", "FIRST", "SECOND"]
    assert ranking[1].count == 2
    assert ranking[2].count == 0


def test_top_entry_defaults_when_empty() -> None:
    assert top_entry({}) == TopEntry(name="-", total=0.0)
    assert top_entry({"A": 1.0, "B": 3.0}) == TopEntry(name="B", total=3.0)


def test_safe_divide_guards_zero_and_non_finite() -> None:
    """Ratios resolve to 0 instead of raising or returning infinities."""
    assert safe_divide(10, 0) == 0.0
    assert safe_divide(10, 4) == 2.5
    assert safe_divide(float("inf"), 1) == 0.0
    assert percentage(1, 4) == 25.0
    assert percentage(1, 0) == 0.0
