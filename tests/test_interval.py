"""Tests for interval construction, normalization and accessors."""

import logging
from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from rampart import Interval, Relation, from_interval, greater, lesser, to_interval

ENDPOINTS = range(-2, 4)


class TestNormalization:
    """to_interval sorts endpoints regardless of argument order."""

    def test_ordered_endpoints_are_kept(self):
        """Endpoints already in order are stored as given."""
        assert from_interval(to_interval(1, 2)) == (1, 2)

    def test_reversed_endpoints_are_swapped(self):
        """Reversed endpoints are swapped into (lesser, greater)."""
        assert from_interval(to_interval(2, 1)) == (1, 2)

    def test_equal_endpoints(self):
        """A point interval has the same lesser and greater."""
        interval = to_interval(5, 5)
        assert interval.lesser == 5
        assert interval.greater == 5

    def test_round_trip_over_grid(self):
        """from_interval(to_interval(a, b)) is always (min, max)."""
        for a in ENDPOINTS:
            for b in ENDPOINTS:
                assert from_interval(to_interval(a, b)) == (min(a, b), max(a, b))

    def test_accessors_over_grid(self):
        """lesser and greater project min and max of the inputs."""
        for a in ENDPOINTS:
            for b in ENDPOINTS:
                interval = to_interval(a, b)
                assert lesser(interval) == min(a, b)
                assert greater(interval) == max(a, b)

    def test_direct_construction_normalizes(self):
        """The dataclass constructor enforces the invariant too."""
        interval = Interval(lesser=9, greater=3)
        assert (interval.lesser, interval.greater) == (3, 9)

    def test_other_ordered_types(self):
        """Strings and dates work as endpoints."""
        assert from_interval(to_interval("pear", "apple")) == ("apple", "pear")

        jan = date(2025, 1, 1)
        feb = date(2025, 2, 1)
        assert from_interval(to_interval(feb, jan)) == (jan, feb)

    def test_swap_is_logged_at_debug(self, caplog: pytest.LogCaptureFixture):
        """Swapping reversed endpoints emits a debug record."""
        with caplog.at_level(logging.DEBUG, logger="rampart.interval"):
            to_interval(4, 1)
            to_interval(1, 4)

        assert len(caplog.records) == 1
        assert "Swapping reversed interval endpoints" in caplog.records[0].getMessage()


class TestValueSemantics:
    """Intervals behave as immutable values."""

    def test_equality_uses_normalized_pair(self):
        """Intervals built from swapped inputs are equal."""
        assert to_interval(1, 2) == to_interval(2, 1)
        assert to_interval(1, 2) != to_interval(1, 3)

    def test_hashable(self):
        """Equal intervals hash the same."""
        assert len({to_interval(1, 2), to_interval(2, 1), to_interval(0, 2)}) == 2

    def test_ordering_compares_pairs(self):
        """Intervals sort by lesser, then greater."""
        intervals = [to_interval(3, 4), to_interval(1, 9), to_interval(1, 2)]
        assert sorted(intervals) == [
            to_interval(1, 2),
            to_interval(1, 9),
            to_interval(3, 4),
        ]

    def test_frozen(self):
        """Endpoints cannot be reassigned."""
        interval = to_interval(1, 2)
        with pytest.raises(FrozenInstanceError):
            interval.lesser = 0  # type: ignore[misc]

    def test_unpacks_like_its_pair(self):
        """Iterating yields lesser then greater."""
        low, high = to_interval(8, 3)
        assert (low, high) == (3, 8)


class TestRendering:
    """Textual renderings show the normalized pair."""

    def test_repr(self):
        assert repr(to_interval(2, 1)) == "Interval(lesser=1, greater=2)"

    def test_str(self):
        assert str(to_interval(7, 3)) == "Interval(3→7)"


class TestErrors:
    """Endpoints that cannot be ordered against each other."""

    def test_incomparable_endpoints_raise_type_error(self):
        """Mixing unorderable types raises a TypeError with a hint."""
        with pytest.raises(TypeError, match="must be comparable with each other"):
            to_interval(1, "a")

    def test_type_error_chains_original(self):
        """The original comparison error is kept as the cause."""
        with pytest.raises(TypeError) as excinfo:
            to_interval(None, 1)
        assert isinstance(excinfo.value.__cause__, TypeError)

    def test_nan_does_not_raise(self):
        """NaN endpoints are a precondition violation, not an error."""
        nan = float("nan")
        interval = to_interval(nan, 1.0)
        assert interval.greater == 1.0


def test_relate_method_delegates():
    """Interval.relate matches the module-level relate."""
    assert to_interval(1, 2).relate(to_interval(3, 7)) is Relation.BEFORE
