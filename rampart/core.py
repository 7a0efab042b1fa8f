from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, Generic

from typing_extensions import override

from rampart.interval import Interval, IvlIn, T
from rampart.relation import Relation


class Ordering(IntEnum):
    """Result of a three-way comparison."""

    LT = -1
    EQ = 0
    GT = 1


def compare(first: Any, second: Any) -> Ordering:
    """Three-way compare two values.

    Values that are neither less nor greater than each other compare EQ,
    which keeps `relate` total even for inconsistent orderings like NaN.
    """
    if first < second:
        return Ordering.LT
    if first > second:
        return Ordering.GT
    return Ordering.EQ


# Keyed by (compare(lesser x, lesser y), compare(greater x, greater y)) once
# the two intervals are known to share more than a single point.
_OVERLAPPING: dict[tuple[Ordering, Ordering], Relation] = {
    (Ordering.LT, Ordering.LT): Relation.OVERLAPS,
    (Ordering.LT, Ordering.EQ): Relation.FINISHED_BY,
    (Ordering.LT, Ordering.GT): Relation.CONTAINS,
    (Ordering.EQ, Ordering.LT): Relation.STARTS,
    (Ordering.EQ, Ordering.EQ): Relation.EQUAL,
    (Ordering.EQ, Ordering.GT): Relation.STARTED_BY,
    (Ordering.GT, Ordering.LT): Relation.DURING,
    (Ordering.GT, Ordering.EQ): Relation.FINISHES,
    (Ordering.GT, Ordering.GT): Relation.OVERLAPPED_BY,
}


def relate(x: Interval[T], y: Interval[T]) -> Relation:
    """Classify how interval `x` relates to interval `y`.

    Always returns exactly one of the 13 relations. Touching endpoints are
    checked before any overlap, so a point interval sitting on the start of
    another (or on itself) meets it.

    Example:
        >>> y = to_interval(3, 7)
        >>> relate(to_interval(1, 2), y)
        <Relation.BEFORE: 'Before'>
        >>> relate(to_interval(2, 3), y)
        <Relation.MEETS: 'Meets'>
        >>> relate(to_interval(2, 4), y)
        <Relation.OVERLAPS: 'Overlaps'>
        >>> relate(to_interval(3, 7), y)
        <Relation.EQUAL: 'Equal'>
        >>> relate(to_interval(8, 9), y)
        <Relation.AFTER: 'After'>
    """
    lxly = compare(x.lesser, y.lesser)
    lxgy = compare(x.lesser, y.greater)
    gxly = compare(x.greater, y.lesser)
    gxgy = compare(x.greater, y.greater)

    if gxly is Ordering.LT:
        return Relation.BEFORE
    if gxly is Ordering.EQ:
        return Relation.MEETS
    if lxgy is Ordering.EQ:
        return Relation.MET_BY
    if lxgy is Ordering.GT:
        return Relation.AFTER
    return _OVERLAPPING[lxly, gxgy]


class Filter(ABC, Generic[IvlIn]):
    """Predicate over a single interval, composable with `&`, `|` and `~`."""

    @abstractmethod
    def apply(self, interval: IvlIn) -> bool:
        pass

    def __call__(self, interval: IvlIn) -> bool:
        return self.apply(interval)

    def __or__(self, other: "Filter[IvlIn]") -> "Filter[IvlIn]":
        if not isinstance(other, Filter):
            raise TypeError(
                f"Cannot union (|) a Filter with {type(other).__name__}.\n"
                f"Hint: Use | to combine filters: (lesser >= 2) | (greater < 9)"
            )
        return Or(self, other)

    def __and__(self, other: "Filter[IvlIn]") -> "Filter[IvlIn]":
        if not isinstance(other, Filter):
            raise TypeError(
                f"Cannot intersect (&) a Filter with {type(other).__name__}.\n"
                f"Hint: Use & to combine filters: (lesser >= 2) & (greater < 9)"
            )
        return And(self, other)

    def __invert__(self) -> "Filter[IvlIn]":
        return Not(self)


class Or(Filter[IvlIn]):
    def __init__(self, *filters: Filter[IvlIn]):
        super().__init__()
        self.filters: tuple[Filter[IvlIn], ...] = filters

    @override
    def apply(self, interval: IvlIn) -> bool:
        return any(f.apply(interval) for f in self.filters)


class And(Filter[IvlIn]):
    def __init__(self, *filters: Filter[IvlIn]):
        super().__init__()
        self.filters: tuple[Filter[IvlIn], ...] = filters

    @override
    def apply(self, interval: IvlIn) -> bool:
        return all(f.apply(interval) for f in self.filters)


class Not(Filter[IvlIn]):
    def __init__(self, inner: Filter[IvlIn]):
        super().__init__()
        self.inner: Filter[IvlIn] = inner

    @override
    def apply(self, interval: IvlIn) -> bool:
        return not self.inner.apply(interval)
