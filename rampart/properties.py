import operator as op
from collections.abc import Iterable
from typing import Any, Callable, Generic, Hashable

from typing_extensions import override

from .core import Filter, relate
from .interval import Interval, IvlIn
from .relation import Relation


class Operator(Filter[IvlIn]):
    def __init__(
        self,
        left: "Property[IvlIn] | Any",
        right: "Property[IvlIn] | Any",
        operator: Callable[[Any, Any], bool],
    ):
        self.left: "Property[IvlIn] | Any" = left
        self.right: "Property[IvlIn] | Any" = right
        self.operator: Callable[[Any, Any], bool] = operator

    @override
    def apply(self, interval: IvlIn) -> bool:
        left_val = (
            self.left.apply(interval) if isinstance(self.left, Property) else self.left
        )
        right_val = (
            self.right.apply(interval)
            if isinstance(self.right, Property)
            else self.right
        )
        return self.operator(left_val, right_val)


class Property(Generic[IvlIn]):
    def apply(self, interval: IvlIn) -> Any:
        raise NotImplementedError

    def __ge__(self, other: "Property[IvlIn] | Any") -> Operator[IvlIn]:
        return Operator(self, other, op.ge)

    def __le__(self, other: "Property[IvlIn] | Any") -> Operator[IvlIn]:
        return Operator(self, other, op.le)

    def __gt__(self, other: "Property[IvlIn] | Any") -> Operator[IvlIn]:
        return Operator(self, other, op.gt)

    def __lt__(self, other: "Property[IvlIn] | Any") -> Operator[IvlIn]:
        return Operator(self, other, op.lt)

    @override
    def __eq__(  # pyright: ignore[reportIncompatibleMethodOverride]
        self, other: Any
    ) -> Operator[IvlIn]:
        return Operator(self, other, op.eq)

    @override
    def __ne__(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        other: Any,
    ) -> Operator[IvlIn]:
        return Operator(self, other, op.ne)


class Lesser(Property[Interval[Any]]):
    @override
    def apply(self, interval: Interval[Any]) -> Any:
        return interval.lesser


class Greater(Property[Interval[Any]]):
    @override
    def apply(self, interval: Interval[Any]) -> Any:
        return interval.greater


class RelationTo(Property[Interval[Any]]):
    """The relation of each interval to a fixed reference interval."""

    def __init__(self, reference: Interval[Any]):
        self.reference: Interval[Any] = reference

    @override
    def apply(self, interval: Interval[Any]) -> Relation:
        return relate(interval, self.reference)


lesser: Lesser = Lesser()
greater: Greater = Greater()


def relation_to(reference: Interval[Any]) -> RelationTo:
    """Property yielding `relate(interval, reference)`.

    Example:
        >>> window = to_interval(9, 17)
        >>> inside = one_of(relation_to(window), [Relation.DURING, Relation.EQUAL])
        >>> inside(to_interval(10, 12))
        True
    """
    return RelationTo(reference)


def one_of(property: Property[IvlIn], values: Iterable[Hashable]) -> Operator[IvlIn]:
    return Operator(set(values), property, op.contains)
