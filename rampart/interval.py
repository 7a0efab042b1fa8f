import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar

if TYPE_CHECKING:
    from rampart.relation import Relation

logger = logging.getLogger(__name__)


class Comparable(Protocol):
    """Anything supporting `<` and `>` against values of its own type."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=Comparable)


def _is_reversed(first: Any, second: Any) -> bool:
    try:
        return bool(first > second)
    except TypeError as exc:
        raise TypeError(
            f"Interval endpoints must be comparable with each other.\n"
            f"Got {type(first).__name__!r}: {first!r} and "
            f"{type(second).__name__!r}: {second!r}\n"
            f"Hint: Use two endpoints of the same ordered type:\n"
            f"  to_interval(1, 5)\n"
            f"  to_interval(date(2025, 1, 1), date(2025, 1, 31))"
        ) from exc


@dataclass(frozen=True, order=True, kw_only=True)
class Interval(Generic[T]):
    """A closed range `[lesser, greater]` over a totally ordered type.

    Endpoints are normalized on construction, so `lesser <= greater` always
    holds no matter which order they were given in. Equality, hashing and
    ordering all work on the normalized `(lesser, greater)` pair.

    Endpoints whose ordering is inconsistent (such as float NaN) are a
    precondition violation: they are kept in the order given and relations
    computed from them are unspecified.
    """

    lesser: T
    greater: T

    def __post_init__(self) -> None:
        if _is_reversed(self.lesser, self.greater):
            logger.debug(
                "Swapping reversed interval endpoints %r and %r",
                self.lesser,
                self.greater,
            )
            lesser, greater = self.greater, self.lesser
            object.__setattr__(self, "lesser", lesser)
            object.__setattr__(self, "greater", greater)

    def __iter__(self) -> Iterator[T]:
        yield self.lesser
        yield self.greater

    def __str__(self) -> str:
        """Short form showing the normalized range."""
        return f"Interval({self.lesser}→{self.greater})"

    def relate(self, other: "Interval[T]") -> "Relation":
        """How this interval relates to `other`. Same as `relate(self, other)`."""
        # Import at runtime to avoid circular dependency
        from rampart.core import relate

        return relate(self, other)


IvlIn = TypeVar("IvlIn", bound="Interval[Any]", contravariant=True)


def to_interval(first: T, second: T) -> Interval[T]:
    """Build an interval from two endpoints given in either order.

    Example:
        >>> to_interval(1, 2)
        Interval(lesser=1, greater=2)
        >>> to_interval(2, 1)
        Interval(lesser=1, greater=2)
    """
    return Interval(lesser=first, greater=second)


def from_interval(interval: Interval[T]) -> tuple[T, T]:
    """Return the `(lesser, greater)` pair of an interval.

    This undoes `to_interval` up to endpoint order:
    `from_interval(to_interval(a, b)) == (min(a, b), max(a, b))`.
    """
    return interval.lesser, interval.greater


def lesser(interval: Interval[T]) -> T:
    return interval.lesser


def greater(interval: Interval[T]) -> T:
    return interval.greater
