"""The 13 relations of Allen's interval algebra.

Each relation reads "x <relation> y" for a call `relate(x, y)`. Taken
together they are mutually exclusive and exhaustive: any two intervals
relate in exactly one way.
"""

from enum import Enum

from typing_extensions import override


class Relation(str, Enum):
    # greater(x) < lesser(y)
    BEFORE = "Before"
    # greater(x) == lesser(y)
    MEETS = "Meets"
    # lesser(x) < lesser(y) < greater(x) < greater(y)
    OVERLAPS = "Overlaps"
    # lesser(x) < lesser(y), greater(x) == greater(y)
    FINISHED_BY = "FinishedBy"
    # lesser(x) < lesser(y), greater(x) > greater(y)
    CONTAINS = "Contains"
    # lesser(x) == lesser(y), greater(x) < greater(y)
    STARTS = "Starts"
    # lesser(x) == lesser(y), greater(x) == greater(y)
    EQUAL = "Equal"
    # lesser(x) == lesser(y), greater(x) > greater(y)
    STARTED_BY = "StartedBy"
    # lesser(x) > lesser(y), greater(x) < greater(y)
    DURING = "During"
    # lesser(x) > lesser(y), greater(x) == greater(y)
    FINISHES = "Finishes"
    # lesser(y) < lesser(x) < greater(y) < greater(x)
    OVERLAPPED_BY = "OverlappedBy"
    # lesser(x) == greater(y)
    MET_BY = "MetBy"
    # lesser(x) > greater(y)
    AFTER = "After"

    @override
    def __str__(self) -> str:
        return self.value

    def invert(self) -> "Relation":
        """The relation seen from the other interval.

        Inverting twice gives back the original relation, and
        `relate(x, y).invert() == relate(y, x)`.
        """
        return _INVERSES[self]


_INVERSES: dict[Relation, Relation] = {
    Relation.BEFORE: Relation.AFTER,
    Relation.AFTER: Relation.BEFORE,
    Relation.MEETS: Relation.MET_BY,
    Relation.MET_BY: Relation.MEETS,
    Relation.OVERLAPS: Relation.OVERLAPPED_BY,
    Relation.OVERLAPPED_BY: Relation.OVERLAPS,
    Relation.STARTS: Relation.STARTED_BY,
    Relation.STARTED_BY: Relation.STARTS,
    Relation.FINISHES: Relation.FINISHED_BY,
    Relation.FINISHED_BY: Relation.FINISHES,
    Relation.CONTAINS: Relation.DURING,
    Relation.DURING: Relation.CONTAINS,
    Relation.EQUAL: Relation.EQUAL,
}


def invert(relation: Relation) -> Relation:
    """Return the converse of `relation` (equivalent to swapping `relate`'s arguments)."""
    return relation.invert()
