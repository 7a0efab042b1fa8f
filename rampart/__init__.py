from importlib.resources import files

from .core import Filter, Ordering, compare, relate
from .interval import Interval, from_interval, greater, lesser, to_interval
from .properties import Property, one_of, relation_to
from .relation import Relation, invert

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(encoding="utf-8"),
    "api": (_docs_path / "API.md").read_text(encoding="utf-8"),
}

__all__ = [
    "Interval",
    "Relation",
    "Ordering",
    "Filter",
    "Property",
    "to_interval",
    "from_interval",
    "lesser",
    "greater",
    "relate",
    "invert",
    "compare",
    "relation_to",
    "one_of",
    "docs",
]
