from importlib.resources import files

from .errors import UnboundedRangeError
from .query import Query
from .ranges import Bound, BoundType, ByteRange, Range, TimestampRange
from .timestamps import from_micros, to_micros

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "BoundType",
    "Bound",
    "Range",
    "ByteRange",
    "TimestampRange",
    "UnboundedRangeError",
    "Query",
    "to_micros",
    "from_micros",
    "docs",
]
