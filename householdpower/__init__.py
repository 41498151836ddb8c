from . import (
    canon,
    exceptions,
    types,
    utils,
    indexer,
    loader,
    validate,
    transform,
    plotting,
    report,
)
from .types import DateRange, PowerFrame
from .indexer import find_rows
from .loader import load_range

__all__ = [
    "canon",
    "exceptions",
    "types",
    "utils",
    "indexer",
    "loader",
    "validate",
    "transform",
    "plotting",
    "report",
    "DateRange",
    "PowerFrame",
    "find_rows",
    "load_range",
]
