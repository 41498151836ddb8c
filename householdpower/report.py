from __future__ import annotations
from pathlib import Path
from typing import Optional, Sequence

from . import loader, plotting, transform
from .indexer import PathType
from .types import DateRange


def render(
    path: PathType,
    date_range: DateRange,
    columns: Sequence[str],
    out_path: Path,
    *,
    ylabel: Optional[str] = None,
    tz: Optional[str] = None,
) -> Optional[Path]:
    """Load the rows in `date_range`, add the timestamp and chart `columns`."""
    df = loader.load_range(path, date_range)
    df = transform.attach_timestamp(df, tz=tz)
    return plotting.plot_series(df, columns, out_path, ylabel=ylabel)
