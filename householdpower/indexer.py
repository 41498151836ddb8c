from __future__ import annotations
import logging
from os import PathLike
from typing import Optional, Union

import numpy as np
import pandas as pd

from . import canon, exceptions, utils
from .types import DateRange

_LOG = logging.getLogger(__name__)

PathType = Union[str, "PathLike[str]"]


def _date_column_chunks(path: PathType, chunksize: int):
    try:
        reader = pd.read_csv(
            path,
            sep=canon.SEP,
            header=0,
            index_col=False,
            usecols=[0],
            dtype=str,
            keep_default_na=False,
            chunksize=chunksize,
        )
    except pd.errors.EmptyDataError as e:
        raise exceptions.SchemaError(f"{path}: file has no header row.") from e
    return reader


def _scan(path: PathType, chunksize: int):
    """Yield (offset, parsed dates) per chunk of the first column."""
    offset = 0
    with _date_column_chunks(path, chunksize) as reader:
        for chunk in reader:
            col = chunk.iloc[:, 0]
            yield offset, utils.parse_dmy(col, offset=offset)
            offset += len(col)


def find_rows(
    path: PathType,
    date_range: DateRange,
    *,
    chunksize: int = canon.DEFAULT_CHUNK_ROWS,
) -> np.ndarray:
    """
    Return zero-based offsets (header excluded) of the rows whose Date lies in
    `date_range`, inclusive on both ends, in file order.

    Only the first column is read, chunk by chunk. A date that does not parse
    as DD/MM/YYYY raises ParseError naming its row.
    """
    start = pd.Timestamp(date_range.start)
    end = pd.Timestamp(date_range.end)

    hits: list[np.ndarray] = []
    for offset, dates in _scan(path, chunksize):
        mask = ((dates >= start) & (dates <= end)).to_numpy()
        hits.append(np.flatnonzero(mask) + offset)

    rows = np.concatenate(hits).astype(np.int64) if hits else np.empty(0, dtype=np.int64)
    _LOG.info(
        "%s: %d row(s) between %s and %s",
        path,
        len(rows),
        date_range.start.isoformat(),
        date_range.end.isoformat(),
    )
    return rows


def coverage(
    path: PathType, *, chunksize: int = canon.DEFAULT_CHUNK_ROWS
) -> Optional[DateRange]:
    """First and last calendar date present in the file, or None if it has no rows."""
    lo: Optional[pd.Timestamp] = None
    hi: Optional[pd.Timestamp] = None
    for _, dates in _scan(path, chunksize):
        if dates.empty:
            continue
        cmin, cmax = dates.min(), dates.max()
        lo = cmin if lo is None else min(lo, cmin)
        hi = cmax if hi is None else max(hi, cmax)
    if lo is None or hi is None:
        return None
    return DateRange(lo.date(), hi.date())
