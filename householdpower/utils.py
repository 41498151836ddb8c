# householdpower/utils.py
from __future__ import annotations
from typing import Sequence
from zoneinfo import ZoneInfo

import numpy as np
import pandas as pd

from . import canon, exceptions
from .types import PowerFrame


def parse_dmy(values: pd.Series, *, offset: int = 0) -> pd.Series:
    """
    Parse 'DD/MM/YYYY' strings into normalised Timestamps.

    Raises ParseError for the first value that is missing or not a real
    calendar date; `offset` is added to the position so the error names the
    row in the file rather than in the chunk.
    """
    raw = values.astype("string").str.strip()
    parsed = pd.to_datetime(raw, format=canon.DATE_FORMAT, errors="coerce")
    bad = parsed.isna().to_numpy()
    if bad.any():
        pos = int(np.flatnonzero(bad)[0])
        value = values.iloc[pos]
        row = offset + pos
        raise exceptions.ParseError(
            f"Row {row}: cannot parse date {value!r} (expected DD/MM/YYYY).",
            row=row,
            value=value,
        )
    return parsed


def is_contiguous(rows: np.ndarray) -> bool:
    """True when sorted offsets form one gap-free block."""
    if len(rows) == 0:
        return True
    return int(rows[-1]) - int(rows[0]) + 1 == len(rows)


def empty_power_frame(columns: Sequence[str] = canon.COLUMNS) -> PowerFrame:
    """
    Return an empty PowerFrame with the given header, str Date/Time and
    float measurement columns.
    """
    data = {
        c: pd.Series(dtype=object if c in (canon.DATE_COL, canon.TIME_COL) else float)
        for c in columns
    }
    idx = pd.Index([], dtype="int64", name=canon.ROW_INDEX_NAME)
    return PowerFrame(data, index=idx)


def localize(ts: pd.Series, tz: str) -> pd.Series:
    if getattr(ts.dt, "tz", None) is None:
        return ts.dt.tz_localize(ZoneInfo(tz), ambiguous="infer", nonexistent="shift_forward")
    return ts.dt.tz_convert(ZoneInfo(tz))
