from __future__ import annotations
from typing import Optional

import numpy as np
import pandas as pd

from . import canon, exceptions, utils
from .types import PowerFrame


def attach_timestamp(
    df: pd.DataFrame,
    *,
    tz: Optional[str] = None,
    set_index: bool = False,
) -> PowerFrame:
    """
    Combine Date + Time into a single 'datetime' column (first position).

    Date/Time are kept as-is. With `tz` the naive wall-clock timestamps are
    localised; with `set_index` the timestamp becomes the index instead.
    """
    for col in (canon.DATE_COL, canon.TIME_COL):
        if col not in df.columns:
            raise exceptions.SchemaError(f"Missing required column: {col}")

    joined = df[canon.DATE_COL].astype(str).str.strip() + " " + df[canon.TIME_COL].astype(str).str.strip()
    ts = pd.to_datetime(joined, format=canon.TIMESTAMP_FORMAT, errors="coerce")
    bad = ts.isna()
    if bad.any():
        row = bad.idxmax()
        raise exceptions.ParseError(
            f"Row {row}: cannot parse timestamp {joined.loc[row]!r}.",
            row=int(row) if isinstance(row, (int, np.integer)) else None,
            value=joined.loc[row],
        )
    if tz:
        ts = utils.localize(ts, tz)

    out = df.copy()
    out.insert(0, canon.TIMESTAMP_COL, ts)
    if set_index:
        out = out.set_index(canon.TIMESTAMP_COL)
    return PowerFrame(out)
