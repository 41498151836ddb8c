from __future__ import annotations
import pandas as pd
from typing import Optional, Sequence

from . import canon, exceptions, utils
from .types import DateRange


def assert_power_frame(df: pd.DataFrame, header: Optional[Sequence[str]] = None) -> None:
    expected = list(header) if header is not None else canon.COLUMNS
    if list(df.columns) != expected:
        raise exceptions.SchemaError(
            f"Columns {list(df.columns)} do not match header {expected}."
        )
    for col in expected:
        if col in (canon.DATE_COL, canon.TIME_COL):
            continue
        if not pd.api.types.is_numeric_dtype(df[col]):
            raise exceptions.SchemaError(f"Column '{col}' must be numeric.")


def assert_within(df: pd.DataFrame, date_range: DateRange) -> None:
    """Every row's Date must fall inside the inclusive range."""
    if df.empty:
        return
    dates = utils.parse_dmy(df[canon.DATE_COL].reset_index(drop=True))
    outside = ~dates.between(pd.Timestamp(date_range.start), pd.Timestamp(date_range.end))
    if outside.any():
        first = df.index[int(outside.to_numpy().argmax())]
        raise exceptions.RangeError(
            f"Row {first} dated {df.loc[first, canon.DATE_COL]!r} is outside "
            f"{date_range.start}..{date_range.end}."
        )
