from __future__ import annotations
import logging
from itertools import islice
from typing import cast

import numpy as np
import pandas as pd

from . import canon, exceptions, indexer, utils, validate
from .indexer import PathType
from .types import DateRange, PowerFrame

_LOG = logging.getLogger(__name__)


def read_header(path: PathType) -> list[str]:
    """Column names from the header row of the data file."""
    try:
        head = pd.read_csv(path, sep=canon.SEP, nrows=0)
    except pd.errors.EmptyDataError as e:
        raise exceptions.SchemaError(f"{path}: file has no header row.") from e
    return [str(c) for c in head.columns]


def _check_widths(path: PathType, rows: np.ndarray, width: int) -> None:
    """
    Every selected line must have exactly `width` fields. read_csv pads short
    lines with NaN, which would pass them off as missing readings.
    """
    wanted = set((rows + 1).tolist())
    last_line = int(rows.max()) + 1
    with open(path, encoding="utf-8", newline="") as fh:
        for line_no, line in enumerate(islice(fh, last_line + 1)):
            if line_no not in wanted:
                continue
            fields = line.rstrip("\r\n").count(canon.SEP) + 1
            if fields != width:
                row = line_no - 1
                raise exceptions.SchemaError(
                    f"{path}: row {row} has {fields} field(s) but the header has {width}."
                )


def _read_rows(path: PathType, rows: np.ndarray) -> pd.DataFrame:
    # Line 0 of the file is the header, so data row r sits on line r + 1.
    if utils.is_contiguous(rows):
        _LOG.debug("%s: contiguous read of %d row(s) from %d", path, len(rows), rows[0])
        skiprows = int(rows[0]) + 1
    else:
        _LOG.debug("%s: selective read of %d row(s)", path, len(rows))
        wanted = set((rows + 1).tolist())
        skiprows = lambda line: line not in wanted  # noqa: E731

    try:
        return pd.read_csv(
            path,
            sep=canon.SEP,
            header=None,
            skiprows=skiprows,
            nrows=len(rows),
            dtype={0: str, 1: str},
            na_values=[canon.NA_MARKER, ""],
            keep_default_na=False,
        )
    except pd.errors.ParserError as e:
        raise exceptions.SchemaError(f"{path}: data row width differs from header: {e}") from e


def _coerce_numeric(df: pd.DataFrame, col: str) -> pd.Series:
    s = df[col]
    if pd.api.types.is_numeric_dtype(s):
        return s.astype(float)
    num = pd.to_numeric(s, errors="coerce")
    bad = (num.isna() & s.notna()).to_numpy()
    if bad.any():
        pos = int(np.flatnonzero(bad)[0])
        row = int(df.index[pos])
        raise exceptions.ParseError(
            f"Row {row}: cannot parse {col} value {s.iloc[pos]!r} as a number.",
            row=row,
            value=s.iloc[pos],
        )
    return num.astype(float)


def load_range(
    path: PathType,
    date_range: DateRange,
    *,
    strict: bool = False,
    chunksize: int = canon.DEFAULT_CHUNK_ROWS,
) -> PowerFrame:
    """
    Read only the rows of `path` whose Date lies in `date_range`.

    - columns: the file header, same names and order
    - index: source row offsets ('row'), file order preserved
    - '?' is read as NaN; measurements are float

    A range with no matching rows returns an empty frame, or raises
    RangeError when `strict` is set.
    """
    header = read_header(path)
    rows = indexer.find_rows(path, date_range, chunksize=chunksize)

    if len(rows) == 0:
        exceptions.require(
            not strict,
            f"{path}: no rows between {date_range.start} and {date_range.end}.",
            exceptions.RangeError,
        )
        return utils.empty_power_frame(header)

    _check_widths(path, rows, len(header))
    df = _read_rows(path, rows)
    if df.shape[1] != len(header):
        raise exceptions.SchemaError(
            f"{path}: header has {len(header)} column(s) but data rows have {df.shape[1]}."
        )
    exceptions.require(
        len(df) == len(rows),
        f"{path}: expected {len(rows)} row(s), read {len(df)}.",
        exceptions.SchemaError,
    )

    df.columns = header
    df.index = pd.Index(rows, name=canon.ROW_INDEX_NAME)
    for col in header:
        if col not in (canon.DATE_COL, canon.TIME_COL):
            df[col] = _coerce_numeric(df, col)

    out = PowerFrame(df)
    validate.assert_power_frame(out, header)
    _LOG.info("%s: loaded %d row(s) x %d column(s)", path, len(out), len(header))
    return cast(PowerFrame, out)
