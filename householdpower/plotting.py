# householdpower/plotting.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import pandas as pd

from . import canon, exceptions

_LOG = logging.getLogger(__name__)


def _wall_clock(ts: pd.Series) -> pd.Series:
    """Local wall-clock timestamps; tz-aware values keep their local time, not UTC."""
    if getattr(ts.dt, "tz", None) is not None:
        return ts.dt.tz_localize(None)
    return ts


def plot_series(
    df: pd.DataFrame,
    columns: Sequence[str],
    out_path: Path,
    *,
    ylabel: Optional[str] = None,
    xlabel: str = "",
    colors: Optional[Sequence[str]] = None,
) -> Optional[Path]:
    """
    Line chart of `columns` against the 'datetime' column, one axes, saved as PNG.
    Returns the written path, or None when there is nothing to draw.
    """
    if canon.TIMESTAMP_COL not in df.columns:
        raise exceptions.SchemaError(
            f"Missing '{canon.TIMESTAMP_COL}' column; call transform.attach_timestamp first."
        )
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise exceptions.SchemaError(f"Cannot plot missing column(s): {', '.join(missing)}")
    if df.empty or not columns:
        _LOG.info("no rows to plot for %s; skipping %s", ", ".join(columns), out_path)
        return None

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    fig = plt.figure(figsize=canon.FIGSIZE_IN)
    try:
        x = _wall_clock(df[canon.TIMESTAMP_COL])
        for i, col in enumerate(columns):
            color = colors[i] if colors and i < len(colors) else None
            plt.plot(x, pd.to_numeric(df[col], errors="coerce").values, label=col, color=color)
        plt.xlabel(xlabel)
        plt.ylabel(ylabel if ylabel is not None else canon.AXIS_LABELS.get(columns[0], columns[0]))
        if len(columns) > 1:
            plt.legend()
        plt.savefig(out_path, dpi=canon.FIG_DPI)
    finally:
        plt.close(fig)
    _LOG.info("%d series -> %s", len(columns), out_path)
    return out_path
