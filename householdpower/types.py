from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime
from typing import Union

import pandas as pd

DateLike = Union[date, str]


def _as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value).strip())


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar date range: start <= d <= end."""

    start: date
    end: date

    def __post_init__(self):
        object.__setattr__(self, "start", _as_date(self.start))
        object.__setattr__(self, "end", _as_date(self.end))
        if self.start > self.end:
            raise ValueError(
                f"Start date {self.start.isoformat()} is after end date {self.end.isoformat()}."
            )

    @classmethod
    def parse(cls, start: DateLike, end: DateLike) -> "DateRange":
        """Build from 'YYYY-MM-DD' strings or date objects."""
        return cls(_as_date(start), _as_date(end))

    def contains(self, d: date) -> bool:
        return self.start <= d <= self.end

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1


# Filtered table
class PowerFrame(pd.DataFrame):
    """
    Rows of the household power consumption file for one date range.

    Expected:
      - index: source row offsets named 'row' (header excluded)
      - columns: the file header in file order, Date/Time as str,
        measurements as float with '?' read as NaN
    """

    @property
    def _constructor(self):
        return PowerFrame

    @property
    def global_active_power(self) -> pd.Series:
        return self["Global_active_power"]

    @property
    def global_reactive_power(self) -> pd.Series:
        return self["Global_reactive_power"]

    @property
    def voltage(self) -> pd.Series:
        return self["Voltage"]

    @property
    def sub_metering(self) -> pd.DataFrame:
        return pd.DataFrame(self[["Sub_metering_1", "Sub_metering_2", "Sub_metering_3"]])
