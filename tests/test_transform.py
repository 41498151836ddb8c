"""Combining Date + Time into a timestamp column."""

import pandas as pd
import pytest

from householdpower import canon, exceptions, loader, transform
from householdpower.types import DateRange


def _frame(dates, times):
    return pd.DataFrame({"Date": dates, "Time": times, "Voltage": [240.0] * len(dates)})


def test_attach_timestamp_combines_date_and_time():
    df = _frame(["1/2/2007", "16/12/2006"], ["00:00:00", "17:24:30"])
    out = transform.attach_timestamp(df)
    assert list(out.columns) == [canon.TIMESTAMP_COL, "Date", "Time", "Voltage"]
    assert out[canon.TIMESTAMP_COL].tolist() == [
        pd.Timestamp("2007-02-01 00:00:00"),
        pd.Timestamp("2006-12-16 17:24:30"),
    ]
    # input untouched
    assert canon.TIMESTAMP_COL not in df.columns


def test_attach_timestamp_tz_and_index():
    df = _frame(["1/2/2007", "1/2/2007"], ["12:00:00", "12:01:00"])
    out = transform.attach_timestamp(df, tz="Europe/Paris", set_index=True)
    assert out.index.name == canon.TIMESTAMP_COL
    assert str(out.index.tz) == "Europe/Paris"
    assert out.index[0].tz_convert("UTC") == pd.Timestamp("2007-02-01 11:00:00", tz="UTC")


def test_attach_timestamp_bad_time_raises():
    df = _frame(["1/2/2007", "1/2/2007"], ["00:00:00", "25:61:00"])
    with pytest.raises(exceptions.ParseError) as err:
        transform.attach_timestamp(df)
    assert err.value.row == 1


def test_attach_timestamp_requires_date_and_time():
    with pytest.raises(exceptions.SchemaError):
        transform.attach_timestamp(pd.DataFrame({"Date": ["1/2/2007"]}))


def test_attach_timestamp_on_loaded_range(power_file):
    df = loader.load_range(power_file, DateRange.parse("2007-02-01", "2007-02-02"))
    out = transform.attach_timestamp(df)
    ts = out[canon.TIMESTAMP_COL]
    assert ts.is_monotonic_increasing
    assert ts.iloc[0] == pd.Timestamp("2007-02-01 00:00:00")
    assert ts.iloc[-1] == pd.Timestamp("2007-02-02 23:59:00")
    assert ts.diff().dropna().eq(pd.Timedelta(minutes=1)).all()


def test_attach_timestamp_empty_frame(power_file):
    df = loader.load_range(power_file, DateRange.parse("2009-01-01", "2009-01-01"))
    out = transform.attach_timestamp(df)
    assert out.empty
    assert out.columns[0] == canon.TIMESTAMP_COL
