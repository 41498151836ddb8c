from datetime import date, timedelta

import matplotlib

matplotlib.use("Agg")

import pytest

HEADER = (
    "Date;Time;Global_active_power;Global_reactive_power;Voltage;"
    "Global_intensity;Sub_metering_1;Sub_metering_2;Sub_metering_3"
)


def dmy(d: date) -> str:
    # Source file writes day and month without zero padding, e.g. 1/2/2007
    return f"{d.day}/{d.month}/{d.year}"


def minute_lines(d: date, missing_every: int = 0):
    """1440 per-minute readings for one day; every Nth minute is all '?'."""
    for m in range(1440):
        t = f"{m // 60:02d}:{m % 60:02d}:00"
        if missing_every and m % missing_every == 0:
            yield f"{dmy(d)};{t};?;?;?;?;?;?;?"
        else:
            yield (
                f"{dmy(d)};{t};{1 + m / 1000:.3f};0.100;{240 + m % 5:.2f};"
                f"4.600;0.000;1.000;{m % 18:.3f}"
            )


def write_file(path, lines, header=HEADER):
    path.write_text("\n".join([header, *lines]) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def header_cols():
    return HEADER.split(";")


@pytest.fixture
def power_file(tmp_path):
    """2007-01-31 .. 2007-02-03 at one-minute cadence, some '?' rows."""
    start = date(2007, 1, 31)
    lines = []
    for i in range(4):
        lines.extend(minute_lines(start + timedelta(days=i), missing_every=97))
    return write_file(tmp_path / "household_power_consumption.txt", lines)


@pytest.fixture
def unsorted_file(tmp_path):
    lines = [
        "1/2/2007;00:00:00;1.0;0.1;240.0;4.6;0.0;1.0;17.0",
        "5/2/2007;00:00:00;2.0;0.1;240.0;4.6;0.0;1.0;17.0",
        "2/2/2007;00:00:00;3.0;0.1;240.0;4.6;0.0;1.0;17.0",
        "30/1/2007;00:00:00;4.0;0.1;240.0;4.6;0.0;1.0;17.0",
        "2/2/2007;00:01:00;5.0;0.1;?;4.6;0.0;1.0;17.0",
    ]
    return write_file(tmp_path / "unsorted.txt", lines)


@pytest.fixture
def small_file(tmp_path):
    """Factory for ad-hoc files: small_file(lines, header=...)."""

    def _make(lines, header=HEADER, name="small.txt"):
        return write_file(tmp_path / name, lines, header=header)

    return _make
