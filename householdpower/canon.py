from __future__ import annotations
from typing import Final

SEP: Final[str] = ";"
NA_MARKER: Final[str] = "?"

DATE_COL: Final[str] = "Date"
TIME_COL: Final[str] = "Time"
DATE_FORMAT: Final[str] = "%d/%m/%Y"
TIME_FORMAT: Final[str] = "%H:%M:%S"
TIMESTAMP_FORMAT: Final[str] = f"{DATE_FORMAT} {TIME_FORMAT}"

MEASUREMENT_COLS: Final[list[str]] = [
    "Global_active_power",
    "Global_reactive_power",
    "Voltage",
    "Global_intensity",
    "Sub_metering_1",
    "Sub_metering_2",
    "Sub_metering_3",
]
COLUMNS: Final[list[str]] = [DATE_COL, TIME_COL, *MEASUREMENT_COLS]

TIMESTAMP_COL: Final[str] = "datetime"
ROW_INDEX_NAME: Final[str] = "row"

# rows per chunk when scanning the date column
DEFAULT_CHUNK_ROWS: Final[int] = 250_000

FIGSIZE_IN: Final[tuple[float, float]] = (4.8, 4.8)
FIG_DPI: Final[int] = 100

# Column -> axis label used by the single-panel charts
AXIS_LABELS: Final[dict[str, str]] = {
    "Global_active_power": "Global Active Power (kilowatts)",
    "Global_reactive_power": "Global_reactive_power",
    "Voltage": "Voltage",
    "Global_intensity": "Global Intensity (amperes)",
    "Sub_metering_1": "Energy sub metering",
    "Sub_metering_2": "Energy sub metering",
    "Sub_metering_3": "Energy sub metering",
}
