"""
Order date interpretation.

All date handling for the aggregator goes through parse_order_timestamp so
the accepted formats and defaults live in one place:

- Anything pandas.to_datetime understands is accepted (ISO dates and
  date-times, "01/15/2024", "Jan 15, 2024", ...). Ambiguous numeric dates
  are read month-first.
- Timezone-aware values keep their own wall-clock time; nothing is
  converted to the host timezone, so results do not depend on the machine.
- Date-only values carry no time of day (has_time is False).
- Unparseable or blank text gives no timestamp at all.
"""

import re
from typing import NamedTuple, Optional

import pandas as pd

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Sunday first, matching the weekday histogram
WEEKDAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

UNKNOWN_DATE = "an unknown date"

_TIME_OF_DAY = re.compile(r"\d{1,2}:\d{2}")


class OrderTimestamp(NamedTuple):
    moment: Optional[pd.Timestamp]
    has_time: bool

    @property
    def is_valid(self) -> bool:
        return self.moment is not None

    @property
    def month_index(self) -> Optional[int]:
        """Zero-based calendar month."""
        return None if self.moment is None else self.moment.month - 1

    @property
    def weekday_index(self) -> Optional[int]:
        """Sunday=0 ... Saturday=6."""
        return None if self.moment is None else (self.moment.dayofweek + 1) % 7


def parse_order_timestamp(value: Optional[str]) -> OrderTimestamp:
    """
    Interpret an order date string.

    Args:
        value: Raw date text from the export

    Returns:
        OrderTimestamp with a naive pandas Timestamp, or moment=None when
        the text cannot be read as a date
    """
    text = (value or "").strip()
    if not text:
        return OrderTimestamp(None, False)

    try:
        moment = pd.to_datetime(text, errors="coerce")
    except (ValueError, TypeError, OverflowError):
        moment = pd.NaT

    if pd.isna(moment):
        return OrderTimestamp(None, False)

    if moment.tzinfo is not None:
        moment = moment.tz_localize(None)

    return OrderTimestamp(moment, bool(_TIME_OF_DAY.search(text)))


def format_display_date(value: Optional[str]) -> str:
    """Render an order date as M/D/YYYY for narrative text."""
    parsed = parse_order_timestamp(value)
    if parsed.moment is None:
        return UNKNOWN_DATE
    moment = parsed.moment
    return f"{moment.month}/{moment.day}/{moment.year}"
