"""Date Range Label - human-readable labels for datetime ranges.

Architecture::

    formatter.py   format_date_range(): the formatting cascade
    boundaries.py  Calendar-boundary classification (full days/month/quarter/year)
    labels.py      Today/Tomorrow and English day/month labels
    timefmt.py     Locale-aware compact times (9am, 9:30pm, 21:15)
    periods.py     Start/end of day, month, quarter, year; minute equality
    options.py     FormatOptions -> ResolvedOptions (clock, settings, locale)
    config.py      Settings from DATE_RANGE_* environment variables
    cli.py         date-range-label command

Data flow: FormatOptions -> resolve_options -> classify -> label renderers -> str
"""

__version__ = "0.1.0"

from date_range_label.config import Settings
from date_range_label.formatter import InvalidRangeError, format_date_range
from date_range_label.schemas import FormatOptions, RangeShape
from date_range_label.timefmt import format_time

__all__ = [
    "FormatOptions",
    "InvalidRangeError",
    "RangeShape",
    "Settings",
    "__version__",
    "format_date_range",
    "format_time",
]
