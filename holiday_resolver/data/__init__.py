"""
Data models, vocabulary and loaders for the holiday resolver.
"""

from holiday_resolver.data.schemas import (
    Config,
    EquinoxEntry,
    EquinoxTable,
    FixedRule,
    FloatingRule,
    Holiday,
    HolidayDocument,
    HolidayRecord,
    HolidayRule,
    ResolvedYear,
    Weekday,
)

__all__ = [
    "Config",
    "EquinoxEntry",
    "EquinoxTable",
    "FixedRule",
    "FloatingRule",
    "Holiday",
    "HolidayDocument",
    "HolidayRecord",
    "HolidayRule",
    "ResolvedYear",
    "Weekday",
]
