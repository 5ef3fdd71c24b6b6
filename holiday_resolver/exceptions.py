"""
Exception hierarchy for holiday resolution.

Every error raised while loading the rule catalog, loading the equinox table
or expanding rules derives from HolidayResolverError and names the offending
rule, so a corrupt catalog is reported with context instead of a bare
ValueError.

A year outside the equinox table range is not an error: it simply yields no
equinox holidays.
"""

from datetime import date
from typing import List, Optional

__all__ = [
    "HolidayResolverError",
    "CatalogLoadError",
    "MalformedRule",
    "UnknownRuleToken",
    "InvalidDate",
    "OccurrenceNotFound",
    "DuplicateHolidayDate",
]


class HolidayResolverError(Exception):
    """Base exception for all holiday resolver errors."""


class CatalogLoadError(HolidayResolverError):
    """A catalog or equinox table file could not be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not load {path}: {reason}")
        self.path = path
        self.reason = reason


class MalformedRule(HolidayResolverError):
    """A catalog record has an empty or unparseable required field."""

    def __init__(self, rule_name: str, field: str, reason: str):
        super().__init__(f"Malformed rule '{rule_name}': field '{field}' {reason}")
        self.rule_name = rule_name
        self.field = field
        self.reason = reason


class UnknownRuleToken(HolidayResolverError):
    """A month or weekday name is not part of the recognized vocabulary."""

    def __init__(self, token: str, kind: str, rule_name: Optional[str] = None):
        message = f"Unknown {kind} name: '{token}'"
        if rule_name:
            message = f"{message} (rule '{rule_name}')"
        super().__init__(message)
        self.token = token
        self.kind = kind
        self.rule_name = rule_name


class InvalidDate(HolidayResolverError):
    """A year/month/day combination does not exist on the calendar."""

    def __init__(self, rule_name: str, year: Optional[int], month: int, day: int):
        if year is None:
            when = f"{month:02d}/{day:02d}"
        else:
            when = f"{year:04d}-{month:02d}-{day:02d}"
        super().__init__(f"Rule '{rule_name}' produces an invalid date: {when}")
        self.rule_name = rule_name
        self.year = year
        self.month = month
        self.day = day


class OccurrenceNotFound(HolidayResolverError):
    """The requested n-th weekday does not exist in the target month."""

    def __init__(self, rule_name: str, year: int, month: int, n: int, weekday: str):
        super().__init__(
            f"Rule '{rule_name}': there is no occurrence #{n} of {weekday} "
            f"in {year:04d}-{month:02d}"
        )
        self.rule_name = rule_name
        self.year = year
        self.month = month
        self.n = n
        self.weekday = weekday


class DuplicateHolidayDate(HolidayResolverError):
    """Two resolved holidays share the same date."""

    def __init__(self, holiday_date: date, names: List[str]):
        super().__init__(
            f"Holidays {', '.join(repr(n) for n in names)} share the date "
            f"{holiday_date.isoformat()}; the catalog is inconsistent"
        )
        self.holiday_date = holiday_date
        self.names = names
