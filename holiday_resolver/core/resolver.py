"""
Holiday resolution pipeline for a calendar year.
"""

import logging
from datetime import date
from typing import Dict, List, Optional, Sequence, Union

from holiday_resolver.core.equinox import EquinoxResolver
from holiday_resolver.core.expander import RuleExpander
from holiday_resolver.core.substitutes import SubstituteEngine
from holiday_resolver.data.loader import CatalogLoader, EquinoxTableLoader
from holiday_resolver.data.schemas import (
    Config,
    EquinoxTable,
    FixedRule,
    FloatingRule,
    Holiday,
    ResolvedYear,
)
from holiday_resolver.output.assembler import ResultAssembler

logger = logging.getLogger(__name__)


class HolidayResolver:
    """Resolves the public holidays of a year from the rule catalog and equinox table."""

    def __init__(
        self,
        catalog: Sequence[Union[FixedRule, FloatingRule]],
        equinox_table: EquinoxTable,
        config: Optional[Config] = None,
    ):
        """
        Initialize the holiday resolver.

        Args:
            catalog: Holiday rules in catalog order.
            equinox_table: Precomputed equinox days.
            config: Settings for rest day, run detection and message.
        """
        self.config = config or Config()
        self.catalog = tuple(catalog)
        self.equinox_table = equinox_table
        self.expander = RuleExpander()
        self.equinox_resolver = EquinoxResolver(rest_day=self.config.rest_day)
        self.substitute_engine = SubstituteEngine(
            rest_day=self.config.rest_day, run_detection=self.config.run_detection
        )
        self.assembler = ResultAssembler(message=self.config.message)
        self._cache: Dict[int, ResolvedYear] = {}

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> "HolidayResolver":
        """
        Create a resolver with catalog and equinox table loaded from the configured files.

        Raises:
            CatalogLoadError, MalformedRule, UnknownRuleToken, InvalidDate:
                If the catalog or table cannot be loaded.
        """
        config = config or Config()
        catalog = CatalogLoader().load(config.catalog_path)
        equinox_table = EquinoxTableLoader().load(
            config.equinox_table_path, config.equinox_min_year, config.equinox_max_year
        )
        return cls(catalog, equinox_table, config)

    def resolve(self, year: int) -> ResolvedYear:
        """
        Resolve all holidays of a year.

        Args:
            year: Year to resolve.

        Returns:
            ResolvedYear with date-ascending holidays.

        Raises:
            InvalidDate, OccurrenceNotFound: If a rule cannot be expanded.
            DuplicateHolidayDate: If the catalog produces two holidays on one date.
        """
        if year not in self._cache:
            base = self._base_holidays(year)
            holidays = list(base)
            added = self.substitute_engine.apply(holidays)
            if any(h.holiday_date.year != year for h in added):
                # A substitute spilled into January; keep it off next year's holidays
                reserved = [h.holiday_date for h in self._base_holidays(year + 1)]
                holidays = list(base)
                added = self.substitute_engine.apply(holidays, reserved=reserved)
            self._cache[year] = self.assembler.assemble(year, holidays)
            logger.debug(
                "Resolved %d: %d holidays, %d substitutes", year, len(holidays), len(added)
            )
        return self._cache[year].model_copy(deep=True)

    def _base_holidays(self, year: int) -> List[Holiday]:
        """Rule and equinox holidays of a year, before the substitute pass."""
        holidays = self.expander.expand(self.catalog, year)
        holidays.extend(self.equinox_resolver.resolve(self.equinox_table, year))
        return holidays

    def holidays_for_range(self, start: date, end: date) -> List[Holiday]:
        """
        Get all holidays within an inclusive date range.

        Args:
            start: Start date of the range.
            end: End date of the range.

        Returns:
            Date-ascending holidays within the range. A substitute that the
            previous year placed in January is included.
        """
        if end < start:
            raise ValueError("end must be after or equal to start")

        by_date: Dict[date, Holiday] = {}
        for year in self._years_touching(start, end):
            for holiday in self.resolve(year).holidays:
                day = holiday.holiday_date
                if start <= day <= end and (day not in by_date or day.year == year):
                    by_date[day] = holiday
        return [by_date[d] for d in sorted(by_date)]

    def holiday_on(self, day: date) -> Optional[Holiday]:
        """Get the holiday on a date, or None if it is not a holiday."""
        for year in self._years_touching(day, day):
            for holiday in self.resolve(year).holidays:
                if holiday.holiday_date == day:
                    return holiday
        return None

    @staticmethod
    def _years_touching(start: date, end: date) -> List[int]:
        """Years whose resolved holidays can fall in the range."""
        years = list(range(start.year, end.year + 1))
        if start.month == 1 and start.year > 1:
            # Substitutes for late-December holidays land in January
            years.append(start.year - 1)
        return years

    def is_holiday(self, day: date) -> bool:
        """Check if a specific date is a holiday."""
        return self.holiday_on(day) is not None

    def clear_cache(self) -> None:
        """Clear the per-year cache."""
        self._cache.clear()


_default_resolver: Optional[HolidayResolver] = None


def resolve(year: int) -> ResolvedYear:
    """Resolve a year with the packaged catalog and default settings."""
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = HolidayResolver.from_config()
    return _default_resolver.resolve(year)
