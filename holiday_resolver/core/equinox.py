"""
Equinox holidays looked up from the precomputed equinox table.
"""

import logging
from datetime import date, timedelta
from typing import List

from holiday_resolver.data.schemas import EquinoxTable, Holiday, Weekday
from holiday_resolver.exceptions import InvalidDate

logger = logging.getLogger(__name__)

SPRING_EQUINOX_NAME = "春分の日"
SPRING_EQUINOX_NAME_EN = "Vernal Equinox Day"
FALL_EQUINOX_NAME = "秋分の日"
FALL_EQUINOX_NAME_EN = "Autumnal Equinox Day"

SPRING_MONTH = 3
FALL_MONTH = 9


class EquinoxResolver:
    """Produces the two equinox holidays and their own substitutes."""

    def __init__(self, rest_day: Weekday = Weekday.SUNDAY):
        """
        Initialize the equinox resolver.

        Args:
            rest_day: Weekday on which a holiday earns a substitute.
        """
        self.rest_day = rest_day

    def resolve(self, table: EquinoxTable, year: int) -> List[Holiday]:
        """
        Get equinox holidays for a year.

        Years outside the table range produce an empty list; that is the
        documented boundary of the table, not an error.

        Args:
            table: Equinox table.
            year: Year to resolve.

        Returns:
            Spring and fall holidays, followed by a substitute for each one
            falling on the rest day.
        """
        entry = table.get(year)
        if entry is None:
            logger.debug(
                "No equinox data for %d (table covers %d-%d)", year, table.min_year, table.max_year
            )
            return []

        spring = Holiday(
            name=SPRING_EQUINOX_NAME,
            name_english=SPRING_EQUINOX_NAME_EN,
            holiday_date=self._make_date(SPRING_EQUINOX_NAME, year, SPRING_MONTH, entry.spring_day),
        )
        fall = Holiday(
            name=FALL_EQUINOX_NAME,
            name_english=FALL_EQUINOX_NAME_EN,
            holiday_date=self._make_date(FALL_EQUINOX_NAME, year, FALL_MONTH, entry.fall_day),
        )

        holidays = [spring, fall]
        for equinox in (spring, fall):
            if equinox.holiday_date.weekday() == self.rest_day:
                holidays.append(self._substitute(equinox))
        return holidays

    def _substitute(self, equinox: Holiday) -> Holiday:
        return Holiday(
            name=f"{equinox.name}(振替休日)",
            name_english=f"{equinox.name_english} (observed)",
            holiday_date=equinox.holiday_date + timedelta(days=1),
            is_substitute=True,
            substitute_for=equinox.name,
        )

    @staticmethod
    def _make_date(name: str, year: int, month: int, day: int) -> date:
        try:
            return date(year, month, day)
        except ValueError:
            raise InvalidDate(name, year, month, day)
