"""
Expansion of catalog rules into concrete holiday dates.
"""

import logging
from datetime import date, timedelta
from typing import List, Sequence, Union

from holiday_resolver.data.schemas import FixedRule, FloatingRule, Holiday, Weekday
from holiday_resolver.exceptions import InvalidDate, OccurrenceNotFound

logger = logging.getLogger(__name__)


def weekdays_in_month(year: int, month: int, weekday: Weekday) -> List[date]:
    """All dates in (year, month) falling on the given weekday, in order."""
    result = []
    current = date(year, month, 1)
    while current.month == month:
        if current.weekday() == weekday:
            result.append(current)
        current += timedelta(days=1)
    return result


def nth_weekday_of_month(year: int, month: int, n: int, weekday: Weekday) -> date:
    """
    Get the n-th occurrence of a weekday in a month.

    Args:
        year: Year.
        month: Month 1..12.
        n: 1-based occurrence index.
        weekday: Weekday to look for.

    Returns:
        Date of the occurrence.

    Raises:
        IndexError: If the month has fewer than n such weekdays.
    """
    if n < 1:
        raise IndexError(f"occurrence must be positive, got {n}")
    return weekdays_in_month(year, month, weekday)[n - 1]


class RuleExpander:
    """Turns catalog rules into holidays for a requested year."""

    def expand(self, rules: Sequence[Union[FixedRule, FloatingRule]], year: int) -> List[Holiday]:
        """
        Produce one holiday per rule, in catalog order.

        Args:
            rules: Holiday rules from the catalog.
            year: Year to resolve.

        Returns:
            List of non-substitute holidays.

        Raises:
            InvalidDate: If a fixed rule does not exist in the year.
            OccurrenceNotFound: If a floating rule asks for a missing occurrence.
        """
        holidays = []
        for rule in rules:
            holidays.append(
                Holiday(
                    name=rule.name,
                    name_english=rule.name_english,
                    holiday_date=self.expand_rule(rule, year),
                )
            )
        logger.debug("Expanded %d rules for %d", len(holidays), year)
        return holidays

    def expand_rule(self, rule: Union[FixedRule, FloatingRule], year: int) -> date:
        """Resolve a single rule to its date in the given year."""
        if isinstance(rule, FloatingRule):
            try:
                return nth_weekday_of_month(year, rule.month, rule.occurrence, rule.weekday)
            except IndexError:
                raise OccurrenceNotFound(
                    rule.name, year, rule.month, rule.occurrence, rule.weekday.label
                )
            except ValueError:
                raise InvalidDate(rule.name, year, rule.month, 1)

        try:
            return date(year, rule.month, rule.day)
        except ValueError:
            raise InvalidDate(rule.name, year, rule.month, rule.day)
