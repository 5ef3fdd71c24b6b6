"""
Month and weekday name vocabulary used by the rule catalog.
"""

from typing import Dict, Optional

from holiday_resolver.data.schemas import Weekday
from holiday_resolver.exceptions import UnknownRuleToken

MONTH_NAMES: Dict[str, int] = {
    "january": 1, "jan": 1,
    "february": 2, "feb": 2,
    "march": 3, "mar": 3,
    "april": 4, "apr": 4,
    "may": 5,
    "june": 6, "jun": 6,
    "july": 7, "jul": 7,
    "august": 8, "aug": 8,
    "september": 9, "sep": 9, "sept": 9,
    "october": 10, "oct": 10,
    "november": 11, "nov": 11,
    "december": 12, "dec": 12,
}

WEEKDAY_NAMES: Dict[str, Weekday] = {
    "monday": Weekday.MONDAY, "mon": Weekday.MONDAY,
    "tuesday": Weekday.TUESDAY, "tue": Weekday.TUESDAY, "tues": Weekday.TUESDAY,
    "wednesday": Weekday.WEDNESDAY, "wed": Weekday.WEDNESDAY,
    "thursday": Weekday.THURSDAY, "thu": Weekday.THURSDAY,
    "thur": Weekday.THURSDAY, "thurs": Weekday.THURSDAY,
    "friday": Weekday.FRIDAY, "fri": Weekday.FRIDAY,
    "saturday": Weekday.SATURDAY, "sat": Weekday.SATURDAY,
    "sunday": Weekday.SUNDAY, "sun": Weekday.SUNDAY,
}


def parse_month(token: str, rule_name: Optional[str] = None) -> int:
    """
    Look up a month number by name or abbreviation.

    Args:
        token: Month name, case-insensitive (e.g. "January", "jan").
        rule_name: Catalog rule the token belongs to, for error context.

    Returns:
        Month number 1..12.

    Raises:
        UnknownRuleToken: If the name is not recognized.
    """
    month = MONTH_NAMES.get(token.strip().lower())
    if month is None:
        raise UnknownRuleToken(token, "month", rule_name)
    return month


def parse_weekday(token: str, rule_name: Optional[str] = None) -> Weekday:
    """
    Look up a weekday by name or abbreviation.

    Args:
        token: Weekday name, case-insensitive (e.g. "Monday", "mon").
        rule_name: Catalog rule the token belongs to, for error context.

    Returns:
        Weekday enum member.

    Raises:
        UnknownRuleToken: If the name is not recognized.
    """
    weekday = WEEKDAY_NAMES.get(token.strip().lower())
    if weekday is None:
        raise UnknownRuleToken(token, "weekday", rule_name)
    return weekday
