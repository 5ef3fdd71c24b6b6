"""
Tests for rule expansion and the equinox resolver.
"""

from datetime import date

import pytest

from holiday_resolver.core.equinox import EquinoxResolver
from holiday_resolver.core.expander import RuleExpander, nth_weekday_of_month
from holiday_resolver.data.schemas import EquinoxEntry, EquinoxTable, FixedRule, FloatingRule, Weekday
from holiday_resolver.data.vocabulary import parse_month, parse_weekday
from holiday_resolver.exceptions import InvalidDate, OccurrenceNotFound, UnknownRuleToken


@pytest.fixture
def expander():
    """Create a RuleExpander instance."""
    return RuleExpander()


@pytest.fixture
def equinox_resolver():
    """Create an EquinoxResolver with Sunday as rest day."""
    return EquinoxResolver(rest_day=Weekday.SUNDAY)


class TestVocabulary:
    """Tests for month and weekday name lookup."""

    def test_month_full_and_short_names(self):
        assert parse_month("January") == 1
        assert parse_month("jan") == 1
        assert parse_month(" SEPT ") == 9
        assert parse_month("may") == 5

    def test_unknown_month(self):
        with pytest.raises(UnknownRuleToken) as exc_info:
            parse_month("Jann", rule_name="成人の日")

        assert exc_info.value.kind == "month"
        assert "成人の日" in str(exc_info.value)

    def test_weekday_full_and_short_names(self):
        assert parse_weekday("Monday") == Weekday.MONDAY
        assert parse_weekday("mon") == Weekday.MONDAY
        assert parse_weekday("Thurs") == Weekday.THURSDAY
        assert parse_weekday("SUN") == Weekday.SUNDAY

    def test_unknown_weekday(self):
        with pytest.raises(UnknownRuleToken, match="weekday"):
            parse_weekday("Mond")

    def test_numbers_are_not_names(self):
        with pytest.raises(UnknownRuleToken):
            parse_month("1")


class TestNthWeekday:
    """Tests for nth_weekday_of_month."""

    def test_second_monday_of_january_2024(self):
        assert nth_weekday_of_month(2024, 1, 2, Weekday.MONDAY) == date(2024, 1, 8)

    def test_fifth_occurrence_when_present(self):
        # January 2024 has five Wednesdays: 3, 10, 17, 24, 31
        assert nth_weekday_of_month(2024, 1, 5, Weekday.WEDNESDAY) == date(2024, 1, 31)

    def test_missing_occurrence(self):
        with pytest.raises(IndexError):
            nth_weekday_of_month(2023, 2, 5, Weekday.MONDAY)


class TestRuleExpander:
    """Tests for RuleExpander."""

    def test_fixed_rule(self, expander):
        rule = FixedRule(name="X", month=1, day=1)

        holidays = expander.expand([rule], 2023)

        assert len(holidays) == 1
        assert holidays[0].name == "X"
        assert holidays[0].holiday_date == date(2023, 1, 1)
        assert holidays[0].is_substitute is False

    def test_floating_rule(self, expander):
        # Marine Day 2026: third Monday of July
        rule = FloatingRule(name="海の日", month=7, occurrence=3, weekday=Weekday.MONDAY)

        holidays = expander.expand([rule], 2026)

        assert holidays[0].holiday_date == date(2026, 7, 20)

    def test_keeps_catalog_order(self, expander):
        rules = [
            FixedRule(name="B", month=11, day=3),
            FixedRule(name="A", month=1, day=1),
        ]

        holidays = expander.expand(rules, 2024)

        assert [h.name for h in holidays] == ["B", "A"]

    def test_fifth_monday_missing(self, expander):
        """February 2023 has only four Mondays."""
        rule = FloatingRule(name="Fifth Monday", month=2, occurrence=5, weekday=Weekday.MONDAY)

        with pytest.raises(OccurrenceNotFound) as exc_info:
            expander.expand([rule], 2023)

        assert exc_info.value.rule_name == "Fifth Monday"
        assert exc_info.value.n == 5

    def test_leap_day_in_common_year(self, expander):
        rule = FixedRule(name="Leap", month=2, day=29)

        assert expander.expand([rule], 2024)[0].holiday_date == date(2024, 2, 29)
        with pytest.raises(InvalidDate, match="2023-02-29"):
            expander.expand([rule], 2023)

    def test_english_name_is_carried(self, expander):
        rule = FixedRule(name="元日", name_english="New Year's Day", month=1, day=1)

        holiday = expander.expand([rule], 2025)[0]

        assert holiday.display_name("en") == "New Year's Day"
        assert holiday.display_name("ja") == "元日"


class TestEquinoxResolver:
    """Tests for EquinoxResolver."""

    def test_year_in_range(self, equinox_resolver, small_equinox_table):
        holidays = equinox_resolver.resolve(small_equinox_table, 2023)

        assert [(h.name, h.holiday_date) for h in holidays] == [
            ("春分の日", date(2023, 3, 21)),
            ("秋分の日", date(2023, 9, 23)),
        ]
        assert not any(h.is_substitute for h in holidays)

    def test_sunday_equinox_gets_own_substitute(self, equinox_resolver, small_equinox_table):
        """The 2024 autumnal equinox falls on Sunday 22 September."""
        holidays = equinox_resolver.resolve(small_equinox_table, 2024)

        assert len(holidays) == 3
        substitute = holidays[2]
        assert substitute.name == "秋分の日(振替休日)"
        assert substitute.holiday_date == date(2024, 9, 23)
        assert substitute.is_substitute is True
        assert substitute.substitute_for == "秋分の日"

    def test_year_outside_range_is_empty(self, equinox_resolver, small_equinox_table):
        assert equinox_resolver.resolve(small_equinox_table, 2022) == []
        assert equinox_resolver.resolve(small_equinox_table, 2025) == []

    def test_entry_outside_configured_range_is_ignored(self, equinox_resolver):
        table = EquinoxTable(
            entries={2060: EquinoxEntry(year=2060, spring_day=20, fall_day=22)},
            min_year=2020,
            max_year=2050,
        )

        assert equinox_resolver.resolve(table, 2060) == []

    def test_invalid_day(self, equinox_resolver):
        table = EquinoxTable(
            entries={2023: EquinoxEntry(year=2023, spring_day=20, fall_day=31)},
            min_year=2023,
            max_year=2023,
        )

        with pytest.raises(InvalidDate):
            equinox_resolver.resolve(table, 2023)
