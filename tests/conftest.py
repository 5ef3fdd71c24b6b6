"""
Shared fixtures for the holiday resolver tests.
"""

from datetime import date

import pytest

from holiday_resolver.core.resolver import HolidayResolver
from holiday_resolver.data.schemas import Config, EquinoxEntry, EquinoxTable, Holiday


@pytest.fixture(scope="session")
def resolver():
    """HolidayResolver using the packaged catalog and equinox table."""
    return HolidayResolver.from_config(Config())


@pytest.fixture
def empty_equinox_table():
    """Equinox table without any entries."""
    return EquinoxTable(entries={}, min_year=2020, max_year=2050)


@pytest.fixture
def small_equinox_table():
    """Equinox table covering 2023-2024 only."""
    return EquinoxTable(
        entries={
            2023: EquinoxEntry(year=2023, spring_day=21, fall_day=23),
            2024: EquinoxEntry(year=2024, spring_day=20, fall_day=22),
        },
        min_year=2023,
        max_year=2024,
    )


def make_holiday(name: str, day: date, **kwargs) -> Holiday:
    """Shortcut for building a non-substitute holiday."""
    return Holiday(name=name, holiday_date=day, **kwargs)
