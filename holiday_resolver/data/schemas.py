"""
Data models for the holiday resolver using Pydantic.
"""

from datetime import date
from enum import IntEnum
from pathlib import Path
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

PACKAGE_DATA_DIR = Path(__file__).parent

DEFAULT_MESSAGE = "The vernal and autumnal equinoxes of future dates are predictions."


class Weekday(IntEnum):
    """Days of the week, numbered like date.weekday()."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def label(self) -> str:
        return self.name.capitalize()


class FixedRule(BaseModel):
    """A holiday pinned to the same month and day every year."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fixed"] = "fixed"
    name: str = Field(..., min_length=1, description="Holiday name, unique in the catalog")
    name_english: Optional[str] = Field(default=None, description="Name in English")
    month: int = Field(..., ge=1, le=12)
    day: int = Field(..., ge=1, le=31)


class FloatingRule(BaseModel):
    """A holiday on the n-th occurrence of a weekday in a month."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["floating"] = "floating"
    name: str = Field(..., min_length=1, description="Holiday name, unique in the catalog")
    name_english: Optional[str] = Field(default=None, description="Name in English")
    month: int = Field(..., ge=1, le=12)
    occurrence: int = Field(..., ge=1, description="1-based occurrence index")
    weekday: Weekday


HolidayRule = Annotated[Union[FixedRule, FloatingRule], Field(discriminator="kind")]


class EquinoxEntry(BaseModel):
    """Days of month of the vernal (March) and autumnal (September) equinox."""

    model_config = ConfigDict(frozen=True)

    year: int
    spring_day: int = Field(..., ge=1, le=31)
    fall_day: int = Field(..., ge=1, le=31)


class EquinoxTable(BaseModel):
    """Precomputed equinox days for a bounded range of years."""

    model_config = ConfigDict(frozen=True)

    entries: Dict[int, EquinoxEntry] = Field(default_factory=dict)
    min_year: int = Field(..., description="First year equinox holidays are produced for")
    max_year: int = Field(..., description="Last year equinox holidays are produced for")

    def covers(self, year: int) -> bool:
        """True if equinox holidays are produced for the year."""
        return self.min_year <= year <= self.max_year and year in self.entries

    def get(self, year: int) -> Optional[EquinoxEntry]:
        return self.entries.get(year) if self.covers(year) else None


class Holiday(BaseModel):
    """Represents a resolved public holiday."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Name of the holiday in Japanese")
    name_english: Optional[str] = Field(default=None, description="Name in English")
    holiday_date: date = Field(..., description="Date of the holiday")
    is_substitute: bool = Field(default=False, description="Whether it's a substitute holiday")
    substitute_for: Optional[str] = Field(
        default=None, description="Name of the holiday a substitute compensates"
    )

    def display_name(self, language: str = "ja") -> str:
        """Name in the requested language, falling back to Japanese."""
        if language == "en" and self.name_english:
            return self.name_english
        return self.name


class ResolvedYear(BaseModel):
    """All holidays of one year, sorted by date."""

    year: int
    holidays: List[Holiday] = Field(default_factory=list)
    message: str = Field(default=DEFAULT_MESSAGE)

    @property
    def substitutes(self) -> List[Holiday]:
        return [h for h in self.holidays if h.is_substitute]

    def dates(self) -> List[date]:
        return [h.holiday_date for h in self.holidays]


class HolidayRecord(BaseModel):
    """One holiday in the serialized result document."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    date: str = Field(..., description="YYYY-MM-DD")
    epoch_seconds: int = Field(..., alias="epochSeconds", description="Midnight UTC timestamp")
    substitute: bool


class HolidayDocument(BaseModel):
    """Serialized form of a ResolvedYear."""

    year: int
    holidays: List[HolidayRecord] = Field(default_factory=list)
    message: str


class Config(BaseModel):
    """Configuration for the holiday resolver."""

    catalog_path: str = Field(
        default=str(PACKAGE_DATA_DIR / "base.json"), description="Rule catalog (.json or .csv)"
    )
    equinox_table_path: str = Field(
        default=str(PACKAGE_DATA_DIR / "equinox_base_dates.json"),
        description="Equinox table (.json or .csv)",
    )
    equinox_min_year: int = Field(default=2020, description="First year of the equinox table range")
    equinox_max_year: int = Field(default=2050, description="Last year of the equinox table range")
    rest_day: Weekday = Field(default=Weekday.SUNDAY, description="Day that triggers substitutes")
    run_detection: Literal["date_order", "catalog_order"] = Field(
        default="date_order", description="How runs of consecutive holidays are detected"
    )
    holiday_language: Literal["ja", "en"] = Field(default="ja", description="Language for holiday names")
    message: str = Field(default=DEFAULT_MESSAGE, description="Advisory message on results")
    output_format: Literal["console", "json", "csv", "both"] = Field(
        default="console", description="Default format of the holidays command"
    )
    output_directory: str = Field(default="results", description="Directory for output files")
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="API server port")
    min_year: int = Field(default=1900, ge=1, description="Lowest year accepted by the CLI and API")
    max_year: int = Field(default=2100, le=9998, description="Highest year accepted by the CLI and API")

    @field_validator("rest_day", mode="before")
    @classmethod
    def parse_rest_day(cls, v):
        """Accept weekday names as well as enum values."""
        if isinstance(v, str):
            from holiday_resolver.data.vocabulary import parse_weekday
            from holiday_resolver.exceptions import UnknownRuleToken

            try:
                return parse_weekday(v)
            except UnknownRuleToken as e:
                raise ValueError(str(e))
        return v

    @model_validator(mode="after")
    def check_year_ranges(self) -> "Config":
        if self.equinox_min_year > self.equinox_max_year:
            raise ValueError("equinox_min_year must not be after equinox_max_year")
        if self.min_year > self.max_year:
            raise ValueError("min_year must not be after max_year")
        return self
