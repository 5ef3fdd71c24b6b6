"""
Loading of the holiday rule catalog and the equinox table.

Both loaders accept JSON and CSV files and turn raw records into validated
models. Any problem is reported with the offending rule (or year) instead
of producing a partial catalog.
"""

import csv
import json
import logging
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from holiday_resolver.data.vocabulary import parse_month, parse_weekday
from holiday_resolver.data.schemas import (
    EquinoxEntry,
    EquinoxTable,
    FixedRule,
    FloatingRule,
)
from holiday_resolver.exceptions import CatalogLoadError, InvalidDate, MalformedRule

logger = logging.getLogger(__name__)

# Leap year used to check that a fixed month/day exists in at least one year
_LEAP_YEAR = 2000


def _read_records(path: Path) -> Any:
    """Read raw records from a JSON or CSV file."""
    if not path.exists():
        raise CatalogLoadError(str(path), "file not found")

    suffix = path.suffix.lower()
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            if suffix == ".json":
                return json.load(f)
            if suffix == ".csv":
                return list(csv.DictReader(f))
    except json.JSONDecodeError as e:
        raise CatalogLoadError(str(path), f"invalid JSON: {e}")
    except (OSError, csv.Error) as e:
        raise CatalogLoadError(str(path), str(e))

    raise CatalogLoadError(str(path), f"unsupported file type '{suffix}'")


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


class CatalogLoader:
    """Loads holiday rules from a catalog file."""

    def load(self, path: Union[str, Path]) -> List[Union[FixedRule, FloatingRule]]:
        """
        Load and validate all rules of a catalog.

        Args:
            path: Path to a .json (list of records) or .csv catalog.

        Returns:
            Rules in catalog order.

        Raises:
            CatalogLoadError: If the file cannot be read.
            MalformedRule: If a record is incomplete or unparseable.
            UnknownRuleToken: If a month or weekday name is unknown.
            InvalidDate: If a fixed rule names a day that never exists.
        """
        records = _read_records(Path(path))
        if not isinstance(records, list):
            raise CatalogLoadError(str(path), "catalog must be a list of records")

        rules = self.parse_records(records)
        logger.info("Loaded %d holiday rules from %s", len(rules), path)
        return rules

    def parse_records(self, records: List[Dict[str, Any]]) -> List[Union[FixedRule, FloatingRule]]:
        """Parse raw catalog records, rejecting duplicate names."""
        rules = []
        seen = set()
        for index, record in enumerate(records):
            if not isinstance(record, dict):
                raise MalformedRule(f"#{index + 1}", "record", "is not a mapping")
            rule = self.parse_record(record, index)
            if rule.name in seen:
                raise MalformedRule(rule.name, "name", "is not unique in the catalog")
            seen.add(rule.name)
            rules.append(rule)
        return rules

    def parse_record(self, record: Dict[str, Any], index: int = 0) -> Union[FixedRule, FloatingRule]:
        """
        Parse a single catalog record.

        Args:
            record: Mapping with name, date, relative, condition and
                optional name_en fields.
            index: Position in the catalog, used when the name is missing.

        Returns:
            FixedRule or FloatingRule.
        """
        name = _text(record.get("name"))
        if not name:
            raise MalformedRule(f"#{index + 1}", "name", "is empty")
        name_english = _text(record.get("name_en")) or None

        if self._parse_relative(name, record.get("relative")):
            return self._parse_floating(name, name_english, _text(record.get("condition")))
        return self._parse_fixed(name, name_english, _text(record.get("date")))

    def _parse_relative(self, name: str, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        text = _text(value).lower()
        if text in ("true", "1", "yes"):
            return True
        if text in ("false", "0", "no"):
            return False
        raise MalformedRule(name, "relative", f"must be true or false, got '{value}'")

    def _parse_fixed(self, name: str, name_english: Optional[str], value: str) -> FixedRule:
        if not value:
            raise MalformedRule(name, "date", "is empty")

        parts = value.split("/")
        if len(parts) != 2:
            raise MalformedRule(name, "date", f"must be MONTH/DAY, got '{value}'")
        try:
            month, day = (int(p) for p in parts)
        except ValueError:
            raise MalformedRule(name, "date", f"must be numeric, got '{value}'")

        try:
            date(_LEAP_YEAR, month, day)
        except ValueError:
            raise InvalidDate(name, None, month, day)

        return FixedRule(name=name, name_english=name_english, month=month, day=day)

    def _parse_floating(self, name: str, name_english: Optional[str], value: str) -> FloatingRule:
        if not value:
            raise MalformedRule(name, "condition", "is empty")

        separator = "," if "," in value else ":"
        parts = [p.strip() for p in value.split(separator)]
        if len(parts) != 3:
            raise MalformedRule(
                name, "condition", f"must be MONTH{separator}N{separator}WEEKDAY, got '{value}'"
            )

        month_token, n_token, weekday_token = parts
        if not n_token:
            raise MalformedRule(name, "condition", "has no occurrence index")
        try:
            occurrence = int(n_token)
        except ValueError:
            raise MalformedRule(name, "condition", f"occurrence must be an integer, got '{n_token}'")
        if occurrence < 1:
            raise MalformedRule(name, "condition", f"occurrence must be at least 1, got {occurrence}")

        return FloatingRule(
            name=name,
            name_english=name_english,
            month=parse_month(month_token, name),
            occurrence=occurrence,
            weekday=parse_weekday(weekday_token, name),
        )


class EquinoxTableLoader:
    """Loads the precomputed equinox table."""

    def load(self, path: Union[str, Path], min_year: int, max_year: int) -> EquinoxTable:
        """
        Load the equinox table.

        Args:
            path: Path to a .json mapping (year -> {"spring", "fall"} or
                [spring, fall]) or a .csv file with year,spring,fall columns.
            min_year: First year equinox holidays are produced for.
            max_year: Last year equinox holidays are produced for.

        Returns:
            EquinoxTable restricted to the configured range.
        """
        raw = _read_records(Path(path))
        if isinstance(raw, list):
            raw = {_text(row.get("year")): row for row in raw}
        if not isinstance(raw, dict):
            raise CatalogLoadError(str(path), "equinox table must be a mapping keyed by year")

        entries = {}
        for key, value in raw.items():
            entry = self.parse_entry(key, value)
            entries[entry.year] = entry

        missing = [y for y in range(min_year, max_year + 1) if y not in entries]
        if missing:
            logger.warning(
                "Equinox table %s has no data for %d year(s) in %d-%d",
                path, len(missing), min_year, max_year,
            )

        logger.info("Loaded %d equinox entries from %s", len(entries), path)
        return EquinoxTable(entries=entries, min_year=min_year, max_year=max_year)

    def parse_entry(self, key: Any, value: Any) -> EquinoxEntry:
        """Parse one year of the equinox table."""
        label = f"equinox {key}"
        try:
            year = int(_text(key))
        except ValueError:
            raise MalformedRule(label, "year", f"must be an integer, got '{key}'")

        if isinstance(value, dict):
            spring, fall = value.get("spring"), value.get("fall")
        elif isinstance(value, (list, tuple)) and len(value) == 2:
            spring, fall = value
        else:
            raise MalformedRule(label, "days", "must be {spring, fall} or [spring, fall]")

        return EquinoxEntry(
            year=year,
            spring_day=self._parse_day(label, "spring", spring, 3, year),
            fall_day=self._parse_day(label, "fall", fall, 9, year),
        )

    @staticmethod
    def _parse_day(label: str, field: str, value: Any, month: int, year: int) -> int:
        text = _text(value)
        if not text:
            raise MalformedRule(label, field, "is empty")
        try:
            day = int(text)
        except ValueError:
            raise MalformedRule(label, field, f"must be a day of month, got '{value}'")
        try:
            date(year, month, day)
        except ValueError:
            raise InvalidDate(label, year, month, day)
        return day
