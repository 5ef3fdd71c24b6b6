"""
Assembly of resolved holidays into a sorted, integrity-checked result and
its serialized document form.
"""

import json
from calendar import timegm
from datetime import date
from itertools import groupby
from typing import Iterable, Optional

from holiday_resolver.data.schemas import (
    DEFAULT_MESSAGE,
    Holiday,
    HolidayDocument,
    HolidayRecord,
    ResolvedYear,
)
from holiday_resolver.exceptions import DuplicateHolidayDate

SUBSTITUTE_MARKER = "振替休日"


def epoch_seconds(day: date) -> int:
    """Unix timestamp of midnight UTC on the given day."""
    return timegm(day.timetuple())


class ResultAssembler:
    """Builds ResolvedYear results and converts them to and from documents."""

    def __init__(self, message: str = DEFAULT_MESSAGE):
        """
        Initialize the result assembler.

        Args:
            message: Advisory message attached to every result.
        """
        self.message = message

    def assemble(self, year: int, holidays: Iterable[Holiday]) -> ResolvedYear:
        """
        Sort holidays by date and check that no date is taken twice.

        Args:
            year: Resolved year.
            holidays: Holidays in any order.

        Returns:
            ResolvedYear with date-ascending holidays.

        Raises:
            DuplicateHolidayDate: If two holidays share a date.
        """
        ordered = sorted(holidays, key=lambda h: h.holiday_date)
        for day, group in groupby(ordered, key=lambda h: h.holiday_date):
            clashing = list(group)
            if len(clashing) > 1:
                raise DuplicateHolidayDate(day, [h.name for h in clashing])

        return ResolvedYear(year=year, holidays=ordered, message=self.message)

    def to_document(self, resolved: ResolvedYear, language: str = "ja") -> HolidayDocument:
        """Convert a result to its serializable document form."""
        return HolidayDocument(
            year=resolved.year,
            holidays=[
                HolidayRecord(
                    name=h.display_name(language),
                    date=h.holiday_date.isoformat(),
                    epoch_seconds=epoch_seconds(h.holiday_date),
                    substitute=h.is_substitute,
                )
                for h in resolved.holidays
            ],
            message=resolved.message,
        )

    def to_json(self, resolved: ResolvedYear, language: str = "ja") -> str:
        """Serialize a result as pretty-printed JSON."""
        document = self.to_document(resolved, language)
        return json.dumps(document.model_dump(by_alias=True), indent=2, ensure_ascii=False)

    def from_document(self, document: HolidayDocument) -> ResolvedYear:
        """
        Rebuild a result from its document form.

        English names and the substitute_for link are not part of the
        document and therefore not restored, except that substitutes named
        after the usual pattern get their cause back.
        """
        holidays = [
            Holiday(
                name=record.name,
                holiday_date=date.fromisoformat(record.date),
                is_substitute=record.substitute,
                substitute_for=self._cause_of(record.name) if record.substitute else None,
            )
            for record in document.holidays
        ]
        resolved = self.assemble(document.year, holidays)
        return resolved.model_copy(update={"message": document.message})

    def from_json(self, text: str) -> ResolvedYear:
        """Parse a result serialized with to_json."""
        return self.from_document(HolidayDocument.model_validate_json(text))

    @staticmethod
    def _cause_of(name: str) -> Optional[str]:
        if name.startswith(f"{SUBSTITUTE_MARKER}(") and name.endswith(")"):
            return name[len(SUBSTITUTE_MARKER) + 1:-1]
        suffix = f"({SUBSTITUTE_MARKER})"
        if name.endswith(suffix):
            return name[: -len(suffix)]
        return None
