"""
Substitute holidays (振替休日) for holidays falling on the rest day.

A holiday on the rest day is compensated by the next day that is not
already a holiday. When several holidays are calendar-adjacent, the run
gets a single substitute after its last day.

Runs are detected by list adjacency: a run continues while the next list
element is dated exactly one day after the current one. With
run_detection="catalog_order" the list is scanned in the order it was
built (catalog rules, then equinoxes), which misses runs whose rules are
not listed in calendar order. run_detection="date_order" sorts the list
by date first.
"""

import logging
from datetime import date, timedelta
from typing import Iterable, List, Literal

from holiday_resolver.data.schemas import Holiday, Weekday

logger = logging.getLogger(__name__)

RunDetection = Literal["date_order", "catalog_order"]

SUBSTITUTE_NAME = "振替休日({name})"
SUBSTITUTE_NAME_EN = "Substitute Holiday ({name})"


class SubstituteEngine:
    """Inserts substitute holidays into a list of resolved holidays."""

    def __init__(self, rest_day: Weekday = Weekday.SUNDAY, run_detection: RunDetection = "date_order"):
        """
        Initialize the substitute engine.

        Args:
            rest_day: Weekday on which a holiday earns a substitute.
            run_detection: "date_order" to sort before scanning, or
                "catalog_order" to scan the list as given.
        """
        if run_detection not in ("date_order", "catalog_order"):
            raise ValueError(f"Unknown run detection mode: {run_detection}")
        self.rest_day = rest_day
        self.run_detection = run_detection

    def apply(self, holidays: List[Holiday], reserved: Iterable[date] = ()) -> List[Holiday]:
        """
        Add substitute holidays to the list in place.

        Only the elements present before the call are scanned; substitutes
        appended here never trigger further substitutes.

        A rest-day holiday that already has a substitute in the list is left
        alone. The equinox resolver compensates a Sunday equinox itself
        (秋分の日(振替休日) on the Monday), so without this skip the same
        equinox would get a second substitute, 振替休日(秋分の日), on the
        Tuesday. Date uniqueness alone does not prevent that.

        Args:
            holidays: Holidays of one year. Extended (and, in date_order
                mode, sorted) in place.
            reserved: Further dates a substitute must not land on, such as
                the holidays of the following year.

        Returns:
            The substitutes that were appended.
        """
        if self.run_detection == "date_order":
            holidays.sort(key=lambda h: h.holiday_date)

        original_count = len(holidays)
        occupied = {h.holiday_date for h in holidays}
        occupied.update(reserved)
        compensated = {h.substitute_for for h in holidays if h.is_substitute}
        added: List[Holiday] = []

        i = 0
        while i < original_count:
            cause = holidays[i]
            if cause.holiday_date.weekday() != self.rest_day or cause.name in compensated:
                i += 1
                continue

            # Extend the run over list neighbours dated one day apart
            last_date = cause.holiday_date
            while i + 1 < original_count and holidays[i + 1].holiday_date == last_date + timedelta(days=1):
                i += 1
                last_date = holidays[i].holiday_date

            candidate = last_date + timedelta(days=1)
            while candidate in occupied:
                candidate += timedelta(days=1)

            substitute = Holiday(
                name=SUBSTITUTE_NAME.format(name=cause.name),
                name_english=(
                    SUBSTITUTE_NAME_EN.format(name=cause.name_english) if cause.name_english else None
                ),
                holiday_date=candidate,
                is_substitute=True,
                substitute_for=cause.name,
            )
            holidays.append(substitute)
            added.append(substitute)
            occupied.add(candidate)
            compensated.add(cause.name)
            logger.debug(
                "Substitute for %s (%s) on %s", cause.name, cause.holiday_date, candidate
            )
            i += 1

        return added
