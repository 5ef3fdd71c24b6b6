"""
Console output formatting using Rich.
"""

from datetime import date
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from holiday_resolver.data.schemas import EquinoxTable, Holiday, ResolvedYear
from holiday_resolver.output.exporter import WEEKDAY_NAMES


class ConsoleFormatter:
    """Formats output for console display using Rich."""

    def __init__(self, console: Optional[Console] = None, language: str = "ja"):
        """
        Initialize the console formatter.

        Args:
            console: Rich console to print to (created if not provided).
            language: Language for holiday names ('ja' or 'en').
        """
        self.console = console or Console()
        self.language = language

    def print_resolved_year(self, resolved: ResolvedYear) -> None:
        """
        Print all holidays of a resolved year.

        Args:
            resolved: ResolvedYear to display.
        """
        self.console.print()
        self.console.rule(f"[bold blue]Holidays {resolved.year}[/bold blue]")
        self.console.print()

        if resolved.holidays:
            self.print_holidays(resolved.holidays)
            self.console.print(
                f"{len(resolved.holidays)} holidays, {len(resolved.substitutes)} substitute(s)"
            )
        else:
            self.console.print("[dim]No holidays found for this year.[/dim]")

        if resolved.message:
            self.console.print(f"[dim]{resolved.message}[/dim]")
        self.console.print()

    def print_holidays(self, holidays: List[Holiday]) -> None:
        """
        Print a table of holidays.

        Args:
            holidays: List of holidays to display.
        """
        holiday_table = Table()
        holiday_table.add_column("Date", style="cyan", width=12)
        holiday_table.add_column("Day", style="dim", width=10)
        holiday_table.add_column("Name", style="white")
        holiday_table.add_column("Substitute", justify="center", width=10)

        for holiday in holidays:
            holiday_table.add_row(
                holiday.holiday_date.isoformat(),
                WEEKDAY_NAMES[holiday.holiday_date.weekday()],
                holiday.display_name(self.language),
                "[yellow]yes[/yellow]" if holiday.is_substitute else "",
            )

        self.console.print(holiday_table)

    def print_check(self, day: date, holiday: Optional[Holiday]) -> None:
        """Print whether a date is a holiday."""
        weekday = WEEKDAY_NAMES[day.weekday()]
        if holiday:
            self.console.print(
                f"[bold green]{day.isoformat()}[/bold green] ({weekday}) is a holiday: "
                f"{holiday.display_name(self.language)}"
            )
        else:
            self.console.print(f"[bold]{day.isoformat()}[/bold] ({weekday}) is not a holiday")

    def print_equinox_table(self, table: EquinoxTable, years: List[int]) -> None:
        """Print equinox days for the given years."""
        equinox_table = Table(title="[bold]Equinox Days[/bold]")
        equinox_table.add_column("Year", style="cyan", width=6)
        equinox_table.add_column("Vernal", style="white")
        equinox_table.add_column("Autumnal", style="white")

        for year in years:
            entry = table.get(year)
            if entry is None:
                equinox_table.add_row(str(year), "[dim]-[/dim]", "[dim]-[/dim]")
            else:
                equinox_table.add_row(
                    str(year),
                    date(year, 3, entry.spring_day).isoformat(),
                    date(year, 9, entry.fall_day).isoformat(),
                )

        self.console.print(equinox_table)
        self.console.print(
            f"[dim]Equinox holidays are produced for {table.min_year}-{table.max_year} only.[/dim]"
        )

    def print_error(self, message: str) -> None:
        """
        Print an error message.

        Args:
            message: Error message to display.
        """
        self.console.print(f"[bold red]Error:[/bold red] {message}")

    def print_success(self, message: str) -> None:
        """
        Print a success message.

        Args:
            message: Success message to display.
        """
        self.console.print(f"[bold green]Success:[/bold green] {message}")
