"""
Export functionality for resolved holiday years.
"""

import csv
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

from holiday_resolver.data.schemas import ResolvedYear
from holiday_resolver.output.assembler import ResultAssembler

logger = logging.getLogger(__name__)

WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


class ResultExporter:
    """Exports resolved holidays to JSON and CSV files."""

    def __init__(
        self,
        output_directory: str = "results",
        timestamp_format: str = "%Y%m%d_%H%M%S",
        assembler: Optional[ResultAssembler] = None,
        language: str = "ja",
    ):
        """
        Initialize the result exporter.

        Args:
            output_directory: Directory for output files.
            timestamp_format: Format string for timestamps in filenames.
            assembler: Assembler used to build the JSON document.
            language: Language for holiday names ('ja' or 'en').
        """
        self.output_directory = output_directory
        self.timestamp_format = timestamp_format
        self.assembler = assembler or ResultAssembler()
        self.language = language

    def _ensure_output_dir(self) -> Path:
        """Ensure output directory exists and return path."""
        output_path = Path(self.output_directory)
        output_path.mkdir(parents=True, exist_ok=True)
        return output_path

    def _generate_filename(self, prefix: str, extension: str) -> str:
        """Generate a filename with timestamp."""
        timestamp = datetime.now().strftime(self.timestamp_format)
        return f"{prefix}_{timestamp}.{extension}"

    def _resolve_path(self, output_path: Optional[str], prefix: str, extension: str) -> Path:
        if output_path:
            file_path = Path(output_path)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            return file_path
        return self._ensure_output_dir() / self._generate_filename(prefix, extension)

    def export_json(self, resolved: ResolvedYear, output_path: Optional[str] = None) -> str:
        """
        Export a resolved year to a JSON document.

        Args:
            resolved: ResolvedYear to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, f"holidays_{resolved.year}", "json")

        with open(file_path, "w", encoding="utf-8") as f:
            f.write(self.assembler.to_json(resolved, self.language))

        logger.info("Exported %d holidays to %s", len(resolved.holidays), file_path)
        return str(file_path)

    def export_csv(self, resolved: ResolvedYear, output_path: Optional[str] = None) -> str:
        """
        Export a resolved year to a CSV file.

        Args:
            resolved: ResolvedYear to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, f"holidays_{resolved.year}", "csv")

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)

            # Write header
            writer.writerow(["Date", "Weekday", "Name", "Substitute"])

            # Write data
            for holiday in resolved.holidays:
                writer.writerow([
                    holiday.holiday_date.isoformat(),
                    WEEKDAY_NAMES[holiday.holiday_date.weekday()],
                    holiday.display_name(self.language),
                    holiday.is_substitute,
                ])

        logger.info("Exported %d holidays to %s", len(resolved.holidays), file_path)
        return str(file_path)

    def export_both(self, resolved: ResolvedYear) -> Tuple[str, str]:
        """
        Export a resolved year to both JSON and CSV.

        Returns:
            Tuple of (json_path, csv_path).
        """
        json_path = self.export_json(resolved)
        csv_path = self.export_csv(resolved)
        return json_path, csv_path
