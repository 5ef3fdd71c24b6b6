"""
CLI interface for the holiday resolver.
"""

import logging
import os
import sys
from datetime import date, datetime
from pathlib import Path
from typing import Optional

import click
import uvicorn

from holiday_resolver import __version__
from holiday_resolver.config.manager import CONFIG_PATH_ENV, ConfigManager
from holiday_resolver.core.resolver import HolidayResolver
from holiday_resolver.data.schemas import Config
from holiday_resolver.exceptions import HolidayResolverError
from holiday_resolver.output.exporter import ResultExporter
from holiday_resolver.output.formatter import ConsoleFormatter

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def parse_date(date_str: str) -> date:
    """Parse date string in various formats."""
    formats = ["%Y-%m-%d", "%Y/%m/%d", "%Y.%m.%d"]
    for fmt in formats:
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue
    raise ValueError(
        f"Invalid date format: {date_str}. Use YYYY-MM-DD, YYYY/MM/DD, or YYYY.MM.DD"
    )


def load_config(config_path: Optional[str], **overrides) -> Config:
    """Load configuration and apply command-line overrides."""
    cfg = ConfigManager(config_path).load_config()
    overrides = {k: v for k, v in overrides.items() if v is not None}
    return cfg.model_copy(update=overrides) if overrides else cfg


def check_year(year: int, cfg: Config) -> None:
    """Reject years outside the supported range."""
    if year < cfg.min_year or year > cfg.max_year:
        raise ValueError(f"Year must be between {cfg.min_year} and {cfg.max_year}")


@click.group()
@click.version_option(version=__version__, prog_name="holiday-resolver")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def main(verbose):
    """Holiday Resolver - Japanese national holidays for any year."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@main.command()
@click.option(
    "--year", "-y",
    type=int,
    default=None,
    help="Year to resolve (default: current year)",
)
@click.option(
    "--format", "-f",
    type=click.Choice(["console", "json", "csv", "both"]),
    default=None,
    help="Output format (default: from config, console)",
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    help="Output file path (optional)",
)
@click.option(
    "--language", "-l",
    type=click.Choice(["ja", "en"]),
    default=None,
    help="Language for holiday names (default: from config)",
)
@click.option(
    "--run-detection",
    type=click.Choice(["date_order", "catalog_order"]),
    default=None,
    help="How consecutive holidays are grouped (default: from config)",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def holidays(year, format, output, language, run_detection, config):
    """List holidays for a specific year."""
    formatter = ConsoleFormatter()

    try:
        # Default to current year
        if year is None:
            year = date.today().year

        cfg = load_config(config, holiday_language=language, run_detection=run_detection)
        format = format or cfg.output_format
        check_year(year, cfg)
        formatter.language = cfg.holiday_language

        resolver = HolidayResolver.from_config(cfg)
        resolved = resolver.resolve(year)

        if format == "console":
            formatter.print_resolved_year(resolved)
            return

        exporter = ResultExporter(
            output_directory=cfg.output_directory,
            assembler=resolver.assembler,
            language=cfg.holiday_language,
        )
        if format == "json":
            path = exporter.export_json(resolved, output)
            formatter.print_success(f"Holidays saved to {path}")
        elif format == "csv":
            path = exporter.export_csv(resolved, output)
            formatter.print_success(f"Holidays saved to {path}")
        else:  # both
            json_path, csv_path = exporter.export_both(resolved)
            formatter.print_success(f"Holidays saved to:\n  - {json_path}\n  - {csv_path}")

    except (ValueError, HolidayResolverError) as e:
        formatter.print_error(str(e))
        sys.exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        formatter.print_error(f"Unexpected error: {e}")
        sys.exit(1)


@main.command()
@click.argument("day")
@click.option(
    "--language", "-l",
    type=click.Choice(["ja", "en"]),
    default=None,
    help="Language for holiday names (default: from config)",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def check(day, language, config):
    """Check whether DAY (YYYY-MM-DD) is a holiday."""
    formatter = ConsoleFormatter()

    try:
        check_date = parse_date(day)
        cfg = load_config(config, holiday_language=language)
        check_year(check_date.year, cfg)
        formatter.language = cfg.holiday_language

        resolver = HolidayResolver.from_config(cfg)
        formatter.print_check(check_date, resolver.holiday_on(check_date))

    except (ValueError, HolidayResolverError) as e:
        formatter.print_error(str(e))
        sys.exit(1)


@main.command()
@click.option(
    "--year", "-y",
    type=int,
    default=None,
    help="Single year to show (default: the whole table range)",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def equinox(year, config):
    """Show the equinox days from the equinox table."""
    formatter = ConsoleFormatter()

    try:
        cfg = load_config(config)
        resolver = HolidayResolver.from_config(cfg)
        table = resolver.equinox_table

        years = [year] if year is not None else list(range(table.min_year, table.max_year + 1))
        formatter.print_equinox_table(table, years)

    except (ValueError, HolidayResolverError) as e:
        formatter.print_error(str(e))
        sys.exit(1)


@main.command()
@click.option(
    "--host", "-h",
    default=None,
    help="Host to bind to (default: from config or 0.0.0.0)",
)
@click.option(
    "--port", "-p",
    type=int,
    default=None,
    help="Port to bind to (default: from config or 8000)",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def serve(host, port, config):
    """Start the FastAPI server."""
    formatter = ConsoleFormatter()

    try:
        cfg = load_config(config)
    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)

    if config:
        # The API module builds its own ConfigManager at import time
        os.environ[CONFIG_PATH_ENV] = str(Path(config).resolve())

    api_host = host or cfg.api_host
    api_port = port or cfg.api_port
    formatter.console.print(f"Serving holidays at http://{api_host}:{api_port} (Ctrl+C to stop)")

    uvicorn.run("holiday_resolver.api:app", host=api_host, port=api_port, reload=False)


if __name__ == "__main__":
    main()
