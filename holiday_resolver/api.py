"""
FastAPI REST API for the holiday resolver.
"""

import logging
from datetime import date
from typing import List

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from holiday_resolver import __version__
from holiday_resolver.config.manager import ConfigManager
from holiday_resolver.core.resolver import HolidayResolver
from holiday_resolver.data.schemas import HolidayDocument
from holiday_resolver.exceptions import HolidayResolverError

logger = logging.getLogger(__name__)

# Load configuration
config_manager = ConfigManager()
config = config_manager.load_config()

# Initialize components
resolver = HolidayResolver.from_config(config)


# API Models
class HolidayResponse(BaseModel):
    """Response model for a single holiday."""

    date: date
    name: str
    substitute: bool


class HolidayCheckResponse(BaseModel):
    """Response model for a holiday check."""

    date: date
    is_holiday: bool
    name: str = ""
    substitute: bool = False


# FastAPI app
app = FastAPI(
    title="Holiday Resolver API",
    description="Japanese national holidays including substitute holidays",
    version=__version__,
)


def _validate_year(year: int) -> None:
    if year < config.min_year or year > config.max_year:
        raise HTTPException(
            status_code=400,
            detail=f"Year must be between {config.min_year} and {config.max_year}",
        )


def _validate_language(language: str) -> None:
    if language not in ("ja", "en"):
        raise HTTPException(status_code=400, detail="language must be 'ja' or 'en'")


@app.get("/")
async def root():
    """API root endpoint with basic info."""
    return {
        "name": "Holiday Resolver API",
        "version": __version__,
        "endpoints": {
            "GET /holidays/{year}": "Get all holidays of a year",
            "GET /holidays/{year}/substitutes": "Get the substitute holidays of a year",
            "GET /is-holiday/{day}": "Check whether a date is a holiday",
        },
    }


@app.get("/holidays/{year}", response_model=HolidayDocument, response_model_by_alias=True)
async def get_holidays(year: int, language: str = Query(default=config.holiday_language)):
    """
    Get all holidays of a year as a result document.

    Args:
        year: Year (e.g., 2024, 2025)
        language: Language for holiday names (ja or en)
    """
    _validate_year(year)
    _validate_language(language)

    try:
        resolved = resolver.resolve(year)
        return resolver.assembler.to_document(resolved, language)
    except HolidayResolverError as e:
        logger.error("Failed to resolve %d: %s", year, e)
        raise HTTPException(status_code=500, detail=f"Error resolving holidays: {str(e)}")


@app.get("/holidays/{year}/substitutes", response_model=List[HolidayResponse])
async def get_substitutes(year: int, language: str = Query(default=config.holiday_language)):
    """Get only the substitute holidays of a year."""
    _validate_year(year)
    _validate_language(language)

    try:
        resolved = resolver.resolve(year)
    except HolidayResolverError as e:
        raise HTTPException(status_code=500, detail=f"Error resolving holidays: {str(e)}")

    return [
        HolidayResponse(date=h.holiday_date, name=h.display_name(language), substitute=True)
        for h in resolved.substitutes
    ]


@app.get("/is-holiday/{day}", response_model=HolidayCheckResponse)
async def is_holiday(day: date, language: str = Query(default=config.holiday_language)):
    """Check whether a date (YYYY-MM-DD) is a holiday."""
    _validate_year(day.year)
    _validate_language(language)

    try:
        holiday = resolver.holiday_on(day)
    except HolidayResolverError as e:
        raise HTTPException(status_code=500, detail=f"Error resolving holidays: {str(e)}")

    if holiday is None:
        return HolidayCheckResponse(date=day, is_holiday=False)
    return HolidayCheckResponse(
        date=day,
        is_holiday=True,
        name=holiday.display_name(language),
        substitute=holiday.is_substitute,
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}
