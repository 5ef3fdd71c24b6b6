"""
MCP Server for the Holiday Resolver.

This module provides an MCP (Model Context Protocol) server that exposes
holiday resolution to Claude Desktop and other MCP clients.

Supports two transport modes:
- stdio: For local Claude Desktop integration
- sse: For HTTP-based integration (Docker, remote servers)
"""

import argparse
import os
from datetime import date

from mcp.server.fastmcp import FastMCP

from holiday_resolver.config.manager import ConfigManager
from holiday_resolver.core.resolver import HolidayResolver
from holiday_resolver.exceptions import HolidayResolverError

# Load configuration
config_manager = ConfigManager()
config = config_manager.load_config()

# Initialize components
resolver = HolidayResolver.from_config(config)


def list_holidays(year: int, language: str = "ja") -> dict:
    """
    Get all Japanese national holidays of a year.

    Substitute holidays (振替休日) are included and flagged. The vernal
    and autumnal equinox holidays are only available for the years
    covered by the equinox table (2020-2050 by default).

    Args:
        year: Year to get holidays for (e.g., 2026)
        language: "ja" for Japanese names (default) or "en" for English

    Returns:
        Dictionary with:
        - year: The requested year
        - holidays: List of holidays with date, name, epochSeconds and substitute flag
        - message: Advisory note about predicted equinox dates

    Examples:
        >>> list_holidays(2026)
        >>> list_holidays(2026, language="en")
    """
    if year < config.min_year or year > config.max_year:
        return {"error": f"Year must be between {config.min_year} and {config.max_year}"}
    if language not in ("ja", "en"):
        return {"error": "language must be 'ja' or 'en'"}

    try:
        resolved = resolver.resolve(year)
        document = resolver.assembler.to_document(resolved, language)
        return document.model_dump(by_alias=True)
    except HolidayResolverError as e:
        return {"error": f"Error resolving holidays: {str(e)}"}


def check_holiday(day: str, language: str = "ja") -> dict:
    """
    Check whether a date is a Japanese national holiday.

    Args:
        day: Date in format YYYY-MM-DD (e.g., "2026-05-06")
        language: "ja" for Japanese names (default) or "en" for English

    Returns:
        Dictionary with date, is_holiday, and (for holidays) name and
        substitute flag.

    Example:
        >>> check_holiday("2026-05-06")
    """
    try:
        check_date = date.fromisoformat(day)
    except ValueError as e:
        return {"error": f"Invalid date format. Use YYYY-MM-DD. Details: {str(e)}"}

    if check_date.year < config.min_year or check_date.year > config.max_year:
        return {"error": f"Year must be between {config.min_year} and {config.max_year}"}
    if language not in ("ja", "en"):
        return {"error": "language must be 'ja' or 'en'"}

    try:
        holiday = resolver.holiday_on(check_date)
    except HolidayResolverError as e:
        return {"error": f"Error resolving holidays: {str(e)}"}

    result = {"date": check_date.isoformat(), "is_holiday": holiday is not None}
    if holiday:
        result["name"] = holiday.display_name(language)
        result["substitute"] = holiday.is_substitute
    return result


def create_mcp_server(host: str = "127.0.0.1", port: int = 8000) -> FastMCP:
    """Create and configure the MCP server with tools."""
    mcp = FastMCP("Holiday Resolver", host=host, port=port)
    mcp.tool()(list_holidays)
    mcp.tool()(check_holiday)
    return mcp


def main():
    """Run the MCP server with configurable transport.

    Transport can be set via:
    - Command line: --transport sse --port 8080
    - Environment: MCP_TRANSPORT=sse MCP_PORT=8080 MCP_HOST=0.0.0.0
    """
    parser = argparse.ArgumentParser(description="Holiday Resolver MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=os.environ.get("MCP_TRANSPORT", "stdio"),
        help="Transport mode: stdio (default) or sse for HTTP",
    )
    parser.add_argument(
        "--host",
        default=os.environ.get("MCP_HOST", os.environ.get("FASTMCP_HOST", "0.0.0.0")),
        help="Host to bind to (SSE mode only, default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("MCP_PORT", os.environ.get("FASTMCP_PORT", "8080"))),
        help="Port to listen on (SSE mode only, default: 8080)",
    )

    args = parser.parse_args()

    mcp = create_mcp_server(host=args.host, port=args.port)
    mcp.run(transport=args.transport)


if __name__ == "__main__":
    main()
