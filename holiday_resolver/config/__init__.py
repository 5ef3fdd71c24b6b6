"""
Configuration loading for the holiday resolver.
"""

from holiday_resolver.config.manager import ConfigManager

__all__ = ["ConfigManager"]
