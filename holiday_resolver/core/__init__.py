"""
Core holiday resolution logic.
"""

from holiday_resolver.core.equinox import EquinoxResolver
from holiday_resolver.core.expander import RuleExpander
from holiday_resolver.core.resolver import HolidayResolver, resolve
from holiday_resolver.core.substitutes import SubstituteEngine

__all__ = [
    "EquinoxResolver",
    "HolidayResolver",
    "RuleExpander",
    "SubstituteEngine",
    "resolve",
]
