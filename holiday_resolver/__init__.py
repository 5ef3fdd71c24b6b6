"""
Holiday Resolver - Japanese national holidays for a calendar year.
"""

__version__ = "0.1.0"
