"""
Result assembly, output formatting and export functionality.
"""

from holiday_resolver.output.assembler import ResultAssembler
from holiday_resolver.output.exporter import ResultExporter
from holiday_resolver.output.formatter import ConsoleFormatter

__all__ = ["ConsoleFormatter", "ResultAssembler", "ResultExporter"]
