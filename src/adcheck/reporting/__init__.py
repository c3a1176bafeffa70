"""Report assembly and rendering."""

from .stdout import StdoutReporter, sorted_violations
from .writer import build_report, write_report

__all__ = ["StdoutReporter", "build_report", "sorted_violations", "write_report"]
