"""
Egress module for formatting and writing TORAT output.
"""

from egress import formatting, report_writer
from egress.report_writer import ReportWriter

__all__ = [
    "ReportWriter",
    "formatting",
    "report_writer",
]
