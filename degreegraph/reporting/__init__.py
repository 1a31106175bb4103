"""Run summaries: Jinja2 text report, JSON-safe dict, reproduction command."""

from degreegraph.reporting.reproduction import build_reproduction_command
from degreegraph.reporting.summary import UNREACHABLE_MARKER, format_report, report_to_dict

__all__ = [
    "UNREACHABLE_MARKER",
    "build_reproduction_command",
    "format_report",
    "report_to_dict",
]
