"""
Medic

Self-diagnostic reports for command line tools. Host programs register
named checks; medic runs them in order and prints an aligned, optionally
colored table with an overall verdict, e.g. for a ``--medic`` flag.
"""

__version__ = "0.3.0"

from .models import Check, CheckResult, Severity
from .checker import MedicChecker, Report, ReportEntry, exit_code, run_check
from .config import ColorChoice, ConfigLoader, MedicConfig, load_config
from .errors import ConfigError, MedicError, ReportWriteError
from .render import build_lines, diagnose, render, summary_line, write_report
from .terminal import styling_enabled

__all__ = [
    "Check",
    "CheckResult",
    "Severity",
    "MedicChecker",
    "Report",
    "ReportEntry",
    "exit_code",
    "run_check",
    "ColorChoice",
    "ConfigLoader",
    "MedicConfig",
    "load_config",
    "ConfigError",
    "MedicError",
    "ReportWriteError",
    "build_lines",
    "diagnose",
    "render",
    "summary_line",
    "write_report",
    "styling_enabled",
]
