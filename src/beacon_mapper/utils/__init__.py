"""Report IO and logging helpers."""

from .logging_setup import configure_logging  # noqa: F401
from .report_io import load_scan_report, parse_scan_report  # noqa: F401
