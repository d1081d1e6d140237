"""Alignment module for scanner-to-scanner registration."""

from .axis_search import MIN_OVERLAP, SHIFT_BOUND, find_axis_shift
from .scanner_aligner import AlignmentResult, ScannerAligner

__all__ = ["AlignmentResult", "ScannerAligner", "find_axis_shift", "MIN_OVERLAP", "SHIFT_BOUND"]
