"""Exceptions raised while reading reports and assembling the beacon map."""

from __future__ import annotations

from typing import Optional, Sequence


class BeaconMapError(Exception):
    """Base class for beacon map reconstruction failures."""


class ScanReportParseError(BeaconMapError, ValueError):
    """Scanner report text could not be parsed."""

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class AssemblyImpossibleError(BeaconMapError, RuntimeError):
    """No remaining scanner overlaps any placed scanner."""

    def __init__(self, unresolved: Sequence[int]) -> None:
        self.unresolved = tuple(unresolved)
        super().__init__(f"No overlap found for scanner(s) {list(self.unresolved)}")
