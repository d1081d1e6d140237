"""Reading scanner reports from text."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Set, Tuple

from loguru import logger

from beacon_mapper.errors import ScanReportParseError
from beacon_mapper.geometry import Point
from beacon_mapper.scanner import Scanner


def parse_scan_report(text: str) -> List[Scanner]:
    """
    Parse a report made of ``--- scanner N ---`` blocks.

    Every header starts a new scanner; the lines after it hold one beacon
    each as three comma-separated integers. Blank lines are ignored.
    Scanners are numbered by their order in the report.
    """
    blocks: List[Set[Point]] = []
    current: Optional[Set[Point]] = None

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            continue
        if "scanner" in line:
            current = set()
            blocks.append(current)
            continue
        if current is None:
            raise ScanReportParseError("beacon reading before any scanner header", line_number)
        current.add(Point(*_parse_coordinates(line, line_number)))

    if not blocks:
        raise ScanReportParseError("report contains no scanners")

    logger.debug(f"Parsed {len(blocks)} scanner(s), {sum(len(block) for block in blocks)} reading(s)")
    return [Scanner(index=index, beacons=frozenset(block)) for index, block in enumerate(blocks)]


def load_scan_report(path: str | Path) -> List[Scanner]:
    """Read and parse a report file."""
    text = Path(path).read_text(encoding="utf-8")
    return parse_scan_report(text)


def _parse_coordinates(line: str, line_number: int) -> Tuple[int, int, int]:
    tokens = [token.strip() for token in line.split(",")]
    if len(tokens) != 3:
        raise ScanReportParseError(f"expected 3 coordinates, got {len(tokens)}: {line!r}", line_number)
    try:
        x, y, z = (int(token) for token in tokens)
    except ValueError as exc:
        raise ScanReportParseError(f"invalid coordinate in {line!r}", line_number) from exc
    return x, y, z
