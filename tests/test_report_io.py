"""Tests for scanner report parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from beacon_mapper.errors import ScanReportParseError
from beacon_mapper.geometry import Point
from beacon_mapper.utils import load_scan_report, parse_scan_report

REPORT = """--- scanner 0 ---
0,2,0
4,1,0
3,3,0

--- scanner 1 ---
-1,-1,0
-5, 0,0
-2,1,-7
-2,1,-7
"""


def test_parse_blocks_in_order() -> None:
    scanners = parse_scan_report(REPORT)

    assert [scanner.index for scanner in scanners] == [0, 1]
    assert scanners[0].beacons == {Point(0, 2, 0), Point(4, 1, 0), Point(3, 3, 0)}
    assert Point(-5, 0, 0) in scanners[1].beacons
    assert len(scanners[1]) == 3


def test_load_from_file(tmp_path: Path) -> None:
    path = tmp_path / "report.txt"
    path.write_text(REPORT, encoding="utf-8")

    assert len(load_scan_report(path)) == 2


@pytest.mark.parametrize(
    "text, line_number",
    [
        ("--- scanner 0 ---\n1,2\n", 2),
        ("--- scanner 0 ---\n1,2,3,4\n", 2),
        ("--- scanner 0 ---\n1,2,x\n", 2),
        ("1,2,3\n--- scanner 0 ---\n", 1),
    ],
)
def test_malformed_lines(text: str, line_number: int) -> None:
    with pytest.raises(ScanReportParseError) as excinfo:
        parse_scan_report(text)
    assert excinfo.value.line_number == line_number


def test_empty_report() -> None:
    with pytest.raises(ScanReportParseError):
        parse_scan_report("\n\n")
