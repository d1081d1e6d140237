"""Reconstruct the beacon map from a scanner report and print its summary."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from loguru import logger

from beacon_mapper.config import LoggingConfig, PipelineConfig, load_config
from beacon_mapper.errors import AssemblyImpossibleError, ScanReportParseError
from beacon_mapper.pipeline import ReconstructionPipeline
from beacon_mapper.utils import configure_logging, parse_scan_report


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Merge scanner reports into one beacon map")
    parser.add_argument("--input", default="-", help="Scanner report file, '-' for stdin")
    parser.add_argument("--config", type=Path, help="Path to pipeline YAML configuration")
    parser.add_argument("--log-level", help="Override the configured log level")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    cfg = load_config(args.config) if args.config else PipelineConfig()
    if args.log_level:
        cfg.logging = LoggingConfig(level=args.log_level, output=cfg.logging.output)
    configure_logging(cfg.logging)

    try:
        if args.input == "-":
            scanners = parse_scan_report(sys.stdin.read())
        else:
            scanners = parse_scan_report(Path(args.input).read_text(encoding="utf-8"))
        with ReconstructionPipeline.from_config(cfg) as pipeline:
            result = pipeline.reconstruct(scanners)
    except ScanReportParseError as exc:
        logger.error(f"Malformed scanner report: {exc}")
        return 2
    except AssemblyImpossibleError as exc:
        logger.error(f"Assembly failed: {exc}")
        return 1

    print(f"Beacons: {result.beacon_count}")
    print(f"Max scanner distance: {result.max_scanner_distance}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
