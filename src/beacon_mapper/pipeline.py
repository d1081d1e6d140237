"""High-level orchestration for reconstructing the beacon map."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, FrozenSet, List, Sequence

from loguru import logger

from beacon_mapper.alignment import ScannerAligner
from beacon_mapper.assembly import AssemblyEngine, distinct_beacons, max_scanner_distance
from beacon_mapper.config import PipelineConfig
from beacon_mapper.geometry import Point
from beacon_mapper.scanner import KnownScanner, Scanner
from beacon_mapper.utils.report_io import load_scan_report


@dataclass(slots=True)
class ReconstructionResult:
    known_scanners: List[KnownScanner]
    beacons: FrozenSet[Point]
    max_scanner_distance: int
    elapsed_ms: float

    @property
    def beacon_count(self) -> int:
        return len(self.beacons)

    @property
    def scanner_positions(self) -> Dict[int, Point]:
        return {scanner.index: scanner.offset for scanner in self.known_scanners}


class ReconstructionPipeline:
    """Places every scanner in the anchor's frame and summarises the map."""

    def __init__(self, config: PipelineConfig, aligner: ScannerAligner, engine: AssemblyEngine) -> None:
        self._config = config
        self._aligner = aligner
        self._engine = engine

    @classmethod
    def from_config(cls, config: PipelineConfig) -> "ReconstructionPipeline":
        alignment_cfg = config.alignment
        aligner = ScannerAligner(
            min_overlap=alignment_cfg.min_overlap,
            shift_bound=alignment_cfg.shift_bound,
            max_workers=alignment_cfg.max_workers,
            proper_rotations_only=alignment_cfg.proper_rotations_only,
        )
        logger.info(
            f"Reconstruction pipeline '{config.project.name}' initialized: "
            f"{aligner.candidate_orientations} orientations, {alignment_cfg.max_workers} worker(s)"
        )
        return cls(config=config, aligner=aligner, engine=AssemblyEngine(aligner))

    def reconstruct(self, scanners: Sequence[Scanner]) -> ReconstructionResult:
        start_time = time.perf_counter()

        known = self._engine.assemble(scanners)
        beacons = distinct_beacons(known)
        distance = max_scanner_distance(known)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"Reconstructed {len(known)} scanner(s) in {elapsed_ms:.1f}ms: "
            f"{len(beacons)} beacons, max scanner distance {distance}"
        )
        return ReconstructionResult(
            known_scanners=known,
            beacons=beacons,
            max_scanner_distance=distance,
            elapsed_ms=elapsed_ms,
        )

    def reconstruct_file(self, path: str | Path) -> ReconstructionResult:
        return self.reconstruct(load_scan_report(path))

    def close(self) -> None:
        self._aligner.close()

    def __enter__(self) -> "ReconstructionPipeline":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
