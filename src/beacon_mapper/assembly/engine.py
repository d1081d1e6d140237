"""Incremental placement of scanners into the anchor's frame."""

from __future__ import annotations

from typing import List, Optional, Sequence, Set, Tuple

from loguru import logger

from beacon_mapper.alignment import AlignmentResult, ScannerAligner
from beacon_mapper.errors import AssemblyImpossibleError
from beacon_mapper.scanner import KnownScanner, Scanner


class AssemblyEngine:
    """Grows the set of placed scanners one alignment at a time.

    The first scanner is the anchor at the origin. Each pass walks the
    unresolved scanners in input order and, for each, the known scanners
    in placement order; the first pair that aligns promotes its candidate.
    """

    def __init__(self, aligner: ScannerAligner) -> None:
        self._aligner = aligner

    def assemble(self, scanners: Sequence[Scanner]) -> List[KnownScanner]:
        if not scanners:
            raise ValueError("AssemblyEngine requires at least one scanner")
        indices = [scanner.index for scanner in scanners]
        if len(set(indices)) != len(indices):
            raise ValueError(f"Scanner indices must be unique, got {indices}")

        known: List[KnownScanner] = [KnownScanner.anchor(scanners[0])]
        unresolved: List[Scanner] = list(scanners[1:])
        # (candidate index, known index) pairs that did not align; known
        # beacon sets never change, so these stay failures.
        failed: Set[Tuple[int, int]] = set()

        logger.info(f"Assembling {len(scanners)} scanner(s) around anchor scanner {known[0].index}")

        while unresolved:
            match = self._find_next(unresolved, known, failed)
            if match is None:
                raise AssemblyImpossibleError([scanner.index for scanner in unresolved])

            position, target, result = match
            candidate = unresolved.pop(position)
            placed = KnownScanner(
                index=candidate.index,
                beacons=result.beacons,
                offset=result.translation,
                transform=result.transform,
            )
            known.append(placed)
            logger.info(
                f"Placed scanner {placed.index} via scanner {target.index} at {placed.offset.as_tuple()} "
                f"({len(known)}/{len(scanners)} known)"
            )

        return known

    def _find_next(
        self,
        unresolved: Sequence[Scanner],
        known: Sequence[KnownScanner],
        failed: Set[Tuple[int, int]],
    ) -> Optional[Tuple[int, KnownScanner, AlignmentResult]]:
        for position, candidate in enumerate(unresolved):
            for target in known:
                pair = (candidate.index, target.index)
                if pair in failed:
                    continue
                result = self._aligner.align(candidate, target)
                if result is not None:
                    return position, target, result
                failed.add(pair)
        return None
