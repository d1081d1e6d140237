"""Beacon map reconstruction package."""

from .config import PipelineConfig, load_config  # noqa: F401
from .errors import AssemblyImpossibleError, BeaconMapError, ScanReportParseError  # noqa: F401
from .pipeline import ReconstructionPipeline, ReconstructionResult  # noqa: F401
from .scanner import KnownScanner, Scanner  # noqa: F401
