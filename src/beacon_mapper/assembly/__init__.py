"""Assembly of scanners into a single global beacon map."""

from .aggregator import count_distinct_beacons, distinct_beacons, max_scanner_distance  # noqa: F401
from .engine import AssemblyEngine  # noqa: F401
