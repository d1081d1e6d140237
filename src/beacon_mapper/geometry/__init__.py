"""Geometry primitives: points, orientations, transforms."""

from .orientation import (  # noqa: F401
    IDENTITY,
    IDENTITY_TRANSFORM,
    ORIENTATIONS,
    Orientation,
    Transform,
    orientations,
)
from .points import ORIGIN, Point, array_to_points, points_to_array  # noqa: F401
