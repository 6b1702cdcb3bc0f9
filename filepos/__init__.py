"""Source position tracking for parsed nodes, comments and annotations."""

from filepos.annotations import (
    ApproximationOptions,
    Meta,
    populate_annotation_position_from_node,
)
from filepos.position import UNKNOWN, Position, deep_copy, is_known

__all__ = [
    "UNKNOWN",
    "ApproximationOptions",
    "Meta",
    "Position",
    "deep_copy",
    "is_known",
    "populate_annotation_position_from_node",
]
