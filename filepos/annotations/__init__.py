"""Comment metadata and annotation position approximation."""

from filepos.annotations.approximate import populate_annotation_position_from_node
from filepos.annotations.meta import Meta
from filepos.annotations.options import ApproximationOptions

__all__ = [
    "ApproximationOptions",
    "Meta",
    "populate_annotation_position_from_node",
]
