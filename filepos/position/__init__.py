"""Source positions."""

from filepos.position.position import UNKNOWN, Position, deep_copy, is_known

__all__ = [
    "UNKNOWN",
    "Position",
    "deep_copy",
    "is_known",
]
