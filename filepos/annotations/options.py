"""Annotation position approximation options."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ApproximationOptions:
    """Rendering choices for approximated annotation lines."""

    comment_marker: str = "#"
    pad_char: str = " "

    def __post_init__(self):
        if len(self.pad_char) != 1:
            raise ValueError("pad_char must be a single character")
