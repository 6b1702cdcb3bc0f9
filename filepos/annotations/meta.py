"""Comment metadata attached to parsed nodes."""

from dataclasses import dataclass

from filepos.position import Position


@dataclass(frozen=True, slots=True)
class Meta:
    """Comment text (without the comment marker) and where the comment was found."""

    data: str
    position: Position | None
