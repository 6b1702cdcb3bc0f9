from __future__ import annotations

import json
from dataclasses import dataclass, replace
from typing import Final


def _escape_unprintable(ch: str) -> str:
    code = ord(ch)
    if code <= 0xFF:
        return f"\\x{code:02x}"
    if code <= 0xFFFF:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def _quote_value(value: object) -> str:
    """Debug-quote a value for display: strings get double quotes and escapes."""
    if isinstance(value, str):
        quoted = json.dumps(value, ensure_ascii=False)
        return "".join(ch if ch.isprintable() else _escape_unprintable(ch) for ch in quoted)
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "nil"
    return repr(value)


@dataclass(frozen=True, slots=True)
class Position:
    """
    Location of a construct in source text, by file and 1-based line.

    A Position is one of:
    - known: holds a line number (`_line_num` is set);
    - unknown: no line number, possibly a file;
    - from memory: no line number, `line` renders a key/value pair.

    Invariant:
    - `_line_num` is None or >= 1
    - a from-memory Position never holds a line number
    """

    _line_num: int | None = None
    file: str = ""
    line: str = ""
    from_memory: bool = False

    def __post_init__(self):
        if self._line_num is not None and self._line_num <= 0:
            raise ValueError("Lines are 1 based")
        if self.from_memory and self._line_num is not None:
            raise ValueError("Position from memory cannot have a line number")

    @staticmethod
    def new(line_num: int) -> "Position":
        """Create a known Position for a 1-based line number."""
        return Position(line_num)

    @staticmethod
    def for_line(line_num: int, *, file: str = "", line: str = "") -> "Position":
        """Create a known Position with its file and line text already attached."""
        return Position(line_num, file=file, line=line)

    @staticmethod
    def unknown() -> "Position":
        return Position()

    @staticmethod
    def from_key_value(key: object, value: object, separator: str) -> "Position":
        """Create a Position for a key/value pair that never existed in a file.

        The line text reads `<key><separator> <quoted value>`, e.g. `name: "x"`.
        """
        return Position(line=f"{key}{separator} {_quote_value(value)}", from_memory=True)

    def with_file(self, file: str) -> "Position":
        return replace(self, file=file)

    def with_line(self, line: str) -> "Position":
        return replace(self, line=line)

    @property
    def is_known(self) -> bool:
        return self._line_num is not None

    def line_num(self) -> int:
        """Get the 1-based line number; callers must check `is_known` first."""
        if self._line_num is None:
            raise ValueError("Position is unknown")
        return self._line_num

    def as_compact_string(self) -> str:
        file_prefix = self.file
        if file_prefix:
            file_prefix += ":"
        if self.is_known:
            return f"{file_prefix}{self.line_num()}"
        return f"{file_prefix}?"

    def as_string(self) -> str:
        return "line " + self.as_compact_string()

    def as_int_string(self) -> str:
        if self.is_known:
            return str(self.line_num())
        return "?"

    def as_4digit_string(self) -> str:
        if self.is_known:
            return f"{self.line_num():4d}"
        return "????"

    def deep_copy(self) -> "Position":
        """Return an independent Position equal to this one."""
        return replace(self)

    def deep_copy_with_line_offset(self, offset: int) -> "Position":
        """Copy a known Position, moving it `offset` lines forward."""
        if not self.is_known:
            raise ValueError("Position is unknown")
        if offset < 0:
            raise ValueError("Unexpected line offset")
        return Position(self.line_num() + offset, file=self.file, line=self.line)

    def is_next_to(self, other: "Position | None") -> bool:
        """Check if both positions are known, in the same file, and at most one line apart."""
        if other is None or not (self.is_known and other.is_known):
            return False
        if self.file != other.file:
            return False
        return abs(self.line_num() - other.line_num()) <= 1

    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        kind = "memory" if self.from_memory else "known" if self.is_known else "unknown"
        return f"Position({kind}, {self.as_compact_string()!r}, line={self.line!r})"


UNKNOWN: Final[Position] = Position()
"""Constant representing a Position with no file and no line."""


def is_known(position: Position | None) -> bool:
    """Check if a possibly-missing Position holds a line number."""
    return position is not None and position.is_known


def deep_copy(position: Position | None) -> Position | None:
    """Copy a possibly-missing Position; None copies to None."""
    if position is None:
        return None
    return position.deep_copy()
