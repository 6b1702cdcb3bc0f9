"""Approximate the source line of an annotation from its node's comments."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from filepos.annotations.meta import Meta
from filepos.annotations.options import ApproximationOptions
from filepos.position import Position, is_known

logger = logging.getLogger(__name__)


def _left_padding(node_position: Position, pad_char: str) -> int:
    if not node_position.is_known:
        return 0
    node_line = node_position.line
    return len(node_line) - len(node_line.lstrip(pad_char))


def populate_annotation_position_from_node(
    annotation_position: Position,
    node_position: Position,
    node_comments: Iterable[Meta],
    options: ApproximationOptions | None = None,
) -> Position:
    """Approximate an annotation's file and line text from the node it annotates.

    Annotations carry a line number but no captured text. The comment of the
    node sitting on the same line supplies the text, indented like the node:
    `<padding><marker><comment data>`. When several comments sit on that line
    the last one wins; when none does the line text is empty.

    Returns a new Position; the annotation position must be known.
    """
    options = options or ApproximationOptions()
    padding = _left_padding(node_position, options.pad_char)
    wanted_line = str(annotation_position.line_num())

    line_text = ""
    matches = 0
    for comment in node_comments:
        if is_known(comment.position) and comment.position.as_int_string() == wanted_line:
            line_text = f"{options.pad_char * padding}{options.comment_marker}{comment.data}"
            matches += 1

    if matches == 0:
        logger.debug("No comment found on line %s for annotation", wanted_line)
    elif matches > 1:
        logger.debug("%d comments found on line %s for annotation, using the last one", matches, wanted_line)

    return annotation_position.with_file(node_position.file).with_line(line_text)
