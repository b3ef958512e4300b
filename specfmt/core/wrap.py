from __future__ import annotations

import logging
import re
from typing import List

from .document import Line
from .markers import LineClassifier

logger = logging.getLogger(__name__)

_LEADING_WHITESPACE = re.compile(r"^\s*")


def wrap_lines(lines: List[Line], column_length: int, classifier: LineClassifier) -> List[str]:
    wrapped: List[str] = []
    for line in lines:
        if (
            len(line.contents) <= column_length
            or not line.should_format
            or classifier.is_complete_term(line.contents)
        ):
            wrapped.append(line.contents)
        else:
            wrapped.extend(wrap_single_line(line.contents, column_length, classifier))
    return wrapped


def wrap_single_line(line: str, column_length: int, classifier: LineClassifier) -> List[str]:
    """
    Greedy word wrap of one logical line.

    Every segment keeps the line's own indentation. Continuation segments also
    get the width of a leading `N. `, `: ` or `:: ` marker so they line up
    under the text. A word that does not fit even on a fresh segment is put
    there alone rather than dropped or split.
    """
    indent = _LEADING_WHITESPACE.match(line).group(0)
    text = line[len(indent):]
    continuation = indent + " " * classifier.marker_width(text)

    # split(" ") never returns an empty list, so there is always a first word
    words = text.split(" ")
    segments: List[str] = []
    current = indent + words[0]
    for word in words[1:]:
        if segments and current == continuation:
            # A fresh segment only holds its indentation so far
            current += word
        elif len(current) + 1 + len(word) <= column_length:
            current += " " + word
        else:
            segments.append(current)
            current = continuation + word

    if not segments or current != continuation:
        segments.append(current)
    return segments
