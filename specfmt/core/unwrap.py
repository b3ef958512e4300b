from __future__ import annotations

import logging
from typing import List

from .document import Line
from .markers import LineClassifier

logger = logging.getLogger(__name__)


def unwrap_lines(lines: List[Line], classifier: LineClassifier) -> List[Line]:
    """
    Joins eligible physical lines into logical lines, undoing earlier manual
    wrapping so the wrapper can break them again.

    A line is appended to the previous logical line (with one space) when
    that line is smushable and not exempt, this line is eligible, and this
    line does not start its own list item or definition. Standalone lines are
    copied as-is and end the current logical line.
    """
    unwrapped: List[Line] = []
    smushable = False

    for line in lines:
        if classifier.is_standalone(line.contents):
            unwrapped.append(Line(line.contents, line.should_format, line.exempt))
            smushable = False
            continue

        trimmed = line.contents.strip()
        if smushable and line.should_format and not classifier.needs_own_line(trimmed):
            previous = unwrapped[-1]
            previous.contents = previous.contents + " " + trimmed
            previous.should_format = True
        else:
            unwrapped.append(Line(line.contents, line.should_format, line.exempt))

        last = unwrapped[-1]
        smushable = not last.exempt and classifier.is_smushable(last.contents)

    logger.debug(f"Unwrapped {len(lines)} physical line(s) into {len(unwrapped)} logical line(s)")
    return unwrapped
