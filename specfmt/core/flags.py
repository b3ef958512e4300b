from __future__ import annotations

import logging
from typing import List, Optional, Set

from .document import Line
from .markers import LineClassifier

logger = logging.getLogger(__name__)


def assign_format_flags(contents: List[str], line_numbers: Optional[Set[int]]) -> List[Line]:
    """
    Wraps raw lines into Line objects.
    line_numbers=None means the whole document is eligible.
    """
    if line_numbers is None:
        return [Line(text, True) for text in contents]

    lines = [Line(text, (i + 1) in line_numbers) for i, text in enumerate(contents)]
    logger.debug(f"Marked {sum(1 for line in lines if line.should_format)} of {len(lines)} line(s) from diff")
    return lines


def propagate_carryover(lines: List[Line], classifier: LineClassifier) -> None:
    """
    Carries eligibility forward to the end of the paragraph, so a paragraph
    touched in the middle is rewrapped from there on.
    The paragraph ends at a blank line or a hard terminator.
    """
    propagating = False
    for line in lines:
        if line.should_format:
            propagating = True
        if propagating:
            line.should_format = True
        if classifier.is_blank(line.contents) or classifier.is_hard_terminator(line.contents):
            propagating = False
