from __future__ import annotations
# -*- coding: utf-8 -*-

"""
rewrapper.py – The reflow pipeline.

Stages, in order:
  1. diff -> line numbers          (diff_lines)
  2. initial eligibility           (flags.assign_format_flags)
  3. carry eligibility forward     (flags.propagate_carryover)
  4. exempt verbatim blocks        (exemptions.exempt_blocks)
  5. exempt Dependencies entries   (exemptions.exempt_dependencies_section)
  6. unwrap                        (unwrap.unwrap_lines)
  7. wrap                          (wrap.wrap_lines)

No I/O happens here; callers hand in the whole document and write back the
result.
"""

import logging
from typing import List, Optional, Set

from .diff_lines import parse_diff_line_numbers
from .document import Line
from .exemptions import exempt_blocks, exempt_dependencies_section
from .flags import assign_format_flags, propagate_carryover
from .markers import LineClassifier
from .unwrap import unwrap_lines
from .wrap import wrap_lines

logger = logging.getLogger(__name__)

DEFAULT_COLUMN_LENGTH = 100


def rewrap_lines(
    lines: List[Line],
    column_length: int = DEFAULT_COLUMN_LENGTH,
    classifier: Optional[LineClassifier] = None,
) -> List[str]:
    """Runs stages 3-7 on lines whose initial eligibility is already set."""
    if classifier is None:
        classifier = LineClassifier()

    logger.debug(f"Rewrapping {len(lines)} line(s) to {column_length} columns")
    propagate_carryover(lines, classifier)
    exempt_blocks(lines, classifier)
    exempt_dependencies_section(lines, classifier)
    unwrapped = unwrap_lines(lines, classifier)
    rewrapped = wrap_lines(unwrapped, column_length, classifier)
    logger.debug(f"Produced {len(rewrapped)} line(s)")
    return rewrapped


def format_document(
    contents: List[str],
    diff: Optional[str] = None,
    column_length: int = DEFAULT_COLUMN_LENGTH,
    classifier: Optional[LineClassifier] = None,
) -> List[str]:
    """
    Reformats a whole document.

    With diff=None every line is eligible; otherwise only the lines the
    unified diff added (and the rest of their paragraphs) are.
    """
    line_numbers: Optional[Set[int]] = None
    if diff is not None:
        line_numbers = parse_diff_line_numbers(diff)
    lines = assign_format_flags(contents, line_numbers)
    return rewrap_lines(lines, column_length, classifier)
