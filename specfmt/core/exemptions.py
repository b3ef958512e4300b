from __future__ import annotations
# -*- coding: utf-8 -*-

"""
exemptions.py – Forces lines that must keep their layout out of the reflow.

Two scans, both run after carryover:
- blocks: comments, <pre>, <xmp>, <style>, <script>, <svg>, <table>
- the "Dependencies" section, whose <li>/<dt> entries list cross-spec references
"""

import logging
from typing import List, Optional

from .document import Line
from .markers import LineClassifier, TagKind

logger = logging.getLogger(__name__)


def exempt_blocks(lines: List[Line], classifier: LineClassifier) -> None:
    """
    Only one block is open at a time; the first opener wins until its own
    closer is seen. Opening and closing lines are exempt too. A block that is
    never closed exempts the rest of the document.
    """
    open_kind: Optional[TagKind] = None

    for line_number, line in enumerate(lines, start=1):
        text = line.contents
        pos = 0
        touched = open_kind is not None

        while True:
            if open_kind is None:
                found = classifier.find_opener(text, pos)
                if found is None:
                    break
                open_kind, pos = found
                touched = True
                logger.debug(f"Line {line_number}: {open_kind.name} block opened")

            end = classifier.find_closer(open_kind, text, pos)
            if end is None:
                break
            logger.debug(f"Line {line_number}: {open_kind.name} block closed")
            open_kind = None
            pos = end

        if touched:
            line.should_format = False
            line.exempt = True

    if open_kind is not None:
        logger.debug(f"{open_kind.name} block never closed, exempted to end of document")


def exempt_dependencies_section(lines: List[Line], classifier: LineClassifier) -> None:
    """
    Inside <h4>Dependencies</h4> (until the next </h4>), list items and terms
    keep their layout even when they were just added.
    """
    inside = False
    for line in lines:
        if classifier.is_dependencies_heading(line.contents):
            inside = True
            continue
        if inside and classifier.closes_h4(line.contents):
            inside = False
            continue
        if inside and classifier.has_list_or_term_tag(line.contents):
            line.should_format = False
            line.exempt = True
