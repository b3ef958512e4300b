from __future__ import annotations
# -*- coding: utf-8 -*-

"""
diff_lines.py – Maps a unified diff to the line numbers it added.

The diff is expected to be produced with `git diff -U0`, but context lines
are still counted so older fixtures with context keep working.

For a hunk `@@ -old_start,old_count +new_start,new_count @@` the counter is
moved to new_start. Every `+` line records the counter and advances it, every
context line only advances it, and `-` lines leave it alone:

    @@ -5,2 +5,3 @@
     unchanged line       -> line 5, skipped
    -deleted line         -> not in the new file
    +added line 1         -> 6
    +added line 2         -> 7

gives {6, 7}.
"""

import logging
import re
from typing import Optional, Set

logger = logging.getLogger(__name__)

HEADER_PREFIXES = ("+++", "---", "index", "diff")
HUNK_HEADER = re.compile(r"^@@ -\d+(?:,\d+)? \+(\d+)(?:,\d+)? @@")


def parse_hunk_start(line: str) -> Optional[int]:
    m = HUNK_HEADER.match(line)
    if not m:
        return None
    return int(m.group(1))


def parse_diff_line_numbers(diff: str) -> Set[int]:
    """
    Returns the 1-based line numbers of the new file that `diff` added.

    Never raises. A hunk header that does not parse leaves the counter where
    it was, so the following `+` lines may be attributed to the wrong lines.
    """
    line_numbers: Set[int] = set()
    current_line_number = 0

    for line in diff.split("\n"):
        if line.startswith(HEADER_PREFIXES):
            continue

        if line.startswith("@@"):
            start = parse_hunk_start(line)
            if start is None:
                logger.debug(f"Unparsable hunk header, keeping line {current_line_number}: {line!r}")
            else:
                current_line_number = start
        elif line.startswith("+"):
            line_numbers.add(current_line_number)
            current_line_number += 1
        elif line.startswith("-"):
            pass
        elif line.startswith(" "):
            # Context line (only present in diffs made without -U0)
            current_line_number += 1

    logger.debug(f"Diff touches {len(line_numbers)} line(s): {sorted(line_numbers)}")
    return line_numbers
