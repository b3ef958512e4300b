from __future__ import annotations
# -*- coding: utf-8 -*-

"""
markers.py – Structural markers and line classification for spec sources.

Knows a small fixed vocabulary of HTML tags and Bikeshed markdown markers.
This is not an HTML parser; malformed markup simply fails to match.
"""

import re
from enum import Enum
from typing import Dict, Optional, Pattern, Tuple

# Lines ending in one of these never take a continuation.
HARD_TERMINATORS = ("</li>", "</p>", "</dt>", "</dd>", "-->")


class TagKind(Enum):
    """
    Exempt block types, in opener priority order.
    Value is (opener regex, closer literal).
    """
    COMMENT = (r"<!--", "-->")
    PRE = (r"<pre(?=[\s>/])", "</pre>")
    XMP = (r"<xmp(?=[\s>/])", "</xmp>")
    STYLE = (r"<style(?=[\s>/])", "</style>")
    SCRIPT = (r"<script(?=[\s>/])", "</script>")
    SVG = (r"<svg(?=[\s>/])", "</svg>")
    TABLE = (r"<table(?=[\s>/])", "</table>")

    @property
    def opener(self) -> str:
        return self.value[0]

    @property
    def closer(self) -> str:
        return self.value[1]


class LineClassifier:
    """
    Holds every compiled pattern the reflow stages need.

    Build one per run and hand it to each stage.
    """

    def __init__(self) -> None:
        # One (opener, closer) pair per block kind
        self.block_matchers: Dict[TagKind, Tuple[Pattern[str], Pattern[str]]] = {
            kind: (re.compile(kind.opener, re.IGNORECASE), re.compile(re.escape(kind.closer), re.IGNORECASE))
            for kind in TagKind
        }

        # Standalone forms
        self._single_tag = re.compile(r"^</?[A-Za-z][\w:-]*(?:\s[^<>]*)?/?>$")
        self._empty_pair = re.compile(r"^<([A-Za-z][\w:-]*)(?:\s[^<>]*)?></\1>$", re.IGNORECASE)
        self._full_dt = re.compile(r"^<dt(?:\s[^<>]*)?>.+</dt>$", re.IGNORECASE)
        self._full_heading = re.compile(r"^<h([1-6])(?:\s[^<>]*)?>.+</h\1>$", re.IGNORECASE)

        # Bikeshed markdown openers
        self._numbered_item = re.compile(r"^(\d+\.) ")
        self._term_opener = re.compile(r"^: ")
        self._description_opener = re.compile(r"^:: ")

        # Dependencies section
        self._dependencies_heading = re.compile(r"^<h4(?:\s[^<>]*)?>Dependencies</h4>$", re.IGNORECASE)
        self._h4_close = re.compile(r"</h4>", re.IGNORECASE)
        self._list_item = re.compile(r"<li(?=[\s>/])", re.IGNORECASE)
        self._term_tag = re.compile(r"<dt(?=[\s>/])", re.IGNORECASE)

    # --- paragraph structure ---

    def is_blank(self, contents: str) -> bool:
        return contents.strip() == ""

    def is_hard_terminator(self, contents: str) -> bool:
        return contents.rstrip().endswith(HARD_TERMINATORS)

    def is_standalone(self, contents: str) -> bool:
        """
        True for lines that never merge with a neighbour: blank lines, a lone
        tag, an empty element, or a complete one-line <dt>/<hN> element.
        """
        text = contents.strip()
        if not text:
            return True
        return bool(
            self._single_tag.match(text)
            or self._empty_pair.match(text)
            or self._full_dt.match(text)
            or self._full_heading.match(text)
        )

    def is_complete_term(self, contents: str) -> bool:
        return bool(self._full_dt.match(contents.strip()))

    def needs_own_line(self, contents: str) -> bool:
        text = contents.strip()
        return bool(
            self._numbered_item.match(text)
            or self._description_opener.match(text)
            or self._term_opener.match(text)
        )

    def is_smushable(self, contents: str) -> bool:
        if self.is_hard_terminator(contents):
            return False
        # Descriptions (":: ") do take continuation lines
        text = contents.strip()
        return not (self._numbered_item.match(text) or self._term_opener.match(text))

    # --- wrapping ---

    def marker_width(self, text: str) -> int:
        """Width of the leading list/definition marker of already left-trimmed text."""
        m = self._description_opener.match(text)
        if m:
            nested = self._numbered_item.match(text[m.end():])
            return m.end() + (nested.end() if nested else 0)
        m = self._term_opener.match(text)
        if m:
            return m.end()
        m = self._numbered_item.match(text)
        if m:
            return m.end()
        return 0

    # --- exemptions ---

    def find_opener(self, contents: str, start: int = 0) -> Optional[Tuple[TagKind, int]]:
        """
        Earliest block opener at or after `start`, as (kind, end offset).
        Ties on position go to TagKind order.
        """
        best: Optional[Tuple[int, TagKind, int]] = None
        for kind in TagKind:
            opener, _ = self.block_matchers[kind]
            m = opener.search(contents, start)
            if m and (best is None or m.start() < best[0]):
                best = (m.start(), kind, m.end())
        if best is None:
            return None
        return best[1], best[2]

    def find_closer(self, kind: TagKind, contents: str, start: int = 0) -> Optional[int]:
        """End offset of `kind`'s closer at or after `start`."""
        _, closer = self.block_matchers[kind]
        m = closer.search(contents, start)
        return m.end() if m else None

    def is_dependencies_heading(self, contents: str) -> bool:
        return bool(self._dependencies_heading.match(contents.strip()))

    def closes_h4(self, contents: str) -> bool:
        return bool(self._h4_close.search(contents))

    def has_list_or_term_tag(self, contents: str) -> bool:
        return bool(self._list_item.search(contents) or self._term_tag.search(contents))
