from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Line:
    """
    One line of the spec being reformatted.

    Before unwrapping this is a physical line; afterwards it is a logical line
    that may hold several physical lines joined by single spaces. Lines outside
    the diff, or inside exempt blocks, carry should_format=False. Lines an
    exemption scan protected also carry exempt=True and never take a
    continuation line.
    """
    contents: str
    should_format: bool = False
    exempt: bool = False
