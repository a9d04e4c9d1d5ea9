from __future__ import annotations
from re import Pattern
from typing import Optional

# Appended so the last token is followed by whitespace like every other one
SENTINEL = "\n"

def count_matches(text: str, regexp: Optional[Pattern]) -> int:
    """Count non-overlapping matches of ``regexp`` in ``text`` plus the sentinel.

    Returns 0 when no pattern is configured for the strategy.
    """
    if regexp is None:
        return 0
    return sum(1 for _ in regexp.finditer(text + SENTINEL))
