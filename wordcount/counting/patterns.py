"""Precompiled default patterns for the normalization pipeline and the counter.

Every pattern here is compiled once at import time and shared read-only by
all counting calls.
"""
from __future__ import annotations
import re

# Opening, closing and self-closing tags: <p>, </b>, <br />
HTML_REGEXP = re.compile(r"</?[a-z][^>]*?>", re.IGNORECASE)

HTML_COMMENT_REGEXP = re.compile(r"<!--[\s\S]*?-->")

# Non-breaking space entities, counted as ordinary spaces
SPACE_REGEXP = re.compile(r"&nbsp;|&#160;", re.IGNORECASE)

# Named and numeric character references: &amp; &#8217; &#x2014;
HTML_ENTITY_REGEXP = re.compile(r"&\S+?;")

# Double hyphen and em dash separate the words on either side
CONNECTOR_REGEXP = re.compile(r"--|\u2014")

REMOVE_REGEXP = re.compile(
    "["
    # Basic Latin punctuation and symbols
    r"\u0021-\u002F\u003A-\u0040\u005B-\u0060\u007B-\u007E"
    # Latin-1 Supplement punctuation, symbols, multiplication and division signs
    r"\u0080-\u00BF\u00D7\u00F7"
    # General Punctuation through Miscellaneous Symbols and Arrows
    r"\u2000-\u2BFF"
    # Supplemental Punctuation
    r"\u2E00-\u2E7F"
    "]"
)

# Code points outside the Basic Multilingual Plane
ASTRAL_REGEXP = re.compile(r"[\U00010000-\U0010FFFF]")

WORDS_REGEXP = re.compile(r"\S\s+")

CHARACTERS_EXCLUDING_SPACES_REGEXP = re.compile(r"\S")

# Anything but formatting characters: form feed, newline, carriage return,
# tab, vertical tab, soft hyphen, line and paragraph separators
CHARACTERS_INCLUDING_SPACES_REGEXP = re.compile(r"[^\f\n\r\t\v\u00AD\u2028\u2029]")

# Stand-in for one transposed entity or astral character
COUNTABLE_CHAR = "a"


def build_shortcodes_regexp(shortcodes) -> re.Pattern | None:
    """Compile a pattern matching opening and closing tags of the given shortcodes.

    Names are escaped, so ``"a.b"`` matches only ``[a.b]`` and never ``[axb]``.
    Returns ``None`` when there is no usable name.
    """
    names = [re.escape(name) for name in shortcodes or () if isinstance(name, str) and name]
    if not names:
        return None
    return re.compile(r"\[/?(?:" + "|".join(names) + r")[^\]]*?\]")
