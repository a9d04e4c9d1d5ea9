"""Pipeline stages.

Each stage takes ``(text, settings)`` and returns new text. A stage whose
pattern is unset in the settings returns the text unchanged.
"""
from __future__ import annotations
from re import Pattern
from typing import Optional
from wordcount.counting.patterns import COUNTABLE_CHAR
from wordcount.counting.settings import Settings

def _sub(pattern: Optional[Pattern], replacement: str, text: str) -> str:
    if pattern is None or not text:
        return text
    return pattern.sub(replacement, text)

def strip_tags(text: str, settings: Settings) -> str:
    """Remove HTML tags; text on either side is joined directly."""
    return _sub(settings.html_regexp, "", text)

def strip_html_comments(text: str, settings: Settings) -> str:
    """Remove <!-- ... --> comments."""
    return _sub(settings.html_comment_regexp, "", text)

def strip_shortcodes(text: str, settings: Settings) -> str:
    """Replace known shortcode tags with a line break."""
    return _sub(settings.shortcodes_regexp, "\n", text)

def strip_spaces(text: str, settings: Settings) -> str:
    """Turn non-breaking space entities into plain spaces."""
    return _sub(settings.space_regexp, " ", text)

def strip_html_entities(text: str, settings: Settings) -> str:
    """Drop remaining character references."""
    return _sub(settings.html_entity_regexp, "", text)

def strip_connectors(text: str, settings: Settings) -> str:
    """Turn dash connectors into spaces so they separate words."""
    return _sub(settings.connector_regexp, " ", text)

def strip_removables(text: str, settings: Settings) -> str:
    """Drop punctuation and symbols, joining fragments such as can't."""
    return _sub(settings.remove_regexp, "", text)

def transpose_astrals_to_countable_char(text: str, settings: Settings) -> str:
    """Replace every character beyond the BMP with one countable character."""
    return _sub(settings.astral_regexp, COUNTABLE_CHAR, text)

def transpose_html_entities_to_countable_chars(text: str, settings: Settings) -> str:
    """Replace every character reference with one countable character."""
    return _sub(settings.html_entity_regexp, COUNTABLE_CHAR, text)
