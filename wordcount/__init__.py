"""
Word Count - Live word and character counts for rich text.

Counts words, characters including spaces, or characters excluding spaces in
HTML-ish text carrying shortcodes and character references:
- Tags, comments and known shortcodes are stripped before counting
- Entities and astral-plane symbols count as one character each
- Locale behaviour is overridable pattern by pattern
"""

__version__ = "1.0.0"
__description__ = "Word and character counting for rich text"

from .counting import Strategy, Settings, load_settings
from .models import SettingsOverrides, CountResult
from .services import count, count_all, normalize

__all__ = [
    "count",
    "count_all",
    "normalize",
    "load_settings",
    "Strategy",
    "Settings",
    "SettingsOverrides",
    "CountResult",
]
