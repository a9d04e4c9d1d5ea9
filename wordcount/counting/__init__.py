"""
Counting core.

Provides:
- Precompiled default patterns
- Settings resolution with caller overrides
- Normalization stages and their per-strategy ordering
- Regex tally over normalized text
"""

from .settings import Strategy, Settings, DEFAULT_SETTINGS, load_settings
from .pipeline import WORDS_STAGES, CHARACTERS_STAGES, run_pipeline
from .counter import count_matches

__all__ = [
    "Strategy",
    "Settings",
    "DEFAULT_SETTINGS",
    "load_settings",
    "WORDS_STAGES",
    "CHARACTERS_STAGES",
    "run_pipeline",
    "count_matches",
]
