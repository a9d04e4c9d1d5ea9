"""Normalization pipeline: ordered stage lists per strategy."""
from __future__ import annotations
from typing import Callable, Sequence, Tuple
from wordcount.counting import stages
from wordcount.counting.settings import CHARACTER_STRATEGIES, Settings

Stage = Callable[[str, Settings], str]

# Order matters: each stage expects the text shape left by the one before.
WORDS_STAGES: Tuple[Stage, ...] = (
    stages.strip_tags,
    stages.strip_html_comments,
    stages.strip_shortcodes,
    stages.strip_spaces,
    stages.strip_html_entities,
    stages.strip_connectors,
    stages.strip_removables,
)

CHARACTERS_STAGES: Tuple[Stage, ...] = (
    stages.strip_tags,
    stages.strip_html_comments,
    stages.strip_shortcodes,
    stages.transpose_astrals_to_countable_char,
    stages.strip_spaces,
    stages.transpose_html_entities_to_countable_chars,
)

def stages_for(settings: Settings) -> Tuple[Stage, ...]:
    """Stage list for the settings' strategy."""
    if settings.type in CHARACTER_STRATEGIES:
        return CHARACTERS_STAGES
    return WORDS_STAGES

def run_pipeline(text: str, settings: Settings, pipeline: Sequence[Stage] = None) -> str:
    """Apply the stages in order and return the normalized text."""
    for stage in pipeline if pipeline is not None else stages_for(settings):
        text = stage(text, settings)
    return text
