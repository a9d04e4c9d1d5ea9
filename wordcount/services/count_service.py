from __future__ import annotations
from typing import Any
from wordcount.counting.counter import count_matches
from wordcount.counting.pipeline import run_pipeline
from wordcount.counting.settings import Strategy, load_settings
from wordcount.models.schemas import CountResult
from wordcount.obs.decorators import traced, timed
from wordcount.obs.logging_setup import get_logger
from wordcount.obs.metrics import inc_counter

logger = get_logger(__name__)

def _coerce_text(text: Any) -> str:
    if isinstance(text, str):
        return text
    if text is not None:
        logger.debug("Treating non-string text as empty", text_type=type(text).__name__)
    return ""

@traced(operation_name="wordcount.count")
def count(text: Any, type: Any = None, user_settings: Any = None) -> int:
    """Count words or characters in rich text.

    Args:
        text: The text being processed; anything but a string counts as empty.
        type: ``"words"``, ``"characters_excluding_spaces"`` or
            ``"characters_including_spaces"``. Anything else counts words.
        user_settings: Optional overrides, see ``SettingsOverrides``.

    Returns:
        The word or character count. A strategy whose counting pattern was
        overridden to ``None`` always yields 0.

    Example:
        >>> count("Words to count", "words")
        3
    """
    settings = load_settings(type, user_settings)
    normalized = run_pipeline(_coerce_text(text), settings)
    result = count_matches(normalized, settings.count_regexp)

    inc_counter("wordcount_counts_total", {"type": settings.type.value})
    logger.debug("Counted text", strategy=settings.type.value, result=result)
    return result

@traced(operation_name="wordcount.normalize")
def normalize(text: Any, type: Any = None, user_settings: Any = None) -> str:
    """Text as the counter sees it, before the trailing sentinel is added."""
    settings = load_settings(type, user_settings)
    return run_pipeline(_coerce_text(text), settings)

@timed("count_all_duration_ms")
def count_all(text: Any, user_settings: Any = None) -> CountResult:
    """Every strategy's count for the same text and overrides."""
    return CountResult(**{
        strategy.value: count(text, strategy, user_settings)
        for strategy in Strategy
    })
