"""Settings resolution: defaults, caller overrides and the active strategy."""
from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from re import Pattern
from collections.abc import Mapping
from typing import Any, Dict, Optional, Tuple
from pydantic import ValidationError
from wordcount.config import DEFAULT_SHORTCODES, DEFAULT_TYPE
from wordcount.counting import patterns
from wordcount.models.schemas import SettingsOverrides
from wordcount.obs.logging_setup import get_logger

logger = get_logger(__name__)

class Strategy(str, Enum):
    """Ways of counting."""
    WORDS = "words"
    CHARACTERS_EXCLUDING_SPACES = "characters_excluding_spaces"
    CHARACTERS_INCLUDING_SPACES = "characters_including_spaces"

CHARACTER_STRATEGIES = (
    Strategy.CHARACTERS_EXCLUDING_SPACES,
    Strategy.CHARACTERS_INCLUDING_SPACES,
)

@dataclass(frozen=True)
class L10n:
    """Locale payload carried by the settings."""
    type: Optional[str] = None
    shortcodes: Tuple[str, ...] = ()

@dataclass(frozen=True)
class Settings:
    """Fully resolved configuration for a single counting call."""
    type: Strategy = Strategy.WORDS
    l10n: L10n = field(default_factory=L10n)
    shortcodes: Tuple[str, ...] = ()
    shortcodes_regexp: Optional[Pattern] = None

    html_regexp: Optional[Pattern] = patterns.HTML_REGEXP
    html_comment_regexp: Optional[Pattern] = patterns.HTML_COMMENT_REGEXP
    space_regexp: Optional[Pattern] = patterns.SPACE_REGEXP
    html_entity_regexp: Optional[Pattern] = patterns.HTML_ENTITY_REGEXP
    connector_regexp: Optional[Pattern] = patterns.CONNECTOR_REGEXP
    remove_regexp: Optional[Pattern] = patterns.REMOVE_REGEXP
    astral_regexp: Optional[Pattern] = patterns.ASTRAL_REGEXP
    words_regexp: Optional[Pattern] = patterns.WORDS_REGEXP
    characters_excluding_spaces_regexp: Optional[Pattern] = patterns.CHARACTERS_EXCLUDING_SPACES_REGEXP
    characters_including_spaces_regexp: Optional[Pattern] = patterns.CHARACTERS_INCLUDING_SPACES_REGEXP

    @property
    def count_regexp(self) -> Optional[Pattern]:
        """Counting pattern for the active strategy."""
        if self.type is Strategy.CHARACTERS_INCLUDING_SPACES:
            return self.characters_including_spaces_regexp
        if self.type is Strategy.CHARACTERS_EXCLUDING_SPACES:
            return self.characters_excluding_spaces_regexp
        return self.words_regexp

# Merge base for every call. Frozen, so overrides always produce a new value.
DEFAULT_SETTINGS = Settings(l10n=L10n(type=DEFAULT_TYPE, shortcodes=tuple(DEFAULT_SHORTCODES)))

def resolve_type(*candidates: Any) -> Strategy:
    """First non-empty candidate decides; anything unrecognized means words."""
    for candidate in candidates:
        if candidate:
            for strategy in CHARACTER_STRATEGIES:
                if candidate == strategy.value:
                    return strategy
            return Strategy.WORDS
    return Strategy.WORDS

def parse_overrides(user_settings: Any) -> SettingsOverrides:
    """Validate caller overrides, dropping whatever cannot be used.

    Invalid fields are logged and discarded one by one so that the rest of the
    payload still applies.
    """
    if user_settings is None:
        return SettingsOverrides()
    if isinstance(user_settings, SettingsOverrides):
        return user_settings
    if not isinstance(user_settings, Mapping):
        logger.warning("Ignoring settings overrides that are not a mapping",
                       overrides_type=type(user_settings).__name__)
        return SettingsOverrides()

    payload: Dict[str, Any] = dict(user_settings)
    while True:
        try:
            return SettingsOverrides.model_validate(payload)
        except ValidationError as e:
            dropped = set()
            for error in e.errors():
                if error["loc"]:
                    dropped.update(key for key in _input_keys(error["loc"][0]) if key in payload)
            if not dropped:
                logger.warning("Ignoring settings overrides", errors=e.error_count())
                return SettingsOverrides()
            logger.warning("Dropping invalid settings overrides", fields=sorted(dropped))
            for key in dropped:
                del payload[key]

def _input_keys(loc: Any) -> Tuple[str, ...]:
    """Field name and alias for an error location."""
    for name, info in SettingsOverrides.model_fields.items():
        if loc in (name, info.alias):
            return tuple(key for key in (name, info.alias) if key)
    return (str(loc),)

def load_settings(type: Any = None, user_settings: Any = None) -> Settings:
    """Merge overrides onto the defaults and resolve the counting strategy.

    Args:
        type: Requested strategy; wins over any ``type`` in the overrides.
        user_settings: Mapping or ``SettingsOverrides`` with fields to replace.

    Returns:
        A new ``Settings``; ``DEFAULT_SETTINGS`` is left untouched.
    """
    overrides = parse_overrides(user_settings).explicit_fields()

    # l10n is replaced as a whole, never merged key by key
    l10n = DEFAULT_SETTINGS.l10n
    if "l10n" in overrides:
        l10n_override = overrides.pop("l10n")
        l10n = L10n(
            type=l10n_override.type if l10n_override else None,
            shortcodes=tuple(l10n_override.shortcodes) if l10n_override else (),
        )
    override_type = overrides.pop("type", None)

    settings = replace(DEFAULT_SETTINGS, l10n=l10n, **overrides)

    shortcodes = tuple(name for name in l10n.shortcodes if name)
    settings = replace(
        settings,
        type=resolve_type(type, override_type, l10n.type),
        shortcodes=shortcodes,
        shortcodes_regexp=patterns.build_shortcodes_regexp(shortcodes),
    )

    logger.debug("Settings resolved",
                 strategy=settings.type.value,
                 shortcodes=len(shortcodes),
                 overridden=sorted(overrides))
    return settings
