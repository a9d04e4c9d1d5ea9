from __future__ import annotations
from re import Pattern
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

class L10nOverrides(BaseModel):
    """Locale payload: known shortcodes and the fallback counting type."""
    model_config = ConfigDict(extra="ignore")

    shortcodes: List[str] = Field(default_factory=list)
    type: Optional[str] = None

class SettingsOverrides(BaseModel):
    """Caller-supplied settings merged over the defaults, field by field.

    Unknown keys are ignored. Regex fields take a pattern string or a compiled
    pattern; an explicit ``None`` turns the matching stage off. Each field also
    accepts the camelCase key used by the JavaScript settings object.
    """
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: Optional[str] = None
    l10n: Optional[L10nOverrides] = None

    html_regexp: Optional[Pattern[str]] = Field(None, alias="HTMLRegExp")
    html_comment_regexp: Optional[Pattern[str]] = Field(None, alias="HTMLcommentRegExp")
    space_regexp: Optional[Pattern[str]] = Field(None, alias="spaceRegExp")
    html_entity_regexp: Optional[Pattern[str]] = Field(None, alias="HTMLEntityRegExp")
    connector_regexp: Optional[Pattern[str]] = Field(None, alias="connectorRegExp")
    remove_regexp: Optional[Pattern[str]] = Field(None, alias="removeRegExp")
    astral_regexp: Optional[Pattern[str]] = Field(None, alias="astralRegExp")
    words_regexp: Optional[Pattern[str]] = Field(None, alias="wordsRegExp")
    characters_excluding_spaces_regexp: Optional[Pattern[str]] = Field(
        None, alias="characters_excluding_spacesRegExp"
    )
    characters_including_spaces_regexp: Optional[Pattern[str]] = Field(
        None, alias="characters_including_spacesRegExp"
    )

    def explicit_fields(self) -> dict:
        """Only the fields the caller actually supplied, keyed by field name."""
        return {name: getattr(self, name) for name in self.model_fields_set}

class CountResult(BaseModel):
    """All three counts for one piece of text."""
    words: int = 0
    characters_excluding_spaces: int = 0
    characters_including_spaces: int = 0
