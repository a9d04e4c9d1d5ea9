"""
Data models and schemas.

Provides:
- Pydantic models for caller-supplied settings overrides
- Count result model
"""

from .schemas import L10nOverrides, SettingsOverrides, CountResult

__all__ = ["L10nOverrides", "SettingsOverrides", "CountResult"]
