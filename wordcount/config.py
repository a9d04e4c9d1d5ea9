from __future__ import annotations
import os

# Locale defaults (merged under any caller-supplied l10n payload)
DEFAULT_TYPE: str = os.getenv("WORDCOUNT_DEFAULT_TYPE", "words").lower()
DEFAULT_SHORTCODES: list[str] = [
    name.strip()
    for name in os.getenv("WORDCOUNT_SHORTCODES", "").split(",")
    if name.strip()
]

# Logging Configuration
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_STRUCTURED: bool = os.getenv("LOG_STRUCTURED", "true").lower() == "true"

# Metrics Configuration
METRICS_ENABLED: bool = os.getenv("METRICS_ENABLED", "true").lower() == "true"
