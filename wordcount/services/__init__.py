"""
Public counting services.

Provides:
- count: one strategy, one integer
- count_all: all three strategies at once
- normalize: the pipeline output for inspection
"""

from .count_service import count, count_all, normalize

__all__ = ["count", "count_all", "normalize"]
