"""
Test suite for the word count library.

Provides:
- Pattern and stage unit tests
- Settings resolution tests
- End-to-end counting properties
- Observability tests
"""
