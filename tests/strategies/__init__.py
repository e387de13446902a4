"""Hypothesis strategies for transdex property-based testing.

Usage:
    from tests.strategies import locales, translation_keys, backend_contents
"""

from .translations import backend_contents, locales, translation_keys, translation_values

__all__ = [
    "backend_contents",
    "locales",
    "translation_keys",
    "translation_values",
]
