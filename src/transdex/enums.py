"""Enumerations for transdex type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class ResolutionSource(StrEnum):
    """Where translate() found the text it returned.

    StrEnum provides automatic string conversion: str(ResolutionSource.FALLBACK) == "fallback"
    """

    REQUESTED = "requested"
    """Stored under the requested locale."""

    FALLBACK = "fallback"
    """Stored under a locale from the fallback chain."""

    DEFAULT_LOCALE = "default_locale"
    """Stored under the index's default locale."""

    CREATED = "created"
    """Nothing stored anywhere; synthesized from the view's default value."""


__all__ = [
    "ResolutionSource",
]
