"""Locale utilities for BCP-47 to POSIX conversion.

Translation keys are cached under the locale code exactly as callers spell it;
normalization here only serves Babel lookups for formatting and plural rules.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from babel import Locale
from babel.core import UnknownLocaleError

if TYPE_CHECKING:
    from transdex.types import LocaleCode

__all__ = [
    "FALLBACK_BABEL_LOCALE",
    "get_babel_locale",
    "normalize_locale",
]

logger = logging.getLogger(__name__)

FALLBACK_BABEL_LOCALE = "en_US"


def normalize_locale(locale_code: LocaleCode) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: LocaleCode) -> Locale:
    """Get a Babel Locale object with caching, falling back to en_US.

    Unknown or malformed locale codes log a warning and resolve to en_US so
    that formatting never fails because of the locale alone.

    Thread-safe via lru_cache internal locking.

    Example:
        >>> get_babel_locale("de-DE").territory
        'DE'
        >>> str(get_babel_locale("xx-UNKNOWN"))
        'en_US'
    """
    try:
        return Locale.parse(normalize_locale(locale_code))
    except UnknownLocaleError as e:
        logger.warning("Unknown locale '%s': %s. Falling back to en_US", locale_code, e)
    except (ValueError, TypeError) as e:
        logger.warning("Invalid locale format '%s': %s. Falling back to en_US", locale_code, e)
    return Locale.parse(FALLBACK_BABEL_LOCALE)
