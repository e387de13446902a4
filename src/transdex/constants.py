"""Shared constants for transdex.

Constants are grouped by domain:
- Locale defaults: process-wide default locale and its environment override
- Key scheme: separators used to build cache keys and scoped keys
- File discovery: suffixes recognized by the YAML backend

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    "DEFAULT_LOCALE_ENV_VAR",
    # Key scheme
    "CACHE_KEY_SEPARATOR",
    "SCOPE_SEPARATOR",
    # File discovery
    "YAML_SUFFIXES",
    # Failure messages
    "SAVE_FAILED_MESSAGE",
    "NOT_IMPLEMENTED_MESSAGE",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale probed last on every lookup and substituted for empty locale codes.
# Override per index via IndexConfig(default_locale=...), or process-wide via
# the TRANSDEX_DEFAULT_LOCALE environment variable and IndexConfig.from_env().
DEFAULT_LOCALE: str = "en-US"

DEFAULT_LOCALE_ENV_VAR: str = "TRANSDEX_DEFAULT_LOCALE"

# ============================================================================
# KEY SCHEME
# ============================================================================

# Cache key = locale + CACHE_KEY_SEPARATOR + key ("en-US/user.profile.name").
# Locale codes never contain "/", so the first separator splits unambiguously.
CACHE_KEY_SEPARATOR: str = "/"

# Joins scope segments and nested YAML mapping keys ("user" + "name" -> "user.name").
SCOPE_SEPARATOR: str = "."

# ============================================================================
# FILE DISCOVERY
# ============================================================================

# Directory scans collect *.yaml before *.yml, matching glob order per suffix.
YAML_SUFFIXES: tuple[str, ...] = (".yaml", ".yml")

# ============================================================================
# FAILURE MESSAGES
# ============================================================================

SAVE_FAILED_MESSAGE: str = "failed to save translation"

NOT_IMPLEMENTED_MESSAGE: str = "not implemented"
