"""Pytest configuration for the transdex test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

from transdex import MemoryBackend, TranslationIndex

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def locales_dir(tmp_path: Path) -> Path:
    """Directory with two YAML translation files and a nested subdirectory."""
    (tmp_path / "en.yml").write_text(
        "en-US:\n"
        "  user:\n"
        "    name: Name\n"
        "    greet: Hello {0}\n"
        "  title: Title\n",
        encoding="utf-8",
    )
    (tmp_path / "lv.yaml").write_text(
        "lv:\n"
        "  user:\n"
        "    name: Vārds\n",
        encoding="utf-8",
    )
    nested = tmp_path / "admin"
    nested.mkdir()
    (nested / "de.yml").write_text(
        "de-DE:\n"
        "  admin:\n"
        "    title: Verwaltung\n",
        encoding="utf-8",
    )
    (tmp_path / "notes.txt").write_text("not: translations\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def memory_backend() -> MemoryBackend:
    """Writable backend with English, Latvian and German entries."""
    return MemoryBackend(
        {
            "en-US": {"hello": "Hello", "greet": "Hello {0}", "user": {"name": "Name"}},
            "lv": {"hello": "Sveiki"},
            "de-DE": {"hello": "Hallo", "only_de": "Nur Deutsch"},
        }
    )


@pytest.fixture
def index(memory_backend: MemoryBackend) -> TranslationIndex:
    """Index over the shared memory backend with default configuration."""
    return TranslationIndex(memory_backend)
