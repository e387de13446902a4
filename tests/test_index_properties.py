"""Property-based tests for TranslationIndex lookup and auto-create."""

from __future__ import annotations

from hypothesis import event, given
from hypothesis import strategies as st

from transdex import MemoryBackend, MemoryCacheStore, TranslationIndex

from tests.strategies import backend_contents, locales, translation_keys, translation_values


class TestBackendPriority:
    @given(first=backend_contents(), second=backend_contents())
    def test_first_backend_wins(
        self, first: dict[str, dict[str, str]], second: dict[str, dict[str, str]]
    ) -> None:
        """Every (locale, key) resolves to the first backend that defines it."""
        index = TranslationIndex(MemoryBackend(first), MemoryBackend(second))

        for locale, entries in second.items():
            for key, value in entries.items():
                expected = first.get(locale, {}).get(key, value)
                entry = index.get_translation(locale, key)
                assert entry is not None
                assert entry.value == expected

    @given(contents=backend_contents())
    def test_every_loaded_value_is_returned(self, contents: dict[str, dict[str, str]]) -> None:
        index = TranslationIndex(MemoryBackend(contents))
        for locale, entries in contents.items():
            for key, value in entries.items():
                assert index.translate(locale, key) == value


class TestMissingKeys:
    @given(locale=locales, key=translation_keys())
    def test_miss_returns_key(self, locale: str, key: str) -> None:
        index = TranslationIndex(MemoryBackend())
        assert index.translate(locale, key) == key

    @given(locale=locales, key=translation_keys(), default=translation_values)
    def test_miss_returns_default(self, locale: str, key: str, default: str) -> None:
        index = TranslationIndex(MemoryBackend())
        assert index.default(default).translate(locale, key) == default

    @given(
        locale=locales,
        key=translation_keys(),
        default=st.one_of(st.just(""), translation_values),
        repeats=st.integers(min_value=2, max_value=5),
    )
    def test_repeated_miss_is_idempotent(
        self, locale: str, key: str, default: str, repeats: int
    ) -> None:
        """After the first miss, further identical calls write nothing."""
        event(f"default={'empty' if not default else 'text'}")
        store = MemoryCacheStore()
        backend = MemoryBackend()
        index = TranslationIndex(backend, cache_store=store)
        view = index.default(default)

        first = view.translate(locale, key)
        writes = store.writes
        for _ in range(repeats - 1):
            assert view.translate(locale, key) == first
        assert store.writes == writes
        assert backend.get(locale, key) == default


class TestFallbackOrder:
    @given(
        chain=st.lists(locales, min_size=1, max_size=4, unique=True),
        key=translation_keys(),
        value=translation_values,
    )
    def test_first_fallback_holding_value_wins(
        self, chain: list[str], key: str, value: str
    ) -> None:
        requested, *fallbacks = ["xx", *chain]
        holder = fallbacks[-1]
        contents = {holder: {key: value}}
        index = TranslationIndex(MemoryBackend(contents))

        assert index.fallbacks(*fallbacks).translate(requested, key) == value
