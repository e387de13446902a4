"""Tests for YamlBackend file discovery, parsing and read-only behavior."""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path

import pytest

from transdex import (
    BackendNotWritableError,
    Translation,
    TranslationLoadError,
    YamlBackend,
    load_yaml_content,
)


def _triples(translations: list[Translation]) -> list[tuple[str, str, str]]:
    return [(t.locale, t.key, t.value) for t in translations]


class TestLoadYamlContent:
    """Parsing of a single YAML document."""

    def test_nested_keys_flattened(self) -> None:
        content = "en:\n  user:\n    name: Name\n    profile:\n      bio: Bio\n"
        assert _triples(load_yaml_content(content)) == [
            ("en", "user.name", "Name"),
            ("en", "user.profile.bio", "Bio"),
        ]

    def test_multiple_locales_in_document_order(self) -> None:
        content = "lv:\n  hi: Sveiki\nen:\n  hi: Hi\n"
        assert [t.locale for t in load_yaml_content(content)] == ["lv", "en"]

    def test_bytes_input(self) -> None:
        content = "de:\n  hi: Grüß Gott\n".encode()
        assert _triples(load_yaml_content(content)) == [("de", "hi", "Grüß Gott")]

    def test_scalar_leaves_stringified(self) -> None:
        content = "en:\n  count: 3\n  ratio: 0.5\n  enabled: true\n  missing: null\n"
        assert {t.key: t.value for t in load_yaml_content(content)} == {
            "count": "3",
            "ratio": "0.5",
            "enabled": "true",
            "missing": "",
        }

    def test_sequence_leaf_stringified(self) -> None:
        [translation] = load_yaml_content("en:\n  days: [Mon, Tue]\n")
        assert translation.value == "['Mon', 'Tue']"

    def test_empty_document(self) -> None:
        assert load_yaml_content("") == []

    def test_malformed_yaml_raises(self) -> None:
        with pytest.raises(TranslationLoadError, match="invalid YAML"):
            load_yaml_content("en: [unclosed", source="broken.yml")

    def test_error_carries_source(self) -> None:
        with pytest.raises(TranslationLoadError) as exc_info:
            load_yaml_content("en: [unclosed", source="broken.yml")
        assert exc_info.value.source == "broken.yml"
        assert str(exc_info.value).startswith("broken.yml: ")

    def test_non_mapping_top_level_raises(self) -> None:
        with pytest.raises(TranslationLoadError, match="mapping of locales"):
            load_yaml_content("- en\n- lv\n")


class TestYamlBackendPaths:
    """File and directory discovery."""

    def test_directory_scan_is_not_recursive(self, locales_dir: Path) -> None:
        backend = YamlBackend(locales_dir)
        locales = {t.locale for t in backend.load_translations()}
        assert locales == {"en-US", "lv"}

    def test_directory_scan_reads_yaml_before_yml(self, locales_dir: Path) -> None:
        backend = YamlBackend(locales_dir)
        assert [Path(s).name for s in backend.sources] == ["lv.yaml", "en.yml"]

    def test_single_file(self, locales_dir: Path) -> None:
        backend = YamlBackend(locales_dir / "en.yml")
        assert _triples(backend.load_translations()) == [
            ("en-US", "user.name", "Name"),
            ("en-US", "user.greet", "Hello {0}"),
            ("en-US", "title", "Title"),
        ]

    def test_multiple_paths(self, locales_dir: Path) -> None:
        backend = YamlBackend(locales_dir / "en.yml", locales_dir / "admin")
        assert {t.locale for t in backend.load_translations()} == {"en-US", "de-DE"}

    def test_missing_path_skipped_with_warning(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="transdex.backends.yaml"):
            backend = YamlBackend(tmp_path / "nowhere")
        assert backend.load_translations() == []
        assert "Translation path not found" in caplog.text

    def test_unreadable_file_skipped(
        self, locales_dir: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        def deny(self: Path) -> bytes:
            raise PermissionError(13, "Permission denied", str(self))

        monkeypatch.setattr(Path, "read_bytes", deny)
        with caplog.at_level(logging.WARNING, logger="transdex.backends.yaml"):
            backend = YamlBackend(locales_dir)
        assert backend.sources == ()
        assert "Skipping unreadable translation file" in caplog.text

    def test_translations_reference_backend(self, locales_dir: Path) -> None:
        backend = YamlBackend(locales_dir)
        assert all(t.backend is backend for t in backend.load_translations())

    def test_parse_error_raised_from_load(self, tmp_path: Path) -> None:
        (tmp_path / "good.yml").write_text("en:\n  ok: OK\n", encoding="utf-8")
        (tmp_path / "bad.yml").write_text("en: [unclosed\n", encoding="utf-8")
        backend = YamlBackend(tmp_path)
        with pytest.raises(TranslationLoadError, match="bad.yml"):
            backend.load_translations()


class TestYamlBackendWalk:
    """Recursive discovery."""

    def test_walk_includes_nested(self, locales_dir: Path) -> None:
        backend = YamlBackend.from_walk(locales_dir)
        assert {t.locale for t in backend.load_translations()} == {"en-US", "lv", "de-DE"}

    def test_walk_ignores_other_suffixes(self, locales_dir: Path) -> None:
        backend = YamlBackend.from_walk(locales_dir)
        assert not any(s.endswith(".txt") for s in backend.sources)

    def test_walk_accepts_single_file(self, locales_dir: Path) -> None:
        backend = YamlBackend.from_walk(locales_dir / "lv.yaml")
        assert _triples(backend.load_translations()) == [("lv", "user.name", "Vārds")]

    def test_walk_skips_non_yaml_file(self, locales_dir: Path) -> None:
        assert YamlBackend.from_walk(locales_dir / "notes.txt").sources == ()


class TestYamlBackendResources:
    """importlib.resources traversables: directories and zip archives."""

    def test_path_traversable(self, locales_dir: Path) -> None:
        backend = YamlBackend.from_resources(locales_dir)
        assert {t.locale for t in backend.load_translations()} == {"en-US", "lv", "de-DE"}
        assert backend.sources[0] == f"{locales_dir.name}/admin/de.yml"

    def test_zip_archive(self, tmp_path: Path) -> None:
        archive = tmp_path / "bundle.zip"
        with zipfile.ZipFile(archive, "w") as zf:
            zf.writestr("locales/en.yml", "en:\n  app:\n    title: Packaged\n")
            zf.writestr("locales/nested/fr.yaml", "fr:\n  app:\n    title: Emballé\n")
            zf.writestr("locales/README.md", "# not translations\n")

        backend = YamlBackend.from_resources(zipfile.Path(archive, "locales/"))
        assert sorted(_triples(backend.load_translations())) == [
            ("en", "app.title", "Packaged"),
            ("fr", "app.title", "Emballé"),
        ]


class TestYamlBackendStrings:
    def test_from_strings(self) -> None:
        backend = YamlBackend.from_strings("en:\n  a: A\n", b"lv:\n  a: \xc4\x80\n")
        assert _triples(backend.load_translations()) == [("en", "a", "A"), ("lv", "a", "Ā")]
        assert backend.sources == ("<document 0>", "<document 1>")


class TestYamlBackendReadOnly:
    def test_save_not_implemented(self) -> None:
        with pytest.raises(BackendNotWritableError, match="not implemented"):
            YamlBackend().save_translation(Translation("en", "k", "v"))

    def test_delete_not_implemented(self) -> None:
        with pytest.raises(BackendNotWritableError, match="not implemented"):
            YamlBackend().delete_translation(Translation("en", "k"))
