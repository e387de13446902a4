"""Read-only YAML backend.

Reads translation documents whose top-level keys are locale codes and whose
nested mappings flatten into dot-separated keys:

    en-US:
      user:
        name: Name        ->  Translation("en-US", "user.name", "Name")

File contents are read eagerly at construction; unreadable files are logged
and skipped. Parsing happens in load_translations(), where a malformed
document raises TranslationLoadError and none of the backend's translations
are returned.

Constructors:
    YamlBackend(*paths)              - files, or directories scanned one level deep
    YamlBackend.from_walk(*paths)    - directories scanned recursively
    YamlBackend.from_resources(*roots) - importlib.resources traversables
                                       (packaged assets, zip archives, custom
                                       virtual filesystems)

Python 3.13+. Depends on PyYAML.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from importlib.resources.abc import Traversable
from os import PathLike
from pathlib import Path

import yaml

from transdex.constants import YAML_SUFFIXES
from transdex.errors import BackendNotWritableError, TranslationLoadError
from transdex.translation import Translation, flatten_translations, stringify_value

__all__ = ["YamlBackend", "load_yaml_content"]

logger = logging.getLogger(__name__)

type StrPath = str | PathLike[str]


def _is_yaml_name(name: str) -> bool:
    return name.endswith(YAML_SUFFIXES)


def load_yaml_content(
    content: bytes | str,
    backend: YamlBackend | None = None,
    source: str | None = None,
) -> list[Translation]:
    """Parse one YAML translation document.

    Args:
        content: Raw YAML document
        backend: Backend recorded on every produced translation
        source: Path or description used in error messages

    Returns:
        Translations in document order. An empty document yields [].

    Raises:
        TranslationLoadError: If the YAML is malformed or its top level is not
            a mapping of locale codes

    Example:
        >>> [(t.locale, t.key, t.value) for t in load_yaml_content("en: {hi: Hello}")]
        [('en', 'hi', 'Hello')]
    """
    try:
        document = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise TranslationLoadError(f"invalid YAML: {e}", source=source) from e

    if document is None:
        return []
    if not isinstance(document, Mapping):
        msg = f"top level must be a mapping of locales, got {type(document).__name__}"
        raise TranslationLoadError(msg, source=source)

    translations: list[Translation] = []
    for locale, tree in document.items():
        translations.extend(flatten_translations(stringify_value(locale), tree, (), backend))
    return translations


class YamlBackend:
    """Backend serving translations from YAML documents.

    Read-only: save_translation() and delete_translation() raise
    BackendNotWritableError.

    Example:
        >>> backend = YamlBackend("config/locales")
        >>> index = TranslationIndex(backend)
    """

    __slots__ = ("_contents",)

    def __init__(self, *paths: StrPath) -> None:
        """Read YAML files from paths.

        Each path is either a regular file (read regardless of suffix) or a
        directory whose immediate ``*.yaml`` then ``*.yml`` children are read.
        Missing paths and unreadable files are skipped with a warning.
        """
        self._contents: list[tuple[str, bytes]] = []
        for raw_path in paths:
            path = Path(raw_path)
            if path.is_dir():
                for suffix in YAML_SUFFIXES:
                    for file_path in sorted(path.glob(f"*{suffix}")):
                        if file_path.is_file():
                            self._read_file(file_path)
            elif path.is_file():
                self._read_file(path)
            else:
                logger.warning("Translation path not found: %s", path)

    @classmethod
    def from_walk(cls, *paths: StrPath) -> YamlBackend:
        """Read every ``*.yaml``/``*.yml`` file found recursively under paths."""
        backend = cls()
        for raw_path in paths:
            path = Path(raw_path)
            if path.is_file():
                if _is_yaml_name(path.name):
                    backend._read_file(path)
                continue
            if not path.is_dir():
                logger.warning("Translation path not found: %s", path)
                continue
            for file_path in sorted(path.rglob("*")):
                if file_path.is_file() and _is_yaml_name(file_path.name):
                    backend._read_file(file_path)
        return backend

    @classmethod
    def from_resources(cls, *roots: Traversable) -> YamlBackend:
        """Read YAML files from importlib.resources traversables.

        Each root is walked recursively. Works with package data
        (``importlib.resources.files("myapp") / "locales"``), zip archives
        (``zipfile.Path``) and any other Traversable implementation.
        """
        backend = cls()
        for root in roots:
            for source, entry in _walk_traversable(root, root.name):
                try:
                    backend._contents.append((source, entry.read_bytes()))
                except OSError as e:
                    logger.warning("Skipping unreadable translation resource %s: %s", source, e)
        return backend

    @classmethod
    def from_strings(cls, *documents: bytes | str) -> YamlBackend:
        """Build a backend from in-memory YAML documents."""
        backend = cls()
        for position, document in enumerate(documents):
            content = document.encode("utf-8") if isinstance(document, str) else document
            backend._contents.append((f"<document {position}>", content))
        return backend

    def _read_file(self, path: Path) -> None:
        try:
            self._contents.append((str(path), path.read_bytes()))
        except OSError as e:
            logger.warning("Skipping unreadable translation file %s: %s", path, e)

    def __repr__(self) -> str:
        return f"YamlBackend(sources={len(self._contents)})"

    @property
    def sources(self) -> tuple[str, ...]:
        """Descriptions of every document read, in load order."""
        return tuple(source for source, _ in self._contents)

    def load_translations(self) -> list[Translation]:
        """Parse every document read at construction.

        Raises:
            TranslationLoadError: If any document fails to parse
        """
        translations: list[Translation] = []
        for source, content in self._contents:
            translations.extend(load_yaml_content(content, backend=self, source=source))
        return translations

    def save_translation(self, translation: Translation) -> None:
        """Not implemented: YAML backends are read-only."""
        raise BackendNotWritableError

    def delete_translation(self, translation: Translation) -> None:
        """Not implemented: YAML backends are read-only."""
        raise BackendNotWritableError


def _walk_traversable(entry: Traversable, source: str) -> Iterator[tuple[str, Traversable]]:
    """Yield (source, file) pairs for YAML files under entry, depth-first by name."""
    if entry.is_file():
        if _is_yaml_name(entry.name):
            yield source, entry
        return
    if not entry.is_dir():
        return
    try:
        children = sorted(entry.iterdir(), key=lambda child: child.name)
    except OSError as e:
        logger.warning("Skipping unreadable translation directory %s: %s", source, e)
        return
    for child in children:
        yield from _walk_traversable(child, f"{source}/{child.name}")
