"""Locale-aware message formatting using Babel.

Applied by TranslationIndex to the resolved text and the caller's arguments.

Pattern syntax:
    Hello {0}                       positional argument
    Hello {name}                    keyword argument
    {total, number}                 number (also: number,integer / number,percent)
    {when, date, long}              date/time/datetime with short|medium|long|full
    {n, plural, =0 {none} one {# item} other {# items}}
                                    CLDR plural selection; '#' is the formatted number
    {{ and }}                       literal braces (outside plural blocks)

Numbers, dates and times passed to a bare placeholder are formatted with the
locale's CLDR conventions ("{0}" with 1234.5 renders "1,234.5" in en-US and
"1.234,5" in de-DE).

Failures (missing argument, unbalanced braces, malformed plural block, wrong
argument type) raise FormattingError; TranslationIndex recovers by returning
the unformatted text.

Python 3.13+. Depends on Babel for CLDR data.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from typing import TYPE_CHECKING, Protocol

from babel import dates as babel_dates
from babel import numbers as babel_numbers

from transdex.errors import FormattingError
from transdex.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from babel import Locale

    from transdex.types import LocaleCode

__all__ = [
    "Formatter",
    "MessageFormatter",
    "select_plural_category",
]

logger = logging.getLogger(__name__)

_DATE_STYLES = frozenset({"short", "medium", "long", "full"})


class Formatter(Protocol):
    """Protocol for formatting resolved translation text.

    Implementations raise FormattingError (or ValueError/TypeError) when the
    pattern and arguments are incompatible.
    """

    def format(
        self,
        locale: LocaleCode,
        pattern: str,
        args: Sequence[object],
        kwargs: Mapping[str, object],
    ) -> str:
        """Format pattern for locale with positional and keyword arguments."""


def select_plural_category(n: int | float | Decimal, locale: LocaleCode) -> str:
    """Select CLDR plural category for number using Babel's CLDR data.

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Examples:
        >>> select_plural_category(1, "en-US")
        'one'
        >>> select_plural_category(5, "ru-RU")
        'many'
        >>> select_plural_category(42, "ja-JP")
        'other'
    """
    return get_babel_locale(locale).plural_form(n)


# ---------------------------------------------------------------------------
# Pattern AST
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class _Text:
    text: str


@dataclass(frozen=True, slots=True)
class _Pound:
    """'#' inside a plural branch."""


@dataclass(frozen=True, slots=True)
class _Argument:
    name: str
    kind: str | None = None
    style: str | None = None


@dataclass(frozen=True, slots=True)
class _Plural:
    name: str
    branches: tuple[tuple[str, tuple[_Node, ...]], ...]


type _Node = _Text | _Pound | _Argument | _Plural


class _PatternParser:
    """Recursive-descent parser producing a tuple of pattern nodes."""

    __slots__ = ("_pattern", "_pos")

    def __init__(self, pattern: str) -> None:
        self._pattern = pattern
        self._pos = 0

    def _error(self, message: str) -> FormattingError:
        return FormattingError(f"{message} at position {self._pos}", self._pattern)

    def parse(self) -> tuple[_Node, ...]:
        nodes = self._parse_message(in_branch=False)
        if self._pos < len(self._pattern):
            raise self._error("Unexpected '}'")
        return nodes

    def _parse_message(self, *, in_branch: bool) -> tuple[_Node, ...]:
        pattern = self._pattern
        nodes: list[_Node] = []
        buffer: list[str] = []

        def flush() -> None:
            if buffer:
                nodes.append(_Text("".join(buffer)))
                buffer.clear()

        while self._pos < len(pattern):
            char = pattern[self._pos]
            if char == "{":
                if not in_branch and pattern.startswith("{{", self._pos):
                    buffer.append("{")
                    self._pos += 2
                    continue
                flush()
                self._pos += 1
                nodes.append(self._parse_placeholder())
            elif char == "}":
                if in_branch:
                    break
                if pattern.startswith("}}", self._pos):
                    buffer.append("}")
                    self._pos += 2
                    continue
                break
            elif char == "#" and in_branch:
                flush()
                nodes.append(_Pound())
                self._pos += 1
            else:
                buffer.append(char)
                self._pos += 1

        flush()
        return tuple(nodes)

    def _read_until(self, stops: str) -> str:
        start = self._pos
        while self._pos < len(self._pattern) and self._pattern[self._pos] not in stops:
            self._pos += 1
        if self._pos >= len(self._pattern):
            raise self._error("Unclosed placeholder")
        return self._pattern[start : self._pos].strip()

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._pattern) and self._pattern[self._pos].isspace():
            self._pos += 1

    def _expect(self, char: str) -> None:
        if self._pos >= len(self._pattern) or self._pattern[self._pos] != char:
            raise self._error(f"Expected '{char}'")
        self._pos += 1

    def _parse_placeholder(self) -> _Node:
        name = self._read_until(",}{")
        if not name:
            raise self._error("Empty placeholder")
        if self._pattern[self._pos] == "{":
            raise self._error("Unexpected '{' in placeholder")
        if self._pattern[self._pos] == "}":
            self._pos += 1
            return _Argument(name)

        self._pos += 1  # ","
        kind = self._read_until(",}{")
        if kind == "plural":
            self._expect(",")
            branches = self._parse_branches()
            self._expect("}")
            return _Plural(name, branches)
        if kind not in ("number", "date", "time", "datetime"):
            raise self._error(f"Unknown placeholder type '{kind}'")

        style: str | None = None
        if self._pattern[self._pos] == ",":
            self._pos += 1
            style = self._read_until("}{") or None
        self._expect("}")
        return _Argument(name, kind, style)

    def _parse_branches(self) -> tuple[tuple[str, tuple[_Node, ...]], ...]:
        branches: list[tuple[str, tuple[_Node, ...]]] = []
        while True:
            self._skip_whitespace()
            if self._pos >= len(self._pattern):
                raise self._error("Unclosed plural block")
            if self._pattern[self._pos] == "}":
                break
            selector = self._read_until("{} \t\n")
            self._skip_whitespace()
            self._expect("{")
            body = self._parse_message(in_branch=True)
            self._expect("}")
            branches.append((selector, body))
        if not branches:
            raise self._error("Plural block without branches")
        return tuple(branches)


@lru_cache(maxsize=512)
def _parse_pattern(pattern: str) -> tuple[_Node, ...]:
    return _PatternParser(pattern).parse()


# ---------------------------------------------------------------------------
# Formatter
# ---------------------------------------------------------------------------


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _is_finite(value: int | float | Decimal) -> bool:
    if isinstance(value, int):
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)


class MessageFormatter:
    """Default Formatter: placeholder substitution with CLDR-aware values.

    Stateless and thread-safe; parsed patterns are cached process-wide.

    Example:
        >>> formatter = MessageFormatter()
        >>> formatter.format("en-US", "Hello {0}", ("World",), {})
        'Hello World'
        >>> formatter.format("de-DE", "{n, plural, one {# Datei} other {# Dateien}}", (), {"n": 1200})
        '1.200 Dateien'
    """

    __slots__ = ()

    def format(
        self,
        locale: LocaleCode,
        pattern: str,
        args: Sequence[object],
        kwargs: Mapping[str, object],
    ) -> str:
        """Format pattern for locale.

        Raises:
            FormattingError: If the pattern is malformed or arguments don't fit
        """
        try:
            nodes = _parse_pattern(pattern)
        except RecursionError as e:
            msg = "Pattern nesting too deep"
            raise FormattingError(msg, pattern) from e
        babel_locale = get_babel_locale(locale)
        return self._render(nodes, pattern, locale, babel_locale, args, kwargs, None)

    def _render(
        self,
        nodes: tuple[_Node, ...],
        pattern: str,
        locale: LocaleCode,
        babel_locale: Locale,
        args: Sequence[object],
        kwargs: Mapping[str, object],
        pound: str | None,
    ) -> str:
        parts: list[str] = []
        for node in nodes:
            match node:
                case _Text(text=text):
                    parts.append(text)
                case _Pound():
                    parts.append(pound if pound is not None else "#")
                case _Argument(name=name, kind=kind, style=style):
                    value = self._lookup(name, pattern, args, kwargs)
                    parts.append(self._format_value(value, kind, style, pattern, babel_locale))
                case _Plural(name=name, branches=branches):
                    value = self._lookup(name, pattern, args, kwargs)
                    if not _is_number(value):
                        msg = f"Plural argument '{name}' must be a number, got {type(value).__name__}"
                        raise FormattingError(msg, pattern)
                    if not _is_finite(value):  # type: ignore[arg-type]
                        msg = f"Plural argument '{name}' must be finite, got {value!r}"
                        raise FormattingError(msg, pattern)
                    try:
                        body = self._select_branch(value, branches, pattern, locale)  # type: ignore[arg-type]
                        formatted = babel_numbers.format_decimal(value, locale=babel_locale)  # type: ignore[arg-type]
                    except (ArithmeticError, ValueError) as e:
                        msg = f"Cannot select plural form for {value!r}: {e}"
                        raise FormattingError(msg, pattern) from e
                    parts.append(
                        self._render(body, pattern, locale, babel_locale, args, kwargs, formatted)
                    )
        return "".join(parts)

    @staticmethod
    def _lookup(
        name: str, pattern: str, args: Sequence[object], kwargs: Mapping[str, object]
    ) -> object:
        if name.isdigit():
            index = int(name)
            if index >= len(args):
                msg = f"Missing positional argument {index} (got {len(args)})"
                raise FormattingError(msg, pattern)
            return args[index]
        if name not in kwargs:
            msg = f"Missing keyword argument '{name}'"
            raise FormattingError(msg, pattern)
        return kwargs[name]

    @staticmethod
    def _select_branch(
        value: int | float | Decimal,
        branches: tuple[tuple[str, tuple[_Node, ...]], ...],
        pattern: str,
        locale: LocaleCode,
    ) -> tuple[_Node, ...]:
        by_selector = dict(branches)
        for selector, body in branches:
            if not selector.startswith("="):
                continue
            try:
                exact = Decimal(selector[1:])
            except InvalidOperation as e:
                msg = f"Invalid exact selector '{selector}'"
                raise FormattingError(msg, pattern) from e
            if Decimal(str(value)) == exact:
                return body

        category = select_plural_category(value, locale)
        if category in by_selector:
            return by_selector[category]
        if "other" in by_selector:
            return by_selector["other"]
        msg = f"No plural branch for category '{category}' and no 'other' branch"
        raise FormattingError(msg, pattern)

    @staticmethod
    def _format_value(
        value: object,
        kind: str | None,
        style: str | None,
        pattern: str,
        babel_locale: Locale,
    ) -> str:
        try:
            match kind:
                case None:
                    if _is_number(value):
                        return babel_numbers.format_decimal(value, locale=babel_locale)  # type: ignore[arg-type]
                    if isinstance(value, datetime):
                        return babel_dates.format_datetime(value, locale=babel_locale)
                    if isinstance(value, date):
                        return babel_dates.format_date(value, locale=babel_locale)
                    if isinstance(value, time):
                        return babel_dates.format_time(value, locale=babel_locale)
                    return str(value)
                case "number":
                    if not _is_number(value):
                        msg = f"Expected a number, got {type(value).__name__}"
                        raise FormattingError(msg, pattern)
                    if style == "percent":
                        return babel_numbers.format_percent(value, locale=babel_locale)  # type: ignore[arg-type]
                    if style == "integer":
                        return babel_numbers.format_decimal(int(value), locale=babel_locale)  # type: ignore[arg-type]
                    if style is not None:
                        return babel_numbers.format_decimal(value, format=style, locale=babel_locale)  # type: ignore[arg-type]
                    return babel_numbers.format_decimal(value, locale=babel_locale)  # type: ignore[arg-type]
                case "date" | "time" | "datetime":
                    return _format_temporal(value, kind, style or "medium", pattern, babel_locale)
        except FormattingError:
            raise
        except (ArithmeticError, TypeError, ValueError, AttributeError) as e:
            msg = f"Cannot format {type(value).__name__} as {kind or 'text'}: {e}"
            raise FormattingError(msg, pattern) from e
        msg = f"Unknown placeholder type '{kind}'"
        raise FormattingError(msg, pattern)


def _format_temporal(
    value: object, kind: str, style: str, pattern: str, babel_locale: Locale
) -> str:
    if style not in _DATE_STYLES:
        logger.debug("Using custom %s pattern %r", kind, style)
    match kind:
        case "date" if isinstance(value, (date, datetime)):
            return babel_dates.format_date(value, format=style, locale=babel_locale)
        case "time" if isinstance(value, (time, datetime)):
            return babel_dates.format_time(value, format=style, locale=babel_locale)
        case "datetime" if isinstance(value, datetime):
            return babel_dates.format_datetime(value, format=style, locale=babel_locale)
    msg = f"Expected a {kind} value, got {type(value).__name__}"
    raise FormattingError(msg, pattern)
