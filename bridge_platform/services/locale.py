"""Locale resolution and locale-aware conversion of document values.

The resolved locale is never installed process-wide. It is bound into a
:class:`LocaleContext` which is passed explicitly to every conversion.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from babel import Locale, UnknownLocaleError
from babel.numbers import format_decimal, get_minus_sign_symbol, get_plus_sign_symbol

from ..errors import MalformedValue, UnsupportedLocale
from ..models.configuration import DEFAULT_LOCALE_STRING
from ..models.document import INTEGER_BOUNDS
from ..models.enums import FieldKind


# language[-Script][-REGION], REGION being two letters or a three-digit area code.
_LOCALE_TAG = re.compile(
    r"(?P<language>[A-Za-z]{2,3})(?:[-_](?P<script>[A-Za-z]{4}))?(?:[-_](?P<territory>[A-Za-z]{2}|\d{3}))?"
)

_TRUE_LITERAL = "true"
_FALSE_LITERAL = "false"


def resolve_locale(identifier: str) -> Locale:
    """Resolve a ``language-REGION`` tag (``en-US`` or ``en_US``) to a babel locale."""

    if not isinstance(identifier, str):
        raise UnsupportedLocale(f"Locale identifier must be text, got {type(identifier).__name__}")
    match = _LOCALE_TAG.fullmatch(identifier.strip())
    if match is None:
        raise UnsupportedLocale(f"Unsupported locale '{identifier}': not a language-REGION tag")
    normalized = match.group(0).replace("-", "_")
    try:
        locale = Locale.parse(normalized)
    except (UnknownLocaleError, ValueError) as exc:
        raise UnsupportedLocale(f"Unsupported locale '{identifier}': {exc}") from exc

    # Locale.parse falls back through aliases and likely subtags; the result must keep the tag's parts.
    language, script, territory = match.group("language", "script", "territory")
    if (
        locale.language != language.lower()
        or (script is not None and (locale.script or "").lower() != script.lower())
        or (territory is not None and (locale.territory or "").upper() != territory.upper())
    ):
        raise UnsupportedLocale(f"Unsupported locale '{identifier}': resolves to {locale_tag(locale)}")
    return locale


def locale_tag(locale: Locale) -> str:
    return str(locale).replace("_", "-")


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Conversion rules bound to a single resolved locale."""

    locale: Locale

    @property
    def tag(self) -> str:
        return locale_tag(self.locale)

    def _signs(self) -> tuple[tuple[str, ...], tuple[str, ...]]:
        minus = get_minus_sign_symbol(self.locale)
        plus = get_plus_sign_symbol(self.locale)
        return (
            tuple(sorted({"-", minus}, key=len, reverse=True)),
            tuple(sorted({"+", plus}, key=len, reverse=True)),
        )

    def parse_integer(self, text: str, *, minimum: int, maximum: int) -> int:
        """Parse a plain integer: optional sign, ASCII digits, no separators."""

        candidate = text.strip()
        negative_signs, positive_signs = self._signs()
        sign = 1
        for symbol in negative_signs:
            if candidate.startswith(symbol):
                sign = -1
                candidate = candidate[len(symbol):]
                break
        else:
            for symbol in positive_signs:
                if candidate.startswith(symbol):
                    candidate = candidate[len(symbol):]
                    break

        if not candidate or not (candidate.isascii() and candidate.isdigit()):
            raise MalformedValue(f"'{text}' is not a valid integer for locale {self.tag}")

        value = sign * int(candidate)
        if not minimum <= value <= maximum:
            raise MalformedValue(f"'{text}' is outside the range [{minimum}, {maximum}]")
        return value

    def parse_boolean(self, text: str) -> bool:
        normalized = text.strip().casefold()
        if normalized == _TRUE_LITERAL:
            return True
        if normalized == _FALSE_LITERAL:
            return False
        raise MalformedValue(f"'{text}' is not a valid boolean (expected true or false)")

    def parse_character(self, text: str) -> str:
        if len(text) != 1:
            raise MalformedValue(f"'{text}' must be exactly one character")
        return text

    def convert(self, kind: FieldKind, text: str) -> Any:
        """Convert raw attribute text according to the field kind."""

        if kind is FieldKind.TEXT:
            return text
        if kind is FieldKind.CHARACTER:
            return self.parse_character(text)
        if kind is FieldKind.BOOLEAN:
            return self.parse_boolean(text)
        minimum, maximum = INTEGER_BOUNDS[kind]
        return self.parse_integer(text, minimum=minimum, maximum=maximum)

    def format_integer(self, value: int) -> str:
        return format_decimal(value, locale=self.locale, group_separator=False)

    @staticmethod
    def format_boolean(value: bool) -> str:
        return "True" if value else "False"


def activate_locale(locale: Locale | str) -> LocaleContext:
    """Bind ``locale`` into a conversion context for the current load cycle."""

    if isinstance(locale, str):
        locale = resolve_locale(locale)
    return LocaleContext(locale)


@lru_cache(maxsize=1)
def default_context() -> LocaleContext:
    """Fallback context used before any document has been read."""

    return activate_locale(DEFAULT_LOCALE_STRING)


__all__ = [
    "LocaleContext",
    "activate_locale",
    "default_context",
    "locale_tag",
    "resolve_locale",
]
