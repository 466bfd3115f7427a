"""Error taxonomy for loading and generating the configuration document."""
from __future__ import annotations

from typing import ClassVar, Optional

from .models.enums import ErrorKind


class ConfigurationError(Exception):
    """Base class for every configuration failure."""

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str, *, element: Optional[str] = None, attribute: Optional[str] = None):
        super().__init__(message)
        self.element = element
        self.attribute = attribute

    @property
    def location(self) -> Optional[str]:
        """Return ``element/@attribute`` for field-level errors."""

        if self.element is None:
            return None
        if self.attribute is None:
            return self.element
        return f"{self.element}/@{self.attribute}"


class DocumentAbsent(ConfigurationError):
    kind = ErrorKind.DOCUMENT_ABSENT


class MalformedValue(ConfigurationError):
    kind = ErrorKind.MALFORMED_VALUE


class MalformedDocument(ConfigurationError):
    kind = ErrorKind.MALFORMED_DOCUMENT


class MissingField(ConfigurationError):
    kind = ErrorKind.MISSING_FIELD


class IOFailure(ConfigurationError):
    kind = ErrorKind.IO_FAILURE


class UnsupportedLocale(ConfigurationError):
    kind = ErrorKind.UNSUPPORTED_LOCALE


__all__ = [
    "ConfigurationError",
    "DocumentAbsent",
    "IOFailure",
    "MalformedDocument",
    "MalformedValue",
    "MissingField",
    "UnsupportedLocale",
]
