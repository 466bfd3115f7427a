"""Enumerations shared by the configuration models and services."""
from __future__ import annotations

import enum


class ErrorKind(enum.StrEnum):
    DOCUMENT_ABSENT = "document_absent"
    MALFORMED_VALUE = "malformed_value"
    MALFORMED_DOCUMENT = "malformed_document"
    MISSING_FIELD = "missing_field"
    IO_FAILURE = "io_failure"
    UNSUPPORTED_LOCALE = "unsupported_locale"


class LoadStatus(enum.StrEnum):
    LOADED = "loaded"
    DEFAULTS_GENERATED = "defaults_generated"
    FATAL = "fatal"


class FieldKind(enum.StrEnum):
    TEXT = "text"
    CHARACTER = "character"
    BOOLEAN = "boolean"
    BYTE = "byte"
    INT32 = "int32"
    UINT32 = "uint32"
    UINT64 = "uint64"


__all__ = [
    "ErrorKind",
    "FieldKind",
    "LoadStatus",
]
