"""Configuration record, document layout and shared enumerations."""
from __future__ import annotations

from .configuration import Configuration, ConfigurationSeed
from .document import ELEMENTS, FIELDS, ROOT_ELEMENT, ElementSpec, FieldSpec
from .enums import ErrorKind, FieldKind, LoadStatus

__all__ = [
    "Configuration",
    "ConfigurationSeed",
    "ELEMENTS",
    "ElementSpec",
    "ErrorKind",
    "FIELDS",
    "FieldKind",
    "FieldSpec",
    "LoadStatus",
    "ROOT_ELEMENT",
]
