"""Service layer initialisation."""

from . import generator, loader, locale, presenter

__all__ = [
    "generator",
    "loader",
    "locale",
    "presenter",
]
