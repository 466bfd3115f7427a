"""Logging setup shared by the loader, the generator and the operator scripts."""
from __future__ import annotations

import logging
import re
from logging import Logger
from typing import Optional

from pydantic import ValidationError

from .config import get_settings
from .models.configuration import DEFAULT_TIMESTAMP_FORMAT


_CONFIGURED = False
_HANDLERS: list[logging.Handler] = []
_DATE_FORMAT = ""

PACKAGE_LOGGER = "bridge_platform"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Custom date/time specifiers of the persisted timestamp format and their strftime equivalents.
_TIMESTAMP_TOKENS = {
    "yyyy": "%Y",
    "yy": "%y",
    "MMMM": "%B",
    "MMM": "%b",
    "MM": "%m",
    "M": "%m",
    "dddd": "%A",
    "ddd": "%a",
    "dd": "%d",
    "d": "%d",
    "HH": "%H",
    "H": "%H",
    "hh": "%I",
    "h": "%I",
    "mm": "%M",
    "m": "%M",
    "ss": "%S",
    "s": "%S",
    "tt": "%p",
    "zzz": "%z",
    "zz": "%z",
    "z": "%z",
}
_TIMESTAMP_PATTERN = re.compile(
    "|".join(sorted(_TIMESTAMP_TOKENS, key=len, reverse=True)) + r"|'[^']*'|%"
)


def translate_timestamp_format(timestamp_format: str) -> str:
    """Convert a ``MM/dd/yyyy HH:mm:ss zzz`` style pattern into a strftime pattern."""

    def _replace(match: re.Match[str]) -> str:
        token = match.group(0)
        if token == "%":
            return "%%"
        if token.startswith("'"):
            return token[1:-1].replace("%", "%%")
        return _TIMESTAMP_TOKENS[token]

    return _TIMESTAMP_PATTERN.sub(_replace, timestamp_format)


def _resolve_level(level_name: str) -> int:
    """Return the numeric logging level for the given name."""

    normalized = level_name.strip().upper()
    level = getattr(logging, normalized, None)
    if isinstance(level, int):
        return level
    return logging.INFO


def setup_logging(*, force: bool = False, timestamp_format: Optional[str] = None) -> None:
    """Configure console logging.

    ``timestamp_format`` defaults to the seeded format so records emitted before the
    configuration document is read (including load failures) are stamped the same way.
    """

    global _CONFIGURED
    if _CONFIGURED and not force:
        return

    level_name = "INFO"
    error: Exception | None = None
    try:
        settings = get_settings()
    except (ValidationError, RuntimeError, ValueError) as exc:
        error = exc
    else:
        level_name = settings.log_level

    level = _resolve_level(level_name)

    root = logging.getLogger()
    existing = list(root.handlers)
    logging.basicConfig(level=level, format=LOG_FORMAT, force=force)
    # Only handlers installed here follow the configured timestamp format.
    _HANDLERS[:] = [handler for handler in root.handlers if handler not in existing]
    apply_timestamp_format(timestamp_format or DEFAULT_TIMESTAMP_FORMAT)

    if error is not None:
        logging.getLogger(__name__).warning(
            "Unable to read logging settings, falling back to level %s (%s)",
            level_name,
            error,
        )

    _CONFIGURED = True


def apply_timestamp_format(timestamp_format: str) -> str:
    """Stamp records from the bridge handlers with ``timestamp_format`` and return the strftime pattern."""

    global _DATE_FORMAT
    _DATE_FORMAT = translate_timestamp_format(timestamp_format)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=_DATE_FORMAT)
    for handler in _HANDLERS:
        handler.setFormatter(formatter)
    return _DATE_FORMAT


def current_date_format() -> str:
    return _DATE_FORMAT


def apply_debug_mode(enabled: bool) -> None:
    """Let DEBUG records of the bridge through regardless of ``LOG_LEVEL``.

    Disabling restores the level inherited from the root logger.
    """

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG if enabled else logging.NOTSET)
    if enabled:
        for handler in _HANDLERS:
            if handler.level > logging.DEBUG:
                handler.setLevel(logging.DEBUG)


def get_logger(name: Optional[str] = None) -> Logger:
    """Return a logger, configuring logging on first use."""

    setup_logging()
    return logging.getLogger(name)


__all__ = [
    "PACKAGE_LOGGER",
    "apply_debug_mode",
    "apply_timestamp_format",
    "current_date_format",
    "get_logger",
    "setup_logging",
    "translate_timestamp_format",
]
