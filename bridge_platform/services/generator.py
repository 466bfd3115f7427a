"""Generation of the default, fully commented configuration document."""
from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from xml.sax.saxutils import quoteattr

from ..config import CONFIG_FILENAME, get_settings
from ..logging_config import get_logger
from ..models.configuration import DEFAULT_ABORT_ON_ERROR
from ..models.document import ELEMENTS, ROOT_ELEMENT, fields_for


logger = get_logger(__name__)

EXIT_FAILURE = 1


@dataclass(slots=True)
class GenerateResult:
    """Outcome of writing the default document."""

    path: Path
    bytes_written: int


def render_default_document() -> str:
    """Return the text of the default document."""

    lines = [
        '<?xml version="1.0" encoding="UTF-8" ?>',
        "",
        "<!-- Terracord configuration -->",
        f"<{ROOT_ELEMENT}>",
        "",
    ]
    for element in ELEMENTS:
        attributes = " ".join(
            f"{spec.attribute}={quoteattr(spec.default)}" for spec in fields_for(element.tag)
        )
        lines.append(f"  <!-- {element.comment} -->")
        lines.append(f"  <{element.tag} {attributes} />")
        lines.append("")
    lines.append(f"</{ROOT_ELEMENT}>")
    return "\n".join(lines) + "\n"


def generate_default_document(
    config_dir: Optional[Path] = None,
    *,
    abort_on_error: bool = DEFAULT_ABORT_ON_ERROR,
) -> GenerateResult:
    """Write the default document, replacing any existing file.

    Exits the process with :data:`EXIT_FAILURE` when the file cannot be written,
    and after a successful write when ``abort_on_error`` is set.
    """

    directory = config_dir if config_dir is not None else get_settings().config_dir
    path = directory / CONFIG_FILENAME
    try:
        directory.mkdir(parents=True, exist_ok=True)
        logger.info("Attempting to generate %s since the file did not exist...", path)
        content = render_default_document()
        with path.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(content)
    except OSError as exc:
        logger.critical("Unable to create %s: %s", path, exc)
        sys.exit(EXIT_FAILURE)

    logger.info("%s created successfully.", path)
    logger.warning("Please configure your bot token and channel ID before loading the bridge.")
    if abort_on_error:
        logger.error("Terminating because exception abort is enabled.")
        sys.exit(EXIT_FAILURE)
    return GenerateResult(path=path, bytes_written=len(content.encode("utf-8")))


__all__ = [
    "EXIT_FAILURE",
    "GenerateResult",
    "generate_default_document",
    "render_default_document",
]
