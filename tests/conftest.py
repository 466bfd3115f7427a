"""Shared test fixtures."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Iterable, Mapping, Optional
from xml.sax.saxutils import quoteattr

import pytest

# Tests run from the repository root, but some environments do not put the
# current directory on ``sys.path``. Insert the repository root so that
# ``bridge_platform`` can be imported without an editable install.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from bridge_platform.config import CONFIG_FILENAME, get_settings  # noqa: E402
from bridge_platform.logging_config import apply_debug_mode, apply_timestamp_format  # noqa: E402
from bridge_platform.models.configuration import DEFAULT_TIMESTAMP_FORMAT  # noqa: E402
from bridge_platform.models.document import ELEMENTS, ROOT_ELEMENT, fields_for  # noqa: E402


DocumentWriter = Callable[..., Path]


def build_document(
    overrides: Optional[Mapping[tuple[str, str], str]] = None,
    omit: Iterable[tuple[str, Optional[str]]] = (),
) -> str:
    """Return a configuration document built from the defaults.

    ``omit`` holds ``(element, attribute)`` pairs; ``attribute=None`` drops the element.
    """

    overrides = dict(overrides or {})
    omitted = set(omit)
    lines = ['<?xml version="1.0" encoding="UTF-8" ?>', f"<{ROOT_ELEMENT}>"]
    for element in ELEMENTS:
        if (element.tag, None) in omitted:
            continue
        attributes = " ".join(
            f"{spec.attribute}={quoteattr(overrides.get((spec.element, spec.attribute), spec.default))}"
            for spec in fields_for(element.tag)
            if (spec.element, spec.attribute) not in omitted
        )
        lines.append(f"  <{element.tag} {attributes} />")
    lines.append(f"</{ROOT_ELEMENT}>")
    return "\n".join(lines) + "\n"


@pytest.fixture()
def config_dir(tmp_path: Path) -> Path:
    return tmp_path / "Terracord"


@pytest.fixture()
def write_document(config_dir: Path) -> DocumentWriter:
    def _write(
        overrides: Optional[Mapping[tuple[str, str], str]] = None,
        omit: Iterable[tuple[str, Optional[str]]] = (),
        *,
        text: Optional[str] = None,
    ) -> Path:
        config_dir.mkdir(parents=True, exist_ok=True)
        path = config_dir / CONFIG_FILENAME
        path.write_text(text if text is not None else build_document(overrides, omit), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
    apply_debug_mode(False)
    apply_timestamp_format(DEFAULT_TIMESTAMP_FORMAT)
