"""Loading of the persisted configuration document."""
from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from ..config import CONFIG_FILENAME, get_settings
from ..errors import (
    ConfigurationError,
    DocumentAbsent,
    IOFailure,
    MalformedDocument,
    MalformedValue,
    MissingField,
)
from ..logging_config import apply_debug_mode, apply_timestamp_format, get_logger
from ..models.configuration import Configuration, ConfigurationSeed
from ..models.document import BROADCAST_CHANNELS, FIELDS, ROOT_ELEMENT, FieldSpec
from ..models.enums import ErrorKind, LoadStatus
from .generator import GenerateResult, generate_default_document
from .locale import LocaleContext, activate_locale, default_context, resolve_locale
from .presenter import display_configuration


logger = get_logger(__name__)


@dataclass(slots=True)
class LoadResult:
    """Tagged outcome of a load attempt.

    ``DEFAULTS_GENERATED`` carries no configuration: the freshly written document is
    only picked up by the next start-up.
    """

    status: LoadStatus
    configuration: Optional[Configuration] = None
    error: Optional[ConfigurationError] = None
    generated: Optional[GenerateResult] = None

    @property
    def ok(self) -> bool:
        return self.status is LoadStatus.LOADED

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        if self.status is LoadStatus.DEFAULTS_GENERATED:
            return ErrorKind.DOCUMENT_ABSENT
        if self.error is None:
            return None
        return self.error.kind

    def unwrap(self) -> Configuration:
        """Return the configuration or raise the error that prevented loading it."""

        if self.status is LoadStatus.LOADED and self.configuration is not None:
            return self.configuration
        if self.error is not None:
            raise self.error
        raise DocumentAbsent("Configuration document was absent; defaults were generated")


class ConfigLoader:
    def __init__(self, config_dir: Optional[Path] = None, *, seed: Optional[ConfigurationSeed] = None) -> None:
        self.config_dir = config_dir if config_dir is not None else get_settings().config_dir
        self.seed = seed or ConfigurationSeed()
        self.context = default_context()

    @property
    def path(self) -> Path:
        return self.config_dir / CONFIG_FILENAME

    def load(self) -> LoadResult:
        apply_timestamp_format(self.seed.timestamp_format)
        self._ensure_directory()
        try:
            self.context = activate_locale(self.seed.locale_string)
            root = self._read_document()
            configuration = self._read_fields(root)
        except DocumentAbsent as exc:
            logger.error("Unable to parse %s: %s", self.path, exc)
            generated = generate_default_document(
                self.config_dir, abort_on_error=self.seed.abort_on_error
            )
            return LoadResult(status=LoadStatus.DEFAULTS_GENERATED, generated=generated)
        except ConfigurationError as exc:
            logger.error("Unable to parse %s: %s", self.path, exc)
            return LoadResult(status=LoadStatus.FATAL, error=exc)

        apply_timestamp_format(configuration.timestamp_format)
        apply_debug_mode(configuration.debug_mode)
        logger.info("%s parsed.", self.path.name)
        if configuration.debug_mode:
            display_configuration(configuration)
        return LoadResult(status=LoadStatus.LOADED, configuration=configuration)

    def _ensure_directory(self) -> None:
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.warning("Unable to create configuration directory %s: %s", self.config_dir, exc)

    def _read_document(self) -> ET.Element:
        try:
            tree = ET.parse(self.path)
        except FileNotFoundError as exc:
            raise DocumentAbsent(f"Could not find file '{self.path}'") from exc
        except ET.ParseError as exc:
            raise MalformedDocument(f"Invalid XML: {exc}") from exc
        except OSError as exc:
            raise IOFailure(f"Unable to read '{self.path}': {exc}") from exc

        root = tree.getroot()
        if root.tag != ROOT_ELEMENT:
            raise MissingField(
                f"Root element '{ROOT_ELEMENT}' not found (got '{root.tag}')",
                element=ROOT_ELEMENT,
            )
        return root

    @staticmethod
    def _attribute(root: ET.Element, spec: FieldSpec) -> str:
        element = root.find(spec.element)
        if element is None:
            raise MissingField(f"Element '{spec.element}' is missing", element=spec.element)
        value = element.get(spec.attribute)
        if value is None:
            raise MissingField(
                f"Attribute '{spec.attribute}' is missing on element '{spec.element}'",
                element=spec.element,
                attribute=spec.attribute,
            )
        return value

    def _convert(self, context: LocaleContext, root: ET.Element, spec: FieldSpec) -> Any:
        raw = self._attribute(root, spec)
        try:
            return context.convert(spec.kind, raw)
        except MalformedValue as exc:
            raise MalformedValue(
                f"{spec.element}/@{spec.attribute}: {exc}",
                element=spec.element,
                attribute=spec.attribute,
            ) from exc

    def _read_fields(self, root: ET.Element) -> Configuration:
        locale_spec, *remaining = FIELDS
        locale_string = self._attribute(root, locale_spec)
        locale = resolve_locale(locale_string)
        self.context = activate_locale(locale)

        values: dict[str, Any] = {"locale_string": locale_string, "locale": locale}
        for spec in remaining:
            values[spec.name] = self._convert(self.context, root, spec)
        values["broadcast_color"] = tuple(values.pop(name) for name in BROADCAST_CHANNELS)

        try:
            return Configuration(**values)
        except ValidationError as exc:
            raise MalformedValue(f"Invalid configuration values: {exc}") from exc


def load_configuration(
    config_dir: Optional[Path] = None,
    *,
    seed: Optional[ConfigurationSeed] = None,
) -> LoadResult:
    """Load the configuration document once at start-up."""

    return ConfigLoader(config_dir, seed=seed).load()


__all__ = [
    "ConfigLoader",
    "LoadResult",
    "load_configuration",
]
