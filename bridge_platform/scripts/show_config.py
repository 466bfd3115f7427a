"""Operator tool: load and print the bridge configuration or regenerate defaults.

```
python -m bridge_platform.scripts.show_config --save-path ./tshock
python -m bridge_platform.scripts.show_config --generate
```
"""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from bridge_platform.config import CONFIG_DIRNAME, get_settings
from bridge_platform.logging_config import apply_debug_mode, setup_logging
from bridge_platform.models import LoadStatus
from bridge_platform.services.generator import EXIT_FAILURE, generate_default_document
from bridge_platform.services.loader import load_configuration
from bridge_platform.services.presenter import display_configuration


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show or regenerate the bridge configuration.")
    parser.add_argument(
        "--save-path",
        type=Path,
        default=None,
        help="Server save directory holding the Terracord folder (defaults to BRIDGE_SAVE_PATH).",
    )
    parser.add_argument(
        "--generate",
        action="store_true",
        help="Overwrite the document with the default configuration.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    setup_logging()

    config_dir = args.save_path / CONFIG_DIRNAME if args.save_path else get_settings().config_dir
    if args.generate:
        generate_default_document(config_dir)
        return 0

    result = load_configuration(config_dir)
    if result.status is LoadStatus.FATAL:
        return EXIT_FAILURE
    if result.configuration is not None and not result.configuration.debug_mode:
        apply_debug_mode(True)
        display_configuration(result.configuration)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
