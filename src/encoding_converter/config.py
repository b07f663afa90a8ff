"""TOML configuration loading."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from encoding_converter.errors import ConfigParseError, ConfigReadError
from encoding_converter.schemas import RunConfig

DEFAULT_CONFIG_PATH = Path("config.toml")


def read_config_document(config_path: Path) -> dict[str, Any]:
    """Read and parse a TOML configuration document.

    Raises
    ------
    ConfigReadError
        If the file cannot be read.
    ConfigParseError
        If the content is not valid TOML.
    """
    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigReadError(f"Cannot read configuration file {config_path}: {exc}") from exc
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigParseError(f"Invalid TOML in {config_path}: {exc}") from exc


def build_run_config(
    document: Mapping[str, Any],
    overrides: Mapping[str, Any] | None = None,
) -> RunConfig:
    """Validate a configuration document, applying non-``None`` overrides.

    Raises
    ------
    ConfigParseError
        If the merged configuration fails validation.
    """
    payload = dict(document)
    for key, value in (overrides or {}).items():
        if value is None:
            continue
        if key == "target_encoding":
            payload.pop("output_encoding", None)
        payload[key] = value
    try:
        return RunConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigParseError(f"Invalid configuration: {exc}") from exc


def load_config(
    config_path: Path | None = DEFAULT_CONFIG_PATH,
    overrides: Mapping[str, Any] | None = None,
) -> RunConfig:
    """Load ``config_path`` (if given) and merge command-line overrides.

    Parameters
    ----------
    config_path : Path | None, default=Path("config.toml")
        TOML document to read. ``None`` builds the configuration from
        ``overrides`` alone.
    overrides : Mapping[str, Any] | None, default=None
        Field values taking precedence over the document; ``None`` values
        are ignored.
    """
    document = read_config_document(config_path) if config_path is not None else {}
    return build_run_config(document, overrides)
