"""Error taxonomy for configuration, path and per-file conversion failures."""

from __future__ import annotations

from pathlib import Path

from encoding_converter.types import FailureReason


class EncodingConverterError(Exception):
    """Base class for every error raised by this package."""

    exit_code: int = 1


class ConfigReadError(EncodingConverterError):
    """Configuration file could not be read."""

    exit_code = 2


class ConfigParseError(EncodingConverterError):
    """Configuration content is malformed or names an unknown encoding."""

    exit_code = 2


class PathNotFoundError(EncodingConverterError):
    """Configured path does not exist."""

    exit_code = 3

    def __init__(self, path: Path) -> None:
        super().__init__(f"Path does not exist: {path}")
        self.path = path


class ConversionError(EncodingConverterError):
    """Per-file conversion failure.

    Subclasses set ``reason``, the value recorded on a failed
    ``ConversionResult``.
    """

    reason: FailureReason


class NoEncodingResolvedError(ConversionError):
    """No candidate encoding decodes the buffer without loss."""

    exit_code = 4
    reason: FailureReason = "no_encoding_resolved"


class TargetUnrepresentableError(ConversionError):
    """Target encoding cannot represent the decoded text losslessly."""

    exit_code = 5
    reason: FailureReason = "target_unrepresentable"


class FileAccessError(ConversionError):
    """Opening, reading or writing a file failed."""

    exit_code = 6
    reason: FailureReason = "io_error"


ERRORS_BY_REASON: dict[FailureReason, type[ConversionError]] = {
    "no_encoding_resolved": NoEncodingResolvedError,
    "target_unrepresentable": TargetUnrepresentableError,
    "io_error": FileAccessError,
}
