"""Application-layer use-cases and option objects."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from encoding_converter.application.options import ConversionOptions, ResolutionOptions
from encoding_converter.application.ports import CharsetDetector, FileRewriter, FileWalker
from encoding_converter.application.results import (
    ConversionFailure,
    ConversionResult,
    ConversionSuccess,
    EncodingCandidate,
    RunReport,
)


def build_conversion_options(
    *,
    target_encoding: str = "utf-8",
    input_encodings: Iterable[str] = (),
    file_extension: str | None = None,
    detect: bool = True,
    min_confidence: float = 0.0,
    dry_run: bool = False,
) -> ConversionOptions:
    """Build typed conversion options via lazy use-case import."""
    from encoding_converter.application.use_cases import build_conversion_options as _impl

    return _impl(
        target_encoding=target_encoding,
        input_encodings=input_encodings,
        file_extension=file_extension,
        detect=detect,
        min_confidence=min_confidence,
        dry_run=dry_run,
    )


def convert_path(
    *,
    path: Path,
    options: ConversionOptions,
    detector: CharsetDetector | None = None,
    rewriter: FileRewriter | None = None,
    walker: FileWalker | None = None,
) -> RunReport:
    """Convert a file or directory tree via lazy use-case import."""
    from encoding_converter.application.use_cases import convert_path as _impl

    return _impl(
        path=path,
        options=options,
        detector=detector,
        rewriter=rewriter,
        walker=walker,
    )


__all__ = [
    "ConversionFailure",
    "ConversionOptions",
    "ConversionResult",
    "ConversionSuccess",
    "EncodingCandidate",
    "ResolutionOptions",
    "RunReport",
    "build_conversion_options",
    "convert_path",
]
