"""Public conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable
from typing import Optional

from encoding_converter.application.pipeline import ConversionPipeline
from encoding_converter.application.results import RunReport
from encoding_converter.application.use_cases import DetectionReport
from encoding_converter.application.use_cases import build_conversion_options
from encoding_converter.application.use_cases import convert_path
from encoding_converter.application.use_cases import detect_path
from encoding_converter.adapters.detectors import ChardetDetector
from encoding_converter.schemas import RunConfig


def convert_bytes(
    data: bytes,
    target_encoding: str = "utf-8",
    input_encodings: Optional[Iterable[str]] = None,
    detect: bool = True,
    min_confidence: float = 0.0,
) -> bytes:
    """Convert an in-memory buffer and return the target-encoding bytes."""
    options = build_conversion_options(
        target_encoding=target_encoding,
        input_encodings=input_encodings or (),
        detect=detect,
        min_confidence=min_confidence,
    )
    pipeline = ConversionPipeline(options, detector=ChardetDetector())
    return pipeline.run(data).data


def convert_from_config(config: RunConfig, dry_run: bool = False) -> RunReport:
    """Convert the file or directory a validated configuration names."""
    options = build_conversion_options(
        target_encoding=config.target_encoding,
        input_encodings=config.input_encodings,
        file_extension=config.file_extension,
        detect=config.detect,
        min_confidence=config.min_confidence,
        dry_run=dry_run,
    )
    return convert_path(path=config.path, options=options)


def detect_from_config(config: RunConfig) -> list[DetectionReport]:
    """Resolve the source encoding of each configured file without writing."""
    options = build_conversion_options(
        target_encoding=config.target_encoding,
        input_encodings=config.input_encodings,
        file_extension=config.file_extension,
        detect=config.detect,
        min_confidence=config.min_confidence,
    )
    return detect_path(path=config.path, options=options)


def convert_path_to_encoding(
    path: Path,
    target_encoding: str = "utf-8",
    input_encodings: Optional[Iterable[str]] = None,
    file_extension: Optional[str] = None,
    detect: bool = True,
    min_confidence: float = 0.0,
    dry_run: bool = False,
) -> RunReport:
    """Convert a file or directory tree in place."""
    options = build_conversion_options(
        target_encoding=target_encoding,
        input_encodings=input_encodings or (),
        file_extension=file_extension,
        detect=detect,
        min_confidence=min_confidence,
        dry_run=dry_run,
    )
    return convert_path(path=path, options=options)
