"""Application use-cases orchestrating file and directory conversion."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from encoding_converter.adapters.detectors import ChardetDetector
from encoding_converter.application.options import ConversionOptions, ResolutionOptions
from encoding_converter.application.pipeline import ConversionPipeline
from encoding_converter.application.ports import CharsetDetector, FileRewriter, FileWalker
from encoding_converter.application.results import (
    ConversionFailure,
    ConversionResult,
    ConversionSuccess,
    EncodingCandidate,
    RunReport,
)
from encoding_converter.errors import ConfigParseError, ConversionError, PathNotFoundError
from encoding_converter.infrastructure.rewriter import AtomicFileRewriter
from encoding_converter.infrastructure.traversal import ExtensionFileWalker
from encoding_converter.labels import lookup_encoding
from encoding_converter.types import EncodingLabel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DetectionReport:
    """Resolved source encoding for one file, or why there is none."""

    path: Path
    candidate: EncodingCandidate | None
    failure: ConversionFailure | None = None


def build_conversion_options(
    *,
    target_encoding: EncodingLabel = "utf-8",
    input_encodings: Iterable[EncodingLabel] = (),
    file_extension: str | None = None,
    detect: bool = True,
    min_confidence: float = 0.0,
    dry_run: bool = False,
) -> ConversionOptions:
    """Build typed option object from command/API params.

    Raises
    ------
    ConfigParseError
        If the target or a fallback label is not a known encoding.
    """
    target = lookup_encoding(target_encoding)
    if target is None:
        raise ConfigParseError(f"Unknown target encoding: {target_encoding!r}")
    fallback_labels = tuple(input_encodings)
    unknown = [label for label in fallback_labels if lookup_encoding(label) is None]
    if unknown:
        raise ConfigParseError(f"Unknown input encodings: {', '.join(map(repr, unknown))}")
    return ConversionOptions(
        target=target,
        resolution=ResolutionOptions(
            fallback_labels=fallback_labels,
            detect=detect,
            min_confidence=min_confidence,
        ),
        file_extension=file_extension,
        dry_run=dry_run,
    )


def convert_file(
    *,
    path: Path,
    pipeline: ConversionPipeline,
    rewriter: FileRewriter,
    dry_run: bool = False,
) -> ConversionResult:
    """Use-case: convert one file in place.

    Per-file errors are returned as ``ConversionFailure``; the file is only
    written once the complete output exists.
    """
    try:
        original = rewriter.read(path)
        transcoded = pipeline.run(original)
        skip_write = dry_run or transcoded.data == original
        bytes_written = 0 if skip_write else rewriter.write(path, transcoded.data)
    except ConversionError as exc:
        logger.warning("conversion of %s failed: %s", path, exc)
        return ConversionFailure(path=path, reason=exc.reason, message=str(exc))
    return ConversionSuccess(
        path=path,
        bytes_written=bytes_written,
        encoding_used=transcoded.candidate.encoding.name,
        source=transcoded.candidate.source,
        written=not skip_write,
    )


def _iter_targets(
    path: Path, options: ConversionOptions, walker: FileWalker
) -> tuple[RunReport, Iterable[Path]]:
    if not path.exists():
        raise PathNotFoundError(path)
    if path.is_dir():
        return RunReport(mode="directory"), walker.walk(path, options.file_extension)
    return RunReport(mode="file"), [path]


def convert_path(
    *,
    path: Path,
    options: ConversionOptions,
    detector: CharsetDetector | None = None,
    rewriter: FileRewriter | None = None,
    walker: FileWalker | None = None,
) -> RunReport:
    """Use-case: convert a single file or every matching file under a directory.

    Files are processed one at a time. A failed file never stops the run;
    the returned report's ``exit_code`` makes a failure fatal in single-file
    mode only.

    Raises
    ------
    PathNotFoundError
        If ``path`` does not exist.
    """
    detector = detector or ChardetDetector()
    rewriter = rewriter or AtomicFileRewriter()
    walker = walker or ExtensionFileWalker()

    pipeline = ConversionPipeline(options, detector=detector)
    report, targets = _iter_targets(path, options, walker)
    for target in targets:
        report.add(
            convert_file(
                path=target,
                pipeline=pipeline,
                rewriter=rewriter,
                dry_run=options.dry_run,
            )
        )
    return report


def detect_path(
    *,
    path: Path,
    options: ConversionOptions,
    detector: CharsetDetector | None = None,
    rewriter: FileRewriter | None = None,
    walker: FileWalker | None = None,
) -> list[DetectionReport]:
    """Use-case: report the source encoding of each file without writing."""
    detector = detector or ChardetDetector()
    rewriter = rewriter or AtomicFileRewriter()
    walker = walker or ExtensionFileWalker()

    pipeline = ConversionPipeline(options, detector=detector)
    _, targets = _iter_targets(path, options, walker)
    reports: list[DetectionReport] = []
    for target in targets:
        try:
            candidate, _ = pipeline.decode(rewriter.read(target))
        except ConversionError as exc:
            failure = ConversionFailure(path=target, reason=exc.reason, message=str(exc))
            reports.append(DetectionReport(path=target, candidate=None, failure=failure))
            continue
        reports.append(DetectionReport(path=target, candidate=candidate))
    return reports
