"""Top-level API for bulk text-file encoding conversion."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from encoding_converter.application.results import RunReport

__version__ = "0.1.0"


def convert_bytes(
    data: bytes,
    target_encoding: str = "utf-8",
    input_encodings: Iterable[str] | None = None,
    detect: bool = True,
    min_confidence: float = 0.0,
) -> bytes:
    """Convert a byte buffer to ``target_encoding``.

    Parameters
    ----------
    data : bytes
        Raw source content.
    target_encoding : str, default="utf-8"
        Label of the encoding to produce.
    input_encodings : Iterable[str], optional
        Ordered fallback labels tried when there is no byte-order-mark and
        detection is inconclusive.
    detect : bool, default=True
        Whether to run statistical charset detection.
    min_confidence : float, default=0.0
        Confidence floor for detector guesses.

    Returns
    -------
    bytes
        Converted content.

    Raises
    ------
    NoEncodingResolvedError
        If no source encoding decodes ``data`` without loss.
    TargetUnrepresentableError
        If ``target_encoding`` cannot represent the decoded text.
    """
    from .api import convert_bytes as _impl

    return _impl(
        data,
        target_encoding=target_encoding,
        input_encodings=input_encodings,
        detect=detect,
        min_confidence=min_confidence,
    )


def convert_path(
    path: Path,
    target_encoding: str = "utf-8",
    input_encodings: Iterable[str] | None = None,
    file_extension: str | None = None,
    *,
    detect: bool = True,
    min_confidence: float = 0.0,
    dry_run: bool = False,
) -> RunReport:
    """Convert a file, or every matching file under a directory, in place.

    Parameters
    ----------
    path : Path
        File or directory root.
    target_encoding : str, default="utf-8"
        Label of the encoding to write.
    input_encodings : Iterable[str], optional
        Ordered fallback source labels.
    file_extension : str, optional
        Extension filter for directory mode, with or without the dot.
    dry_run : bool, default=False
        Run the pipeline without writing.

    Returns
    -------
    RunReport
        Per-file outcomes. ``exit_code`` is nonzero only when a single file
        was requested and it failed.
    """
    from .api import convert_path_to_encoding as _impl

    return _impl(
        path=path,
        target_encoding=target_encoding,
        input_encodings=input_encodings,
        file_extension=file_extension,
        detect=detect,
        min_confidence=min_confidence,
        dry_run=dry_run,
    )


__all__ = ["RunReport", "convert_bytes", "convert_path"]
