"""Per-buffer conversion pipeline: resolve, decode, encode."""

from __future__ import annotations

import logging

from encoding_converter.application.options import ConversionOptions
from encoding_converter.application.ports import CharsetDetector
from encoding_converter.application.resolver import resolve, scan_fallbacks
from encoding_converter.application.results import EncodingCandidate, TranscodedFile
from encoding_converter.errors import NoEncodingResolvedError, TargetUnrepresentableError
from encoding_converter.transcoding import DecodedText, decode, encode

logger = logging.getLogger(__name__)


class ConversionPipeline:
    """Convert one in-memory buffer to the target encoding.

    The pipeline never touches the filesystem; writing the produced bytes is
    the caller's job.
    """

    def __init__(
        self,
        options: ConversionOptions,
        detector: CharsetDetector | None = None,
    ) -> None:
        self.options = options
        self.detector = detector if options.resolution.detect else None

    def resolve(self, data: bytes) -> EncodingCandidate:
        """Select the source encoding for ``data``."""
        resolution = self.options.resolution
        return resolve(
            data,
            resolution.fallback_labels,
            detector=self.detector,
            min_confidence=resolution.min_confidence,
        )

    def decode(self, data: bytes) -> tuple[EncodingCandidate, DecodedText]:
        """Resolve and decode ``data``, guaranteeing a lossless decode.

        A signature or detector candidate is trusted without verification
        during resolution. If it then decodes with errors, the fallback
        list is scanned over the bytes after any signature before giving up.

        Raises
        ------
        NoEncodingResolvedError
            If no candidate decodes cleanly.
        """
        candidate = self.resolve(data)
        logger.debug(
            "resolved %s (source=%s, bom_length=%d)",
            candidate.encoding,
            candidate.source,
            candidate.bom_length,
        )
        decoded = decode(data, candidate.encoding, candidate.bom_length)
        if not decoded.had_errors:
            return candidate, decoded
        if candidate.source == "fallback":
            # Fallback candidates are verified during resolution.
            raise NoEncodingResolvedError(f"{candidate.encoding} decode was lossy")

        logger.info(
            "%s candidate %s decodes with errors; scanning fallback list",
            candidate.source,
            candidate.encoding,
        )
        fallback = scan_fallbacks(
            data, self.options.resolution.fallback_labels, candidate.bom_length
        )
        if fallback is None:
            raise NoEncodingResolvedError(
                f"{candidate.source} candidate {candidate.encoding} decodes with errors "
                "and no fallback encoding decodes cleanly"
            )
        return fallback, decode(data, fallback.encoding, fallback.bom_length)

    def run(self, data: bytes) -> TranscodedFile:
        """Convert ``data`` and return the complete output bytes.

        Raises
        ------
        NoEncodingResolvedError
            If no source encoding decodes ``data`` without loss.
        TargetUnrepresentableError
            If the target encoding cannot represent the decoded text.
        """
        candidate, decoded = self.decode(data)
        target = self.options.target
        encoded = encode(decoded.text, target)
        if encoded.had_errors:
            raise TargetUnrepresentableError(
                f"text decoded as {candidate.encoding} has characters with no "
                f"representation in {target}"
            )
        return TranscodedFile(data=encoded.data, candidate=candidate, target=target)
