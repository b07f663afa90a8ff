"""Source-encoding resolution: signature, detection, then fallback list."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from encoding_converter.application.ports import CharsetDetector
from encoding_converter.application.results import EncodingCandidate
from encoding_converter.errors import NoEncodingResolvedError
from encoding_converter.labels import SIGNATURE_ENCODINGS, lookup_encoding
from encoding_converter.transcoding import decode
from encoding_converter.types import EncodingLabel

logger = logging.getLogger(__name__)


def sniff_signature(data: bytes) -> EncodingCandidate | None:
    """Return a BOM candidate if ``data`` starts with a known signature."""
    for encoding in SIGNATURE_ENCODINGS:
        if data.startswith(encoding.signature):
            return EncodingCandidate(
                encoding=encoding,
                bom_length=len(encoding.signature),
                source="bom",
            )
    return None


def detect_candidate(
    data: bytes,
    detector: CharsetDetector,
    min_confidence: float = 0.0,
) -> EncodingCandidate | None:
    """Return a detected candidate if the detector's guess is usable.

    A guess is usable when its label is in the label table and its
    confidence reaches ``min_confidence``. The guess is not verified by
    decoding.
    """
    guess = detector.detect(data)
    encoding = lookup_encoding(guess.label)
    if encoding is None:
        if guess.label:
            logger.debug("detector label %r has no known encoding", guess.label)
        return None
    if guess.confidence < min_confidence:
        logger.debug(
            "detector guess %s below confidence floor (%.2f < %.2f)",
            encoding,
            guess.confidence,
            min_confidence,
        )
        return None
    return EncodingCandidate(encoding=encoding, bom_length=0, source="detected")


def scan_fallbacks(
    data: bytes,
    fallback_labels: Iterable[EncodingLabel],
    bom_length: int = 0,
) -> EncodingCandidate | None:
    """Return the first fallback label that decodes ``data`` cleanly.

    The first ``bom_length`` bytes are skipped, so a signature whose own
    encoding failed is never decoded as content.
    """
    for label in fallback_labels:
        encoding = lookup_encoding(label)
        if encoding is None:
            logger.warning("skipping unknown fallback encoding label %r", label)
            continue
        if not decode(data, encoding, bom_length).had_errors:
            return EncodingCandidate(
                encoding=encoding, bom_length=bom_length, source="fallback"
            )
        logger.debug("fallback %s decodes with errors", encoding)
    return None


def resolve(
    data: bytes,
    fallback_labels: Iterable[EncodingLabel] = (),
    detector: CharsetDetector | None = None,
    min_confidence: float = 0.0,
) -> EncodingCandidate:
    """Select exactly one source encoding for ``data``.

    Strategies run in strict priority order and the first that yields a
    candidate wins: byte-order-mark signature, statistical detection (only
    when ``detector`` is given), then the fallback list in order.

    Parameters
    ----------
    data : bytes
        Full file content.
    fallback_labels : Iterable[str], default=()
        Ordered fallback labels. Each is verified by a full decode.
    detector : CharsetDetector | None, default=None
        Optional statistical detector.
    min_confidence : float, default=0.0
        Confidence floor for detector guesses.

    Returns
    -------
    EncodingCandidate
        Selected encoding, signature length and how it was chosen.

    Raises
    ------
    NoEncodingResolvedError
        If no strategy yields a candidate.
    """
    candidate = sniff_signature(data)
    if candidate is not None:
        return candidate
    if detector is not None:
        candidate = detect_candidate(data, detector, min_confidence)
        if candidate is not None:
            return candidate
    labels = tuple(fallback_labels)
    candidate = scan_fallbacks(data, labels)
    if candidate is not None:
        return candidate
    tried = ", ".join(labels) or "<none>"
    raise NoEncodingResolvedError(
        f"no signature, no usable detection and no clean fallback (tried: {tried})"
    )
