"""Unit tests for source-encoding resolution priority."""

from __future__ import annotations

import codecs

import pytest

from encoding_converter.application.resolver import (
    detect_candidate,
    resolve,
    scan_fallbacks,
    sniff_signature,
)
from encoding_converter.application.results import CharsetGuess
from encoding_converter.errors import NoEncodingResolvedError
from encoding_converter.labels import (
    UTF_8,
    UTF_16BE,
    UTF_16LE,
    UTF_32BE,
    UTF_32LE,
    WINDOWS_1252,
    lookup_encoding,
)

HELLO_1252 = "héllo".encode("cp1252")


class _Detector:
    def __init__(self, label: str | None, confidence: float = 0.99) -> None:
        self.label = label
        self.confidence = confidence
        self.calls = 0

    def detect(self, data: bytes) -> CharsetGuess:
        self.calls += 1
        return CharsetGuess(label=self.label, confidence=self.confidence)


@pytest.mark.parametrize(
    ("signature", "expected"),
    [
        (codecs.BOM_UTF8, UTF_8),
        (codecs.BOM_UTF16_LE, UTF_16LE),
        (codecs.BOM_UTF16_BE, UTF_16BE),
        (codecs.BOM_UTF32_LE, UTF_32LE),
        (codecs.BOM_UTF32_BE, UTF_32BE),
    ],
)
def test_signature_takes_precedence(signature: bytes, expected: object) -> None:
    """A byte-order-mark wins regardless of detector and fallback list."""
    detector = _Detector("windows-1252")
    candidate = resolve(
        signature + b"x",
        ["windows-1252", "utf-8"],
        detector=detector,
    )
    assert candidate.encoding is expected
    assert candidate.bom_length == len(signature)
    assert candidate.source == "bom"
    assert detector.calls == 0


def test_utf32le_signature_preferred_over_utf16le() -> None:
    """FF FE 00 00 is read as UTF-32LE, not UTF-16LE."""
    candidate = sniff_signature(codecs.BOM_UTF32_LE + "a".encode("utf-32-le"))
    assert candidate is not None
    assert candidate.encoding is UTF_32LE


def test_signature_is_not_verified_by_decoding() -> None:
    """A signature followed by invalid content is still returned as-is."""
    candidate = resolve(codecs.BOM_UTF8 + b"\xff\xfe\xfd", [])
    assert candidate.encoding is UTF_8
    assert candidate.source == "bom"


def test_detected_candidate_used_without_verification() -> None:
    """A known detector label short-circuits the fallback list."""
    candidate = resolve(HELLO_1252, ["windows-1252"], detector=_Detector("utf-8"))
    assert candidate.encoding is UTF_8
    assert candidate.source == "detected"
    assert candidate.bom_length == 0


def test_detector_unknown_label_falls_through_to_fallbacks() -> None:
    """An unusable detector guess does not stop resolution."""
    candidate = resolve(HELLO_1252, ["windows-1252"], detector=_Detector("EUC-TW"))
    assert candidate.encoding is WINDOWS_1252
    assert candidate.source == "fallback"


def test_detector_below_confidence_floor_is_ignored() -> None:
    """Guesses under min_confidence are treated as no guess."""
    detector = _Detector("utf-8", confidence=0.2)
    assert detect_candidate(HELLO_1252, detector, min_confidence=0.5) is None
    assert detect_candidate(HELLO_1252, detector, min_confidence=0.1) is not None


def test_fallback_ordering_picks_first_clean_label() -> None:
    """With A lossy and B clean, B is chosen (not A, not C)."""
    candidate = resolve(
        HELLO_1252,
        ["utf-8", "windows-1252", "iso-8859-2"],
        detector=_Detector(None),
    )
    assert candidate.encoding is WINDOWS_1252
    assert candidate.source == "fallback"
    assert candidate.bom_length == 0


def test_scan_fallbacks_respects_order_among_clean_labels() -> None:
    """Among several clean labels, the first configured wins."""
    candidate = scan_fallbacks(HELLO_1252, ["iso-8859-2", "windows-1252"])
    assert candidate is not None
    assert candidate.encoding is lookup_encoding("iso-8859-2")


def test_scan_fallbacks_skips_unknown_labels() -> None:
    """Unknown labels are skipped, not fatal."""
    candidate = scan_fallbacks(b"plain", ["no-such-charset", "utf-8"])
    assert candidate is not None
    assert candidate.encoding is UTF_8


def test_exhaustion_raises_no_encoding_resolved() -> None:
    """No signature, no detection and no clean fallback is a failure."""
    with pytest.raises(NoEncodingResolvedError) as excinfo:
        resolve(b"\x81\x8d\x8f", ["utf-8", "utf-16le"], detector=_Detector(None))
    assert excinfo.value.reason == "no_encoding_resolved"


def test_latin1_fallback_accepts_windows_1252_gap_bytes() -> None:
    """latin1 is a catch-all: bytes cp1252 leaves undefined still resolve."""
    candidate = resolve(b"caf\xe9 \x81", ["utf-8", "latin1"])
    assert candidate.encoding is WINDOWS_1252
    assert candidate.source == "fallback"


def test_empty_fallback_list_without_detector_fails() -> None:
    """The BOM-only configuration fails for unsigned buffers."""
    with pytest.raises(NoEncodingResolvedError):
        resolve(b"plain ascii", [])


def test_scan_fallbacks_skips_signature_bytes() -> None:
    """A signature length passed to the scan is excluded from the decode."""
    data = codecs.BOM_UTF8 + b"ok \xff"
    candidate = scan_fallbacks(data, ["windows-1252"], bom_length=3)
    assert candidate is not None
    assert candidate.bom_length == 3
    assert candidate.source == "fallback"
