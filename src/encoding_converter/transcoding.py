"""Decoder and encoder wrappers reporting lossy conversions."""

from __future__ import annotations

from dataclasses import dataclass

from encoding_converter.labels import Encoding


@dataclass(frozen=True)
class DecodedText:
    """Canonical text plus whether any byte sequence was replaced."""

    text: str
    had_errors: bool = False


@dataclass(frozen=True)
class EncodedOutput:
    """Target-encoding bytes plus whether any character was substituted."""

    data: bytes
    had_errors: bool = False


def decode(data: bytes, encoding: Encoding, bom_length: int = 0) -> DecodedText:
    """Decode ``data[bom_length:]`` with ``encoding``.

    Invalid byte sequences become U+FFFD and set ``had_errors``; content
    errors never raise.

    Parameters
    ----------
    data : bytes
        Raw file content.
    encoding : Encoding
        Source encoding.
    bom_length : int, default=0
        Number of leading signature bytes to skip.

    Returns
    -------
    DecodedText
        Decoded text and the lossy-decode flag.
    """
    payload = data[bom_length:]
    try:
        return DecodedText(payload.decode(encoding.codec, encoding.errors))
    except UnicodeDecodeError:
        return DecodedText(
            payload.decode(encoding.codec, encoding.replace_errors),
            had_errors=True,
        )


def encode(text: str, encoding: Encoding) -> EncodedOutput:
    """Encode ``text`` with ``encoding``.

    Characters with no representation are replaced by the codec's
    substitution character and set ``had_errors``. The encoding's signature
    is prepended only when ``encoding.emit_signature`` is set.
    """
    prefix = encoding.signature if encoding.emit_signature else b""
    try:
        return EncodedOutput(prefix + text.encode(encoding.codec, encoding.errors))
    except UnicodeEncodeError:
        return EncodedOutput(
            prefix + text.encode(encoding.codec, encoding.replace_errors),
            had_errors=True,
        )
