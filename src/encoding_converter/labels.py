"""Static encoding label table.

Labels follow the WHATWG Encoding Standard naming (``windows-1252``,
``utf-16le``, ``shift_jis`` ...) plus the spellings ``chardet`` reports, and
resolve to a fixed set of :class:`Encoding` definitions backed by Python
codecs. Lookup is a pure function over this table; nothing here is mutated
at runtime.

windows-1252 uses registered codec error handlers so the five bytes
Python's ``cp1252`` leaves undefined round-trip through their C1 code
points, as the WHATWG mapping requires.
"""

from __future__ import annotations

import codecs
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from encoding_converter.types import EncodingLabel


@dataclass(frozen=True)
class Encoding:
    """Canonical encoding definition.

    Parameters
    ----------
    name : str
        Canonical display name.
    codec : str
        Python codec used for the byte/text mapping.
    signature : bytes, default=b""
        Byte-order-mark identifying this encoding, if it has one.
    emit_signature : bool, default=False
        Whether encoding output starts with ``signature``.
    errors : str, default="strict"
        Codec error handler for lossless conversion.
    replace_errors : str, default="replace"
        Codec error handler for the substituting retry.
    """

    name: str
    codec: str
    signature: bytes = b""
    emit_signature: bool = False
    errors: str = "strict"
    replace_errors: str = "replace"

    def __str__(self) -> str:
        return self.name


UTF_8 = Encoding("UTF-8", "utf-8", codecs.BOM_UTF8)
UTF_8_SIG = Encoding("UTF-8-SIG", "utf-8", codecs.BOM_UTF8, emit_signature=True)
UTF_16LE = Encoding("UTF-16LE", "utf-16-le", codecs.BOM_UTF16_LE)
UTF_16BE = Encoding("UTF-16BE", "utf-16-be", codecs.BOM_UTF16_BE)
UTF_32LE = Encoding("UTF-32LE", "utf-32-le", codecs.BOM_UTF32_LE)
UTF_32BE = Encoding("UTF-32BE", "utf-32-be", codecs.BOM_UTF32_BE)

# Bytes Python's cp1252 leaves undefined; WHATWG maps each to the C1
# control with the same value.
_WINDOWS_1252_C1 = frozenset(b"\x81\x8d\x8f\x90\x9d")


def _windows_1252_handler(replace: bool):
    def handler(exc: UnicodeError) -> tuple[str | bytes, int]:
        if isinstance(exc, UnicodeDecodeError):
            byte = exc.object[exc.start]
            if byte in _WINDOWS_1252_C1:
                return chr(byte), exc.start + 1
            if replace:
                return "\ufffd", exc.start + 1
        elif isinstance(exc, UnicodeEncodeError):
            point = ord(exc.object[exc.start])
            if point in _WINDOWS_1252_C1:
                return bytes([point]), exc.start + 1
            if replace:
                return "?", exc.start + 1
        raise exc

    return handler


codecs.register_error("whatwg-windows-1252", _windows_1252_handler(replace=False))
codecs.register_error("whatwg-windows-1252-replace", _windows_1252_handler(replace=True))

WINDOWS_1252 = Encoding(
    "windows-1252",
    "cp1252",
    errors="whatwg-windows-1252",
    replace_errors="whatwg-windows-1252-replace",
)

# Longest first: the UTF-32LE mark starts with the UTF-16LE mark.
SIGNATURE_ENCODINGS: tuple[Encoding, ...] = (
    UTF_32LE,
    UTF_32BE,
    UTF_8,
    UTF_16LE,
    UTF_16BE,
)


def _entry(name: str, codec: str, *labels: str) -> tuple[Encoding, tuple[str, ...]]:
    return Encoding(name, codec), (name, *labels)


_TABLE: tuple[tuple[Encoding, tuple[str, ...]], ...] = (
    (UTF_8, ("utf-8", "utf8", "unicode-1-1-utf-8", "unicode20utf8", "x-unicode20utf8")),
    (UTF_8_SIG, ("utf-8-sig", "utf8-sig")),
    (UTF_16LE, ("utf-16le", "utf-16-le", "utf-16", "ucs-2", "unicode", "csunicode")),
    (UTF_16BE, ("utf-16be", "utf-16-be", "unicodefffe")),
    (UTF_32LE, ("utf-32le", "utf-32-le", "utf-32")),
    (UTF_32BE, ("utf-32be", "utf-32-be")),
    (
        WINDOWS_1252,
        (
            "windows-1252",
            "cp1252",
            "x-cp1252",
            "ascii",
            "us-ascii",
            "ansi-x3.4-1968",
            "iso-8859-1",
            "iso8859-1",
            "iso88591",
            "iso-ir-100",
            "l1",
            "latin1",
            "latin-1",
            "cp819",
            "ibm819",
            "csisolatin1",
        ),
    ),
    _entry("windows-1250", "cp1250", "cp1250", "x-cp1250"),
    _entry("windows-1251", "cp1251", "cp1251", "x-cp1251"),
    _entry("windows-1253", "cp1253", "cp1253", "x-cp1253"),
    _entry(
        "windows-1254",
        "cp1254",
        "cp1254",
        "x-cp1254",
        "iso-8859-9",
        "iso8859-9",
        "latin5",
        "l5",
    ),
    _entry("windows-1255", "cp1255", "cp1255", "x-cp1255"),
    _entry("windows-1256", "cp1256", "cp1256", "x-cp1256"),
    _entry("windows-1257", "cp1257", "cp1257", "x-cp1257"),
    _entry("windows-1258", "cp1258", "cp1258", "x-cp1258"),
    _entry(
        "windows-874",
        "cp874",
        "cp874",
        "tis-620",
        "iso-8859-11",
        "iso8859-11",
        "dos-874",
    ),
    _entry("iso-8859-2", "iso8859-2", "iso8859-2", "latin2", "l2"),
    _entry("iso-8859-3", "iso8859-3", "iso8859-3", "latin3", "l3"),
    _entry("iso-8859-4", "iso8859-4", "iso8859-4", "latin4", "l4"),
    _entry("iso-8859-5", "iso8859-5", "iso8859-5", "cyrillic"),
    _entry("iso-8859-6", "iso8859-6", "iso8859-6", "arabic"),
    _entry("iso-8859-7", "iso8859-7", "iso8859-7", "greek"),
    _entry("iso-8859-8", "iso8859-8", "iso8859-8", "hebrew", "visual"),
    _entry("iso-8859-10", "iso8859-10", "iso8859-10", "latin6", "l6"),
    _entry("iso-8859-13", "iso8859-13", "iso8859-13"),
    _entry("iso-8859-14", "iso8859-14", "iso8859-14"),
    _entry("iso-8859-15", "iso8859-15", "iso8859-15", "latin9", "l9"),
    _entry("iso-8859-16", "iso8859-16", "iso8859-16"),
    _entry("koi8-r", "koi8-r", "koi8", "koi", "cskoi8r"),
    _entry("koi8-u", "koi8-u", "koi8-ru"),
    _entry("ibm866", "cp866", "cp866", "866", "csibm866"),
    _entry("macintosh", "mac-roman", "mac", "macroman", "mac-roman", "x-mac-roman"),
    _entry(
        "x-mac-cyrillic",
        "mac-cyrillic",
        "maccyrillic",
        "mac-cyrillic",
        "x-mac-ukrainian",
    ),
    _entry("shift_jis", "cp932", "shift-jis", "sjis", "ms932", "cp932", "windows-31j"),
    _entry("euc-jp", "euc-jp", "eucjp", "x-euc-jp"),
    _entry("iso-2022-jp", "iso2022-jp", "iso2022-jp", "csiso2022jp"),
    _entry("euc-kr", "cp949", "euckr", "cp949", "windows-949", "ks-c-5601-1987"),
    _entry("gbk", "gbk", "gb2312", "chinese", "x-gbk", "cp936", "windows-936"),
    _entry("gb18030", "gb18030"),
    _entry("big5", "big5hkscs", "big5-hkscs", "cn-big5", "x-x-big5"),
)


def normalize_label(label: EncodingLabel) -> str:
    """Normalize a label for table lookup.

    Case, surrounding whitespace, underscores and spaces are ignored, so
    ``"Shift_JIS"``, ``" shift-jis "`` and ``"SHIFT JIS"`` are the same label.
    """
    return "-".join(label.strip().lower().replace("_", " ").replace("-", " ").split())


def _build_index() -> Mapping[str, Encoding]:
    index: dict[str, Encoding] = {}
    for encoding, labels in _TABLE:
        for label in labels:
            index.setdefault(normalize_label(label), encoding)
    return MappingProxyType(index)


_INDEX = _build_index()


def lookup_encoding(label: EncodingLabel | None) -> Encoding | None:
    """Return the encoding a label names, or ``None`` if it is unknown."""
    if not label:
        return None
    return _INDEX.get(normalize_label(label))


def known_labels() -> list[str]:
    """Return every accepted label in normalized form."""
    return sorted(_INDEX)
