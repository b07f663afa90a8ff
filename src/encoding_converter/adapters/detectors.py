"""Statistical charset detector adapters."""

from __future__ import annotations

import chardet

from encoding_converter.application.results import CharsetGuess


class ChardetDetector:
    """Guess a charset label with ``chardet`` over the full buffer."""

    def detect(self, data: bytes) -> CharsetGuess:
        """Run ``chardet`` and normalize its result.

        Parameters
        ----------
        data : bytes
            Buffer without a byte-order-mark.

        Returns
        -------
        CharsetGuess
            ``label`` is ``None`` when ``chardet`` cannot decide (for example
            on an empty buffer).
        """
        if not data:
            return CharsetGuess(label=None)
        result = chardet.detect(data)
        return CharsetGuess(
            label=result.get("encoding"),
            confidence=float(result.get("confidence") or 0.0),
        )
