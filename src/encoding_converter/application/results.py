"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from encoding_converter.errors import ERRORS_BY_REASON, ConversionError
from encoding_converter.labels import Encoding
from encoding_converter.types import CandidateSource, EncodingLabel, FailureReason, RunMode


@dataclass(frozen=True)
class CharsetGuess:
    """Statistical detector output."""

    label: EncodingLabel | None
    confidence: float = 0.0


@dataclass(frozen=True)
class EncodingCandidate:
    """Source encoding chosen for one buffer.

    ``bom_length`` leading bytes are a signature and are not decoded.
    """

    encoding: Encoding
    bom_length: int
    source: CandidateSource


@dataclass(frozen=True)
class TranscodedFile:
    """Pipeline output for one buffer, ready to be written."""

    data: bytes
    candidate: EncodingCandidate
    target: Encoding


@dataclass(frozen=True)
class ConversionSuccess:
    """File converted (or, in dry-run mode, convertible)."""

    path: Path
    bytes_written: int
    encoding_used: str
    source: CandidateSource
    written: bool = True


@dataclass(frozen=True)
class ConversionFailure:
    """File left untouched, with the reason it could not be converted."""

    path: Path
    reason: FailureReason
    message: str

    def to_error(self) -> ConversionError:
        """Rebuild the exception this failure was recorded from."""
        return ERRORS_BY_REASON[self.reason](f"{self.path}: {self.message}")


type ConversionResult = ConversionSuccess | ConversionFailure


@dataclass
class RunReport:
    """Ordered per-file outcomes of one run."""

    mode: RunMode
    results: list[ConversionResult] = field(default_factory=list)

    def add(self, result: ConversionResult) -> None:
        self.results.append(result)

    @property
    def succeeded(self) -> list[ConversionSuccess]:
        return [r for r in self.results if isinstance(r, ConversionSuccess)]

    @property
    def failed(self) -> list[ConversionFailure]:
        return [r for r in self.results if isinstance(r, ConversionFailure)]

    @property
    def exit_code(self) -> int:
        """Process exit status: failures are fatal only in single-file mode."""
        if self.mode == "file" and self.failed:
            return self.failed[0].to_error().exit_code
        return 0
