"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass

from encoding_converter.labels import UTF_8, Encoding
from encoding_converter.types import EncodingLabel


@dataclass(frozen=True)
class ResolutionOptions:
    """Source-encoding resolution configuration."""

    fallback_labels: tuple[EncodingLabel, ...] = ()
    detect: bool = True
    min_confidence: float = 0.0


@dataclass(frozen=True)
class ConversionOptions:
    """Shared conversion options passed through use-cases."""

    target: Encoding = UTF_8
    resolution: ResolutionOptions = ResolutionOptions()
    file_extension: str | None = None
    dry_run: bool = False
