"""Shared type aliases for encoding conversion modules."""

from __future__ import annotations

from typing import Literal

type EncodingLabel = str
type CandidateSource = Literal["bom", "detected", "fallback"]
type FailureReason = Literal[
    "no_encoding_resolved",
    "target_unrepresentable",
    "io_error",
]
type RunMode = Literal["file", "directory"]
