"""Pydantic schemas for runtime validation of run configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from encoding_converter.labels import lookup_encoding


def _require_known(label: str) -> str:
    if lookup_encoding(label) is None:
        raise ValueError(f"unknown encoding label {label!r}")
    return label.strip()


class RunConfig(BaseModel):
    """Validated configuration for one conversion run."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    target_encoding: str = Field(
        validation_alias=AliasChoices("target_encoding", "output_encoding"),
    )
    file_extension: str | None = None
    input_encodings: list[str] = Field(default_factory=list)
    detect: bool = True
    min_confidence: float = Field(default=0.0, ge=0.0, le=1.0)

    @field_validator("target_encoding")
    @classmethod
    def _validate_target(cls, value: str) -> str:
        return _require_known(value)

    @field_validator("input_encodings")
    @classmethod
    def _validate_inputs(cls, value: list[str]) -> list[str]:
        return [_require_known(label) for label in value]

    @field_validator("file_extension")
    @classmethod
    def _normalize_extension(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip().lstrip(".") or None
