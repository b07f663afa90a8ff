"""Unit tests for thin public wrapper modules."""

from __future__ import annotations

from pathlib import Path

import pytest

import encoding_converter
from encoding_converter import api as api_module
from encoding_converter import application
from encoding_converter.application.results import RunReport
from encoding_converter.schemas import RunConfig


def test_top_level_convert_path_forwards(monkeypatch: pytest.MonkeyPatch) -> None:
    """Forward top-level convert_path arguments to the API implementation."""
    called: dict[str, object] = {}

    def fake_impl(**kwargs: object) -> RunReport:
        called.update(kwargs)
        return RunReport(mode="directory")

    monkeypatch.setattr(api_module, "convert_path_to_encoding", fake_impl)

    report = encoding_converter.convert_path(
        Path("docs"),
        "utf-16le",
        ["gbk"],
        "txt",
        detect=False,
        min_confidence=0.3,
        dry_run=True,
    )

    assert report.mode == "directory"
    assert called == {
        "path": Path("docs"),
        "target_encoding": "utf-16le",
        "input_encodings": ["gbk"],
        "file_extension": "txt",
        "detect": False,
        "min_confidence": 0.3,
        "dry_run": True,
    }


def test_top_level_convert_bytes_converts_with_fallbacks() -> None:
    """Convert an unsigned buffer through the fallback list."""
    out = encoding_converter.convert_bytes(
        "café".encode("cp1252"),
        target_encoding="utf-8",
        input_encodings=["utf-8", "windows-1252"],
        detect=False,
    )
    assert out == "café".encode("utf-8")


def test_application_wrappers_build_options_and_convert(tmp_path: Path) -> None:
    """Application package wrappers delegate to the use-case module."""
    target = tmp_path / "a.txt"
    target.write_bytes("naïve".encode("cp1252"))

    options = application.build_conversion_options(
        input_encodings=["windows-1252"], detect=False
    )
    report = application.convert_path(path=target, options=options)

    assert report.exit_code == 0
    assert target.read_bytes() == "naïve".encode("utf-8")


def test_convert_from_config_passes_every_field(monkeypatch: pytest.MonkeyPatch) -> None:
    """Configuration fields become conversion options."""
    seen: dict[str, object] = {}

    def fake_convert_path(*, path: Path, options: object) -> RunReport:
        seen["path"] = path
        seen["options"] = options
        return RunReport(mode="file")

    monkeypatch.setattr(api_module, "convert_path", fake_convert_path)
    config = RunConfig.model_validate(
        {
            "path": "x.txt",
            "output_encoding": "utf-16be",
            "file_extension": "txt",
            "input_encodings": ["gbk"],
            "detect": False,
            "min_confidence": 0.4,
        }
    )

    api_module.convert_from_config(config, dry_run=True)

    options = seen["options"]
    assert seen["path"] == Path("x.txt")
    assert options.target.name == "UTF-16BE"
    assert options.resolution.fallback_labels == ("gbk",)
    assert options.resolution.detect is False
    assert options.resolution.min_confidence == 0.4
    assert options.file_extension == "txt"
    assert options.dry_run is True
