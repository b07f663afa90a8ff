#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/encoding_converter"


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    _assert_no_imports(
        PACKAGE / "cli/cli.py",
        ["import chardet", "from chardet"],
    )

    for path in (PACKAGE / "application").glob("*.py"):
        _assert_no_imports(
            path,
            [
                "import typer",
                "from typer",
                "import chardet",
                "from chardet",
            ],
        )

    # Core decode/encode and label lookup stay free of I/O and adapters.
    for name in ("labels.py", "transcoding.py"):
        _assert_no_imports(
            PACKAGE / name,
            ["import os", "open(", "encoding_converter.adapters", "encoding_converter.infrastructure"],
        )

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
