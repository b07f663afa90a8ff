"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Protocol

from encoding_converter.application.results import CharsetGuess


class CharsetDetector(Protocol):
    """Guess the charset of an unsigned byte buffer."""

    def detect(self, data: bytes) -> CharsetGuess:
        """Return the best guess; ``label`` is ``None`` when undecided."""


class FileRewriter(Protocol):
    """Read original bytes and replace them with converted bytes."""

    def read(self, path: Path) -> bytes:
        """Return the full file content."""

    def write(self, path: Path, data: bytes) -> int:
        """Replace file content and return the number of bytes written."""


class FileWalker(Protocol):
    """Enumerate candidate files under a directory."""

    def walk(self, root: Path, file_extension: str | None) -> Iterator[Path]:
        """Yield matching files one at a time."""
