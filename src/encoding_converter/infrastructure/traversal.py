"""Directory traversal adapter."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)


def normalize_extension(file_extension: str | None) -> str | None:
    """Return the extension without its leading dot, or ``None`` for no filter."""
    if file_extension is None:
        return None
    stripped = file_extension.strip().lstrip(".")
    return stripped or None


def matches_extension(path: Path, file_extension: str | None) -> bool:
    """Return whether ``path`` has the given extension (case-sensitive).

    Multi-part extensions such as ``tar.gz`` match on the full suffix.
    """
    extension = normalize_extension(file_extension)
    if extension is None:
        return True
    return path.name.endswith(f".{extension}")


class ExtensionFileWalker:
    """Walk a directory tree recursively, yielding regular files in sorted order."""

    def walk(self, root: Path, file_extension: str | None) -> Iterator[Path]:
        """Yield files under ``root`` whose extension matches.

        Unreadable directories are logged and skipped.
        """

        def _on_error(exc: OSError) -> None:
            logger.warning("skipping unreadable entry %s: %s", exc.filename, exc.strerror)

        for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
            dirnames.sort()
            for name in sorted(filenames):
                path = Path(dirpath) / name
                if path.is_file() and matches_extension(path, file_extension):
                    yield path
