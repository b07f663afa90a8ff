"""Filesystem rewriter adapter."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path

from encoding_converter.errors import FileAccessError

logger = logging.getLogger(__name__)


class AtomicFileRewriter:
    """Read files whole and replace them atomically.

    New content goes to a temporary file in the target's directory, which
    then replaces the target with ``os.replace``. A file on disk therefore
    holds either its original bytes or the complete new bytes.
    """

    def read(self, path: Path) -> bytes:
        """Return the full content of ``path``.

        Raises
        ------
        FileAccessError
            If the file cannot be opened or read.
        """
        try:
            return path.read_bytes()
        except OSError as exc:
            raise FileAccessError(f"cannot read {path}: {exc}") from exc

    def write(self, path: Path, data: bytes) -> int:
        """Replace the content of ``path`` with ``data``.

        The original permission bits are kept.

        Raises
        ------
        FileAccessError
            If the temporary file cannot be written or moved into place.
        """
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
            )
        except OSError as exc:
            raise FileAccessError(f"cannot write {path}: {exc}") from exc
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
            shutil.copymode(path, tmp_path)
            os.replace(tmp_path, path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise FileAccessError(f"cannot write {path}: {exc}") from exc
        logger.debug("wrote %d bytes to %s", len(data), path)
        return len(data)
