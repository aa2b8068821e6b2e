"""
Atomic file writer for generated models.

Ensures that file writes are atomic so an interrupted run never leaves
a half-written model behind.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


class AtomicWriter:
    """Handles atomic file writes.

    Content is written to a temporary file in the target directory, then
    moved over the target. The rename is atomic on the same filesystem.
    """

    def write(self, path: Path, content: str) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write

        Raises:
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)
            temp_path.replace(path)
        except Exception:
            # Clean up temp file on any error
            if temp_path.exists():
                temp_path.unlink()
            raise
        logger.debug(f"Wrote {path}")

    def write_if_absent(self, path: Path, content: str) -> bool:
        """Write content only if the file doesn't exist.

        Args:
            path: Target file path
            content: Content to write

        Returns:
            True if the file was written, False if it already existed
        """
        if path.exists():
            logger.debug(f"Kept existing {path}")
            return False
        self.write(path, content)
        return True
