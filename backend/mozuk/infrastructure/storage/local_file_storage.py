"""Local filesystem storage for files attached to project documents.

Files are written to ``<upload_dir>/documents/`` as
``<stem>_<YYYYMMDD_HHmmss>_<token>.<ext>``. The path kept on the document is
relative to ``upload_dir``, so the directory can be relocated without
rewriting rows.
"""

import logging
import mimetypes
import re
import secrets
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

logger = logging.getLogger(__name__)

_DOCUMENTS_SUBDIR = "documents"
_DEFAULT_MIME_TYPE = "application/octet-stream"


@dataclass
class StoredFile:
    stored_path: str  # relative to upload_dir
    filename: str
    original_name: str
    file_size: int
    mime_type: str


def _safe_stem(stem: str, max_len: int = 80) -> str:
    return re.sub(r"[^\w\-]", "_", stem)[:max_len].strip("_") or "unnamed"


def _unique_filename(original_name: str) -> str:
    original = Path(original_name)
    stamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    return f"{_safe_stem(original.stem)}_{stamp}_{secrets.token_hex(4)}{original.suffix}"


class LocalFileStorage:
    """Stores uploaded document files under a single root directory."""

    def __init__(self, upload_dir: str):
        self._root = Path(upload_dir).resolve()
        self._root.mkdir(parents=True, exist_ok=True)

    async def store_file(
        self, content: bytes, filename: str, content_type: str | None = None
    ) -> StoredFile:
        """Write ``content`` under a collision-free name and describe the result.

        Only the final component of ``filename`` is used; directory parts
        sent by the browser are discarded.
        """
        original_name = Path(filename).name or "unnamed"
        relative = Path(_DOCUMENTS_SUBDIR) / _unique_filename(original_name)

        target = self._root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
        logger.info("Stored %s as %s (%d bytes)", original_name, relative, len(content))

        return StoredFile(
            stored_path=relative.as_posix(),
            filename=relative.name,
            original_name=original_name,
            file_size=len(content),
            mime_type=content_type or mimetypes.guess_type(original_name)[0] or _DEFAULT_MIME_TYPE,
        )

    def get_file_path(self, stored_path: str) -> Path:
        """Absolute path for a stored file.

        Raises:
            ValueError: if ``stored_path`` points outside the upload directory.
        """
        path = (self._root / stored_path).resolve()
        if not path.is_relative_to(self._root):
            raise ValueError(f"Stored path escapes the upload directory: {stored_path}")
        return path

    def file_exists(self, stored_path: str) -> bool:
        try:
            return self.get_file_path(stored_path).is_file()
        except ValueError:
            logger.warning("Ignoring stored path outside upload directory: %s", stored_path)
            return False

    async def delete_file(self, stored_path: str) -> bool:
        """Remove a stored file; returns False when there was nothing to delete."""
        if not self.file_exists(stored_path):
            return False
        self.get_file_path(stored_path).unlink()
        logger.info("Deleted stored file %s", stored_path)
        return True
