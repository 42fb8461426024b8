"""
Path2Hack Backend: Upload Storage Service
==========================================

What:  Persists project images to the local upload directory.
How:   A pure naming function decides the file name; aiofiles writes the bytes.
Who:   Called by the createProject route before the project row is inserted.

Naming:
    <epoch-milliseconds-at-receipt>-<original-file-name>
    e.g. uploads/1700000000123-cover.png

    The millisecond prefix keeps names apart across uploads; directory parts of
    the client-supplied name are dropped so a name cannot escape the upload dir.

Ownership:
    The filesystem owns the bytes and the database row only stores the path.
    If the insert fails after the write, the file stays on disk (no cleanup).
"""

import logging
from datetime import datetime, timezone
from pathlib import Path, PureWindowsPath
from typing import Optional

import aiofiles

from path2hack.config import settings
from path2hack.exceptions import FileStorageError

logger = logging.getLogger(__name__)

DEFAULT_UPLOAD_NAME = "upload"


def build_storage_name(received_at: datetime, original_name: Optional[str]) -> str:
    """
    Storage file name for an upload received at `received_at`.

    >>> build_storage_name(datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc), "cover.png")
    '1700000000000-cover.png'
    """
    millis = int(received_at.timestamp() * 1000)
    # Browsers on Windows may send "C:\\fakepath\\name.png"
    base_name = PureWindowsPath(original_name or "").name or DEFAULT_UPLOAD_NAME
    return f"{millis}-{base_name}"


class FileService:
    """Writes uploads into a single flat directory."""

    def __init__(self, upload_dir: Optional[str] = None):
        self.upload_dir = Path(upload_dir or settings.upload_dir)

    def storage_path(self, received_at: datetime, original_name: Optional[str]) -> Path:
        """Path (relative to the working directory when upload_dir is) for an upload."""
        return self.upload_dir / build_storage_name(received_at, original_name)

    async def store_upload(
        self,
        original_name: Optional[str],
        content: bytes,
        received_at: Optional[datetime] = None,
    ) -> str:
        """
        Write `content` to the upload directory.

        Returns:
            The stored path as a string; this is what the project row references.

        Raises:
            FileStorageError if the directory cannot be created or the write fails.
        """
        received_at = received_at or datetime.now(timezone.utc)
        path = self.storage_path(received_at, original_name)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(path, "wb") as f:
                await f.write(content)
        except OSError as e:
            logger.error("Failed to store upload at %s: %s", path, str(e))
            raise FileStorageError(
                message="Failed to save uploaded image.",
                context={"path": str(path), "os_error": str(e)},
            ) from e

        logger.info("File stored: %s (%d bytes)", path, len(content))
        return str(path)


# ── Singleton Instance ────────────────────────────────────────────────────
file_service = FileService()


def get_file_service() -> FileService:
    """FastAPI dependency returning the shared upload store."""
    return file_service
