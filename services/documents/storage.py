"""Local file storage standing in for the remote file-storage service."""

import logging
from pathlib import Path, PurePosixPath
from common.result import RemoteResult

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised by document attachment when an upload fails."""

    pass


class FileStorage:
    """
    Stores uploaded files under a root directory and hands back public URLs.

    Paths are relative and slash-separated, e.g. ``denials/<id>/<file name>``.
    The public URL is ``<public_base_url>/<path>``.
    """

    def __init__(self, root_dir: str, public_base_url: str):
        self.root_dir = Path(root_dir)
        self.public_base_url = public_base_url.rstrip("/")
        self.root_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"Initialized FileStorage: root_dir={self.root_dir}")

    def upload(self, content: bytes, path: str, upsert: bool = False) -> RemoteResult:
        """
        Write ``content`` at ``path``.

        Args:
            content: File bytes
            path: Relative storage path
            upsert: Overwrite an existing file instead of failing

        Returns:
            Result whose value is the public URL. Rejected paths and write
            errors come back as failures.
        """
        relative = PurePosixPath(path)
        if relative.is_absolute() or ".." in relative.parts or not relative.parts:
            return RemoteResult.failure(f"Invalid storage path: {path}")

        target = self.root_dir.joinpath(*relative.parts)
        if target.exists() and not upsert:
            return RemoteResult.failure(f"File already exists: {path}")

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
        except OSError as e:
            logger.error(f"Failed to store {path}: {e}")
            return RemoteResult.failure(str(e))

        logger.info(f"Stored {len(content)} bytes at {target}")
        return RemoteResult.success(f"{self.public_base_url}/{relative.as_posix()}")
