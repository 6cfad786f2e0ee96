"""
Report file storage.

Generated PDFs are written to a local directory (settings.REPORTS_DIR)
and served back by file name. The directory is append-only: reports are
never overwritten or deleted by the API.

Usage:
    storage = get_storage_service()
    path = await storage.save_bytes(pdf_bytes, "report_session_001_1700000000000.pdf")
    path = await storage.get_file_path("report_session_001_1700000000000.pdf")
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from assessment_api.config import settings


class LocalStorageService:
    """Saves report files to a local directory."""

    def __init__(self, base_path: str = "reports"):
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)

    async def save_bytes(self, data: bytes, key: str) -> Path:
        """Write ``data`` under a new ``key`` and return the absolute path.

        Raises:
            ValueError: the key is not a plain file name.
            FileExistsError: a file is already stored under ``key``.
        """
        file_path = self._resolve(key)
        if file_path is None:
            raise ValueError(f"Invalid storage key: {key!r}")

        with open(file_path, "xb") as dest:
            dest.write(data)
        return file_path

    async def get_file_path(self, key: str) -> Optional[Path]:
        """Absolute path of a stored file, or None if it does not exist.

        Keys are plain file names. Anything that would escape the base
        directory is treated as missing.
        """
        file_path = self._resolve(key)
        if file_path is None or not file_path.is_file():
            return None
        return file_path

    def _resolve(self, key: str) -> Optional[Path]:
        if not key or "\\" in key or Path(key).name != key or key.startswith("."):
            return None
        return (self.base_path / key).resolve()


def get_storage_service() -> LocalStorageService:
    """Factory function — returns the storage backend for the configured directory."""
    return _storage_for(settings.REPORTS_DIR)


@lru_cache
def _storage_for(base_path: str) -> LocalStorageService:
    return LocalStorageService(base_path)
