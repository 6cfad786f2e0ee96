"""
Unit tests for the local report storage.
"""

import pytest

from assessment_api.config import settings
from assessment_api.services.storage import LocalStorageService, get_storage_service


async def test_save_and_look_up(tmp_path):
    storage = LocalStorageService(str(tmp_path / "reports"))

    path = await storage.save_bytes(b"%PDF-1.4", "report_a_1.pdf")

    assert path.read_bytes() == b"%PDF-1.4"
    assert await storage.get_file_path("report_a_1.pdf") == path
    assert await storage.get_file_path("report_b_1.pdf") is None


async def test_existing_file_is_not_overwritten(tmp_path):
    storage = LocalStorageService(str(tmp_path))
    await storage.save_bytes(b"first", "report_a_1.pdf")

    with pytest.raises(FileExistsError):
        await storage.save_bytes(b"second", "report_a_1.pdf")

    assert (tmp_path / "report_a_1.pdf").read_bytes() == b"first"


@pytest.mark.parametrize("key", ["", ".env", "../escape.pdf", "sub/report.pdf", "..\\x.pdf"])
async def test_invalid_keys_are_rejected(tmp_path, key):
    storage = LocalStorageService(str(tmp_path))

    with pytest.raises(ValueError):
        await storage.save_bytes(b"x", key)
    assert await storage.get_file_path(key) is None


def test_storage_service_is_reused_per_directory(reports_dir, tmp_path, monkeypatch):
    first = get_storage_service()

    assert get_storage_service() is first
    assert first.base_path == reports_dir
    assert reports_dir.is_dir()

    monkeypatch.setattr(settings, "REPORTS_DIR", str(tmp_path / "other"))
    assert get_storage_service() is not first
