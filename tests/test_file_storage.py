"""
Tests for FileStorageService.
"""

import io
from pathlib import Path

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from portfolio_api.core.exceptions import ValidationError
from portfolio_api.services.file_storage_service import FileStorageService


def _upload(filename: str, content: bytes, content_type: str) -> UploadFile:
    return UploadFile(
        file=io.BytesIO(content),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


@pytest.fixture(name="storage")
def storage_fixture(tmp_path: Path) -> FileStorageService:
    return FileStorageService(base_path=str(tmp_path / "uploads"), max_bytes=1024)


def test_directories_created(storage: FileStorageService) -> None:
    assert storage.projects_path.is_dir()
    assert storage.resumes_path.is_dir()


def test_sanitize_filename(storage: FileStorageService) -> None:
    assert storage._sanitize_filename("../../etc/passwd") == "passwd.bin"
    assert storage._sanitize_filename("my photo (1).png") == "my_photo__1_.png"


def test_save_project_image_returns_public_path(storage: FileStorageService) -> None:
    public_path = storage.save_project_image(_upload("shot.png", b"png-bytes", "image/png"))
    assert public_path.startswith("/uploads/projects/images-")
    assert public_path.endswith(".png")
    stored = storage.base_path / public_path.removeprefix("/uploads/")
    assert stored.read_bytes() == b"png-bytes"


def test_validate_image_rejects_other_types(storage: FileStorageService) -> None:
    with pytest.raises(ValidationError):
        storage.validate_image(_upload("doc.pdf", b"%PDF", "application/pdf"))


def test_validate_image_rejects_oversized(storage: FileStorageService) -> None:
    with pytest.raises(ValidationError):
        storage.validate_image(_upload("big.png", b"x" * 2048, "image/png"))


def test_save_project_images_validates_before_writing(storage: FileStorageService) -> None:
    files = [
        _upload("a.png", b"a", "image/png"),
        _upload("b.txt", b"b", "text/plain"),
    ]
    with pytest.raises(ValidationError):
        storage.save_project_images(files)
    assert list(storage.projects_path.iterdir()) == []


def test_validate_resume(storage: FileStorageService) -> None:
    storage.validate_resume(_upload("cv.pdf", b"%PDF", "application/pdf"))
    with pytest.raises(ValidationError):
        storage.validate_resume(_upload("cv.exe", b"MZ", "application/octet-stream"))


def test_delete(storage: FileStorageService) -> None:
    public_path = storage.save_resume(_upload("cv.pdf", b"%PDF", "application/pdf"))
    assert storage.delete(public_path) is True
    assert storage.delete(public_path) is False


def test_delete_refuses_paths_outside_upload_dir(storage: FileStorageService, tmp_path: Path) -> None:
    outside = tmp_path / "keep.txt"
    outside.write_text("important")
    assert storage.delete("/uploads/../keep.txt") is False
    assert outside.exists()
