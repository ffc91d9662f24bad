"""
File storage service for uploaded project images and resumes.
Files live under UPLOAD_DIR and are served publicly at /uploads.
"""
import secrets
import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Optional

from fastapi import UploadFile

from portfolio_api.core.config import settings
from portfolio_api.core.exceptions import ValidationError
from portfolio_api.core.logging import get_logger

logger = get_logger(__name__)

PUBLIC_PREFIX = "/uploads"

RESUME_CONTENT_TYPES = frozenset({
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
})


class FileStorageService:
    """
    Manages file storage for:
    - Project images (uploads/projects)
    - Resumes (uploads/resumes)
    """

    def __init__(self, base_path: Optional[str] = None, max_bytes: Optional[int] = None):
        self.base_path = Path(base_path or settings.UPLOAD_DIR).resolve()
        self.max_bytes = max_bytes or settings.MAX_UPLOAD_BYTES
        self.projects_path = self.base_path / "projects"
        self.resumes_path = self.base_path / "resumes"

        self._ensure_directories()

    def _ensure_directories(self) -> None:
        """Ensure all required directories exist."""
        for path in [self.projects_path, self.resumes_path]:
            path.mkdir(parents=True, exist_ok=True)
            logger.debug(f"Ensured directory exists: {path}")

    def validate_image(self, file: UploadFile) -> None:
        """Reject non-image or oversized uploads before anything is written."""
        content_type = file.content_type or ""
        if not content_type.startswith("image/"):
            raise ValidationError("Only image files are allowed!")
        self._check_size(file)

    def validate_resume(self, file: UploadFile) -> None:
        if (file.content_type or "") not in RESUME_CONTENT_TYPES:
            raise ValidationError("Resume must be a PDF or Word document")
        self._check_size(file)

    def save_project_image(self, file: UploadFile, field_name: str = "images") -> str:
        return self._save(file, self.projects_path, field_name)

    def save_resume(self, file: UploadFile) -> str:
        return self._save(file, self.resumes_path, "resume")

    def save_project_images(self, files: Iterable[UploadFile]) -> list[str]:
        """Validate every image first, then save; returns public paths in upload order."""
        files = list(files)
        for file in files:
            self.validate_image(file)
        return [self.save_project_image(file) for file in files]

    def delete(self, public_path: str) -> bool:
        """
        Delete a file by its public /uploads/... path.

        Args:
            public_path: Path as stored on the record

        Returns:
            True if a file was removed, False if it was already gone
        """
        path = self._resolve_public_path(public_path)
        if path is None:
            logger.warning(f"Refusing to delete path outside upload dir: {public_path}")
            return False
        if not path.is_file():
            logger.info(f"File already deleted or not found: {public_path}")
            return False
        path.unlink()
        logger.info(f"Deleted uploaded file: {path}")
        return True

    def delete_many(self, public_paths: Iterable[str]) -> int:
        return sum(1 for p in public_paths if self.delete(p))

    def _save(self, file: UploadFile, directory: Path, field_name: str) -> str:
        safe_filename = self._sanitize_filename(file.filename or "upload")
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")
        final_filename = f"{field_name}-{timestamp}-{secrets.token_hex(4)}{Path(safe_filename).suffix}"
        file_path = directory / final_filename

        file.file.seek(0)
        with file_path.open("wb") as buffer:
            shutil.copyfileobj(file.file, buffer)

        logger.info(f"Saved uploaded file: {file_path}")
        return f"{PUBLIC_PREFIX}/{file_path.relative_to(self.base_path).as_posix()}"

    def _check_size(self, file: UploadFile) -> None:
        file.file.seek(0, 2)
        size = file.file.tell()
        file.file.seek(0)
        if size > self.max_bytes:
            raise ValidationError(
                f"File {file.filename} exceeds the {self.max_bytes // (1024 * 1024)} MB limit"
            )

    def _resolve_public_path(self, public_path: str) -> Optional[Path]:
        relative = public_path
        if relative.startswith(PUBLIC_PREFIX + "/"):
            relative = relative[len(PUBLIC_PREFIX) + 1:]
        candidate = (self.base_path / relative.lstrip("/")).resolve()
        if self.base_path not in candidate.parents:
            return None
        return candidate

    def _sanitize_filename(self, filename: str) -> str:
        """
        Sanitize a filename to prevent path traversal attacks.

        Args:
            filename: The original filename

        Returns:
            A safe filename
        """
        filename = Path(filename).name

        safe_chars = set("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789._-")
        sanitized = "".join(c if c in safe_chars else "_" for c in filename)

        if "." not in sanitized:
            sanitized = f"{sanitized}.bin"

        return sanitized


# Create a singleton instance
file_storage_service = FileStorageService()
