"""
Project service: CRUD for showcase projects and their uploaded images.
"""
import json
from datetime import datetime, timezone
from typing import Any, List, Optional, Sequence

from fastapi import UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, select

from portfolio_api.core.exceptions import NotFoundError
from portfolio_api.core.logging import get_logger
from portfolio_api.models.project import Project
from portfolio_api.services.file_storage_service import FileStorageService

logger = get_logger(__name__)


def parse_list_field(value: Optional[str]) -> List[str]:
    """
    Parse a multipart list field.

    Accepts a JSON array, a single JSON scalar, or a comma-separated string.
    """
    if not value:
        return []
    try:
        parsed: Any = json.loads(value)
    except json.JSONDecodeError:
        return [item.strip() for item in value.split(",") if item.strip()]
    if isinstance(parsed, list):
        return [str(item) for item in parsed]
    return [str(parsed)]


def parse_bool_field(value: Optional[str]) -> bool:
    return (value or "").strip().lower() == "true"


class ProjectService:
    """
    Coordinates project rows with image files on disk.
    """

    def __init__(self, session: Session, storage: FileStorageService):
        self.session = session
        self.storage = storage

    def list(self) -> List[Project]:
        statement = select(Project).order_by(col(Project.created_at).desc())
        return list(self.session.exec(statement).all())

    def get(self, project_id: str) -> Project:
        project = self.session.get(Project, project_id)
        if project is None:
            raise NotFoundError("Project not found")
        return project

    def create(
        self,
        title: str,
        description: Optional[str] = None,
        tech_stack: Optional[str] = None,
        repo_link: Optional[str] = None,
        demo_link: Optional[str] = None,
        featured: Optional[str] = None,
        images: Optional[List[UploadFile]] = None,
    ) -> Project:
        image_paths = self.storage.save_project_images(images or [])

        project = Project(
            title=title,
            description=description,
            tech_stack=parse_list_field(tech_stack),
            repo_link=repo_link,
            demo_link=demo_link,
            featured=parse_bool_field(featured),
            images=image_paths,
        )
        self.session.add(project)
        self._commit(discard_on_failure=image_paths)
        self.session.refresh(project)
        logger.info(f"Created project {project.id} with {len(image_paths)} images")
        return project

    def update(
        self,
        project_id: str,
        title: str,
        description: Optional[str] = None,
        tech_stack: Optional[str] = None,
        repo_link: Optional[str] = None,
        demo_link: Optional[str] = None,
        featured: Optional[str] = None,
        images_to_keep: Optional[str] = None,
        images: Optional[List[UploadFile]] = None,
    ) -> Project:
        """
        Update a project.

        Optional text fields left out of the form keep their stored value.
        ``tech_stack``, ``featured`` and the image list are always replaced.
        Stored images missing from ``images_to_keep`` are deleted from disk
        after the commit; new uploads are appended after the kept ones.
        """
        project = self.get(project_id)

        keepers = [img for img in parse_list_field(images_to_keep) if img in project.images]
        to_delete = [img for img in project.images if img not in keepers]
        new_images = self.storage.save_project_images(images or [])

        project.title = title
        if description is not None:
            project.description = description
        if repo_link is not None:
            project.repo_link = repo_link
        if demo_link is not None:
            project.demo_link = demo_link
        project.tech_stack = parse_list_field(tech_stack)
        project.featured = parse_bool_field(featured)
        project.images = keepers + new_images
        project.updated_at = datetime.now(timezone.utc)

        self.session.add(project)
        self._commit(discard_on_failure=new_images)
        self.session.refresh(project)
        self.storage.delete_many(to_delete)
        logger.info(
            f"Updated project {project.id}: kept {len(keepers)}, removed {len(to_delete)}, "
            f"added {len(new_images)} images"
        )
        return project

    def delete(self, project_id: str) -> None:
        """Delete a project and its images. Missing projects are ignored."""
        project = self.session.get(Project, project_id)
        if project is None:
            logger.info(f"Delete requested for missing project {project_id}")
            return
        images = list(project.images)
        self.session.delete(project)
        self._commit()
        self.storage.delete_many(images)
        logger.info(f"Deleted project {project_id}")

    def _commit(self, discard_on_failure: Sequence[str] = ()) -> None:
        """Commit, removing files written for this change if the commit fails."""
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            removed = self.storage.delete_many(discard_on_failure)
            logger.error(f"Commit failed; discarded {removed} newly uploaded files")
            raise
