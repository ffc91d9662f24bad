"""
Project routes. Public reads; admin writes accept multipart image uploads.
"""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlmodel import Session

from portfolio_api.api.deps import AdminDep, get_file_storage
from portfolio_api.core.config import settings
from portfolio_api.core.exceptions import ValidationError
from portfolio_api.db.session import get_session
from portfolio_api.schemas.project import ProjectListResponse, ProjectResponse
from portfolio_api.services.file_storage_service import FileStorageService
from portfolio_api.services.project_service import ProjectService

router = APIRouter(prefix="/projects", tags=["projects"])

SessionDep = Annotated[Session, Depends(get_session)]
StorageDep = Annotated[FileStorageService, Depends(get_file_storage)]


def _check_image_count(images: Optional[List[UploadFile]]) -> None:
    if images and len(images) > settings.MAX_PROJECT_IMAGES:
        raise ValidationError(f"At most {settings.MAX_PROJECT_IMAGES} images per request")


@router.get("", response_model=ProjectListResponse)
def list_projects(session: SessionDep, storage: StorageDep) -> ProjectListResponse:
    projects = ProjectService(session, storage).list()
    return ProjectListResponse(items=[ProjectResponse.model_validate(p) for p in projects])


@router.get("/{project_id}", response_model=ProjectResponse)
def get_project(project_id: str, session: SessionDep, storage: StorageDep) -> ProjectResponse:
    return ProjectResponse.model_validate(ProjectService(session, storage).get(project_id))


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
def create_project(
    _admin: AdminDep,
    session: SessionDep,
    storage: StorageDep,
    title: Annotated[str, Form(min_length=1)],
    description: Annotated[Optional[str], Form()] = None,
    tech_stack: Annotated[Optional[str], Form()] = None,
    repo_link: Annotated[Optional[str], Form()] = None,
    demo_link: Annotated[Optional[str], Form()] = None,
    featured: Annotated[Optional[str], Form()] = None,
    images: Annotated[Optional[List[UploadFile]], File()] = None,
) -> ProjectResponse:
    """
    Create a project.

    ``tech_stack`` may be a JSON array or a comma-separated string;
    ``featured`` is "true" or "false".
    """
    _check_image_count(images)
    project = ProjectService(session, storage).create(
        title=title,
        description=description,
        tech_stack=tech_stack,
        repo_link=repo_link,
        demo_link=demo_link,
        featured=featured,
        images=images,
    )
    return ProjectResponse.model_validate(project)


@router.put("/{project_id}", response_model=ProjectResponse)
def update_project(
    project_id: str,
    _admin: AdminDep,
    session: SessionDep,
    storage: StorageDep,
    title: Annotated[str, Form(min_length=1)],
    description: Annotated[Optional[str], Form()] = None,
    tech_stack: Annotated[Optional[str], Form()] = None,
    repo_link: Annotated[Optional[str], Form()] = None,
    demo_link: Annotated[Optional[str], Form()] = None,
    featured: Annotated[Optional[str], Form()] = None,
    images_to_keep: Annotated[Optional[str], Form()] = None,
    images: Annotated[Optional[List[UploadFile]], File()] = None,
) -> ProjectResponse:
    """
    Update a project. Images not listed in ``images_to_keep`` are deleted.
    """
    _check_image_count(images)
    project = ProjectService(session, storage).update(
        project_id,
        title=title,
        description=description,
        tech_stack=tech_stack,
        repo_link=repo_link,
        demo_link=demo_link,
        featured=featured,
        images_to_keep=images_to_keep,
        images=images,
    )
    return ProjectResponse.model_validate(project)


@router.delete("/{project_id}")
def delete_project(
    project_id: str,
    _admin: AdminDep,
    session: SessionDep,
    storage: StorageDep,
) -> dict:
    ProjectService(session, storage).delete(project_id)
    return {"message": "Deleted successfully"}
