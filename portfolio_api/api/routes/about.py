"""
About routes. Writes are multipart so a resume can be uploaded with the text.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlmodel import Session

from portfolio_api.api.deps import AdminDep, get_file_storage
from portfolio_api.db.session import get_session
from portfolio_api.schemas.profile import AboutResponse
from portfolio_api.services.file_storage_service import FileStorageService
from portfolio_api.services.profile_service import AboutService

router = APIRouter(prefix="/about", tags=["about"])


@router.get("")
def get_about(
    session: Annotated[Session, Depends(get_session)],
    storage: Annotated[FileStorageService, Depends(get_file_storage)],
) -> dict:
    """Return the about content, or an empty object before it is first set."""
    about = AboutService(session, storage).get()
    if about is None:
        return {}
    return AboutResponse.model_validate(about).model_dump(mode="json")


@router.post("", response_model=AboutResponse)
@router.put("", response_model=AboutResponse)
def upsert_about(
    _admin: AdminDep,
    session: Annotated[Session, Depends(get_session)],
    storage: Annotated[FileStorageService, Depends(get_file_storage)],
    content: Annotated[str, Form(min_length=1)],
    frontend_focus: Annotated[Optional[str], Form()] = None,
    performance: Annotated[Optional[str], Form()] = None,
    resume: Annotated[Optional[UploadFile], File()] = None,
) -> AboutResponse:
    about = AboutService(session, storage).upsert(
        content=content,
        frontend_focus=frontend_focus,
        performance=performance,
        resume=resume,
    )
    return AboutResponse.model_validate(about)
