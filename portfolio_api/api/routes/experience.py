"""
Experience routes. The public timeline is served at /experience/journey.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session

from portfolio_api.api.deps import AdminDep
from portfolio_api.db.session import get_session
from portfolio_api.schemas.experience import (
    ExperienceCreate,
    ExperienceListResponse,
    ExperienceResponse,
    ExperienceUpdate,
)
from portfolio_api.services.experience_service import ExperienceService

router = APIRouter(prefix="/experience", tags=["experience"])

SessionDep = Annotated[Session, Depends(get_session)]


@router.get("/journey", response_model=ExperienceListResponse)
def list_experience(
    session: SessionDep,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
) -> ExperienceListResponse:
    experiences, total = ExperienceService(session).list(page=page, limit=limit)
    return ExperienceListResponse(
        experiences=[ExperienceResponse.model_validate(e) for e in experiences],
        total=total,
        page=page,
        limit=limit,
    )


@router.post("", response_model=ExperienceResponse, status_code=status.HTTP_201_CREATED)
def create_experience(
    data: ExperienceCreate,
    _admin: AdminDep,
    session: SessionDep,
) -> ExperienceResponse:
    return ExperienceResponse.model_validate(ExperienceService(session).create(data))


@router.put("/{experience_id}", response_model=ExperienceResponse)
def update_experience(
    experience_id: str,
    data: ExperienceUpdate,
    _admin: AdminDep,
    session: SessionDep,
) -> ExperienceResponse:
    return ExperienceResponse.model_validate(ExperienceService(session).update(experience_id, data))


@router.delete("/{experience_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_experience(experience_id: str, _admin: AdminDep, session: SessionDep) -> Response:
    ExperienceService(session).delete(experience_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
