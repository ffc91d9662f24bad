"""
Skill routes: public paginated listing, admin CRUD.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session

from portfolio_api.api.deps import AdminDep
from portfolio_api.db.session import get_session
from portfolio_api.schemas.skill import SkillCreate, SkillListResponse, SkillResponse, SkillUpdate
from portfolio_api.services.skill_service import SkillService

router = APIRouter(prefix="/skills", tags=["skills"])

SessionDep = Annotated[Session, Depends(get_session)]


@router.get("", response_model=SkillListResponse)
def list_skills(
    session: SessionDep,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
    category: Optional[str] = None,
) -> SkillListResponse:
    skills, total = SkillService(session).list(page=page, limit=limit, category=category)
    return SkillListResponse(
        skills=[SkillResponse.model_validate(s) for s in skills],
        total=total,
        page=page,
        limit=limit,
    )


@router.post("", response_model=SkillResponse, status_code=status.HTTP_201_CREATED)
def create_skill(data: SkillCreate, _admin: AdminDep, session: SessionDep) -> SkillResponse:
    return SkillResponse.model_validate(SkillService(session).create(data))


@router.put("/{skill_id}", response_model=SkillResponse)
def update_skill(
    skill_id: str,
    data: SkillUpdate,
    _admin: AdminDep,
    session: SessionDep,
) -> SkillResponse:
    return SkillResponse.model_validate(SkillService(session).update(skill_id, data))


@router.delete("/{skill_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_skill(skill_id: str, _admin: AdminDep, session: SessionDep) -> Response:
    SkillService(session).delete(skill_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
