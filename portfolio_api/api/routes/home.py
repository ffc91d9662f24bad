"""
Home routes: public read, admin upsert of the landing page hero.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlmodel import Session

from portfolio_api.api.deps import AdminDep
from portfolio_api.db.session import get_session
from portfolio_api.schemas.profile import HomeResponse, HomeUpsert
from portfolio_api.services.profile_service import HomeService

router = APIRouter(prefix="/home", tags=["home"])


@router.get("")
def get_home(session: Annotated[Session, Depends(get_session)]) -> dict:
    """Return the home content, or an empty object before it is first set."""
    home = HomeService(session).get()
    if home is None:
        return {}
    return HomeResponse.model_validate(home).model_dump(mode="json")


@router.post("", response_model=HomeResponse)
@router.put("", response_model=HomeResponse)
def upsert_home(
    data: HomeUpsert,
    _admin: AdminDep,
    session: Annotated[Session, Depends(get_session)],
) -> HomeResponse:
    home = HomeService(session).upsert(data)
    return HomeResponse.model_validate(home)
