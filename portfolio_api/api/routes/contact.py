"""
Contact routes: anyone may submit; only admins read or delete the inbox.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session

from portfolio_api.api.deps import AdminDep
from portfolio_api.db.session import get_session
from portfolio_api.schemas.contact import (
    ContactCreate,
    ContactListResponse,
    ContactResponse,
    ContactSubmitResponse,
)
from portfolio_api.services.contact_service import ContactService

router = APIRouter(prefix="/contact", tags=["contact"])

SessionDep = Annotated[Session, Depends(get_session)]


@router.post("", response_model=ContactSubmitResponse, status_code=status.HTTP_201_CREATED)
def submit_contact(data: ContactCreate, session: SessionDep) -> ContactSubmitResponse:
    contact = ContactService(session).submit(data)
    return ContactSubmitResponse(submission=ContactResponse.model_validate(contact))


@router.get("", response_model=ContactListResponse)
def list_contacts(
    _admin: AdminDep,
    session: SessionDep,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
) -> ContactListResponse:
    contacts, total = ContactService(session).list(page=page, limit=limit)
    return ContactListResponse(
        contacts=[ContactResponse.model_validate(c) for c in contacts],
        total=total,
        page=page,
        limit=limit,
    )


@router.delete("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_contact(contact_id: str, _admin: AdminDep, session: SessionDep) -> Response:
    ContactService(session).delete(contact_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
