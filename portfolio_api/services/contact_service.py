"""
Contact service: public submissions and the admin inbox.
"""
from typing import List, Tuple

from sqlmodel import Session, col, func, select

from portfolio_api.core.exceptions import NotFoundError, ValidationError
from portfolio_api.core.logging import get_logger
from portfolio_api.models.contact import Contact
from portfolio_api.schemas.contact import ContactCreate

logger = get_logger(__name__)


class ContactService:
    def __init__(self, session: Session):
        self.session = session

    def submit(self, data: ContactCreate) -> Contact:
        if not data.name.strip() or not data.message.strip():
            raise ValidationError("Name, email, and message are required fields.")
        contact = Contact(
            name=data.name.strip(),
            email=str(data.email),
            message=data.message.strip(),
        )
        self.session.add(contact)
        self.session.commit()
        self.session.refresh(contact)
        logger.info(f"Contact submission {contact.id} received")
        return contact

    def list(self, page: int = 1, limit: int = 20) -> Tuple[List[Contact], int]:
        statement = (
            select(Contact)
            .order_by(col(Contact.created_at).desc())
            .offset((page - 1) * limit)
            .limit(limit)
        )
        contacts = self.session.exec(statement).all()
        total = self.session.exec(select(func.count()).select_from(Contact)).one()
        return list(contacts), total

    def delete(self, contact_id: str) -> None:
        contact = self.session.get(Contact, contact_id)
        if contact is None:
            raise NotFoundError("Contact submission not found")
        self.session.delete(contact)
        self.session.commit()
        logger.info(f"Deleted contact submission {contact_id}")
