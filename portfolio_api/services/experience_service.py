"""
Experience service for the journey timeline.
"""
from datetime import datetime, timezone
from typing import List, Tuple

from sqlmodel import Session, col, func, select

from portfolio_api.core.exceptions import NotFoundError
from portfolio_api.core.logging import get_logger
from portfolio_api.models.experience import Experience
from portfolio_api.schemas.experience import ExperienceCreate, ExperienceUpdate

logger = get_logger(__name__)


class ExperienceService:
    def __init__(self, session: Session):
        self.session = session

    def list(self, page: int = 1, limit: int = 10) -> Tuple[List[Experience], int]:
        """Newest positions first."""
        statement = (
            select(Experience)
            .order_by(col(Experience.start_date).desc())
            .offset((page - 1) * limit)
            .limit(limit)
        )
        experiences = self.session.exec(statement).all()
        total = self.session.exec(select(func.count()).select_from(Experience)).one()
        return list(experiences), total

    def get(self, experience_id: str) -> Experience:
        experience = self.session.get(Experience, experience_id)
        if experience is None:
            raise NotFoundError("Experience entry not found")
        return experience

    def create(self, data: ExperienceCreate) -> Experience:
        experience = Experience(**data.model_dump())
        self.session.add(experience)
        self.session.commit()
        self.session.refresh(experience)
        logger.info(f"Created experience {experience.id} at {experience.company}")
        return experience

    def update(self, experience_id: str, data: ExperienceUpdate) -> Experience:
        """
        Apply only the fields the client sent.
        Required columns are never cleared by an explicit null.
        """
        experience = self.get(experience_id)
        changes = data.model_dump(exclude_unset=True)
        for key, value in changes.items():
            if value is None and key in ("role", "company", "start_date"):
                continue
            setattr(experience, key, value)
        experience.updated_at = datetime.now(timezone.utc)
        self.session.add(experience)
        self.session.commit()
        self.session.refresh(experience)
        logger.info(f"Updated experience {experience.id}")
        return experience

    def delete(self, experience_id: str) -> None:
        experience = self.get(experience_id)
        self.session.delete(experience)
        self.session.commit()
        logger.info(f"Deleted experience {experience_id}")
