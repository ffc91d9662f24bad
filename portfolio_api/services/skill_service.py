"""
Skill service: paginated listing with category filter, and admin CRUD.
"""
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from sqlmodel import Session, func, select

from portfolio_api.core.exceptions import NotFoundError, ValidationError
from portfolio_api.core.logging import get_logger
from portfolio_api.models.skill import Skill, SkillCategory
from portfolio_api.schemas.skill import SkillCreate, SkillUpdate

logger = get_logger(__name__)


class SkillService:
    def __init__(self, session: Session):
        self.session = session

    def list(
        self,
        page: int = 1,
        limit: int = 20,
        category: Optional[str] = None,
    ) -> Tuple[List[Skill], int]:
        """
        List skills, optionally filtered by category (case-insensitive).

        Returns:
            The requested page of skills and the total matching count
        """
        statement = select(Skill)
        count_statement = select(func.count()).select_from(Skill)
        if category:
            try:
                wanted = SkillCategory(category.strip().upper())
            except ValueError:
                raise ValidationError(f"Unknown skill category: {category}")
            statement = statement.where(Skill.category == wanted)
            count_statement = count_statement.where(Skill.category == wanted)

        skills = self.session.exec(
            statement.order_by(Skill.name).offset((page - 1) * limit).limit(limit)
        ).all()
        total = self.session.exec(count_statement).one()
        return list(skills), total

    def get(self, skill_id: str) -> Skill:
        skill = self.session.get(Skill, skill_id)
        if skill is None:
            raise NotFoundError("Skill not found")
        return skill

    def create(self, data: SkillCreate) -> Skill:
        skill = Skill(**data.model_dump())
        self.session.add(skill)
        self.session.commit()
        self.session.refresh(skill)
        logger.info(f"Created skill {skill.id} ({skill.name})")
        return skill

    def update(self, skill_id: str, data: SkillUpdate) -> Skill:
        skill = self.get(skill_id)
        # None means "leave unchanged"
        for key, value in data.model_dump(exclude_none=True).items():
            setattr(skill, key, value)
        skill.updated_at = datetime.now(timezone.utc)
        self.session.add(skill)
        self.session.commit()
        self.session.refresh(skill)
        logger.info(f"Updated skill {skill.id}")
        return skill

    def delete(self, skill_id: str) -> None:
        skill = self.get(skill_id)
        self.session.delete(skill)
        self.session.commit()
        logger.info(f"Deleted skill {skill_id}")
