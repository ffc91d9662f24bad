"""
Services for the home and about singletons.
Both are upserted: the first write creates the row, later writes update it.
"""
from datetime import datetime, timezone
from typing import Optional

from fastapi import UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from portfolio_api.core.logging import get_logger
from portfolio_api.models.profile import About, Home
from portfolio_api.schemas.profile import HomeUpsert
from portfolio_api.services.file_storage_service import FileStorageService

logger = get_logger(__name__)


class HomeService:
    def __init__(self, session: Session):
        self.session = session

    def get(self) -> Optional[Home]:
        return self.session.exec(select(Home)).first()

    def upsert(self, data: HomeUpsert) -> Home:
        home = self.get()
        if home is None:
            home = Home(**data.model_dump())
            logger.info("Creating home content")
        else:
            # Fields the client did not send keep their stored value
            for key, value in data.model_dump(exclude_unset=True).items():
                setattr(home, key, value)
            home.updated_at = datetime.now(timezone.utc)
            logger.info(f"Updating home content {home.id}")

        self.session.add(home)
        self.session.commit()
        self.session.refresh(home)
        return home


class AboutService:
    def __init__(self, session: Session, storage: FileStorageService):
        self.session = session
        self.storage = storage

    def get(self) -> Optional[About]:
        return self.session.exec(select(About)).first()

    def upsert(
        self,
        content: str,
        frontend_focus: Optional[str] = None,
        performance: Optional[str] = None,
        resume: Optional[UploadFile] = None,
    ) -> About:
        """
        Create or update the about section.

        Optional text fields left out of the request keep their stored
        value. A newly uploaded resume replaces the stored one and the old
        file is removed once the row is committed; without an upload the
        existing resume path is kept.
        """
        resume_path: Optional[str] = None
        if resume is not None:
            self.storage.validate_resume(resume)
            resume_path = self.storage.save_resume(resume)

        previous_resume: Optional[str] = None
        about = self.get()
        if about is None:
            about = About(
                content=content,
                frontend_focus=frontend_focus,
                performance=performance,
                resume_path=resume_path,
            )
            logger.info("Creating about content")
        else:
            about.content = content
            if frontend_focus is not None:
                about.frontend_focus = frontend_focus
            if performance is not None:
                about.performance = performance
            if resume_path:
                previous_resume = about.resume_path
                about.resume_path = resume_path
            about.updated_at = datetime.now(timezone.utc)
            logger.info(f"Updating about content {about.id}")

        self.session.add(about)
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            if resume_path:
                self.storage.delete(resume_path)
            raise
        self.session.refresh(about)

        if previous_resume and previous_resume != resume_path:
            self.storage.delete(previous_resume)
        return about
