"""
Tag DAO

Thin data-access layer for the `Tag` ORM entity.
"""

import logging
from typing import List
from sqlalchemy import func, select
from sqlalchemy.orm import Session
from qaapp.database.entities.tag import Tag

logger = logging.getLogger("uvicorn")

class TagDao:
    """
    Data Access Object (DAO) for managing Tag entities.
    """

    def createTag(self, session: Session, tag: Tag) -> Tag:
        try:
            session.add(tag)
            return tag
        except Exception:
            logger.exception("Error in TagDao.createTag")
            raise

    def fetchTags(self, session: Session) -> List[Tag]:
        try:
            return list(session.scalars(select(Tag).order_by(Tag.id)).all())
        except Exception:
            logger.exception("Error in TagDao.fetchTags")
            raise

    def countTags(self, session: Session) -> int:
        try:
            return session.scalar(select(func.count()).select_from(Tag))
        except Exception:
            logger.exception("Error in TagDao.countTags")
            raise
