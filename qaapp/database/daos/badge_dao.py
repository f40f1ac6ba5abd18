"""
Badge DAO

Thin data-access layer for the `Badge` ORM entity. Awarding badges is not
implemented; rows only come from the sample data loader.
"""

import logging
from typing import List
from sqlalchemy import func, select
from sqlalchemy.orm import Session
from qaapp.database.entities.badge import Badge

logger = logging.getLogger("uvicorn")

class BadgeDao:
    """
    Data Access Object (DAO) for managing Badge entities.
    """

    def createBadge(self, session: Session, badge: Badge) -> Badge:
        try:
            session.add(badge)
            return badge
        except Exception:
            logger.exception("Error in BadgeDao.createBadge")
            raise

    def fetchBadges(self, session: Session) -> List[Badge]:
        try:
            return list(session.scalars(select(Badge).order_by(Badge.id)).all())
        except Exception:
            logger.exception("Error in BadgeDao.fetchBadges")
            raise

    def countBadges(self, session: Session) -> int:
        try:
            return session.scalar(select(func.count()).select_from(Badge))
        except Exception:
            logger.exception("Error in BadgeDao.countBadges")
            raise
