"""
Answer DAO

Thin data-access layer for the `Answer` ORM entity.
"""

import logging
from typing import List
from sqlalchemy import func, select
from sqlalchemy.orm import Session
from qaapp.database.entities.answer import Answer

logger = logging.getLogger("uvicorn")

class AnswerDao:
    """
    Data Access Object (DAO) for managing Answer entities.
    """

    def createAnswer(self, session: Session, answer: Answer) -> Answer:
        try:
            if answer.views is None:
                answer.views = 0
            session.add(answer)
            return answer
        except Exception:
            logger.exception("Error in AnswerDao.createAnswer")
            raise

    def fetchAnswersByQuestion(self, session: Session, question_id: int) -> List[Answer]:
        """
        Fetch the answers posted to a question, oldest first.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        question_id : int
            Id of the parent question (matched against ``Answer.qn``).
        """
        try:
            stmt = select(Answer).where(Answer.qn == question_id).order_by(Answer.id)
            return list(session.scalars(stmt).all())
        except Exception:
            logger.exception("Error in AnswerDao.fetchAnswersByQuestion")
            raise

    def countAnswers(self, session: Session) -> int:
        try:
            return session.scalar(select(func.count()).select_from(Answer))
        except Exception:
            logger.exception("Error in AnswerDao.countAnswers")
            raise
