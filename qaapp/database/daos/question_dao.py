"""
Question DAO

Thin data-access layer for the `Question` ORM entity. The caller supplies the
session and owns the transaction; failures are logged and re-raised.
"""

import logging
from typing import List
from sqlalchemy import func, select
from sqlalchemy.orm import Session
from qaapp.database.entities.question import Question

logger = logging.getLogger("uvicorn")

class QuestionDao:
    """
    Data Access Object (DAO) for managing Question entities.
    """

    def createQuestion(self, session: Session, question: Question) -> Question:
        """
        Stage a new question.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        question : Question
            Question entity to insert. ``views`` defaults to 0 and ``open`` to
            True when left unset.

        Returns
        -------
        Question
            The staged entity (its ``id`` is assigned on flush).
        """
        try:
            if question.views is None:
                question.views = 0
            if question.open is None:
                question.open = True
            session.add(question)
            return question
        except Exception:
            logger.exception("Error in QuestionDao.createQuestion")
            raise

    def fetchQuestions(self, session: Session) -> List[Question]:
        """Return every question, oldest first."""
        try:
            return list(session.scalars(select(Question).order_by(Question.id)).all())
        except Exception:
            logger.exception("Error in QuestionDao.fetchQuestions")
            raise

    def countQuestions(self, session: Session) -> int:
        try:
            return session.scalar(select(func.count()).select_from(Question))
        except Exception:
            logger.exception("Error in QuestionDao.countQuestions")
            raise
