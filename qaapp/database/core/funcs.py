"""
Service-layer operations used by the HTTP layer and by the bootstrap report.

Functions are wrapped with the `@transactional` decorator, which manages
SQLAlchemy sessions and transactions automatically; callers pass
``engine=...`` and each function receives an injected `session: Session`.
Results are plain values built while the session is open, so nothing returned
here is bound to a closed session.
"""

from typing import Dict, Optional

from sqlalchemy.orm import Session

from qaapp.api.models import (
    AnswerSummary,
    BadgeSummary,
    PageUser,
    QuestionSummary,
    SiteContent,
    TagSummary,
)
from qaapp.database.daos.answer_dao import AnswerDao
from qaapp.database.daos.badge_dao import BadgeDao
from qaapp.database.daos.question_dao import QuestionDao
from qaapp.database.daos.tag_dao import TagDao
from qaapp.database.daos.user_dao import UserDao
from qaapp.database.helpers.transactionManagement import transactional


@transactional
def get_page_user(session: Session, username: str) -> Optional[PageUser]:
    """
    Look up a user by username for the page context.

    Parameters
    ----------
    session : Session
        Active SQLAlchemy session (injected by @transactional).
    username : str
        Username carried by the request's token.

    Returns
    -------
    PageUser | None
        The user's public fields, or None when no row matches.
    """
    users = UserDao().fetchUser(session, username)
    if not users:
        return None
    return PageUser.from_entity(users[0])


@transactional
def table_counts(session: Session) -> Dict[str, int]:
    """Return the number of rows in each store table, keyed by table name."""
    return {
        "users": UserDao().countUsers(session),
        "questions": QuestionDao().countQuestions(session),
        "answers": AnswerDao().countAnswers(session),
        "tags": TagDao().countTags(session),
        "badges": BadgeDao().countBadges(session),
    }


@transactional
def get_site_content(session: Session) -> SiteContent:
    """
    Read the questions (with their answers), tags and badges shown in pages.

    Parameters
    ----------
    session : Session
        Active SQLAlchemy session (injected by @transactional).

    Returns
    -------
    SiteContent
        Rows in insertion order, copied out of the session.
    """
    answer_dao = AnswerDao()
    questions = [
        QuestionSummary(
            heading=question.heading or "",
            body=question.body or "",
            user=question.user or "",
            tags=question.tag_list,
            answered=question.is_answered,
            answers=[
                AnswerSummary(body=answer.body or "", user=answer.user or "")
                for answer in answer_dao.fetchAnswersByQuestion(session, question.id)
            ],
        )
        for question in QuestionDao().fetchQuestions(session)
    ]
    tags = [
        TagSummary(name=tag.name or "", description=tag.description or "")
        for tag in TagDao().fetchTags(session)
    ]
    badges = [
        BadgeSummary(name=badge.name or "", description=badge.description or "", holders=badge.holders)
        for badge in BadgeDao().fetchBadges(session)
    ]
    return SiteContent(questions=questions, tags=tags, badges=badges)
