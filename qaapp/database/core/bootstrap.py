"""
Store bootstrap: schema creation and sample data.

Both steps return a `BootstrapResult` instead of raising, so the caller (the
application lifespan) decides whether a failure aborts startup or is logged
and tolerated. Each step opens its own engine and disposes it before
returning; nothing is held open between steps.

- `create_database` creates the store file and its five tables, only when the
  file does not exist yet. An existing store is never migrated or verified.
- `create_sample_data` appends one fixed row to each table on every call.
  There is no existence check, so every restart adds another copy.
"""

import logging
import os
from typing import List

from pydantic import BaseModel, Field
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from qaapp.database.config.config import Settings
from qaapp.database.config.connection_engine import build_engine
from qaapp.database.daos.answer_dao import AnswerDao
from qaapp.database.daos.badge_dao import BadgeDao
from qaapp.database.daos.question_dao import QuestionDao
from qaapp.database.daos.tag_dao import TagDao
from qaapp.database.daos.user_dao import UserDao
from qaapp.database.entities import Answer, Badge, Question, Tag, User
from qaapp.database.helpers.transactionManagement import transactional

logger = logging.getLogger("uvicorn")

TABLE_ENTITIES = (User, Question, Answer, Tag, Badge)
"""Entities whose tables make up the store, in creation order."""


class BootstrapResult(BaseModel):
    """
    Outcome of one bootstrap step.

    Attributes
    ----------
    step : str
        ``"schema"`` or ``"sample_data"``.
    created : bool
        For the schema step, whether the store file was absent and creation
        was attempted. Always False for the sample data step.
    tables : list[str]
        Tables the step completed for (created, or received their row).
    errors : list[str]
        One ``"<table>: <error>"`` entry per failed table.
    """
    step: str
    created: bool = False
    tables: List[str] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def create_database(db_path: str) -> BootstrapResult:
    """
    Create the store and its tables if the store file does not exist.

    Tables are created one at a time; a failing table is recorded and the
    remaining ones are still attempted, so a partial schema is possible.

    Parameters
    ----------
    db_path : str
        Path of the SQLite store file.

    Returns
    -------
    BootstrapResult
        ``created=False`` with no tables when the file already existed.
    """
    result = BootstrapResult(step="schema")
    if os.path.exists(db_path):
        logger.info("Store %s found, skipping schema creation", db_path)
        return result

    result.created = True
    engine = build_engine(db_path)
    try:
        for entity in TABLE_ENTITIES:
            table = entity.__table__
            try:
                table.create(engine)
            except SQLAlchemyError as e:
                logger.error("Could not create table %s: %s", table.name, e)
                result.errors.append(f"{table.name}: {e}")
            else:
                result.tables.append(table.name)
    finally:
        engine.dispose()

    logger.info("Created store %s with tables: %s", db_path, ", ".join(result.tables) or "none")
    return result


@transactional
def insert_sample_user(session: Session) -> None:
    UserDao().createUser(session, User(
        first_name="Sagar",
        last_name="Yadav",
        username="sagaryadav",
        unique_id=1,
        password="password",
        user_tags="",
        user_type="",
        user_image="",
        super_user=False,
        mod_tags="",
        mod_questions="",
        badges="",
        notifications="",
    ))


@transactional
def insert_sample_question(session: Session) -> None:
    QuestionDao().createQuestion(session, Question(
        heading="How to use Go",
        body="Go is a programming language",
        tags="go, programming",
        image="",
        date="",
        time="",
        user="sagaryadav",
        answers="",
        votes="",
        views=0,
        open=True,
    ))


@transactional
def insert_sample_answer(session: Session) -> None:
    AnswerDao().createAnswer(session, Answer(
        body="Go is a programming language",
        date="",
        time="",
        user="sagaryadav",
        votes="",
        views=0,
        qn=1,
    ))


@transactional
def insert_sample_tag(session: Session) -> None:
    TagDao().createTag(session, Tag(
        name="Go",
        description="Go is a programming language made by Google",
    ))


@transactional
def insert_sample_badge(session: Session) -> None:
    BadgeDao().createBadge(session, Badge(
        name="Curious",
        description="Asks questions",
        users="sagaryadav",
    ))


SAMPLE_INSERTS = (
    ("users", insert_sample_user),
    ("questions", insert_sample_question),
    ("answers", insert_sample_answer),
    ("tags", insert_sample_tag),
    ("badges", insert_sample_badge),
)
"""(table, insert function) pairs run by `create_sample_data`, in order."""


def create_sample_data(db_path: str) -> BootstrapResult:
    """
    Insert one sample row into each table, each in its own transaction.

    Parameters
    ----------
    db_path : str
        Path of the SQLite store file.

    Returns
    -------
    BootstrapResult
        ``tables`` lists the tables that received their row.
    """
    result = BootstrapResult(step="sample_data")
    engine = build_engine(db_path)
    try:
        for table, insert in SAMPLE_INSERTS:
            try:
                insert(engine=engine)
            except SQLAlchemyError as e:
                logger.error("Could not insert sample row into %s: %s", table, e)
                result.errors.append(f"{table}: {e}")
            else:
                result.tables.append(table)
    finally:
        engine.dispose()
    return result


def bootstrap(settings: Settings) -> List[BootstrapResult]:
    """Run schema creation, then sample data loading, against `settings.DB_PATH`."""
    return [
        create_database(settings.DB_PATH),
        create_sample_data(settings.DB_PATH),
    ]
