"""
Answer ORM Model, mapped to the ``answers`` table.

``qn`` holds the id of the parent question; it is a plain integer column, the
store does not enforce that the question exists.
"""

from qaapp.database.config.connection_engine import declarativeBase
from sqlalchemy import Integer, TEXT
from sqlalchemy.orm import Mapped, mapped_column
from typing import Optional

class Answer(declarativeBase):
    """ORM model for the `answers` table."""

    __tablename__ = "answers"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    body: Mapped[Optional[str]] = mapped_column(TEXT)
    date: Mapped[Optional[str]] = mapped_column(TEXT)
    time: Mapped[Optional[str]] = mapped_column(TEXT)
    user: Mapped[Optional[str]] = mapped_column(TEXT)
    votes: Mapped[Optional[str]] = mapped_column(TEXT)
    views: Mapped[Optional[int]] = mapped_column(Integer)

    qn: Mapped[Optional[int]] = mapped_column(Integer)
    """Id of the question this answer belongs to."""

    def __str__(self) -> str:
        return f"Answer: id:{self.id}, question: {self.qn}, user: {self.user}"
