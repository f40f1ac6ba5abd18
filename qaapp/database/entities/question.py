"""
Question ORM Model
==================

The ``Question`` ORM model maps to the ``questions`` table.

Notes
~~~~~
- ``date`` and ``time`` are separate text fields, not a timestamp.
- ``user`` is the authoring username, copied rather than referenced.
- ``answers``, ``votes`` and ``tags`` are comma-separated text.
- ``open`` follows the site's own convention: a *closed* question
  (``open = False``) has been successfully answered, but it still accepts new
  answers. Nothing in the application closes a question yet.
"""

from qaapp.database.config.connection_engine import declarativeBase
from qaapp.database.helpers.flat_lists import split_flat_list
from sqlalchemy import Integer, Boolean, TEXT
from sqlalchemy.orm import Mapped, mapped_column
from typing import List, Optional

class Question(declarativeBase):
    """
    ORM model for the `questions` table.

    Attributes
    ----------
    id : int
        Primary key, assigned by the store.
    heading : str
        One-line title of the question.
    body : str
        Full text of the question.
    tags : str
        Tags the question is filed under.
    image : str
        Paths of attached images.
    date, time : str
        Posting date and time.
    user : str
        Username of the author.
    answers : str
        Ids of the answers posted to the question.
    votes : str
        Votes cast on the question.
    views : int
        View counter.
    open : bool
        False once the question has been successfully answered.
    """

    __tablename__ = "questions"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    """Primary key. Autoincrement id of the question."""

    heading: Mapped[Optional[str]] = mapped_column(TEXT)
    body: Mapped[Optional[str]] = mapped_column(TEXT)
    tags: Mapped[Optional[str]] = mapped_column(TEXT)
    image: Mapped[Optional[str]] = mapped_column(TEXT)
    date: Mapped[Optional[str]] = mapped_column(TEXT)
    time: Mapped[Optional[str]] = mapped_column(TEXT)

    user: Mapped[Optional[str]] = mapped_column(TEXT)
    """Username of the author (denormalized)."""

    answers: Mapped[Optional[str]] = mapped_column(TEXT)
    votes: Mapped[Optional[str]] = mapped_column(TEXT)
    views: Mapped[Optional[int]] = mapped_column(Integer)

    open: Mapped[Optional[bool]] = mapped_column(Boolean)
    """Open/closed status. Closed means answered, not locked."""

    @property
    def tag_list(self) -> List[str]:
        return split_flat_list(self.tags)

    @property
    def is_answered(self) -> bool:
        """True for a closed question."""
        return not self.open

    def __str__(self) -> str:
        return f"Question: id:{self.id}, heading: {self.heading}, user: {self.user}"
