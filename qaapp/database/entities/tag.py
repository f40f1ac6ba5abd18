"""
Tag ORM Model, mapped to the ``tags`` table.
"""

from qaapp.database.config.connection_engine import declarativeBase
from sqlalchemy import Integer, TEXT
from sqlalchemy.orm import Mapped, mapped_column
from typing import Optional

class Tag(declarativeBase):
    """
    ORM model for the `tags` table.

    Tags are the categories questions are filed under; moderators can be given
    a whole tag instead of single questions.
    """

    __tablename__ = "tags"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    name: Mapped[Optional[str]] = mapped_column(TEXT)
    description: Mapped[Optional[str]] = mapped_column(TEXT)

    def __str__(self) -> str:
        return f"Tag: id:{self.id}, name: {self.name}"
