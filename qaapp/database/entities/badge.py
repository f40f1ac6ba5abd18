"""
Badge ORM Model, mapped to the ``badges`` table.

Badges are achievements; ``users`` lists the usernames holding one.
"""

from qaapp.database.config.connection_engine import declarativeBase
from qaapp.database.helpers.flat_lists import split_flat_list
from sqlalchemy import Integer, TEXT
from sqlalchemy.orm import Mapped, mapped_column
from typing import List, Optional

class Badge(declarativeBase):
    """ORM model for the `badges` table."""

    __tablename__ = "badges"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    name: Mapped[Optional[str]] = mapped_column(TEXT)
    description: Mapped[Optional[str]] = mapped_column(TEXT)
    users: Mapped[Optional[str]] = mapped_column(TEXT)

    @property
    def holders(self) -> List[str]:
        return split_flat_list(self.users)

    def __str__(self) -> str:
        return f"Badge: id:{self.id}, name: {self.name}"
