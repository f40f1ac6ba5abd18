"""
User ORM Model
==============

The ``User`` ORM model represents a member of the Q&A site. It maps to the
``users`` table.

Key features
~~~~~~~~~~~~
- Integer autoincrement primary key (``id``) plus the public ``unique_id``
- Name and username, bcrypt-hashed password
- Flat text lists for followed tags, roles, moderation scope, badges and
  pending notifications (comma-separated, see ``helpers.flat_lists``)
- ``super_user`` flag; at most one user holds it, assigned out-of-band
"""

from qaapp.database.config.connection_engine import declarativeBase
from qaapp.database.helpers.flat_lists import split_flat_list
from sqlalchemy import Integer, Boolean, TEXT
from sqlalchemy.orm import Mapped, mapped_column
from typing import List, Optional

class User(declarativeBase):
    """
    ORM model for the `users` table.

    Attributes
    ----------
    id : int
        Primary key, assigned by the store.
    first_name, last_name : str
        Display name of the user.
    username : str
        Login name; questions and answers reference users by this value.
    unique_id : int
        Public numeric identifier of the user.
    password : str
        Hashed password of the user.
    user_tags : str
        Tags followed by the user.
    user_type : str
        Roles of the user (e.g., "student", "teacher").
    user_image : str
        Path to the profile image.
    super_user : bool
        Whether the user has every right on the site.
    mod_tags : str
        Tags whose questions the user moderates.
    mod_questions : str
        Ids of single questions the user moderates. Authors moderate their
        own questions for 30 days after posting.
    badges : str
        Names of the badges the user earned.
    notifications : str
        Notifications accumulated since the last login.
    """

    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    """Primary key. Autoincrement id of the row."""

    first_name: Mapped[Optional[str]] = mapped_column(TEXT)
    last_name: Mapped[Optional[str]] = mapped_column(TEXT)
    username: Mapped[Optional[str]] = mapped_column(TEXT)

    unique_id: Mapped[Optional[int]] = mapped_column(Integer)
    """Public numeric identifier of the user."""

    password: Mapped[Optional[str]] = mapped_column(TEXT)
    """Hashed password of the user."""

    user_tags: Mapped[Optional[str]] = mapped_column(TEXT)
    user_type: Mapped[Optional[str]] = mapped_column(TEXT)
    user_image: Mapped[Optional[str]] = mapped_column(TEXT)

    super_user: Mapped[Optional[bool]] = mapped_column(Boolean)
    """Super-user flag. Only one user should hold it."""

    mod_tags: Mapped[Optional[str]] = mapped_column(TEXT)
    mod_questions: Mapped[Optional[str]] = mapped_column(TEXT)
    badges: Mapped[Optional[str]] = mapped_column(TEXT)
    notifications: Mapped[Optional[str]] = mapped_column(TEXT)

    @property
    def tag_list(self) -> List[str]:
        return split_flat_list(self.user_tags)

    @property
    def role_list(self) -> List[str]:
        return split_flat_list(self.user_type)

    @property
    def badge_list(self) -> List[str]:
        return split_flat_list(self.badges)

    @property
    def notification_list(self) -> List[str]:
        return split_flat_list(self.notifications)

    def __str__(self) -> str:
        """
        Return a human-readable string representation of the user.

        Returns
        -------
        str
            A formatted string containing the user ID, username, and full name.
        """
        return (
            f"User: id:{self.unique_id}, username: {self.username}, name: {self.first_name} {self.last_name}"
        )
