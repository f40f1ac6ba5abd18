"""
Pydantic models for the data handed to templates.

A `PageContext` is built once per request and is the only data a page
template sees besides the request itself. Templates read it as ``logged`` and
``user``.
"""

from pydantic import BaseModel, Field
from typing import List, Optional

from qaapp.database.entities.user import User


class PageUser(BaseModel):
    """
    Public view of a user, as rendered in pages. Never carries the password.
    """
    first_name: str = Field(..., description="First name shown in greetings.", examples=["Mario"])
    last_name: str = Field("", description="Last name.", examples=["Rossi"])
    username: str = Field(..., description="Login name.", examples=["mario"])
    unique_id: int = Field(..., description="Public numeric identifier.", examples=[1])
    user_image: str = Field("", description="Path to the profile image, relative to the static prefix.")
    super_user: bool = False
    """Whether the user has every right on the site."""
    roles: List[str] = Field(default_factory=list, description="Role flags, e.g. 'student', 'teacher'.")
    tags: List[str] = Field(default_factory=list, description="Followed tags.")
    badges: List[str] = Field(default_factory=list, description="Earned badge names.")
    notifications: List[str] = Field(default_factory=list, description="Pending notifications.")

    @classmethod
    def from_entity(cls, user: User) -> "PageUser":
        """Build the public view of a stored `User`, splitting its flat text lists."""
        return cls(
            first_name=user.first_name or "",
            last_name=user.last_name or "",
            username=user.username or "",
            unique_id=user.unique_id or 0,
            user_image=user.user_image or "",
            super_user=bool(user.super_user),
            roles=user.role_list,
            tags=user.tag_list,
            badges=user.badge_list,
            notifications=user.notification_list,
        )


DEMO_USER = PageUser(first_name="Mario", last_name="Rossi", username="mario", unique_id=1)
"""User shown to requests without a valid token while the demo user is enabled."""


class PageContext(BaseModel):
    """
    Data passed to a page template at render time.
    """
    logged: bool
    """Whether the request is rendered for a known user."""
    user: Optional[PageUser] = None
    """The user the page is rendered for; None for anonymous requests."""

    @classmethod
    def for_user(cls, user: PageUser) -> "PageContext":
        return cls(logged=True, user=user)

    @classmethod
    def demo(cls) -> "PageContext":
        return cls(logged=True, user=DEMO_USER.model_copy())

    @classmethod
    def anonymous(cls) -> "PageContext":
        return cls(logged=False, user=None)


class AnswerSummary(BaseModel):
    """An answer as listed under its question."""
    body: str = ""
    user: str = ""


class QuestionSummary(BaseModel):
    """A question with its answers, as listed on the index page."""
    heading: str = Field("", examples=["How to use Go"])
    body: str = ""
    user: str = Field("", description="Username of the author.")
    tags: List[str] = Field(default_factory=list, examples=[["go", "programming"]])
    answered: bool = Field(False, description="True for a closed question.")
    answers: List[AnswerSummary] = Field(default_factory=list)


class TagSummary(BaseModel):
    name: str = ""
    description: str = ""


class BadgeSummary(BaseModel):
    name: str = ""
    description: str = ""
    holders: List[str] = Field(default_factory=list, description="Usernames holding the badge.")


class SiteContent(BaseModel):
    """
    Stored content shared by every page, read once per request.

    Empty when the store cannot be read, so pages still render on a degraded
    start.
    """
    questions: List[QuestionSummary] = Field(default_factory=list)
    tags: List[TagSummary] = Field(default_factory=list)
    badges: List[BadgeSummary] = Field(default_factory=list)
