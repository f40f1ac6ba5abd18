"""
Unit tests for page context models, token helpers and flat text lists.
"""

from qaapp.api.models import PageContext, PageUser
from qaapp.api.utils import create_access_token, verify_token
from qaapp.database.entities import Badge, Question, User
from qaapp.database.helpers.flat_lists import split_flat_list


class TestPageContext:
    """Tests for the PageContext variants."""

    def test_demo_is_logged_in_mario(self):
        context = PageContext.demo()

        assert context.logged is True
        assert context.user.first_name == "Mario"
        assert context.user.last_name == "Rossi"
        assert context.user.username == "mario"
        assert context.user.unique_id == 1

    def test_demo_returns_independent_copies(self):
        PageContext.demo().user.first_name = "Changed"

        assert PageContext.demo().user.first_name == "Mario"

    def test_anonymous(self):
        context = PageContext.anonymous()

        assert context.logged is False
        assert context.user is None

    def test_for_user(self):
        user = PageUser(first_name="Ada", username="ada", unique_id=7)

        context = PageContext.for_user(user)

        assert context.logged is True
        assert context.user.username == "ada"


class TestPageUser:
    """Tests for building PageUser from a stored User."""

    def test_from_entity_splits_flat_lists(self):
        user = User(
            first_name="Sagar",
            last_name="Yadav",
            username="sagaryadav",
            unique_id=1,
            password="$2b$12$hash",
            user_type="student, teacher",
            user_tags="go,python",
            badges="Curious",
            notifications="",
            super_user=True,
        )

        page_user = PageUser.from_entity(user)

        assert page_user.roles == ["student", "teacher"]
        assert page_user.tags == ["go", "python"]
        assert page_user.badges == ["Curious"]
        assert page_user.notifications == []
        assert page_user.super_user is True
        assert "password" not in page_user.model_dump()

    def test_from_entity_tolerates_nulls(self):
        page_user = PageUser.from_entity(User(username="bare"))

        assert page_user.first_name == ""
        assert page_user.unique_id == 0
        assert page_user.roles == []


class TestTokens:
    """Tests for the JWT helpers."""

    def test_subject_round_trip(self):
        token = create_access_token({"sub": "sagaryadav"})

        assert verify_token(token) == "sagaryadav"

    def test_garbage_token(self):
        assert verify_token("not-a-jwt") is None

    def test_tampered_token(self):
        token = create_access_token({"sub": "sagaryadav"})

        assert verify_token(token[:-2] + "xx") is None


class TestFlatLists:
    """Tests for the comma-separated list helpers and entity properties."""

    def test_split(self):
        assert split_flat_list("go, programming") == ["go", "programming"]
        assert split_flat_list(" a ,, b ,") == ["a", "b"]
        assert split_flat_list("") == []
        assert split_flat_list(None) == []

    def test_question_status_is_inverted(self):
        question = Question(heading="q", tags="go, programming", open=False)

        assert question.tag_list == ["go", "programming"]
        assert question.is_answered is True
        assert Question(open=True).is_answered is False

    def test_badge_holders(self):
        assert Badge(users="sagaryadav, mario").holders == ["sagaryadav", "mario"]
