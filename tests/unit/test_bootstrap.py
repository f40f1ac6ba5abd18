"""
Unit tests for schema creation and sample data loading.
"""

from pathlib import Path

import bcrypt
import pytest
from sqlalchemy import inspect

from qaapp.database.config.config import Settings
from qaapp.database.config.connection_engine import build_engine
from qaapp.database.core.bootstrap import bootstrap, create_database, create_sample_data
from qaapp.database.core.funcs import get_page_user, get_site_content, table_counts
from qaapp.database.daos.tag_dao import TagDao
from qaapp.database.daos.user_dao import UserDao
from qaapp.database.helpers.transactionManagement import transactional

TABLES = ["users", "questions", "answers", "tags", "badges"]


@pytest.fixture
def engine(db_path: Path):
    engine = build_engine(str(db_path))
    yield engine
    engine.dispose()


class TestCreateDatabase:
    """Tests for create_database."""

    def test_creates_file_and_tables(self, db_path: Path, engine):
        result = create_database(str(db_path))

        assert result.ok
        assert result.created is True
        assert result.tables == TABLES
        assert db_path.exists()
        assert sorted(inspect(engine).get_table_names()) == sorted(TABLES)

    def test_tags_have_separate_name_and_description(self, db_path: Path, engine):
        create_database(str(db_path))

        columns = [column["name"] for column in inspect(engine).get_columns("tags")]

        assert columns == ["id", "name", "description"]

    def test_existing_file_is_left_alone(self, db_path: Path, engine):
        db_path.write_bytes(b"")

        result = create_database(str(db_path))

        assert result.ok
        assert result.created is False
        assert result.tables == []
        assert inspect(engine).get_table_names() == []

    def test_unwritable_location_is_reported(self, tmp_path: Path):
        result = create_database(str(tmp_path / "missing" / "qaApp.db"))

        assert result.created is True
        assert not result.ok
        assert result.tables == []
        assert len(result.errors) == len(TABLES)
        assert result.errors[0].startswith("users: ")


class TestCreateSampleData:
    """Tests for create_sample_data."""

    def test_one_row_per_table(self, db_path: Path, engine):
        create_database(str(db_path))

        result = create_sample_data(str(db_path))

        assert result.ok
        assert result.tables == TABLES
        assert table_counts(engine=engine) == {table: 1 for table in TABLES}

    def test_sample_password_is_hashed(self, db_path: Path, engine):
        create_database(str(db_path))
        create_sample_data(str(db_path))

        @transactional
        def stored_password(session):
            return UserDao().fetchUser(session, "sagaryadav")[0].password

        password = stored_password(engine=engine)

        assert password != "password"
        assert bcrypt.checkpw(b"password", password.encode("utf-8"))

    def test_sample_tag(self, db_path: Path, engine):
        create_database(str(db_path))
        create_sample_data(str(db_path))

        @transactional
        def tags(session):
            return [(tag.name, tag.description) for tag in TagDao().fetchTags(session)]

        assert tags(engine=engine) == [("Go", "Go is a programming language made by Google")]

    def test_site_content_links_answer_to_question(self, db_path: Path, engine):
        create_database(str(db_path))
        create_sample_data(str(db_path))

        content = get_site_content(engine=engine)

        [question] = content.questions
        assert question.heading == "How to use Go"
        assert question.tags == ["go", "programming"]
        assert question.answered is False
        assert [answer.user for answer in question.answers] == ["sagaryadav"]
        assert [tag.name for tag in content.tags] == ["Go"]
        assert [(badge.name, badge.holders) for badge in content.badges] == [("Curious", ["sagaryadav"])]

    def test_site_content_of_empty_store(self, db_path: Path, engine):
        create_database(str(db_path))

        content = get_site_content(engine=engine)

        assert content.questions == []
        assert content.tags == []
        assert content.badges == []

    def test_missing_tables_are_reported_per_table(self, db_path: Path):
        db_path.write_bytes(b"")

        result = create_sample_data(str(db_path))

        assert not result.ok
        assert result.tables == []
        assert [error.split(":")[0] for error in result.errors] == TABLES


class TestBootstrap:
    """Tests for running both steps."""

    def test_second_run_keeps_schema_but_duplicates_rows(self, db_path: Path, engine):
        settings = Settings(_env_file=None, DB_PATH=str(db_path))

        first_schema, first_data = bootstrap(settings)
        second_schema, second_data = bootstrap(settings)

        # schema: created once, untouched the second time
        assert first_schema.created is True
        assert first_schema.tables == TABLES
        assert second_schema.created is False
        assert second_schema.tables == []
        assert sorted(inspect(engine).get_table_names()) == sorted(TABLES)

        # data: appended on every run
        assert first_data.ok and second_data.ok
        assert table_counts(engine=engine) == {table: 2 for table in TABLES}

    def test_duplicate_users_resolve_to_the_oldest(self, db_path: Path, engine):
        settings = Settings(_env_file=None, DB_PATH=str(db_path))
        bootstrap(settings)
        bootstrap(settings)

        user = get_page_user(engine=engine, username="sagaryadav")

        assert user.first_name == "Sagar"
        assert user.unique_id == 1
        assert get_page_user(engine=engine, username="nobody") is None
