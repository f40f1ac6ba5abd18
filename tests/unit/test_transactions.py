"""
Unit tests for the @transactional decorator.
"""

from pathlib import Path

import pytest

from qaapp.database.config.connection_engine import build_engine
from qaapp.database.core.bootstrap import create_database
from qaapp.database.core.funcs import table_counts
from qaapp.database.daos.tag_dao import TagDao
from qaapp.database.entities import Tag
from qaapp.database.helpers.transactionManagement import db_session_context, transactional


@pytest.fixture
def engine(db_path: Path):
    create_database(str(db_path))
    engine = build_engine(str(db_path))
    yield engine
    engine.dispose()


@transactional
def add_tag(session, name):
    TagDao().createTag(session, Tag(name=name, description=""))


@transactional
def add_tag_then_fail(session, name):
    TagDao().createTag(session, Tag(name=name, description=""))
    session.flush()
    raise RuntimeError("boom")


@transactional
def add_two_tags(session):
    add_tag(name="outer")
    add_tag(name="inner")
    return db_session_context.get() is session


def test_commits(engine):
    add_tag(engine=engine, name="python")

    assert table_counts(engine=engine)["tags"] == 1


def test_rolls_back_and_reraises(engine):
    with pytest.raises(RuntimeError, match="boom"):
        add_tag_then_fail(engine=engine, name="python")

    assert table_counts(engine=engine)["tags"] == 0
    assert db_session_context.get() is None


def test_nested_calls_share_the_session(engine):
    assert add_two_tags(engine=engine) is True
    assert table_counts(engine=engine)["tags"] == 2


def test_engine_required_without_active_session():
    with pytest.raises(ValueError, match="needs an engine"):
        add_tag(name="python")
