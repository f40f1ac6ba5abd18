"""
pytest configuration and fixtures.

Each test gets its own template directory, static directory and store path
under ``tmp_path``, so nothing touches the repository's ``templates/``,
``public/`` or a real ``qaApp.db``.
"""

from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from qaapp.database.config.config import Settings
from qaapp.main import create_app


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """Template directory with marked header/footer and a few test pages."""
    directory = tmp_path / "templates"
    directory.mkdir()
    (directory / "header.html").write_text("<header>HEADER-MARK</header>\n")
    (directory / "footer.html").write_text("<footer>FOOTER-MARK</footer>\n")
    (directory / "index.html").write_text(
        '{% include "header.html" %}'
        "<p>{% if logged %}Hello {{ user.first_name }}{% else %}Hello guest{% endif %}</p>"
        '{% include "footer.html" %}'
    )
    (directory / "about.html").write_text(
        '{% include "header.html" %}<p>About page</p>{% include "footer.html" %}'
    )
    (directory / "broken.html").write_text("{% if %}never closed")
    (directory / "undefined.html").write_text("<p>{{ missing_field }}</p>")
    return directory


@pytest.fixture
def static_dir(tmp_path: Path) -> Path:
    """Static directory with a binary-ish file and a nested stylesheet."""
    directory = tmp_path / "public"
    (directory / "css").mkdir(parents=True)
    (directory / "app.js").write_bytes(b"console.log('qa');\n\x00\x01")
    (directory / "css" / "site.css").write_text("body { color: red; }\n")
    return directory


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "qaApp.db"


@pytest.fixture
def settings(db_path: Path, template_dir: Path, static_dir: Path) -> Settings:
    """Default test configuration, isolated from any `.env` file."""
    return Settings(
        _env_file=None,
        DB_PATH=str(db_path),
        TEMPLATE_DIR=str(template_dir),
        STATIC_DIR=str(static_dir),
    )


@pytest.fixture
def client(settings: Settings) -> Generator[TestClient, None, None]:
    """Client for an app whose lifespan (bootstrap) has run."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client
