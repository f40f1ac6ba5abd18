"""
Connection Engine (SQLAlchemy)

Purpose
-------
Centralizes database initialization for the application:
- Builds a SQLAlchemy connection URL for the SQLite store file.
- Creates Engines (connection pool + SQL execution entry point) on demand.
- Defines shared MetaData for table and schema objects.
- Exposes a Declarative Base class for ORM models.

Notes
-----
- Engines are built per caller instead of at import time: the bootstrap steps
  open and dispose their own engine, while the running app keeps a single one
  on ``app.state`` for request-time lookups.
- All ORM models must inherit from `declarativeBase` to participate in schema
  creation.
"""


from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.schema import MetaData


def build_connection_url(db_path: str) -> URL:
    """Return the SQLAlchemy URL of the SQLite store at `db_path`."""
    return URL.create(drivername="sqlite", database=db_path)


def build_engine(db_path: str) -> Engine:
    """
    Create an Engine bound to the store file.

    Parameters
    ----------
    db_path : str
        Filesystem path of the SQLite store. The file is created by SQLite on
        first connection, not by this call.

    Returns
    -------
    Engine
        A new engine. Callers own it and should ``dispose()`` it when done.
    """
    return create_engine(
        build_connection_url(db_path),
        connect_args={"check_same_thread": False},
    )


# --------------------------------------------------------------------
# Metadata object: stores schema-level information about tables,
# constraints, indexes, etc. Shared across all models.
# --------------------------------------------------------------------
metadata = MetaData()
"""
Metadata object: Stores schema-level information about tables, constraints, indexes, etc. Shared across all models.
"""
# --------------------------------------------------------------------
# Declarative Base: root class for ORM models.
# --------------------------------------------------------------------
declarativeBase = declarative_base(metadata=metadata)
"""Declarative Base: Root class for ORM models.
All model classes should inherit from this to gain ORM features and automatic schema generation.
 """
