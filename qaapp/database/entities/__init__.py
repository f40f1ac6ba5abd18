"""
Entities Package — SQLAlchemy 2.0 ORM Models (SQLite, flat text relations)
==========================================================================

The `entities` package defines the ORM models of the application, mapping
the five store tables to Python classes using SQLAlchemy 2.0-typed mappings.
These classes are consumed by DAOs (`daos` package).

Conventions
-----------
- SQLite store, integer autoincrement primary keys
- SQLAlchemy 2.0 style `Mapped[...]` + `mapped_column(...)`
- List-valued relations (tags, votes, moderation lists, badge holders) are
  comma-separated TEXT columns, not foreign keys; entities expose read-only
  list properties that split them

Contents
--------
- User       (`users`)
- Question   (`questions`)
- Answer     (`answers`)
- Tag        (`tags`)
- Badge      (`badges`)

Importing this package registers every table on the shared metadata.
"""

from qaapp.database.entities.user import User
from qaapp.database.entities.question import Question
from qaapp.database.entities.answer import Answer
from qaapp.database.entities.tag import Tag
from qaapp.database.entities.badge import Badge

__all__ = ["User", "Question", "Answer", "Tag", "Badge"]
