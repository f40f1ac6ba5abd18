"""
DAOs Package — Data Access Layer (SQLAlchemy 2.0)
=================================================

The `daos` package provides the Data Access Layer for the application.
It encapsulates all interactions with SQLAlchemy ORM entities, providing
small create / fetch / count APIs while hiding direct query details.

Conventions
-----------
- SQLAlchemy 2.0 `select(...)` queries
- Session lifecycle (open/commit/rollback) is handled by callers
- DAOs log and re-raise so upper layers decide error policy

Contents
--------
- UserDao
    * Creates users with password hashing
    * Fetches users by username; lists and counts users

- QuestionDao
    * Creates questions (views default to 0, status to open); lists and counts

- AnswerDao
    * Creates answers; fetches the answers of a question; counts

- TagDao / BadgeDao
    * Create, list and count rows
"""
