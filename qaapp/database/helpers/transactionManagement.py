"""
Database Transaction Management
===============================

This module provides utilities for managing SQLAlchemy database sessions
using Python context variables and a decorator-based transaction wrapper.

It allows seamless propagation of a database session across function calls
without explicitly threading it through arguments. Functions can be safely
decorated with ``@transactional`` to ensure they run inside a managed
transactional context.

Key features
~~~~~~~~~~~~
- Context variable to store the active session
- Implicit reuse of existing sessions
- Explicit ``engine`` keyword selecting the store for new sessions
- Automatic commit and rollback handling
- Clean session closure after execution

"""

from functools import wraps
from sqlalchemy.orm import sessionmaker
import contextvars

# --------------------------------------------------------------------
# Context variable to store the current database session.
# --------------------------------------------------------------------
db_session_context = contextvars.ContextVar("db_session_context", default=None)
"""Context variable storing the active SQLAlchemy session."""


def transactional(func):
    """
    Decorator to wrap functions in a managed SQLAlchemy transaction.

    Ensures that:
    - If a session already exists in context, it is reused.
    - Otherwise, a new session is created on the ``engine`` keyword argument,
      committed, and closed.
    - On errors, the session is rolled back and closed.

    Parameters
    ----------
    func : callable
        The function to wrap. It must accept a `session` keyword argument.

    Returns
    -------
    callable
        The wrapped function. Callers pass ``engine=`` instead of ``session=``.

    Example
    -------
    >>> @transactional
    ... def create_tag(session=None, name=""):
    ...     session.add(Tag(name=name, description=""))
    ...
    >>> create_tag(engine=engine, name="python")
    """
    @wraps(func)
    def wrap_func(*args, engine=None, **kwargs):
        session = db_session_context.get()
        if session:
            return func(*args, session=session, **kwargs)

        if engine is None:
            raise ValueError(f"{func.__name__} needs an engine when no session is active")

        session = sessionmaker(bind=engine)()
        token = db_session_context.set(session)

        try:
            result = func(*args, session=session, **kwargs)
            session.flush()
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
            db_session_context.reset(token)

        return result

    return wrap_func
