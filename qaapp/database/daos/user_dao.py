"""
User DAO

Purpose
-------
Thin data-access layer for the `User` ORM entity. Provides:
- Creation with password hashing
- Lookup by username
- Listing and counting

Design
------
- The DAO expects an active SQLAlchemy `Session` supplied by the caller.
- Commit/rollback belong to the caller (usually `@transactional`).
- Passwords are hashed using `EncryptionDec.hash_password(...)` before insert.

Usage
-----
.. code-block:: python

    from sqlalchemy.orm import Session
    from qaapp.database.config.connection_engine import build_engine
    from qaapp.database.entities.user import User
    from qaapp.database.daos.user_dao import UserDao

    dao = UserDao()
    with Session(build_engine("qaApp.db")) as session:
        dao.createUser(session, User(username="mario", password="secret"))
        session.commit()

        users = dao.fetchUser(session, "mario")     # list[User], at most one row

Error Handling
--------------
- Each method logs the failure with `logger.exception(...)` and re-raises.
"""

import logging
from typing import List
from sqlalchemy import func, select
from sqlalchemy.orm import Session
from qaapp.database.entities.user import User
from qaapp.crypt.encrypt_decrypt import EncryptionDec

logger = logging.getLogger("uvicorn")

class UserDao:
    """
    Data Access Object (DAO) for managing User entities.
    """

    def createUser(self, session: Session, user_data: User) -> bool:
        """
        Stage a new user with a hashed password.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        user_data : User
            User entity; its `password` holds the plaintext password.

        Returns
        -------
        bool
            True once the user is added to the session.
        """
        try:
            enc = EncryptionDec()
            user_data.password = enc.hash_password(text=user_data.password or "")
            session.add(user_data)
            return True
        except Exception:
            logger.exception("Error in UserDao.createUser")
            raise

    def fetchUser(self, session: Session, username: str) -> List[User]:
        """
        Fetch a user by username.

        Returns
        -------
        list[User]
            A list containing the first matching user (at most one). Sample
            rows are re-inserted on every start, so duplicates are expected;
            the oldest row wins.
        """
        try:
            stmt = select(User).where(User.username == username).order_by(User.id).limit(1)
            return list(session.scalars(stmt).all())
        except Exception:
            logger.exception("Error in UserDao.fetchUser")
            raise

    def countUsers(self, session: Session) -> int:
        try:
            return session.scalar(select(func.count()).select_from(User))
        except Exception:
            logger.exception("Error in UserDao.countUsers")
            raise
