"""
Per-request identity: turns request state into a `PageContext`.

Resolution order
----------------
1. A ``token`` cookie holding a valid JWT whose subject is a stored username
   gives that user's context.
2. Otherwise, if `DEMO_USER` is enabled, the demo context (Mario Rossi).
3. Otherwise, the anonymous context.

A store that cannot be queried is treated like an unknown user.
"""

import logging

from fastapi import Cookie, Request
from sqlalchemy.exc import SQLAlchemyError

from qaapp.api.models import PageContext
from qaapp.api.utils import verify_token
from qaapp.database.core.funcs import get_page_user

logger = logging.getLogger("uvicorn")


def get_page_context(request: Request, token: str = Cookie(None)) -> PageContext:
    """FastAPI dependency building the page context of the current request."""
    if token:
        username = verify_token(token)
        if username:
            try:
                user = get_page_user(engine=request.app.state.engine, username=username)
            except SQLAlchemyError as e:
                logger.warning("User lookup for %s failed: %s", username, e)
                user = None
            if user is not None:
                return PageContext.for_user(user)

    if request.app.state.settings.DEMO_USER:
        return PageContext.demo()
    return PageContext.anonymous()
