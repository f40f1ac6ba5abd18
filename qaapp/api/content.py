"""
Per-request store content: the questions, tags and badges pages list.
"""

import logging

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError

from qaapp.api.models import SiteContent
from qaapp.database.core.funcs import get_site_content

logger = logging.getLogger("uvicorn")


def get_page_content(request: Request) -> SiteContent:
    """FastAPI dependency reading the stored content; empty if the store cannot be read."""
    try:
        return get_site_content(engine=request.app.state.engine)
    except SQLAlchemyError as e:
        logger.warning("Store content unavailable: %s", e)
        return SiteContent()
