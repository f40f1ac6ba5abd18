"""
FastAPI Router — template pages
===============================

Purpose
-------
Defines the catch-all page route. Every path not claimed by the static mount
is resolved to a template under the template directory and rendered with the
shared header and footer for the current request's page context.

Key Notes
---------
- Any HTTP method is accepted; the response is the same.
- Template failures (missing file, syntax error, bad encoding, execution error) return 500
  with the raw error text as a plain-text body. Other requests are unaffected.
- The resolver and renderer live on ``app.state`` (see ``qaapp.main.create_app``).
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from jinja2 import TemplateError

from qaapp.api.content import get_page_content
from qaapp.api.identity import get_page_context
from qaapp.api.models import PageContext, SiteContent

logger = logging.getLogger("uvicorn")

router = APIRouter()
"""Creates the FastAPI router in which we define its routes"""

PAGE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]


@router.api_route("/", methods=PAGE_METHODS)
@router.api_route("/{full_path:path}", methods=PAGE_METHODS)
def serve_template(
    request: Request,
    full_path: str = "",
    page_context: PageContext = Depends(get_page_context),
    content: SiteContent = Depends(get_page_content),
):
    """Render the template named by the last segment of the request path.

    Behavior:
        - `/` renders the default template (`index.html`).
        - `/<name>` renders `<name>`; the file name must include its extension.

    Response:
        200: rendered HTML
        500: plain-text error when the template set cannot be parsed or rendered
    """
    template_set = request.app.state.template_resolver.resolve(request.url.path)
    try:
        return request.app.state.page_renderer.render(request, template_set, page_context, content)
    except (TemplateError, OSError, UnicodeDecodeError) as e:
        logger.warning("Rendering %s failed: %s", template_set.page_path, e)
        return PlainTextResponse(str(e), status_code=500)
