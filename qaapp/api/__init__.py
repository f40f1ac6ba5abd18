"""
API Package — FastAPI router • page context • templates • static files • JWT utils
===================================================================================

Contents
--------
- fast_api
    Catch-all page route: resolves the template from the request path and
    renders it with the shared header and footer.

- templating
    `template_name_for`, `TemplateResolver` (path -> `TemplateSet`) and
    `PageRenderer` (parse page/footer/header, render with Jinja2).

- identity
    `get_page_context` dependency: token cookie -> stored user, else the demo
    user, else anonymous.

- content
    `get_page_content` dependency: the stored questions, tags and badges.

- static_files
    `ListingStaticFiles`: Starlette static files plus directory listings,
    directory ``index.html`` and trailing-slash redirects.

- models
    Pydantic `PageUser`, `PageContext` and `SiteContent` handed to templates.

- utils
    JWT helpers:
      • create_access_token(payload) — issues signed JWTs with exp
      • verify_token(token) — validates JWTs and extracts the subject
"""
