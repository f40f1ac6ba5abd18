"""
Template resolution and page rendering.

A request path is mapped to a template name by taking its final segment
(``/questions.html`` -> ``questions.html``); the root path maps to the default
page. The page is always parsed together with the shared footer and header
fragments: if any of the three is missing or malformed, the request fails.

By default nothing is cached. Every render builds a fresh Jinja2 environment
with ``cache_size=0``, so templates are re-read from disk and re-parsed on
every request. With caching enabled a single environment is kept and Jinja2
reloads a template only when its file's mtime changes.
"""

import os
import posixpath
from typing import NamedTuple, Optional

import jinja2
from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from qaapp.api.models import PageContext, SiteContent


def template_name_for(path: str, default: str = "index.html") -> str:
    """
    Return the template name for a request path.

    The name is the last path segment, trailing slashes ignored. A path made
    only of slashes is the root and yields `default`. An empty path yields
    ``"."``, which never names a template.

    >>> template_name_for("/")
    'index.html'
    >>> template_name_for("/users/profile.html")
    'profile.html'
    """
    if not path:
        return "."
    trimmed = path.rstrip("/")
    if not trimmed:
        return default
    return posixpath.basename(trimmed)


class TemplateSet(NamedTuple):
    """The three templates parsed for one request."""
    directory: str
    page: str
    footer: str
    header: str

    @property
    def page_path(self) -> str:
        """Filesystem path of the page template."""
        return os.path.join(self.directory, self.page)


class TemplateResolver:
    """
    Maps request paths to `TemplateSet`s under a fixed template directory.

    The page name is not checked against the directory; names the loader
    cannot resolve (missing files, ``..``) fail at parse time.
    """

    def __init__(self, directory: str, default_name: str = "index.html",
                 header_name: str = "header.html", footer_name: str = "footer.html"):
        self.directory = directory
        self.default_name = default_name
        self.header_name = header_name
        self.footer_name = footer_name

    def resolve(self, path: str) -> TemplateSet:
        return TemplateSet(
            directory=self.directory,
            page=template_name_for(path, self.default_name),
            footer=self.footer_name,
            header=self.header_name,
        )


class PageRenderer:
    """
    Parses template sets and renders pages against a `PageContext`.

    Parameters
    ----------
    directory : str
        Template directory.
    cache : bool
        Keep parsed templates between requests (mtime-checked).

    Notes
    -----
    - Autoescaping is on for every template.
    - Undefined variables raise (`jinja2.StrictUndefined`), so a template
      referencing a field the context lacks fails instead of rendering blank.
    - Pages are rendered to a string before the response is built; a failure
      never leaves a half-written response behind.
    """

    def __init__(self, directory: str, cache: bool = False):
        self.directory = directory
        self.cache = cache
        self._templates: Optional[Jinja2Templates] = self._build_templates() if cache else None

    def _build_templates(self) -> Jinja2Templates:
        env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(self.directory),
            autoescape=True,
            undefined=jinja2.StrictUndefined,
            cache_size=400 if self.cache else 0,
            auto_reload=True,
        )
        return Jinja2Templates(env=env)

    @property
    def templates(self) -> Jinja2Templates:
        if self._templates is not None:
            return self._templates
        return self._build_templates()

    def compose(self, template_set: TemplateSet, templates: Optional[Jinja2Templates] = None) -> jinja2.Template:
        """
        Parse the page, footer and header of `template_set` and return the page.

        Raises
        ------
        jinja2.TemplateNotFound
            If any of the three files does not exist.
        jinja2.TemplateSyntaxError
            If any of the three files does not parse.
        """
        templates = templates or self.templates
        page = templates.get_template(template_set.page)
        templates.get_template(template_set.footer)
        templates.get_template(template_set.header)
        return page

    def render(self, request: Request, template_set: TemplateSet, page_context: PageContext,
               content: Optional[SiteContent] = None) -> HTMLResponse:
        """
        Render the page of `template_set` for `page_context`.

        The template sees ``request``, ``logged``, ``user`` and ``site`` (the
        stored questions, tags and badges; empty lists when not given).

        Raises
        ------
        jinja2.TemplateError
            On parse failures (see `compose`) and on execution failures such
            as an undefined variable.
        """
        page = self.compose(template_set)
        content = page.render({
            "request": request,
            "logged": page_context.logged,
            "user": page_context.user,
            "site": content or SiteContent(),
        })
        return HTMLResponse(content)
