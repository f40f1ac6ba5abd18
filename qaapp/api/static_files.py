"""
Static asset serving with directory handling.

`StaticFiles` answers files, conditional GETs and byte ranges. On top of it,
`ListingStaticFiles` handles directory paths:

- a directory path without a trailing slash redirects to the slashed path;
- a directory holding ``index.html`` serves that file;
- any other directory returns an HTML listing of its entries, sorted by name,
  with subdirectories marked by a trailing ``/``.
"""

import html
import os
import stat
from urllib.parse import quote

from starlette.concurrency import run_in_threadpool
from starlette.datastructures import URL
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import HTMLResponse, RedirectResponse, Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope

INDEX_FILE = "index.html"


def render_listing(directory: str) -> str:
    """Return the HTML listing of `directory`."""
    entries = []
    for entry in sorted(os.scandir(directory), key=lambda e: e.name):
        name = entry.name + "/" if entry.is_dir() else entry.name
        entries.append(f'<a href="{quote(name)}">{html.escape(name)}</a>\n')
    return '<!doctype html>\n<meta name="viewport" content="width=device-width">\n<pre>\n' + "".join(entries) + "</pre>\n"


class ListingStaticFiles(StaticFiles):
    """`StaticFiles` that also answers directory paths."""

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            return await super().get_response(path, scope)
        except HTTPException as exc:
            if exc.status_code != 404:
                raise
            full_path, stat_result = await run_in_threadpool(self.lookup_path, path)
            if stat_result is None or not stat.S_ISDIR(stat_result.st_mode):
                raise
            return await self.directory_response(full_path, scope)

    async def directory_response(self, full_path: str, scope: Scope) -> Response:
        if not scope["path"].endswith("/"):
            url = URL(scope=scope)
            return RedirectResponse(url=url.replace(path=url.path + "/"), status_code=301)

        index_path = os.path.join(full_path, INDEX_FILE)
        if os.path.isfile(index_path):
            return self.file_response(index_path, os.stat(index_path), scope)

        return HTMLResponse(await run_in_threadpool(render_listing, full_path))


def static_root_redirect(prefix: str):
    """Endpoint redirecting the bare static prefix to the mount's root listing."""

    async def redirect(request: Request) -> RedirectResponse:
        url = request.url.replace(path=prefix.rstrip("/") + "/")
        return RedirectResponse(url=url, status_code=301)

    return redirect
