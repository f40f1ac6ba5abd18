"""
FastAPI application bootstrap with: \n
- Lifespan-managed store bootstrap (schema creation + sample data) \n
- Static file serving under the static prefix \n
- Catch-all template route \n

Environment contract (from `settings`): \n
- DB_PATH: SQLite store file, created on first run. \n
- STRICT_BOOTSTRAP: if true, a failed bootstrap step aborts startup. \n
- HOST / PORT: listener address for `run()`. \n
"""

from fastapi import FastAPI
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn

from qaapp.api.fast_api import router
from qaapp.api.static_files import ListingStaticFiles, static_root_redirect
from qaapp.api.templating import PageRenderer, TemplateResolver
from qaapp.database.config.config import Settings, settings as default_settings
from qaapp.database.config.connection_engine import build_engine
from qaapp.database.core.bootstrap import bootstrap
from qaapp.database.core.funcs import table_counts

logger = logging.getLogger("uvicorn")
"""Logger instance for capturing and emitting Uvicorn server logs."""


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    App lifespan manager.

    Notes
    ------------
    - On startup (before yielding):
        * Create the store if its file is missing, then insert the sample rows.
        * Log every failed step. With STRICT_BOOTSTRAP, raise so the server
          refuses to start; otherwise continue with whatever the store holds.
        * Open the engine used by request-time lookups.
    - On shutdown (after yielding):
        * Dispose the engine.
    """
    settings: Settings = app.state.settings

    results = bootstrap(settings)
    failed = [result for result in results if not result.ok]
    if failed:
        logger.error("Bootstrap incomplete for %s: steps %s failed",
                     settings.DB_PATH, ", ".join(result.step for result in failed))
    if failed and settings.STRICT_BOOTSTRAP:
        raise RuntimeError(f"Store bootstrap failed for {settings.DB_PATH}")

    app.state.engine = build_engine(settings.DB_PATH)
    if not failed:
        logger.info("Store %s ready: %s", settings.DB_PATH, table_counts(engine=app.state.engine))

    try:
        yield
    finally:
        app.state.engine.dispose()
        logger.info("Store connections released.")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    Parameters
    ----------
    settings : Settings, optional
        Configuration to run with; the module-level singleton by default.

    Returns
    -------
    FastAPI
        The app, with the static mount registered before the catch-all page
        route so that static paths never reach the template resolver.
    """
    settings = settings or default_settings

    # The catch-all route owns every path, including the ones FastAPI would use for docs.
    app = FastAPI(lifespan=lifespan, docs_url=None, redoc_url=None, openapi_url=None)
    app.state.settings = settings
    app.state.template_resolver = TemplateResolver(
        settings.TEMPLATE_DIR,
        default_name=settings.DEFAULT_TEMPLATE,
        header_name=settings.HEADER_TEMPLATE,
        footer_name=settings.FOOTER_TEMPLATE,
    )
    app.state.page_renderer = PageRenderer(settings.TEMPLATE_DIR, cache=settings.TEMPLATE_CACHE)

    # -----------------------
    # Static assets
    # -----------------------
    app.add_api_route(
        settings.STATIC_PREFIX.rstrip("/"),
        static_root_redirect(settings.STATIC_PREFIX),
        methods=["GET", "HEAD"],
        include_in_schema=False,
    )
    app.mount(settings.STATIC_PREFIX, ListingStaticFiles(directory=settings.STATIC_DIR, check_dir=False), name="static")

    # -----------------------
    # Template pages
    # -----------------------
    app.include_router(router)
    return app


app = create_app()
"""Application object served by `run()` and by `uvicorn qaapp.main:app`."""


def run() -> None:
    """
    Serve `app` on HOST:PORT.

    Uvicorn exits the process with a non-zero status if the port cannot be bound.
    """
    print(f"Click on http://localhost:{default_settings.PORT}")
    uvicorn.run(
        app,
        host=default_settings.HOST,
        port=default_settings.PORT,
        log_level=default_settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
