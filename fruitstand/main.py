"""
Fruit Stand - Application Entry Point

This is the main FastAPI application. It follows the MVC
(Model-View-Controller) architectural pattern.

Architecture Overview:
=====================
- Models (fruitstand/models/): Data structures and the read-only store
  - entities.py: the Fruit record
  - store.py: FruitStore, the ordered in-memory list of fruits
  - seed.py: the static fruit definitions loaded at startup

- Views (fruitstand/views/): Jinja2 templates and render helpers
  - templates/: HTML templates for every page

- Controllers (fruitstand/controllers/): Request handlers
  - fruits.py: fruit list and fruit detail pages
  - health.py: service status endpoints

Request Flow:
============
1. Request arrives at a Controller endpoint
2. Controller reads from the FruitStore (Model) injected via Depends
3. Controller hands the data to a View helper
4. The View renders a template and returns it as the response body

Errors:
======
- HTTPException (bad index, unknown route) -> error page, same status
- Request validation errors (non-numeric index) -> error page, 400
- Template errors -> logged with traceback, 500
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from jinja2 import TemplateError
from starlette.exceptions import HTTPException as StarletteHTTPException

from fruitstand.config import Settings, get_settings
from fruitstand.controllers import fruits_router, health_router
from fruitstand.logging_config import setup_logging
from fruitstand.models import DEFAULT_FRUITS, FruitStore
from fruitstand.views import render_error

logger = logging.getLogger(__name__)


# ============================================
# Exception Handlers
# ============================================

async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render client and routing errors as an HTML error page."""
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
    return render_error(request, exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Render request validation failures as a 400 error page.

    The only validated input is the fruit index in the path, so the
    message names the offending parameter and value.
    """
    problems = [
        f"invalid value {err.get('input')!r} for '{err['loc'][-1]}'"
        for err in exc.errors()
    ]
    message = "Bad request: " + "; ".join(problems)
    logger.warning(f"{request.method} {request.url.path} -> 400: {message}")
    return render_error(request, 400, message)


async def template_exception_handler(request: Request, exc: TemplateError):
    """
    Surface template failures as a server error.

    A template referencing a value the controller did not supply is a
    programming defect, never a client error. In debug mode the
    exception is re-raised so the traceback page is shown.
    """
    logger.exception(f"Template rendering failed for {request.url.path}")
    if request.app.debug:
        raise exc
    return PlainTextResponse("Internal Server Error", status_code=500)


# ============================================
# Application Factory
# ============================================

def create_app(
    settings: Optional[Settings] = None,
    store: Optional[FruitStore] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use. Defaults to get_settings().
        store: Fruit store to serve. Defaults to one built from DEFAULT_FRUITS.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.app_name,
        description="""
        Read-only fruit stand demonstrating the MVC pattern.

        ## Architecture
        - **Models**: Fruit records in an in-memory, read-only store
        - **Views**: Jinja2 HTML templates
        - **Controllers**: FastAPI routers handling requests
        """,
        version=settings.app_version,
        debug=settings.debug,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # The store is built once and shared read-only by every request
    app.state.fruit_store = store if store is not None else FruitStore(DEFAULT_FRUITS)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(TemplateError, template_exception_handler)

    app.include_router(health_router)   # /, /health
    app.include_router(fruits_router)   # /fruits endpoints

    logger.info(
        f"{settings.app_name} {settings.app_version} ready "
        f"with {len(app.state.fruit_store)} fruits"
    )
    return app


app = create_app()
