# catalog_service/main.py
"""
Application factory for the book catalog service.

``create_app`` builds a FastAPI instance around a fresh
``CatalogState``. The module-level ``app`` is what uvicorn serves::

    uvicorn catalog_service.main:app --port 3000
"""

import logging
from typing import Optional

from fastapi import Body, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .catalog.router import router as catalog_router
from .config import Settings, settings as default_settings
from .errors import CatalogError
from .logging_config import setup_logging
from .models import Credentials, HealthStatus, Message
from .storage import CatalogState, get_state


logger = logging.getLogger(__name__)


def _catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Only reached for malformed JSON or wrongly typed fields; an absent
    # body is accepted by every route and checked by CatalogState.
    logger.debug("Rejected body on %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"message": "Invalid request body"})


def create_app(
    state: Optional[CatalogState] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    state : Optional[CatalogState]
        State to serve. A new, freshly seeded one is built when omitted.
    settings : Optional[Settings]
        Overrides the shared ``settings`` instance.

    Returns
    -------
    FastAPI
        The configured application, with its state on ``app.state.catalog``.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        description=settings.description,
        version=settings.api_version,
    )
    app.state.catalog = state if state is not None else CatalogState()

    app.add_exception_handler(CatalogError, _catalog_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    # Base route for a quick liveness check
    @app.get("/", response_model=HealthStatus)
    def health_check():
        return {"status": "ok", "message": "Book catalog live"}

    @app.post("/register", response_model=Message)
    def register(
        req: Optional[Credentials] = Body(None),
        catalog: CatalogState = Depends(get_state),
    ):
        req = req or Credentials()
        catalog.register(req.username, req.password)
        return {"message": "User registered successfully"}

    @app.post("/login", response_model=Message)
    def login(
        req: Optional[Credentials] = Body(None),
        catalog: CatalogState = Depends(get_state),
    ):
        # No body reads as empty credentials, which never match a user.
        req = req or Credentials()
        catalog.login(req.username, req.password)
        return {"message": "Login successful"}

    app.include_router(catalog_router)

    logger.info("%s %s ready", settings.project_name, settings.api_version)
    return app


app = create_app()
