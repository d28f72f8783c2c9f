"""FastAPI application entrypoint and HTTP routing.

This module builds the application, wires the session factory into the
DAOs and registers each request handler against its path. Controllers
are intentionally thin: they collect request parameters, delegate to a
handler and return its response.

Endpoints implemented:
- ANY /InsereUsuarioServlet
- GET /health
"""

import json
import logging
import time
import uuid
from typing import Callable, Dict

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response
from starlette.concurrency import run_in_threadpool

from .config import settings
from .dao import UserDAO
from .database import SessionFactory, build_engine
from .errors import PersistenceError
from .handlers import InsertUserHandler, RequestHandler

logger = logging.getLogger("exercise_api.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS", "TRACE"]
FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

# path -> builder taking the session factory and returning a handler
ROUTES: Dict[str, Callable[[SessionFactory], RequestHandler]] = {
    "/InsereUsuarioServlet": lambda factory: InsertUserHandler(UserDAO(factory)),
}


async def request_params(request: Request) -> dict:
    """Merge query string and form body parameters.

    The first value of a repeated name wins and query string values take
    precedence over body values.
    """
    params = {}
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        for key, value in form.multi_items():
            if isinstance(value, str):
                params.setdefault(key, value)
    query = {}
    for key, value in request.query_params.multi_items():
        query.setdefault(key, value)
    params.update(query)
    return params


def _endpoint_for(handler: RequestHandler):
    async def endpoint(request: Request) -> Response:
        params = await request_params(request)
        return await run_in_threadpool(handler.handle, params)
    return endpoint


def _log_event(level: int, event: str, request: Request, exc_info=None, **extra) -> None:
    payload = {
        "request_id": getattr(request.state, "request_id", ""),
        "path": request.url.path,
        "method": request.method,
        "client": request.client.host if request.client else "unknown",
    }
    payload.update(extra)
    logger.log(level, "%s %s", event, json.dumps(payload, ensure_ascii=True), exc_info=exc_info)


def create_app(session_factory: SessionFactory = None) -> FastAPI:
    """Build the application around `session_factory`.

    When no factory is given one is created from `settings.DATABASE_URL`.
    Tables are created on startup if they do not exist yet.
    """
    if session_factory is None:
        session_factory = SessionFactory(build_engine())
    session_factory.create_all()

    application = FastAPI(title="Exercise Management API")
    application.state.session_factory = session_factory

    @application.middleware("http")
    async def request_context_middleware(request: Request, call_next):
        req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
        request.state.request_id = req_id
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
            _log_event(logging.ERROR, "request_failed", request, duration_ms=elapsed_ms)
            raise
        response.headers["X-Request-ID"] = req_id
        elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
        _log_event(
            logging.INFO, "request_done", request,
            status_code=response.status_code, duration_ms=elapsed_ms,
        )
        return response

    @application.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError):
        _log_event(
            logging.ERROR, "persistence_error", request, exc_info=exc,
            kind=exc.__class__.__name__, entity=exc.entity,
        )
        return PlainTextResponse(str(exc), status_code=exc.status_code)

    for path, build_handler in ROUTES.items():
        application.add_api_route(
            path,
            _endpoint_for(build_handler(session_factory)),
            methods=ALL_METHODS,
            response_class=PlainTextResponse,
        )

    @application.get("/health")
    def health():
        """Lightweight health check for uptime monitoring."""
        return {"status": "ok"}

    return application


app = create_app()
