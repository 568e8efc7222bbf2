"""FastAPI application factory.

`create_app` wires settings, the storage backend and the route table into
a FastAPI app. Endpoints implemented:
- POST /api/students
- GET /api/students
- GET /api/students/{id}
- PUT|PATCH /api/students/{id}
- GET /health
"""

from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Optional
import json
import logging
import time
import uuid
from . import responses
from .config import Settings
from .router import http_exception_handler, router
from .storage import SQLiteStorage, Storage

logger = logging.getLogger("students_api.api")


def create_app(settings: Optional[Settings] = None, storage: Optional[Storage] = None) -> FastAPI:
    """Build the application.

    When `storage` is omitted a `SQLiteStorage` is opened at
    `settings.STORAGE_PATH`; tests pass an `InMemoryStorage` instead.
    """
    settings = settings or Settings.from_env()
    if storage is None:
        storage = SQLiteStorage.from_path(settings.STORAGE_PATH)
    logger.info("storage initialized env=%s backend=%s", settings.ENV, type(storage).__name__)

    app = FastAPI(title="Students API")
    app.state.settings = settings
    app.state.storage = storage
    app.include_router(router)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next):
        req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
        request.state.request_id = req_id
        started = time.perf_counter()
        response: Response
        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
            logger.exception(
                "request_failed %s",
                json.dumps(
                    {
                        "request_id": req_id,
                        "path": request.url.path,
                        "method": request.method,
                        "duration_ms": elapsed_ms,
                    },
                    ensure_ascii=True,
                ),
            )
            raise
        response.headers["X-Request-ID"] = req_id
        elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
        logger.info(
            "request_done %s",
            json.dumps(
                {
                    "request_id": req_id,
                    "path": request.url.path,
                    "method": request.method,
                    "status_code": response.status_code,
                    "duration_ms": elapsed_ms,
                    "client": request.client.host if request.client else "unknown",
                },
                ensure_ascii=True,
            ),
        )
        return response

    @app.get("/health")
    def health():
        """Lightweight health check for uptime monitoring."""
        return responses.success({"status": "ok"})

    return app
