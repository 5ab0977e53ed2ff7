import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from .exceptions import StoreLockError
from .rendering import render_error
from .routers import tasks as tasks_router
from .settings import get_settings

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {
        "name": "tasks",
        "description": "Task list page and the HTML fragments swapped in by htmx.",
    },
]

app = FastAPI(
    title="htmx Todos",
    description="In-memory task list that answers with server-rendered HTML fragments.",
    version="0.1.0",
    openapi_tags=openapi_tags,
)

_settings = get_settings()


# Global exception handlers for consistent JSON on validation errors
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Return a consistent JSON structure for request validation errors
    (missing form field, unparseable task id).

    Response format:
        {
            "error": "ValidationError",
            "detail": [... pydantic/fastapi error details ...],
            "message": "Request validation failed"
        }
    """
    return JSONResponse(
        status_code=422,
        content={
            "error": "ValidationError",
            "message": "Request validation failed",
            "detail": exc.errors(),
        },
    )


@app.exception_handler(StoreLockError)
async def store_lock_exception_handler(request: Request, exc: StoreLockError) -> HTMLResponse:
    """
    Fail the current request with a 500 naming the store operation that could
    not acquire the lock. No change signal is sent.
    """
    logger.error("%s %s failed: store lock unavailable (%s)", request.method, request.url.path, exc.operation)
    return HTMLResponse(
        status_code=500,
        content=render_error(f"Could not acquire the task store lock: {exc.operation}"),
    )


# Include routers
app.include_router(tasks_router.router)

# The assets directory is checked on first request rather than at import
app.mount("/assets", StaticFiles(directory=_settings.static_dir, check_dir=False), name="assets")
