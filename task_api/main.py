"""task-api - task record store over HTTP."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from task_api.core.config import Settings, constants, get_settings
from task_api.core.errors import ErrorCode, ErrorResponse, TaskApiError
from task_api.core.logging import configure_logfire, instrument_fastapi
from task_api.core.task_store import TaskStore
from task_api.interface.task_router import router as task_router


logger = logging.getLogger(__name__)


async def handle_task_api_error(_request: Request, exc: TaskApiError) -> JSONResponse:
    """Render a TaskApiError as the JSON error body."""
    logger.info("request_failed", extra={"code": exc.code, "status_code": exc.status_code})
    return JSONResponse(content=exc.to_response().to_content(), status_code=exc.status_code)


async def handle_validation_error(_request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render body and path validation failures as a bad request."""
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
    logger.info("request_validation_failed", extra={"errors": errors})
    body = ErrorResponse(message=constants.MSG_INVALID_PAYLOAD, code=ErrorCode.ERR_INVALID_PAYLOAD, details=errors)
    return JSONResponse(content=body.to_content(), status_code=constants.HTTP_BAD_REQUEST)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    The task store is opened once in the lifespan and shared through
    ``app.state.task_store``; routes receive it as a dependency.
    """
    app_settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Application lifespan context manager."""
        # Startup
        configure_logfire(app_settings)
        app.state.task_store = await TaskStore.open(app_settings.sqlite_db_path)
        logger.info("Database initialized")
        yield
        # Shutdown
        await app.state.task_store.close()

    app = FastAPI(
        title="task-api",
        description="Task record store over HTTP",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = app_settings

    instrument_fastapi(app)

    app.add_exception_handler(TaskApiError, handle_task_api_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_validation_error)  # type: ignore[arg-type]

    app.include_router(task_router)

    @app.get("/health")
    async def health_check() -> JSONResponse:
        """Health check endpoint."""
        return JSONResponse(content={"status": "healthy"}, status_code=constants.HTTP_OK)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    settings = get_settings()
    uvicorn.run("task_api.main:app", host=settings.host, port=settings.port)
