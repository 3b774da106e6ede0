"""FastAPI application factory and entrypoint."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from employee_directory.api.health import router as health_router
from employee_directory.api.v1.error_handlers import register_exception_handlers
from employee_directory.api.v1.router import api_router
from employee_directory.config.settings import Settings, get_settings
from employee_directory.core.logging import RequestIDMiddleware, setup_logging
from employee_directory.repositories.employee_repository import EmployeeRepository
from employee_directory.utils.logging import get_project_version

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, repository: EmployeeRepository | None = None) -> FastAPI:
    """
    Build the application.

    The repository is created here (one per application instance) unless one is passed
    in, and exposed on `app.state.employee_repository` for the route dependencies.
    Logging is installed on startup, not at import time.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings)
        logger.info("app.startup", extra={"env": settings.ENV, "records": len(app.state.employee_repository)})
        yield
        logger.info("app.shutdown")

    app = FastAPI(title=settings.APP_NAME, version=get_project_version(), lifespan=lifespan)
    app.state.settings = settings
    if repository is None:
        # an empty repository is falsy (len() == 0), so test for None explicitly
        repository = EmployeeRepository(default_department=settings.DEFAULT_DEPARTMENT)
    app.state.employee_repository = repository

    app.add_middleware(RequestIDMiddleware)
    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(api_router, prefix=settings.API_V1_PREFIX)

    return app


def run() -> None:
    """Console entrypoint: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
