# Uvicorn application factory <https://www.uvicorn.org/#application-factories>
from contextlib import asynccontextmanager

from fastapi import FastAPI

from course_library.logging import logger
from course_library.middlewares.correlation_id import CorrelationIDMiddleware
from course_library.middlewares.logging_context import (
    LoggingContextMiddleware,
)
from course_library.routing import collect_subrouters
from course_library.storage.db import engine, wait_and_init_db
from course_library.utils.error_handler import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager for startup and shutdown.

    Startup waits for the database before serving requests; the schema
    itself is managed by Alembic migrations. Shutdown disposes of the
    connection pool.
    """
    # Startup
    await wait_and_init_db()
    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Application shutdown initiated")
    await engine.dispose()
    logger.info("Application shutdown complete")


def application() -> FastAPI:
    """
    Initializes and configures the FastAPI application.

    Sets up the lifespan handler, includes the routers collected by
    `course_library.routing.collect_subrouters()`, registers the exception
    handlers and adds the middlewares:
    - `LoggingContextMiddleware`: request fields for structured logs.
    - `CorrelationIDMiddleware`: request correlation IDs.
    """
    # Initialize application with lifespan context manager
    app = FastAPI(
        title="Course Library",
        description="Authors and the courses they teach",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Collect routers
    app.include_router(collect_subrouters())

    register_exception_handlers(app)

    # Middlewares (execute in REVERSE order of registration)
    # Execution flow: CorrelationIDMiddleware → LoggingContextMiddleware
    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(CorrelationIDMiddleware)

    return app


app = application()  # Need for fastapi cli
