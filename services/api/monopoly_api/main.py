"""FastAPI application factory / entrypoint.

This service exposes HTTP endpoints for:
- a hello message at `/`
- CRUD on the `Player` table under `/players`
- a liveness check at `/health`

Operational notes:
- Database settings come from `DB_*` / `DATABASE_URL` (see `settings.py`).
- The database engine is created when the app starts and disposed when it
  stops; handlers reach it through `app.state.engine` (see `db.py`).
- Database errors are logged in full and reported to clients as a bare 500,
  so table and connection details never leave the server.

Run locally with:

    uvicorn monopoly_api.main:app --port 3000

or the `monopoly-service` console script.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from . import __version__
from .db import create_db_engine
from .logging_config import configure_logging
from .routes import router
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

HELLO_MESSAGE = "Hello, CS 262 Monopoly service!"


async def _server_error(request: Request, exc: Exception) -> PlainTextResponse:
    logger.exception("request %s %s failed", request.method, request.url.path, exc_info=exc)
    return PlainTextResponse("Internal Server Error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def create_app(settings: Settings | None = None, engine: AsyncEngine | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Service settings; defaults to `get_settings()`.
        engine: Pre-built async engine. When omitted, one is created from
            `settings` at startup. Either way the app disposes it at shutdown.

    Returns:
        FastAPI: The configured application.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.engine = engine if engine is not None else create_db_engine(settings)
        try:
            yield
        finally:
            await app.state.engine.dispose()
            logger.info("database engine disposed")

    app = FastAPI(title="Monopoly Player API", version=__version__, lifespan=lifespan)

    # SQLAlchemyError and OSError (e.g. asyncpg's ConnectionRefusedError when
    # the database is unreachable) are answered by the exception middleware.
    # Anything else reaches Starlette's server error middleware, which sends
    # this response and then re-raises, so uvicorn logs those a second time
    # as "Exception in ASGI application".
    app.add_exception_handler(SQLAlchemyError, _server_error)
    app.add_exception_handler(OSError, _server_error)
    app.add_exception_handler(Exception, _server_error)

    app.include_router(router)

    @app.get("/", response_class=PlainTextResponse)
    async def read_hello() -> str:
        return HELLO_MESSAGE

    @app.get("/health")
    async def health():
        """Liveness probe for the Player service.

        Answers without checking out a database connection, so a down
        Postgres does not make the process look dead.
        """
        return {"status": "ok", "service": "api"}

    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
