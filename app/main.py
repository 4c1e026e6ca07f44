import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import Engine

from app.database.connection import create_db_engine, create_session_factory, ping
from app.errors.handlers import register_error_handlers
from app.repositories.settings import Settings, settings as default_settings
from app.routers import expense_router, system_router
from app.utils.logging_config import configure_logging
from app.version import __version__

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """Build the application bound to the given settings and database engine.

    When no engine is given one is created from the settings.
    """
    settings = settings or default_settings
    engine = engine or create_db_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # refuse to start when the database is unreachable
        ping(engine)
        logger.info(f"Starting server on port {settings.PORT}")
        yield
        logger.info("Shutting down server")
        engine.dispose()

    app = FastAPI(title="expense-api", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(system_router.system_Router)
    app.include_router(expense_router.expense_Router)
    return app


def run(settings: Settings = default_settings) -> None:
    configure_logging(settings.LOG_LEVEL)
    logger.info(f"Configuration loaded successfully: {settings.log_safe()}")

    uvicorn.run(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        timeout_graceful_shutdown=settings.SHUTDOWN_TIMEOUT_SECONDS,
        log_config=None,
    )


if __name__ == "__main__":
    run()
