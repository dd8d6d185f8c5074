import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from riftdex.api import auth_router, cards_router, health_router, root_router
from riftdex.api.errors import register_exception_handlers
from riftdex.config import Settings, settings
from riftdex.db.database import engine, init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    # Keep serving if the store is down; /health reports it
    try:
        await init_db()
        logger.info("Store connected")
    except (SQLAlchemyError, OSError) as e:
        logger.error("Store connection error: %s", e)
    yield
    await engine.dispose()


def create_app(config: Settings = settings) -> FastAPI:
    """Build the application with routers, error handlers, and CORS."""
    application = FastAPI(
        title=config.app_name,
        version=pkg_version("riftdex"),
        lifespan=lifespan,
    )

    register_exception_handlers(application)

    application.include_router(auth_router)
    application.include_router(cards_router)
    application.include_router(health_router)

    # Production serves the built client from the same process
    if config.client_dist_dir:
        application.mount(
            "/", StaticFiles(directory=config.client_dist_dir, html=True), name="client"
        )
    else:
        application.include_router(root_router)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return application


app = create_app()
