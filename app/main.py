import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import advertisement, health
from app.core.logging import configure_logging
from app.core.settings import get_settings
from app.db import bootstrap

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    settings = get_settings()
    if settings.seed_on_startup:
        bootstrap()
    else:
        logger.info("Skipping database bootstrap (SEED_ON_STARTUP is false)")
    yield


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(title=settings.app_name, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(advertisement.router, prefix="/api")

    app.include_router(health.router)

    return app


app = create_app()
