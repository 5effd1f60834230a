"""FastAPI application with lifespan and health endpoint."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from chat_hub.chat.router import router as chat_router
from chat_hub.config import get_settings
from chat_hub.logging_config import configure_logging
from chat_hub.store.registry import build_stores

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging, build and load the stores on startup.

    A store that cannot load aborts startup instead of serving from an empty store.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    stores = build_stores(settings)
    stores.load_all()
    app.state.settings = settings
    app.state.stores = stores
    logger.info("Startup complete (%s, %s backend)", settings.environment, settings.persistence_backend)
    yield


app = FastAPI(
    title="Chat Hub",
    lifespan=lifespan,
)
app.include_router(chat_router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "service": "chat-hub",
        "version": "0.1.0",
    }


def run() -> None:
    """Serve the app with uvicorn on the configured port."""
    settings = get_settings()
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_config=None)
