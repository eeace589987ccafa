from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from bbc_schedules.config import settings, setup_logging
from bbc_schedules.routers import main_router


setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events"""
    logger.info("Starting BBC Radio Schedules service...")
    logger.info(f"Listings source: {settings.bbc_base_url}")

    yield

    logger.info("BBC Radio Schedules service stopped")


app = FastAPI(
    title="BBC Radio Schedules",
    version="0.1.0",
    lifespan=lifespan
)

app.include_router(main_router)
