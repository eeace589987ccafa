"""
Dependency Injection Configuration

Provides the request-scoped collaborators used by the API routes. Tests swap
them through FastAPI's dependency_overrides.
"""
from datetime import date
import logging
from typing import Iterator

import httpx

from bbc_schedules.services.schedule_fetcher import create_client


logger = logging.getLogger(__name__)


def get_http_client() -> Iterator[httpx.Client]:
    """
    Yield an HTTP client for one API request and close it afterwards.

    Yields:
        Configured httpx.Client
    """
    client = create_client()
    try:
        yield client
    finally:
        client.close()
        logger.debug("HTTP client closed")


def get_today() -> date:
    """Current local date, used when a listings request omits the date."""
    return date.today()
