"""
Schedule Fetcher Service

Builds the at-a-glance page URL for a validated request and downloads it.
One blocking GET per call; failures are reported, never retried.
"""
import logging

import httpx

from bbc_schedules.config import settings
from bbc_schedules.exceptions import FetchFailed
from bbc_schedules.schemas import ScheduleRequest


logger = logging.getLogger(__name__)


def build_schedule_url(request: ScheduleRequest, base_url: str | None = None) -> str:
    """
    Build the at-a-glance URL for a request

    Month and day are inserted as given, without zero padding.

    Args:
        request: Validated schedule request
        base_url: Site origin (defaults to the configured BBC base URL)

    Returns:
        URL of the form {base}/{channel}/programmes/schedules[/{location}|/{frequency}]/{y}/{m}/{d}/ataglance
    """
    base = (base_url or settings.bbc_base_url).rstrip("/")
    parts = [base, request.channel, "programmes", "schedules"]
    if request.location:
        parts.append(request.location)
    elif request.frequency:
        parts.append(request.frequency)
    parts.extend([str(request.year), str(request.month), str(request.day), "ataglance"])
    return "/".join(parts)


def create_client(timeout: float | None = None) -> httpx.Client:
    """Create an HTTP client configured from settings"""
    return httpx.Client(
        timeout=timeout or settings.request_timeout_sec,
        headers={"User-Agent": settings.user_agent},
        follow_redirects=True,
    )


def fetch_schedule_page(url: str, client: httpx.Client | None = None) -> str:
    """
    Download a schedule page

    Args:
        url: Page URL
        client: HTTP client to use; a temporary one is created (and closed)
            when omitted

    Returns:
        Response body as text

    Raises:
        FetchFailed: On transport errors or a non-success HTTP status
    """
    owns_client = client is None
    if owns_client:
        client = create_client()

    logger.debug(f"Fetching schedule page: {url}")
    try:
        response = client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.error(f"HTTP {e.response.status_code} fetching {url}")
        raise FetchFailed(url, status_code=e.response.status_code) from e
    except httpx.HTTPError as e:
        logger.error(f"Failed to fetch {url}: {type(e).__name__}: {e}")
        raise FetchFailed(url) from e
    finally:
        if owns_client:
            client.close()

    logger.debug(f"Fetched {len(response.content) / 1024:.1f} KB from {url}")
    return response.text
