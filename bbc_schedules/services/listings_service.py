"""
Listings Service

Ties validation, page fetch and scanning together and renders listings for
people to read.
"""
from __future__ import annotations

from datetime import date
import logging
from typing import Any, Iterable

import httpx

from bbc_schedules.channels import CHANNELS
from bbc_schedules.config import settings
from bbc_schedules.schemas import ListingsResponse, ProgrammeResponse, ScheduleRequest
from bbc_schedules.services.listing_types import ProgrammeEntry
from bbc_schedules.services.listings_scanner import scan_listings
from bbc_schedules.services.request_validator import validate_request
from bbc_schedules.services.schedule_fetcher import build_schedule_url, fetch_schedule_page
from bbc_schedules.utils.logging_helpers import log_fetch_end, log_fetch_start


logger = logging.getLogger(__name__)

SEPARATOR = "-------------------"


def fetch_listings(
    request: ScheduleRequest,
    *,
    client: httpx.Client | None = None,
    base_url: str | None = None,
) -> list[ProgrammeEntry]:
    """
    Fetch and scan the at-a-glance page for a validated request

    Args:
        request: Validated schedule request
        client: Optional HTTP client (caller keeps ownership)
        base_url: Site origin (defaults to the configured BBC base URL)

    Returns:
        Programme entries in broadcast order

    Raises:
        FetchFailed: If the page cannot be retrieved
    """
    base = base_url or settings.bbc_base_url
    url = build_schedule_url(request, base)
    log_fetch_start(logger, request, url)
    body = fetch_schedule_page(url, client=client)
    entries = scan_listings(body, base)
    log_fetch_end(logger, request, len(entries))
    return entries


def get_listings(
    params: Any,
    *,
    today: date | None = None,
    client: httpx.Client | None = None,
    base_url: str | None = None,
) -> list[ProgrammeEntry]:
    """
    Validate a parameter mapping, then fetch and scan its schedule page

    Args:
        params: Request mapping (see validate_request)
        today: Date used when the date keys are omitted
        client: Optional HTTP client (caller keeps ownership)
        base_url: Site origin (defaults to the configured BBC base URL)

    Returns:
        Programme entries in broadcast order

    Raises:
        ScheduleValidationError: If the mapping is rejected (before any I/O)
        FetchFailed: If the page cannot be retrieved
    """
    request = validate_request(params, today=today)
    return fetch_listings(request, client=client, base_url=base_url)


def format_listings(entries: Iterable[ProgrammeEntry]) -> str:
    """Render entries as labelled lines, each entry closed by a dashed separator"""
    lines = []
    for entry in entries:
        lines.append(f"  Start Time: {entry.start_time}")
        lines.append(f"    End Time: {entry.end_time}")
        lines.append(f"       Title: {entry.title}")
        lines.append(f"         URL: {entry.url}")
        lines.append(SEPARATOR)
    return "".join(f"{line}\n" for line in lines)


def build_listings_response(
    request: ScheduleRequest,
    entries: list[ProgrammeEntry],
    base_url: str | None = None,
) -> ListingsResponse:
    """Wrap scanned entries in the API response model"""
    return ListingsResponse(
        channel=request.channel,
        channel_name=CHANNELS[request.channel],
        location=request.location,
        frequency=request.frequency,
        date=request.schedule_date.isoformat(),
        source_url=build_schedule_url(request, base_url),
        programmes_count=len(entries),
        programmes=[ProgrammeResponse(**entry.to_dict()) for entry in entries],
    )


class ProgrammeSchedules:
    """
    Schedule listings for one channel and day

    Validates and fetches on construction, like the listings object of the
    original Perl interface:

        schedules = ProgrammeSchedules({"channel": "radio4", "frequency": "fm"})
        for entry in schedules.get_listings():
            ...
        print(schedules)
    """

    def __init__(
        self,
        params: Any,
        *,
        today: date | None = None,
        client: httpx.Client | None = None,
        base_url: str | None = None,
    ):
        self.request = validate_request(params, today=today)
        self.base_url = base_url or settings.bbc_base_url
        self.listings = fetch_listings(self.request, client=client, base_url=self.base_url)

    @property
    def url(self) -> str:
        return build_schedule_url(self.request, self.base_url)

    def get_listings(self) -> list[ProgrammeEntry]:
        return self.listings

    def as_string(self) -> str:
        return format_listings(self.listings)

    def to_response(self) -> ListingsResponse:
        return build_listings_response(self.request, self.listings, self.base_url)

    def __str__(self) -> str:
        return self.as_string()

    def __len__(self) -> int:
        return len(self.listings)

    def __iter__(self):
        return iter(self.listings)
