from datetime import date
from typing import Annotated
import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException, Query

from bbc_schedules.channels import describe_channels
from bbc_schedules.dependencies import get_http_client, get_today
from bbc_schedules.exceptions import FetchFailed, ScheduleValidationError
from bbc_schedules.schemas import ListingsResponse
from bbc_schedules.services import build_listings_response, fetch_listings, validate_request


logger = logging.getLogger(__name__)

main_router = APIRouter()

@main_router.get("/")
def root() -> dict:
    """Root endpoint with service information"""
    return {
        "service": "BBC Radio Schedules",
        "version": "0.1.0",
        "endpoints": {
            "channels": "/channels - List channel, location and frequency codes",
            "listings": "/listings/{channel} - Get one day's programme listings",
            "health": "/health - Health check"
        }
    }


@main_router.get("/health")
def health_check() -> dict:
    """Health check endpoint"""
    return {"status": "ok"}


@main_router.get("/channels")
def list_channels() -> list[dict]:
    """Channel catalogue with the location / frequency codes each accepts"""
    return describe_channels()


@main_router.get("/listings/{channel}", response_model=ListingsResponse)
def get_channel_listings(
    channel: str,
    client: Annotated[httpx.Client, Depends(get_http_client)],
    today: Annotated[date, Depends(get_today)],
    location: Annotated[str | None, Query()] = None,
    frequency: Annotated[str | None, Query()] = None,
    year: Annotated[int | None, Query()] = None,
    month: Annotated[int | None, Query()] = None,
    day: Annotated[int | None, Query()] = None,
) -> ListingsResponse:
    """
    Get the at-a-glance programme listings for one channel and day

    Args:
        channel: Channel code
        location: Region code (Radio 1 only)
        frequency: Band code (Radio 4 only)
        year, month, day: Schedule date, all three or none (defaults to today)

    Returns:
        Listings scanned from the BBC schedule page
    """
    supplied = {
        "location": location,
        "frequency": frequency,
        "year": year,
        "month": month,
        "day": day,
    }
    params = {"channel": channel}
    params.update({key: value for key, value in supplied.items() if value is not None})

    try:
        request = validate_request(params, today=today)
    except ScheduleValidationError as e:
        logger.warning(f"Rejected listings request {params}: {e.kind}: {e}")
        raise HTTPException(
            status_code=422,
            detail={"kind": e.kind, "key": e.key, "message": str(e)},
        ) from e

    try:
        entries = fetch_listings(request, client=client)
    except FetchFailed as e:
        raise HTTPException(
            status_code=502,
            detail={"message": str(e), "url": e.url, "status_code": e.status_code},
        ) from e

    return build_listings_response(request, entries)
