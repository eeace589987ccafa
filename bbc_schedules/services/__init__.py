"""
Services package for BBC Radio schedules

This package contains the validation, fetching and scanning logic.
"""
from bbc_schedules.services.listing_types import ProgrammeEntry
from bbc_schedules.services.listings_scanner import scan_listings
from bbc_schedules.services.listings_service import (
    ProgrammeSchedules,
    build_listings_response,
    fetch_listings,
    format_listings,
    get_listings,
)
from bbc_schedules.services.request_validator import validate_request
from bbc_schedules.services.schedule_fetcher import build_schedule_url, fetch_schedule_page

__all__ = [
    'ProgrammeEntry',
    'ProgrammeSchedules',
    'build_listings_response',
    'build_schedule_url',
    'fetch_listings',
    'fetch_schedule_page',
    'format_listings',
    'get_listings',
    'scan_listings',
    'validate_request',
]
