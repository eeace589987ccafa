"""
BBC Radio programme schedules

Fetches a BBC Radio channel's at-a-glance schedule page for one day and
extracts its programme listings.
"""
from bbc_schedules.exceptions import FetchFailed, ScheduleFetchError, ScheduleValidationError
from bbc_schedules.services import (
    ProgrammeEntry,
    ProgrammeSchedules,
    format_listings,
    get_listings,
    validate_request,
)

__version__ = "0.1.0"

__all__ = [
    'FetchFailed',
    'ProgrammeEntry',
    'ProgrammeSchedules',
    'ScheduleFetchError',
    'ScheduleValidationError',
    'format_listings',
    'get_listings',
    'validate_request',
]
