"""
Structured logging helpers for consistent log formatting.
"""
import logging

from bbc_schedules.schemas import ScheduleRequest


def describe_request(request: ScheduleRequest) -> str:
    """
    Short human readable label for a request

    Args:
        request: Validated schedule request

    Returns:
        Label such as 'radio1/england 2011-04-04'
    """
    variant = request.location or request.frequency
    channel = f"{request.channel}/{variant}" if variant else request.channel
    return f"{channel} {request.schedule_date.isoformat()}"


def log_fetch_start(logger: logging.Logger, request: ScheduleRequest, url: str) -> None:
    """
    Log schedule fetch start.

    Args:
        logger: Logger instance
        request: Request being served
        url: Page URL about to be fetched
    """
    logger.info(f"Fetching listings for {describe_request(request)} from {url}")


def log_fetch_end(logger: logging.Logger, request: ScheduleRequest, entries_count: int) -> None:
    """
    Log schedule fetch end.

    Args:
        logger: Logger instance
        request: Request that was served
        entries_count: Number of programme entries extracted
    """
    logger.info(f"Listings for {describe_request(request)}: {entries_count} programmes")


def log_scan_summary(
    logger: logging.Logger,
    entries_count: int,
    dropped_count: int,
    closed_count: int
) -> None:
    """
    Log listings scan summary.

    Args:
        logger: Logger instance
        entries_count: Complete entries kept
        dropped_count: Entries discarded for a missing field
        closed_count: Title lines seen, kept or not
    """
    logger.debug(
        f"Scan summary - Entries: {entries_count}, Dropped: {dropped_count}, Closed: {closed_count}"
    )
