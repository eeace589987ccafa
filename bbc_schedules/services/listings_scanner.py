"""
Listings Scanner Service

Extracts programme entries from the HTML of an at-a-glance schedule page.

The page is scanned line by line. Three kinds of marker line feed a single
in-progress entry:
    - the start/end time span pair
    - the programme link
    - the programme title, which closes the entry

Entries missing any field are dropped without error.
"""
from html import unescape
import logging
import re
from typing import Iterable

from bbc_schedules.services.listing_types import ProgrammeEntry
from bbc_schedules.utils.logging_helpers import log_scan_summary


logger = logging.getLogger(__name__)

TIMES_PATTERN = re.compile(
    r'<span class="starttime">(.*)</span><span class="endtime">&#8211;(.*)</span>'
)
URL_PATTERN = re.compile(r'class="url" href="(.*)">')
TITLE_PATTERN = re.compile(r'class="title">(.*)</span>')
LEADING_DIGITS_PATTERN = re.compile(r"\s*(\d+)")

ENTRY_FIELDS = ("start_time", "end_time", "title", "url")

# Entries closed before a midnight start is treated as the next day's listings.
ROLLOVER_MIN_ENTRIES = 3


def scan_listings(body: str, base_url: str) -> list[ProgrammeEntry]:
    """
    Scan a schedule page into programme entries

    Args:
        body: Page HTML
        base_url: Site origin prepended to relative programme links

    Returns:
        Entries in page order
    """
    return scan_lines(body.splitlines(), base_url)


def scan_lines(lines: Iterable[str], base_url: str) -> list[ProgrammeEntry]:
    """
    Scan pre-split page lines into programme entries

    Args:
        lines: Page lines
        base_url: Site origin prepended to relative programme links

    Returns:
        Entries in page order
    """
    base_url = base_url.rstrip("/")
    entries: list[ProgrammeEntry] = []
    partial: dict[str, str] = {}
    closed = 0
    dropped = 0

    for raw_line in lines:
        line = raw_line.strip()
        if not line:
            continue

        match = TIMES_PATTERN.search(line)
        if match:
            start_time, end_time = match.group(1), match.group(2)
            if closed > ROLLOVER_MIN_ENTRIES and _hour_of(start_time) == 0:
                logger.debug(f"Midnight rollover at {start_time} after {closed} entries, stopping scan")
                break
            partial["start_time"] = start_time
            partial["end_time"] = end_time
            continue

        match = URL_PATTERN.search(line)
        if match:
            partial["url"] = base_url + match.group(1)
            continue

        match = TITLE_PATTERN.search(line)
        if match:
            partial["title"] = unescape(match.group(1))
            if all(partial.get(field) for field in ENTRY_FIELDS):
                entries.append(ProgrammeEntry(**partial))
            else:
                dropped += 1
            partial = {}
            closed += 1

    log_scan_summary(logger, len(entries), dropped, closed)
    return entries


def _hour_of(start_time: str) -> int:
    """Leading digits of the hour part of an 'HH:MM' time, 0 when there are none"""
    match = LEADING_DIGITS_PATTERN.match(start_time.split(":", 1)[0])
    return int(match.group(1)) if match else 0
