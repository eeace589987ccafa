"""
Request Validator Service

Checks a user supplied parameter mapping against the per-channel rules and
normalises it into a ScheduleRequest. No network access happens here.
"""
from collections.abc import Mapping
from datetime import date
import logging
from typing import Any

from bbc_schedules.channels import CHANNELS, FREQUENCIES, LOCATIONS
from bbc_schedules.exceptions import (
    InvalidChannel,
    InvalidDate,
    InvalidFrequency,
    InvalidLocation,
    MissingChannel,
    MissingDay,
    MissingFrequency,
    MissingLocation,
    MissingMonth,
    MissingYear,
    NotAMapping,
    UnexpectedKey,
    UnexpectedKeyCount,
)
from bbc_schedules.schemas import ScheduleRequest


logger = logging.getLogger(__name__)

DATE_KEYS = ("year", "month", "day")
BASE_KEYS = frozenset({"channel", *DATE_KEYS})

_MISSING_DATE_ERRORS = {
    "year": MissingYear,
    "month": MissingMonth,
    "day": MissingDay,
}


def expected_keys(channel: str) -> frozenset[str]:
    """
    Key set a request for this channel must carry

    Args:
        channel: Known channel code

    Returns:
        Base keys plus 'location' for Radio 1 or 'frequency' for Radio 4
    """
    keys = set(BASE_KEYS)
    if channel in LOCATIONS:
        keys.add("location")
    if channel in FREQUENCIES:
        keys.add("frequency")
    return frozenset(keys)


def allowed_key_counts(params: Mapping, expected: frozenset[str]) -> set[int]:
    """
    Key counts that pass the coarse size check

    A missing 'location' / 'frequency' is left to its own rule, so the
    counts without that key are allowed too.

    Args:
        params: Supplied request mapping
        expected: Expected key set for the channel

    Returns:
        Counts with and without the date keys
    """
    sizes = {len(expected)}
    if any(key not in BASE_KEYS and key not in params for key in expected):
        sizes.add(len(expected) - 1)
    return sizes | {size - len(DATE_KEYS) for size in sizes}


def validate_request(params: Any, today: date | None = None) -> ScheduleRequest:
    """
    Validate a schedule request mapping

    Rules are applied in a fixed order so that a given input always fails
    with the same error kind.

    Args:
        params: Mapping with 'channel' and, depending on the channel,
            'location' or 'frequency', plus optional 'year', 'month', 'day'
        today: Date used when the date keys are omitted (defaults to the
            current local date)

    Returns:
        Normalised ScheduleRequest

    Raises:
        ScheduleValidationError: One of its subclasses, naming the rule that failed
    """
    if not isinstance(params, Mapping):
        raise NotAMapping(
            f"Schedule request must be a mapping, got {type(params).__name__}"
        )

    if "channel" not in params:
        raise MissingChannel("Missing key 'channel'", key="channel")

    channel = params["channel"]
    if not isinstance(channel, str) or channel not in CHANNELS:
        raise InvalidChannel(f"Invalid channel: {channel!r}", key="channel")

    expected = expected_keys(channel)
    if len(params) not in allowed_key_counts(params, expected):
        raise UnexpectedKeyCount(
            f"Channel '{channel}' expects {len(expected) - len(DATE_KEYS)} or "
            f"{len(expected)} keys, got {len(params)}"
        )

    location = _check_sub_parameter(
        params, channel, "location", LOCATIONS, MissingLocation, InvalidLocation
    )
    frequency = _check_sub_parameter(
        params, channel, "frequency", FREQUENCIES, MissingFrequency, InvalidFrequency
    )

    if any(key in params for key in DATE_KEYS):
        for key in DATE_KEYS:
            if key not in params:
                raise _MISSING_DATE_ERRORS[key](f"Missing key '{key}'", key=key)
        year, month, day = (_as_int(params, key) for key in DATE_KEYS)
        try:
            date(year, month, day)
        except ValueError as e:
            raise InvalidDate(f"Invalid date {year}/{month}/{day}: {e}", key="day") from e
    else:
        current = today or date.today()
        year, month, day = current.year, current.month, current.day

    # The count check above lets three unknown keys stand in for the date keys.
    unknown = sorted(str(key) for key in params if key not in expected)
    if unknown:
        raise UnexpectedKey(
            f"Unexpected key '{unknown[0]}' for channel '{channel}'", key=unknown[0]
        )

    request = ScheduleRequest(
        channel=channel,
        location=location,
        frequency=frequency,
        year=year,
        month=month,
        day=day,
    )
    logger.debug(f"Validated schedule request: {request.model_dump()}")
    return request


def _check_sub_parameter(
    params: Mapping,
    channel: str,
    key: str,
    table: Mapping[str, Mapping[str, str]],
    missing_error: type,
    invalid_error: type,
) -> str | None:
    """Validate 'location' / 'frequency' for the channel that requires it"""
    if channel not in table:
        return None
    if key not in params:
        raise missing_error(f"Missing key '{key}' for channel '{channel}'", key=key)
    value = params[key]
    if not isinstance(value, str) or value not in table[channel]:
        raise invalid_error(f"Invalid {key} for channel '{channel}': {value!r}", key=key)
    return value


def _as_int(params: Mapping, key: str) -> int:
    """Coerce a date component to int, accepting integral strings"""
    value = params[key]
    if isinstance(value, bool):
        raise InvalidDate(f"Invalid {key}: {value!r}", key=key)
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise InvalidDate(f"Invalid {key}: {value!r}", key=key)
