"""Tests for schedule request validation."""

from __future__ import annotations

from datetime import date

import pytest

from bbc_schedules.channels import CHANNELS
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
    ScheduleValidationError,
    UnexpectedKey,
    UnexpectedKeyCount,
)
from bbc_schedules.services.request_validator import (
    allowed_key_counts,
    expected_keys,
    validate_request,
)

TODAY = date(2011, 11, 15)


def valid_params(channel: str) -> dict:
    params = {"channel": channel, "year": 2011, "month": 4, "day": 4}
    if channel == "radio1":
        params["location"] = "england"
    if channel == "radio4":
        params["frequency"] = "fm"
    return params


@pytest.mark.parametrize("channel", sorted(CHANNELS))
def test_every_channel_accepts_its_expected_keys(channel: str) -> None:
    request = validate_request(valid_params(channel), today=TODAY)

    assert request.channel == channel
    assert (request.year, request.month, request.day) == (2011, 4, 4)
    assert request.location == ("england" if channel == "radio1" else None)
    assert request.frequency == ("fm" if channel == "radio4" else None)


@pytest.mark.parametrize("channel", sorted(CHANNELS))
def test_every_channel_defaults_to_today_without_date_keys(channel: str) -> None:
    params = valid_params(channel)
    for key in ("year", "month", "day"):
        del params[key]

    request = validate_request(params, today=TODAY)

    assert request.schedule_date == TODAY


def test_defaults_to_current_date_when_today_not_injected() -> None:
    before = date.today()
    request = validate_request({"channel": "radio2"})
    after = date.today()

    assert request.schedule_date in (before, after)


@pytest.mark.parametrize("params", [["channel", "radio2"], "radio2", None, 42])
def test_rejects_non_mapping_input(params) -> None:
    with pytest.raises(NotAMapping):
        validate_request(params, today=TODAY)


def test_rejects_missing_channel() -> None:
    with pytest.raises(MissingChannel) as exc_info:
        validate_request({"year": 2011, "month": 4, "day": 4}, today=TODAY)

    assert exc_info.value.key == "channel"
    assert exc_info.value.kind == "MissingChannel"


@pytest.mark.parametrize("channel", ["radio5", "Radio1", "", None, 1])
def test_rejects_unknown_channel(channel) -> None:
    with pytest.raises(InvalidChannel):
        validate_request({"channel": channel}, today=TODAY)


@pytest.mark.parametrize(
    "params",
    [
        {"channel": "radio2", "location": "england"},
        {"channel": "radio2", "year": 2011, "month": 4, "day": 4, "frequency": "fm"},
        {"channel": "radio1", "location": "england", "year": 2011},
        {"channel": "radio4", "frequency": "fm", "year": 2011, "month": 4, "day": 4, "extra": 1},
    ],
)
def test_rejects_wrong_key_count(params) -> None:
    with pytest.raises(UnexpectedKeyCount):
        validate_request(params, today=TODAY)


def test_radio1_requires_location() -> None:
    with pytest.raises(MissingLocation) as exc_info:
        validate_request({"channel": "radio1"}, today=TODAY)

    assert exc_info.value.key == "location"


def test_radio1_with_date_but_no_location_reports_missing_location() -> None:
    with pytest.raises(MissingLocation) as exc_info:
        validate_request({"channel": "radio1", "year": 2011, "month": 4, "day": 4}, today=TODAY)

    assert exc_info.value.key == "location"


def test_radio4_with_date_but_no_frequency_reports_missing_frequency() -> None:
    with pytest.raises(MissingFrequency):
        validate_request({"channel": "radio4", "year": 2011, "month": 4, "day": 4}, today=TODAY)


def test_radio1_rejects_frequency_in_place_of_location() -> None:
    with pytest.raises(MissingLocation):
        validate_request({"channel": "radio1", "frequency": "fm"}, today=TODAY)


@pytest.mark.parametrize("location", ["london", "England", "", None])
def test_radio1_rejects_unknown_location(location) -> None:
    with pytest.raises(InvalidLocation):
        validate_request({"channel": "radio1", "location": location}, today=TODAY)


@pytest.mark.parametrize("location", ["england", "northernireland", "scotland", "wales"])
def test_radio1_accepts_every_location(location: str) -> None:
    request = validate_request({"channel": "radio1", "location": location}, today=TODAY)

    assert request.location == location


def test_radio4_requires_frequency() -> None:
    with pytest.raises(MissingFrequency) as exc_info:
        validate_request({"channel": "radio4"}, today=TODAY)

    assert exc_info.value.key == "frequency"


@pytest.mark.parametrize("frequency", ["am", "FM", "dab", 198])
def test_radio4_rejects_unknown_frequency(frequency) -> None:
    with pytest.raises(InvalidFrequency):
        validate_request({"channel": "radio4", "frequency": frequency}, today=TODAY)


@pytest.mark.parametrize("frequency", ["fm", "lw"])
def test_radio4_accepts_every_frequency(frequency: str) -> None:
    request = validate_request({"channel": "radio4", "frequency": frequency}, today=TODAY)

    assert request.frequency == frequency


@pytest.mark.parametrize(
    "params, error",
    [
        ({"channel": "radio2", "month": 4, "day": 4, "foo": 1}, MissingYear),
        ({"channel": "radio2", "year": 2011, "day": 4, "foo": 1}, MissingMonth),
        ({"channel": "radio2", "year": 2011, "month": 4, "foo": 1}, MissingDay),
        ({"channel": "radio2", "day": 4, "foo": 1, "bar": 2}, MissingYear),
    ],
)
def test_partial_dates_report_first_missing_component(params, error) -> None:
    with pytest.raises(error):
        validate_request(params, today=TODAY)


def test_unknown_keys_standing_in_for_date_are_rejected() -> None:
    with pytest.raises(UnexpectedKey) as exc_info:
        validate_request({"channel": "radio2", "foo": 1, "bar": 2, "baz": 3}, today=TODAY)

    assert exc_info.value.key == "bar"


@pytest.mark.parametrize(
    "year, month, day",
    [(2011, 2, 30), (2011, 13, 1), (2011, 0, 1), ("2011", "four", "4"), (True, 4, 4), (2011.0, 4, 4)],
)
def test_rejects_impossible_dates(year, month, day) -> None:
    with pytest.raises(InvalidDate):
        validate_request({"channel": "radio2", "year": year, "month": month, "day": day}, today=TODAY)


def test_accepts_integral_date_strings() -> None:
    request = validate_request(
        {"channel": "radio2", "year": "2011", "month": "4", "day": "04"}, today=TODAY
    )

    assert (request.year, request.month, request.day) == (2011, 4, 4)


def test_validation_is_repeatable() -> None:
    params = {"channel": "radio4", "frequency": "lw"}

    assert validate_request(params, today=TODAY) == validate_request(params, today=TODAY)
    with pytest.raises(MissingFrequency):
        validate_request({"channel": "radio4"}, today=TODAY)
    with pytest.raises(MissingFrequency):
        validate_request({"channel": "radio4"}, today=TODAY)


def test_validation_does_not_mutate_input() -> None:
    params = {"channel": "radio1", "location": "wales"}

    validate_request(params, today=TODAY)

    assert params == {"channel": "radio1", "location": "wales"}


def test_all_validation_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        validate_request({"channel": "nope"}, today=TODAY)
    assert issubclass(ScheduleValidationError, ValueError)


def test_expected_keys_per_channel() -> None:
    assert expected_keys("radio1") == {"channel", "location", "year", "month", "day"}
    assert expected_keys("radio4") == {"channel", "frequency", "year", "month", "day"}
    assert expected_keys("6music") == {"channel", "year", "month", "day"}


def test_allowed_key_counts_tolerate_missing_sub_parameter() -> None:
    expected = expected_keys("radio4")

    assert allowed_key_counts({"channel": "radio4"}, expected) == {1, 2, 4, 5}
    assert allowed_key_counts({"channel": "radio4", "frequency": "fm"}, expected) == {2, 5}
    assert allowed_key_counts({"channel": "radio2"}, expected_keys("radio2")) == {1, 4}
