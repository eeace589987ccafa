"""
Error types raised while validating schedule requests and fetching pages.
"""


class ScheduleValidationError(ValueError):
    """Raised when a schedule request mapping is rejected"""

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key

    @property
    def kind(self) -> str:
        return type(self).__name__


class NotAMapping(ScheduleValidationError):
    pass


class MissingChannel(ScheduleValidationError):
    pass


class InvalidChannel(ScheduleValidationError):
    pass


class UnexpectedKeyCount(ScheduleValidationError):
    pass


class UnexpectedKey(ScheduleValidationError):
    pass


class MissingLocation(ScheduleValidationError):
    pass


class InvalidLocation(ScheduleValidationError):
    pass


class MissingFrequency(ScheduleValidationError):
    pass


class InvalidFrequency(ScheduleValidationError):
    pass


class MissingYear(ScheduleValidationError):
    pass


class MissingMonth(ScheduleValidationError):
    pass


class MissingDay(ScheduleValidationError):
    pass


class InvalidDate(ScheduleValidationError):
    pass


class ScheduleFetchError(RuntimeError):
    """Raised when the schedule page cannot be retrieved"""


class FetchFailed(ScheduleFetchError):
    """Raised for a transport failure or a non-success HTTP status"""

    def __init__(self, url: str, status_code: int | None = None):
        if status_code is None:
            message = f"Couldn't connect to [{url}]"
        else:
            message = f"Couldn't fetch [{url}]: HTTP {status_code}"
        super().__init__(message)
        self.url = url
        self.status_code = status_code
