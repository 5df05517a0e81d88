"""Error taxonomy for verse-of-the-day lookups.

Repositories and the day resolver raise ``VotdError``. The service layer
turns it into a failed ``LookupResult`` and the handler maps every code to
the same status-500 response, so callers never see distinct error codes.
"""

from enum import StrEnum


class ErrorCode(StrEnum):
    CONFIG_ERROR = "config_error"  # API key absent, detected before any network call
    UPSTREAM_ERROR = "upstream_error"  # transport failure or non-2xx from either endpoint
    SHAPE_ERROR = "shape_error"  # expected field missing from a successful response
    INVALID_DAY = "invalid_day"  # ?day= is not an integer in 1-366


class VotdError(Exception):
    """A failed lookup, tagged with the stage that failed."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"VotdError(code={self.code.value!r}, message={self.message!r})"
