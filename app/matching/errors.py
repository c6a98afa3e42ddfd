"""
Matching request errors.

Every failure is scoped to one request and converted to
{"error": <message>} with the http_code below.
"""

from enum import Enum


class MatchingError(Enum):
    UNAUTHORIZED = "UNAUTHORIZED"
    UPSTREAM_FETCH_FAILED = "UPSTREAM_FETCH_FAILED"


class MatchingRequestException(Exception):
    """Base exception for matching request failures."""

    def __init__(self, error_code: MatchingError, message: str, http_code: int = 500):
        self.error_code = error_code
        self.message = message
        self.http_code = http_code
        super().__init__(f"{error_code.value}: {message}")


class UnauthorizedError(MatchingRequestException):
    """Missing or invalid identity credential. Never retried."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(MatchingError.UNAUTHORIZED, message, http_code=401)


class UpstreamFetchError(MatchingRequestException):
    """The Preferences or Fields store fetch itself failed."""

    def __init__(self, message: str):
        super().__init__(MatchingError.UPSTREAM_FETCH_FAILED, message, http_code=500)
