"""
Custom exceptions for the SelectPdf client.
"""

from typing import Dict, Any, Optional


class ApiError(Exception):
    """Base exception for every failure surfaced by the client."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.status_code = status_code
        self.cause = cause


class ValidationError(ApiError):
    """Raised when input is rejected before any network call is made."""

    pass


class TransportError(ApiError):
    """Raised when no response could be obtained from the API endpoint."""

    def __init__(
        self,
        message: str,
        endpoint: str,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, {"endpoint": endpoint}, cause=cause)
        self.endpoint = endpoint


class ApiStatusError(ApiError):
    """Raised when the API answers with a non-success HTTP status."""

    pass


class AsyncTimeoutError(ApiError):
    """Raised when an asynchronous job does not finish within the ping budget."""

    pass


class DecodeError(ApiError):
    """Raised when a response body or metadata header cannot be decoded."""

    pass
