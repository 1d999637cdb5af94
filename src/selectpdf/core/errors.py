"""
Error mapping functions.

Turn HTTP status failures and transport failures into the client's exception
taxonomy. Every message carries the status code prefix when one exists.
"""

from typing import Optional

import httpx

from ..exceptions import ApiStatusError, TransportError


def format_status_message(status_code: int, message: str) -> str:
    return f"({status_code}) {message}"


def map_status_failure(
    status_code: int, body_text: Optional[str], reason_phrase: str = ""
) -> ApiStatusError:
    """Map a non-success status to an ApiStatusError.

    The server puts a human-readable message in the body; the reason phrase
    is used only when the body is empty.
    """
    message = (body_text or "").strip() or reason_phrase or "Unknown error"
    return ApiStatusError(
        format_status_message(status_code, message),
        {"status_code": status_code, "body": body_text or ""},
        status_code=status_code,
    )


def map_transport_failure(endpoint: str, exception: Exception) -> TransportError:
    """Map a failure where no response was received at all."""
    if isinstance(exception, httpx.TimeoutException):
        kind = "Timeout"
    else:
        kind = "Web Exception"

    return TransportError(
        f"Could not get a response from the API endpoint: {endpoint}. "
        f"{kind}: {exception}.",
        endpoint,
        cause=exception,
    )


def classify_status(status_code: int) -> str:
    """Classify an HTTP status as "ok", "accepted" or "error"."""
    if status_code == 200:
        return "ok"
    elif status_code == 202:
        return "accepted"
    else:
        return "error"
