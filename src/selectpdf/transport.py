"""
HTTP transport for the SelectPdf API.

Issues one POST per call, classifies the status and returns a fresh
CallResult so that derived metadata never leaks between calls.
"""

import inspect
from typing import Any, Dict, Mapping, Optional

import httpx

from .config import get_logger
from .core.encoding import encode_header_value
from .core.errors import classify_status, map_status_failure, map_transport_failure
from .core.metadata import extract_job_id, extract_page_count, extract_web_elements
from .exceptions import DecodeError
from .models import CallResult

logger = get_logger("transport")

DEFAULT_TIMEOUT = 6000

# Headers owned by the transport itself; they cannot be set generically.
RESTRICTED_HEADERS = {
    "accept",
    "connection",
    "content-length",
    "content-type",
    "expect",
    "host",
    "transfer-encoding",
    "user-agent",
}

# Restricted headers that have a dedicated slot on the request.
DEDICATED_HEADERS = {"accept": "Accept", "user-agent": "User-Agent"}


def build_request_headers(
    content_type: str, headers: Optional[Mapping[str, str]]
) -> Dict[str, str]:
    """Merge caller headers with the transport owned ones."""
    request_headers = {"Content-Type": content_type}

    for name, value in (headers or {}).items():
        lowered = name.lower()
        if lowered in RESTRICTED_HEADERS:
            if lowered in DEDICATED_HEADERS:
                request_headers[DEDICATED_HEADERS[lowered]] = value
            else:
                logger.debug("Ignoring restricted header %s", name)
            continue

        request_headers[encode_header_value(name)] = encode_header_value(value)

    return request_headers


async def _write_to_sink(sink: Any, data: bytes) -> None:
    written = sink.write(data)
    if inspect.isawaitable(written):
        await written


class ApiTransport:
    """Sends encoded bodies to one API endpoint."""

    def __init__(
        self,
        endpoint: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.endpoint = endpoint
        self.timeout = timeout
        self._transport = transport

    def _create_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            transport=self._transport,
        )

    async def send(
        self,
        body: bytes,
        content_type: str,
        headers: Optional[Mapping[str, str]] = None,
        sink: Any = None,
    ) -> CallResult:
        """
        POST a body and read the full response.

        Args:
            body: Encoded request body
            content_type: Content type to declare, including any boundary
            headers: Additional request headers
            sink: Optional object with a ``write(data)`` method that receives
                the response body instead of it being returned

        Returns:
            CallResult for this call

        Raises:
            ApiStatusError: If the server answers with a status other than 200/202
            TransportError: If no response could be obtained
        """
        request_headers = build_request_headers(content_type, headers)
        logger.debug("POST %s (%d bytes, %s)", self.endpoint, len(body), content_type)

        try:
            async with self._create_client() as client:
                async with client.stream(
                    "POST", self.endpoint, content=body, headers=request_headers
                ) as response:
                    return await self._handle_response(response, sink)
        except httpx.TransportError as e:
            raise map_transport_failure(self.endpoint, e) from e

    async def _handle_response(self, response: httpx.Response, sink: Any) -> CallResult:
        status = classify_status(response.status_code)
        logger.debug("Response %d from %s", response.status_code, self.endpoint)

        if status == "error":
            try:
                await response.aread()
                body_text = response.text
            except httpx.HTTPError as e:
                logger.debug("Could not read error body: %s", e)
                body_text = ""
            raise map_status_failure(
                response.status_code, body_text, response.reason_phrase
            )

        result = CallResult(
            status_code=response.status_code,
            job_id=extract_job_id(response.headers),
        )

        if status == "accepted":
            return result

        result.page_count = extract_page_count(response.headers)

        try:
            result.web_elements = extract_web_elements(response.headers)
        except DecodeError as e:
            # the document itself is still valid
            logger.warning("Ignoring malformed web elements headers: %s", e)

        if sink is not None:
            async for chunk in response.aiter_bytes():
                await _write_to_sink(sink, chunk)
            result.consumed = True
        else:
            result.content = await response.aread()

        return result
