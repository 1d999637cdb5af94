"""
Pure functions for reading out-of-band result metadata from response headers.
"""

import base64
import binascii
from typing import List, Mapping, Optional

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from ..exceptions import DecodeError
from ..models import WebElement

PAGES_HEADER = "selectpdf-api-pages"
JOB_ID_HEADER = "selectpdf-api-jobid"
WEB_ELEMENTS_COUNT_HEADER = "selectpdf-api-web-elements-headers-count"
WEB_ELEMENTS_CHUNK_HEADER = "selectpdf-api-web-elements-header-{index}"

_web_elements_adapter = TypeAdapter(List[WebElement])


def _header(headers: Mapping[str, str], name: str) -> Optional[str]:
    # httpx.Headers is case-insensitive already; plain dicts are not
    value = headers.get(name)
    if value is None:
        lowered = name.lower()
        for key, candidate in headers.items():
            if key.lower() == lowered:
                return candidate
    return value


def extract_page_count(headers: Mapping[str, str]) -> int:
    """Return the page count header value, 0 when absent or malformed."""
    value = _header(headers, PAGES_HEADER)
    if not value:
        return 0
    try:
        return int(value.strip())
    except ValueError:
        return 0


def extract_job_id(headers: Mapping[str, str]) -> str:
    return (_header(headers, JOB_ID_HEADER) or "").strip()


def parse_web_elements_json(data: bytes) -> List[WebElement]:
    """Decode a JSON array of web elements."""
    try:
        return _web_elements_adapter.validate_json(data)
    except PydanticValidationError as e:
        raise DecodeError("Could not get API web elements.", cause=e) from e


def extract_web_elements(headers: Mapping[str, str]) -> Optional[List[WebElement]]:
    """Reassemble and decode the chunked web elements headers.

    The payload is split over ``N`` numbered headers because of header size
    limits. Returns None when the count header is absent.

    Raises:
        DecodeError: If the count, a chunk, the Base64 or the JSON is invalid
    """
    count_value = _header(headers, WEB_ELEMENTS_COUNT_HEADER)
    if not count_value:
        return None

    try:
        count = int(count_value.strip())
    except ValueError as e:
        raise DecodeError(
            f"Invalid web elements headers count: {count_value}", cause=e
        ) from e

    chunks = []
    for index in range(1, count + 1):
        chunk = _header(headers, WEB_ELEMENTS_CHUNK_HEADER.format(index=index))
        if chunk is None:
            raise DecodeError(
                f"Missing web elements header {index} of {count}",
                {"index": index, "count": count},
            )
        chunks.append(chunk.strip())

    try:
        document = base64.b64decode("".join(chunks), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise DecodeError("Could not decode API web elements headers.", cause=e) from e

    return parse_web_elements_json(document)
