"""
Pure functions for building request bodies.

Functions for url-encoded and multipart/form-data serialization of the
parameter, file and binary stores. File attachments are the only I/O: each
file is opened once per encode and closed whether encoding succeeds or not.
"""

import uuid
from pathlib import Path
from typing import Mapping, Optional, Tuple, Union
from urllib.parse import quote

URLENCODED_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Largest piece handed to a single percent-encoding call.
ENCODE_CHUNK_SIZE = 32765

NEW_LINE = "\r\n"

# RFC 3986 unreserved characters, everything else is escaped
_SAFE_CHARACTERS = "-._~"


def encode_component(value: str, chunk_size: int = ENCODE_CHUNK_SIZE) -> str:
    """Percent-encode a value piecewise.

    The value is split into ``chunk_size`` pieces which are encoded one at a
    time and concatenated. The result equals encoding the whole value at once.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    return "".join(
        quote(value[start : start + chunk_size], safe=_SAFE_CHARACTERS, encoding="utf-8")
        for start in range(0, len(value), chunk_size)
    )


def serialize_parameters(parameters: Mapping[str, str]) -> str:
    """Serialize a mapping as ``key=value&`` pairs with encoded values."""
    return "".join(
        f"{key}={encode_component(value)}&" for key, value in parameters.items()
    )


def build_urlencoded_body(parameters: Mapping[str, str]) -> bytes:
    """Build an application/x-www-form-urlencoded request body."""
    return serialize_parameters(parameters).encode("utf-8")


def generate_boundary() -> str:
    return f"------------------------{uuid.uuid4().hex}"


def multipart_content_type(boundary: str) -> str:
    return f"multipart/form-data; boundary={boundary}"


def _file_part_header(boundary: str, name: str, filename: str) -> bytes:
    return (
        f"--{boundary}{NEW_LINE}"
        f'Content-Disposition: form-data; name="{name}"; filename="{filename}"{NEW_LINE}'
        f"Content-Type: application/octet-stream{NEW_LINE}"
        f"{NEW_LINE}"
    ).encode("utf-8")


def build_multipart_body(
    parameters: Mapping[str, str],
    files: Optional[Mapping[str, Union[str, Path]]] = None,
    binary_data: Optional[Mapping[str, bytes]] = None,
    boundary: Optional[str] = None,
) -> Tuple[bytes, str]:
    """Build a multipart/form-data request body.

    Parts are emitted in order: parameters, files, binary data, then the
    closing boundary. File parts use the path as given for ``filename``;
    binary parts use the field name.

    Returns:
        Tuple of (body bytes, content type including the boundary)
    """
    boundary = boundary or generate_boundary()
    body = bytearray()

    for name, value in parameters.items():
        body += (
            f"--{boundary}{NEW_LINE}"
            f'Content-Disposition: form-data; name="{name}"{NEW_LINE}'
            f"{NEW_LINE}"
            f"{value}{NEW_LINE}"
        ).encode("utf-8")

    for name, path in (files or {}).items():
        body += _file_part_header(boundary, name, str(path))
        with open(path, "rb") as handle:
            body += handle.read()
        body += NEW_LINE.encode("utf-8")

    for name, data in (binary_data or {}).items():
        body += _file_part_header(boundary, name, name)
        body += data
        body += NEW_LINE.encode("utf-8")

    body += f"--{boundary}--{NEW_LINE}{NEW_LINE}".encode("utf-8")

    return bytes(body), multipart_content_type(boundary)


def encode_header_value(value: str) -> str:
    """Escape control characters that cannot travel in an HTTP header."""
    if not value:
        return value

    return "".join(
        f"%{ord(ch):02x}" if (ord(ch) < 32 and ch != "\t") or ord(ch) == 127 else ch
        for ch in value
    )
