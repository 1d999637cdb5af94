"""
Core pure functions for the client.

This package contains the request encoders, response header extractors,
body decoders and error mappers used by the transport.
"""

from .encoding import (
    ENCODE_CHUNK_SIZE,
    URLENCODED_CONTENT_TYPE,
    encode_component,
    serialize_parameters,
    build_urlencoded_body,
    build_multipart_body,
    generate_boundary,
    multipart_content_type,
    encode_header_value,
)

from .metadata import (
    PAGES_HEADER,
    JOB_ID_HEADER,
    WEB_ELEMENTS_COUNT_HEADER,
    WEB_ELEMENTS_CHUNK_HEADER,
    extract_page_count,
    extract_job_id,
    extract_web_elements,
    parse_web_elements_json,
)

from .parsing import (
    parse_text_positions,
    parse_usage_xml,
)

from .errors import (
    classify_status,
    format_status_message,
    map_status_failure,
    map_transport_failure,
)

__all__ = [
    # Encoding
    "ENCODE_CHUNK_SIZE",
    "URLENCODED_CONTENT_TYPE",
    "encode_component",
    "serialize_parameters",
    "build_urlencoded_body",
    "build_multipart_body",
    "generate_boundary",
    "multipart_content_type",
    "encode_header_value",
    # Metadata
    "PAGES_HEADER",
    "JOB_ID_HEADER",
    "WEB_ELEMENTS_COUNT_HEADER",
    "WEB_ELEMENTS_CHUNK_HEADER",
    "extract_page_count",
    "extract_job_id",
    "extract_web_elements",
    "parse_web_elements_json",
    # Parsing
    "parse_text_positions",
    "parse_usage_xml",
    # Errors
    "classify_status",
    "format_status_message",
    "map_status_failure",
    "map_transport_failure",
]
