"""
Pure functions for decoding structured response bodies.
"""

import xml.etree.ElementTree as ET
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from ..exceptions import DecodeError
from ..models import TextPosition, UsageInformation

USAGE_NAMESPACE = "http://schemas.datacontract.org/2004/07/SelectPdf"

_text_positions_adapter = TypeAdapter(List[TextPosition])


def parse_text_positions(data: Optional[bytes]) -> List[TextPosition]:
    """Decode the JSON array returned by a search call."""
    if data is None:
        raise DecodeError("Could not get search results.", {"reason": "empty body"})
    try:
        return _text_positions_adapter.validate_json(data)
    except PydanticValidationError as e:
        raise DecodeError("Could not get search results.", cause=e) from e


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _element_to_dict(element: ET.Element) -> dict:
    """Flatten child elements into a dict keyed by their local name."""
    values = {}
    for child in element:
        values[_local_name(child.tag)] = (child.text or "").strip()
    return values


def parse_usage_xml(data: Optional[bytes]) -> UsageInformation:
    """Decode the UsageResponse XML document.

    Namespaces are matched by local name so that responses with or without
    the data contract namespace are accepted.
    """
    if not data:
        raise DecodeError("Could not get API usage.", {"reason": "empty body"})

    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise DecodeError("Could not get API usage.", cause=e) from e

    if _local_name(root.tag) != "UsageResponse":
        raise DecodeError(
            "Could not get API usage.", {"reason": f"unexpected root {root.tag}"}
        )

    fields = {}
    history = []
    for child in root:
        name = _local_name(child.tag)
        if name == "history":
            history = [
                _element_to_dict(item)
                for item in child
                if _local_name(item.tag) == "UsageHistory"
            ]
        else:
            fields[name] = (child.text or "").strip()

    # empty numeric elements fall back to the model defaults
    fields = {key: value for key, value in fields.items() if value != ""}
    history = [
        {key: value for key, value in item.items() if value != ""} for item in history
    ]

    try:
        return UsageInformation.model_validate({**fields, "history": history})
    except PydanticValidationError as e:
        raise DecodeError("Could not get API usage.", cause=e) from e
