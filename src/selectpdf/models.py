"""
Data models for call results and structured API responses.
"""

import re
from dataclasses import dataclass, field
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, model_validator


def _snake_case(key: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


class _ApiModel(BaseModel):
    """Base for models decoded from API JSON.

    The service serializes with PascalCase keys while some deployments emit
    camelCase, so keys are normalized to snake_case before validation.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def normalize_keys(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {_snake_case(str(key)): value for key, value in data.items()}
        return data


class Rectangle(_ApiModel):
    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0


class WebElementPdfRectangle(_ApiModel):
    """One rectangle of a web element on a given PDF page (0-based index)."""

    page_index: int = 0
    rectangle: Rectangle = Rectangle()


class WebElement(_ApiModel):
    """
    A tagged region of the source HTML mapped to rectangles in the PDF.

    An element may span several pages, so it carries one rectangle per page
    in document order.
    """

    html_element_id: Optional[str] = None
    html_element_tag_name: Optional[str] = None
    html_element_css_class_name: Optional[str] = None
    pdf_rectangles: List[WebElementPdfRectangle] = []


class TextPosition(_ApiModel):
    """Location of a search match, in PDF points. Page numbers are 1-based."""

    page_number: int = 0
    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0

    def __str__(self) -> str:
        return (
            f"Page: {self.page_number} - [X: {self.x:g}, Y: {self.y:g}, "
            f"Width: {self.width:g}, Height: {self.height:g}]"
        )


class UsageMonthlyDetails(_ApiModel):
    year: int = 0
    month: int = 0
    conversions: int = 0
    credits: int = 0


class UsageInformation(_ApiModel):
    """
    Snapshot of the account usage returned by the usage endpoint.

    Attributes:
        status: Account status reported by the service
        subscription_type: Subscription plan name
        limit: Number of conversions allowed in the current period
        used: Number of conversions already used
        available: Number of conversions still available
        history: Monthly usage details, only filled when history was requested
    """

    status: Optional[str] = None
    subscription_type: Optional[str] = None
    limit: int = 0
    used: int = 0
    available: int = 0
    history: List[UsageMonthlyDetails] = []


@dataclass
class CallResult:
    """
    Outcome of one request/response cycle against the API.

    Attributes:
        content: Full response body, None when a sink consumed it or for 202 answers
        status_code: HTTP status returned by the server
        page_count: Number of pages of the resulting document (0 when unknown)
        job_id: Job identifier; non-empty means the job is still running or
            that the result needs a second request
        web_elements: Decoded web elements, None when not present
        consumed: True when the body was streamed into a caller supplied sink
    """

    content: Optional[bytes] = None
    status_code: int = 0
    page_count: int = 0
    job_id: str = ""
    web_elements: Optional[List[WebElement]] = None
    consumed: bool = False

    @property
    def finished(self) -> bool:
        return not self.job_id
