"""
SelectPdf API client

Python client for the SelectPdf online HTML to PDF, PDF to text, PDF merge
and usage API.
"""

from .client import ApiClient
from .clients import (
    AsyncJobClient,
    HtmlToPdfClient,
    PdfMergeClient,
    PdfToTextClient,
    UsageClient,
    WebElementsClient,
)
from .config import Settings, get_settings, setup_logging
from .enums import (
    OutputFormat,
    PageLayout,
    PageMode,
    PageNumbersAlignment,
    PageOrientation,
    PageSize,
    RenderingEngine,
    SecureProtocol,
    StartupMode,
    TextLayout,
)
from .exceptions import (
    ApiError,
    ApiStatusError,
    AsyncTimeoutError,
    DecodeError,
    TransportError,
    ValidationError,
)
from .models import (
    CallResult,
    Rectangle,
    TextPosition,
    UsageInformation,
    UsageMonthlyDetails,
    WebElement,
    WebElementPdfRectangle,
)
from .poller import AsyncJobPoller
from .transport import ApiTransport

__version__ = "1.0.0"

__all__ = [
    "ApiClient",
    "AsyncJobClient",
    "HtmlToPdfClient",
    "PdfMergeClient",
    "PdfToTextClient",
    "UsageClient",
    "WebElementsClient",
    "ApiTransport",
    "AsyncJobPoller",
    "Settings",
    "get_settings",
    "setup_logging",
    "CallResult",
    "Rectangle",
    "TextPosition",
    "UsageInformation",
    "UsageMonthlyDetails",
    "WebElement",
    "WebElementPdfRectangle",
    "ApiError",
    "ApiStatusError",
    "AsyncTimeoutError",
    "DecodeError",
    "TransportError",
    "ValidationError",
    "OutputFormat",
    "PageLayout",
    "PageMode",
    "PageNumbersAlignment",
    "PageOrientation",
    "PageSize",
    "RenderingEngine",
    "SecureProtocol",
    "StartupMode",
    "TextLayout",
]
