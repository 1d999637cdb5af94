"""
Feature clients for the SelectPdf API.
"""

from .async_job import AsyncJobClient
from .html_to_pdf import HtmlToPdfClient
from .pdf_merge import PdfMergeClient
from .pdf_to_text import PdfToTextClient
from .usage import UsageClient
from .web_elements import WebElementsClient

__all__ = [
    "AsyncJobClient",
    "HtmlToPdfClient",
    "PdfMergeClient",
    "PdfToTextClient",
    "UsageClient",
    "WebElementsClient",
]
