"""
PDF to text conversion and text search client.
"""

from pathlib import Path
from typing import Any, List, Union

from ..client import ApiClient, write_to_stream
from ..core.parsing import parse_text_positions
from ..enums import OutputFormat, TextLayout
from ..models import TextPosition
from ..sync import sync_method
from ..validators import URLValidator, validate_search_text

PDF_URL_PROTOCOL_MESSAGE = (
    "The supported protocols for the PDFs available online are http:// and https://."
)
PDF_URL_LOCAL_MESSAGE = (
    "Cannot convert local urls via this method. Use get_text_from_file instead."
)


class PdfToTextClient(ApiClient):
    """
    Extracts text from PDF documents and searches text in them.

    The same endpoint serves both actions; the ``action`` parameter selects
    ``Convert`` or ``Search``.
    """

    ENDPOINT_PATH = "pdftotext/"

    def _reset_action(self, action: str) -> None:
        self.parameters["action"] = action
        for name in ("search_text", "case_sensitive", "whole_words_only"):
            self.parameters.pop(name, None)
        self.headers.pop("Accept", None)

    def _prepare_file(self, input_pdf: Union[str, Path], action: str) -> None:
        self._reset_action(action)
        self.parameters["url"] = ""
        self.files.clear()
        self.files["inputPdf"] = input_pdf

    def _prepare_url(self, url: str, action: str) -> None:
        self._reset_action(action)
        self.files.clear()
        self.parameters["url"] = url

    def _prepare_search(
        self, text_to_search: str, case_sensitive: bool, whole_words_only: bool
    ) -> None:
        self._set("search_text", text_to_search)
        self._set("case_sensitive", case_sensitive)
        self._set("whole_words_only", whole_words_only)
        self.headers["Accept"] = "application/json"

    async def _convert(self, async_job: bool) -> str:
        result = await self._execute(multipart=True, async_job=async_job)
        # undecodable bytes become U+FFFD
        return (result.content or b"").decode("utf-8", errors="replace")

    async def _search(self, async_job: bool) -> List[TextPosition]:
        result = await self._execute(multipart=True, async_job=async_job)
        return parse_text_positions(result.content)

    async def get_text_from_file(
        self, input_pdf: Union[str, Path], async_job: bool = False
    ) -> str:
        """
        Get the text of a local PDF file.

        Args:
            input_pdf: Path to the PDF
            async_job: Run the extraction as an asynchronous job and poll for it
        """
        self._prepare_file(input_pdf, "Convert")
        return await self._convert(async_job)

    async def get_text_from_file_to_file(
        self,
        input_pdf: Union[str, Path],
        output_file_path: Union[str, Path],
        async_job: bool = False,
    ) -> None:
        text = await self.get_text_from_file(input_pdf, async_job)
        Path(output_file_path).write_text(text, encoding="utf-8")

    async def get_text_from_file_to_stream(
        self, input_pdf: Union[str, Path], stream: Any, async_job: bool = False
    ) -> None:
        text = await self.get_text_from_file(input_pdf, async_job)
        write_to_stream(stream, text.encode("utf-8"))

    async def get_text_from_url(self, url: str, async_job: bool = False) -> str:
        """Get the text of a PDF available at a public http(s) url."""
        URLValidator.validate_url(url, PDF_URL_PROTOCOL_MESSAGE, PDF_URL_LOCAL_MESSAGE)
        self._prepare_url(url, "Convert")
        return await self._convert(async_job)

    async def get_text_from_url_to_file(
        self, url: str, output_file_path: Union[str, Path], async_job: bool = False
    ) -> None:
        text = await self.get_text_from_url(url, async_job)
        Path(output_file_path).write_text(text, encoding="utf-8")

    async def get_text_from_url_to_stream(
        self, url: str, stream: Any, async_job: bool = False
    ) -> None:
        text = await self.get_text_from_url(url, async_job)
        write_to_stream(stream, text.encode("utf-8"))

    async def search_file(
        self,
        input_pdf: Union[str, Path],
        text_to_search: str,
        case_sensitive: bool = False,
        whole_words_only: bool = False,
        async_job: bool = False,
    ) -> List[TextPosition]:
        """
        Search for text in a local PDF file.

        Returns:
            Positions of the matches in document order

        Raises:
            ValidationError: If the search text is empty
            DecodeError: If the search results cannot be decoded
        """
        validate_search_text(text_to_search)
        self._prepare_file(input_pdf, "Search")
        self._prepare_search(text_to_search, case_sensitive, whole_words_only)
        return await self._search(async_job)

    async def search_url(
        self,
        url: str,
        text_to_search: str,
        case_sensitive: bool = False,
        whole_words_only: bool = False,
        async_job: bool = False,
    ) -> List[TextPosition]:
        """Search for text in a PDF available at a public http(s) url."""
        URLValidator.validate_url(url, PDF_URL_PROTOCOL_MESSAGE, PDF_URL_LOCAL_MESSAGE)
        validate_search_text(text_to_search)
        self._prepare_url(url, "Search")
        self._prepare_search(text_to_search, case_sensitive, whole_words_only)
        return await self._search(async_job)

    get_text_from_file_sync = sync_method("get_text_from_file")
    get_text_from_file_to_file_sync = sync_method("get_text_from_file_to_file")
    get_text_from_file_to_stream_sync = sync_method("get_text_from_file_to_stream")
    get_text_from_url_sync = sync_method("get_text_from_url")
    get_text_from_url_to_file_sync = sync_method("get_text_from_url_to_file")
    get_text_from_url_to_stream_sync = sync_method("get_text_from_url_to_stream")
    search_file_sync = sync_method("search_file")
    search_url_sync = sync_method("search_url")

    def set_start_page(self, start_page: int) -> "PdfToTextClient":
        """First page to process, 1-based."""
        return self._set("start_page", start_page)

    def set_end_page(self, end_page: int) -> "PdfToTextClient":
        """Last page to process, 0 means the last page of the document."""
        return self._set("end_page", end_page)

    def set_user_password(self, user_password: str) -> "PdfToTextClient":
        return self._set("user_password", user_password)

    def set_text_layout(self, text_layout: TextLayout) -> "PdfToTextClient":
        return self._set("text_layout", TextLayout(text_layout))

    def set_output_format(self, output_format: OutputFormat) -> "PdfToTextClient":
        return self._set("output_format", OutputFormat(output_format))

    def set_timeout(self, timeout: int) -> "PdfToTextClient":
        return self._set("timeout", timeout)
