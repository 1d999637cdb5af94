"""
PDF merge client.
"""

from pathlib import Path
from typing import Any, Optional, Union

from ..client import ApiClient
from ..models import CallResult
from ..sync import sync_method
from ..validators import URLValidator
from .options import PdfDocumentOptionsMixin


class PdfMergeClient(PdfDocumentOptionsMixin, ApiClient):
    """
    Merges several PDF documents into one.

    Documents are sent in the order they were added. The list of documents
    is cleared after every save, whether it succeeded or not.

    Examples:
        >>> client = PdfMergeClient("your-api-key")
        >>> client.add_file("a.pdf").add_url_file("https://example.com/b.pdf")
        >>> pdf = await client.save()
    """

    ENDPOINT_PATH = "pdfmerge/"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._file_idx = 0

    def _set_password(self, idx: int, password: Optional[str]) -> None:
        if password:
            self.parameters[f"password_{idx}"] = password
        else:
            self.parameters.pop(f"password_{idx}", None)

    def add_file(
        self, input_pdf: Union[str, Path], password: Optional[str] = None
    ) -> "PdfMergeClient":
        """Add a local PDF file, optionally protected by a user password."""
        self._file_idx += 1
        self.files[f"file_{self._file_idx}"] = input_pdf
        self.parameters.pop(f"url_{self._file_idx}", None)
        self._set_password(self._file_idx, password)
        return self

    def add_url_file(
        self, input_url: str, password: Optional[str] = None
    ) -> "PdfMergeClient":
        """Add a PDF available at a public http(s) url."""
        URLValidator.validate_url(
            input_url,
            "The supported protocols for the PDFs available online are http:// and https://.",
        )
        self._file_idx += 1
        self.files.pop(f"file_{self._file_idx}", None)
        self.parameters[f"url_{self._file_idx}"] = input_url
        self._set_password(self._file_idx, password)
        return self

    def _reset_files(self) -> None:
        for idx in range(1, self._file_idx + 1):
            self.parameters.pop(f"url_{idx}", None)
            self.parameters.pop(f"password_{idx}", None)
        self.files.clear()
        self._file_idx = 0

    async def _save(self, async_job: bool, sink: Any = None, file_path: Any = None) -> CallResult:
        self.parameters["files_no"] = str(self._file_idx)
        try:
            if file_path is not None:
                return await self._execute_to_file(
                    file_path, multipart=True, async_job=async_job
                )
            return await self._execute(multipart=True, async_job=async_job, sink=sink)
        finally:
            self._reset_files()

    async def save(self, async_job: bool = False) -> bytes:
        """
        Merge the added documents.

        Args:
            async_job: Run the merge as an asynchronous job and poll for it

        Returns:
            The merged PDF document
        """
        result = await self._save(async_job)
        return result.content or b""

    async def save_to_file(
        self, file_path: Union[str, Path], async_job: bool = False
    ) -> CallResult:
        return await self._save(async_job, file_path=file_path)

    async def save_to_stream(self, stream: Any, async_job: bool = False) -> CallResult:
        return await self._save(async_job, sink=stream)

    save_sync = sync_method("save")
    save_to_file_sync = sync_method("save_to_file")
    save_to_stream_sync = sync_method("save_to_stream")
