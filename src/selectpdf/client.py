"""
Base client shared by every feature client.

Holds the parameter, file, binary data and header stores for one logical
API call and sends them through the transport, either directly or as an
asynchronous job driven by the poller.
"""

import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import httpx

from .config import Settings, get_logger, get_settings, setup_logging
from .core.encoding import (
    URLENCODED_CONTENT_TYPE,
    build_multipart_body,
    build_urlencoded_body,
)
from .exceptions import ValidationError
from .models import CallResult, WebElement
from .poller import AsyncJobPoller
from .transport import ApiTransport

logger = get_logger("client")


def format_parameter(value: Any) -> str:
    """Render an option value the way the API expects it."""
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def write_to_stream(stream: Any, data: Optional[bytes]) -> None:
    """Write a result into a caller supplied binary stream and flush it."""
    if data:
        stream.write(data)
    flush = getattr(stream, "flush", None)
    if callable(flush):
        flush()


class ApiClient:
    """
    Base class for API clients. Not meant to be used directly.

    Each instance owns its call stores and must be used for one call at a
    time. Every call returns a CallResult; the page count, job id and web
    elements of the last call are also mirrored on the instance.
    """

    ENDPOINT_PATH = "convert/"
    ASYNC_ENDPOINT_PATH = "asyncjob/"
    WEB_ELEMENTS_ENDPOINT_PATH = "webelements/"

    def __init__(
        self,
        api_key: Optional[str] = None,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Any = None,
    ):
        """
        Initialize client.

        Args:
            api_key: API key; defaults to the SELECTPDF_API_KEY setting
            settings: Settings to use instead of the environment
            transport: httpx transport to send requests through
            sleep: Coroutine function used to wait between job polls
        """
        self.settings = settings or get_settings()
        if self.settings.debug:
            setup_logging("DEBUG")

        api_key = api_key if api_key is not None else self.settings.api_key
        if not api_key:
            raise ValidationError("API key cannot be empty")

        base_url = self.settings.api_base_url.rstrip("/") + "/"
        self.api_endpoint = base_url + self.ENDPOINT_PATH
        self.api_async_endpoint = base_url + self.ASYNC_ENDPOINT_PATH
        self.api_web_elements_endpoint = base_url + self.WEB_ELEMENTS_ENDPOINT_PATH

        self.timeout = self.settings.timeout_seconds
        self.async_calls_ping_interval = self.settings.async_calls_ping_interval
        self.async_calls_max_pings = self.settings.async_calls_max_pings

        self.parameters: Dict[str, str] = {"key": api_key}
        self.headers: Dict[str, str] = {}
        self.files: Dict[str, Union[str, Path]] = {}
        self.binary_data: Dict[str, bytes] = {}

        self.page_count = 0
        self.job_id = ""
        self.web_elements: Optional[List[WebElement]] = None
        # submitted job of the last async call, kept for the web elements lookup
        self._web_elements_job_id = ""

        self._transport = transport
        self._sleep = sleep

    @property
    def api_key(self) -> str:
        return self.parameters["key"]

    def set_api_endpoint(self, api_endpoint: str) -> "ApiClient":
        self.api_endpoint = api_endpoint
        return self

    def set_api_async_endpoint(self, api_async_endpoint: str) -> "ApiClient":
        self.api_async_endpoint = api_async_endpoint
        return self

    def set_api_web_elements_endpoint(self, api_web_elements_endpoint: str) -> "ApiClient":
        self.api_web_elements_endpoint = api_web_elements_endpoint
        return self

    def set_custom_parameter(self, name: str, value: Any) -> "ApiClient":
        """Set any API parameter, including ones without a dedicated setter."""
        self.parameters[name] = format_parameter(value)
        return self

    def set_header(self, name: str, value: str) -> "ApiClient":
        self.headers[name] = value
        return self

    def _set(self, name: str, value: Any) -> "ApiClient":
        self.parameters[name] = format_parameter(value)
        return self

    def get_number_of_pages(self) -> int:
        return self.page_count

    def _reset_call_state(self) -> None:
        self.page_count = 0
        self.job_id = ""
        self.web_elements = None
        self._web_elements_job_id = ""

    def _remember(self, result: CallResult) -> CallResult:
        self.page_count = result.page_count
        self.job_id = result.job_id
        self.web_elements = result.web_elements
        return result

    def _create_transport(self, endpoint: str) -> ApiTransport:
        return ApiTransport(endpoint, timeout=self.timeout, transport=self._transport)

    async def _perform_post(self, sink: Any = None) -> CallResult:
        """Send the parameters as application/x-www-form-urlencoded."""
        self._reset_call_state()
        body = build_urlencoded_body(self.parameters)
        result = await self._create_transport(self.api_endpoint).send(
            body, URLENCODED_CONTENT_TYPE, self.headers, sink=sink
        )
        return self._remember(result)

    async def _perform_post_multipart(self, sink: Any = None) -> CallResult:
        """Send parameters, files and binary data as multipart/form-data."""
        self._reset_call_state()
        body, content_type = build_multipart_body(
            self.parameters, self.files, self.binary_data
        )
        result = await self._create_transport(self.api_endpoint).send(
            body, content_type, self.headers, sink=sink
        )
        return self._remember(result)

    async def _post(self, multipart: bool, sink: Any = None) -> CallResult:
        if multipart:
            return await self._perform_post_multipart(sink)
        return await self._perform_post(sink)

    async def start_async_job(self, multipart: bool = False) -> str:
        """Submit the current call as an asynchronous job and return its id."""
        self.parameters["async"] = "True"
        result = await self._post(multipart)
        return result.job_id

    def _async_job_client(self, job_id: str) -> Any:
        from .clients.async_job import AsyncJobClient

        client = AsyncJobClient(
            self.api_key, job_id, settings=self.settings, transport=self._transport
        )
        client.set_api_endpoint(self.api_async_endpoint)
        return client

    async def _run_async_job(self, multipart: bool = False) -> CallResult:
        """Submit the call as a job and poll the job endpoint until it finishes."""

        async def submit() -> CallResult:
            self.parameters["async"] = "True"
            return await self._post(multipart)

        poller = AsyncJobPoller(
            interval=self.async_calls_ping_interval,
            max_pings=self.async_calls_max_pings,
            sleep=self._sleep,
        )
        result = await poller.run(submit, self._async_job_client)

        self._web_elements_job_id = self.job_id
        self.page_count = result.page_count
        self.web_elements = result.web_elements
        self.job_id = ""
        return result

    async def _execute(
        self, multipart: bool = False, async_job: bool = False, sink: Any = None
    ) -> CallResult:
        """Run the current call either directly or as an asynchronous job."""
        if async_job:
            result = await self._run_async_job(multipart)
            if sink is not None:
                write_to_stream(sink, result.content)
                result.consumed = True
            return result

        self.parameters["async"] = "False"
        result = await self._post(multipart, sink)
        if sink is not None:
            write_to_stream(sink, None)
        return result

    async def _execute_to_file(
        self,
        file_path: Union[str, Path],
        multipart: bool = False,
        async_job: bool = False,
    ) -> CallResult:
        """Run the current call writing the result into a file.

        The file is removed if the call fails so that no truncated output is
        left behind.
        """
        path = Path(file_path)
        handle = open(path, "wb")
        try:
            result = await self._execute(multipart, async_job, sink=handle)
        except BaseException:
            handle.close()
            logger.debug("Removing partial output file %s", path)
            try:
                os.remove(path)
            except OSError as e:
                logger.warning("Could not remove partial output file %s: %s", path, e)
            raise
        handle.close()
        return result
