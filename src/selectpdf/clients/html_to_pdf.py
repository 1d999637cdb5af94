"""
HTML to PDF conversion client.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..client import ApiClient
from ..core.encoding import serialize_parameters
from ..enums import (
    PageNumbersAlignment,
    PageOrientation,
    PageSize,
    RenderingEngine,
    SecureProtocol,
    StartupMode,
)
from ..models import CallResult, WebElement
from ..sync import sync_method
from ..validators import ColorValidator, URLValidator
from .options import PdfDocumentOptionsMixin


class HtmlToPdfClient(PdfDocumentOptionsMixin, ApiClient):
    """
    Converts web pages and raw HTML to PDF.

    Examples:
        >>> client = HtmlToPdfClient("your-api-key")
        >>> pdf = await client.set_page_size(PageSize.A4).convert_url("https://example.com")
        >>> client.get_number_of_pages()

        Long conversions can run as a server-side job that is polled:
        >>> await client.convert_url_to_file(url, "out.pdf", async_job=True)
    """

    ENDPOINT_PATH = "convert/"

    def _prepare_url(self, url: str) -> None:
        URLValidator.validate_url(url)
        self.parameters["url"] = url
        self.parameters["html"] = ""
        self.parameters["base_url"] = ""

    def _prepare_html(self, html: str, base_url: Optional[str]) -> None:
        self.parameters["url"] = ""
        self.parameters["html"] = html
        self.parameters["base_url"] = base_url or ""

    async def convert_url(self, url: str, async_job: bool = False) -> bytes:
        """
        Convert the specified url to PDF.

        Args:
            url: Public http(s) address of the web page
            async_job: Run the conversion as an asynchronous job and poll for it

        Returns:
            The PDF document

        Raises:
            ValidationError: If the url is not a public http(s) address
            ApiStatusError: If the API rejects the conversion
        """
        self._prepare_url(url)
        result = await self._execute(async_job=async_job)
        return result.content or b""

    async def convert_url_to_stream(
        self, url: str, stream: Any, async_job: bool = False
    ) -> CallResult:
        """Convert the specified url to PDF and write it into a binary stream."""
        self._prepare_url(url)
        return await self._execute(async_job=async_job, sink=stream)

    async def convert_url_to_file(
        self, url: str, file_path: Union[str, Path], async_job: bool = False
    ) -> CallResult:
        """Convert the specified url to PDF and write it into a local file."""
        self._prepare_url(url)
        return await self._execute_to_file(file_path, async_job=async_job)

    async def convert_html_string(
        self, html: str, base_url: Optional[str] = None, async_job: bool = False
    ) -> bytes:
        """
        Convert a raw HTML string to PDF.

        Args:
            html: HTML content
            base_url: Url used to resolve relative images and stylesheets
            async_job: Run the conversion as an asynchronous job and poll for it
        """
        self._prepare_html(html, base_url)
        result = await self._execute(async_job=async_job)
        return result.content or b""

    async def convert_html_string_to_stream(
        self,
        html: str,
        stream: Any,
        base_url: Optional[str] = None,
        async_job: bool = False,
    ) -> CallResult:
        self._prepare_html(html, base_url)
        return await self._execute(async_job=async_job, sink=stream)

    async def convert_html_string_to_file(
        self,
        html: str,
        file_path: Union[str, Path],
        base_url: Optional[str] = None,
        async_job: bool = False,
    ) -> CallResult:
        self._prepare_html(html, base_url)
        return await self._execute_to_file(file_path, async_job=async_job)

    async def get_web_elements(self) -> List[WebElement]:
        """
        Get the positions of the elements selected with
        ``set_pdf_web_elements_selectors`` in the last conversion.

        Elements delivered with the conversion response are returned as is.
        Otherwise the web elements endpoint is queried with the job id of the
        last conversion, or of the submitted job for asynchronous conversions.
        No job id means nothing was matched.
        """
        if self.web_elements is not None:
            return self.web_elements

        job_id = self.job_id or self._web_elements_job_id
        if not job_id:
            return []

        from .web_elements import WebElementsClient

        client = WebElementsClient(
            self.api_key, job_id, settings=self.settings, transport=self._transport
        )
        client.set_api_endpoint(self.api_web_elements_endpoint)
        self.web_elements = await client.get_web_elements()
        return self.web_elements

    convert_url_sync = sync_method("convert_url")
    convert_url_to_stream_sync = sync_method("convert_url_to_stream")
    convert_url_to_file_sync = sync_method("convert_url_to_file")
    convert_html_string_sync = sync_method("convert_html_string")
    convert_html_string_to_stream_sync = sync_method("convert_html_string_to_stream")
    convert_html_string_to_file_sync = sync_method("convert_html_string_to_file")
    get_web_elements_sync = sync_method("get_web_elements")

    # page setup

    def set_page_size(self, page_size: PageSize) -> "HtmlToPdfClient":
        return self._set("page_size", PageSize(page_size))

    def set_page_width(self, page_width: int) -> "HtmlToPdfClient":
        """Custom page width in points. Used when page size is Custom."""
        return self._set("page_width", page_width)

    def set_page_height(self, page_height: int) -> "HtmlToPdfClient":
        return self._set("page_height", page_height)

    def set_page_orientation(self, page_orientation: PageOrientation) -> "HtmlToPdfClient":
        return self._set("page_orientation", PageOrientation(page_orientation))

    def set_margin_top(self, margin_top: int) -> "HtmlToPdfClient":
        return self._set("margin_top", margin_top)

    def set_margin_right(self, margin_right: int) -> "HtmlToPdfClient":
        return self._set("margin_right", margin_right)

    def set_margin_bottom(self, margin_bottom: int) -> "HtmlToPdfClient":
        return self._set("margin_bottom", margin_bottom)

    def set_margin_left(self, margin_left: int) -> "HtmlToPdfClient":
        return self._set("margin_left", margin_left)

    def set_margins(self, margin: int) -> "HtmlToPdfClient":
        return (
            self.set_margin_top(margin)
            .set_margin_right(margin)
            .set_margin_bottom(margin)
            .set_margin_left(margin)
        )

    def set_pdf_name(self, pdf_name: str) -> "HtmlToPdfClient":
        return self._set("pdf_name", pdf_name)

    # rendering

    def set_rendering_engine(self, rendering_engine: RenderingEngine) -> "HtmlToPdfClient":
        return self._set("engine", RenderingEngine(rendering_engine))

    def set_web_page_width(self, web_page_width: int) -> "HtmlToPdfClient":
        return self._set("web_page_width", web_page_width)

    def set_web_page_height(self, web_page_height: int) -> "HtmlToPdfClient":
        return self._set("web_page_height", web_page_height)

    def set_min_load_time(self, min_load_time: int) -> "HtmlToPdfClient":
        return self._set("min_load_time", min_load_time)

    def set_conversion_delay(self, delay: int) -> "HtmlToPdfClient":
        return self.set_min_load_time(delay)

    def set_max_load_time(self, max_load_time: int) -> "HtmlToPdfClient":
        return self._set("max_load_time", max_load_time)

    def set_navigation_timeout(self, timeout: int) -> "HtmlToPdfClient":
        return self.set_max_load_time(timeout)

    def set_secure_protocol(self, secure_protocol: SecureProtocol) -> "HtmlToPdfClient":
        return self._set("protocol", SecureProtocol(secure_protocol))

    def set_use_css_print(self, use_css_print: bool) -> "HtmlToPdfClient":
        return self._set("use_css_print", use_css_print)

    def set_background_color(self, background_color: str) -> "HtmlToPdfClient":
        ColorValidator.validate_color(background_color)
        return self._set("background_color", background_color)

    def set_draw_html_background(self, draw_html_background: bool) -> "HtmlToPdfClient":
        return self._set("draw_html_background", draw_html_background)

    def set_disable_javascript(self, disable_javascript: bool) -> "HtmlToPdfClient":
        return self._set("disable_javascript", disable_javascript)

    def set_disable_internal_links(self, disable_internal_links: bool) -> "HtmlToPdfClient":
        return self._set("disable_internal_links", disable_internal_links)

    def set_disable_external_links(self, disable_external_links: bool) -> "HtmlToPdfClient":
        return self._set("disable_external_links", disable_external_links)

    def set_render_on_timeout(self, render_on_timeout: bool) -> "HtmlToPdfClient":
        return self._set("render_on_timeout", render_on_timeout)

    def set_keep_images_together(self, keep_images_together: bool) -> "HtmlToPdfClient":
        return self._set("keep_images_together", keep_images_together)

    def set_startup_mode(self, startup_mode: StartupMode) -> "HtmlToPdfClient":
        return self._set("startup_mode", StartupMode(startup_mode))

    def set_skip_decoding(self, skip_decoding: bool) -> "HtmlToPdfClient":
        return self._set("skip_decoding", skip_decoding)

    def set_scale_images(self, scale_images: bool) -> "HtmlToPdfClient":
        return self._set("scale_images", scale_images)

    def set_single_page_pdf(self, single_page_pdf: bool) -> "HtmlToPdfClient":
        return self._set("single_page_pdf", single_page_pdf)

    def set_page_breaks_enhanced_algorithm(self, enabled: bool) -> "HtmlToPdfClient":
        return self._set("page_breaks_enhanced_algorithm", enabled)

    def set_cookies(self, cookies: Dict[str, str]) -> "HtmlToPdfClient":
        return self._set("cookies_string", serialize_parameters(cookies))

    # header

    def set_show_header(self, show_header: bool) -> "HtmlToPdfClient":
        return self._set("show_header", show_header)

    def set_header_height(self, height: int) -> "HtmlToPdfClient":
        return self._set("header_height", height)

    def set_header_url(self, url: str) -> "HtmlToPdfClient":
        URLValidator.validate_url(
            url, "The supported protocols for the url are http:// and https://."
        )
        return self._set("header_url", url)

    def set_header_html(self, html: str) -> "HtmlToPdfClient":
        return self._set("header_html", html)

    def set_header_base_url(self, base_url: str) -> "HtmlToPdfClient":
        URLValidator.validate_url(
            base_url, "The supported protocols for the base url are http:// and https://."
        )
        return self._set("header_base_url", base_url)

    def set_header_display_on_first_page(self, display: bool) -> "HtmlToPdfClient":
        return self._set("header_display_on_first_page", display)

    def set_header_display_on_odd_pages(self, display: bool) -> "HtmlToPdfClient":
        return self._set("header_display_on_odd_pages", display)

    def set_header_display_on_even_pages(self, display: bool) -> "HtmlToPdfClient":
        return self._set("header_display_on_even_pages", display)

    def set_header_web_page_width(self, width: int) -> "HtmlToPdfClient":
        return self._set("header_web_page_width", width)

    def set_header_web_page_height(self, height: int) -> "HtmlToPdfClient":
        return self._set("header_web_page_height", height)

    # footer

    def set_show_footer(self, show_footer: bool) -> "HtmlToPdfClient":
        return self._set("show_footer", show_footer)

    def set_footer_height(self, height: int) -> "HtmlToPdfClient":
        return self._set("footer_height", height)

    def set_footer_url(self, url: str) -> "HtmlToPdfClient":
        URLValidator.validate_url(
            url, "The supported protocols for the url are http:// and https://."
        )
        return self._set("footer_url", url)

    def set_footer_html(self, html: str) -> "HtmlToPdfClient":
        return self._set("footer_html", html)

    def set_footer_base_url(self, base_url: str) -> "HtmlToPdfClient":
        URLValidator.validate_url(
            base_url, "The supported protocols for the base url are http:// and https://."
        )
        return self._set("footer_base_url", base_url)

    def set_footer_display_on_first_page(self, display: bool) -> "HtmlToPdfClient":
        return self._set("footer_display_on_first_page", display)

    def set_footer_display_on_odd_pages(self, display: bool) -> "HtmlToPdfClient":
        return self._set("footer_display_on_odd_pages", display)

    def set_footer_display_on_even_pages(self, display: bool) -> "HtmlToPdfClient":
        return self._set("footer_display_on_even_pages", display)

    def set_footer_display_on_last_page(self, display: bool) -> "HtmlToPdfClient":
        return self._set("footer_display_on_last_page", display)

    def set_footer_web_page_width(self, width: int) -> "HtmlToPdfClient":
        return self._set("footer_web_page_width", width)

    def set_footer_web_page_height(self, height: int) -> "HtmlToPdfClient":
        return self._set("footer_web_page_height", height)

    # page numbers

    def set_show_page_numbers(self, show_page_numbers: bool) -> "HtmlToPdfClient":
        return self._set("page_numbers", show_page_numbers)

    def set_page_numbers_first(self, first_page_number: int) -> "HtmlToPdfClient":
        return self._set("page_numbers_first", first_page_number)

    def set_page_numbers_offset(self, total_pages_offset: int) -> "HtmlToPdfClient":
        return self._set("page_numbers_offset", total_pages_offset)

    def set_page_numbers_template(self, template: str) -> "HtmlToPdfClient":
        """Template such as ``Page: {page_number} of {total_pages}``."""
        return self._set("page_numbers_template", template)

    def set_page_numbers_font_name(self, font_name: str) -> "HtmlToPdfClient":
        return self._set("page_numbers_font_name", font_name)

    def set_page_numbers_font_size(self, font_size: int) -> "HtmlToPdfClient":
        return self._set("page_numbers_font_size", font_size)

    def set_page_numbers_alignment(self, alignment: PageNumbersAlignment) -> "HtmlToPdfClient":
        return self._set("page_numbers_alignment", PageNumbersAlignment(alignment))

    def set_page_numbers_color(self, color: str) -> "HtmlToPdfClient":
        ColorValidator.validate_color(color)
        return self._set("page_numbers_color", color)

    def set_page_numbers_vertical_position(self, position: int) -> "HtmlToPdfClient":
        return self._set("page_numbers_pos_y", position)

    # element selection

    def set_pdf_bookmarks_selectors(self, selectors: str) -> "HtmlToPdfClient":
        return self._set("pdf_bookmarks_selectors", selectors)

    def set_pdf_hide_elements(self, selectors: str) -> "HtmlToPdfClient":
        return self._set("pdf_hide_elements", selectors)

    def set_pdf_show_only_element_id(self, element_id: str) -> "HtmlToPdfClient":
        return self._set("pdf_show_only_element_id", element_id)

    def set_pdf_web_elements_selectors(self, selectors: str) -> "HtmlToPdfClient":
        """CSS selectors of the elements whose PDF positions should be reported."""
        return self._set("pdf_web_elements_selectors", selectors)
