"""
Validation utilities run before any request is sent.
"""

import re

from .exceptions import ValidationError

COLOR_PATTERN = re.compile(r"^#?[0-9a-fA-F]{6}$")


class URLValidator:
    """URL validation for pages and documents fetched by the service."""

    @classmethod
    def validate_url(
        cls,
        url: str,
        protocol_message: str = "The supported protocols for the converted webpage are http:// and https://.",
        local_message: str = "Cannot convert local urls. SelectPdf online API can only convert publicly available urls.",
    ) -> str:
        """Validate that the URL is a public http(s) address."""
        if not url or not url.strip():
            raise ValidationError("URL cannot be empty")

        lowered = url.lower()
        if not lowered.startswith(("http://", "https://")):
            raise ValidationError(protocol_message, {"url": url})

        if lowered.startswith("http://localhost"):
            raise ValidationError(local_message, {"url": url})

        return url


class ColorValidator:
    """Color validation for #RRGGBB options."""

    @classmethod
    def validate_color(cls, color: str) -> str:
        if not color or not COLOR_PATTERN.match(color):
            raise ValidationError(
                "Color value must be in #RRGGBB format.", {"color": color}
            )
        return color


def validate_search_text(text: str) -> str:
    if not text:
        raise ValidationError("Search text cannot be empty.")
    return text
