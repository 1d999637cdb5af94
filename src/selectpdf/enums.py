"""
Option values accepted by the conversion API.

Enums whose wire format is the member name subclass ``str``; the others are
sent as their integer value.
"""

from enum import Enum, IntEnum


class PageSize(str, Enum):
    CUSTOM = "Custom"
    A1 = "A1"
    A2 = "A2"
    A3 = "A3"
    A4 = "A4"
    A5 = "A5"
    LETTER = "Letter"
    HALF_LETTER = "HalfLetter"
    LEDGER = "Ledger"
    LEGAL = "Legal"


class PageOrientation(str, Enum):
    PORTRAIT = "Portrait"
    LANDSCAPE = "Landscape"


class RenderingEngine(str, Enum):
    WEBKIT = "WebKit"
    RESTRICTED = "Restricted"
    BLINK = "Blink"


class StartupMode(str, Enum):
    AUTOMATIC = "Automatic"
    MANUAL = "Manual"


class SecureProtocol(IntEnum):
    TLS11_OR_NEWER = 0
    TLS10 = 1
    SSL3 = 2


class PageLayout(IntEnum):
    SINGLE_PAGE = 0
    ONE_COLUMN = 1
    TWO_COLUMN_LEFT = 2
    TWO_COLUMN_RIGHT = 3


class PageMode(IntEnum):
    USE_NONE = 0
    USE_OUTLINES = 1
    USE_THUMBS = 2
    FULL_SCREEN = 3
    USE_OC = 4
    USE_ATTACHMENTS = 5


class PageNumbersAlignment(IntEnum):
    LEFT = 1
    CENTER = 2
    RIGHT = 3


class TextLayout(IntEnum):
    ORIGINAL = 0
    READING = 1


class OutputFormat(IntEnum):
    TEXT = 0
    HTML = 1
