from __future__ import annotations

from enum import Enum, IntEnum


class Breakpoint(IntEnum):
    XS = 0
    SM = 600
    MD = 960
    LG = 1280
    XL = 1920


class OutputFormat(str, Enum):
    HTML = "html"
    SVG = "svg"
