"""Core data structures for ANSI art conversion."""

from bbs_ansi_html.core.cell import Cell
from bbs_ansi_html.core.color import Color
from bbs_ansi_html.core.document import AnsiDocument
from bbs_ansi_html.core.options import ConvertOptions, Dialect
from bbs_ansi_html.core.screen import ScreenBuffer
from bbs_ansi_html.core.state import RenderState

__all__ = [
    "Cell",
    "Color",
    "AnsiDocument",
    "ConvertOptions",
    "Dialect",
    "ScreenBuffer",
    "RenderState",
]
