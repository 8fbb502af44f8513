"""
bbs-ansi-html: convert BBS-era ANSI art to HTML

Quick Start:
    >>> import bbs_ansi_html as ansi
    >>> doc = ansi.load("artwork.ans")
    >>> html = doc.render_page()
    >>> body = ansi.convert(b"\\x1b[1;31mHello", ansi.ConvertOptions())

Features:
    - Load .ans, .asc, .diz files and strip SAUCE metadata
    - Virtual 80-column terminal that flattens cursor movement
    - SGR colors plus Pipe, Tilde, RTSoft and Yankee-Trader dialects
    - CP437 control and box-drawing characters mapped to Unicode
    - Inline-styled HTML spans, never nested
"""

__version__ = "0.1.0"

# Core types
from bbs_ansi_html.core.color import Color
from bbs_ansi_html.core.document import AnsiDocument
from bbs_ansi_html.core.options import ConvertOptions, Dialect
from bbs_ansi_html.core.state import RenderState

# SAUCE metadata
from bbs_ansi_html.sauce.record import SauceRecord

# Pipeline
from bbs_ansi_html.codec.ansi_parser import flatten
from bbs_ansi_html.convert import convert
from bbs_ansi_html.render.html import HtmlRenderer, render_page

# Convenience functions
from bbs_ansi_html.io.reader import load, load_bytes
from bbs_ansi_html.io.writer import save_html

__all__ = [
    # Version
    "__version__",
    # Core types
    "Color",
    "AnsiDocument",
    "ConvertOptions",
    "Dialect",
    "RenderState",
    # SAUCE
    "SauceRecord",
    # Pipeline
    "flatten",
    "convert",
    "HtmlRenderer",
    "render_page",
    # I/O
    "load",
    "load_bytes",
    "save_html",
]
