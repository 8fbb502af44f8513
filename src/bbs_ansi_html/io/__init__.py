"""File I/O for ANSI art files."""

from bbs_ansi_html.io.reader import load, load_bytes
from bbs_ansi_html.io.writer import save_html

__all__ = ["load", "load_bytes", "save_html"]
