"""Decoding and tokenizing of ANSI art streams."""

from bbs_ansi_html.codec.cp437 import decode_document, translate_glyph
from bbs_ansi_html.codec.escape import EscapeToken, read_escape, scan
from bbs_ansi_html.codec.ansi_parser import Flattener, flatten

__all__ = [
    "decode_document",
    "translate_glyph",
    "EscapeToken",
    "read_escape",
    "scan",
    "Flattener",
    "flatten",
]
