"""CP437 (IBM PC) character set conversion."""

from bbs_ansi_html.core.constants import CP437_TO_UNICODE


def decode_document(data: bytes) -> str:
    """
    Decode raw art bytes without translating them.

    Every byte becomes the code point of the same value, so the renderer
    can still tell CP437 control and extended codes apart from text.
    """
    return data.decode('latin-1')


def needs_glyph(char: str) -> bool:
    """Check if a character is a CP437 control or extended code."""
    code = ord(char)
    return 1 <= code <= 31 or 127 <= code <= 254


def translate_glyph(char: str) -> str:
    """Map a CP437 code to its Unicode glyph; other characters pass through."""
    code = ord(char)
    if code < len(CP437_TO_UNICODE):
        return CP437_TO_UNICODE[code]
    return char


def translate_glyphs(text: str, keep: str = '') -> str:
    """Translate every CP437 code in ``text`` except the characters in ``keep``."""
    return ''.join(
        translate_glyph(char) if needs_glyph(char) and char not in keep else char
        for char in text
    )
