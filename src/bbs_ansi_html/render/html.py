"""Render ANSI art to HTML."""

import logging
from html import escape

from bbs_ansi_html.codec.cp437 import needs_glyph, translate_glyph
from bbs_ansi_html.codec.dialects import MARKERS, read_dialect_code
from bbs_ansi_html.codec.escape import is_introducer, read_escape
from bbs_ansi_html.core.constants import ESC, SCREEN_WIDTH
from bbs_ansi_html.core.options import Dialect
from bbs_ansi_html.render.style import StyleStateMachine

logger = logging.getLogger(__name__)

LINE_BREAK = "<br>\n"
BLANK = "&nbsp;"
SPAN_CLOSE = "</span>"

HTML_ESCAPES = {
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
    "'": "&#39;",
    '"': "&quot;",
}


class HtmlRenderer:
    """
    Render an ANSI stream to an HTML body with inline color spans.

    The stream is either the flattener's output or, when BBS dialects are
    enabled, the raw document. At most one span is open at a time; each
    style change closes it and opens a new one.
    """

    def __init__(
        self,
        width: int = SCREEN_WIDTH,
        dialects: frozenset[Dialect] = frozenset(),
    ):
        self.width = width
        self.markers = {
            MARKERS[dialect]: dialect for dialect in dialects if dialect in MARKERS
        }

    def render(self, text: str) -> str:
        """Render text to an HTML fragment."""
        out: list[str] = []
        machine = StyleStateMachine()
        span_open = False
        spans = 0
        column = 0
        skip_lf = False

        def open_span(style: str) -> None:
            nonlocal span_open, spans
            if span_open:
                out.append(SPAN_CLOSE)
            out.append(f'<span style="{style}">')
            span_open = True
            spans += 1

        def visible(fragment: str) -> None:
            nonlocal column
            out.append(fragment)
            column += 1

        i = 0
        while i < len(text):
            char = text[i]

            if char == '\r':
                out.append(LINE_BREAK)
                column = 0
                skip_lf = text.startswith('\n', i + 1)
                i += 1
                continue

            if char == '\n':
                if skip_lf:
                    skip_lf = False
                else:
                    out.append(LINE_BREAK)
                    column = 0
                i += 1
                continue

            # Soft wrap at the right margin, before anything but a line end
            if column >= self.width:
                out.append(LINE_BREAK)
                column = 0

            if char == ' ' or char == '\x00':
                visible(BLANK)
            elif char in HTML_ESCAPES:
                visible(HTML_ESCAPES[char])
            elif char == ESC and is_introducer(text, i) and (token := read_escape(text, i)):
                if token.final == 'm':
                    open_span(machine.feed_sgr(token.params))
                i = token.end
                continue
            elif char in self.markers and (
                code := read_dialect_code(self.markers[char], text, i)
            ):
                if code.change is not None:
                    open_span(machine.feed_change(code.change))
                i = code.end
                continue
            elif needs_glyph(char):
                visible(translate_glyph(char))
            else:
                visible(char)

            i += 1

        if span_open:
            out.append(SPAN_CLOSE)

        logger.debug("rendered %d characters with %d spans", len(text), spans)
        return ''.join(out)


def render_page(
    body: str,
    title: str = "Untitled",
    css_class: str = "ansi-art",
    font_family: str = "monospace",
) -> str:
    """Wrap a rendered body in a standalone HTML document."""
    return f'''<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{escape(title)}</title>
<style>
body {{ background: #000; color: #aaaaaa; }}
.{css_class} {{ font-family: {font_family}; line-height: 1.2; }}
</style>
</head>
<body>
<div class="{css_class}">{body}</div>
</body>
</html>
'''
