"""The ANSI to HTML conversion pipeline."""

import logging

from bbs_ansi_html.codec.ansi_parser import flatten
from bbs_ansi_html.codec.cp437 import decode_document
from bbs_ansi_html.codec.dialects import preprocess_yankee
from bbs_ansi_html.core.options import ConvertOptions, Dialect
from bbs_ansi_html.render.html import HtmlRenderer

logger = logging.getLogger(__name__)


def prepare(source: str | bytes, options: ConvertOptions) -> str:
    """Produce the stream the renderer walks: flattened, preprocessed or raw."""
    text = decode_document(source) if isinstance(source, bytes) else source

    if Dialect.YANKEE in options.dialects:
        text = preprocess_yankee(text)

    if options.should_flatten:
        return flatten(text, width=options.width)

    logger.debug(
        "skipping flattener (dialects: %s)",
        ", ".join(sorted(d.value for d in options.dialects)) or "none",
    )
    return text


def convert(source: str | bytes, options: ConvertOptions | None = None) -> str:
    """
    Convert an ANSI art document to an HTML body.

    ``source`` may be raw bytes as read from disk or already-decoded text.
    The result contains only the styled content; wrap it with
    ``render_page`` for a standalone document.
    """
    options = options or ConvertOptions()
    renderer = HtmlRenderer(width=options.width, dialects=options.render_dialects)
    return renderer.render(prepare(source, options))
