"""Save converted ANSI art."""

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bbs_ansi_html.core.document import AnsiDocument
    from bbs_ansi_html.core.options import ConvertOptions


def save_html(
    doc: "AnsiDocument",
    path: str | Path,
    options: "ConvertOptions | None" = None,
    fragment: bool = False,
    **page_options,
) -> Path:
    """
    Render a document and write it as UTF-8 HTML.

    With ``fragment`` only the styled body is written; otherwise it is
    wrapped in a standalone page.
    """
    path = Path(path)

    if fragment:
        content = doc.render_to_html(options)
    else:
        content = doc.render_page(options, **page_options)

    path.write_text(content, encoding='utf-8')
    return path
