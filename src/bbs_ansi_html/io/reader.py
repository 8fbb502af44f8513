"""Load ANSI art files."""

from pathlib import Path

from bbs_ansi_html.codec.cp437 import decode_document
from bbs_ansi_html.core.document import AnsiDocument
from bbs_ansi_html.sauce.reader import strip_sauce


def load(path: str | Path) -> AnsiDocument:
    """
    Load an ANSI art file from disk.

    Supports .ans, .asc, .diz, and other text-mode art files.
    Automatically detects and strips SAUCE metadata if present.
    """
    path = Path(path)

    # Read raw bytes
    with open(path, 'rb') as f:
        data = f.read()

    doc = load_bytes(data)
    doc.source_path = path
    return doc


def load_bytes(data: bytes) -> AnsiDocument:
    """Load ANSI art from raw bytes."""
    art, sauce = strip_sauce(data)
    return AnsiDocument(text=decode_document(art), sauce=sauce)
