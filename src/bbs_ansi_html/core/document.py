"""AnsiDocument - high-level representation of an ANSI art file."""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from bbs_ansi_html.core.constants import SCREEN_WIDTH

if TYPE_CHECKING:
    from bbs_ansi_html.core.options import ConvertOptions
    from bbs_ansi_html.sauce.record import SauceRecord


@dataclass
class AnsiDocument:
    """
    Represents a loaded ANSI artwork with metadata.

    ``text`` is the artwork with one code point per source byte (SAUCE
    record removed); CP437 glyph translation happens at render time.
    """
    text: str = ""
    sauce: "SauceRecord | None" = None
    source_path: Path | None = None

    @classmethod
    def load(cls, path: str | Path) -> "AnsiDocument":
        """Load an ANSI file from disk."""
        from bbs_ansi_html.io.reader import load
        return load(path)

    def flatten(self) -> str:
        """Resolve cursor movement into a flat, style-only stream."""
        from bbs_ansi_html.codec.ansi_parser import flatten
        return flatten(self.text, width=self.width)

    def render_to_html(self, options: "ConvertOptions | None" = None) -> str:
        """Render the artwork to an HTML body."""
        from bbs_ansi_html.convert import convert
        from bbs_ansi_html.core.options import ConvertOptions
        return convert(self.text, options or ConvertOptions(width=self.width))

    def render_page(self, options: "ConvertOptions | None" = None, **kwargs) -> str:
        """Render the artwork to a standalone HTML page."""
        from bbs_ansi_html.render.html import render_page
        kwargs.setdefault("title", self.title)
        return render_page(self.render_to_html(options), **kwargs)

    @property
    def title(self) -> str:
        """Get title from SAUCE or filename."""
        if self.sauce and self.sauce.title:
            return self.sauce.title
        if self.source_path:
            return self.source_path.stem
        return "Untitled"

    @property
    def author(self) -> str:
        """Get author from SAUCE."""
        return self.sauce.author if self.sauce else ""

    @property
    def width(self) -> int:
        """Get width (from SAUCE or the standard screen)."""
        if self.sauce and self.sauce.tinfo1 > 0:
            return self.sauce.tinfo1
        return SCREEN_WIDTH
