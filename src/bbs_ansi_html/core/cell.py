"""Cell - atomic unit of the virtual screen."""

from dataclasses import dataclass


@dataclass(slots=True)
class Cell:
    """
    A single position on the virtual screen.

    ``pending`` holds raw style sequences that must be replayed before the
    glyph when the screen is serialized. ``glyph`` is ``None`` until a
    character has been printed into the cell.
    """
    pending: str = ''
    glyph: str | None = None

    def is_blank(self) -> bool:
        """Check if nothing has been written to this cell."""
        return self.glyph is None and not self.pending
