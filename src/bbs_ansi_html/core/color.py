"""Color representation for ANSI art."""

from enum import Enum


class Color(Enum):
    """
    One of the eight base terminal colors.

    Members are valued by their SGR offset (``30 + value`` for foreground,
    ``40 + value`` for background). Each color renders as a normal or an
    intensified CSS color from the VGA text-mode palette.
    """
    BLACK = 0
    RED = 1
    GREEN = 2
    BROWN = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    GRAY = 7

    @classmethod
    def from_sgr(cls, code: int) -> "Color":
        """Create a Color from an SGR code (30-37 or 40-47)."""
        if 30 <= code <= 37:
            return cls(code - 30)
        elif 40 <= code <= 47:
            return cls(code - 40)
        else:
            raise ValueError(f"Invalid SGR color code: {code}")

    @classmethod
    def from_dos(cls, index: int) -> "Color":
        """Create a Color from a DOS attribute index (0 black, 1 blue, ...)."""
        return DOS_ORDER[index & 7]

    def hex(self, intense: bool = False) -> str:
        """Return the CSS color for this color, optionally intensified."""
        return PALETTE_16[self.value + 8 if intense else self.value]


# Standard 16-color palette (CSS colors), SGR order
PALETTE_16 = [
    "#000000",  # 0 - Black
    "#aa0000",  # 1 - Red
    "#00aa00",  # 2 - Green
    "#aa5500",  # 3 - Brown
    "#0000aa",  # 4 - Blue
    "#aa00aa",  # 5 - Magenta
    "#00aaaa",  # 6 - Cyan
    "#aaaaaa",  # 7 - Gray
    "#555555",  # 8 - Dark gray
    "#ff5555",  # 9 - Bright red
    "#55ff55",  # 10 - Bright green
    "#ffff55",  # 11 - Yellow
    "#5555ff",  # 12 - Bright blue
    "#ff55ff",  # 13 - Bright magenta
    "#55ffff",  # 14 - Bright cyan
    "#ffffff",  # 15 - White
]

# BBS color codes index colors in DOS attribute order, not SGR order
DOS_ORDER = (
    Color.BLACK,
    Color.BLUE,
    Color.GREEN,
    Color.CYAN,
    Color.RED,
    Color.MAGENTA,
    Color.BROWN,
    Color.GRAY,
)
