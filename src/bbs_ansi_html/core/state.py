"""RenderState - the color/style in effect while rendering."""

from dataclasses import dataclass

from bbs_ansi_html.core.color import Color
from bbs_ansi_html.core.constants import CSI


@dataclass(frozen=True, slots=True)
class RenderState:
    """
    Current foreground/background color, intensity, blink and swap flags.

    States are immutable; transitions build a new state with
    ``dataclasses.replace``. The default state is gray on black with
    every flag off, which is also what an SGR reset returns to.
    """
    foreground: Color = Color.GRAY
    background: Color = Color.BLACK
    intensity: bool = False
    blink: bool = False
    swapped: bool = False

    def sgr(self) -> str:
        """
        Serialize to one SGR sequence that sets this state from any other.

        The sequence starts with a reset, so applying it never depends on
        the state it is applied to. Swapped colors are written out as plain
        foreground and background codes.
        """
        params = ['0']
        if self.intensity:
            params.append('1')
        if self.blink:
            params.append('5')
        if self.foreground is not Color.GRAY:
            params.append(str(30 + self.foreground.value))
        if self.background is not Color.BLACK:
            params.append(str(40 + self.background.value))
        return f"{CSI}{';'.join(params)}m"

    def css(self) -> str:
        """Serialize to an inline CSS declaration list."""
        style = (
            f"color:{self.foreground.hex(self.intensity)};"
            f"background-color:{self.background.hex()}"
        )
        if self.blink:
            style += ";text-decoration:blink"
        return style
