"""Style state machine for SGR sequences and BBS color dialects."""

from dataclasses import replace
from typing import Sequence

from bbs_ansi_html.codec.dialects import StyleChange
from bbs_ansi_html.core.color import Color
from bbs_ansi_html.core.state import RenderState


def apply_sgr(state: RenderState, params: Sequence[int | str]) -> RenderState:
    """
    Apply SGR (Select Graphic Rendition) parameters to a state.

    ``3`` and ``7`` both request inverse video; the swap happens once,
    after every parameter of the sequence has been processed.
    """
    if not params:
        params = (0,)

    swap = False
    for p in params:
        if p == '':
            # An empty parameter means reset
            p = 0
        elif not isinstance(p, int):
            continue
        if p == 0:
            state = RenderState()
        elif p == 1:
            state = replace(state, intensity=True)
        elif p == 3 or p == 7:
            swap = True
        elif p == 5:
            state = replace(state, blink=True)
        elif 30 <= p <= 37:
            state = replace(state, foreground=Color.from_sgr(p))
        elif 40 <= p <= 47:
            state = replace(state, background=Color.from_sgr(p))

    if swap:
        state = replace(
            state,
            foreground=state.background,
            background=state.foreground,
            swapped=True,
        )
    return state


class StyleStateMachine:
    """
    Holds the RenderState for one render pass.

    Every ``feed_*`` call moves to the new state and returns its CSS
    descriptor, which the renderer uses to open the next span.
    """

    def __init__(self, state: RenderState | None = None):
        self.state = state or RenderState()

    def feed_sgr(self, params: Sequence[int | str]) -> str:
        """Apply an SGR sequence and describe the resulting style."""
        self.state = apply_sgr(self.state, params)
        return self.state.css()

    def feed_change(self, change: StyleChange) -> str:
        """Apply a dialect table entry and describe the resulting style."""
        self.state = change.apply(self.state)
        return self.state.css()
