"""Cursor-movement flattener with virtual terminal emulation."""

import logging

from bbs_ansi_html.codec.escape import EscapeToken, is_introducer, read_escape
from bbs_ansi_html.core.constants import ESC, RESET, SCREEN_WIDTH
from bbs_ansi_html.core.screen import ScreenBuffer
from bbs_ansi_html.core.state import RenderState
from bbs_ansi_html.render.style import apply_sgr

logger = logging.getLogger(__name__)


class Flattener:
    """
    Stateful parser that replays ANSI text onto a ScreenBuffer.

    Simulates a fixed-width terminal to resolve cursor positioning, then
    serializes the screen as a flat stream in which only style sequences
    remain, each attached to the character it colors.
    """

    def __init__(self, width: int = SCREEN_WIDTH):
        self.width = width
        self.screen = ScreenBuffer(width=width)

        # Terminal state (1-indexed)
        self.row = 1
        self.col = 1
        self.saved_row = 1
        self.saved_col = 1

        # Style sequences not yet attached to a cell
        self.pending = ''
        # Style in effect, or None before the first SGR sequence
        self.rendition: RenderState | None = None

    def feed(self, text: str) -> None:
        """Process text with ANSI sequences."""
        skip_lf = False
        i = 0
        while i < len(text):
            char = text[i]

            if char == ESC and is_introducer(text, i):
                token = read_escape(text, i)
                if token is not None:
                    self._handle_csi(token)
                    i = token.end
                    skip_lf = False
                    continue

            if char == '\r':
                self._line_feed()
                skip_lf = text.startswith('\n', i + 1)
            elif char == '\n':
                if skip_lf:
                    skip_lf = False
                else:
                    self._line_feed()
            else:
                self._put_char(char)

            i += 1

    def flatten(self) -> str:
        """Flush remaining style and serialize the screen."""
        self._flush()
        logger.debug(
            "flattened screen: %d rows x %d columns",
            self.screen.height,
            self.width,
        )
        return self.screen.serialize()

    def _put_char(self, char: str) -> None:
        """Put a character at current cursor position."""
        # Handle wrap
        if self.col > self.width:
            self.col = 1
            self.row += 1

        cell = self.screen.cell(self.row, self.col)
        cell.pending += self.pending
        cell.glyph = char
        self.pending = ''

        self.col += 1

    def _flush(self, marker: str = '') -> None:
        """Attach pending style (plus an optional marker) to the current cell."""
        style = self.pending + marker
        self.pending = ''
        if style:
            cell = self.screen.cell(self.row, min(self.col, self.width + 1))
            cell.pending += style

    def _line_feed(self) -> None:
        self._flush()
        self.row += 1
        self.col = 1

    def _handle_csi(self, token: EscapeToken) -> None:
        """Handle a terminated escape sequence."""
        command = token.final

        if command == 'H' or command == 'f':
            # Cursor position
            self.row = token.param(0)
            self.col = token.param(1)
        elif command == 'A':
            # Cursor up
            self.row -= token.param(0)
            self.pending = self._replay()
        elif command == 'B':
            # Cursor down
            self.row += token.param(0)
            self.pending = self._replay()
        elif command == 'C':
            # Cursor forward; skipped cells must not inherit the style
            self._flush(RESET)
            self.col += token.param(0)
            self.pending = self._replay()
        elif command == 'D':
            # Cursor back
            self._flush(RESET)
            self.col -= token.param(0)
            self.pending = self._replay()
        elif command == 's':
            # Save cursor position
            self.saved_row = self.row
            self.saved_col = self.col
        elif command == 'u':
            # Restore cursor position
            self.row = self.saved_row
            self.col = self.saved_col
        else:
            self.pending += token.raw
            if command == 'm':
                self.rendition = apply_sgr(self.rendition or RenderState(), token.params)

        self.row = max(1, self.row)
        self.col = max(1, self.col)

    def _replay(self) -> str:
        """Single SGR sequence restoring the current style after a move."""
        if self.rendition is None:
            return ''
        return self.rendition.sgr()

    def get_screen(self) -> ScreenBuffer:
        """Get the resulting screen."""
        return self.screen


def flatten(text: str, width: int = SCREEN_WIDTH) -> str:
    """Resolve cursor movement in ``text`` into a flat, style-only stream."""
    flattener = Flattener(width=width)
    flattener.feed(text)
    return flattener.flatten()
