"""ScreenBuffer - growable grid of cells for the flattener."""

from dataclasses import dataclass, field

from bbs_ansi_html.core.cell import Cell
from bbs_ansi_html.core.constants import SCREEN_WIDTH


@dataclass
class ScreenBuffer:
    """
    A 2D grid of Cells addressed by 1-indexed (row, column).

    Rows are allocated on demand when a cell is first touched and are never
    removed or reordered. Each row carries one slot past ``width`` that only
    receives style prefixes flushed at the right margin.
    """
    width: int = SCREEN_WIDTH
    _rows: list[list[Cell]] = field(default_factory=list)

    def ensure_row(self, row: int) -> None:
        """Grow the buffer until ``row`` (1-indexed) exists."""
        while len(self._rows) < row:
            self._rows.append([Cell() for _ in range(self.width + 1)])

    def cell(self, row: int, col: int) -> Cell:
        """Get the cell at (row, col), growing the grid if needed."""
        if row < 1:
            raise IndexError(f"row={row} out of bounds")
        if col < 1 or col > self.width + 1:
            raise IndexError(f"col={col} out of bounds (width={self.width})")
        self.ensure_row(row)
        return self._rows[row - 1][col - 1]

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        """Get cell using indexing: screen[row, col]."""
        row, col = pos
        return self.cell(row, col)

    @property
    def height(self) -> int:
        """Number of allocated rows."""
        return len(self._rows)

    def serialize(self) -> str:
        """
        Serialize the grid row-major, starting at row 1.

        Each cell contributes its pending prefix followed by its glyph.
        Unwritten cells left of the row's last glyph become spaces; rows
        are joined with newlines.
        """
        return '\n'.join(self._serialize_row(row) for row in self._rows)

    @staticmethod
    def _serialize_row(row: list[Cell]) -> str:
        last_glyph = -1
        last_used = -1
        for x, cell in enumerate(row):
            if cell.glyph is not None:
                last_glyph = x
            if not cell.is_blank():
                last_used = x

        parts: list[str] = []
        for x in range(last_used + 1):
            cell = row[x]
            parts.append(cell.pending)
            if cell.glyph is not None:
                parts.append(cell.glyph)
            elif x < last_glyph:
                parts.append(' ')
        return ''.join(parts)
