"""Fixed-width text grids for terminal output.

Cells are laid out into a requested number of columns. Each column is as
wide as its widest cell, and cells are left-aligned and separated by a
configurable filling. Styled strings are treated as opaque: their escape
sequences count towards their width, so callers should not mix styled and
plain cells in the same column when alignment matters.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from rich.cells import cell_len
from rich.style import Style

_BOLD = Style(bold=True)


def bold(text: str) -> str:
    """Return ``text`` wrapped in ANSI bold escape sequences."""
    return _BOLD.render(text)


class Direction(str, Enum):
    """Order in which cells are placed into the grid."""

    LEFT_TO_RIGHT = "left-to-right"
    TOP_TO_BOTTOM = "top-to-bottom"


@dataclass(frozen=True)
class Filling:
    """What goes between two adjacent cells of a row."""

    separator: str = " "

    @classmethod
    def spaces(cls, count: int) -> "Filling":
        if count < 0:
            raise ValueError(f"Cannot fill with {count} spaces")
        return cls(" " * count)

    @classmethod
    def text(cls, separator: str) -> "Filling":
        return cls(separator)


@dataclass(frozen=True)
class Cell:
    """A single piece of text in the grid."""

    contents: str
    width: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width is None:
            object.__setattr__(self, "width", cell_len(self.contents))


class Grid:
    """Collects cells and renders them as aligned columns."""

    def __init__(
        self,
        direction: Direction = Direction.LEFT_TO_RIGHT,
        filling: Optional[Filling] = None,
    ) -> None:
        self.direction = direction
        self.filling = filling or Filling.spaces(1)
        self.cells: list[Cell] = []

    def add(self, cell: Union[Cell, str]) -> "Grid":
        if isinstance(cell, str):
            cell = Cell(cell)
        self.cells.append(cell)
        return self

    def _index(self, row: int, column: int, rows: int, columns: int) -> int:
        if self.direction is Direction.LEFT_TO_RIGHT:
            return row * columns + column
        return column * rows + row

    def fit_into_columns(self, columns: int) -> str:
        """Render the grid using exactly ``columns`` columns."""
        if columns < 1:
            raise ValueError(f"A grid needs at least one column, got {columns}")
        if not self.cells:
            return ""

        rows = math.ceil(len(self.cells) / columns)
        layout: list[list[Cell]] = []
        for row in range(rows):
            line: list[Cell] = []
            for column in range(columns):
                index = self._index(row, column, rows, columns)
                if index < len(self.cells):
                    line.append(self.cells[index])
            layout.append(line)

        widths = [0] * columns
        for line in layout:
            for column, cell in enumerate(line):
                widths[column] = max(widths[column], cell.width)

        out: list[str] = []
        for line in layout:
            parts: list[str] = []
            last = len(line) - 1
            for column, cell in enumerate(line):
                if column < last:
                    parts.append(cell.contents + " " * (widths[column] - cell.width))
                else:
                    parts.append(cell.contents)
            out.append(self.filling.separator.join(parts) + "\n")
        return "".join(out)
