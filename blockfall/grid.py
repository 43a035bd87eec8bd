"""The playing field: a fixed grid of colour ids where 0 means empty."""

from __future__ import annotations

from typing import Iterable

from blockfall.block import GridBBox, GridPosition


class Grid:
    """Settled cells of the playing field."""

    def __init__(self, width: int = 10, height: int = 20):
        if width <= 0 or height <= 0:
            raise ValueError("grid dimensions must be positive")
        self.width = width
        self.height = height
        self._cells = [[0] * width for _ in range(height)]

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"cell ({row}, {col}) is outside the grid")

    def value(self, row: int, col: int) -> int:
        self._check(row, col)
        return self._cells[row][col]

    def rows(self) -> tuple[tuple[int, ...], ...]:
        return tuple(tuple(row) for row in self._cells)

    def is_outside(self, bbox: GridBBox) -> bool:
        """True when the box pokes past the left or right wall."""
        return bbox.min.col < 0 or bbox.max.col > self.width - 1

    def is_collided(self, cells: Iterable[GridPosition]) -> bool:
        """True when any cell is below the floor or on a settled cell."""
        for cell in cells:
            if cell.row > self.height - 1:
                return True
            if cell.row >= 0 and cell.col >= 0 and self.value(cell.row, cell.col) != 0:
                return True
        return False

    def add_cells(self, cells: Iterable[GridPosition], color_id: int) -> None:
        for cell in cells:
            self._check(cell.row, cell.col)
            self._cells[cell.row][cell.col] = color_id

    def remove_rows(self, hint: GridBBox) -> int:
        """Remove full rows within the hint's row span; return how many went."""
        first = max(hint.min.row, 0)
        last = min(hint.max.row, self.height - 1)
        full = {i for i in range(first, last + 1) if all(self._cells[i])}
        if not full:
            return 0
        kept = [row for i, row in enumerate(self._cells) if i not in full]
        self._cells = [[0] * self.width for _ in full] + kept
        return len(full)

    def clear(self) -> None:
        self._cells = [[0] * self.width for _ in range(self.height)]