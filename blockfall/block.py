"""Falling pieces: grid coordinates, bounding boxes and rotatable blocks."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass
from typing import Iterable, Sequence, Union


@dataclass(frozen=True, order=True)
class GridPosition:
    """A cell position on the playing grid."""

    row: int
    col: int

    def shifted(self, offset: GridPosition) -> GridPosition:
        return GridPosition(self.row + offset.row, self.col + offset.col)


@dataclass(frozen=True)
class GridBBox:
    """Inclusive bounding box of a set of grid cells."""

    min: GridPosition
    max: GridPosition

    def shifted(self, offset: GridPosition) -> GridBBox:
        return GridBBox(self.min.shifted(offset), self.max.shifted(offset))


CellLike = Union[GridPosition, Sequence[int]]


def _as_position(cell: CellLike) -> GridPosition:
    if isinstance(cell, GridPosition):
        return cell
    row, col = cell
    return GridPosition(row, col)


def bounding_box(cells: Iterable[CellLike]) -> GridBBox:
    """Return the smallest box holding every cell."""
    positions = [_as_position(cell) for cell in cells]
    if not positions:
        raise ValueError("cannot compute the bounding box of no cells")
    rows = [p.row for p in positions]
    cols = [p.col for p in positions]
    return GridBBox(GridPosition(min(rows), min(cols)), GridPosition(max(rows), max(cols)))


class Block:
    """A piece with one cell layout per rotation state and a grid offset."""

    def __init__(self, block_id: int, rotations: Sequence[Iterable[CellLike]], color_id: int):
        layouts = tuple(tuple(_as_position(cell) for cell in layout) for layout in rotations)
        if not layouts:
            raise ValueError("a block needs at least one rotation state")
        self.block_id = block_id
        self.color_id = color_id
        self._rotations = layouts
        self._bboxes = tuple(bounding_box(layout) for layout in layouts)
        self.rotation_state = 0
        self.offset = GridPosition(0, 0)

    @property
    def rotation_count(self) -> int:
        return len(self._rotations)

    def current_cells(self) -> list[GridPosition]:
        """Cells of the current rotation, placed at the block's offset."""
        return [cell.shifted(self.offset) for cell in self._rotations[self.rotation_state]]

    def bbox(self) -> GridBBox:
        """Bounding box of the current rotation, placed at the block's offset."""
        return self._bboxes[self.rotation_state].shifted(self.offset)

    def move(self, dx: int, dy: int) -> None:
        """Shift the block by dx columns and dy rows."""
        self.offset = GridPosition(self.offset.row + dy, self.offset.col + dx)

    def rotate(self) -> None:
        self.rotation_state = (self.rotation_state + 1) % len(self._rotations)

    def rotate_left(self) -> None:
        self.rotation_state = (self.rotation_state - 1) % len(self._rotations)

    def reset_offset(self) -> None:
        self.offset = GridPosition(0, 0)

    def copy(self) -> Block:
        return _copy.copy(self)

    def __repr__(self) -> str:
        return (
            f"Block(id={self.block_id}, color={self.color_id}, "
            f"rotation={self.rotation_state}, offset={self.offset})"
        )