"""Keyboard-driven menus: a two-column grid of selectable elements."""

from __future__ import annotations

from typing import Callable, Optional

Point = tuple[float, float]


class MenuElement:
    """A selectable entry, such as a button, that runs an action when chosen."""

    def __init__(
        self,
        label: str,
        action: Callable[[], None],
        sound: Optional[Callable[[str], None]] = None,
    ):
        self.label = label
        self._action = action
        self._sound = sound
        self.is_selected = False
        self.is_pressed = False
        self.center: Point = (0.0, 0.0)

    @property
    def state(self) -> str:
        """The look to draw: 'selected' wins over 'pressed', otherwise 'normal'."""
        if self.is_selected:
            return "selected"
        if self.is_pressed:
            return "pressed"
        return "normal"

    def set_selected(self) -> None:
        self.is_selected = True

    def set_deselected(self) -> None:
        self.is_selected = False

    def execute_interaction(self) -> None:
        """Mark the element pressed, play its sound and run its action."""
        self.is_pressed = True
        self.is_selected = False
        if self._sound is not None:
            self._sound("button_pressed")
        self._action()

    def __repr__(self) -> str:
        return f"MenuElement({self.label!r}, state={self.state!r})"


class Menu:
    """Rows of up to two elements with one of them active at a time."""

    COLUMNS = 2

    def __init__(self, row_height: float, exit_action: Callable[[], None]):
        self.row_height = row_height
        self._exit_action = exit_action
        self.column_widths: list[float] = [0.0, 0.0]
        self.position: Point = (0.0, 0.0)
        self._columns: tuple[list[Optional[MenuElement]], list[Optional[MenuElement]]] = ([], [])
        self.active_col = 0
        self.active_row = 0

    @property
    def num_rows(self) -> int:
        return len(self._columns[0])

    @property
    def active_element(self) -> MenuElement:
        if not self.element_exists(self.active_col, self.active_row):
            raise LookupError("the menu has no active element")
        return self._columns[self.active_col][self.active_row]

    def set_column_width(self, first: float, second: float = 0.0) -> None:
        self.column_widths = [first, second]

    def add_row(self, first: Optional[MenuElement], second: Optional[MenuElement] = None) -> None:
        """Append a row; the first element added becomes the selected one."""
        if self.num_rows == 0 and first is None:
            raise ValueError("the first row of a menu needs a first element")
        x0, y0 = self.position
        width_first, width_second = self.column_widths
        center_y = y0 + self.num_rows * self.row_height + self.row_height / 2
        if first is not None:
            first.center = (x0 + width_first / 2, center_y)
        if second is not None:
            second.center = (x0 + width_first + width_second / 2, center_y)
        self._columns[0].append(first)
        self._columns[1].append(second)
        if self.num_rows == 1:
            self.active_element.set_selected()

    def select(self) -> None:
        self.active_element.execute_interaction()

    def exit(self) -> None:
        self._exit_action()

    def _move_to(self, col: int, row: int) -> None:
        self.active_element.set_deselected()
        self.active_col, self.active_row = col, row
        self.active_element.set_selected()

    def move_right(self) -> None:
        if self.active_col == 0 and self.element_exists(1, self.active_row):
            self._move_to(1, self.active_row)

    def move_left(self) -> None:
        if self.active_col == 1 and self.element_exists(0, self.active_row):
            self._move_to(0, self.active_row)

    def move_down(self) -> None:
        if self.element_exists(self.active_col, self.active_row + 1):
            self._move_to(self.active_col, self.active_row + 1)

    def move_up(self) -> None:
        if self.element_exists(self.active_col, self.active_row - 1):
            self._move_to(self.active_col, self.active_row - 1)

    def element_exists(self, col: int, row: int) -> bool:
        if 0 <= col < self.COLUMNS and 0 <= row < self.num_rows:
            return self._columns[col][row] is not None
        return False

    def bounding_box(self) -> tuple[Point, Point]:
        """Top-left and bottom-right corners of the menu."""
        x0, y0 = self.position
        return (
            (x0, y0),
            (x0 + sum(self.column_widths), y0 + self.num_rows * self.row_height),
        )