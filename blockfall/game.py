"""Rules of the classic falling-blocks game: movement, scoring, holding and levels."""

from __future__ import annotations

import enum
import time
from typing import Callable, Optional, Protocol

from blockfall.block import Block
from blockfall.factory import BlockFactory
from blockfall.grid import Grid

GHOST_COLOR_ID = 8
MAX_SPEED_LEVEL = 10
LINES_PER_LEVEL = 15

# Points for clearing 1..4 lines at once: (base, extra per level above the first).
_LINE_POINTS = {
    1: (100, 50),
    2: (200, 75),
    3: (350, 120),
    4: (500, 200),
}


class GameEvent(enum.Enum):
    """Notifications sent by the game to its observers."""

    SCORE_UPDATED = enum.auto()
    COMBO_UPDATED = enum.auto()
    NEXT_BLOCK_UPDATED = enum.auto()
    HOLD_BLOCK_UPDATED = enum.auto()
    SPEED_LVL_UPDATED = enum.auto()
    NUM_REMOVED_LINES_UPDATED = enum.auto()
    GAME_OVER = enum.auto()
    PAUSE = enum.auto()
    GAME_RESET = enum.auto()


class GameObserver(Protocol):
    def on_notify(self, game: "ClassicTetrisGame", event: GameEvent) -> None: ...


class LongPressRepeater:
    """Decides when a held key repeats: slow at first, faster the longer it is held."""

    def __init__(self, clock: Callable[[], float], first_delay: float, min_delay: float):
        self._clock = clock
        self.first_delay = first_delay
        self.min_delay = min_delay
        self.presses = 0
        self._last_press = 0.0

    def _accept(self, presses: int) -> bool:
        self.presses = presses
        self._last_press = self._clock()
        return True

    def ready(self) -> bool:
        """True when the held input should act now; False when it came too early."""
        if self.presses == 0:
            return self._accept(1)
        elapsed = self._clock() - self._last_press
        if elapsed > self.first_delay * 2:
            return self._accept(1)
        delay = max(self.first_delay - 0.02 * (self.presses - 1), self.min_delay)
        if elapsed > delay:
            return self._accept(self.presses + 1)
        return False


class ClassicTetrisGame:
    """State and rules of one game on a grid."""

    base_fall_time = 1.0

    def __init__(
        self,
        factory: BlockFactory,
        grid: Optional[Grid] = None,
        clock: Callable[[], float] = time.monotonic,
        sound: Optional[Callable[[str], None]] = None,
    ):
        self.factory = factory
        self.grid = grid if grid is not None else Grid()
        self._clock = clock
        self._sound = sound
        self._observers: list[GameObserver] = []
        self.active_block: Optional[Block] = None
        self.next_block: Optional[Block] = None
        self.hold_block: Optional[Block] = None
        self.ghost_block: Optional[Block] = None
        self.can_play = False
        self.can_hold = True
        self.speed_level = 1
        self.score = 0
        self.lines_removed = 0
        self.combo = 0
        self._last_fall = 0.0

    def add_observer(self, observer: GameObserver) -> None:
        self._observers.append(observer)

    def _notify(self, event: GameEvent) -> None:
        for observer in self._observers:
            observer.on_notify(self, event)

    def _play(self, name: str) -> None:
        if self._sound is not None:
            self._sound(name)

    def start(self) -> None:
        self.active_block = self.factory.generate()
        self._prepare_block(self.active_block)
        self._create_next_block()
        self.can_play = True
        self.can_hold = True

    def reset(self) -> None:
        self.grid.clear()
        self.score = 0
        self._notify(GameEvent.SCORE_UPDATED)
        self.combo = 0
        self._notify(GameEvent.COMBO_UPDATED)
        self.can_play = False
        self.active_block = None
        self.ghost_block = None
        self.next_block = None
        self._notify(GameEvent.NEXT_BLOCK_UPDATED)
        self.hold_block = None
        self._notify(GameEvent.HOLD_BLOCK_UPDATED)
        self.speed_level = 1
        self._notify(GameEvent.SPEED_LVL_UPDATED)
        self.lines_removed = 0
        self._notify(GameEvent.NUM_REMOVED_LINES_UPDATED)

    def update(self) -> None:
        """Let the active block fall when its time has come."""
        if not self.can_play:
            return
        elapsed = self._clock() - self._last_fall
        if elapsed > self.base_fall_time / (self.speed_level * 0.7):
            self.move_down()
            self._last_fall = self._clock()

    def _blocked(self, block: Block) -> bool:
        return self.grid.is_outside(block.bbox()) or self.grid.is_collided(block.current_cells())

    def move_down(self) -> None:
        block = self.active_block
        block.move(0, 1)
        if self.grid.is_outside(block.bbox()):
            block.move(0, -1)
            return
        if self.grid.is_collided(block.current_cells()):
            block.move(0, -1)
            self._settle()

    def _shift(self, dx: int) -> None:
        block = self.active_block
        block.move(dx, 0)
        if self._blocked(block):
            block.move(-dx, 0)
            return
        self._play("block_move")
        self._update_ghost()

    def move_right(self) -> None:
        self._shift(1)

    def move_left(self) -> None:
        self._shift(-1)

    def drop_hard(self) -> None:
        block = self.active_block
        while not self.grid.is_collided(block.current_cells()):
            block.move(0, 1)
        block.move(0, -1)
        self._settle()

    def _try_offset(self, dx: int, dy: int) -> bool:
        block = self.active_block
        block.move(dx, dy)
        if self.grid.is_outside(block.bbox()):
            block.move(-dx, -dy)
            return False
        return True

    def rotate(self) -> None:
        block, ghost = self.active_block, self.ghost_block
        block.rotate()
        ghost.rotate()
        if self.grid.is_outside(block.bbox()):
            # Wall kicks: one right, one left, two right (for the long piece).
            if not any(self._try_offset(dx, 0) for dx in (1, -1, 2)):
                block.rotate_left()
                ghost.rotate_left()
                return
        if self.grid.is_collided(block.current_cells()):
            block.rotate_left()
            ghost.rotate_left()
            return
        self._play("block_move")
        self._update_ghost()

    def hold(self) -> None:
        """Swap the active block with the held one, once per placed block."""
        if not self.can_hold or self.active_block is None:
            return
        self.active_block, self.hold_block = self.hold_block, self.active_block
        if self.active_block is None:
            self.active_block, self.next_block = self.next_block, None
            self._create_next_block()
        self._prepare_block(self.active_block)
        self.hold_block.reset_offset()
        self.can_hold = False
        self._notify(GameEvent.HOLD_BLOCK_UPDATED)
        self._play("block_hold")

    def pause(self) -> None:
        self.can_play = False
        self._notify(GameEvent.PAUSE)

    def unpause(self) -> None:
        self.can_play = True

    def _prepare_block(self, block: Block) -> None:
        if block.block_id == 1:
            block.move(4, -1)
        elif block.block_id == 2:
            block.move(3, -1)
        else:
            block.move(4, 0)
        self._last_fall = self._clock()
        self.ghost_block = block.copy()
        self.ghost_block.color_id = GHOST_COLOR_ID
        self._update_ghost()

    def _create_next_block(self) -> None:
        self.next_block = self.factory.generate()
        self._notify(GameEvent.NEXT_BLOCK_UPDATED)

    def _settle(self) -> None:
        block = self.active_block
        self.grid.add_cells(
            (cell for cell in block.current_cells() if cell.row >= 0), block.color_id
        )
        removed = self.grid.remove_rows(block.bbox())
        self._update_score(removed)
        self.lines_removed += removed
        if removed > 0:
            self._notify(GameEvent.NUM_REMOVED_LINES_UPDATED)
            self._update_speed_level()
        self.active_block, self.next_block = self.next_block, self.active_block
        self._prepare_block(self.active_block)
        if self.grid.is_collided(self.active_block.current_cells()):
            self.can_play = False
            self._notify(GameEvent.GAME_OVER)
        self._create_next_block()
        self.can_hold = True
        self._play("block_drop")

    def _update_score(self, removed: int) -> None:
        old_score, old_combo = self.score, self.combo
        if removed in _LINE_POINTS:
            base, per_level = _LINE_POINTS[removed]
            self.score += base + per_level * (self.speed_level - 1)
        if self.combo > 0 and removed == 0:
            if self.combo >= 2:
                self.score += 20 * 2 ** self.combo + 120 * (self.speed_level - 1)
            self.combo = 0
        elif removed > 0:
            self.combo += 1
        if removed == 4:
            self._play("tetris")
        if old_score != self.score:
            self._notify(GameEvent.SCORE_UPDATED)
        if old_combo != self.combo:
            self._notify(GameEvent.COMBO_UPDATED)

    def _update_speed_level(self) -> None:
        level = min(self.lines_removed // LINES_PER_LEVEL + 1, MAX_SPEED_LEVEL)
        if level != self.speed_level:
            self.speed_level = level
            self._notify(GameEvent.SPEED_LVL_UPDATED)

    def _update_ghost(self) -> None:
        ghost = self.ghost_block
        ghost.offset = self.active_block.offset
        while not self.grid.is_collided(ghost.current_cells()):
            ghost.move(0, 1)
        ghost.move(0, -1)