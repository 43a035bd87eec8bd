"""Text shown beside the playing field, kept in step with the game's events."""

from __future__ import annotations

from typing import Optional

from blockfall.block import Block
from blockfall.game import ClassicTetrisGame, GameEvent


class HudText:
    """The score, line, level and combo readouts plus the previewed blocks."""

    def __init__(self):
        self.score = "0"
        self.lines = "0"
        self.level = "1"
        self.combo = ""
        self.next_block: Optional[Block] = None
        self.hold_block: Optional[Block] = None

    def on_notify(self, game: ClassicTetrisGame, event: GameEvent) -> None:
        if event is GameEvent.SCORE_UPDATED:
            self.score = str(game.score)
        elif event is GameEvent.NUM_REMOVED_LINES_UPDATED:
            self.lines = str(game.lines_removed)
        elif event is GameEvent.SPEED_LVL_UPDATED:
            self.level = str(game.speed_level)
        elif event is GameEvent.NEXT_BLOCK_UPDATED:
            self.next_block = game.next_block
        elif event is GameEvent.HOLD_BLOCK_UPDATED:
            self.hold_block = game.hold_block
        elif event is GameEvent.COMBO_UPDATED:
            if game.combo == 0:
                self.combo = ""
            elif game.combo >= 2:
                self.combo = f"x {game.combo}"