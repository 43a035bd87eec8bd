"""Random generation of new pieces."""

from __future__ import annotations

import random
import time
from typing import Optional, Sequence

from blockfall.block import Block


class BlockFactory:
    """Hands out fresh copies of prototype blocks chosen uniformly at random."""

    def __init__(self, prototypes: Sequence[Block], seed: Optional[int] = None):
        self._prototypes = tuple(prototypes)
        if not self._prototypes:
            raise ValueError("a block factory needs at least one prototype")
        self._random = random.Random(int(time.time()) if seed is None else seed)

    def generate(self) -> Block:
        return self._random.choice(self._prototypes).copy()