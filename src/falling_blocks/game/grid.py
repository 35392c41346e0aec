

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from .pieces import Cell


@dataclass(frozen=True)
class GameGrid:
    """Board dimensions and the rules that depend only on them.

    Rows are numbered top=0 to bottom=height-1; x runs left to right. The grid
    holds no cells itself: settled and falling cells live in the game state
    and are passed in, so every method here is a pure function.
    """

    width: int = 10
    height: int = 20

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_colliding(self, falling: Sequence[Cell], settled: Sequence[Cell]) -> bool:
        """True if the falling cells overlap settled cells or leave the board.

        Cells above the board (negative y) are allowed; the bottom and both
        sides are walls.
        """
        occupied = {(c.x, c.y) for c in settled}
        for cell in falling:
            if cell.x < 0 or cell.x >= self.width or cell.y >= self.height:
                return True
            if (cell.x, cell.y) in occupied:
                return True
        return False

    def clearable_rows(self, settled: Sequence[Cell]) -> List[int]:
        counts = Counter(c.y for c in settled)
        return [row for row in range(self.height) if counts[row] == self.width]

    def clear_rows(self, settled: Sequence[Cell]) -> Tuple[Tuple[Cell, ...], int]:
        """Remove full rows and let the rows above them fall.

        Each remaining cell moves down by the number of cleared rows beneath
        it (rows with a larger index). Returns the new cells and the number of
        rows cleared.
        """
        full = self.clearable_rows(settled)
        if not full:
            return tuple(settled), 0
        full_set = set(full)
        shifts = [sum(1 for r in full if r > row) for row in range(self.height)]
        kept = tuple(
            c.shifted(0, shifts[c.y]) for c in settled if c.y not in full_set
        )
        return kept, len(full)

    def to_array(self, settled: Sequence[Cell], falling: Sequence[Cell] = ()) -> np.ndarray:
        # Settled cells as positive kinds, visible falling cells as negative
        grid = np.zeros((self.height, self.width), dtype=np.int8)
        for c in settled:
            if self.is_inside(c.x, c.y):
                grid[c.y, c.x] = int(c.kind)
        for c in falling:
            if self.is_inside(c.x, c.y):
                grid[c.y, c.x] = -int(c.kind)
        return grid

    def get_max_height(self, settled: Sequence[Cell]) -> int:
        if not settled:
            return 0
        return self.height - min(c.y for c in settled)
