from __future__ import annotations

from typing import Iterable, Tuple

from falling_blocks.game import Cell, GameState, TetrominoType
from falling_blocks.game.pieces import CATALOG


def make_cells(kind: TetrominoType, coords: Iterable[Tuple[int, int]]) -> Tuple[Cell, ...]:
    return tuple(Cell(x, y, kind) for x, y in coords)


def make_state(falling=None, settled=(), **kwargs) -> GameState:
    fields = dict(
        ended=False,
        falling=CATALOG[0] if falling is None else tuple(falling),
        settled=tuple(settled),
        seed=1,
        next_piece=CATALOG[6],
    )
    fields.update(kwargs)
    return GameState(**fields)
