

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, Tuple

from .rng import scale


class TetrominoType(IntEnum):
    O = 1
    I = 2
    J = 3
    L = 4
    S = 5
    Z = 6
    T = 7


COLOURS: Dict[TetrominoType, str] = {
    TetrominoType.O: "green",
    TetrominoType.I: "blue",
    TetrominoType.J: "brown",
    TetrominoType.L: "red",
    TetrominoType.S: "yellow",
    TetrominoType.Z: "purple",
    TetrominoType.T: "orange",
}


@dataclass(frozen=True)
class Cell:
    x: int
    y: int
    kind: TetrominoType

    @property
    def colour(self) -> str:
        return COLOURS[self.kind]

    def shifted(self, dx: int, dy: int) -> "Cell":
        return Cell(self.x + dx, self.y + dy, self.kind)


Piece = Tuple[Cell, ...]


def _piece(kind: TetrominoType, coords: Iterable[Tuple[int, int]]) -> Piece:
    return tuple(Cell(x, y, kind) for x, y in coords)


# Spawn cells sit around the rotation origin (4, -1), above the visible board.
CATALOG: Tuple[Piece, ...] = (
    _piece(TetrominoType.O, [(4, -2), (5, -2), (4, -1), (5, -1)]),
    _piece(TetrominoType.I, [(3, -1), (4, -1), (5, -1), (6, -1)]),
    _piece(TetrominoType.J, [(3, -2), (3, -1), (4, -1), (5, -1)]),
    _piece(TetrominoType.L, [(5, -2), (3, -1), (4, -1), (5, -1)]),
    _piece(TetrominoType.S, [(3, -1), (4, -1), (4, -2), (5, -2)]),
    _piece(TetrominoType.Z, [(3, -2), (4, -1), (4, -2), (5, -1)]),
    _piece(TetrominoType.T, [(3, -1), (4, -1), (4, -2), (5, -1)]),
)

NON_ROTATING = TetrominoType.O


def next_piece(seed: int) -> Piece:
    return CATALOG[scale(seed, len(CATALOG))]


def is_rotatable(piece: Piece) -> bool:
    return bool(piece) and piece[0].kind != NON_ROTATING
