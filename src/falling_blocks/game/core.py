

from __future__ import annotations

import time
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple, Union

import numpy as np

from .grid import GameGrid
from .pieces import Cell, is_rotatable, next_piece
from .rng import lcg_hash
from .rules import ScoringRules


Offset = Tuple[int, int]


@dataclass(frozen=True)
class GameConfig:
    width: int = 10
    height: int = 20
    base_period: int = 200  # ticks between drops at level 1
    origin: Offset = (4, -1)  # rotation origin of a freshly spawned piece
    tick_rate_ms: int = 1
    rules: ScoringRules = field(default_factory=ScoringRules)

    @property
    def grid(self) -> GameGrid:
        return GameGrid(self.width, self.height)

    def drop_period(self, level: int) -> int:
        return max(1, self.base_period // max(1, level))


DEFAULT_CONFIG = GameConfig()


@dataclass(frozen=True)
class GameState:
    ended: bool
    falling: Tuple[Cell, ...]
    settled: Tuple[Cell, ...]
    seed: int
    next_piece: Tuple[Cell, ...]
    offset: Offset = (0, 0)
    level: int = 1
    score: int = 0
    high_score: int = 0


class Direction(str, Enum):
    CLOCKWISE = "clockwise"
    ANTICLOCKWISE = "anticlockwise"


@dataclass(frozen=True)
class Move:
    dx: int
    dy: int


@dataclass(frozen=True)
class Tick:
    elapsed: int


@dataclass(frozen=True)
class HardDrop:
    pass


@dataclass(frozen=True)
class Rotate:
    direction: Direction


@dataclass(frozen=True)
class Restart:
    pass


Action = Union[Move, Tick, HardDrop, Rotate, Restart]


# ---------- Initialisation ----------
def clock_entropy() -> int:
    """Millisecond component of the wall clock. The only impure call here."""
    return int(time.time() * 1000) % 1000


def initial_state(entropy: Optional[int] = None) -> GameState:
    if entropy is None:
        entropy = clock_entropy()
    seed = lcg_hash(entropy)
    return GameState(
        ended=False,
        falling=next_piece(seed),
        settled=(),
        seed=lcg_hash(seed),
        next_piece=next_piece(lcg_hash(seed)),
    )


# ---------- Predicates ----------
def is_colliding(state: GameState, config: GameConfig = DEFAULT_CONFIG) -> bool:
    return config.grid.is_colliding(state.falling, state.settled)


def is_game_over(state: GameState) -> bool:
    # A column has stacked up to the top row
    return any(c.y == 0 for c in state.settled)


def _accepts_input(state: GameState) -> bool:
    return not state.ended and bool(state.falling) and not is_game_over(state)


# ---------- Transitions ----------
def _shift(state: GameState, dx: int, dy: int) -> GameState:
    return replace(
        state,
        falling=tuple(c.shifted(dx, dy) for c in state.falling),
        offset=(state.offset[0] + dx, state.offset[1] + dy),
    )


def _move(state: GameState, dx: int, dy: int, config: GameConfig) -> GameState:
    if not _accepts_input(state):
        return state
    moved = _shift(state, dx, dy)
    return state if is_colliding(moved, config) else moved


def _end(state: GameState) -> GameState:
    return replace(
        state,
        ended=True,
        falling=(),
        next_piece=(),
        high_score=max(state.score, state.high_score),
    )


def _lock(state: GameState, config: GameConfig) -> GameState:
    grid = config.grid
    # Cells still above the board cannot be stored; a piece locking there
    # always covers row 0 as well, so the game ends on the next tick.
    landed = tuple(c for c in state.falling if c.y >= 0)
    settled, lines = grid.clear_rows(state.settled + landed)
    score = state.score + config.rules.score_for_lines(lines)
    return replace(
        state,
        falling=state.next_piece,
        settled=settled,
        offset=(0, 0),
        next_piece=next_piece(state.seed),
        score=score,
        level=config.rules.next_level(score, state.level),
    )


def _tick(state: GameState, elapsed: int, config: GameConfig) -> GameState:
    if is_game_over(state):
        return _end(state)
    if state.ended or not state.falling:
        return state
    hashed = replace(state, seed=lcg_hash(elapsed))
    if elapsed % config.drop_period(state.level) != 0:
        return hashed
    if is_colliding(_shift(state, 0, 1), config):
        return _lock(hashed, config)
    return _shift(hashed, 0, 1)


def _hard_drop(state: GameState, config: GameConfig) -> GameState:
    if not _accepts_input(state):
        return state
    # Lowest cell starts at most a few rows above the board
    for _ in range(config.height + 4):
        moved = _shift(state, 0, 1)
        if is_colliding(moved, config):
            break
        state = moved
    return state


def _rotate(state: GameState, direction: Direction, config: GameConfig) -> GameState:
    if not _accepts_input(state) or not is_rotatable(state.falling):
        return state
    px = config.origin[0] + state.offset[0]
    py = config.origin[1] + state.offset[1]
    rotated = []
    for c in state.falling:
        rx, ry = c.x - px, c.y - py
        if direction == Direction.CLOCKWISE:
            rotated.append(Cell(px - ry, py + rx, c.kind))
        else:
            rotated.append(Cell(px + ry, py - rx, c.kind))
    candidate = replace(state, falling=tuple(rotated))
    return state if is_colliding(candidate, config) else candidate


def _restart(state: GameState) -> GameState:
    if not is_game_over(state):
        return state
    fresh = lcg_hash(state.seed)
    return GameState(
        ended=False,
        falling=next_piece(fresh),
        settled=(),
        seed=fresh,
        next_piece=next_piece(lcg_hash(fresh)),
        high_score=state.high_score,
    )


def reduce(state: GameState, action: Action, config: GameConfig = DEFAULT_CONFIG) -> GameState:
    """Apply one action and return the next state.

    Illegal moves and rotations, and input while the game is over, return
    ``state`` itself. Anything that is not an action variant is rejected.
    """
    match action:
        case Move(dx=dx, dy=dy):
            return _move(state, dx, dy, config)
        case Tick(elapsed=elapsed):
            return _tick(state, elapsed, config)
        case HardDrop():
            return _hard_drop(state, config)
        case Rotate(direction=direction):
            return _rotate(state, Direction(direction), config)
        case Restart():
            return _restart(state)
        case _:
            raise TypeError(f"Unknown action: {action!r}")


class FallingBlocksGame:
    """Mutable holder around the pure reducer.

    Keeps the latest snapshot and the tick counter so callers can feed
    actions one at a time; every transition still goes through ``reduce``.
    """

    def __init__(self, config: Optional[GameConfig] = None, entropy: Optional[int] = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.state = initial_state(entropy)
        self.elapsed = 0

    def reset(self, entropy: Optional[int] = None, keep_high_score: bool = True) -> GameState:
        high_score = self.state.high_score if keep_high_score else 0
        self.state = replace(initial_state(entropy), high_score=high_score)
        self.elapsed = 0
        return self.state

    def dispatch(self, action: Action) -> GameState:
        self.state = reduce(self.state, action, self.config)
        return self.state

    def tick(self, count: int = 1) -> GameState:
        for _ in range(count):
            self.dispatch(Tick(self.elapsed))
            self.elapsed += 1
        return self.state

    @property
    def game_over(self) -> bool:
        return self.state.ended

    def get_state(self) -> np.ndarray:
        return self.config.grid.to_array(self.state.settled, self.state.falling)
