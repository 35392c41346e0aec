"""Game module for Falling Blocks.

Exports the deterministic game engine and supporting pieces:
- GameGrid: Board dimensions, collision and line clearing
- Cell, TetrominoType, CATALOG: Piece definitions and selection
- ScoringRules: Score multiplier and level thresholds
- GameState, reduce, initial_state: The pure state machine
- Move, Tick, HardDrop, Rotate, Restart: The closed set of actions
- FallingBlocksGame: Mutable holder that feeds actions to the reducer
- Control: Discrete player inputs
"""

from .rng import lcg_hash, scale
from .pieces import CATALOG, Cell, TetrominoType, next_piece
from .grid import GameGrid
from .rules import ScoringRules
from .core import (
    DEFAULT_CONFIG,
    Action,
    Direction,
    FallingBlocksGame,
    GameConfig,
    GameState,
    HardDrop,
    Move,
    Restart,
    Rotate,
    Tick,
    initial_state,
    is_colliding,
    is_game_over,
    reduce,
)
from .controls import Control, action_for_control, action_for_key
from .session import final_state, run, tick_actions

__all__ = [
    "lcg_hash",
    "scale",
    "CATALOG",
    "Cell",
    "TetrominoType",
    "next_piece",
    "GameGrid",
    "ScoringRules",
    "DEFAULT_CONFIG",
    "Action",
    "Direction",
    "FallingBlocksGame",
    "GameConfig",
    "GameState",
    "HardDrop",
    "Move",
    "Restart",
    "Rotate",
    "Tick",
    "initial_state",
    "is_colliding",
    "is_game_over",
    "reduce",
    "Control",
    "action_for_control",
    "action_for_key",
    "final_state",
    "run",
    "tick_actions",
]
