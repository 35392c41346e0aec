

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Optional

from .core import Action, Direction, HardDrop, Move, Restart, Rotate


class Control(IntEnum):
    NOOP = 0
    LEFT = 1
    RIGHT = 2
    SOFT_DROP = 3
    ROTATE_CW = 4
    ROTATE_CCW = 5
    HARD_DROP = 6


CONTROL_ACTIONS: Dict[Control, Optional[Action]] = {
    Control.NOOP: None,
    Control.LEFT: Move(-1, 0),
    Control.RIGHT: Move(1, 0),
    Control.SOFT_DROP: Move(0, 1),
    Control.ROTATE_CW: Rotate(Direction.CLOCKWISE),
    Control.ROTATE_CCW: Rotate(Direction.ANTICLOCKWISE),
    Control.HARD_DROP: HardDrop(),
}

# Keyboard event codes (KeyboardEvent.code) to actions
KEY_BINDINGS: Dict[str, Action] = {
    "KeyA": Move(-1, 0),
    "KeyD": Move(1, 0),
    "KeyS": Move(0, 1),
    "Space": HardDrop(),
    "KeyR": Restart(),
    "KeyQ": Rotate(Direction.ANTICLOCKWISE),
    "KeyE": Rotate(Direction.CLOCKWISE),
}


def action_for_control(control: int) -> Optional[Action]:
    return CONTROL_ACTIONS[Control(control)]


def action_for_key(code: str, repeat: bool = False) -> Optional[Action]:
    """Action for one key-down event, or None.

    Auto-repeat events are ignored so that holding a key yields one action.
    """
    if repeat:
        return None
    return KEY_BINDINGS.get(code)
