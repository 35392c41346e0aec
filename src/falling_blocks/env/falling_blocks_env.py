from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import (
    CATALOG,
    Control,
    FallingBlocksGame,
    GameConfig,
    GameState,
    action_for_control,
    reduce,
)
from falling_blocks.game.pieces import COLOURS, TetrominoType


RGB: Dict[str, Tuple[int, int, int]] = {
    "green": (0, 200, 80),
    "blue": (40, 90, 240),
    "brown": (150, 90, 40),
    "red": (230, 40, 40),
    "yellow": (240, 220, 0),
    "purple": (160, 0, 240),
    "orange": (240, 150, 0),
}
EMPTY_RGB = (30, 30, 36)


def compute_action_mask(state: GameState, config: GameConfig) -> np.ndarray:
    """Controls that would change the state; NOOP is always allowed."""
    mask = np.zeros((len(Control),), dtype=np.bool_)
    mask[Control.NOOP] = True
    for control in Control:
        action = action_for_control(control)
        if action is not None:
            mask[control] = reduce(state, action, config) is not state
    return mask


class FallingBlocksEnv(gym.Env):
    """
    Falling Blocks with a small discrete control space.

    Actions (7 total), see ``Control``:
      0: No-op
      1: Move Left
      2: Move Right
      3: Soft Drop
      4: Rotate CW
      5: Rotate CCW
      6: Hard Drop

    Each step applies the control, then advances the game clock by
    ``ticks_per_step`` ticks so gravity and locking happen as in real time.
    The reward is the score gained during the step.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        ticks_per_step: Optional[int] = None,
        max_episode_steps: int = 10000,
    ) -> None:
        super().__init__()
        self.game = FallingBlocksGame(config, entropy=0)
        self.config = self.game.config
        self.render_mode = render_mode
        self.ticks_per_step = int(ticks_per_step or max(1, self.config.base_period // 4))
        self.max_episode_steps = int(max_episode_steps)

        n_kinds = len(CATALOG)
        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(
                    low=-n_kinds, high=n_kinds,
                    shape=(self.config.height, self.config.width), dtype=np.int8,
                ),
                # 0 when there is no upcoming piece
                "next_piece": spaces.Discrete(n_kinds + 1),
            }
        )
        self.action_space = spaces.Discrete(len(Control))

        self._steps = 0

    @property
    def state(self) -> GameState:
        return self.game.state

    def _get_obs(self) -> Dict[str, Any]:
        upcoming = self.state.next_piece
        return {
            "grid": self.game.get_state(),
            "next_piece": int(upcoming[0].kind) if upcoming else 0,
        }

    def _get_info(self) -> Dict[str, Any]:
        return {
            "action_mask": compute_action_mask(self.state, self.config),
            "score": self.state.score,
            "level": self.state.level,
            "high_score": self.state.high_score,
            "max_height": self.config.grid.get_max_height(self.state.settled),
            "steps": self._steps,
        }

    def get_action_mask(self) -> np.ndarray:
        return compute_action_mask(self.state, self.config)

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        entropy = int(self.np_random.integers(0, 2**31))
        self.game.reset(entropy)
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        assert self.action_space.contains(int(action)), f"Invalid action {action!r}"
        score_before = self.state.score

        command = action_for_control(int(action))
        if command is not None:
            self.game.dispatch(command)
        for _ in range(self.ticks_per_step):
            self.game.tick()
            if self.state.ended:
                break

        self._steps += 1
        terminated = bool(self.state.ended)
        truncated = not terminated and self._steps >= self.max_episode_steps
        reward = float(self.state.score - score_before)
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        grid = self.game.get_state()
        cell = 12
        h, w = grid.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        for y in range(h):
            for x in range(w):
                v = int(grid[y, x])
                color = RGB[COLOURS[TetrominoType(abs(v))]] if v else EMPTY_RGB
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
        return img

    def close(self) -> None:
        pass
