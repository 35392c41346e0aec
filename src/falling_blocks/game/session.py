

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from .core import DEFAULT_CONFIG, Action, GameConfig, GameState, Tick, initial_state, reduce


def run(actions: Iterable[Action], state: Optional[GameState] = None,
        config: GameConfig = DEFAULT_CONFIG) -> Iterator[GameState]:
    """Fold an action stream into states, yielding each one in arrival order."""
    if state is None:
        state = initial_state()
    for action in actions:
        state = reduce(state, action, config)
        yield state


def final_state(actions: Iterable[Action], state: Optional[GameState] = None,
                config: GameConfig = DEFAULT_CONFIG) -> GameState:
    if state is None:
        state = initial_state()
    for state in run(actions, state, config):
        pass
    return state


def tick_actions(count: int, start: int = 0) -> Iterator[Tick]:
    for elapsed in range(start, start + count):
        yield Tick(elapsed)
