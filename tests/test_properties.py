import random

import pytest

from falling_blocks.game import (
    Direction,
    GameConfig,
    HardDrop,
    Move,
    Rotate,
    Tick,
    initial_state,
    is_game_over,
    reduce,
)

FAST = GameConfig(base_period=1)


def random_actions(rng: random.Random, count: int):
    elapsed = 0
    for _ in range(count):
        roll = rng.random()
        if roll < 0.4:
            yield Tick(elapsed)
            elapsed += 1
        elif roll < 0.55:
            yield HardDrop()
        elif roll < 0.7:
            yield Move(rng.choice((-1, 1)), 0)
        elif roll < 0.8:
            yield Move(0, 1)
        else:
            yield Rotate(rng.choice(list(Direction)))


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_invariants_hold_for_random_play(seed):
    rng = random.Random(seed)
    state = initial_state(seed)
    for action in random_actions(rng, 1500):
        prev = state
        state = reduce(prev, action, FAST)

        assert state.score >= prev.score
        assert state.level >= prev.level
        assert state.level - prev.level <= 1

        if state.ended:
            assert state.falling == () and state.next_piece == ()
            assert state.high_score >= state.score
        else:
            assert len(state.falling) == 4
            assert all(0 <= c.x < FAST.width and c.y < FAST.height for c in state.falling)

        coords = [(c.x, c.y) for c in state.settled]
        assert len(coords) == len(set(coords))
        assert all(0 <= x < FAST.width and 0 <= y < FAST.height for x, y in coords)

        if isinstance(action, Tick) and state.settled != prev.settled:
            cleared = (state.score - prev.score) // FAST.rules.score_multiplier
            landed = sum(1 for c in prev.falling if c.y >= 0)
            assert cleared <= 4
            assert len(state.settled) == len(prev.settled) + landed - cleared * FAST.width

        if is_game_over(prev) and not isinstance(action, Tick):
            assert state.settled == prev.settled
            assert (state.score, state.level) == (prev.score, prev.level)


def test_random_play_eventually_ends():
    state = initial_state(3)
    elapsed = 0
    for _ in range(5000):
        state = reduce(state, HardDrop(), FAST)
        state = reduce(state, Tick(elapsed), FAST)
        elapsed += 1
        if state.ended:
            break
    assert state.ended
    assert state.high_score == state.score
