

from __future__ import annotations

import argparse
from typing import Dict, List, Optional

import gymnasium as gym

import falling_blocks.env  # noqa: F401
from falling_blocks.env.wrappers import ResampleInvalidActionWrapper


def build_env(resample: bool = True, ticks_per_step: Optional[int] = None) -> gym.Env:
    env = gym.make("FallingBlocks-10x20-v0", ticks_per_step=ticks_per_step)
    if resample:
        env = ResampleInvalidActionWrapper(env)
    return env


def run_random(steps: int = 2000, seed: Optional[int] = None, resample: bool = True,
               verbose: bool = True) -> List[Dict[str, int]]:
    env = build_env(resample=resample)
    env.action_space.seed(seed)
    obs, info = env.reset(seed=seed)
    episodes: List[Dict[str, int]] = []
    for _ in range(steps):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        if terminated or truncated:
            episodes.append({"score": info["score"], "level": info["level"], "steps": info["steps"]})
            if verbose:
                print(f"episode {len(episodes)}: score={info['score']} level={info['level']} "
                      f"steps={info['steps']} high_score={info['high_score']}")
            obs, info = env.reset()
    env.close()
    if verbose:
        print(f"Random agent finished {len(episodes)} episodes, high score {info['high_score']}")
    return episodes


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Falling Blocks with random controls")
    p.add_argument("--steps", type=int, default=2000)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--no-resample", action="store_true",
                   help="Keep sampled controls even when they would do nothing")
    return p


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    run_random(steps=args.steps, seed=args.seed, resample=not args.no_resample)


if __name__ == "__main__":  # pragma: no cover
    main()
