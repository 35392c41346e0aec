

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringRules:
    score_multiplier: int = 100
    level_up_threshold: int = 500

    def score_for_lines(self, lines: int) -> int:
        if lines <= 0:
            return 0
        return lines * self.score_multiplier

    def next_level(self, score: int, level: int) -> int:
        # Single step per clear, even if the score jumped past several thresholds
        if score >= self.level_up_threshold * level:
            return level + 1
        return level
