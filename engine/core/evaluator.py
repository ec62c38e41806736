from typing import Optional, Sequence

from engine.config import EvalConfig
from engine.core.piece import NUM_ATTRIBUTES
from engine.core.win_checker import CENTER_CELLS, EMPTY, LINES, line_values


class Evaluator:
    """Leaf heuristic for the search.

    Rewards lines whose occupied cells still agree on an attribute, more so the
    more pieces they hold, plus a small bonus for the four centre cells. The
    score has no side: the minimax fold decides who it is good for.
    """

    def __init__(self, cfg: Optional[EvalConfig] = None):
        self.cfg = cfg or EvalConfig()
        self._weights = {
            1: self.cfg.one_in_line_weight,
            2: self.cfg.two_in_line_weight,
            3: self.cfg.three_in_line_weight,
        }

    def evaluate(self, grid: Sequence[Sequence[int]]) -> float:
        score = 0.0
        for line in LINES:
            score += self.evaluate_line(line_values(grid, line))

        for r, c in CENTER_CELLS:
            if grid[r][c] != EMPTY:
                score += self.cfg.center_bonus
        return score

    def evaluate_line(self, ids: Sequence[int]) -> float:
        pieces = [p for p in ids if p != EMPTY]
        if not pieces:
            return 0.0

        line_score = 0.0
        for bit in range(NUM_ATTRIBUTES):
            first = (pieces[0] >> bit) & 1
            if all(((p >> bit) & 1) == first for p in pieces):
                # four agreeing pieces would already be a win
                line_score += self._weights.get(len(pieces), 0.0)
        return line_score
