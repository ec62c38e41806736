"""Depth-limited minimax with alpha-beta pruning for Quarto.

One Quarto turn is two sub-moves: place the piece you were handed, then pick
the piece the opponent must place. Both sub-moves are searched at the same
depth; the depth only drops when the turn passes to the other player.
Every branch works on its own GameState copy, so nothing is undone.
"""

import logging
import random
import time
from dataclasses import dataclass
from typing import Optional, Tuple

from engine.config import EvalConfig
from engine.core.errors import NoPendingPiece, PieceUnavailable
from engine.core.evaluator import Evaluator
from engine.core.game_state import GameState
from engine.core.utils import format_info
from engine.core.win_checker import can_win_with

logger = logging.getLogger(__name__)

INF = float("inf")


@dataclass
class SearchResult:
    score: float
    row: int = -1
    col: int = -1
    piece: int = -1
    nodes: int = 0

    @property
    def cell(self) -> Optional[Tuple[int, int]]:
        if self.row == -1:
            return None
        return self.row, self.col


@dataclass
class _SearchStats:
    nodes: int = 0


class SearchEngine:
    def __init__(self, evaluator: Optional[Evaluator] = None, depth: int = 3,
                 seed: Optional[int] = None, cfg: Optional[EvalConfig] = None):
        if depth < 0:
            raise ValueError(f"Search depth must be >= 0, got {depth}")
        self.evaluator = evaluator or Evaluator(cfg)
        self.cfg = self.evaluator.cfg
        self.max_depth = depth
        self.rng = random.Random(seed)

    @property
    def win_score(self) -> float:
        return self.cfg.win_score

    # --- Public API ---

    def find_best_placement(self, state: GameState) -> Tuple[int, int]:
        """Best cell for the pending piece. ``state`` is left untouched."""
        if state.current_piece is None:
            raise NoPendingPiece("No piece to place")
        cells = state.get_board().empty_cells()

        start = time.time()
        result = self._run(state, placement=True)
        if result.cell not in cells:
            logger.warning("No valid placement found, choosing random.")
            return self.rng.choice(cells)

        logger.debug(format_info("place", result.cell, result.score, result.nodes,
                                 time.time() - start, self.win_score))
        return result.cell

    def choose_best_piece_for_opponent(self, state: GameState) -> int:
        """Best piece to hand over, called once our own placement is done."""
        available = state.available_piece_ids()
        if not available:
            raise PieceUnavailable("No pieces left to give")

        start = time.time()
        result = self._run(state, placement=False)
        if result.piece not in available:
            logger.warning("No valid piece found to give, choosing random.")
            return self.rng.choice(available)

        logger.debug(format_info("choose", result.piece, result.score, result.nodes,
                                 time.time() - start, self.win_score))
        return result.piece

    def search(self, state: GameState) -> SearchResult:
        """Raw root result for whichever sub-move ``state`` is waiting on."""
        return self._run(state, placement=state.current_piece is not None)

    def _run(self, state: GameState, placement: bool) -> SearchResult:
        stats = _SearchStats()
        result = self._minimax(state, self.max_depth, -INF, INF, True, placement, stats)
        result.nodes = stats.nodes
        return result

    # --- Core search ---

    def _minimax(self, state: GameState, depth: int, alpha: float, beta: float,
                 is_max: bool, placement: bool, stats: _SearchStats) -> SearchResult:
        stats.nodes += 1

        # the previous placement ended the game; the side not to move won it
        if state.last_placement_won:
            return SearchResult(-self.win_score if is_max else self.win_score)

        no_pieces_left = not state.available_piece_ids()
        if no_pieces_left and (not placement or state.current_piece is None):
            return SearchResult(0.0)

        if depth <= 0:
            return SearchResult(self.evaluator.evaluate(state.to_grid()))

        if placement:
            return self._placement_node(state, depth, alpha, beta, is_max, stats)
        return self._choice_node(state, depth, alpha, beta, is_max, stats)

    def _placement_node(self, state: GameState, depth: int, alpha: float, beta: float,
                        is_max: bool, stats: _SearchStats) -> SearchResult:
        if state.current_piece is None:
            return SearchResult(self.evaluator.evaluate(state.to_grid()))

        cells = state.get_board().empty_cells()
        if not cells:
            return SearchResult(0.0)

        # any winning cell is as good as any other: take the first one
        children = []
        for r, c in cells:
            sim = state.copy()
            if sim.place_current_piece(r, c):
                return SearchResult(self.win_score if is_max else -self.win_score, r, c)
            children.append((r, c, sim))

        best_score = -INF if is_max else INF
        best: Optional[SearchResult] = None
        last_cell = cells[0]

        for r, c, sim in children:
            last_cell = (r, c)
            # same player still has to pick a piece, same depth
            reply = self._minimax(sim, depth, alpha, beta, is_max, False, stats)
            score = reply.score

            if is_max:
                if score > best_score:
                    best_score = score
                    best = SearchResult(score, r, c, reply.piece)
                alpha = max(alpha, best_score)
            else:
                if score < best_score:
                    best_score = score
                    best = SearchResult(score, r, c, reply.piece)
                beta = min(beta, best_score)

            if beta <= alpha:
                break

        if best is None:
            return SearchResult(alpha if is_max else beta, last_cell[0], last_cell[1])
        return best

    def _choice_node(self, state: GameState, depth: int, alpha: float, beta: float,
                     is_max: bool, stats: _SearchStats) -> SearchResult:
        available = state.available_piece_ids()
        if not available:
            return SearchResult(0.0)

        grid = state.to_grid()
        safe, losing = [], []
        for piece_id in available:
            (losing if can_win_with(grid, piece_id) else safe).append(piece_id)

        best_score = -INF if is_max else INF
        best_piece = -1

        if safe:
            candidates = [(piece_id, False) for piece_id in safe]
        else:
            candidates = [(piece_id, True) for piece_id in losing]

        for piece_id, hands_over_win in candidates:
            if hands_over_win:
                penalty = self.cfg.giving_winning_piece_penalty
                score = penalty if is_max else -penalty
            else:
                sim = state.copy()
                sim.set_current_piece(piece_id)
                # opponent's turn: depth drops, roles swap
                score = self._minimax(sim, depth - 1, alpha, beta, not is_max, True, stats).score

            if is_max:
                if score > best_score:
                    best_score = score
                    best_piece = piece_id
                alpha = max(alpha, best_score)
            else:
                if score < best_score:
                    best_score = score
                    best_piece = piece_id
                beta = min(beta, best_score)

            if beta <= alpha:
                break

        if best_piece == -1:
            best_piece = (safe or losing)[0]
            best_score = alpha if is_max else beta
        return SearchResult(best_score, piece=best_piece)
