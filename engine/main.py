import logging
import random
from enum import Enum
from typing import List, Optional, Tuple

from engine.config import CONFIG
from engine.core.errors import GameOver, NoPendingPiece
from engine.core.evaluator import Evaluator
from engine.core.game_state import PLAYER_ONE, PLAYER_TWO, GameState, Phase, other_player
from engine.core.search import SearchEngine
from engine.protocol import ChooseEvent, Event, PlaceEvent, apply_event, format_event, parse_message

logger = logging.getLogger(__name__)


class GameOutcome(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


class Engine:
    """Live game against the computer (or a relayed remote opponent)."""

    def __init__(self, depth: Optional[int] = None, seed: Optional[int] = None,
                 computer_player: int = PLAYER_TWO):
        depth = CONFIG.search.depth if depth is None else depth
        seed = CONFIG.search.seed if seed is None else seed
        self.rng = random.Random(seed)
        self.search = SearchEngine(Evaluator(CONFIG.eval), depth=depth, seed=seed)
        self.computer_player = computer_player
        self.human_player = other_player(computer_player)
        self.state = GameState()
        self.history: List[str] = []

    def reset(self, first_player: int = PLAYER_ONE) -> GameState:
        self.state = GameState(first_player=first_player)
        self.history.clear()
        return self.state

    def start(self, human_starts: Optional[bool] = None) -> GameState:
        """Reset the game. The first placement goes to the human if ``human_starts``."""
        if human_starts is None:
            human_starts = self.rng.random() < 0.5
        first = self.human_player if human_starts else self.computer_player
        self.reset(first)

        if human_starts:
            # computer hands the human a random opening piece
            self._apply(ChooseEvent(self.rng.choice(self.state.available_piece_ids())))
        logger.info("New game, player %d places first", first)
        return self.state

    # --- Outcome ---

    @property
    def outcome(self) -> GameOutcome:
        if self.state.last_placement_won:
            return GameOutcome.WIN
        if self.state.is_board_full():
            return GameOutcome.DRAW
        return GameOutcome.IN_PROGRESS

    @property
    def winner(self) -> Optional[int]:
        return self.state.winner

    def is_game_over(self) -> bool:
        return self.outcome is not GameOutcome.IN_PROGRESS

    # --- Confirmed moves on the live state ---

    def place(self, row: int, col: int) -> bool:
        return self._apply(PlaceEvent(row, col))

    def choose(self, piece_id: int):
        self._apply(ChooseEvent(piece_id))

    # --- Human actions ---

    def player_place(self, row: int, col: int) -> bool:
        return self.place(row, col)

    def player_choose(self, piece_id: int) -> Optional[int]:
        """Hand the computer a piece; it replies at once. Returns the piece it gives back."""
        self.choose(piece_id)
        return self.computer_move()

    # --- Computer ---

    def computer_move(self) -> Optional[int]:
        """Place the pending piece, then choose one for the human unless the game ended."""
        self._check_not_over()
        if self.state.phase is not Phase.AWAITING_PLACEMENT:
            raise NoPendingPiece("Computer has no piece to place")

        row, col = self.search.find_best_placement(self.state)
        if self._apply(PlaceEvent(row, col)):
            logger.info("Computer wins at (%d, %d)", row, col)
            return None
        if self.is_game_over():
            logger.info("Draw")
            return None

        piece_id = self.search.choose_best_piece_for_opponent(self.state)
        self._apply(ChooseEvent(piece_id))
        return piece_id

    def suggest_placement(self) -> Tuple[int, int]:
        return self.search.find_best_placement(self.state)

    def suggest_piece(self) -> int:
        return self.search.choose_best_piece_for_opponent(self.state)

    # --- Remote opponent ---

    def apply_remote(self, message: str) -> bool:
        """Apply a relayed ``movePlace``/``moveChoose`` message verbatim."""
        return self._apply(parse_message(message))

    def _apply(self, event: Event) -> bool:
        self._check_not_over()
        win = apply_event(self.state, event)
        self.history.append(format_event(event))
        return win

    def _check_not_over(self):
        if self.is_game_over():
            raise GameOver(f"Game is over ({self.outcome.value})")

    def print_board(self):
        self.state.get_board().print_board()
