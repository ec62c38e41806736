"""Quarto turn state machine.

GameState owns the board, the pool of unused pieces, the pending piece and
the turn owner. It is the only thing that writes to the board.
"""

from enum import Enum
from typing import List, Optional

from engine.core.board import QuartoBoard
from engine.core.errors import NoPendingPiece, PiecePending, PieceUnavailable
from engine.core.piece import NUM_PIECES, PIECES, validate_piece_id
from engine.core.win_checker import check_win

PLAYER_ONE = 1
PLAYER_TWO = 2


class Phase(Enum):
    AWAITING_PIECE_ASSIGNMENT = "awaiting_piece_assignment"
    AWAITING_PLACEMENT = "awaiting_placement"


def other_player(player: int) -> int:
    return PLAYER_TWO if player == PLAYER_ONE else PLAYER_ONE


class GameState:
    __slots__ = ("_board", "_available", "_current_piece", "_current_player", "_last_placement_won")

    def __init__(self, first_player: int = PLAYER_ONE):
        """Empty board, all 16 pieces available, nothing pending.

        ``first_player`` is the player who makes the first placement.
        """
        if first_player not in (PLAYER_ONE, PLAYER_TWO):
            raise ValueError(f"Invalid player: {first_player}")
        self._board = QuartoBoard()
        self._available = [True] * NUM_PIECES
        self._current_piece: Optional[int] = None
        self._current_player = first_player
        self._last_placement_won = False

    # --- mutators ---

    def set_current_piece(self, piece_id: int):
        """Hand ``piece_id`` to the player about to place."""
        validate_piece_id(piece_id)
        if self._current_piece is not None:
            if self._current_piece == piece_id:
                raise PieceUnavailable(f"Piece {piece_id} is already pending")
            raise PiecePending(f"Piece {self._current_piece} must be placed first")
        if not self._available[piece_id]:
            raise PieceUnavailable(f"Piece {piece_id} already used")
        self._available[piece_id] = False
        self._current_piece = piece_id

    def place_current_piece(self, row: int, col: int) -> bool:
        """Place the pending piece and return True if it completed a line."""
        if self._current_piece is None:
            raise NoPendingPiece("No piece selected to place")
        self._board.place_piece(row, col, PIECES[self._current_piece])

        win = check_win(self._board.to_grid())
        self._last_placement_won = win

        self._current_piece = None
        self._current_player = other_player(self._current_player)
        return win

    # --- accessors ---

    def get_board(self) -> QuartoBoard:
        return self._board

    def to_grid(self) -> List[List[int]]:
        return self._board.to_grid()

    def get_available_pieces(self) -> List[bool]:
        return list(self._available)

    def available_piece_ids(self) -> List[int]:
        return [i for i, free in enumerate(self._available) if free]

    def is_available(self, piece_id: int) -> bool:
        return self._available[validate_piece_id(piece_id)]

    @property
    def current_piece(self) -> Optional[int]:
        return self._current_piece

    @property
    def current_player(self) -> int:
        return self._current_player

    @property
    def phase(self) -> Phase:
        if self._current_piece is None:
            return Phase.AWAITING_PIECE_ASSIGNMENT
        return Phase.AWAITING_PLACEMENT

    @property
    def last_placement_won(self) -> bool:
        return self._last_placement_won

    @property
    def winner(self) -> Optional[int]:
        # the turn already flipped, so the winner is the other side
        if not self._last_placement_won:
            return None
        return other_player(self._current_player)

    def is_board_full(self) -> bool:
        """True once all 16 pieces have been placed."""
        return self._current_piece is None and not any(self._available)

    def copy(self) -> "GameState":
        """Deep clone: nothing mutable is shared with the original."""
        state = GameState.__new__(GameState)
        state._board = self._board.copy()
        state._available = list(self._available)
        state._current_piece = self._current_piece
        state._current_player = self._current_player
        state._last_placement_won = self._last_placement_won
        return state

    def __repr__(self):
        return (
            f"GameState(player={self._current_player}, pending={self._current_piece}, "
            f"available={self.available_piece_ids()})"
        )
