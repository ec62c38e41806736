"""Core engine components: pieces, board, game state, win checks, evaluator and search."""

from .board import QuartoBoard
from .errors import (
    CellOccupied,
    GameOver,
    InvalidPieceId,
    NoPendingPiece,
    OutOfRange,
    PiecePending,
    PieceUnavailable,
    ProtocolError,
    QuartoError,
)
from .evaluator import Evaluator
from .game_state import GameState, Phase
from .piece import Piece
from .search import SearchEngine, SearchResult
from .win_checker import check_win
