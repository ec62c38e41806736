"""4x4 Quarto board holding optional piece references."""

from typing import List, Optional, Tuple

from engine.core.errors import CellOccupied, OutOfRange
from engine.core.piece import Piece
from engine.core.win_checker import BOARD_SIZE, EMPTY


def check_cell(row: int, col: int):
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise OutOfRange(f"Invalid board position: ({row}, {col})")


class QuartoBoard:
    def __init__(self):
        """Start with every cell empty."""
        self._grid: List[List[Optional[Piece]]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    def get_piece(self, row: int, col: int) -> Optional[Piece]:
        """Return the piece at (row, col) or None."""
        check_cell(row, col)
        return self._grid[row][col]

    def place_piece(self, row: int, col: int, piece: Piece):
        """Put a piece on an empty cell. Cells are never cleared."""
        check_cell(row, col)
        if self._grid[row][col] is not None:
            raise CellOccupied(f"Cell ({row}, {col}) already occupied")
        self._grid[row][col] = piece

    def copy(self) -> "QuartoBoard":
        """Independent grid; Piece values are immutable and shared."""
        board = QuartoBoard.__new__(QuartoBoard)
        board._grid = [row[:] for row in self._grid]
        return board

    def empty_cells(self) -> List[Tuple[int, int]]:
        """Free cells in row-major order."""
        return [(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE) if self._grid[r][c] is None]

    def occupied_count(self) -> int:
        return sum(1 for row in self._grid for piece in row if piece is not None)

    def is_full(self) -> bool:
        return self.occupied_count() == BOARD_SIZE * BOARD_SIZE

    def to_grid(self) -> List[List[int]]:
        """Snapshot as piece ids, EMPTY for free cells."""
        return [[EMPTY if p is None else p.id for p in row] for row in self._grid]

    def __str__(self):
        return "\n".join(" ".join("." if p is None else str(p) for p in row) for row in self._grid)

    def print_board(self):
        """Print ASCII representation."""
        print(self)
