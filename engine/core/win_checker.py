"""Line completion checks over a raw 4x4 grid of piece ids.

The grid is a list of 4 rows of ints, ``EMPTY`` marking a free cell. Nothing
here keeps state, so the functions are safe to call from any branch of the
search.
"""

from typing import List, Sequence, Tuple

BOARD_SIZE = 4
EMPTY = -1
ATTRIBUTE_MASK = 0b1111

Cell = Tuple[int, int]

LINES: Tuple[Tuple[Cell, ...], ...] = (
    # rows
    *(tuple((r, c) for c in range(BOARD_SIZE)) for r in range(BOARD_SIZE)),
    # columns
    *(tuple((r, c) for r in range(BOARD_SIZE)) for c in range(BOARD_SIZE)),
    # diagonals
    tuple((i, i) for i in range(BOARD_SIZE)),
    tuple((i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE)),
)

CENTER_CELLS: Tuple[Cell, ...] = ((1, 1), (1, 2), (2, 1), (2, 2))


def empty_grid() -> List[List[int]]:
    return [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]


def shares_attribute(ids: Sequence[int]) -> bool:
    """True if every id agrees on at least one attribute bit.

    Bits that are 1 everywhere survive the AND of the ids, bits that are 0
    everywhere survive the AND of the complements.
    """
    ones = ATTRIBUTE_MASK
    zeros = ATTRIBUTE_MASK
    for piece_id in ids:
        ones &= piece_id
        zeros &= ~piece_id
    return bool((ones | zeros) & ATTRIBUTE_MASK)


def is_winning_line(ids: Sequence[int]) -> bool:
    if any(piece_id == EMPTY for piece_id in ids):
        return False
    return shares_attribute(ids)


def line_values(grid: Sequence[Sequence[int]], line: Sequence[Cell]) -> List[int]:
    return [grid[r][c] for r, c in line]


def check_win(grid: Sequence[Sequence[int]]) -> bool:
    for line in LINES:
        if is_winning_line(line_values(grid, line)):
            return True
    return False


def winning_lines(grid: Sequence[Sequence[int]]) -> List[Tuple[Cell, ...]]:
    """Every completed line, for collaborators that highlight the win."""
    return [line for line in LINES if is_winning_line(line_values(grid, line))]


def can_win_with(grid: Sequence[Sequence[int]], piece_id: int) -> bool:
    """One-ply lookahead: could ``piece_id`` complete a line on any empty cell?

    Only a line with exactly one free cell can be completed by one placement,
    so each line is looked at once instead of re-scanning the board per cell.
    """
    has_empty = False
    already_won = False
    for line in LINES:
        values = line_values(grid, line)
        free = values.count(EMPTY)
        if free == 0:
            already_won = already_won or shares_attribute(values)
            continue
        has_empty = True
        if free == 1:
            filled = [piece_id if v == EMPTY else v for v in values]
            if shares_attribute(filled):
                return True
    # a board that is already won stays won whatever goes on it next
    return already_won and has_empty
