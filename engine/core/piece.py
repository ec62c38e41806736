"""Quarto pieces: a 4-bit id where every bit is one binary attribute."""

from dataclasses import dataclass
from typing import List

from engine.core.errors import InvalidPieceId, OutOfRange

NUM_PIECES = 16
NUM_ATTRIBUTES = 4

# (value for bit == 0, value for bit == 1), indexed by bit
ATTRIBUTE_NAMES = (
    ("short", "tall"),
    ("light", "dark"),
    ("round", "square"),
    ("solid", "hollow"),
)


def validate_piece_id(piece_id: int) -> int:
    if isinstance(piece_id, bool) or not isinstance(piece_id, int):
        raise InvalidPieceId(f"Invalid piece id: {piece_id!r}")
    if not 0 <= piece_id < NUM_PIECES:
        raise InvalidPieceId(f"Invalid piece id: {piece_id}")
    return piece_id


@dataclass(frozen=True)
class Piece:
    id: int

    def __post_init__(self):
        validate_piece_id(self.id)

    def attribute(self, bit_index: int) -> int:
        """Return 0 or 1 for attribute ``bit_index``."""
        if not 0 <= bit_index < NUM_ATTRIBUTES:
            raise OutOfRange(f"Invalid attribute index: {bit_index}")
        return (self.id >> bit_index) & 1

    def describe(self) -> List[str]:
        return [ATTRIBUTE_NAMES[bit][self.attribute(bit)] for bit in range(NUM_ATTRIBUTES)]

    def __str__(self):
        return f"{self.id:X}"


# Pieces are immutable, so one shared instance per id is enough.
PIECES = tuple(Piece(i) for i in range(NUM_PIECES))
