"""Error kinds raised by the rule engine.

Every precondition violation has its own class so callers (the relay layer,
the HTTP interface) can tell a stale remote peer from a local bug.
"""


class QuartoError(Exception):
    """Base class for rejected game actions."""

    kind = "QuartoError"

    def __init__(self, message: str = ""):
        super().__init__(message or self.kind)


class InvalidPieceId(QuartoError):
    kind = "InvalidPieceId"


class PieceUnavailable(QuartoError):
    kind = "PieceUnavailable"


class PiecePending(QuartoError):
    kind = "PiecePending"


class OutOfRange(QuartoError):
    kind = "OutOfRange"


class CellOccupied(QuartoError):
    kind = "CellOccupied"


class NoPendingPiece(QuartoError):
    kind = "NoPendingPiece"


class GameOver(QuartoError):
    kind = "GameOver"


class ProtocolError(QuartoError):
    kind = "ProtocolError"
