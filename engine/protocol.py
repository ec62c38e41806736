"""Text form of the moves two remote players exchange through a relay.

    movePlace <row> <col>   opponent placed the pending piece
    moveChoose <id>         opponent chose the piece I have to place

Piece ids travel as plain integers 0-15; their bits are the attributes, so
they are passed through unchanged.
"""

from dataclasses import dataclass
from typing import Union

from engine.core.errors import ProtocolError
from engine.core.game_state import GameState

PLACE_COMMAND = "movePlace"
CHOOSE_COMMAND = "moveChoose"


@dataclass(frozen=True)
class PlaceEvent:
    row: int
    col: int


@dataclass(frozen=True)
class ChooseEvent:
    piece_id: int


Event = Union[PlaceEvent, ChooseEvent]


def _parse_ints(args, count, message):
    if len(args) != count:
        raise ProtocolError(f"Expected {count} argument(s): {message!r}")
    try:
        return [int(a) for a in args]
    except ValueError:
        raise ProtocolError(f"Non-integer argument: {message!r}") from None


def parse_message(message: str) -> Event:
    parts = message.split()
    if not parts:
        raise ProtocolError("Empty message")
    command, args = parts[0], parts[1:]

    if command == PLACE_COMMAND:
        row, col = _parse_ints(args, 2, message)
        return PlaceEvent(row, col)
    if command == CHOOSE_COMMAND:
        (piece_id,) = _parse_ints(args, 1, message)
        return ChooseEvent(piece_id)
    raise ProtocolError(f"Unknown command: {command!r}")


def format_event(event: Event) -> str:
    if isinstance(event, PlaceEvent):
        return f"{PLACE_COMMAND} {event.row} {event.col}"
    if isinstance(event, ChooseEvent):
        return f"{CHOOSE_COMMAND} {event.piece_id}"
    raise ProtocolError(f"Unknown event: {event!r}")


def apply_event(state: GameState, event: Event) -> bool:
    """Apply a relayed move to the live state. Returns True on a winning placement."""
    if isinstance(event, PlaceEvent):
        return state.place_current_piece(event.row, event.col)
    if isinstance(event, ChooseEvent):
        state.set_current_piece(event.piece_id)
        return False
    raise ProtocolError(f"Unknown event: {event!r}")
