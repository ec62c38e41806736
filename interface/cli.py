"""Play Quarto against the engine in the terminal."""

import argparse
import logging

from engine.config import CONFIG
from engine.core.errors import QuartoError
from engine.core.game_state import Phase
from engine.core.piece import PIECES
from engine.main import Engine, GameOutcome
from engine.protocol import PlaceEvent, parse_message


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Quarto against the computer")
    parser.add_argument("--depth", "-d", type=int, default=CONFIG.search.depth,
                        help=f"Search depth in full turns (default: {CONFIG.search.depth})")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the engine's random choices")
    parser.add_argument("--computer-starts", action="store_true",
                        help="Computer places first (you open by choosing its piece)")
    return parser.parse_args(argv)


def _prompt_ints(prompt: str, count: int):
    values = [int(x) for x in input(prompt).replace(",", " ").split()]
    if len(values) != count:
        raise ValueError(f"expected {count} number(s)")
    return values


def play(engine: Engine):
    while not engine.is_game_over():
        engine.print_board()
        print("----------------------------")
        state = engine.state
        try:
            if state.phase is Phase.AWAITING_PLACEMENT:
                piece = PIECES[state.current_piece]
                print(f"Your piece: {piece} ({', '.join(piece.describe())})")
                row, col = _prompt_ints("Place at (row col): ", 2)
                engine.player_place(row, col)
            else:
                print("Available: " + " ".join(str(i) for i in state.available_piece_ids()))
                (piece_id,) = _prompt_ints("Piece to give: ", 1)
                given = engine.player_choose(piece_id)
                row, col = _last_placement(engine)
                print(f"Engine placed at ({row}, {col})")
                if given is not None:
                    print(f"Engine gives you piece {given}")
        except (ValueError, QuartoError) as e:
            print(f"Illegal move: {e}")

    engine.print_board()
    print("Game Over")
    if engine.outcome is GameOutcome.DRAW:
        print("Result: draw")
    else:
        who = "You" if engine.winner == engine.human_player else "Engine"
        print(f"Result: {who} won")


def _last_placement(engine: Engine):
    for message in reversed(engine.history):
        event = parse_message(message)
        if isinstance(event, PlaceEvent):
            return event.row, event.col
    return -1, -1


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=CONFIG.log_level)
    engine = Engine(depth=args.depth, seed=args.seed)
    engine.start(human_starts=not args.computer_starts)
    play(engine)


if __name__ == "__main__":
    main()
