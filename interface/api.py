"""FastAPI REST interface for the engine."""

import logging
import threading

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from typing import Optional

from engine.config import CONFIG
from engine.core.errors import QuartoError
from engine.core.search import SearchEngine
from engine.main import Engine

logging.basicConfig(level=CONFIG.log_level)

app = FastAPI(title=CONFIG.ui.engine_name, version="1.0.0")

# One shared live game; searches run on a copy outside the lock.
game = Engine(depth=CONFIG.search.depth, seed=CONFIG.search.seed)
_game_lock = threading.Lock()


class ChooseRequest(BaseModel):
    piece_id: int


class PlaceRequest(BaseModel):
    row: int
    col: int


class EventRequest(BaseModel):
    message: str  # relay form, e.g. "movePlace 1 2" or "moveChoose 7"


class SearchRequest(BaseModel):
    depth: Optional[int] = Field(default=None, ge=0)


def _bad_request(e: QuartoError) -> HTTPException:
    return HTTPException(status_code=400, detail={"error": e.kind, "message": str(e)})


def _snapshot():
    state = game.state
    return {
        "board": state.to_grid(),
        "available": state.available_piece_ids(),
        "current_piece": state.current_piece,
        "current_player": state.current_player,
        "phase": state.phase.value,
        "outcome": game.outcome.value,
        "winner": game.winner,
    }


def _searcher(req: SearchRequest) -> SearchEngine:
    if req.depth is None:
        return game.search
    return SearchEngine(game.search.evaluator, depth=req.depth, seed=CONFIG.search.seed)


@app.get("/state")
def get_state():
    with _game_lock:
        return _snapshot()


@app.post("/choose")
def choose_piece(req: ChooseRequest):
    with _game_lock:
        try:
            game.choose(req.piece_id)
        except QuartoError as e:
            raise _bad_request(e)
        return _snapshot()


@app.post("/place")
def place_piece(req: PlaceRequest):
    with _game_lock:
        try:
            win = game.place(req.row, req.col)
        except QuartoError as e:
            raise _bad_request(e)
        return {"win": win, **_snapshot()}


@app.post("/event")
def relay_event(req: EventRequest):
    with _game_lock:
        try:
            win = game.apply_remote(req.message)
        except QuartoError as e:
            raise _bad_request(e)
        return {"win": win, **_snapshot()}


@app.post("/ai/place")
def suggest_placement(req: SearchRequest = SearchRequest()):
    with _game_lock:
        if game.is_game_over():
            raise HTTPException(status_code=400, detail={"error": "GameOver", "message": "Game is already over"})
        search_state = game.state.copy()
        searcher = _searcher(req)

    try:
        row, col = searcher.find_best_placement(search_state)
    except QuartoError as e:
        raise _bad_request(e)
    return {"row": row, "col": col}


@app.post("/ai/choose")
def suggest_piece(req: SearchRequest = SearchRequest()):
    with _game_lock:
        if game.is_game_over():
            raise HTTPException(status_code=400, detail={"error": "GameOver", "message": "Game is already over"})
        search_state = game.state.copy()
        searcher = _searcher(req)

    try:
        piece_id = searcher.choose_best_piece_for_opponent(search_state)
    except QuartoError as e:
        raise _bad_request(e)
    return {"piece_id": piece_id}


@app.post("/reset")
def reset_game():
    with _game_lock:
        game.reset()
        return _snapshot()
