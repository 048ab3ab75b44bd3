'''
Codebreaker HTTP API (single player, in-memory)

Endpoints:
POST   /games               -> start a game with {code_length, max_digit}
GET    /games/{id}          -> read state & latest history
POST   /games/{id}/guess    -> submit a guess
POST   /games/{id}/replay   -> play again with the same settings
DELETE /games/{id}          -> forget the game

Run locally: uvicorn codebreaker.main:app --reload
'''

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Depends, Request
from fastapi.middleware.cors import CORSMiddleware

from .config import GameConfig, load_settings, setup_logging
from .exceptions import GameOverError, InvalidGuessError
from .random_client import get_generator
from .store import GameStore
from .schemas import (
    NewGameRequest,
    NewGameResponse,
    GuessRequest,
    GuessResponse,
    GameState,
    game_state,
    history_out,
)

APP_ENV = os.getenv("APP_ENV", "local")

logger = logging.getLogger(__name__)


# Settings (.env, log level, secret source) are read at startup
@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = load_settings()
    setup_logging(settings.log_level)
    app.state.settings = settings
    logger.info("Codebreaker API starting (env=%s, secret source=%s)", settings.app_env, settings.secret_source)
    yield


app = FastAPI(title="Codebreaker API", version="1.0.0", lifespan=lifespan)

# Allow everything in dev so the docs and a local front-end work easily
if APP_ENV == "local":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"]
    )

_store = GameStore()

def get_store() -> GameStore:
    return _store

def get_secret_generator(request: Request):
    settings = request.app.state.settings
    return get_generator(settings.secret_source, settings.random_timeout)

# ---------------- Routes ----------------

@app.post("/games", response_model=NewGameResponse, summary="Start a new game")
def start_game(
    payload: NewGameRequest,
    store: GameStore = Depends(get_store),
    generator=Depends(get_secret_generator),
) -> NewGameResponse:
    config = GameConfig(code_length=payload.code_length, max_digit=payload.max_digit)
    game_id, _ = store.create(config, generator)

    return NewGameResponse(
        game_id=game_id,
        code_length=config.code_length,
        max_digit=config.max_digit,
        max_attempts=config.max_attempts,
        attempts_left=config.max_attempts,
        status="in_progress",
    )

@app.get("/games/{game_id}", response_model=GameState, summary="Get current game state")
def get_game(
    game_id: str,
    store: GameStore = Depends(get_store),
) -> GameState:
    snapshot = store.snapshot(game_id)
    if snapshot is None:
        raise HTTPException(status_code=404, detail="Game not found")
    return game_state(snapshot)

@app.post("/games/{game_id}/guess", response_model=GuessResponse, summary="Submit a guess")
def submit_guess(
    game_id: str,
    payload: GuessRequest,
    store: GameStore = Depends(get_store),
) -> GuessResponse:
    # score and snapshot come from the same locked step in the store
    try:
        result = store.guess(game_id, payload.guess)
    except InvalidGuessError as exc:
        logger.debug("Rejected guess for game %s: %s", game_id, exc)
        raise HTTPException(status_code=400, detail=str(exc))
    except GameOverError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    if result is None:
        raise HTTPException(status_code=404, detail="Game not found")

    score, snapshot = result
    return GuessResponse(
        black=score.black,
        white=score.white,
        attempts_left=snapshot.attempts_left,
        status=snapshot.status,
        history=history_out(snapshot),
        secret=snapshot.secret,
        note=f"Game {snapshot.status}. No more guesses allowed." if snapshot.is_over else None,
    )

@app.post("/games/{game_id}/replay", response_model=GameState, summary="Play again with the same settings")
def replay_game(
    game_id: str,
    store: GameStore = Depends(get_store),
) -> GameState:
    snapshot = store.replay(game_id)
    if snapshot is None:
        raise HTTPException(status_code=404, detail="Game not found")
    return game_state(snapshot)

@app.delete("/games/{game_id}", summary="Forget a game")
def delete_game(
    game_id: str,
    store: GameStore = Depends(get_store),
) -> dict:
    if not store.discard(game_id):
        raise HTTPException(status_code=404, detail="Game not found")
    return {"message": "Game discarded."}
