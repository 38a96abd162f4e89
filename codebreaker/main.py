'''
Codebreaker API

Endpoints:
GET  /config               -> board settings (pegs, colors, tries, palette)
POST /games                -> start a round
GET  /games/{id}           -> read state & history
POST /games/{id}/guess     -> submit a guess
POST /games/{id}/new       -> throw the round away and start over
GET  /games/{id}/secret    -> reveal the secret once the round is over

Extras:
GET  /stats                -> scoreboard
POST /stats/reset          -> reset scoreboard

Rounds live in memory only; the routes are a thin layer over RoundStore.
'''

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from .config import SECRET_SOURCE, configure_logging
from .errors import Rejection, ValidationError
from .random_client import fetch_code, local_code
from .round import CodeSource, describe
from .schemas import (
    ConfigOut,
    AttemptOut,
    GameState,
    GuessRequest,
    GuessResponse,
    RejectionOut,
    SecretOut,
    StatsOut,
)
from .store import RoundStore
from .types import COLORS, MAX_TRIES, PALETTE, PEGS

configure_logging()

app = FastAPI(title="Codebreaker API", version="1.0.0")
app.state.store = RoundStore()

# Allow everything in dev so the docs and front-end work easily
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

REJECTION_STATUS = {
    Rejection.INCOMPLETE_GUESS: 400,
    Rejection.INVALID_COLOR: 400,
    Rejection.ROUND_OVER: 409,
    Rejection.TRIES_EXHAUSTED: 409,
}

# --- Dependencies ---

def get_store(request: Request) -> RoundStore:
    return request.app.state.store

def get_code_source() -> CodeSource:
    return fetch_code if SECRET_SOURCE == "random_org" else local_code

def _reject(error: ValidationError) -> HTTPException:
    detail = RejectionOut(reason=error.reason.value, message=error.message)
    return HTTPException(status_code=REJECTION_STATUS[error.reason], detail=detail.model_dump())

# ---------------- Routes ----------------

@app.get("/config", response_model=ConfigOut, summary="Board settings")
def get_config() -> ConfigOut:
    return ConfigOut(pegs=PEGS, colors=COLORS, max_tries=MAX_TRIES, palette=PALETTE)

@app.post("/games", response_model=GameState, summary="Start a new round")
def start_game(
    store: RoundStore = Depends(get_store),
    code_source: CodeSource = Depends(get_code_source),
) -> GameState:
    game_id, snapshot = store.create(code_source)
    return GameState.from_snapshot(game_id, snapshot)

@app.get("/games/{game_id}", response_model=GameState, summary="Get current round state")
def get_game(game_id: str, store: RoundStore = Depends(get_store)) -> GameState:
    snapshot = store.get(game_id)
    if snapshot is None:
        raise HTTPException(status_code=404, detail="Game not found")
    return GameState.from_snapshot(game_id, snapshot)

@app.post(
    "/games/{game_id}/guess",
    response_model=GuessResponse,
    summary="Submit a guess",
    responses={400: {"model": RejectionOut}, 409: {"model": RejectionOut}},
)
def submit_guess(
    game_id: str,
    payload: GuessRequest,
    store: RoundStore = Depends(get_store),
) -> GuessResponse:
    result = store.submit(game_id, payload.guess)
    if result is None:
        raise HTTPException(status_code=404, detail="Game not found")
    if result.error is not None:
        raise _reject(result.error)

    return GuessResponse(
        attempt=AttemptOut.from_attempt(result.attempt),
        status=result.status,
        tries_remaining=result.tries_remaining,
        message=describe(result),
        # Set only on the guess that ended the round
        secret=result.secret,
        note=(f"Game {result.status}. No more guesses allowed."
              if result.status != "in_progress" else None),
    )

@app.post("/games/{game_id}/new", response_model=GameState, summary="Start over with a fresh secret")
def restart_game(game_id: str, store: RoundStore = Depends(get_store)) -> GameState:
    snapshot = store.restart(game_id)
    if snapshot is None:
        raise HTTPException(status_code=404, detail="Game not found")
    return GameState.from_snapshot(game_id, snapshot)

@app.get("/games/{game_id}/secret", response_model=SecretOut, summary="Reveal the secret of a finished round")
def reveal_secret(game_id: str, store: RoundStore = Depends(get_store)) -> SecretOut:
    try:
        secret = store.reveal(game_id)
    except RuntimeError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    if secret is None:
        raise HTTPException(status_code=404, detail="Game not found")
    return SecretOut(secret=secret)

@app.get("/stats", response_model=StatsOut, summary="Get scoreboard")
def get_stats(store: RoundStore = Depends(get_store)) -> StatsOut:
    stats = store.get_stats()
    return StatsOut(
        games_started=stats.games_started,
        games_won=stats.games_won,
        games_lost=stats.games_lost,
        current_streak=stats.current_streak,
        best_streak=stats.best_streak,
        average_guesses_to_win=stats.average_guesses_to_win,
        fastest_win_attempts=stats.fastest_win_attempts,
    )

@app.post("/stats/reset", summary="Reset the scoreboard")
def reset_stats(store: RoundStore = Depends(get_store)) -> dict:
    store.reset_stats()
    return {"message": "Stats reset."}
