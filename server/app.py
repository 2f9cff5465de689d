from __future__ import annotations

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from engine.position import Position

from .schemas import MoveRequest, TapRequest
from .session import GameSession


def create_app() -> FastAPI:
    app = FastAPI(title="Checkers Backend", version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
    )

    session = GameSession()

    def get_session() -> GameSession:
        return session

    @app.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/board")
    def read_board(session: GameSession = Depends(get_session)):
        return session.serialize()

    @app.get("/valid-move")
    def read_valid_move(
        fromX: int = Query(...),
        fromY: int = Query(...),
        toX: int = Query(...),
        toY: int = Query(...),
        session: GameSession = Depends(get_session),
    ):
        return session.check_move(Position(fromX, fromY), Position(toX, toY))

    @app.post("/move")
    def play_move(payload: MoveRequest, session: GameSession = Depends(get_session)):
        try:
            return session.make_move(payload)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.post("/tap")
    def tap_square(payload: TapRequest, session: GameSession = Depends(get_session)):
        return session.tap(payload)

    @app.post("/reset")
    def reset_game(session: GameSession = Depends(get_session)):
        return session.reset()

    return app


app = create_app()
