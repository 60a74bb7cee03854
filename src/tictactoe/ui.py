"""FastAPI driver exposing tic-tac-toe sessions as a JSON API."""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .board import Position
from .game import API, GameApi, MoveResult
from .logger import inject_logging
from .presenter import handle_user_input, render_cells, status_text

LOGGER = logging.getLogger(__name__)

MAX_LOG_LINES = 200


@dataclass
class GameSession:
    """Current snapshot of one local two-player game."""

    api: GameApi
    result: MoveResult
    snapshot: int = 0
    log: List[str] = field(default_factory=list)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


SESSIONS: Dict[str, GameSession] = {}
app = FastAPI(title="Tic-Tac-Toe", description="Two-player tic-tac-toe engine")


class MoveRequest(BaseModel):
    """Request payload for clicking a cell on an existing game."""

    model_config = ConfigDict(populate_by_name=True)

    position: str = Field(description="Cell name such as 'LeftTop'")
    snapshot: Optional[int] = Field(
        default=None,
        ge=0,
        description="Snapshot the click was made against; stale clicks are ignored",
    )

    @field_validator("position")
    @classmethod
    def ensure_known_position(cls, value: str) -> str:
        Position.parse(value)
        return value


def _session_api(log: List[str]) -> GameApi:
    def sink(message: str) -> None:
        LOGGER.info(message)
        # Newest first
        log.insert(0, message)
        del log[MAX_LOG_LINES:]

    return inject_logging(API, sink)


def _create_session() -> Tuple[str, GameSession]:
    log: List[str] = []
    api = _session_api(log)
    session = GameSession(api=api, result=api.new_game(), log=log)
    session_id = uuid.uuid4().hex
    SESSIONS[session_id] = session
    return session_id, session


def _get_session(game_id: str) -> GameSession:
    try:
        return SESSIONS[game_id]
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Game not found") from exc


def _serialize_session(game_id: str, session: GameSession) -> Dict[str, object]:
    with session.lock:
        result = session.result
        return {
            "id": game_id,
            "snapshot": session.snapshot,
            "state": result.kind.value,
            "status": status_text(result),
            "winner": result.winner.value if result.winner else None,
            "cells": render_cells(result),
            "availableMoves": [m.pos_to_play.name for m in result.moves],
            "log": list(session.log),
        }


def _restart(session: GameSession) -> None:
    with session.lock:
        session.result = session.api.new_game()
        session.snapshot += 1


def _apply_click(
    session: GameSession, position: Position, snapshot: Optional[int]
) -> None:
    with session.lock:
        if snapshot is not None and snapshot != session.snapshot:
            LOGGER.debug(
                "Ignoring click on %s from stale snapshot %d (current %d)",
                position.name,
                snapshot,
                session.snapshot,
            )
            return
        result = handle_user_input(session.result, position)
        if result is not session.result:
            session.result = result
            session.snapshot += 1


@app.post("/api/game")
def create_game() -> Dict[str, object]:
    game_id, session = _create_session()
    return _serialize_session(game_id, session)


@app.get("/api/game/{game_id}")
def get_game(game_id: str) -> Dict[str, object]:
    session = _get_session(game_id)
    return _serialize_session(game_id, session)


@app.post("/api/game/{game_id}/new")
def restart_game(game_id: str) -> Dict[str, object]:
    session = _get_session(game_id)
    _restart(session)
    return _serialize_session(game_id, session)


@app.post("/api/game/{game_id}/move")
def make_move(game_id: str, request: MoveRequest) -> Dict[str, object]:
    session = _get_session(game_id)
    _apply_click(session, Position.parse(request.position), request.snapshot)
    return _serialize_session(game_id, session)


@app.get("/api/game/{game_id}/log")
def get_log(game_id: str) -> Dict[str, object]:
    session = _get_session(game_id)
    with session.lock:
        return {"id": game_id, "log": list(session.log)}
