from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request

from game import (
    Board,
    Button,
    GobanError,
    InvalidTokenError,
    Outcome,
    Phase,
    TextRenderer,
    default_legality,
    deserialize,
    handle,
    new_game,
    token_from_artifact,
)

MIN_SIZE = int(os.getenv("GOBAN_MIN_SIZE", "9"))
MAX_SIZE = int(os.getenv("GOBAN_MAX_SIZE", "19"))
ARTIFACT_SUFFIX = os.getenv("GOBAN_ARTIFACT_SUFFIX", ".png")

app = Flask(__name__)
app.logger.setLevel(os.getenv("GOBAN_LOG_LEVEL", "INFO").upper())

renderer = TextRenderer()
# Swap for a real rules engine (ko, suicide) without touching the endpoints.
legality = default_legality


def button_to_json(b: Button) -> Dict[str, Any]:
    return {"customId": b.custom_id, "label": b.label, "style": b.style, "disabled": bool(b.disabled)}


def board_to_json(b: Board) -> Dict[str, Any]:
    return {"width": int(b.width), "height": int(b.height), "cells": list(b.cells), "turn": b.turn}


def outcome_to_json(o: Outcome) -> Dict[str, Any]:
    return {
        "ok": True,
        "phase": o.phase,
        "token": o.token,
        "artifact": o.artifact_name(ARTIFACT_SUFFIX),
        "turn": o.board.turn,
        "color": o.color,
        "column": o.column,
        "winner": o.winner,
        "content": o.message,
        "board": renderer.render(o.board),
        "components": [[button_to_json(b) for b in row] for row in o.components],
    }


def _error(message: str, status: int, **extra: Any) -> Any:
    body: Dict[str, Any] = {"ok": False, "error": message}
    body.update(extra)
    return jsonify(body), status


def _json_body() -> Optional[Dict[str, Any]]:
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    return body if isinstance(body, dict) else None


def _token_from_body(body: Dict[str, Any]) -> Optional[str]:
    token = body.get("token")
    if isinstance(token, str) and token.strip():
        return token.strip()
    artifact = body.get("artifact")
    if isinstance(artifact, str) and artifact.strip():
        return token_from_artifact(artifact)
    return None


@app.get("/healthz")
def healthz() -> Any:
    return jsonify({"ok": True})


@app.post("/api/new")
def api_new() -> Any:
    body = _json_body()
    if body is None:
        return _error("request body must be a JSON object", 400)
    try:
        size = int(body.get("size", MAX_SIZE))
    except (TypeError, ValueError):
        return _error("size must be an integer", 400)
    if not MIN_SIZE <= size <= MAX_SIZE:
        return _error(f"size must be between {MIN_SIZE} and {MAX_SIZE}", 400)
    data = body.get("data")
    try:
        outcome = new_game(size, data=data if isinstance(data, str) else None)
    except GobanError as e:
        return _error(str(e), 400)
    app.logger.info("new %dx%d game", size, size)
    return jsonify(outcome_to_json(outcome))


@app.post("/api/interact")
def api_interact() -> Any:
    body = _json_body()
    if body is None:
        return _error("request body must be a JSON object", 400)
    token = _token_from_body(body)
    custom_id = body.get("customId")
    if token is None:
        return _error("token or artifact required", 400)
    if not isinstance(custom_id, str) or not custom_id:
        return _error("customId required", 400)
    try:
        outcome = handle(token, custom_id, legality)
    except GobanError as e:
        return _error(str(e), 400)
    if outcome.phase == Phase.REJECTED:
        # Leave the previous message alone; the client only shows the error.
        return _error("Illegal move", 409, content=outcome.message, token=outcome.token)
    return jsonify(outcome_to_json(outcome))


@app.post("/api/render")
def api_render() -> Any:
    body = _json_body()
    if body is None:
        return _error("request body must be a JSON object", 400)
    token = _token_from_body(body)
    if token is None:
        return _error("token or artifact required", 400)
    try:
        board = deserialize(token)
    except InvalidTokenError as e:
        return _error(f"bad token: {e}", 400)
    return jsonify({
        "ok": True,
        "board": renderer.render(board),
        "width": board.width,
        "height": board.height,
        "turn": board.turn,
        "stones": board.stones(),
        "state": board_to_json(board),
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    logging.basicConfig(level=os.getenv("GOBAN_LOG_LEVEL", "INFO").upper())
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "5000")), debug=debug)
