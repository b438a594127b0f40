# server/api.py

import logging
import threading
from dataclasses import replace

from flask import Blueprint, current_app, jsonify, request

from engine.exceptions import EngineError
from engine.game import Game
from engine.utils import encode_board

logger = logging.getLogger(__name__)

api_blueprint = Blueprint("api", __name__)

# Actions are applied one at a time; the engine itself holds no locks.
_lock = threading.Lock()


class InvalidRequest(Exception):
    pass


def _game() -> Game:
    return current_app.config["GAME"]


def _body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidRequest("Request body must be a JSON object")
    return data


def _coordinates(data):
    row = data.get("row")
    col = data.get("col")
    if not isinstance(row, int) or not isinstance(col, int) or isinstance(row, bool) or isinstance(col, bool):
        raise InvalidRequest("'row' and 'col' must be integers")
    return row, col


def _state(game: Game, encoded: bool = False) -> dict:
    state = game.get_state()
    if encoded:
        state["encoded"] = encode_board(game.board).tolist()
    return state


@api_blueprint.errorhandler(InvalidRequest)
def handle_invalid_request(error):
    return jsonify({"error": str(error)}), 400


@api_blueprint.errorhandler(EngineError)
def handle_engine_error(error):
    logger.warning("Rejected request: %s", error)
    return jsonify({"error": str(error)}), 400


@api_blueprint.route("/new_game", methods=["POST"])
def new_game():
    data = _body()
    current = _game().settings
    settings = replace(
        current,
        rows=data.get("rows", current.rows),
        cols=data.get("cols", current.cols),
        bomb_count=data.get("bomb_count", data.get("num_mines", current.bomb_count)),
        seed=data.get("seed", current.seed),
    )
    game = Game(settings)
    with _lock:
        current_app.config["GAME"] = game
    logger.info("New %dx%d game with %d bombs", game.rows, game.cols, game.settings.bomb_count)
    return jsonify(_state(game))


@api_blueprint.route("/step", methods=["POST"])
def step():
    data = _body()
    action = data.get("action")
    if not isinstance(action, str) or action not in Game.ACTIONS:
        raise InvalidRequest(f"Unknown action {action!r}")
    row, col = _coordinates(data)

    with _lock:
        game = _game()
        game.step(action, row, col)
        return jsonify(_state(game))


@api_blueprint.route("/reveal", methods=["POST"])
def reveal():
    row, col = _coordinates(_body())
    with _lock:
        game = _game()
        game.reveal(row, col)
        return jsonify(_state(game))


@api_blueprint.route("/mark", methods=["POST"])
def mark():
    row, col = _coordinates(_body())
    with _lock:
        game = _game()
        game.toggle_mark(row, col)
        return jsonify(_state(game))


@api_blueprint.route("/reset", methods=["POST"])
def reset():
    with _lock:
        game = _game()
        game.reset()
        return jsonify(_state(game))


@api_blueprint.route("/state", methods=["GET"])
def get_state():
    encoded = request.args.get("encoded", "0").lower() in ("1", "true", "yes")
    with _lock:
        return jsonify(_state(_game(), encoded=encoded))
