# server/app.py

import argparse
import logging

from flask import Flask, jsonify

from engine.config import GameSettings, load_settings
from engine.game import Game
from server.api import api_blueprint

logger = logging.getLogger(__name__)


def create_app(settings: GameSettings = None, random_int=None) -> Flask:
    app = Flask(__name__)
    app.config["GAME"] = Game(settings or load_settings(), random_int=random_int)
    app.register_blueprint(api_blueprint, url_prefix="/api")

    @app.route("/")
    def index():
        game = app.config["GAME"]
        return jsonify({
            "name": "minesweeper",
            "dimensions": (game.rows, game.cols),
            "num_mines": game.settings.bomb_count,
        })

    return app


def main(argv=None):
    parser = argparse.ArgumentParser(description="Serve the Minesweeper engine over HTTP")
    parser.add_argument("--port", type=int, default=5000, help="Port to run the server on")
    parser.add_argument("--host", type=str, default="0.0.0.0", help="Host IP")
    parser.add_argument("--config", type=str, default=None, help="Path to a game config YAML file")
    parser.add_argument("--log-level", type=str, default="INFO", help="Logging level")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(load_settings(args.config))
    logger.info("Running on http://%s:%d/", args.host, args.port)
    app.run(debug=args.debug, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
