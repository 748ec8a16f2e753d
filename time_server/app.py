from __future__ import annotations

from typing import Any, Mapping

from flask import Flask, current_app, request

from time_server.clock import Clock, current_snapshot
from time_server.config import Config

CURRENT_TIME_PATH = "/api/currenttime"
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _raw_target() -> str:
    environ = request.environ
    return environ.get("RAW_URI") or environ.get("REQUEST_URI") or request.full_path.rstrip("?")


def create_app(clock: Clock | None = None, config: Mapping[str, Any] | None = None) -> Flask:
    app = Flask(__name__, static_folder=None)
    app.config.from_object(Config)
    if config:
        app.config.update(config)
    app.config["CLOCK"] = clock

    app.json.sort_keys = False
    app.json.compact = app.config["JSON_COMPACT"]

    @app.route(CURRENT_TIME_PATH, methods=ALL_METHODS)
    def current_time():
        # routing sees the decoded path; the raw target must match verbatim
        if _raw_target() != CURRENT_TIME_PATH:
            return "", 404
        snapshot = current_snapshot(current_app.config["CLOCK"])
        return snapshot.to_dict(), 200

    @app.errorhandler(404)
    def not_found(error):
        return "", 404

    # Only one route exists, so a 405 means the path matched with a method
    # outside ALL_METHODS. Method is not distinguished: answer with the time.
    @app.errorhandler(405)
    def any_method(error):
        return current_time()

    return app
