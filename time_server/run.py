from __future__ import annotations

import argparse
import logging

from flask import Flask
from werkzeug.serving import make_server, prepare_socket

from time_server.app import create_app
from time_server.config import Config

LOGGER = logging.getLogger(__name__)


def _port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {raw!r}") from None
    if not 0 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range: {port}")
    return port


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the current local time as JSON.")
    parser.add_argument("port", type=_port, help="TCP port to listen on")
    return parser.parse_args(argv)


def serve(port: int, host: str | None = None, app: Flask | None = None) -> None:
    app = app or create_app()
    host = host or app.config["BIND_HOST"]
    # bind here so a busy port raises OSError instead of werkzeug's sys.exit
    sock = prepare_socket(host, port)
    try:
        server = make_server(host, port, app, threaded=True, fd=sock.fileno())
        LOGGER.info("Server running on http://localhost:%d", port)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
        finally:
            server.server_close()
    finally:
        sock.close()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

    try:
        serve(args.port)
    except OSError as exc:
        LOGGER.error("Failed to bind port %d: %s", args.port, exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
