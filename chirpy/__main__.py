from __future__ import annotations

import argparse

import structlog
import uvicorn

from chirpy.config import get_settings
from chirpy.main import create_app
from chirpy.observability.logging import configure_logging


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Chirpy HTTP server")
    parser.add_argument("--host", default=settings.host, help="Address to bind")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on")
    parser.add_argument("--static-dir", default=settings.static_dir, help="Directory served under /app/")
    args = parser.parse_args(argv)

    settings = settings.model_copy(update={"host": args.host, "port": args.port, "static_dir": args.static_dir})
    configure_logging(level=settings.log_level, json_output=settings.log_json)
    logger = structlog.get_logger("chirpy")

    app = create_app(settings)
    server = uvicorn.Server(uvicorn.Config(app, host=settings.host, port=settings.port, log_config=None))

    logger.info("serving", static_dir=settings.static_dir, host=settings.host, port=settings.port)
    server.run()
    if not server.started:
        logger.error("server_start_failed", host=settings.host, port=settings.port)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
