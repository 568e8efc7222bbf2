"""Run the API server: `python -m students_api`.

Settings come from the environment (see `config.Settings`). uvicorn
handles SIGINT/SIGTERM: it stops accepting connections, gives in-flight
requests `SHUTDOWN_GRACE_SECONDS` to finish and then cancels the rest.
"""

import logging

import uvicorn

from .config import Settings
from .main import create_app

logger = logging.getLogger("students_api")


def main():
    settings = Settings.from_env()
    logging.basicConfig(level=settings.LOG_LEVEL)
    app = create_app(settings)
    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.LOG_LEVEL.lower(),
        timeout_graceful_shutdown=settings.SHUTDOWN_GRACE_SECONDS,
    )
    server = uvicorn.Server(config)
    logger.info("server started address=%s env=%s", settings.HTTP_ADDRESS, settings.ENV)
    server.run()
    logger.info("server shut down")


if __name__ == "__main__":
    main()
