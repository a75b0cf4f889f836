from __future__ import annotations

import asyncio
import logging
import os

from rich.logging import RichHandler

from moodbot import app

HOST = os.getenv("HOST", "0.0.0.0")  # nosec B104
PORT = int(os.getenv("PORT", 8000))
DEVELOPMENT = os.getenv("DEVELOPMENT", "True").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# uvicorn builds its own loggers from this, routed through rich
LOGGING_CONFIG: dict[str, object] = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {"rich": {"()": RichHandler, "rich_tracebacks": True}},
    "loggers": {
        "uvicorn": {"handlers": ["rich"], "level": LOG_LEVEL, "propagate": False},
        "uvicorn.error": {"level": LOG_LEVEL},
    },
}


def use_fast_event_loop() -> None:
    if os.name == "nt":
        asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())
        return

    try:
        import uvloop

        asyncio.set_event_loop_policy(uvloop.EventLoopPolicy())
    except ImportError:
        logging.getLogger("moodbot").info("uvloop not installed, using the default event loop")


def run() -> None:
    import uvicorn

    logging.basicConfig(level=LOG_LEVEL, format="%(message)s", handlers=[RichHandler(rich_tracebacks=True)])
    use_fast_event_loop()

    if DEVELOPMENT:
        uvicorn.run("moodbot:app", host=HOST, port=PORT, reload=True, log_config=LOGGING_CONFIG)
    else:
        uvicorn.run(app, host=HOST, port=PORT, log_config=LOGGING_CONFIG)


if __name__ == "__main__":
    run()
