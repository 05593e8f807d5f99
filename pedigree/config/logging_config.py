from __future__ import annotations

import logging

from pedigree.config.settings import Settings

HANDLER_NAME = "pedigree"
LOG_FORMAT = "%(asctime)s | %(levelname)s | {environment} | %(name)s | %(message)s"

# Libraries that are chatty at INFO and only useful when debugging them
NOISY_LOGGERS = ("passlib", "httpx", "aiosqlite", "asyncio")


def configure_logging(settings: Settings) -> None:
    """Install one stream handler on the root logger, tagged with the environment.

    Safe to call more than once; uvicorn reloads call ``create_app`` again.
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    root = logging.getLogger()
    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(fmt=LOG_FORMAT.format(environment=settings.environment))
        )
        handler.set_name(HANDLER_NAME)
        root.addHandler(handler)
    root.setLevel(level)

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "pedigree"):
        logging.getLogger(name).setLevel(level)
    # SQL statements are logged only when explicitly requested
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.sql_echo else logging.WARNING
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
