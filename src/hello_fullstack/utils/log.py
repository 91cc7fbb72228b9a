"""Root logging setup shared by the CLI and the Responder."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Attach a stderr handler to the root logger at *level*."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def ensure_logging(level: str | int = logging.INFO) -> None:
    """Configure the root logger only when nothing else has.

    Under a bare ``uvicorn module:app`` run only uvicorn's own loggers
    carry handlers, so package records would otherwise be dropped.
    """
    if not logging.getLogger().handlers:
        configure_logging(level)
