"""Structured logging helpers shared by the window iterators."""

from __future__ import annotations

import json
import logging
import os
from typing import Any

JSON_LOGS_ENV = "EACH_CONS_JSON_LOGS"


def json_logs_enabled() -> bool:
    return os.getenv(JSON_LOGS_ENV, "false").lower() == "true"


def configure_logging(level: str = "INFO", json_logs: bool | None = None) -> None:
    """Set up the root logger, plain or one JSON object per line."""

    if json_logs is None:
        json_logs = json_logs_enabled()

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s" if json_logs else "%(levelname)s:%(name)s:%(message)s",
    )


def log_event(
    logger: logging.Logger,
    event: str,
    *,
    level: int = logging.INFO,
    json_logs: bool | None = None,
    **fields: Any,
) -> None:
    """Emit ``event`` with ``fields`` as a single record.

    Nothing is formatted when ``level`` is disabled for ``logger``, so the
    iterators can report lifecycle events at DEBUG on every call site.
    """

    if not logger.isEnabledFor(level):
        return
    if json_logs is None:
        json_logs = json_logs_enabled()

    payload = {"event": event, **fields}
    logger.log(level, json.dumps(payload, default=str) if json_logs else payload)
