from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_HANDLER_NAME = "dashboard_client"


def configure_logging(level: str | None = None) -> None:
    resolved = (level or os.getenv("DASHBOARD_LOG_LEVEL", "INFO")).strip().upper()
    numeric_level = logging.getLevelName(resolved)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root = logging.getLogger()
    root.setLevel(numeric_level)

    if any(handler.get_name() == _HANDLER_NAME for handler in root.handlers):
        return

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # requests' connection pool is chatty at DEBUG.
    logging.getLogger("urllib3").setLevel(max(numeric_level, logging.INFO))
