"""Logging setup for the service.

Modules log through ``logging.getLogger(__name__)``; this only decides
where those records go.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """Install a single console handler on the root logger.

    Args:
        level: Level name (e.g. "DEBUG") or numeric level.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(console)

    # httpx logs every request at INFO; the client already does that
    logging.getLogger("httpx").setLevel(logging.WARNING)
