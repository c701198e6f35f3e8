"""
Logging setup for the catalog service.

The service writes nothing to disk, so logs only go to the console,
where uvicorn's own access log ends up as well. Account and review
events are logged by ``storage`` through ``logging.getLogger(__name__)``.
"""

import logging


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Attach a console handler to the root logger unless one exists.

    ``create_app`` calls this every time it builds an app, and tests
    build one app per test, so repeat calls must leave the existing
    handlers alone. An unknown ``level`` name means ``INFO``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(handler)
