"""Run the catalog service with uvicorn on the fixed host and port.

Usage::

    python -m catalog_service
"""

import logging

import uvicorn

from .config import settings
from .main import app


logger = logging.getLogger(__name__)


def main() -> None:
    logger.info("Server running on http://localhost:%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
