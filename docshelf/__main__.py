"""Run the documentation server with uvicorn.

    python -m docshelf

Bind address and log level come from settings (``HOST``, ``PORT``,
``LOG_LEVEL``).
"""

import uvicorn

from docshelf.core.config import settings


def main() -> None:
    uvicorn.run(
        "docshelf.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=settings.is_development and settings.debug,
    )


if __name__ == "__main__":
    main()
