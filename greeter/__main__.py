# greeter/__main__.py
"""
Run the server on the configured host and port:
    python -m greeter
"""

import logging

import uvicorn

from greeter.core.config import get_settings


def main():
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    logging.getLogger(__name__).info("Listening on port %s", settings.port)

    uvicorn.run(
        "greeter:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
