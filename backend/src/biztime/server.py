"""Console entry point: serve the API with uvicorn.

    biztime-server            # binds HOST:PORT from settings
    BIZTIME_ENV=test biztime-server
"""

import uvicorn

from biztime.config import settings


def main() -> None:
    # log_config=None keeps the structlog handlers installed by biztime.logging.
    uvicorn.run(
        "biztime.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
