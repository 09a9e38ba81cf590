import logging

import uvicorn

from festival.core.config import get_settings
from festival.core.logging_config import configure_logging

logger = logging.getLogger("festival")


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Server starting at http://localhost:%s", settings.port)

    uvicorn.run(
        "festival.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
