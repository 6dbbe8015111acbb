import logging
import sys
from typing import Optional

from .constants import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


def setup_logging(should_debug: Optional[bool] = None) -> None:
    """Attach a stderr handler to the package logger and set its level.

    Calling it again only updates the levels.
    """
    if not any(getattr(h, "_restkit_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        handler._restkit_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    logger.setLevel(logging.DEBUG if should_debug else logging.INFO)
    logging.getLogger("httpx").setLevel(
        logging.DEBUG if should_debug else logging.WARNING
    )
