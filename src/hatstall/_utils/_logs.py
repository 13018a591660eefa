import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("hatstall")


def setup_logging(debug: bool = False) -> None:
    """Send hatstall logs to stderr; only DEBUG mode lowers the level."""
    if not any(getattr(h, "_hatstall", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._hatstall = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
