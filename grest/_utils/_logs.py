import logging
import sys
from typing import Optional

logger: logging.Logger = logging.getLogger("grest")


def setup_logging(should_debug: Optional[bool] = None) -> None:
    logger.setLevel(logging.DEBUG if should_debug else logging.INFO)

    # Several clients may live in one process
    if logger.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s - %(name)s:%(lineno)d - %(levelname)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
