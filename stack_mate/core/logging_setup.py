"""Console logging for the application. Modules just call `logging.getLogger(__name__)`."""

import logging
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: int | str = logging.INFO, format_string: Optional[str] = None
) -> None:
    """
    Configure the root logger with a single console handler.

    Existing handlers are removed first, so calling this more than once (app factory + tests) does not duplicate output.
    """
    if isinstance(level, str):
        level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

    formatter = logging.Formatter(
        format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
