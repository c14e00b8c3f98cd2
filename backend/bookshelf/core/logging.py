from __future__ import annotations

import logging

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: int | str = logging.INFO) -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(level=level, format=_FORMAT)
    logging.getLogger("bookshelf").setLevel(level)
    # boto's wire logging is noisy at DEBUG
    logging.getLogger("botocore").setLevel(max(level, logging.INFO))
