"""Structured logging for ledgerkeys components. Key material is never logged."""

from __future__ import annotations

import json
import logging
import os
import sys
import time

_ROOT = "ledgerkeys"


def get_logger(
    name: str = _ROOT, level: int | str | None = None, to_file: str | None = None
) -> logging.Logger:
    """
    Return a logger under the ``ledgerkeys`` namespace.

    The first call for the root logger installs one JSON-lines stream
    handler (UTC timestamps); child loggers propagate to it.
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)

    root = logging.getLogger(_ROOT)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            fmt=json.dumps(
                {
                    "ts": "%(asctime)s",
                    "level": "%(levelname)s",
                    "name": "%(name)s",
                    "msg": "%(message)s",
                }
            ),
            datefmt="%Y-%m-%dT%H:%M:%SZ",
        )
        formatter.converter = time.gmtime
        handler.setFormatter(formatter)
        root.addHandler(handler)
        if root.level == logging.NOTSET:
            root.setLevel(logging.WARNING)

        if to_file:
            os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
            file_handler = logging.FileHandler(to_file)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

    return logger


__all__: tuple[str, ...] = ("get_logger",)
