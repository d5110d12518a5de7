"""Process-wide logging configuration."""

from __future__ import annotations

import logging
import sys

_HANDLER_NAME = "taskly-console"


def setup_logging(level: str | int = logging.INFO) -> None:
    """Attach a single console handler to the root logger.

    Safe to call more than once; the handler is installed only the first time.
    """

    root = logging.getLogger()
    root.setLevel(level)

    if any(handler.get_name() == _HANDLER_NAME for handler in root.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
