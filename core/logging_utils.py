from __future__ import annotations
import logging
import sys

from core.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str | None = None) -> None:
    # stdout carries the MCP stdio stream, so logs go to stderr only
    logging.basicConfig(
        level=(level or LOG_LEVEL or "INFO").upper(),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
