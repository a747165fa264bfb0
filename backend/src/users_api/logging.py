from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_level(debug: bool = False, level: str | None = None) -> int:
    if level:
        resolved = logging.getLevelName(level.upper())
        if isinstance(resolved, int):
            return resolved
    return logging.DEBUG if debug else logging.INFO


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    resolved = resolve_level(debug, level)
    root = logging.getLogger()

    if not root.handlers:
        logging.basicConfig(level=resolved, format=LOG_FORMAT)
        return

    root.setLevel(resolved)
