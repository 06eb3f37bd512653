"""Logging setup for the ``drops`` logger hierarchy."""

from __future__ import annotations

import logging
from pathlib import Path


def setup_logging(level: str = 'INFO', log_file: Path | None = None) -> logging.Handler:
    """Attach one handler to the ``drops`` root logger. Returns the handler."""
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding='utf-8')
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(message)s'))
    root = logging.getLogger('drops')
    root.setLevel(level.upper())
    root.addHandler(handler)
    logging.getLogger('drops.web').info('Logging started → %s', log_file or 'stderr')
    return handler
