"""Logging setup for the ``lsc`` logger tree."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s %(message)s'


def setup_logging(level: str = 'INFO', log_file: Path | None = None) -> None:
    """Send ``lsc.*`` records to *log_file*, or to stderr when no file is given."""
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding='utf-8')
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger('lsc')
    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()
    root.setLevel(level.upper())
    root.addHandler(handler)
    root.debug('Logging started → %s', log_file or 'stderr')
