"""
Logging-Konfiguration.

Logs gehen nach stderr. So bleibt die Menü-Ausgabe auf stdout sauber.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LEVEL = "WARNING"


def resolve_level(log_level: str) -> int:
    """
    Wandelt einen Level-Namen in die Zahl um.
    Unbekannte Namen ergeben WARNING.
    """
    level = logging.getLevelName(log_level.strip().upper())
    if isinstance(level, int):
        return level
    return logging.getLevelName(DEFAULT_LEVEL)


def setup_logging(log_level: str = DEFAULT_LEVEL) -> None:
    """
    Konfiguriert das Root-Logging.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR oder CRITICAL
    """
    logging.basicConfig(
        level=resolve_level(log_level),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Logger für ein Modul (meist __name__)."""
    return logging.getLogger(name)
