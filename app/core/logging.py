# app/core/logging.py
import logging
import sys

from app.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configura el logging raíz hacia stdout. Idempotente."""
    nivel = (level or settings.LOG_LEVEL).upper()

    root = logging.getLogger()
    if root.handlers:
        root.setLevel(nivel)
        return

    logging.basicConfig(
        level=nivel,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
