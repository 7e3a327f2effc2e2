# ============================================================================
# FILE: app/core/logging.py
# ============================================================================
import logging
from typing import Optional
from app.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once with a console handler"""
    root = logging.getLogger()
    if root.handlers:
        # Already configured (uvicorn, pytest or a second create_app call)
        return

    level_name = (level or settings.LOG_LEVEL).upper()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)

    if settings.DEBUG:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
