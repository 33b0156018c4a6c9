"""Logging setup shared by the CLI and embedding applications."""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Third party loggers that are too chatty at INFO.
_QUIET_LOGGERS = ("httpx", "httpcore", "openai")


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once; later calls only adjust the level."""
    level_name = (level or "INFO").upper()
    numeric = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger("mealscan").setLevel(numeric)
    for name in _QUIET_LOGGERS:
        lg = logging.getLogger(name)
        if lg.level == 0:  # not set explicitly
            lg.setLevel(max(numeric, logging.WARNING))
