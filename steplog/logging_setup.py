"""Logger setup for transcript output."""
import logging
from typing import Any, Dict

import json_log_formatter

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int, log_file: str | None, log_format: str = "text",
                      name: str = "steplog.transcript") -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    # if handlers already exist (tests, repeated sessions) avoid duplicate handlers
    if not logger.handlers:
        if log_format == "json":
            formatter: logging.Formatter = json_log_formatter.JSONFormatter()
        else:
            formatter = logging.Formatter(TEXT_FORMAT)

        handler = logging.FileHandler(log_file) if log_file else logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def logger_from_config(cfg: Dict[str, Any]) -> logging.Logger:
    """Configure the transcript logger described by a resolved config."""
    level = getattr(logging, cfg["log_level"])
    return configure_logging(level, cfg["log_file"], cfg["log_format"], name=cfg["logger"])
