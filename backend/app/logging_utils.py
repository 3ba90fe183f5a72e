from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from backend.app.core.config import get_settings


class JsonFormatter(logging.Formatter):
    """One JSON object per record; `extra=` fields (e.g. entry_id) are kept."""

    # attributes every LogRecord carries
    _standard = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "line": record.lineno,
        }
        payload.update(
            (key, value) for key, value in vars(record).items() if key not in self._standard
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def build_logging_config(level: str, log_file: Path | None) -> dict:
    handlers: dict[str, dict] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "console",
            "stream": "ext://sys.stdout",
        },
    }
    if log_file is not None:
        handlers["glossary_file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": level,
            "formatter": "json",
            "filename": str(log_file),
            "maxBytes": 20 * 1024 * 1024,
            "backupCount": 10,
            "encoding": "utf-8",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {
                "format": "%(asctime)s │ %(levelname)-7s │ %(name)s │ %(message)s",
                "datefmt": "%H:%M:%S",
            },
            "json": {"()": "backend.app.logging_utils.JsonFormatter"},
        },
        "handlers": handlers,
        "loggers": {
            "httpx": {"level": "WARNING"},
            "httpcore": {"level": "WARNING"},
            "uvicorn.access": {"level": "INFO"},
        },
        "root": {
            "level": level,
            "handlers": list(handlers),
        },
    }


def configure_logging() -> Path | None:
    settings = get_settings()
    level = settings.LOG_LEVEL.upper()

    log_file = None
    if settings.LOG_TO_FILE:
        log_dir = Path(settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / "glossary_api.log"

    logging.config.dictConfig(build_logging_config(level, log_file))
    return log_file
