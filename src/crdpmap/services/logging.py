from __future__ import annotations
import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


def _json_formatter(record: logging.LogRecord) -> str:
    base = {
        "level": record.levelname,
        "logger": record.name,
        "msg": record.getMessage(),
        "time": getattr(record, "asctime", None),
    }
    if hasattr(record, "extra"):
        try:
            base.update(record.extra)  # type: ignore[attr-defined]
        except (TypeError, ValueError):
            pass
    return json.dumps(base, ensure_ascii=False)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        record.asctime = self.formatTime(record)
        return _json_formatter(record)


def setup_logging(level: str = "INFO", logfile: Optional[Path] = None) -> logging.Logger:
    """
    Configure the ``crdpmap`` logger:
      - console (stderr), always
      - rotating file, when ``logfile`` is given
    One JSON object per record so runs are easy to grep in CI.
    """
    logger = logging.getLogger("crdpmap")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.handlers.clear()

    stream_h = logging.StreamHandler()
    stream_h.setFormatter(JsonFormatter())
    stream_h.setLevel(logger.level)
    logger.addHandler(stream_h)

    if logfile is not None:
        logfile.parent.mkdir(parents=True, exist_ok=True)
        file_h = RotatingFileHandler(logfile, maxBytes=5_000_000, backupCount=3, encoding="utf-8")
        file_h.setFormatter(JsonFormatter())
        file_h.setLevel(logger.level)
        logger.addHandler(file_h)

    logger.propagate = False
    logger.debug("logging.initialized", extra={"extra": {"logfile": str(logfile) if logfile else None}})
    return logger
