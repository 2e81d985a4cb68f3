# infrastructure/logging/loguru_logger.py
from __future__ import annotations

from typing import Any, Dict, Optional

from loguru import logger as _loguru

from testhttp.application.ports.logger import LoggerPort


class LoguruLogger(LoggerPort):
    """Structured events on loguru; fields travel in ``record["extra"]``."""

    def __init__(self, bound: Optional[Dict[str, Any]] = None):
        self._bound: Dict[str, Any] = dict(bound or {})

    def bind(self, **fields: Any) -> "LoguruLogger":
        merged = dict(self._bound)
        merged.update(fields)
        return LoguruLogger(merged)

    def debug(self, event: str, **fields: Any) -> None:
        self._emit("DEBUG", event, fields)

    def info(self, event: str, **fields: Any) -> None:
        self._emit("INFO", event, fields)

    def error(self, event: str, **fields: Any) -> None:
        self._emit("ERROR", event, fields)

    def _emit(self, level: str, event: str, fields: Dict[str, Any]) -> None:
        payload = dict(self._bound)
        payload.update(fields)
        payload.setdefault("type", event)
        _loguru.bind(**payload).log(level, event)
