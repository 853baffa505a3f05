"""
JSON log output for the service.

Every record carries ``timestamp``, ``level``, ``name`` and ``message``;
records emitted while a request is in flight also carry that request's
``request_id`` as set by ``CorrelationIdMiddleware``.
"""
import logging
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

NOISY_LOGGERS = ("uvicorn.access", "sqlalchemy.engine")


class RequestJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        request_id = request_id_var.get()
        if request_id:
            log_record["request_id"] = request_id

        if not log_record.get("timestamp"):
            log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = (log_record.get("level") or record.levelname).upper()


def setup_logging(level: int = logging.INFO) -> None:
    """Route the root logger through one JSON handler. Safe to call repeatedly."""
    root = logging.getLogger()
    if not any(isinstance(h.formatter, RequestJsonFormatter) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(RequestJsonFormatter("%(timestamp) %(level) %(name) %(message)"))
        root.addHandler(handler)
    root.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
