"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from digital_world_frontend.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_view_update(
    request_id: str,
    operation: str,
    outcome: str,
    duration_ms: float,
) -> None:
    """Log structured outcome of one page submission"""
    logging.info(
        "View updated",
        extra={
            "request_id": request_id,
            "step": "view_update",
            "operation": operation,
            "outcome": outcome,
            "duration_ms": duration_ms,
        },
    )


def log_actor_call(method_name: str, outcome: str, duration_ms: float) -> None:
    """Log a single backend actor call"""
    logging.getLogger(__name__).debug(
        "Actor call completed",
        extra={
            "step": "actor_call",
            "method_name": method_name,
            "outcome": outcome,
            "duration_ms": duration_ms,
        },
    )
