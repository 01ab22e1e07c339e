"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from budget_tracker.config import settings


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

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_budget_summary(
    request_id: str,
    user_id: str,
    percent_used: float,
    should_notify: bool,
    duration_ms: float,
) -> None:
    """Log structured summary outcome, including whether the threshold was crossed"""
    logging.info(
        "Budget summary computed",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "step": "summary_complete",
            "percent_used": percent_used,
            "notification": "threshold_reached" if should_notify else "none",
            "duration_ms": duration_ms,
        },
    )


def log_budget_history(request_id: str, user_id: str, months: int, duration_ms: float) -> None:
    logging.info(
        "Budget history computed",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "step": "history_complete",
            "months": months,
            "duration_ms": duration_ms,
        },
    )
