"""Dependency injection for FastAPI endpoints"""

from datetime import datetime
from zoneinfo import ZoneInfo

from fastapi import Request
from budget_tracker.config import settings


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_reference_instant() -> datetime:
    """
    Current wall-clock time in the configured timezone.

    Expense dates are stored as naive local datetimes, so the tzinfo is dropped
    to keep period bounds comparable with stored values.
    """
    return datetime.now(ZoneInfo(settings.timezone)).replace(tzinfo=None)
