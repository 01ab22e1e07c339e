"""GET /v1/expenses/statistics/* - Expense statistics over a date range"""

import logging
from datetime import date, datetime
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from budget_tracker.api.v1.schemas import CategoryStatisticsResponse, StatisticsResponse
from budget_tracker.api.dependencies import get_reference_instant, get_request_id
from budget_tracker.config import settings
from budget_tracker.infrastructure.database.session import get_db
from budget_tracker.infrastructure.database.repositories import ExpenseRepository
from budget_tracker.domain.aggregation import aggregate
from budget_tracker.domain.exceptions import RecordsLookupError
from budget_tracker.domain.models import AggregationResult, Period
from budget_tracker.domain.periods import calendar_month
from budget_tracker.infrastructure.observability.metrics import records_lookup_failures_counter
from budget_tracker.utils.date_utils import end_of_day, start_of_day

router = APIRouter()

OPERATION = "expense_statistics"


def resolve_range(start_date: Optional[date], end_date: Optional[date], now: datetime) -> Period:
    """Explicit [start_date, end_date] when both are given, else the current calendar month"""
    if start_date and end_date:
        if start_date > end_date:
            raise HTTPException(status_code=400, detail="start_date must not be after end_date")
        return Period(start=start_of_day(start_date), end=end_of_day(end_date))
    return calendar_month(now)


def _aggregate_range(db: Session, request_id: str, user_id: str, period: Period) -> AggregationResult:
    try:
        records = ExpenseRepository(db).find_between(user_id, period.start, period.end)
    except SQLAlchemyError as e:
        error = RecordsLookupError(OPERATION, period, str(e))
        records_lookup_failures_counter.inc()
        logging.error(f"Storage error: {error}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Expense storage unavailable") from error
    return aggregate(records, settings.default_category)


@router.get("/expenses/statistics/summary", response_model=StatisticsResponse)
def get_expense_statistics(
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_reference_instant),
):
    """Total, count, average, min and max of expense amounts in the range"""
    period = resolve_range(start_date, end_date, now)
    agg = _aggregate_range(db, get_request_id(request), user_id, period)
    return StatisticsResponse.from_domain(period, agg)


@router.get("/expenses/statistics/by-category", response_model=CategoryStatisticsResponse)
def get_expense_statistics_by_category(
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_reference_instant),
):
    """Per-category totals and counts in the range, largest total first"""
    period = resolve_range(start_date, end_date, now)
    agg = _aggregate_range(db, get_request_id(request), user_id, period)
    return CategoryStatisticsResponse.from_domain(period, agg)
