"""GET /v1/budget/summary - Spend against budget for the current period"""

import time
import logging
from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from budget_tracker.api.v1.schemas import BudgetSummarySchema, SummaryResponse
from budget_tracker.api.dependencies import get_reference_instant, get_request_id
from budget_tracker.config import settings
from budget_tracker.infrastructure.database.session import get_db
from budget_tracker.infrastructure.database.repositories import BudgetSettingsRepository, ExpenseRepository
from budget_tracker.domain.periods import current_period
from budget_tracker.domain.summary import summarize
from budget_tracker.domain.exceptions import InvalidInputError, MissingSettingsError, RecordsLookupError
from budget_tracker.domain.validation import validate_settings
from budget_tracker.infrastructure.observability.metrics import record_summary, records_lookup_failures_counter
from budget_tracker.infrastructure.observability.logging import log_budget_summary

router = APIRouter()

OPERATION = "budget_summary"


@router.get("/budget/summary", response_model=SummaryResponse)
def get_budget_summary(
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_reference_instant),
):
    """
    Summarize the user's spend in the current budgeting period.

    Flow:
    1. Load budget settings (404 when not configured)
    2. Derive the current period from the anchor day
    3. Fetch expenses dated within the period
    4. Aggregate and compute remaining budget and notification flag
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        budget_settings = validate_settings(BudgetSettingsRepository(db).get_required(user_id))
        period = current_period(budget_settings.anchor_day, now)
        try:
            records = ExpenseRepository(db).find_in_period(user_id, period)
        except SQLAlchemyError as e:
            raise RecordsLookupError(OPERATION, period, str(e)) from e
        summary = summarize(budget_settings, records, now, settings.default_category)

    except InvalidInputError as e:
        logging.warning(f"Invalid budget settings: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    except MissingSettingsError as e:
        logging.warning(f"Missing settings: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail="Budget settings not found. Create settings first.")

    except (RecordsLookupError, SQLAlchemyError) as e:
        records_lookup_failures_counter.inc()
        logging.error(f"Storage error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Expense storage unavailable")

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_summary(summary.should_notify, float(summary.percent_used))
    log_budget_summary(request_id, user_id, float(summary.percent_used), summary.should_notify, duration_ms)

    return SummaryResponse(user_id=user_id, summary=BudgetSummarySchema.from_domain(summary))
