"""GET /v1/budget/history - Spend per period for recent budgeting periods"""

import time
import logging
from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from budget_tracker.api.v1.schemas import HistoryResponse, HistoryItem
from budget_tracker.api.dependencies import get_reference_instant, get_request_id
from budget_tracker.config import settings
from budget_tracker.infrastructure.database.session import get_db
from budget_tracker.infrastructure.database.repositories import BudgetSettingsRepository, ExpenseRepository
from budget_tracker.domain.history import budget_history
from budget_tracker.domain.validation import validate_settings
from budget_tracker.domain.exceptions import InvalidInputError, MissingSettingsError, RecordsLookupError
from budget_tracker.infrastructure.observability.metrics import history_periods_counter, records_lookup_failures_counter
from budget_tracker.infrastructure.observability.logging import log_budget_history

router = APIRouter()


@router.get("/budget/history", response_model=HistoryResponse)
def get_budget_history(
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    months: int = Query(settings.default_history_months, description="Number of periods, most recent first"),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_reference_instant),
):
    """
    Retrieve spend for the current and preceding budgeting periods.

    Every period is measured against the current monthly budget.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    if months > settings.max_history_months:
        raise HTTPException(
            status_code=400,
            detail=f"months cannot exceed {settings.max_history_months}",
        )

    try:
        budget_settings = validate_settings(BudgetSettingsRepository(db).get_required(user_id))
        expense_repo = ExpenseRepository(db)
        history = budget_history(
            budget_settings,
            months,
            lambda period: expense_repo.find_in_period(user_id, period),
            now,
        )

    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))

    except MissingSettingsError as e:
        logging.warning(f"Missing settings: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail="Budget settings not found. Create settings first.")

    except RecordsLookupError as e:
        records_lookup_failures_counter.inc()
        logging.error(f"Records lookup error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Expense storage unavailable")

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    history_periods_counter.inc(len(history))
    log_budget_history(request_id, user_id, months, (time.time() - start_time) * 1000)

    return HistoryResponse(
        user_id=user_id,
        currency_code=budget_settings.currency_code,
        history=[HistoryItem.from_domain(entry) for entry in history],
    )
