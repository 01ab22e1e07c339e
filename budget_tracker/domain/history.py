"""Budget history - per-period spend for the current and preceding periods"""

import asyncio
from datetime import datetime
from typing import Awaitable, Callable, List, Sequence

from budget_tracker.domain.aggregation import aggregate, as_decimal
from budget_tracker.domain.exceptions import RecordsLookupError
from budget_tracker.domain.models import BudgetSettings, ExpenseRecord, Period, PeriodSummary
from budget_tracker.domain.periods import periods_before
from budget_tracker.domain.validation import validate_months_back

RecordsLookup = Callable[[Period], Sequence[ExpenseRecord]]
AsyncRecordsLookup = Callable[[Period], Awaitable[Sequence[ExpenseRecord]]]

OPERATION = "budget_history"


def summarize_period(settings: BudgetSettings, period: Period, records: Sequence[ExpenseRecord]) -> PeriodSummary:
    """
    Spend for one past period.

    Uses the current monthly_budget for every period: settings are not
    versioned, so historical budget changes are not reflected.
    """
    agg = aggregate(records)
    monthly_budget = as_decimal(settings.monthly_budget)
    return PeriodSummary(
        period=period,
        monthly_budget=monthly_budget,
        total_spent=agg.total_amount,
        remaining=monthly_budget - agg.total_amount,
        expenses_count=agg.count,
    )


def budget_history(
    settings: BudgetSettings,
    months_back: int,
    records_lookup: RecordsLookup,
    reference_instant: datetime,
) -> List[PeriodSummary]:
    """
    Build history entries for months_back periods, most recent first.

    Lookups run one period at a time. A failing lookup aborts the whole
    history with RecordsLookupError naming the period; no partial list is returned.
    """
    validate_months_back(months_back)
    history = []
    for period in periods_before(settings.anchor_day, reference_instant, months_back):
        try:
            records = records_lookup(period)
        except Exception as e:
            raise RecordsLookupError(OPERATION, period, str(e)) from e
        history.append(summarize_period(settings, period, records))
    return history


async def budget_history_async(
    settings: BudgetSettings,
    months_back: int,
    records_lookup: AsyncRecordsLookup,
    reference_instant: datetime,
    concurrent: bool = False,
) -> List[PeriodSummary]:
    """
    Async variant of budget_history for awaitable lookups.

    With concurrent=True all lookups are gathered at once; output order still
    follows period order. When several lookups fail, the error for the most
    recent failing period is raised.
    """
    validate_months_back(months_back)
    periods = periods_before(settings.anchor_day, reference_instant, months_back)

    if concurrent:
        results = await asyncio.gather(*(records_lookup(p) for p in periods), return_exceptions=True)
    else:
        results = []
        for period in periods:
            try:
                results.append(await records_lookup(period))
            except Exception as e:
                raise RecordsLookupError(OPERATION, period, str(e)) from e

    history = []
    for period, records in zip(periods, results):
        if isinstance(records, Exception):
            raise RecordsLookupError(OPERATION, period, str(records)) from records
        if isinstance(records, BaseException):
            # cancellation is not a lookup failure
            raise records
        history.append(summarize_period(settings, period, records))
    return history
