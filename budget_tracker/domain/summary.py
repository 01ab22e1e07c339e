"""Budget summary for the current period, including the threshold notification decision"""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Sequence

from budget_tracker.domain.aggregation import DEFAULT_CATEGORY, ZERO, aggregate, as_decimal
from budget_tracker.domain.models import BudgetSettings, BudgetSummary, ExpenseRecord
from budget_tracker.domain.periods import current_period

HUNDRED = Decimal("100")
NOTIFICATION_MESSAGE = "You have spent {percent}% of your budget!"


def percent_of_budget(total_spent: Decimal, monthly_budget: Decimal) -> Decimal:
    """Unrounded share of the budget spent, 0 when there is no budget"""
    if monthly_budget <= 0:
        return ZERO
    return total_spent / monthly_budget * HUNDRED


def should_notify(settings: BudgetSettings, percent_used: Decimal) -> bool:
    return settings.notification_enabled and percent_used >= settings.notification_threshold_percent


def notification_message(percent_used: Decimal) -> str:
    return NOTIFICATION_MESSAGE.format(percent=percent_used.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def summarize(
    settings: BudgetSettings,
    period_records: Sequence[ExpenseRecord],
    reference_instant: datetime,
    default_category: str = DEFAULT_CATEGORY,
) -> BudgetSummary:
    """
    Summarize spend against the monthly budget for the current period.

    Requirements:
    - period_records are already limited to the current period
    - remaining may go negative (overspend)
    - percent_used rounded half-up to 2 places, 0 for a zero budget
    - notification fires when enabled and spend reaches the threshold;
      the comparison uses the unrounded percentage
    """
    period = current_period(settings.anchor_day, reference_instant)
    agg = aggregate(period_records, default_category)

    monthly_budget = as_decimal(settings.monthly_budget)
    raw_percent = percent_of_budget(agg.total_amount, monthly_budget)
    notify = should_notify(settings, raw_percent)

    message: Optional[str] = notification_message(raw_percent) if notify else None

    return BudgetSummary(
        period=period,
        monthly_budget=monthly_budget,
        currency_code=settings.currency_code,
        total_spent=agg.total_amount,
        remaining=monthly_budget - agg.total_amount,
        percent_used=raw_percent.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP),
        spent_by_category={name: bucket.total_amount for name, bucket in agg.per_category.items()},
        expenses_count=agg.count,
        should_notify=notify,
        notification_message=message,
    )
