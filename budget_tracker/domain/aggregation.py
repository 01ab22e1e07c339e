"""Expense aggregation - totals, per-category breakdown and summary statistics"""

from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence

from budget_tracker.domain.models import AggregationResult, CategoryTotal, ExpenseRecord, Period

DEFAULT_CATEGORY = "Other"
ZERO = Decimal("0")


def as_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps floats at their shortest repr instead of the binary expansion
    return Decimal(str(value))


def category_of(record: ExpenseRecord, default_category: str = DEFAULT_CATEGORY) -> str:
    """Missing or blank category falls back to the default; anything else is kept as-is"""
    if not record.category or not record.category.strip():
        return default_category
    return record.category


def aggregate(
    records: Sequence[ExpenseRecord],
    default_category: str = DEFAULT_CATEGORY,
) -> AggregationResult:
    """
    Aggregate expense records into totals and statistics.

    Requirements:
    - Pure: caller pre-filters records to the user and period
    - Unknown categories are bucketed under their own name, never rejected
    - Empty input yields zeros everywhere (no division by zero)
    - Result does not depend on record order; categories are ordered by
      total descending, then by name
    """
    if not records:
        return AggregationResult(
            total_amount=ZERO,
            count=0,
            per_category={},
            min_amount=ZERO,
            max_amount=ZERO,
            average_amount=ZERO,
        )

    amounts = [as_decimal(r.amount) for r in records]
    total = sum(amounts, ZERO)

    buckets: Dict[str, CategoryTotal] = {}
    for record, amount in zip(records, amounts):
        name = category_of(record, default_category)
        bucket = buckets.setdefault(name, CategoryTotal(total_amount=ZERO, count=0))
        bucket.total_amount += amount
        bucket.count += 1

    ordered = sorted(buckets.items(), key=lambda item: (-item[1].total_amount, item[0]))

    return AggregationResult(
        total_amount=total,
        count=len(amounts),
        per_category=dict(ordered),
        min_amount=min(amounts),
        max_amount=max(amounts),
        average_amount=total / len(amounts),
    )


def records_in_period(
    records: Iterable[ExpenseRecord],
    period: Period,
    user_id: Optional[str] = None,
) -> List[ExpenseRecord]:
    """Records dated within [period.start, period.end], optionally for one user only"""
    return [
        r for r in records
        if period.contains(r.date) and (user_id is None or r.user_id == user_id)
    ]
