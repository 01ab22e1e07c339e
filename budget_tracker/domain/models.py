"""Domain models - pure Python dataclasses representing budget entities"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional

DEFAULT_CURRENCY_CODE = "EUR"
DEFAULT_THRESHOLD_PERCENT = 80
DEFAULT_CATEGORIES = ["Food", "Transport", "Entertainment", "Shopping", "Health", "Other"]


@dataclass
class BudgetSettings:
    """Per-user budget configuration (one record per user)"""

    user_id: str
    anchor_day: int  # day-of-month a budgeting period begins on, 1..31
    monthly_budget: Decimal = Decimal("0")
    currency_code: str = DEFAULT_CURRENCY_CODE
    notification_enabled: bool = True
    notification_threshold_percent: int = DEFAULT_THRESHOLD_PERCENT
    categories: List[str] = field(default_factory=lambda: list(DEFAULT_CATEGORIES))


@dataclass
class ExpenseRecord:
    """Single spending entry owned by a user"""

    user_id: str
    amount: Decimal
    date: datetime
    category: Optional[str] = None
    note: Optional[str] = None
    tags: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Period:
    """Budgeting window: inclusive start, inclusive end-of-day end"""

    start: datetime
    end: datetime

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant <= self.end


@dataclass
class CategoryTotal:
    """Spend accumulated under one category"""

    total_amount: Decimal
    count: int


@dataclass
class AggregationResult:
    """Totals and summary statistics over a set of expense records"""

    total_amount: Decimal
    count: int
    per_category: Dict[str, CategoryTotal]
    min_amount: Decimal
    max_amount: Decimal
    average_amount: Decimal


@dataclass
class BudgetSummary:
    """Spend against budget for the current period"""

    period: Period
    monthly_budget: Decimal
    currency_code: str
    total_spent: Decimal
    remaining: Decimal  # negative when overspent
    percent_used: Decimal
    spent_by_category: Dict[str, Decimal]
    expenses_count: int
    should_notify: bool
    notification_message: Optional[str] = None


@dataclass
class PeriodSummary:
    """One entry of the budget history"""

    period: Period
    monthly_budget: Decimal
    total_spent: Decimal
    remaining: Decimal
    expenses_count: int
