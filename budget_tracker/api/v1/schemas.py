"""Pydantic schemas for API responses"""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Dict, List, Optional

from budget_tracker.domain.models import AggregationResult, BudgetSummary, Period, PeriodSummary


class PeriodSchema(BaseModel):
    """Budgeting window, both bounds inclusive"""

    start: datetime
    end: datetime

    @classmethod
    def from_domain(cls, period: Period) -> "PeriodSchema":
        return cls(start=period.start, end=period.end)


class BudgetSummarySchema(BaseModel):
    """Spend against budget for the current period"""

    monthly_budget: float
    total_spent: float
    remaining: float = Field(..., description="Negative when the budget is overspent")
    percent_used: float
    currency_code: str
    period: PeriodSchema
    spent_by_category: Dict[str, float]
    expenses_count: int
    should_notify: bool
    notification_message: Optional[str] = None

    @classmethod
    def from_domain(cls, summary: BudgetSummary) -> "BudgetSummarySchema":
        return cls(
            monthly_budget=float(summary.monthly_budget),
            total_spent=float(summary.total_spent),
            remaining=float(summary.remaining),
            percent_used=float(summary.percent_used),
            currency_code=summary.currency_code,
            period=PeriodSchema.from_domain(summary.period),
            spent_by_category={name: float(amount) for name, amount in summary.spent_by_category.items()},
            expenses_count=summary.expenses_count,
            should_notify=summary.should_notify,
            notification_message=summary.notification_message,
        )


class SummaryResponse(BaseModel):
    """Response for GET /v1/budget/summary"""

    user_id: str
    summary: BudgetSummarySchema


class HistoryItem(BaseModel):
    """Single past period in the budget history"""

    period: PeriodSchema
    monthly_budget: float
    total_spent: float
    remaining: float
    expenses_count: int

    @classmethod
    def from_domain(cls, entry: PeriodSummary) -> "HistoryItem":
        return cls(
            period=PeriodSchema.from_domain(entry.period),
            monthly_budget=float(entry.monthly_budget),
            total_spent=float(entry.total_spent),
            remaining=float(entry.remaining),
            expenses_count=entry.expenses_count,
        )


class HistoryResponse(BaseModel):
    """Response for GET /v1/budget/history"""

    user_id: str
    currency_code: str
    history: List[HistoryItem]


class StatisticsSchema(BaseModel):
    """Summary statistics over expense amounts"""

    total_amount: float
    count: int
    average_amount: float
    min_amount: float
    max_amount: float


class StatisticsResponse(BaseModel):
    """Response for GET /v1/expenses/statistics/summary"""

    period: PeriodSchema
    statistics: StatisticsSchema

    @classmethod
    def from_domain(cls, period: Period, agg: AggregationResult) -> "StatisticsResponse":
        return cls(
            period=PeriodSchema.from_domain(period),
            statistics=StatisticsSchema(
                total_amount=float(agg.total_amount),
                count=agg.count,
                average_amount=float(agg.average_amount),
                min_amount=float(agg.min_amount),
                max_amount=float(agg.max_amount),
            ),
        )


class CategoryStatistics(BaseModel):
    """Spend under one category"""

    category: str
    total_amount: float
    count: int


class CategoryStatisticsResponse(BaseModel):
    """Response for GET /v1/expenses/statistics/by-category"""

    period: PeriodSchema
    categories: List[CategoryStatistics]

    @classmethod
    def from_domain(cls, period: Period, agg: AggregationResult) -> "CategoryStatisticsResponse":
        return cls(
            period=PeriodSchema.from_domain(period),
            categories=[
                CategoryStatistics(category=name, total_amount=float(bucket.total_amount), count=bucket.count)
                for name, bucket in agg.per_category.items()
            ],
        )
