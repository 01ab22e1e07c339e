"""Data access layer for budget settings and expenses (read path)"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from sqlalchemy.orm import Session
from budget_tracker.infrastructure.database.models import BudgetSettingsRow, ExpenseRow
from budget_tracker.domain.exceptions import MissingSettingsError
from budget_tracker.domain.models import BudgetSettings, ExpenseRecord, Period
from budget_tracker.domain.periods import anchor_day_from_month_start


def to_budget_settings(row: BudgetSettingsRow) -> BudgetSettings:
    return BudgetSettings(
        user_id=row.user_id,
        anchor_day=anchor_day_from_month_start(row.month_start),
        monthly_budget=Decimal(row.monthly_budget),
        currency_code=row.currency_code,
        notification_enabled=row.notifications_enabled,
        notification_threshold_percent=row.notification_threshold_percent,
        categories=list(row.categories or []),
    )


def to_expense_record(row: ExpenseRow) -> ExpenseRecord:
    return ExpenseRecord(
        user_id=row.user_id,
        amount=Decimal(row.amount),
        date=row.date,
        category=row.category,
        note=row.note,
        tags=list(row.tags or []),
    )


class BudgetSettingsRepository:
    """Repository for budget settings"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_user(self, user_id: str) -> Optional[BudgetSettings]:
        """Fetch settings for a user, None when not configured"""
        row = (
            self.db.query(BudgetSettingsRow)
            .filter(BudgetSettingsRow.user_id == user_id)
            .first()
        )
        return to_budget_settings(row) if row else None

    def get_required(self, user_id: str) -> BudgetSettings:
        """Fetch settings for a user or raise MissingSettingsError"""
        budget_settings = self.get_by_user(user_id)
        if budget_settings is None:
            raise MissingSettingsError(user_id)
        return budget_settings


class ExpenseRepository:
    """Repository for expenses"""

    def __init__(self, db: Session):
        self.db = db

    def find_between(self, user_id: str, start: datetime, end: datetime) -> List[ExpenseRecord]:
        """Expenses of a user dated within [start, end], newest first"""
        rows = (
            self.db.query(ExpenseRow)
            .filter(
                ExpenseRow.user_id == user_id,
                ExpenseRow.date >= start,
                ExpenseRow.date <= end,
            )
            .order_by(ExpenseRow.date.desc())
            .all()
        )
        return [to_expense_record(row) for row in rows]

    def find_in_period(self, user_id: str, period: Period) -> List[ExpenseRecord]:
        """Records lookup for a budgeting period, bounds inclusive"""
        return self.find_between(user_id, period.start, period.end)
