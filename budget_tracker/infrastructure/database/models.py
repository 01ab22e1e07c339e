"""SQLAlchemy ORM models for budget settings and expenses"""

import uuid
from sqlalchemy import Column, Boolean, Date, DateTime, Integer, JSON, Numeric, String, Text, Uuid
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class BudgetSettingsRow(Base):
    """Budget settings, one row per user"""

    __tablename__ = "budget_settings"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, unique=True, index=True)
    monthly_budget = Column(Numeric(14, 2), nullable=False, default=0)
    currency_code = Column(String(3), nullable=False, default="EUR")
    # Only the day of month is meaningful: it anchors every budgeting period
    month_start = Column(Date, nullable=False)
    notifications_enabled = Column(Boolean, nullable=False, default=True)
    notification_threshold_percent = Column(Integer, nullable=False, default=80)
    categories = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())


class ExpenseRow(Base):
    """Single expense entry"""

    __tablename__ = "expense"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    amount = Column(Numeric(14, 2), nullable=False)
    date = Column(DateTime, nullable=False, index=True)
    category = Column(Text, nullable=False, default="Other")
    note = Column(String(500), nullable=True)
    tags = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
