"""Pytest fixtures for testing"""

import pytest
from datetime import date, datetime
from decimal import Decimal
from typing import Callable, Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from budget_tracker.api.main import create_app
from budget_tracker.api.dependencies import get_reference_instant
from budget_tracker.infrastructure.database.models import Base, BudgetSettingsRow, ExpenseRow
from budget_tracker.infrastructure.database.session import get_db
from budget_tracker.domain.models import BudgetSettings, ExpenseRecord


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Frozen wall clock for API tests
NOW = datetime(2024, 3, 20, 12, 0, 0)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database and a frozen clock"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_reference_instant] = lambda: NOW
    return TestClient(app)


@pytest.fixture
def add_settings(db: Session) -> Callable[..., BudgetSettingsRow]:
    """Insert a budget settings row for a user"""

    def _add(user_id: str = "user_1", anchor_day: int = 15, monthly_budget: str = "1000", **kwargs) -> BudgetSettingsRow:
        row = BudgetSettingsRow(
            user_id=user_id,
            monthly_budget=Decimal(monthly_budget),
            currency_code=kwargs.get("currency_code", "EUR"),
            month_start=date(2024, 1, anchor_day),
            notifications_enabled=kwargs.get("notifications_enabled", True),
            notification_threshold_percent=kwargs.get("notification_threshold_percent", 80),
            categories=kwargs.get("categories", ["Food", "Transport", "Other"]),
        )
        db.add(row)
        db.commit()
        return row

    return _add


@pytest.fixture
def add_expense(db: Session) -> Callable[..., ExpenseRow]:
    """Insert an expense row for a user"""

    def _add(amount: str, when: datetime, category: str = "Food", user_id: str = "user_1") -> ExpenseRow:
        row = ExpenseRow(user_id=user_id, amount=Decimal(amount), date=when, category=category)
        db.add(row)
        db.commit()
        return row

    return _add


@pytest.fixture
def budget_settings() -> BudgetSettings:
    """Budget of 1000 EUR anchored on the 15th, notifying at 80%"""
    return BudgetSettings(
        user_id="user_1",
        anchor_day=15,
        monthly_budget=Decimal("1000"),
        notification_enabled=True,
        notification_threshold_percent=80,
    )


@pytest.fixture
def sample_records() -> list[ExpenseRecord]:
    """Expenses inside the 2024-03-15 .. 2024-04-14 period, summing to 850"""
    return [
        ExpenseRecord(user_id="user_1", amount=Decimal("400"), date=datetime(2024, 3, 15, 9, 30), category="Food"),
        ExpenseRecord(user_id="user_1", amount=Decimal("250"), date=datetime(2024, 3, 18, 18, 0), category="Transport"),
        ExpenseRecord(user_id="user_1", amount=Decimal("150"), date=datetime(2024, 3, 19, 12, 0), category="Food"),
        ExpenseRecord(user_id="user_1", amount=Decimal("50"), date=datetime(2024, 3, 20, 8, 0), category=None),
    ]
