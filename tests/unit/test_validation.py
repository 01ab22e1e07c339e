"""Unit tests for input validation and calendar helpers"""

import pytest
from datetime import date
from decimal import Decimal
from budget_tracker.domain.models import BudgetSettings
from budget_tracker.domain.validation import (
    validate_anchor_day,
    validate_currency_code,
    validate_monthly_budget,
    validate_months_back,
    validate_settings,
    validate_threshold_percent,
)
from budget_tracker.domain.exceptions import InvalidInputError
from budget_tracker.utils.date_utils import rolled_date


@pytest.mark.parametrize("anchor_day", [0, 32, -1, "15", 1.5, True])
def test_validate_anchor_day_rejects(anchor_day):
    with pytest.raises(InvalidInputError):
        validate_anchor_day(anchor_day)


def test_validate_anchor_day_accepts_bounds():
    assert validate_anchor_day(1) == 1
    assert validate_anchor_day(31) == 31


def test_validate_monthly_budget():
    assert validate_monthly_budget(Decimal("0")) == 0
    with pytest.raises(InvalidInputError):
        validate_monthly_budget(Decimal("-0.01"))


def test_validate_threshold_percent():
    assert validate_threshold_percent(100) == 100
    with pytest.raises(InvalidInputError):
        validate_threshold_percent(101)


@pytest.mark.parametrize("code", ["eur", "EURO", "E1R", "EUR\n", " EUR", "", None])
def test_validate_currency_code_rejects(code):
    with pytest.raises(InvalidInputError):
        validate_currency_code(code)


def test_validate_months_back():
    assert validate_months_back(6) == 6
    with pytest.raises(InvalidInputError):
        validate_months_back(0)


def test_validate_settings_defaults_pass():
    settings = BudgetSettings(user_id="user_1", anchor_day=1)
    assert validate_settings(settings) is settings
    assert settings.categories == ["Food", "Transport", "Entertainment", "Shopping", "Health", "Other"]


def test_validate_settings_negative_budget():
    with pytest.raises(InvalidInputError):
        validate_settings(BudgetSettings(user_id="user_1", anchor_day=1, monthly_budget=Decimal("-5")))


def test_rolled_date_semantics():
    assert rolled_date(2024, 4, 31) == date(2024, 5, 1)
    assert rolled_date(2024, 3, 0) == date(2024, 2, 29)
    assert rolled_date(2024, 0, 15) == date(2023, 12, 15)
    assert rolled_date(2024, 13, 1) == date(2025, 1, 1)
    assert rolled_date(2024, -11, 1) == date(2023, 1, 1)
