"""Input validation run before values reach the period and aggregation engine"""

import re
from decimal import Decimal

from budget_tracker.domain.exceptions import InvalidInputError
from budget_tracker.domain.models import BudgetSettings

CURRENCY_CODE_PATTERN = re.compile(r"[A-Z]{3}")


def validate_anchor_day(anchor_day: int) -> int:
    if isinstance(anchor_day, bool) or not isinstance(anchor_day, int):
        raise InvalidInputError(f"anchor_day must be an integer, got {anchor_day!r}")
    if not 1 <= anchor_day <= 31:
        raise InvalidInputError(f"anchor_day must be between 1 and 31, got {anchor_day}")
    return anchor_day


def validate_monthly_budget(monthly_budget: Decimal) -> Decimal:
    if monthly_budget < 0:
        raise InvalidInputError(f"monthly_budget cannot be negative, got {monthly_budget}")
    return monthly_budget


def validate_threshold_percent(threshold_percent: int) -> int:
    if not 0 <= threshold_percent <= 100:
        raise InvalidInputError(
            f"notification_threshold_percent must be between 0 and 100, got {threshold_percent}"
        )
    return threshold_percent


def validate_currency_code(currency_code: str) -> str:
    """Format check only (ISO 4217 shape); no exchange-rate awareness"""
    if not CURRENCY_CODE_PATTERN.fullmatch(currency_code or ""):
        raise InvalidInputError(f"{currency_code!r} is not a valid currency code")
    return currency_code


def validate_months_back(months_back: int) -> int:
    if isinstance(months_back, bool) or not isinstance(months_back, int) or months_back < 1:
        raise InvalidInputError(f"months_back must be a positive integer, got {months_back!r}")
    return months_back


def validate_settings(settings: BudgetSettings) -> BudgetSettings:
    """Check every field the engine relies on; raises InvalidInputError on the first violation"""
    validate_anchor_day(settings.anchor_day)
    validate_monthly_budget(settings.monthly_budget)
    validate_threshold_percent(settings.notification_threshold_percent)
    validate_currency_code(settings.currency_code)
    return settings
