"""Domain-specific exceptions"""

from typing import Optional

from budget_tracker.domain.models import Period


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException):
    """Input rejected before any computation (anchor day, budget, months back)"""

    pass


class MissingSettingsError(DomainException):
    """User has no budget settings configured"""

    def __init__(self, user_id: str):
        super().__init__(f"Budget settings not found for user {user_id}")
        self.user_id = user_id


class RecordsLookupError(DomainException):
    """Expense records lookup failed; the original error is kept as __cause__"""

    def __init__(self, operation: str, period: Optional[Period] = None, detail: str = ""):
        message = f"Records lookup failed during {operation}"
        if period is not None:
            message += f" for period {period.start.isoformat()} - {period.end.isoformat()}"
        if detail:
            message += f": {detail}"
        super().__init__(message)
        self.operation = operation
        self.period = period
