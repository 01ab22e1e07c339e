"""Budget period calculation anchored to a user-chosen day of month"""

from datetime import date, datetime
from typing import List

from budget_tracker.domain.exceptions import InvalidInputError
from budget_tracker.domain.models import Period
from budget_tracker.utils.date_utils import end_of_day, rolled_date, start_of_day


def _period_starting_in(year: int, month: int, anchor_day: int, tzinfo=None) -> Period:
    # month may fall outside 1..12; rolled_date normalizes it.
    start = rolled_date(year, month, anchor_day)
    end = rolled_date(year, month + 1, anchor_day - 1)
    return Period(start=start_of_day(start, tzinfo), end=end_of_day(end, tzinfo))


def _start_month_offset(anchor_day: int, reference_instant: datetime) -> int:
    # 0: the period began this month, -1: it began last month
    return 0 if reference_instant.day >= anchor_day else -1


def current_period(anchor_day: int, reference_instant: datetime) -> Period:
    """
    Compute the budgeting period containing reference_instant.

    Rules:
    - day-of-month >= anchor_day: period runs from the anchor day of this month
      to the day before the anchor day of next month
    - otherwise: from the anchor day of last month to the day before the
      anchor day of this month
    - start is 00:00:00.000, end is 23:59:59.999, in reference_instant's tzinfo

    Known limitation: anchor days beyond the length of a month overflow into
    the following month (anchor_day=31 in April starts on May 1st). The
    resulting period may then not contain reference_instant.

    Example:
        anchor_day=15, 2024-03-10 -> 2024-02-15 00:00 .. 2024-03-14 23:59:59.999
        anchor_day=15, 2024-03-20 -> 2024-03-15 00:00 .. 2024-04-14 23:59:59.999
    """
    offset = _start_month_offset(anchor_day, reference_instant)
    return _period_starting_in(
        reference_instant.year,
        reference_instant.month + offset,
        anchor_day,
        reference_instant.tzinfo,
    )


def periods_before(anchor_day: int, reference_instant: datetime, count: int) -> List[Period]:
    """
    Current period followed by the count-1 periods preceding it, most recent first.

    periods[i] starts i months before the current period. Consecutive periods
    are contiguous: each end is 1ms before the start of the period after it.
    """
    if count < 0:
        raise InvalidInputError(f"count cannot be negative, got {count}")

    offset = _start_month_offset(anchor_day, reference_instant)
    return [
        _period_starting_in(
            reference_instant.year,
            reference_instant.month + offset - i,
            anchor_day,
            reference_instant.tzinfo,
        )
        for i in range(count)
    ]


def calendar_month(reference_instant: datetime) -> Period:
    """Plain calendar month containing reference_instant (1st .. last day)"""
    return _period_starting_in(reference_instant.year, reference_instant.month, 1, reference_instant.tzinfo)


def anchor_day_from_month_start(month_start: date) -> int:
    """Anchor day stored as a full month-start date keeps only its day of month"""
    return month_start.day
