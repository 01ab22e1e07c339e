"""Date manipulation utilities"""

from datetime import date, datetime, time, timedelta

END_OF_DAY = time(23, 59, 59, 999000)


def rolled_date(year: int, month: int, day: int) -> date:
    """
    Build a date with native rollover semantics instead of raising.

    - month outside 1..12 rolls into neighbouring years (0 -> December of year-1)
    - day 0 is the last day of the previous month
    - day past the end of the month overflows into the following month

    Example:
        rolled_date(2024, 4, 31) -> 2024-05-01
        rolled_date(2024, 13, 0) -> 2024-12-31
    """
    extra_years, month_index = divmod(month - 1, 12)
    first = date(year + extra_years, month_index + 1, 1)
    return first + timedelta(days=day - 1)


def start_of_day(day: date, tzinfo=None) -> datetime:
    """Midnight at the beginning of the given day"""
    return datetime.combine(day, time.min, tzinfo=tzinfo)


def end_of_day(day: date, tzinfo=None) -> datetime:
    """Last representable millisecond of the given day (23:59:59.999)"""
    return datetime.combine(day, END_OF_DAY, tzinfo=tzinfo)
