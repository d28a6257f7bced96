"""
Calendar modules для ach_utils

Расчёт settlement date и календарь банковских праздников.
"""

from ach_utils.calendar.holidays import (
    HolidayCalendar,
    as_calendar_date,
    load_holiday_calendar,
)
from ach_utils.calendar.settlement import (
    SATURDAY,
    SUNDAY,
    calc_settlement_date,
    roll_past_weekend,
)

__all__ = [
    # Holidays
    "HolidayCalendar",
    "as_calendar_date",
    "load_holiday_calendar",
    # Settlement — Constants
    "SATURDAY",
    "SUNDAY",
    # Settlement — Functions
    "calc_settlement_date",
    "roll_past_weekend",
]
