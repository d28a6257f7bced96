"""
Settlement — Расчёт даты расчётов (settlement date) для ACH транзакций

Политика:
1. Settlement — следующий день (today + 1)
2. Суббота → +2 дня (понедельник), воскресенье → +1 день (понедельник)
3. Если полученная дата — праздник: +1 день, затем повторить шаг 2 ровно один раз

Праздник, за которым сразу следует ещё один праздник, отдельно
не обрабатывается: проверка праздника выполняется один раз.
"""

from collections.abc import Iterable
from datetime import date, timedelta
from typing import Final, TypeVar

from ach_utils.calendar.holidays import HolidayCalendar
from ach_utils.logging_config import get_logger

logger = get_logger(__name__)

# date.weekday(): понедельник = 0
SATURDAY: Final[int] = 5
SUNDAY: Final[int] = 6

_ONE_DAY: Final[timedelta] = timedelta(days=1)

DateT = TypeVar("DateT", bound=date)


def roll_past_weekend(day: DateT) -> DateT:
    """
    Перенос выходного дня на следующий понедельник.

    Args:
        day: date или datetime (время суток сохраняется)

    Returns:
        day, если это будний день; иначе ближайший понедельник
    """
    weekday = day.weekday()
    if weekday == SATURDAY:
        return day + 2 * _ONE_DAY
    if weekday == SUNDAY:
        return day + _ONE_DAY
    return day


def calc_settlement_date(
    today: DateT,
    holidays: HolidayCalendar | Iterable[date] = (),
) -> DateT:
    """
    Расчёт корректной даты settlement для ACH транзакций.

    Args:
        today: Текущая дата (date или datetime)
        holidays: Календарь праздников или итерируемое множество дат

    Returns:
        Дата settlement того же типа, что и today

    Examples:
        >>> calc_settlement_date(date(2016, 7, 8))  # пятница
        datetime.date(2016, 7, 11)
        >>> calc_settlement_date(date(2016, 7, 1), [date(2016, 7, 4)])
        datetime.date(2016, 7, 5)
    """
    if not isinstance(holidays, HolidayCalendar):
        holidays = HolidayCalendar(dates=holidays)

    settlement = roll_past_weekend(today + _ONE_DAY)

    if settlement in holidays:
        logger.debug(
            "settlement_date_holiday_rollforward",
            holiday=settlement.isoformat(),
            calendar=holidays.name,
        )
        settlement = roll_past_weekend(settlement + _ONE_DAY)

    return settlement
