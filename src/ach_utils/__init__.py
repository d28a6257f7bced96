"""
ach_utils — вспомогательные функции для генерации ACH файлов.

Независимые примитивы без общего состояния: округление float и
длительностей, сравнение float, расчёт settlement date, padding строк,
имена файлов, локальный IP хоста, случайные hex-строки.
"""

from ach_utils.calendar import (
    HolidayCalendar,
    calc_settlement_date,
    load_holiday_calendar,
)
from ach_utils.exceptions import (
    InputTooLong,
    InvalidJustification,
    InvalidPadCharacter,
    NoAddressFound,
    NotFound,
    UtilityError,
)
from ach_utils.lookup import find_index
from ach_utils.math import (
    FLOAT_EQUAL_EPSILON,
    approximately_equal,
    round_duration,
    round_timedelta,
    round_to_places,
)
from ach_utils.system import get_local_ip, make_file_name, random_hex_string
from ach_utils.text import Justification, pad

__all__ = [
    # Math
    "FLOAT_EQUAL_EPSILON",
    "approximately_equal",
    "round_duration",
    "round_timedelta",
    "round_to_places",
    # Calendar
    "HolidayCalendar",
    "calc_settlement_date",
    "load_holiday_calendar",
    # Text
    "Justification",
    "pad",
    # System
    "get_local_ip",
    "make_file_name",
    "random_hex_string",
    # Lookup
    "find_index",
    # Exceptions
    "UtilityError",
    "InputTooLong",
    "InvalidPadCharacter",
    "InvalidJustification",
    "NoAddressFound",
    "NotFound",
]
