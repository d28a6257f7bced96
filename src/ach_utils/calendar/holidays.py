"""
HolidayCalendar — Календарь банковских праздников

Immutable Pydantic модель множества праздничных дат.

Все ключи нормализуются до чистой календарной даты (datetime.date):
datetime-значения усекаются до date как при создании, так и при проверке
членства. Время суток на результат поиска не влияет.
"""

import json
from datetime import date, datetime
from pathlib import Path
from typing import Any, Final

from jsonschema import Draft202012Validator
from pydantic import BaseModel, Field, field_validator

from ach_utils.logging_config import get_logger

logger = get_logger(__name__)

# =============================================================================
# DOCUMENT CONTRACT
# =============================================================================

# JSON Schema (Draft 2020-12) документа календаря праздников
HOLIDAY_CALENDAR_SCHEMA: Final[dict[str, Any]] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "HolidayCalendar",
    "type": "object",
    "required": ["schema_version", "holidays"],
    "additionalProperties": False,
    "properties": {
        "schema_version": {"type": "string", "const": "1"},
        "name": {"type": "string", "minLength": 1},
        "holidays": {
            "type": "array",
            "uniqueItems": True,
            "items": {"type": "string", "pattern": "^[0-9]{4}-[0-9]{2}-[0-9]{2}$"},
        },
    },
}

Draft202012Validator.check_schema(HOLIDAY_CALENDAR_SCHEMA)
_DOCUMENT_VALIDATOR = Draft202012Validator(HOLIDAY_CALENDAR_SCHEMA)


def as_calendar_date(value: date) -> date:
    """Усечение datetime до date; date возвращается без изменений."""
    if isinstance(value, datetime):
        return value.date()
    return value


# =============================================================================
# HOLIDAY CALENDAR MODEL
# =============================================================================


class HolidayCalendar(BaseModel):
    """
    Календарь банковских праздников.

    Immutable модель (frozen=True). Поддерживает оператор `in`
    для date и datetime.
    """

    name: str = Field(default="default", min_length=1, description="Имя календаря")
    dates: frozenset[date] = Field(
        default_factory=frozenset, description="Праздничные даты (без времени суток)"
    )

    model_config = {"frozen": True}

    @field_validator("dates", mode="before")
    @classmethod
    def normalize_dates(cls, v: Any) -> Any:
        """Усечение datetime-элементов до date до валидации типа."""
        if isinstance(v, (str, bytes)):
            return v
        return [as_calendar_date(d) if isinstance(d, date) else d for d in v]

    def __contains__(self, day: object) -> bool:
        if not isinstance(day, date):
            return False
        return as_calendar_date(day) in self.dates

    @classmethod
    def from_document(cls, data: dict[str, Any]) -> "HolidayCalendar":
        """
        Создание календаря из JSON документа.

        Документ проверяется против HOLIDAY_CALENDAR_SCHEMA.

        Args:
            data: {"schema_version": "1", "name": "...", "holidays": ["YYYY-MM-DD", ...]}

        Raises:
            jsonschema.ValidationError: Если документ не соответствует схеме
            pydantic.ValidationError: Если дата синтаксически верна, но не существует
        """
        _DOCUMENT_VALIDATOR.validate(data)
        return cls(name=data.get("name", "default"), dates=data["holidays"])


def load_holiday_calendar(path: str | Path) -> HolidayCalendar:
    """
    Загрузка календаря праздников из JSON файла.

    Args:
        path: Путь к JSON документу

    Returns:
        HolidayCalendar

    Raises:
        FileNotFoundError: Если файл не найден
        json.JSONDecodeError: Если файл не является валидным JSON
        jsonschema.ValidationError: Если документ не соответствует схеме
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    calendar = HolidayCalendar.from_document(data)
    logger.info(
        "holiday_calendar_loaded",
        path=str(path),
        name=calendar.name,
        holidays=len(calendar.dates),
    )
    return calendar
