"""
Filenames — Имена файлов с UTC timestamp

Файловых операций не выполняет: только строит путь.
"""

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Final

# Формат timestamp без миллисекунд (миллисекунды добавляются как ".mmm")
FILE_TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%dT%H-%M-%S"


def format_file_timestamp(moment: datetime) -> str:
    """
    Форматирование момента времени как YYYY-MM-DDTHH-MM-SS.mmm (UTC).

    Naive datetime считается уже заданным в UTC.
    """
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return f"{moment.strftime(FILE_TIMESTAMP_FORMAT)}.{moment.microsecond // 1000:03d}"


def make_file_name(
    file_extension: str,
    directory: str | Path,
    now: datetime | None = None,
) -> str:
    """
    Создание нового имени файла в каталоге directory.

    Args:
        file_extension: Расширение вместе с точкой (например, ".ach")
        directory: Каталог
        now: Момент времени (default: текущее время UTC)

    Returns:
        Путь вида <directory>/<YYYY-MM-DDTHH-MM-SS.mmm><file_extension>

    Examples:
        >>> make_file_name(".ach", "out", datetime(2016, 7, 1, 9, 30, 5, 123456))
        'out/2016-07-01T09-30-05.123.ach'
    """
    if now is None:
        now = datetime.now(timezone.utc)
    name = f"{format_file_timestamp(now)}{file_extension}"
    # Путь нормализуется: "a/../out" → "out", "test/" → "test"
    return os.path.normpath(os.path.join(os.fspath(directory), name))
