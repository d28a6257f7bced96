"""
Padding — Выравнивание строк до фиксированной ширины

Используется для полей фиксированной ширины (например, записи ACH файла).
"""

from enum import Enum

from ach_utils.exceptions import InputTooLong, InvalidJustification, InvalidPadCharacter


class Justification(str, Enum):
    """Выравнивание строки внутри поля"""

    LEFT = "left"
    RIGHT = "right"


def pad(s: str, length: int, justified: str, pad_char: str) -> str:
    """
    Дополнение строки символом pad_char до ширины length.

    "right": заполнение слева (строка прижата вправо).
    "left": заполнение справа (строка прижата влево).

    Args:
        s: Исходная строка
        length: Итоговая ширина
        justified: "left" / "right" или Justification
        pad_char: Ровно один символ заполнения

    Returns:
        Строка длины max(len(s), length)

    Raises:
        InputTooLong: Если len(s) > length
        InvalidPadCharacter: Если pad_char не ровно один символ
        InvalidJustification: Если justified не "left"/"right"

    Examples:
        >>> pad("abc", 10, "right", "0")
        '0000000abc'
        >>> pad("abc", 10, "left", " ")
        'abc       '
    """
    if len(s) > length:
        raise InputTooLong("string is too long")

    if len(pad_char) != 1:
        raise InvalidPadCharacter("padding must be only one character")

    padding = pad_char * (length - len(s))

    if justified == Justification.RIGHT:
        return padding + s

    if justified == Justification.LEFT:
        return s + padding

    raise InvalidJustification("justification must be either right or left")
