"""
Exceptions — Иерархия ошибок ach_utils

Все ошибки библиотеки наследуются от UtilityError и дополнительно от
стандартного исключения по смыслу (ValueError / LookupError), чтобы
вызывающий код мог ловить их любым из двух способов.

Библиотека никогда не завершает процесс сама: решение об abort/retry
принимает вызывающий код верхнего уровня.
"""


class UtilityError(Exception):
    """Базовое исключение для всех ошибок ach_utils."""

    pass


# =============================================================================
# PADDING
# =============================================================================


class InputTooLong(UtilityError, ValueError):
    """Строка длиннее целевой ширины padding."""

    pass


class InvalidPadCharacter(UtilityError, ValueError):
    """Символ заполнения не является ровно одним символом."""

    pass


class InvalidJustification(UtilityError, ValueError):
    """Выравнивание не равно "left" или "right"."""

    pass


# =============================================================================
# LOOKUP
# =============================================================================


class NoAddressFound(UtilityError, LookupError):
    """
    На хосте нет ни одного non-loopback IPv4 адреса.

    Поведение недетерминировано между хостами (контейнер без сети,
    изолированный sandbox и т.п.).
    """

    pass


class NotFound(UtilityError, LookupError):
    """Ни один элемент последовательности не удовлетворяет predicate."""

    pass
