"""
Lookup — Поиск индекса элемента по predicate
"""

from collections.abc import Callable, Sequence
from typing import TypeVar

from ach_utils.exceptions import NotFound

T = TypeVar("T")


def find_index(items: Sequence[T], predicate: Callable[[T], bool]) -> int:
    """
    Индекс первого элемента, для которого predicate возвращает True.

    Используется, например, для определения позиции текущего шага процесса
    и вычисления следующего действия.

    Raises:
        NotFound: Если ни один элемент не подходит

    Examples:
        >>> find_index([2, 4, 6, 8], lambda x: x == 6)
        2
    """
    for i, item in enumerate(items):
        if predicate(item):
            return i
    raise NotFound("not found in sequence")
