"""
Rounding — Округление float и длительностей, сравнение float

Модуль содержит численные примитивы для денежных и временных величин:
- Округление float до N знаков (half-up по дробной части масштабированного значения)
- Квантование длительности до кратного шага (nanoseconds или timedelta)
- Сравнение float с фиксированным epsilon (строгая двусторонняя граница)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. round_to_places(x, 0) идемпотентно для целых x
2. round_duration(d, u) == -round_duration(-d, u) для u > 0
3. round_duration(d, u) == d для u <= 0
4. approximately_equal: граница epsilon исключающая
"""

import math
from datetime import timedelta
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Допуск для approximately_equal (абсолютный, граница исключающая)
FLOAT_EQUAL_EPSILON: Final[float] = 1e-8

# =============================================================================
# ЕДИНИЦЫ ДЛИТЕЛЬНОСТИ (целое число наносекунд)
# =============================================================================

NANOSECOND: Final[int] = 1
MICROSECOND: Final[int] = 1_000 * NANOSECOND
MILLISECOND: Final[int] = 1_000 * MICROSECOND
SECOND: Final[int] = 1_000 * MILLISECOND
MINUTE: Final[int] = 60 * SECOND
HOUR: Final[int] = 60 * MINUTE


# =============================================================================
# ОКРУГЛЕНИЕ FLOAT
# =============================================================================


def round_to_places(value: float, places: int) -> float:
    """
    Округление float до заданного количества знаков после запятой.

    Алгоритм:
        digit = value * 10**places
        frac = дробная часть digit (math.modf, знак как у digit)
        frac >= 0.5 → ceil(digit), иначе floor(digit)
        результат = rounded / 10**places

    Для отрицательных value дробная часть отрицательна, поэтому значение
    всегда округляется через floor (в сторону -inf). Отрицательный places
    не проверяется: масштаб становится дробной степенью десяти.

    Inf/NaN на входе или переполнение при масштабировании не вызывают
    исключений: результат следует IEEE-754 (inf остаётся inf, inf/inf → NaN).
    Если 10**places переполняется, масштаб равен inf; если исчезает в 0.0,
    результат NaN.

    Args:
        value: Исходное значение
        places: Количество знаков после запятой

    Returns:
        Округлённое значение

    Examples:
        >>> round_to_places(0.7825346789253, 4)
        0.7825
        >>> round_to_places(-0.78255, 4)
        -0.7826
        >>> round_to_places(2.5, 0)
        3.0
    """
    try:
        pow_ = math.pow(10, places)
    except OverflowError:
        pow_ = math.inf

    if pow_ == 0.0:
        # 10**places исчезает (places << 0): деление на масштаб не определено
        return math.nan

    digit = pow_ * value
    if not math.isfinite(digit):
        return digit / pow_

    frac, _ = math.modf(digit)

    if frac >= 0.5:
        rounded = float(math.ceil(digit))
    else:
        rounded = float(math.floor(digit))

    return rounded / pow_


# =============================================================================
# ОКРУГЛЕНИЕ ДЛИТЕЛЬНОСТЕЙ
# =============================================================================


def round_duration(d: int, unit: int) -> int:
    """
    Округление длительности (целые наносекунды) до ближайшего кратного unit.

    Округляется модуль |d|, затем восстанавливается знак. Ровно половина
    шага округляется вверх по модулю (от нуля).

    Args:
        d: Длительность (может быть отрицательной)
        unit: Шаг квантования, например SECOND

    Returns:
        Округлённая длительность; d без изменений при unit <= 0

    Examples:
        >>> round_duration(500 * MILLISECOND, SECOND) == SECOND
        True
        >>> round_duration(-500 * MILLISECOND, SECOND) == -SECOND
        True
        >>> round_duration(499 * MILLISECOND, SECOND)
        0
    """
    if unit <= 0:
        return d

    negative = d < 0
    magnitude = -d if negative else d

    m = magnitude % unit
    if m + m < unit:
        magnitude = magnitude - m
    else:
        magnitude = magnitude + unit - m

    return -magnitude if negative else magnitude


def round_timedelta(d: timedelta, unit: timedelta) -> timedelta:
    """
    Округление timedelta до ближайшего кратного unit.

    Та же семантика, что у round_duration, на целом числе микросекунд.
    """
    micros = round_duration(_total_microseconds(d), _total_microseconds(unit))
    return timedelta(microseconds=micros)


def _total_microseconds(d: timedelta) -> int:
    # timedelta.total_seconds() теряет точность на больших значениях
    return (d.days * 86_400 + d.seconds) * 1_000_000 + d.microseconds


# =============================================================================
# EPSILON-СРАВНЕНИЕ FLOAT
# =============================================================================


def approximately_equal(a: float, b: float, eps: float = FLOAT_EQUAL_EPSILON) -> bool:
    """
    Проверка, что разница между a и b меньше epsilon.

    Строгая двусторонняя граница: (a - b) < eps и (b - a) < eps.
    Значения на расстоянии ровно eps считаются неравными.

    Args:
        a: Первое значение
        b: Второе значение
        eps: Абсолютный допуск (default: FLOAT_EQUAL_EPSILON)

    Returns:
        True если значения равны в пределах допуска

    Examples:
        >>> approximately_equal(0.0, 9e-9)
        True
        >>> approximately_equal(0.0, 1e-8)
        False
    """
    return (a - b) < eps and (b - a) < eps
