"""
Randomness — Генерация случайных hex-строк

Генератор передаётся явно (rng) либо используется модульный генератор,
инициализированный один раз при импорте. Повторного seed на каждый вызов нет:
для воспроизводимости в тестах передаётся random.Random(seed).
"""

import random
from typing import Final

RANDOM_ALPHABET: Final[str] = "abcdefghijklmnopqrstuvwxyz0123456789"

_DEFAULT_RNG: Final[random.Random] = random.Random()


def random_hex_string(length: int, rng: random.Random | None = None) -> str:
    """
    Случайная строка из RANDOM_ALPHABET длины length, закодированная в hex.

    Args:
        length: Количество случайных символов до кодирования
        rng: Генератор случайных чисел (default: модульный генератор)

    Returns:
        Hex строка длины 2 * length; "" при length <= 0

    Examples:
        >>> len(random_hex_string(20))
        40
        >>> random_hex_string(0)
        ''
    """
    if length <= 0:
        return ""

    rng = rng or _DEFAULT_RNG
    raw = "".join(rng.choice(RANDOM_ALPHABET) for _ in range(length))
    return raw.encode("ascii").hex()
