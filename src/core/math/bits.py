"""
Bits — Bit & Comparison Utilities

Утилиты над целыми произвольной точности (Python int), не привязанные
к 256-битному домену:
- big_max / big_min: полный порядок, при равенстве возвращается первый операнд
- first_bit_set: индекс младшего установленного бита (0 для значения 0)
- big_pow: нередуцированное возведение в степень (для констант и fixtures)
- bit_length / byte_length: минимальная ширина магнитуды

ВАЖНО:
first_bit_set(0) == 0 — это sentinel для нулевого значения, а НЕ признак
того, что бит 0 установлен. first_bit_set(1) тоже равен 0.
"""

from src.core.math.numerical_safeguards import (
    WordPreconditionViolation,
    validate_int,
)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def big_max(a: int, b: int) -> int:
    """
    Большее из двух целых.

    При a == b возвращается a (значения равны, выбор операнда не наблюдаем).

    Examples:
        >>> big_max(10, 5)
        10
        >>> big_max(5, 10)
        10
    """
    if a < b:
        return b
    return a


def big_min(a: int, b: int) -> int:
    """
    Меньшее из двух целых.

    Examples:
        >>> big_min(10, 5)
        5
        >>> big_min(5, 10)
        5
    """
    if a > b:
        return b
    return a


# =============================================================================
# БИТЫ
# =============================================================================


def first_bit_set(value: int) -> int:
    """
    Индекс младшего бита, равного 1 (количество trailing zero битов).

    Для отрицательных значений используется магнитуда: число младших
    нулевых битов у -x и x в two's complement совпадает.

    Args:
        value: Целое произвольной ширины

    Returns:
        Индекс младшего установленного бита; 0 если value == 0 (sentinel)

    Examples:
        >>> first_bit_set(0)
        0
        >>> first_bit_set(1)
        0
        >>> first_bit_set(2)
        1
        >>> first_bit_set(0x100)
        8
    """
    if value == 0:
        return 0

    magnitude = abs(value)
    # x & -x изолирует младший установленный бит
    return (magnitude & -magnitude).bit_length() - 1


def bit_length(value: int) -> int:
    """
    Количество битов магнитуды value (0 для 0).

    Examples:
        >>> bit_length(0)
        0
        >>> bit_length(255)
        8
        >>> bit_length(-256)
        9
    """
    return abs(value).bit_length()


def byte_length(value: int) -> int:
    """
    Минимальная длина big-endian кодирования магнитуды value в байтах.

    Examples:
        >>> byte_length(0)
        0
        >>> byte_length(255)
        1
        >>> byte_length(256)
        2
    """
    return (bit_length(value) + 7) // 8


# =============================================================================
# СТЕПЕНЬ
# =============================================================================


def big_pow(base: int, exponent: int) -> int:
    """
    Возведение в степень без редукции по модулю 2^256.

    Используется для построения констант и тестовых fixtures, описывающих
    границы самого 256-битного домена (2^255, 2^256 и т.п.).

    Соглашение: x^0 == 1 для любого x, включая 0.
    Отрицательная экспонента запрещена: целочисленного результата у
    x^-k нет, поэтому вместо угадывания 0 или 1 поднимается exception.

    Args:
        base: Основание
        exponent: Неотрицательная экспонента

    Returns:
        base ** exponent

    Raises:
        TypeError: Если base или exponent не int
        WordPreconditionViolation: Если exponent < 0

    Examples:
        >>> big_pow(2, 8)
        256
        >>> big_pow(0, 0)
        1
    """
    validate_int(base, "base")
    validate_int(exponent, "exponent")

    if exponent < 0:
        raise WordPreconditionViolation(
            f"big_pow exponent must be non-negative, got {exponent}"
        )

    return base**exponent
