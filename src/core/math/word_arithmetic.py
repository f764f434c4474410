"""
Word Arithmetic — Wraparound U256/S256 & Modular Exponentiation

Арифметика 256-битного машинного слова поверх Python int:
- u256: приведение по модулю 2^256 в unsigned форму [0, 2^256-1]
- s256: интерпретация unsigned слова как two's complement signed
- exp_word: base^exponent mod 2^256 (square-and-multiply)
- u256_bytes: каноническое 32-байтовое кодирование любого целого

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. u256 использует математический модуль: u256(-1) == 2^256 - 1
2. s256 определён для канонических unsigned слов; s256(u256(x)) ≡ x (mod 2^256)
3. exp_word(x, 0) == 1 для любого x, включая 0
4. Результат exp_word всегда в [0, 2^256-1]

ФОРМУЛЫ:
    u256(x) = x mod 2^256
    s256(x) = x            если x < 2^255
            = x - 2^256    иначе
"""

from src.core.math.byte_codec import padded_big_bytes
from src.core.math.numerical_safeguards import (
    TT255,
    TT256,
    TT256M1,
    WORD_BYTES,
    WordPreconditionViolation,
    validate_int,
)


# =============================================================================
# U256 / S256
# =============================================================================


def u256(value: int) -> int:
    """
    Приведение целого к unsigned 256-битному слову.

    Значения уже в [0, 2^256-1] возвращаются без изменения величины.

    Examples:
        >>> u256(-1) == 2**256 - 1
        True
        >>> u256(2**256)
        0
        >>> u256(2**256 + 1)
        1
    """
    # Битовая маска совпадает с mod 2^256 и для отрицательных int
    return value & TT256M1


def s256(value: int) -> int:
    """
    Signed (two's complement) интерпретация unsigned слова.

    Вход предполагается каноническим unsigned словом [0, 2^256-1].

    Returns:
        value если бит 255 не установлен, иначе value - 2^256
        (результат в [-2^255, 2^255-1])

    Examples:
        >>> s256(1)
        1
        >>> s256(2**256 - 1)
        -1
        >>> s256(2**255) == -(2**255)
        True
    """
    if value < TT255:
        return value
    return value - TT256


# =============================================================================
# ВОЗВЕДЕНИЕ В СТЕПЕНЬ
# =============================================================================


def exp_word(base: int, exponent: int) -> int:
    """
    base^exponent mod 2^256 бинарным возведением (square-and-multiply).

    Стоимость: O(bit_length(exponent)) умножений операндов <= 256 бит.

    Args:
        base: Основание (любое целое; приводится через u256)
        exponent: Неотрицательная экспонента произвольной ширины

    Returns:
        Каноническое unsigned слово

    Raises:
        TypeError: Если base или exponent не int
        WordPreconditionViolation: Если exponent < 0

    Examples:
        >>> exp_word(0, 0)
        1
        >>> exp_word(2, 256)
        0
        >>> exp_word(2, 255) == 2**255
        True
    """
    validate_int(base, "base")
    validate_int(exponent, "exponent")

    if exponent < 0:
        raise WordPreconditionViolation(
            f"exp_word exponent must be non-negative, got {exponent}"
        )

    result = 1
    word = u256(base)

    while exponent > 0:
        if exponent & 1:
            result = (result * word) & TT256M1
        word = (word * word) & TT256M1
        exponent >>= 1

    return result


# =============================================================================
# КОДИРОВАНИЕ СЛОВА
# =============================================================================


def u256_bytes(value: int) -> bytes:
    """
    32-байтовое big-endian кодирование u256(value).

    Отрицательные значения кодируются в two's complement форме.

    Examples:
        >>> u256_bytes(-1) == b'\\xff' * 32
        True
        >>> u256_bytes(1)[-1]
        1
    """
    return padded_big_bytes(u256(value), WORD_BYTES)
