"""
Numerical Safeguards — Word Domain Constants & Integer Guards

Модуль задаёт границы 256-битного машинного слова (VM word) и базовые
проверки целочисленных аргументов, на которые опираются остальные модули
src.core.math:
- Константы домена: ширина слова, 2^255, 2^256, 2^256-1, signed границы
- WordPreconditionViolation для нарушенных предусловий (отрицательная
  экспонента, отрицательное значение при кодировании, короткий буфер)
- Валидация int аргументов (bool не считается int)
- Проверки принадлежности unsigned/signed диапазону слова

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Unsigned каноническая форма слова всегда в [0, 2^256-1]
2. Signed каноническая форма слова всегда в [-2^255, 2^255-1]
3. Нарушение предусловия никогда не даёт тихий результат (только exception)
4. Все операции детерминированы и не имеют состояния
"""

from typing import Final

# =============================================================================
# ПАРАМЕТРЫ СЛОВА
# =============================================================================

# Ширина машинного слова в битах и байтах
WORD_BITS: Final[int] = 256
WORD_BYTES: Final[int] = WORD_BITS // 8

# 2^255: старший (знаковый) бит слова
TT255: Final[int] = 1 << (WORD_BITS - 1)

# 2^256: модуль wraparound арифметики
TT256: Final[int] = 1 << WORD_BITS

# 2^256 - 1: маска слова и максимальное unsigned значение
TT256M1: Final[int] = TT256 - 1
MAX_BIG256: Final[int] = TT256M1

# 2^63 - 1: максимальное значение signed 64-bit
MAX_BIG63: Final[int] = (1 << 63) - 1

# Signed границы слова (two's complement)
MIN_S256: Final[int] = -TT255
MAX_S256: Final[int] = TT255 - 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class WordPreconditionViolation(ValueError):
    """
    Нарушено документированное предусловие операции над словом.

    Примеры:
    1. Отрицательная экспонента в big_pow / exp_word
    2. Отрицательное значение при big-endian кодировании
    3. Буфер read_bits меньше, чем требуется для значения

    Наследуется от ValueError: вызывающий код, который ловит ValueError
    для некорректных аргументов, продолжает работать.
    """

    pass


# =============================================================================
# ВАЛИДАЦИЯ ЦЕЛЫХ
# =============================================================================


def is_int(value: object) -> bool:
    """
    Проверка, что значение является int (bool исключается).

    Examples:
        >>> is_int(5)
        True
        >>> is_int(True)
        False
        >>> is_int(5.0)
        False
    """
    return isinstance(value, int) and not isinstance(value, bool)


def validate_int(value: object, name: str) -> None:
    """
    Валидация, что значение является int.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не int (или bool)
    """
    if not is_int(value):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def validate_non_negative_int(value: int, name: str) -> None:
    """
    Валидация, что значение является неотрицательным int.

    Используется для предусловий, нарушение которых иначе привело бы к
    тихому искажению результата (кодирование, экспонента).

    Raises:
        TypeError: Если value не int
        WordPreconditionViolation: Если value < 0
    """
    validate_int(value, name)

    if value < 0:
        raise WordPreconditionViolation(f"{name} must be non-negative, got {value}")


def validate_int_in_range(
    value: int,
    name: str,
    min_value: int | None = None,
    max_value: int | None = None,
) -> None:
    """
    Валидация, что int значение в заданном диапазоне (границы включительно).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        TypeError: Если value не int
        ValueError: Если value вне диапазона
    """
    validate_int(value, name)

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")


# =============================================================================
# ПРОВЕРКИ ДОМЕНА СЛОВА
# =============================================================================


def is_unsigned_word(value: int) -> bool:
    """
    Проверка, что значение является каноническим unsigned словом [0, 2^256-1].

    Examples:
        >>> is_unsigned_word(0)
        True
        >>> is_unsigned_word(TT256)
        False
        >>> is_unsigned_word(-1)
        False
    """
    return 0 <= value <= TT256M1


def is_signed_word(value: int) -> bool:
    """
    Проверка, что значение является каноническим signed словом [-2^255, 2^255-1].
    """
    return MIN_S256 <= value <= MAX_S256


def validate_unsigned_word(value: int, name: str) -> None:
    """
    Валидация, что значение помещается в unsigned 256-битное слово.

    Raises:
        TypeError: Если value не int
        ValueError: Если value вне [0, 2^256-1]
    """
    validate_int_in_range(value, name, min_value=0, max_value=TT256M1)
