"""
Word — Текстовые формы 256-битного слова для Pydantic моделей

Annotated int типы для полей моделей, принимающих 256-битные величины
из JSON/текста:
- HexOrDecimal256: вход decimal или 0x-hex, JSON выход — 0x-hex
- Decimal256: вход decimal или 0x-hex, JSON выход — decimal строка

Разбор строк выполняется parse_big256 (ведущие нули не означают octal,
значения > 2^256-1 отклоняются). int на входе проверяется на диапазон
[0, 2^256-1]. Python-режим model_dump() возвращает int.

Совместимость с JSON Schema (contracts/schema/word_quantity.json).
"""

from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field, PlainSerializer

from src.core.math.numerical_safeguards import is_int, validate_unsigned_word
from src.core.math.parser import parse_big256
from src.core.math.word_arithmetic import u256_bytes


# =============================================================================
# ВАЛИДАЦИЯ / СЕРИАЛИЗАЦИЯ
# =============================================================================


def _coerce_word(value: object) -> int:
    """
    Приведение входа поля к unsigned 256-битному int.

    Pydantic превращает ValueError в ValidationError, поэтому все ошибки
    (включая неверный тип) поднимаются как ValueError.
    """
    if is_int(value):
        validate_unsigned_word(value, "integer")
        return value

    if isinstance(value, str):
        parsed, ok = parse_big256(value)
        if not ok:
            raise ValueError(f"invalid hex or decimal 256-bit integer: {value!r}")
        return parsed

    raise ValueError(f"expected int or str, got {type(value).__name__}")


def word_to_hex(value: int) -> str:
    """
    0x-hex форма слова (нижний регистр, без ведущих нулей).

    Examples:
        >>> word_to_hex(0)
        '0x0'
        >>> word_to_hex(255)
        '0xff'
    """
    return f"{value:#x}"


def word_to_decimal(value: int) -> str:
    """Decimal строка слова."""
    return str(value)


# =============================================================================
# ТИПЫ
# =============================================================================

HexOrDecimal256 = Annotated[
    int,
    BeforeValidator(_coerce_word),
    PlainSerializer(word_to_hex, return_type=str, when_used="json"),
]

Decimal256 = Annotated[
    int,
    BeforeValidator(_coerce_word),
    PlainSerializer(word_to_decimal, return_type=str, when_used="json"),
]


# =============================================================================
# MODELS
# =============================================================================


class Word256Quantity(BaseModel):
    """
    Величина в 256-битном домене в JSON форме {"value": "0x..."}.

    Immutable модель (frozen=True).
    """

    value: HexOrDecimal256 = Field(
        ..., description="Unsigned 256-bit величина (decimal или 0x-hex)"
    )

    model_config = {"frozen": True}

    def to_bytes(self) -> bytes:
        """
        32-байтовое big-endian кодирование величины.

        Returns:
            u256_bytes(value)
        """
        return u256_bytes(self.value)
