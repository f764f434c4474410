"""
Parser — Text → 256-bit Unsigned Word

Две точки входа:
- parse_big256: (value, ok) для недоверенного ввода, ошибка через флаг
- must_parse_big256: для констант и заранее проверенных литералов,
  ошибка через Big256ParseError

Синтаксис:
- "" → 0
- префикс 0x / 0X → основание 16 для остатка
- иначе → основание 10, ВЕДУЩИЕ НУЛИ НЕ ОЗНАЧАЮТ OCTAL ("0123" → 123)
- пробелы, знаки, "_" и любые символы вне алфавита основания → ошибка
- значение > 2^256-1 → ошибка, даже если строка лексически корректна
"""

import logging
import re
from typing import Final

from src.core.math.numerical_safeguards import TT256M1

logger = logging.getLogger(__name__)


# =============================================================================
# ПАРАМЕТРЫ СИНТАКСИСА
# =============================================================================

HEX_PREFIXES: Final[tuple[str, ...]] = ("0x", "0X")

# Только ASCII цифры: str.isdigit() и int() принимают unicode-цифры,
# пробелы, знаки и "_", которые здесь недопустимы
_DECIMAL_DIGITS: Final[re.Pattern[str]] = re.compile(r"[0-9]+")
_HEX_DIGITS: Final[re.Pattern[str]] = re.compile(r"[0-9a-fA-F]+")

# Количество значащих цифр 2^256-1 в каждом основании
MAX_DECIMAL_DIGITS_256: Final[int] = len(str(TT256M1))
MAX_HEX_DIGITS_256: Final[int] = 64


# =============================================================================
# EXCEPTIONS
# =============================================================================


class Big256ParseError(ValueError):
    """
    Строка не является корректным 256-битным unsigned числом.

    Поднимается только must_parse_big256. Означает ошибку программиста
    (невалидная константа), а не runtime условие: для пользовательского
    или внешнего ввода используется parse_big256.
    """

    pass


# =============================================================================
# PARSE
# =============================================================================


def parse_big256(text: str) -> tuple[int | None, bool]:
    """
    Разбор decimal или 0x-hex строки в 256-битное unsigned целое.

    Args:
        text: Исходная строка

    Returns:
        (value, True) при успехе, (None, False) при ошибке синтаксиса
        или выходе за [0, 2^256-1]

    Examples:
        >>> parse_big256("")
        (0, True)
        >>> parse_big256("0x12345678")
        (305419896, True)
        >>> parse_big256("0123456789")
        (123456789, True)
        >>> parse_big256("0xgg")
        (None, False)
    """
    if not isinstance(text, str):
        logger.debug("parse_big256: non-string input of type %s", type(text).__name__)
        return None, False

    if text == "":
        return 0, True

    if text.startswith(HEX_PREFIXES):
        digits, pattern, base, max_digits = text[2:], _HEX_DIGITS, 16, MAX_HEX_DIGITS_256
    else:
        digits, pattern, base, max_digits = text, _DECIMAL_DIGITS, 10, MAX_DECIMAL_DIGITS_256

    if pattern.fullmatch(digits) is None:
        logger.debug("parse_big256: invalid base-%d syntax in %r", base, text)
        return None, False

    # Ведущие нули не влияют на значение; отбрасываем их, чтобы длина
    # строки сразу отсекала заведомо слишком большие числа
    significant = digits.lstrip("0") or "0"
    if len(significant) > max_digits:
        logger.debug("parse_big256: %r exceeds 256 bits", text)
        return None, False

    value = int(significant, base)
    if value > TT256M1:
        logger.debug("parse_big256: %r exceeds 256 bits", text)
        return None, False

    return value, True


def must_parse_big256(text: str) -> int:
    """
    Разбор строки как parse_big256, но с exception при ошибке.

    Только для литералов, корректность которых гарантирована вызывающим
    кодом. НЕ использовать на пользовательском вводе.

    Raises:
        Big256ParseError: Если parse_big256 вернул ok=False

    Examples:
        >>> must_parse_big256("0xff")
        255
    """
    value, ok = parse_big256(text)
    if not ok:
        logger.error("must_parse_big256: invalid 256-bit integer %r", text)
        raise Big256ParseError(f"invalid 256 bit integer: {text!r}")
    return value
