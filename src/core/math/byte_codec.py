"""
Byte Codec — Fixed-Width Big-Endian Encoding

Модуль кодирует неотрицательные целые в буферы фиксированной длины
(big-endian, unsigned магнитуда) и обратно:
- padded_big_bytes: новый буфер ровно из n байт
- read_bits: запись в заранее выделенный буфер вызывающего кода
- byte_at / big_endian_byte_at: доступ к отдельному байту кодирования
- big_from_bytes: декодирование big-endian буфера

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Длина результата padded_big_bytes(value, n) всегда равна n
2. Короткая магнитуда дополняется нулевыми байтами слева
3. Магнитуда шире n байт УСЕКАЕТСЯ до младших n байт (без ошибки!)
4. Отрицательные значения не кодируются: сначала u256(), затем кодирование

ВНИМАНИЕ (усечение):
padded_big_bytes намеренно отбрасывает старшие байты, если значение не
помещается в n байт. Если тихое усечение недопустимо, вызывающий код
обязан проверить byte_length(value) <= n заранее.
"""

from src.core.math.bits import byte_length
from src.core.math.numerical_safeguards import (
    WordPreconditionViolation,
    validate_int,
    validate_non_negative_int,
)


# =============================================================================
# КОДИРОВАНИЕ
# =============================================================================


def padded_big_bytes(value: int, n: int) -> bytes:
    """
    Big-endian кодирование value в буфер ровно из n байт.

    Если минимальное кодирование короче n — слева добавляются нули.
    Если длиннее n — сохраняются только младшие n байт (тихое усечение).

    Args:
        value: Неотрицательное целое
        n: Длина результата в байтах

    Returns:
        bytes длины n

    Raises:
        TypeError: Если value или n не int
        WordPreconditionViolation: Если value < 0
        ValueError: Если n < 0

    Examples:
        >>> padded_big_bytes(1, 4)
        b'\\x00\\x00\\x00\\x01'
        >>> padded_big_bytes(512, 4)
        b'\\x00\\x00\\x02\\x00'
        >>> padded_big_bytes(2**32, 4)  # усечение старшего байта
        b'\\x00\\x00\\x00\\x00'
    """
    validate_non_negative_int(value, "value")
    validate_int(n, "n")

    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")

    mask = (1 << (8 * n)) - 1
    return (value & mask).to_bytes(n, "big")


def read_bits(value: int, buf: bytearray | memoryview) -> None:
    """
    Big-endian запись value в буфер, выделенный вызывающим кодом.

    Эквивалентно buf[:] = padded_big_bytes(value, len(buf)): буфер
    вызывающего кода заполняется in-place (старшие байты обнуляются).

    ВНИМАНИЕ: запись не бесплатна по памяти. int.to_bytes создаёт
    временный bytes длины len(buf), который затем копируется в буфер;
    экономится только результат, который не возвращается вызывающему коду.

    Args:
        value: Неотрицательное целое
        buf: Изменяемый буфер (bytearray или writable memoryview)

    Raises:
        TypeError: Если value не int
        WordPreconditionViolation: Если value < 0 или буфер короче
            минимального кодирования value
    """
    validate_non_negative_int(value, "value")

    size = len(buf)
    needed = byte_length(value)
    if needed > size:
        raise WordPreconditionViolation(
            f"buffer too small: value needs {needed} bytes, buffer has {size}"
        )

    buf[:] = value.to_bytes(size, "big")


# =============================================================================
# ДОСТУП К БАЙТАМ
# =============================================================================


def big_endian_byte_at(value: int, n: int) -> int:
    """
    n-й байт магнитуды, считая от младшего (n=0 — младший байт).

    За пределами ширины значения возвращается 0.

    Examples:
        >>> big_endian_byte_at(0x1234, 0)
        52
        >>> big_endian_byte_at(0x1234, 1)
        18
        >>> big_endian_byte_at(0x1234, 5)
        0
    """
    validate_non_negative_int(value, "value")
    validate_non_negative_int(n, "n")

    return (value >> (8 * n)) & 0xFF


def byte_at(value: int, padlength: int, n: int) -> int:
    """
    n-й байт (n=0 — старший) big-endian кодирования длины padlength.

    Эквивалентно padded_big_bytes(value, padlength)[n] без построения
    буфера; для n >= padlength возвращается 0.

    Args:
        value: Неотрицательное целое
        padlength: Длина кодирования в байтах
        n: Индекс байта от старшего

    Examples:
        >>> byte_at(0x1234, 32, 31)
        52
        >>> byte_at(0x1234, 32, 30)
        18
        >>> byte_at(0x1234, 32, 32)
        0
    """
    validate_non_negative_int(n, "n")

    if n >= padlength:
        return 0

    return big_endian_byte_at(value, padlength - 1 - n)


# =============================================================================
# ДЕКОДИРОВАНИЕ
# =============================================================================


def big_from_bytes(data: bytes | bytearray | memoryview) -> int:
    """
    Декодирование big-endian unsigned буфера в целое.

    Для value в пределах ширины n:
        big_from_bytes(padded_big_bytes(value, n)) == value

    Examples:
        >>> big_from_bytes(b'\\x00\\x00\\x02\\x00')
        512
        >>> big_from_bytes(b'')
        0
    """
    return int.from_bytes(bytes(data), "big", signed=False)
