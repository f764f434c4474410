"""
Core math modules для 256-bit word

Примитивы 256-битного машинного слова: разбор, big-endian кодирование,
wraparound арифметика и битовые утилиты.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Word constants
    MAX_BIG63,
    MAX_BIG256,
    MAX_S256,
    MIN_S256,
    TT255,
    TT256,
    TT256M1,
    WORD_BITS,
    WORD_BYTES,
    # Exceptions
    WordPreconditionViolation,
    # Validation
    is_int,
    is_signed_word,
    is_unsigned_word,
    validate_int,
    validate_int_in_range,
    validate_non_negative_int,
    validate_unsigned_word,
)

# Bit & Comparison Utilities
from src.core.math.bits import (
    big_max,
    big_min,
    big_pow,
    bit_length,
    byte_length,
    first_bit_set,
)

# Byte Codec
from src.core.math.byte_codec import (
    big_endian_byte_at,
    big_from_bytes,
    byte_at,
    padded_big_bytes,
    read_bits,
)

# Word Arithmetic
from src.core.math.word_arithmetic import (
    exp_word,
    s256,
    u256,
    u256_bytes,
)

# Parser
from src.core.math.parser import (
    Big256ParseError,
    must_parse_big256,
    parse_big256,
)

__all__ = [
    # Numerical Safeguards — Word constants
    "MAX_BIG63",
    "MAX_BIG256",
    "MAX_S256",
    "MIN_S256",
    "TT255",
    "TT256",
    "TT256M1",
    "WORD_BITS",
    "WORD_BYTES",
    # Numerical Safeguards — Exceptions
    "WordPreconditionViolation",
    # Numerical Safeguards — Validation
    "is_int",
    "is_signed_word",
    "is_unsigned_word",
    "validate_int",
    "validate_int_in_range",
    "validate_non_negative_int",
    "validate_unsigned_word",
    # Bits
    "big_max",
    "big_min",
    "big_pow",
    "bit_length",
    "byte_length",
    "first_bit_set",
    # Byte Codec
    "big_endian_byte_at",
    "big_from_bytes",
    "byte_at",
    "padded_big_bytes",
    "read_bits",
    # Word Arithmetic
    "exp_word",
    "s256",
    "u256",
    "u256_bytes",
    # Parser — Exceptions
    "Big256ParseError",
    # Parser — Functions
    "must_parse_big256",
    "parse_big256",
]
