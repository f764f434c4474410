"""
Domain models and value objects.

Contains text/JSON forms of the 256-bit word used by higher layers.
"""

from src.core.domain.word import (
    Decimal256,
    HexOrDecimal256,
    Word256Quantity,
    word_to_decimal,
    word_to_hex,
)

__all__ = [
    # Types
    "Decimal256",
    "HexOrDecimal256",
    # Models
    "Word256Quantity",
    # Functions
    "word_to_decimal",
    "word_to_hex",
]
