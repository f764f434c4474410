"""
Contract Validation Module

Модуль для валидации JSON контрактов 256-битных величин.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    WordQuantityValidator,
    load_word_quantity,
    validate_word_quantity,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "WordQuantityValidator",
    # Functions
    "validate_word_quantity",
    "load_word_quantity",
]
