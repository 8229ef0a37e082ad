"""
Contract Validation Module

Модуль для валидации JSON контрактов friendly_numbers.
"""

from .validators import (
    ContractValidator,
    NumberFormatOptionsValidator,
    SchemaLoader,
    validate_number_format_options,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "NumberFormatOptionsValidator",
    # Functions
    "validate_number_format_options",
]
