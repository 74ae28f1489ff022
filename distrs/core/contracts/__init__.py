"""
Contract Validation Module

Валидация сериализованных результатов пакета distrs против JSON Schema.
"""

from .validators import (
    ConfidenceIntervalValidator,
    ContractValidator,
    SchemaLoader,
    validate_confidence_interval,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConfidenceIntervalValidator",
    # Functions
    "validate_confidence_interval",
]
