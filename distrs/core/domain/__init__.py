"""
Domain models and value objects.

Contains enums and immutable result models shared by the distributions.
"""

from distrs.core.domain.distribution import (
    ConfidenceInterval,
    DistributionKind,
    MathBackend,
    NormalPpfMethod,
)

__all__ = [
    "ConfidenceInterval",
    "DistributionKind",
    "MathBackend",
    "NormalPpfMethod",
]
