"""Distributions — Normal и Student's t.

Классы принимают DistributionConfig и не хранят параметров распределения:
все параметры передаются в каждый вызов.
"""

from .normal import NormalDistribution
from .students_t import StudentsT

__all__ = [
    "NormalDistribution",
    "StudentsT",
]
