"""
Distribution domain models — перечисления и результат интервальной оценки

Immutable Pydantic модели для результатов, которые уходят за пределы
пакета (сериализация, отчёты). Полная совместимость с JSON Schema
(distrs/core/contracts/schema/confidence_interval.json).
"""

import math
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class DistributionKind(str, Enum):
    """Распределение, для которого построен результат."""

    NORMAL = "NORMAL"
    STUDENTS_T = "STUDENTS_T"


class MathBackend(str, Enum):
    """
    Источник erf/gamma для функций распределений.

    NATIVE — math.erf / math.gamma интерпретатора
    PORTABLE — аппроксимации Winitzki / Lanczos этого пакета
    """

    NATIVE = "native"
    PORTABLE = "portable"


class NormalPpfMethod(str, Enum):
    """
    Алгоритм квантили нормального распределения.

    AS241 — Wichura (1988), высокая точность в хвостах
    INVERSE_ERF — mean + std_dev * sqrt(2) * inverse_erf(2p - 1), компактнее
    """

    AS241 = "as241"
    INVERSE_ERF = "inverse_erf"


# =============================================================================
# CONFIDENCE INTERVAL
# =============================================================================


class ConfidenceInterval(BaseModel):
    """
    Двусторонний интервал с равными хвостами.

    Поля не имеют ограничений диапазона: невалидный запрос (confidence вне
    (0, 1), std_dev <= 0, n < 1) даёт интервал с NaN-границами, а не
    ValidationError.
    """

    distribution: DistributionKind = Field(..., description="Распределение")
    confidence: float = Field(..., description="Уровень доверия (доля, например 0.95)")
    lower: float = Field(..., description="Нижняя граница (квантиль (1 - confidence) / 2)")
    upper: float = Field(..., description="Верхняя граница (квантиль (1 + confidence) / 2)")
    center: float = Field(..., description="Центр интервала (mean или 0 для t)")

    # Параметры распределения
    mean: Optional[float] = Field(None, description="Среднее (NORMAL, nullable)")
    std_dev: Optional[float] = Field(
        None, description="Стандартное отклонение (NORMAL, nullable)"
    )
    degrees_of_freedom: Optional[float] = Field(
        None, description="Степени свободы (STUDENTS_T, nullable)"
    )

    model_config = {"frozen": True}

    @property
    def width(self) -> float:
        """Ширина интервала upper - lower."""
        return self.upper - self.lower

    @property
    def is_valid(self) -> bool:
        """True если обе границы не NaN."""
        return not (math.isnan(self.lower) or math.isnan(self.upper))

    def contains(self, value: float) -> bool:
        """Проверка lower <= value <= upper (False для невалидного интервала)."""
        return self.lower <= value <= self.upper
