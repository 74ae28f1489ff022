"""
Distribution Config — конфигурация функций распределений

Два переключателя:
- backend: источник erf/gamma (native / portable)
- normal_ppf_method: алгоритм квантили нормального распределения

Конфигурация immutable; экземпляры распределений получают её при
создании и не меняют состояния между вызовами.
"""

import logging
import os
from dataclasses import dataclass
from typing import Final, Mapping, Optional

from distrs.core.domain.distribution import MathBackend, NormalPpfMethod

LOG = logging.getLogger(__name__)

ENV_MATH_BACKEND: Final[str] = "DISTRS_MATH_BACKEND"
ENV_NORMAL_PPF_METHOD: Final[str] = "DISTRS_NORMAL_PPF_METHOD"


@dataclass(frozen=True)
class DistributionConfig:
    """Конфигурация NormalDistribution / StudentsT.

    По умолчанию erf/gamma берутся из math интерпретатора, а квантиль
    нормального распределения считается по AS 241.
    """

    backend: MathBackend = MathBackend.NATIVE
    normal_ppf_method: NormalPpfMethod = NormalPpfMethod.AS241

    def __post_init__(self) -> None:
        # Строки приводятся к enum; неизвестное значение → ValueError
        object.__setattr__(self, "backend", _coerce(MathBackend, self.backend, "backend"))
        object.__setattr__(
            self,
            "normal_ppf_method",
            _coerce(NormalPpfMethod, self.normal_ppf_method, "normal_ppf_method"),
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DistributionConfig":
        """
        Загрузка конфигурации из переменных окружения.

        Переменные:
            DISTRS_MATH_BACKEND: native | portable
            DISTRS_NORMAL_PPF_METHOD: as241 | inverse_erf

        Args:
            environ: Источник переменных (default: os.environ)

        Raises:
            ValueError: Если значение переменной неизвестно
        """
        if environ is None:
            environ = os.environ

        kwargs = {}
        backend = environ.get(ENV_MATH_BACKEND)
        if backend:
            kwargs["backend"] = backend.strip().lower()
        method = environ.get(ENV_NORMAL_PPF_METHOD)
        if method:
            kwargs["normal_ppf_method"] = method.strip().lower()

        config = cls(**kwargs)
        LOG.debug("Loaded distribution config from environment: %s", config)
        return config


def _coerce(enum_type, value, field_name: str):
    try:
        return enum_type(value)
    except ValueError:
        raise ValueError(
            f"{field_name} must be one of {[m.value for m in enum_type]}, got {value!r}"
        ) from None
