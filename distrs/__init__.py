"""
distrs — Normal и Student's t без numpy/scipy

PDF, CDF и квантиль (PPF) через замкнутые численные аппроксимации:
- erf / inverse_erf: Winitzki (2008)
- gamma: Lanczos (g = 7)
- квантиль нормального распределения: Wichura AS 241 (1988)
- t-распределение: Hill, Algorithms 395/396 (1970)

Функции уровня модуля используют конфигурацию по умолчанию
(DistributionConfig()); для другой конфигурации создайте
NormalDistribution(config) / StudentsT(config).
"""

from distrs.core.config import DistributionConfig
from distrs.core.domain import (
    ConfidenceInterval,
    DistributionKind,
    MathBackend,
    NormalPpfMethod,
)
from distrs.core.math import (
    HostMath,
    NativeHostMath,
    PortableHostMath,
    erf,
    gamma,
    inverse_erf,
    resolve_host_math,
)
from distrs.distributions import NormalDistribution, StudentsT

__version__ = "0.4.0"

_NORMAL = NormalDistribution()
_STUDENTS_T = StudentsT()


# =============================================================================
# NORMAL
# =============================================================================


def normal_pdf(x: float, mean: float = 0.0, std_dev: float = 1.0) -> float:
    """Плотность N(mean, std_dev) в точке x (NaN для невалидных параметров)."""
    return _NORMAL.pdf(x, mean, std_dev)


def normal_cdf(x: float, mean: float = 0.0, std_dev: float = 1.0) -> float:
    """P(X <= x) для X ~ N(mean, std_dev)."""
    return _NORMAL.cdf(x, mean, std_dev)


def normal_sf(x: float, mean: float = 0.0, std_dev: float = 1.0) -> float:
    """P(X > x) для X ~ N(mean, std_dev)."""
    return _NORMAL.sf(x, mean, std_dev)


def normal_ppf(p: float, mean: float = 0.0, std_dev: float = 1.0) -> float:
    """Квантиль N(mean, std_dev) уровня p (AS 241)."""
    return _NORMAL.ppf(p, mean, std_dev)


def normal_interval(
    confidence: float, mean: float = 0.0, std_dev: float = 1.0
) -> ConfidenceInterval:
    """Интервал с равными хвостами для N(mean, std_dev)."""
    return _NORMAL.interval(confidence, mean, std_dev)


# =============================================================================
# STUDENT'S T
# =============================================================================


def students_t_pdf(x: float, n: float) -> float:
    """Плотность t(n) в точке x (NaN для n < 1)."""
    return _STUDENTS_T.pdf(x, n)


def students_t_cdf(x: float, n: float) -> float:
    """P(T <= x) для T ~ t(n)."""
    return _STUDENTS_T.cdf(x, n)


def students_t_sf(x: float, n: float) -> float:
    """P(T > x) для T ~ t(n)."""
    return _STUDENTS_T.sf(x, n)


def students_t_ppf(p: float, n: float) -> float:
    """Квантиль t(n) уровня p."""
    return _STUDENTS_T.ppf(p, n)


def students_t_interval(confidence: float, n: float) -> ConfidenceInterval:
    """Интервал с равными хвостами для t(n)."""
    return _STUDENTS_T.interval(confidence, n)


def default_config() -> DistributionConfig:
    """Конфигурация, с которой работают функции уровня модуля."""
    return _NORMAL.config


__all__ = [
    # Config / models
    "DistributionConfig",
    "ConfidenceInterval",
    "DistributionKind",
    "MathBackend",
    "NormalPpfMethod",
    # HostMath
    "HostMath",
    "NativeHostMath",
    "PortableHostMath",
    "resolve_host_math",
    # Classes
    "NormalDistribution",
    "StudentsT",
    # Special functions
    "erf",
    "inverse_erf",
    "gamma",
    # Normal
    "normal_pdf",
    "normal_cdf",
    "normal_sf",
    "normal_ppf",
    "normal_interval",
    # Student's t
    "students_t_pdf",
    "students_t_cdf",
    "students_t_sf",
    "students_t_ppf",
    "students_t_interval",
    "default_config",
]
