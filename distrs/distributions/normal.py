"""Normal Distribution — pdf/cdf/sf/ppf для N(mean, std_dev)

Все функции тотальны: невалидные параметры (std_dev <= 0, p вне [0, 1])
и NaN во входе дают NaN, исключения не выбрасываются.

Квантиль:
- AS241 (default): Wichura, M. J. (1988). Algorithm AS 241: The Percentage
  Points of the Normal Distribution. Applied Statistics, 37(3), 477-484.
- INVERSE_ERF: mean + std_dev * sqrt(2) * inverse_erf(2p - 1)
"""

import logging
import math
from typing import Final, Optional

from distrs.core.config import DistributionConfig
from distrs.core.domain.distribution import (
    ConfidenceInterval,
    DistributionKind,
    NormalPpfMethod,
)
from distrs.core.math.erf import inverse_erf
from distrs.core.math.host_math import HostMath, resolve_host_math
from distrs.core.math.numerical_safeguards import (
    INF,
    NAN,
    NEG_INF,
    any_nan,
    horner,
    to_float,
)

LOG = logging.getLogger(__name__)


# =============================================================================
# AS 241 КОЭФФИЦИЕНТЫ (от старшей степени к младшей)
# =============================================================================

# Центральная область |q| < 0.425, r = 0.180625 - q^2
AS241_A: Final[tuple[float, ...]] = (
    2.5090809287301226727e3,
    3.3430575583588128105e4,
    6.7265770927008700853e4,
    4.5921953931549871457e4,
    1.3731693765509461125e4,
    1.9715909503065514427e3,
    1.3314166789178437745e2,
    3.3871328727963666080e0,
)
AS241_B: Final[tuple[float, ...]] = (
    5.2264952788528545610e3,
    2.8729085735721942674e4,
    3.9307895800092710610e4,
    2.1213794301586595867e4,
    5.3941960214247511077e3,
    6.8718700749205790830e2,
    4.2313330701600911252e1,
    1.0,
)

# Промежуточный хвост r < 5, r -= 1.6
AS241_C: Final[tuple[float, ...]] = (
    7.74545014278341407640e-4,
    2.27238449892691845833e-2,
    2.41780725177450611770e-1,
    1.27045825245236838258e0,
    3.64784832476320460504e0,
    5.76949722146069140550e0,
    4.63033784615654529590e0,
    1.42343711074968357734e0,
)
AS241_D: Final[tuple[float, ...]] = (
    1.05075007164441684324e-9,
    5.47593808499534494600e-4,
    1.51986665636164571966e-2,
    1.48103976427480074590e-1,
    6.89767334985100004550e-1,
    1.67638483018380384940e0,
    2.05319162663775882187e0,
    1.0,
)

# Дальний хвост r >= 5, r -= 5.0 (до p ~ 1e-300)
AS241_E: Final[tuple[float, ...]] = (
    2.01033439929228813265e-7,
    2.71155556874348757815e-5,
    1.24266094738807843860e-3,
    2.65321895265761230930e-2,
    2.96560571828504891230e-1,
    1.78482653991729133580e0,
    5.46378491116411436990e0,
    6.65790464350110377720e0,
)
AS241_F: Final[tuple[float, ...]] = (
    2.04426310338993978564e-15,
    1.42151175831644588870e-7,
    1.84631831751005468180e-5,
    7.86869131145613259100e-4,
    1.48753612908506148525e-2,
    1.36929880922735805310e-1,
    5.99832206555887937690e-1,
    1.0,
)

AS241_CENTRAL_BOUND: Final[float] = 0.425
AS241_CENTRAL_R0: Final[float] = 0.180625
AS241_TAIL_SPLIT: Final[float] = 5.0
AS241_TAIL_SHIFT: Final[float] = 1.6

_SQRT_2: Final[float] = math.sqrt(2.0)
_SQRT_2PI: Final[float] = math.sqrt(2.0 * math.pi)


# =============================================================================
# NORMAL DISTRIBUTION
# =============================================================================


class NormalDistribution:
    """Нормальное распределение N(mean, std_dev).

    Экземпляр не хранит параметров распределения: mean/std_dev передаются
    в каждый вызов. Состояние экземпляра — только конфигурация и HostMath.
    """

    def __init__(self, config: Optional[DistributionConfig] = None):
        """
        Args:
            config: Конфигурация (default: DistributionConfig())
        """
        self.config = config or DistributionConfig()
        self.math: HostMath = resolve_host_math(self.config.backend)
        LOG.debug("NormalDistribution created with %s", self.config)

    # -------------------------------------------------------------------------
    # Density / distribution
    # -------------------------------------------------------------------------

    def pdf(self, x: float, mean: float = 0.0, std_dev: float = 1.0) -> float:
        """
        Плотность: 1 / (std_dev * sqrt(2*pi)) * exp(-0.5 * ((x - mean) / std_dev)^2)

        Returns:
            Плотность; 0 при экспоненте -Inf; NaN для std_dev <= 0 или NaN
        """
        x, mean, std_dev = to_float(x), to_float(mean), to_float(std_dev)
        if not _valid_params(mean, std_dev) or math.isnan(x):
            return NAN

        n = (x - mean) / std_dev
        return (1.0 / (std_dev * _SQRT_2PI)) * self.math.exp(-0.5 * n * n)

    def cdf(self, x: float, mean: float = 0.0, std_dev: float = 1.0) -> float:
        """
        Функция распределения: 0.5 * (1 + erf((x - mean) / (std_dev * sqrt(2))))

        Returns:
            Вероятность в [0, 1]; cdf(-Inf) = 0, cdf(+Inf) = 1; NaN как у pdf
        """
        x, mean, std_dev = to_float(x), to_float(mean), to_float(std_dev)
        if not _valid_params(mean, std_dev) or math.isnan(x):
            return NAN

        return 0.5 * (1.0 + self.math.erf((x - mean) / (std_dev * _SQRT_2)))

    def sf(self, x: float, mean: float = 0.0, std_dev: float = 1.0) -> float:
        """
        Функция выживания 1 - cdf(x), через отражение относительно mean:
        sf(x) = cdf(2 * mean - x).
        """
        x, mean, std_dev = to_float(x), to_float(mean), to_float(std_dev)
        if not _valid_params(mean, std_dev) or math.isnan(x):
            return NAN

        return 0.5 * (1.0 + self.math.erf((mean - x) / (std_dev * _SQRT_2)))

    # -------------------------------------------------------------------------
    # Quantile
    # -------------------------------------------------------------------------

    def ppf(self, p: float, mean: float = 0.0, std_dev: float = 1.0) -> float:
        """
        Квантиль (percent-point function).

        Args:
            p: Вероятность в [0, 1]
            mean: Среднее
            std_dev: Стандартное отклонение (> 0)

        Returns:
            - -Inf при p = 0, +Inf при p = 1
            - NaN для p вне [0, 1], std_dev <= 0 или NaN во входе
        """
        p, mean, std_dev = to_float(p), to_float(mean), to_float(std_dev)
        if not (0.0 <= p <= 1.0) or not _valid_params(mean, std_dev):
            return NAN

        if p == 0.0:
            return NEG_INF

        if p == 1.0:
            return INF

        if self.config.normal_ppf_method is NormalPpfMethod.INVERSE_ERF:
            return mean + std_dev * _SQRT_2 * inverse_erf(2.0 * p - 1.0)

        return mean + std_dev * self._as241(p)

    def _as241(self, p: float) -> float:
        # Стандартная нормальная квантиль для p в (0, 1)
        q = p - 0.5
        if abs(q) < AS241_CENTRAL_BOUND:
            r = AS241_CENTRAL_R0 - q * q
            return q * horner(AS241_A, r) / horner(AS241_B, r)

        r = p if q < 0.0 else 1.0 - p
        r = self.math.sqrt(-self.math.ln(r))
        sign = -1.0 if q < 0.0 else 1.0

        if r < AS241_TAIL_SPLIT:
            r -= AS241_TAIL_SHIFT
            return sign * horner(AS241_C, r) / horner(AS241_D, r)

        r -= AS241_TAIL_SPLIT
        return sign * horner(AS241_E, r) / horner(AS241_F, r)

    # -------------------------------------------------------------------------
    # Inference helpers
    # -------------------------------------------------------------------------

    def interval(
        self, confidence: float, mean: float = 0.0, std_dev: float = 1.0
    ) -> ConfidenceInterval:
        """
        Интервал с равными хвостами, содержащий долю confidence массы.

        Args:
            confidence: Уровень доверия в [0, 1] (0.95 → квантили 0.025 и 0.975)

        Returns:
            ConfidenceInterval; NaN-границы для невалидных параметров
        """
        confidence, mean, std_dev = to_float(confidence), to_float(mean), to_float(std_dev)
        tail = (1.0 - confidence) / 2.0
        return ConfidenceInterval(
            distribution=DistributionKind.NORMAL,
            confidence=confidence,
            lower=self.ppf(tail, mean, std_dev),
            upper=self.ppf(1.0 - tail, mean, std_dev),
            center=mean,
            mean=mean,
            std_dev=std_dev,
        )

    def two_sided_p_value(self, z: float) -> float:
        """
        Двусторонний p-value для z-статистики: 2 * sf(|z|) по N(0, 1).
        """
        return 2.0 * self.sf(abs(z))


def _valid_params(mean: float, std_dev: float) -> bool:
    # std_dev > 0 ложно и для NaN
    return not any_nan(mean) and std_dev > 0.0
