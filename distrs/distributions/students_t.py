"""Student's t Distribution — pdf/cdf/sf/ppf для t(n)

Hill, G. W. (1970). Algorithm 395: Student's t-distribution.
Communications of the ACM, 13(10), 617-619.

Hill, G. W. (1970). Algorithm 396: Student's t-quantiles.
Communications of the ACM, 13(10), 619-620.

Степени свободы n — вещественное число, n >= 1; n = +Inf эквивалентно
стандартному нормальному распределению и обрабатывается отдельно.
Невалидные n, p вне [0, 1] и NaN во входе дают NaN.

Ветви CDF (выбор зависит только от (n, t = x^2)):
1. Асимптотическая: n нецелое, или n >= 20 и t < n, или n > 200
2. Косинус-ряд: целое n < 20 и t < 4
3. Хвостовой ряд: остальные случаи
"""

import logging
import math
from typing import Final, Optional

from distrs.core.config import DistributionConfig
from distrs.core.domain.distribution import ConfidenceInterval, DistributionKind
from distrs.core.math.host_math import HostMath, resolve_host_math
from distrs.core.math.numerical_safeguards import (
    INF,
    NAN,
    NEG_INF,
    ieee_divide,
    is_whole_number,
    to_float,
)
from distrs.distributions.normal import NormalDistribution

LOG = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ВЕТВЕЙ (Hill 1970)
# =============================================================================

# Минимальные допустимые степени свободы
MIN_DEGREES_OF_FREEDOM: Final[float] = 1.0

# Асимптотическая ветвь CDF: n >= LARGE_DF и t < n, или n > HUGE_DF
CDF_LARGE_DF: Final[int] = 20
CDF_HUGE_DF: Final[int] = 200

# Косинус-ряд для t < COSINE_SERIES_MAX_T (при целом n < LARGE_DF)
COSINE_SERIES_MAX_T: Final[float] = 4.0

# Ниже этого y ln(1 + y) заменяется на y. Значение из листинга
# Hill (1970), Algorithm 395: "if y > 1.0E-6 then y := ln(b)".
# Порог 1e-5 меняет cdf меньше чем на 1e-10.
LOG_SWITCH_Y: Final[float] = 1e-6

# Поправка малых n в асимптотике квантили
PPF_SMALL_DF: Final[float] = 5.0

# Начиная с n/2 выше этого порога Γ переполняется: отношение Γ считается рядом
GAMMA_RATIO_ASYMPTOTIC_HALF_DF: Final[float] = 150.0

_TWO_OVER_PI: Final[float] = 2.0 / math.pi
_HALF_PI: Final[float] = math.pi / 2.0


# =============================================================================
# STUDENT'S T
# =============================================================================


class StudentsT:
    """t-распределение Стьюдента с n степенями свободы.

    Для n = +Inf, нецелых и больших n делегирует в NormalDistribution
    с той же конфигурацией.
    """

    def __init__(self, config: Optional[DistributionConfig] = None):
        """
        Args:
            config: Конфигурация (default: DistributionConfig())
        """
        self.config = config or DistributionConfig()
        self.math: HostMath = resolve_host_math(self.config.backend)
        self.normal = NormalDistribution(self.config)
        LOG.debug("StudentsT created with %s", self.config)

    # -------------------------------------------------------------------------
    # PDF
    # -------------------------------------------------------------------------

    def pdf(self, x: float, n: float) -> float:
        """
        Плотность: Γ((n+1)/2) / (sqrt(n*pi) * Γ(n/2)) * (1 + x^2/n)^(-(n+1)/2)

        Returns:
            Плотность; pdf нормального распределения для n = +Inf;
            NaN для n < 1 или NaN во входе
        """
        n = _as_degrees_of_freedom(n)
        x = to_float(x)
        if not _valid_df(n) or math.isnan(x):
            return NAN

        if n == INF:
            return self.normal.pdf(x)

        m = self.math
        kernel = m.pow(1.0 + x * x / n, -(n + 1.0) / 2.0)

        if n / 2.0 > GAMMA_RATIO_ASYMPTOTIC_HALF_DF:
            return _half_integer_gamma_ratio(n / 2.0) / m.sqrt(n * math.pi) * kernel

        numerator = m.gamma((n + 1.0) / 2.0)
        denominator = m.gamma(n / 2.0)
        if numerator is None or denominator is None:
            return NAN

        return numerator / (m.sqrt(n * math.pi) * denominator) * kernel

    # -------------------------------------------------------------------------
    # CDF (Algorithm 395)
    # -------------------------------------------------------------------------

    def cdf(self, x: float, n: float) -> float:
        """
        Функция распределения.

        Алгоритм считает одностороннюю вероятность P(T > |x|) и отражает её:
        cdf = start + sign * upper_tail, где (start, sign) = (0, +1) для x < 0
        и (1, -1) иначе.

        Returns:
            Вероятность в [0, 1]; 0/1 для x = -Inf/+Inf;
            NaN для n < 1 или NaN во входе
        """
        n = _as_degrees_of_freedom(n)
        x = to_float(x)
        if not _valid_df(n) or math.isnan(x):
            return NAN

        if x == NEG_INF:
            return 0.0
        if x == INF:
            return 1.0

        if n == INF:
            return self.normal.cdf(x)

        start, sign = (0.0, 1.0) if x < 0.0 else (1.0, -1.0)

        t = x * x
        if math.isinf(t):
            # |x| конечен, но x^2 переполняется: хвост равен нулю
            return start

        y = t / n
        b = 1.0 + y

        if not is_whole_number(n) or (n >= CDF_LARGE_DF and t < n) or n > CDF_HUGE_DF:
            upper_tail = self._asymptotic_upper_tail(y, b, n)
        elif n < CDF_LARGE_DF and t < COSINE_SERIES_MAX_T:
            upper_tail = self._cosine_series_upper_tail(y, b, int(n))
        else:
            upper_tail = self._tail_series_upper_tail(b, int(n))

        return start + sign * upper_tail

    def sf(self, x: float, n: float) -> float:
        """Функция выживания 1 - cdf(x) = cdf(-x) (распределение симметрично)."""
        return self.cdf(-x, n)

    def _asymptotic_upper_tail(self, y: float, b: float, n: float) -> float:
        # Поправка к нормальному отклонению для больших или нецелых n
        if y > LOG_SWITCH_Y:
            y = self.math.ln(b)
        a = n - 0.5
        b = 48.0 * a * a
        y *= a

        if math.isinf(b) or math.isinf(y * y):
            # Поправка (1 + O(y/b)) неотличима от 1, а её полином переполняется
            return self.normal.cdf(-self.math.sqrt(y))

        y = (
            ((((-0.4 * y - 3.3) * y - 24.0) * y - 85.5) / (0.8 * y * y + 100.0 + b) + y + 3.0) / b
            + 1.0
        ) * self.math.sqrt(y)
        return self.normal.cdf(-y)

    def _cosine_series_upper_tail(self, y: float, b: float, df: int) -> float:
        # Вложенное суммирование косинус-ряда
        y = self.math.sqrt(y)
        a = 0.0 if df == 1 else y

        if df > 1:
            df -= 2
            while df > 1:
                a = (df - 1) / (b * df) * a + y
                df -= 2

        a = self._close_recurrence(a, y, b, df)
        return (1.0 - a) / 2.0

    def _tail_series_upper_tail(self, b: float, df: int) -> float:
        # Разложение хвоста для больших t; ряд по j с шагом 2 до сходимости
        z = 1.0
        a = self.math.sqrt(b)
        y = a * df
        j = 0
        while a != z:
            j += 2
            z = a
            y = y * (j - 1) / (b * j)
            a += y / (df + j)

        a = -a
        while df > 1:
            a = (df - 1) / (b * df) * a
            df -= 2

        a = self._close_recurrence(a, 0.0, b, df)
        return -a / 2.0

    def _close_recurrence(self, a: float, y: float, b: float, df: int) -> float:
        # Замыкание рекуррентности: чётный остаток — алгебраически, нечётный — через atan
        if df == 0:
            return a / self.math.sqrt(b)
        return (self.math.atan(y) + a / b) * _TWO_OVER_PI

    # -------------------------------------------------------------------------
    # PPF (Algorithm 396)
    # -------------------------------------------------------------------------

    def ppf(self, p: float, n: float) -> float:
        """
        Квантиль.

        Args:
            p: Вероятность в [0, 1]
            n: Степени свободы (>= 1, допускается +Inf)

        Returns:
            - -Inf при p = 0, +Inf при p = 1
            - квантиль нормального распределения для n = +Inf
            - NaN для p вне [0, 1], n < 1 или NaN во входе
        """
        n = _as_degrees_of_freedom(n)
        p = to_float(p)
        if not (0.0 <= p <= 1.0) or not _valid_df(n):
            return NAN

        if p == 0.0:
            return NEG_INF
        if p == 1.0:
            return INF

        if n == INF:
            return self.normal.ppf(p)

        # Распределение симметрично: работаем с верхним хвостом,
        # двусторонняя вероятность p2 = 2 * (1 - p_upper)
        if p < 0.5:
            sign, two_tail = -1.0, 2.0 * p
        else:
            sign, two_tail = 1.0, 2.0 * (1.0 - p)

        m = self.math

        if n == 2.0:
            return sign * m.sqrt(2.0 / (two_tail * (2.0 - two_tail)) - 2.0)

        if n == 1.0:
            angle = two_tail * _HALF_PI
            return sign * m.cos(angle) / m.sin(angle)

        return sign * self._hill_quantile(two_tail, n)

    def _hill_quantile(self, p: float, n: float) -> float:
        # p — двусторонняя вероятность в (0, 1]
        m = self.math
        a = 1.0 / (n - 0.5)
        b = ieee_divide(48.0, a * a)
        c = ((20700.0 * a / b - 98.0) * a - 16.0) * a + 96.36
        d = ((94.5 / (b + c) - 3.0) / b + 1.0) * m.sqrt(a * _HALF_PI) * n
        x = d * p
        y = m.pow(x, 2.0 / n)

        if y > 0.05 + a:
            # Асимптотическое обращение относительно нормального распределения
            x = self.normal.ppf(p * 0.5)
            y = x * x
            if n < PPF_SMALL_DF:
                c += 0.3 * (n - 4.5) * (x + 0.6)
            c += (((0.05 * d * x - 5.0) * x - 7.0) * x - 2.0) * x + b
            y = (((((0.4 * y + 6.3) * y + 36.0) * y + 94.5) / c - y - 3.0) / b + 1.0) * x
            y = a * y * y
            y = m.exp(y) - 1.0 if y > 0.002 else 0.5 * y * y + y
        else:
            inner = ieee_divide(n + 6.0, n * y) - 0.089 * d - 0.822
            y = (
                (ieee_divide(1.0, inner * (n + 2.0) * 3.0) + 0.5 / (n + 4.0)) * y - 1.0
            ) * (n + 1.0) / (n + 2.0) + ieee_divide(1.0, y)

        return m.sqrt(n * y)

    # -------------------------------------------------------------------------
    # Inference helpers
    # -------------------------------------------------------------------------

    def interval(self, confidence: float, n: float) -> ConfidenceInterval:
        """
        Интервал с равными хвостами вокруг нуля для t(n).

        Например, для t-интервала среднего: mean ± se * upper.
        """
        confidence = to_float(confidence)
        tail = (1.0 - confidence) / 2.0
        return ConfidenceInterval(
            distribution=DistributionKind.STUDENTS_T,
            confidence=confidence,
            lower=self.ppf(tail, n),
            upper=self.ppf(1.0 - tail, n),
            center=0.0,
            degrees_of_freedom=_as_degrees_of_freedom(n),
        )

    def two_sided_p_value(self, t: float, n: float) -> float:
        """Двусторонний p-value для t-статистики: 2 * sf(|t|, n)."""
        return 2.0 * self.sf(abs(t), n)


# =============================================================================
# HELPERS
# =============================================================================


def _as_degrees_of_freedom(n: float) -> float:
    # int и float приводятся к одному вещественному представлению; 10**400 → +Inf
    return to_float(n)


def _valid_df(n: float) -> bool:
    # Ложно и для NaN
    return n >= MIN_DEGREES_OF_FREEDOM


def _half_integer_gamma_ratio(k: float) -> float:
    """
    Γ(k + 1/2) / Γ(k) асимптотическим рядом для больших k.

    sqrt(k) * (1 - 1/(8k) + 1/(128k^2) + 5/(1024k^3) - 21/(32768k^4))
    """
    inv = 1.0 / k
    series = 1.0 + inv * (-1.0 / 8.0 + inv * (1.0 / 128.0 + inv * (5.0 / 1024.0 - inv * 21.0 / 32768.0)))
    return math.sqrt(k) * series
