"""
HostMath — capability-интерфейс математических примитивов

Функции распределений не обращаются к модулю math напрямую: они получают
HostMath и не зависят от того, какой backend его реализует.

Backends:
- NativeHostMath: erf/gamma из math интерпретатора (libm платформы)
- PortableHostMath: erf (Winitzki) и gamma (Lanczos) из этого пакета

Оба backend разделяют IEEE-754 примитивы (exp, ln, sqrt, sin, cos, atan, pow)
и одинаковый контракт gamma: None в полюсах, +Inf при переполнении.
"""

import logging
import math
from typing import Optional, Protocol, Union

from distrs.core.domain.distribution import MathBackend
from distrs.core.math import primitives
from distrs.core.math.erf import erf as approx_erf
from distrs.core.math.gamma import gamma as approx_gamma
from distrs.core.math.gamma import is_pole
from distrs.core.math.numerical_safeguards import INF

LOG = logging.getLogger(__name__)


# =============================================================================
# PROTOCOL
# =============================================================================


class HostMath(Protocol):
    """Набор примитивов, потребляемых функциями распределений."""

    name: str

    def exp(self, x: float) -> float: ...

    def ln(self, x: float) -> float: ...

    def sqrt(self, x: float) -> float: ...

    def sin(self, x: float) -> float: ...

    def cos(self, x: float) -> float: ...

    def atan(self, x: float) -> float: ...

    def pow(self, x: float, y: float) -> float: ...

    def erf(self, x: float) -> float: ...

    def gamma(self, x: float) -> Optional[float]: ...


# =============================================================================
# BACKENDS
# =============================================================================


class _IEEEPrimitives:
    """Общие IEEE-754 примитивы для всех backend."""

    name = "base"

    @staticmethod
    def exp(x: float) -> float:
        return primitives.exp(x)

    @staticmethod
    def ln(x: float) -> float:
        return primitives.ln(x)

    @staticmethod
    def sqrt(x: float) -> float:
        return primitives.sqrt(x)

    @staticmethod
    def sin(x: float) -> float:
        return primitives.sin(x)

    @staticmethod
    def cos(x: float) -> float:
        return primitives.cos(x)

    @staticmethod
    def atan(x: float) -> float:
        return primitives.atan(x)

    @staticmethod
    def pow(x: float, y: float) -> float:
        return primitives.pow(x, y)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class NativeHostMath(_IEEEPrimitives):
    """
    Backend на основе math.erf / math.gamma.

    math.gamma выбрасывает ValueError в полюсах и OverflowError для больших
    аргументов; здесь это приводится к контракту пакета (None / +Inf).
    """

    name = MathBackend.NATIVE.value

    @staticmethod
    def erf(x: float) -> float:
        return math.erf(x)

    @staticmethod
    def gamma(x: float) -> Optional[float]:
        if math.isnan(x):
            return x
        if is_pole(x):
            return None
        if x == INF:
            return INF
        try:
            return math.gamma(x)
        except OverflowError:
            # Для x < 0 знак Γ(x) равен (-1)^ceil(-x)
            if x > 0.0 or math.ceil(-x) % 2 == 0:
                return INF
            return -INF


class PortableHostMath(_IEEEPrimitives):
    """Backend на основе аппроксимаций Winitzki (erf) и Lanczos (gamma)."""

    name = MathBackend.PORTABLE.value

    @staticmethod
    def erf(x: float) -> float:
        return approx_erf(x)

    @staticmethod
    def gamma(x: float) -> Optional[float]:
        return approx_gamma(x)


_BACKENDS: dict[MathBackend, HostMath] = {
    MathBackend.NATIVE: NativeHostMath(),
    MathBackend.PORTABLE: PortableHostMath(),
}


def resolve_host_math(backend: Union[MathBackend, str] = MathBackend.NATIVE) -> HostMath:
    """
    Получение экземпляра HostMath по имени backend.

    Args:
        backend: MathBackend или его строковое значение ('native' / 'portable')

    Returns:
        Разделяемый (stateless) экземпляр backend

    Raises:
        ValueError: Если backend неизвестен
    """
    try:
        key = MathBackend(backend)
    except ValueError:
        raise ValueError(
            f"Unknown math backend {backend!r}, "
            f"expected one of {[b.value for b in MathBackend]}"
        ) from None

    host_math = _BACKENDS[key]
    LOG.debug("Resolved math backend %s -> %r", key.value, host_math)
    return host_math
