"""
Error Function — аппроксимация erf(x) и её обратной функции

Winitzki, S. (2008). A handy approximation for the error function and its inverse.

Обе функции нечётные: знак аргумента отделяется, вычисляется значение для
модуля, знак восстанавливается в конце.

Точность (не ULP-гарантия, а гладкая ошибка аппроксимации):
- erf (a = 0.14): абсолютная погрешность < 5e-4 на всей оси
- inverse_erf (a = 0.147): относительная погрешность < 3e-3 на (-1, 1)
"""

import math
from typing import Final

from distrs.core.math import primitives
from distrs.core.math.numerical_safeguards import split_sign, to_float

# Константа a для прямой аппроксимации erf
ERF_A: Final[float] = 0.14

# Константа a для обратной функции (точнее для inverse)
INVERSE_ERF_A: Final[float] = 0.147

_FOUR_OVER_PI: Final[float] = 4.0 / math.pi


def erf(x: float) -> float:
    """
    Аппроксимация функции ошибок Гаусса.

    erf(x) = sign(x) * sqrt(1 - exp(-x^2 * (4/pi + a*x^2) / (1 + a*x^2)))

    Args:
        x: Любое вещественное число (включая ±Inf)

    Returns:
        Значение в [-1, 1]; NaN для NaN

    Examples:
        >>> erf(0.0)
        0.0
        >>> erf(float('inf'))
        1.0
        >>> abs(erf(1.0) - 0.8427) < 5e-4
        True
    """
    sign, x = split_sign(to_float(x))
    x2 = x * x

    # При x^2 = Inf дробь вырождается в Inf/Inf; предел равен 1
    if math.isinf(x2):
        return sign

    ax2 = ERF_A * x2
    exponent = -x2 * (_FOUR_OVER_PI + ax2) / (1.0 + ax2)
    return sign * primitives.sqrt(1.0 - primitives.exp(exponent))


def inverse_erf(y: float) -> float:
    """
    Аппроксимация обратной функции ошибок.

    ln_term = ln(1 - y^2)
    f1 = 2 / (pi * a), f2 = ln_term / 2
    |x| = sqrt(sqrt((f1 + f2)^2 - ln_term / a) - f1 - f2)

    Args:
        y: Значение в [-1, 1]

    Returns:
        x такое, что erf(x) ≈ y:
        - inverse_erf(±1) = ±Inf (ln(0) = -Inf пропагирует через формулу)
        - |y| > 1 → NaN

    Examples:
        >>> inverse_erf(0.0)
        0.0
        >>> inverse_erf(1.0)
        inf
        >>> inverse_erf(-1.0)
        -inf
    """
    sign, y = split_sign(to_float(y))

    ln_term = primitives.ln(1.0 - y * y)
    f1 = 2.0 / (math.pi * INVERSE_ERF_A)
    f2 = ln_term / 2.0
    f3 = f1 + f2
    f4 = ln_term / INVERSE_ERF_A
    return sign * primitives.sqrt(-f1 - f2 + primitives.sqrt(f3 * f3 - f4))
