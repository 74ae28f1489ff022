"""
Transcendental primitives с семантикой IEEE-754

Обёртки над модулем math, которые никогда не выбрасывают исключений:
- math.log(0) → ValueError, здесь ln(0) = -Inf
- math.sqrt(-1) → ValueError, здесь sqrt(-1) = NaN
- math.exp(1000) → OverflowError, здесь exp(1000) = +Inf
- math.sin(Inf) → ValueError, здесь sin(Inf) = NaN
- math.pow(10, 400) → OverflowError, здесь pow(10, 400) = +Inf

Аппроксимации erf/gamma и функции распределений полагаются на естественную
пропагацию ±Inf/NaN через арифметику (например, inverse_erf(1) = +Inf
через ln(0) = -Inf), поэтому все вызовы идут через этот модуль.
"""

import math

from distrs.core.math.numerical_safeguards import INF, NAN, NEG_INF, is_whole_number


def exp(x: float) -> float:
    """e^x; переполнение → +Inf."""
    try:
        return math.exp(x)
    except OverflowError:
        return INF


def ln(x: float) -> float:
    """Натуральный логарифм: ln(0) = -Inf, ln(x < 0) = NaN."""
    if x == 0.0:
        return NEG_INF
    if x < 0.0:
        return NAN
    return math.log(x)


def sqrt(x: float) -> float:
    """Квадратный корень: sqrt(x < 0) = NaN."""
    if x < 0.0:
        return NAN
    return math.sqrt(x)


def sin(x: float) -> float:
    """Синус: sin(±Inf) = NaN."""
    if math.isinf(x):
        return NAN
    return math.sin(x)


def cos(x: float) -> float:
    """Косинус: cos(±Inf) = NaN."""
    if math.isinf(x):
        return NAN
    return math.cos(x)


def atan(x: float) -> float:
    """Арктангенс (определён для всех x, включая ±Inf)."""
    return math.atan(x)


def pow(x: float, y: float) -> float:
    """
    x^y с семантикой C pow().

    - переполнение → ±Inf (знак отрицателен для x < 0 и нечётного целого y)
    - 0^(y < 0) → +Inf
    - x < 0 и нецелый y → NaN
    """
    try:
        return math.pow(x, y)
    except OverflowError:
        if x < 0.0 and _is_odd_integer(y):
            return NEG_INF
        return INF
    except ValueError:
        if x == 0.0:
            return INF
        return NAN


def _is_odd_integer(y: float) -> bool:
    return is_whole_number(y) and math.fmod(y, 2.0) != 0.0
