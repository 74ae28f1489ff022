"""
Numerical Safeguards — IEEE-754 примитивы

Модуль содержит вспомогательные операции, на которых строятся все
аппроксимации пакета:
- Детекция NaN/Inf во входных параметрах
- Проверка целочисленности float-аргумента (полюса Γ, ветви Hill 395)
- Разделение знака и модуля для нечётных функций (erf, inverse_erf)
- Деление с семантикой IEEE-754 (без ZeroDivisionError)
- Вычисление полиномов по схеме Горнера
- Приведение числового аргумента к float без OverflowError

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция модуля не выбрасывает исключение для числового входа
2. NaN пропагирует как в IEEE-754 (не заменяется fallback-значением)
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final, Sequence

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

NAN: Final[float] = float("nan")
INF: Final[float] = float("inf")
NEG_INF: Final[float] = float("-inf")


# =============================================================================
# ПРИВЕДЕНИЕ АРГУМЕНТОВ
# =============================================================================


def to_float(value: float) -> float:
    """
    Приведение числового аргумента (int, float, Fraction, ...) к float.

    Целые за пределами диапазона double дают ±Inf вместо OverflowError,
    как и float-арифметика при переполнении. Строки не являются числами
    и отклоняются (float("3") их бы молча принял).

    Raises:
        TypeError: Если value — str/bytes или не приводится к float

    Examples:
        >>> to_float(3)
        3.0
        >>> to_float(10**400)
        inf
        >>> to_float(-(10**400))
        -inf
    """
    if isinstance(value, (str, bytes, bytearray)):
        raise TypeError(f"Expected a real number, got {type(value).__name__}: {value!r}")
    try:
        return float(value)
    except OverflowError:
        return INF if value > 0 else NEG_INF


# =============================================================================
# NaN/Inf ДЕТЕКЦИЯ
# =============================================================================


def any_nan(*values: float) -> bool:
    """
    Проверка, содержит ли набор аргументов хотя бы один NaN.

    Examples:
        >>> any_nan(1.0, 2.0)
        False
        >>> any_nan(1.0, float('nan'))
        True
        >>> any_nan(float('inf'))
        False
    """
    return any(math.isnan(v) for v in values)


def is_whole_number(value: float) -> bool:
    """
    Проверка, что конечный float не имеет дробной части.

    Для NaN и ±Inf возвращает False (math.trunc для них выбрасывает
    исключение, поэтому проверка finite выполняется первой).

    Examples:
        >>> is_whole_number(3.0)
        True
        >>> is_whole_number(-2.0)
        True
        >>> is_whole_number(2.5)
        False
        >>> is_whole_number(float('inf'))
        False
    """
    if not math.isfinite(value):
        return False
    return math.trunc(value) == value


def split_sign(value: float) -> tuple[float, float]:
    """
    Разделение значения на знак и модуль.

    Используется нечётными функциями: модуль обрабатывается, знак
    восстанавливается в конце.

    Returns:
        (sign, magnitude): sign равен -1.0 для отрицательных, иначе 1.0

    Examples:
        >>> split_sign(-2.5)
        (-1.0, 2.5)
        >>> split_sign(0.0)
        (1.0, 0.0)
    """
    if value < 0.0:
        return (-1.0, -value)
    return (1.0, value)


# =============================================================================
# ДЕЛЕНИЕ И ПОЛИНОМЫ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с семантикой IEEE-754.

    Python выбрасывает ZeroDivisionError при делении float на ноль;
    здесь результат совпадает с аппаратным делением:
    - x / ±0 → ±Inf (знак = знак x * знак нуля)
    - 0 / 0 → NaN
    - NaN / 0 → NaN

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(6.0, 3.0)
        2.0
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or math.isnan(numerator):
        return NAN

    return math.copysign(INF, numerator) * math.copysign(1.0, denominator)


def horner(coefficients: Sequence[float], x: float) -> float:
    """
    Значение полинома по схеме Горнера.

    Коэффициенты перечислены от старшей степени к младшей:
    horner([c_n, ..., c_1, c_0], x) = (((c_n * x + c_{n-1}) * x + ...) * x + c_0

    Examples:
        >>> horner([2.0, 3.0, 1.0], 2.0)  # 2x^2 + 3x + 1
        15.0
        >>> horner([5.0], 10.0)
        5.0
    """
    result = 0.0
    for c in coefficients:
        result = result * x + c
    return result

