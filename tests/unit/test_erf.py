"""
Тесты для аппроксимации функции ошибок (Winitzki 2008)

Проверяет:
1. Точность erf относительно math.erf (абсолютная погрешность < 5e-4)
2. Точность inverse_erf (относительная погрешность < 3e-3)
3. Нечётность и граничные значения (±1, ±Inf, NaN)
"""

import math

import pytest

from distrs.core.math.erf import ERF_A, INVERSE_ERF_A, erf, inverse_erf
from distrs.core.math.numerical_safeguards import INF, NAN, NEG_INF

ERF_ABS_TOLERANCE = 5e-4
INVERSE_ERF_REL_TOLERANCE = 3e-3


# =============================================================================
# ERF
# =============================================================================


class TestErf:
    """Тесты для erf"""

    def test_constant(self) -> None:
        """a = 0.14"""
        assert ERF_A == 0.14

    def test_zero(self) -> None:
        """erf(0) = 0"""
        assert erf(0.0) == 0.0

    @pytest.mark.parametrize("x", [-3.0, -2.0, -1.0, -0.5, -0.1, 0.1, 0.5, 1.0, 2.0, 3.0, 5.0])
    def test_close_to_reference(self, x: float) -> None:
        """Абсолютная погрешность < 5e-4"""
        assert erf(x) == pytest.approx(math.erf(x), abs=ERF_ABS_TOLERANCE)

    def test_dense_grid_close_to_reference(self) -> None:
        """Погрешность < 5e-4 на сетке [-6, 6] с шагом 0.01"""
        for i in range(-600, 601):
            x = i / 100.0
            assert abs(erf(x) - math.erf(x)) < ERF_ABS_TOLERANCE, x

    @pytest.mark.parametrize("x", [0.3, 1.7, 4.2])
    def test_odd(self, x: float) -> None:
        """erf(-x) = -erf(x)"""
        assert erf(-x) == -erf(x)

    def test_infinities(self) -> None:
        """erf(±Inf) = ±1"""
        assert erf(INF) == 1.0
        assert erf(NEG_INF) == -1.0

    def test_huge_argument(self) -> None:
        """x^2 переполняется → ±1 без NaN"""
        assert erf(1e200) == 1.0
        assert erf(-1e200) == -1.0

    def test_huge_int_argument(self) -> None:
        """int вне диапазона double → ±1 без OverflowError"""
        assert erf(10**400) == 1.0
        assert erf(-(10**400)) == -1.0
        assert math.isnan(inverse_erf(10**400))

    def test_string_rejected(self) -> None:
        """Строка → TypeError"""
        with pytest.raises(TypeError):
            erf("0.5")

    def test_nan(self) -> None:
        """erf(NaN) = NaN"""
        assert math.isnan(erf(NAN))

    def test_bounded(self) -> None:
        """Значения в [-1, 1]"""
        for x in (0.01, 1.0, 10.0, 100.0):
            assert -1.0 <= erf(x) <= 1.0


# =============================================================================
# INVERSE ERF
# =============================================================================


class TestInverseErf:
    """Тесты для inverse_erf"""

    def test_constant(self) -> None:
        """a = 0.147"""
        assert INVERSE_ERF_A == 0.147

    def test_zero(self) -> None:
        """inverse_erf(0) = 0"""
        assert inverse_erf(0.0) == 0.0

    def test_plus_minus_one(self) -> None:
        """inverse_erf(±1) = ±Inf"""
        assert inverse_erf(1.0) == INF
        assert inverse_erf(-1.0) == NEG_INF

    @pytest.mark.parametrize("y", [1.0001, -1.0001, 2.0, -5.0])
    def test_out_of_domain_is_nan(self, y: float) -> None:
        """|y| > 1 → NaN"""
        assert math.isnan(inverse_erf(y))

    def test_nan(self) -> None:
        """inverse_erf(NaN) = NaN"""
        assert math.isnan(inverse_erf(NAN))

    @pytest.mark.parametrize("x", [0.05, 0.2, 0.5, 1.0, 1.5, 2.0])
    def test_inverts_reference_erf(self, x: float) -> None:
        """inverse_erf(math.erf(x)) ≈ x (относительно)"""
        assert inverse_erf(math.erf(x)) == pytest.approx(x, rel=INVERSE_ERF_REL_TOLERANCE)

    @pytest.mark.parametrize("y", [0.1, 0.5, 0.9, 0.999])
    def test_odd(self, y: float) -> None:
        """inverse_erf(-y) = -inverse_erf(y)"""
        assert inverse_erf(-y) == -inverse_erf(y)

    def test_monotone(self) -> None:
        """Строго возрастает на (-1, 1)"""
        values = [inverse_erf(i / 100.0) for i in range(-99, 100)]
        assert all(a < b for a, b in zip(values, values[1:]))
