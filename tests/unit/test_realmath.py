"""
Тесты для RealMath — вещественный адаптер над math

Проверяет:
1. Совпадение с math внутри вещественной области (бит-в-бит)
2. IEEE значения на полюсах и при переполнении
3. ValueError вне вещественной области (как у math)
4. Реэкспорт вещественных функций без комплексного продолжения
"""

import math

import pytest

from src.complexmath import realmath


# =============================================================================
# ТЕСТЫ: Совпадение с math
# =============================================================================


class TestMatchesMath:
    """Внутри области значения идентичны math"""

    @pytest.mark.parametrize(
        "name",
        ["exp", "sin", "cos", "tan", "sinh", "cosh", "tanh", "atan", "asinh"],
    )
    @pytest.mark.parametrize("x", [-3.5, -1.0, -0.25, 0.0, 0.5, 2.0, 10.0])
    def test_everywhere_defined(self, name: str, x: float) -> None:
        """Функции, определённые на всей оси"""
        assert getattr(realmath, name)(x) == getattr(math, name)(x)

    @pytest.mark.parametrize("name", ["log", "log2", "log10", "sqrt", "cbrt"])
    @pytest.mark.parametrize("x", [1e-10, 0.5, 1.0, 2.0, 1000.0])
    def test_non_negative_domain(self, name: str, x: float) -> None:
        """Функции на неотрицательной полуоси"""
        assert getattr(realmath, name)(x) == getattr(math, name)(x)

    @pytest.mark.parametrize("name", ["asin", "acos", "atanh"])
    @pytest.mark.parametrize("x", [-0.99, -0.5, 0.0, 0.3, 0.99])
    def test_unit_interval_domain(self, name: str, x: float) -> None:
        """Функции на [-1, 1]"""
        assert getattr(realmath, name)(x) == getattr(math, name)(x)

    def test_acosh(self) -> None:
        """acosh на [1, +inf]"""
        for x in (1.0, 1.5, 100.0):
            assert realmath.acosh(x) == math.acosh(x)

    def test_atan2(self) -> None:
        """atan2 по всем квадрантам"""
        for y, x in ((1.0, 1.0), (1.0, -1.0), (-1.0, -1.0), (-1.0, 1.0), (0.0, -1.0)):
            assert realmath.atan2(y, x) == math.atan2(y, x)

    def test_log_with_base(self) -> None:
        """log(x, base) = log(x) / log(base)"""
        assert realmath.log(8, 2) == math.log(8, 2)
        assert realmath.log(100.0, 10.0) == math.log(100.0, 10.0)

    def test_cbrt_negative(self) -> None:
        """Вещественный кубический корень отрицательного числа"""
        assert realmath.cbrt(-8.0) == math.cbrt(-8.0)
        assert realmath.cbrt(-8.0) == pytest.approx(-2.0)


# =============================================================================
# ТЕСТЫ: Полюса и переполнения
# =============================================================================


class TestIeeeSpecialValues:
    """Значения C99 там, где math поднимает исключение"""

    def test_exp_overflow(self) -> None:
        """exp(1000) → inf"""
        assert realmath.exp(1000.0) == math.inf

    def test_hyperbolic_overflow(self) -> None:
        """sinh/cosh переполнение → ±inf"""
        assert realmath.cosh(1000.0) == math.inf
        assert realmath.cosh(-1000.0) == math.inf
        assert realmath.sinh(1000.0) == math.inf
        assert realmath.sinh(-1000.0) == -math.inf

    @pytest.mark.parametrize("name", ["log", "log2", "log10"])
    def test_log_of_zero(self, name: str) -> None:
        """log(±0) → -inf"""
        assert getattr(realmath, name)(0.0) == -math.inf
        assert getattr(realmath, name)(-0.0) == -math.inf
        assert getattr(realmath, name)(0) == -math.inf

    def test_log_base_one(self) -> None:
        """log(x, 1) → IEEE деление на ноль"""
        assert realmath.log(2.0, 1.0) == math.inf
        assert realmath.log(0.5, 1.0) == -math.inf
        assert math.isnan(realmath.log(1.0, 1.0))

    def test_log_base_zero(self) -> None:
        """log(x, 0) = log(x) / -inf"""
        assert realmath.log(8.0, 0.0) == 0.0

    def test_atanh_at_poles(self) -> None:
        """atanh(±1) → ±inf"""
        assert realmath.atanh(1.0) == math.inf
        assert realmath.atanh(-1.0) == -math.inf
        assert realmath.atanh(1) == math.inf

    @pytest.mark.parametrize("name", ["sin", "cos", "tan"])
    def test_periodic_at_infinity(self, name: str) -> None:
        """sin/cos/tan(±inf) → NaN"""
        assert math.isnan(getattr(realmath, name)(math.inf))
        assert math.isnan(getattr(realmath, name)(-math.inf))

    def test_sqrt_negative_zero(self) -> None:
        """sqrt(-0.0) = -0.0"""
        result = realmath.sqrt(-0.0)
        assert result == 0.0
        assert math.copysign(1.0, result) == -1.0

    def test_huge_integers_saturate(self) -> None:
        """int за пределами float → ±inf до вычисления, без OverflowError"""
        assert realmath.exp(-(10**400)) == 0.0
        assert realmath.exp(10**400) == math.inf
        assert realmath.sinh(-(10**400)) == -math.inf
        assert realmath.cosh(-(10**400)) == math.inf
        assert realmath.tanh(10**400) == 1.0
        assert realmath.atan(-(10**400)) == -math.pi / 2
        assert realmath.atan2(10**400, 1.0) == math.pi / 2

    @pytest.mark.parametrize("name", ["sin", "cos", "tan"])
    def test_periodic_of_huge_integer(self, name: str) -> None:
        """sin/cos/tan(10**400) → NaN"""
        assert math.isnan(getattr(realmath, name)(10**400))
        assert math.isnan(getattr(realmath, name)(-(10**400)))


# =============================================================================
# ТЕСТЫ: Вне области
# =============================================================================


class TestOutOfDomain:
    """Аргументы вне вещественной области → ValueError, как в math"""

    @pytest.mark.parametrize(
        "name, x",
        [
            ("sqrt", -1.0),
            ("log", -1.0),
            ("log2", -2.0),
            ("log10", -10.0),
            ("asin", 2.0),
            ("acos", -1.5),
            ("acosh", 0.5),
            ("atanh", 2.0),
        ],
    )
    def test_raises_value_error(self, name: str, x: float) -> None:
        """ValueError пропагирует без изменений"""
        with pytest.raises(ValueError):
            getattr(realmath, name)(x)


class TestReexports:
    """Реэкспорт вещественных функций и констант"""

    def test_helpers_are_math_functions(self) -> None:
        """frexp, ldexp, hypot, erf, erfc, gamma, lgamma из math"""
        for name in ("frexp", "ldexp", "hypot", "erf", "erfc", "gamma", "lgamma"):
            assert getattr(realmath, name) is getattr(math, name)

    def test_constants(self) -> None:
        """pi и e"""
        assert realmath.pi == math.pi
        assert realmath.e == math.e
