"""
RealMath — Вещественные трансцендентные функции с IEEE-754 семантикой

Тонкий адаптер над модулем math. Для аргументов ВНУТРИ вещественной области
возвращает те же значения, что и math, но там, где math поднимает исключение
на полюсе или при переполнении, возвращает значение C99 (Annex F):

    exp(1000)      → inf          (math: OverflowError)
    cosh(1000)     → inf          (math: OverflowError)
    sinh(-1000)    → -inf         (math: OverflowError)
    log(0)         → -inf         (math: ValueError)
    log2/log10(0)  → -inf         (math: ValueError)
    atanh(±1)      → ±inf         (math: ValueError)
    sin/cos/tan(±inf) → nan       (math: ValueError)
    log(x, 1)      → ±inf / nan   (math: ZeroDivisionError)

Целые за пределами float (10**400) в exp, sin/cos/tan, atan, atan2 и
sinh/cosh/tanh насыщаются до ±inf вместо OverflowError:
exp(-10**400) → 0.0, sinh(-10**400) → -inf, sin(10**400) → nan.

Аргументы ВНЕ вещественной области (sqrt(-1), asin(2), log(-1), acosh(0))
по-прежнему поднимают ValueError, как math. Функции complexmath никогда не
передают сюда такие аргументы: они уходят в complex path раньше.
"""

import math

from src.complexmath.safeguards import ieee_divide

# Реэкспорт вещественных функций без комплексного продолжения
from math import e, erf, erfc, frexp, gamma, hypot, ldexp, lgamma, pi


# =============================================================================
# ПРИВЕДЕНИЕ К FLOAT
# =============================================================================


def _to_float(x) -> float:
    """float(x) с насыщением: int за пределами float → ±inf"""
    try:
        return float(x)
    except OverflowError:
        return math.inf if x > 0 else -math.inf


# =============================================================================
# ЭКСПОНЕНТА И ЛОГАРИФМЫ
# =============================================================================


def exp(x) -> float:
    """e**x; переполнение → inf, exp(-inf) → 0.0"""
    x = _to_float(x)
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _log_or_pole(func, x) -> float:
    # log(±0) — полюс: -inf вместо ValueError
    if x == 0:
        return -math.inf
    return func(x)


def log(x, base=None) -> float:
    """
    Натуральный логарифм или логарифм по основанию base.

    Args:
        x: Неотрицательное вещественное значение
        base: Основание (optional, неотрицательное вещественное)

    Returns:
        log(x) или log(x) / log(base) с IEEE делением

    Raises:
        ValueError: Если x < 0 или base < 0

    Examples:
        >>> log(0.0)
        -inf
        >>> log(8, 2)
        3.0
        >>> log(2.0, 1.0)
        inf
    """
    if base is None:
        return _log_or_pole(math.log, x)
    return ieee_divide(_log_or_pole(math.log, x), _log_or_pole(math.log, base))


def log2(x) -> float:
    """Логарифм по основанию 2; log2(0) → -inf"""
    return _log_or_pole(math.log2, x)


def log10(x) -> float:
    """Логарифм по основанию 10; log10(0) → -inf"""
    return _log_or_pole(math.log10, x)


# =============================================================================
# КОРНИ
# =============================================================================


def sqrt(x) -> float:
    """Вещественный квадратный корень; x < 0 → ValueError"""
    return math.sqrt(x)


def cbrt(x) -> float:
    """Вещественный кубический корень (значение math.cbrt; cbrt(-8) ≈ -2.0)"""
    return math.cbrt(x)


# =============================================================================
# ТРИГОНОМЕТРИЯ
# =============================================================================


def _periodic(func, x) -> float:
    # sin/cos/tan(±inf) не определены: NaN вместо ValueError
    x = _to_float(x)
    if math.isinf(x):
        return math.nan
    return func(x)


def sin(x) -> float:
    """Синус; sin(±inf) → nan"""
    return _periodic(math.sin, x)


def cos(x) -> float:
    """Косинус; cos(±inf) → nan"""
    return _periodic(math.cos, x)


def tan(x) -> float:
    """Тангенс; tan(±inf) → nan"""
    return _periodic(math.tan, x)


def asin(x) -> float:
    """Арксинус на [-1, 1]; вне отрезка → ValueError"""
    return math.asin(x)


def acos(x) -> float:
    """Арккосинус на [-1, 1]; вне отрезка → ValueError"""
    return math.acos(x)


def atan(x) -> float:
    """Арктангенс; atan(±inf) → ±π/2"""
    return math.atan(_to_float(x))


def atan2(y, x) -> float:
    """Аргумент точки (x, y) в (-π, π]"""
    return math.atan2(_to_float(y), _to_float(x))


# =============================================================================
# ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ
# =============================================================================


def sinh(x) -> float:
    """Гиперболический синус; переполнение → copysign(inf, x)"""
    x = _to_float(x)
    try:
        return math.sinh(x)
    except OverflowError:
        return math.copysign(math.inf, x)


def cosh(x) -> float:
    """Гиперболический косинус; переполнение → inf"""
    x = _to_float(x)
    try:
        return math.cosh(x)
    except OverflowError:
        return math.inf


def tanh(x) -> float:
    """Гиперболический тангенс; tanh(±inf) → ±1.0"""
    return math.tanh(_to_float(x))


def asinh(x) -> float:
    """Обратный гиперболический синус на всей оси"""
    return math.asinh(x)


def acosh(x) -> float:
    """Обратный гиперболический косинус на [1, +inf]; x < 1 → ValueError"""
    return math.acosh(x)


def atanh(x) -> float:
    """Гиперболический арктангенс; atanh(±1) → ±inf"""
    if x == 1 or x == -1:
        return math.copysign(math.inf, x)
    return math.atanh(x)


__all__ = [
    # Constants
    "e",
    "pi",
    # Exponent & logarithms
    "exp",
    "log",
    "log2",
    "log10",
    # Roots
    "sqrt",
    "cbrt",
    # Trigonometric
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "atan2",
    # Hyperbolic
    "sinh",
    "cosh",
    "tanh",
    "asinh",
    "acosh",
    "atanh",
    # Real-only helpers
    "erf",
    "erfc",
    "frexp",
    "gamma",
    "hypot",
    "ldexp",
    "lgamma",
]
