"""
Functions — Трансцендентные функции над комплексной плоскостью

Модуль расширяет вещественные exp, log, sqrt, cbrt, тригонометрические,
гиперболические функции и обратные к ним на комплексные аргументы.

Каждая функция сначала классифицирует аргумент:
- real path: аргумент вещественный и лежит в вещественной области функции →
  делегирование в realmath, результат float (бит-в-бит как у realmath)
- complex path: иначе → формула аналитического продолжения, результат complex

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция не поднимает исключение на конечном числовом аргументе:
   выход из вещественной области означает переход в complex path
2. Вещественный аргумент в вещественной области → результат float
3. Главная ветвь: arg(z) ∈ (-π, π], Re(sqrt(z)) >= 0
4. sqrt сопряжённо-симметрична: sqrt(conj(z)) == conj(sqrt(z)), включая y = -0.0
5. Полюса и переполнения → inf/NaN (IEEE-754), не ZeroDivisionError

ФОРМУЛЫ (z = x + iy):
    exp(z)   = e^x (cos y + i sin y)
    log(z)   = (ln|z| + i arg z) / ln(base)
    sqrt(z)  = sqrt((|z|+x)/2) + i sign(y) sqrt((|z|-x)/2)
    sin(z)   = sin x cosh y + i cos x sinh y
    cos(z)   = cos x cosh y - i sin x sinh y
    sinh(z)  = sinh x cos y + i cosh x sin y
    cosh(z)  = cosh x cos y + i sinh x sin y
    asin(z)  = -i log(iz + sqrt(1 - z²))
    acos(z)  = -i log(z + i sqrt(1 - z²))
    atan(z)  = i log((i + z)/(i - z)) / 2
    atan2(y, x) = -i log((x + iy) / sqrt(x² + y²))
    asinh(z) = log(z + sqrt(1 + z²))
    acosh(z) = log(z + sqrt(z² - 1))
    atanh(z) = log((1 + z)/(1 - z)) / 2
"""

import math
from typing import Final

from src.complexmath import realmath
from src.complexmath.intervals import AT_LEAST_ONE, NON_NEGATIVE, UNIT_INTERVAL
from src.complexmath.numeric import Numeric, coerce_number, is_real
from src.complexmath.safeguards import has_negative_sign, ieee_divide

# Мнимая единица и её противоположность
I: Final[complex] = complex(0.0, 1.0)
MINUS_I: Final[complex] = complex(0.0, -1.0)

# Показатель кубического корня
ONE_THIRD: Final[float] = 1.0 / 3

LN_2: Final[float] = math.log(2)
LN_10: Final[float] = math.log(10)


# =============================================================================
# ЭКСПОНЕНТА И ЛОГАРИФМЫ
# =============================================================================


def exp(z: Numeric) -> Numeric:
    """
    e в степени z.

    Examples:
        >>> exp(1.0)
        2.718281828459045
        >>> exp(complex(0, math.pi))
        (-1+1.2246467991473532e-16j)
    """
    if is_real(z):
        return realmath.exp(z)

    z = complex(z)
    ere = realmath.exp(z.real)
    return complex(ere * realmath.cos(z.imag), ere * realmath.sin(z.imag))


def log(z: Numeric, base: Numeric = math.e) -> Numeric:
    """
    Логарифм z по основанию base (по умолчанию натуральный).

    Real path только если И z, И base вещественные неотрицательные.
    Иначе ln|z| + i arg(z), делённое на log(base); log(base) вычисляется
    рекурсивно, поэтому для положительного вещественного base знаменатель
    остаётся вещественным.

    Args:
        z: Аргумент
        base: Основание логарифма (default: e)

    Returns:
        float на real path, complex иначе

    Examples:
        >>> log(math.e)
        1.0
        >>> log(-1)
        3.141592653589793j
        >>> log(1 + 4j)
        (1.416606672028108+1.3258176636680326j)
        >>> log(1 + 4j, 10)
        (0.6152244606891369+0.5757952953408879j)
    """
    if is_real(z, NON_NEGATIVE) and is_real(base, NON_NEGATIVE):
        return realmath.log(z, base)

    w = complex(z)
    numerator = complex(realmath.log(math.hypot(w.real, w.imag)), math.atan2(w.imag, w.real))
    return ieee_divide(numerator, log(base))


def log2(z: Numeric) -> Numeric:
    """
    Логарифм по основанию 2.

    Examples:
        >>> log2(8)
        3.0
        >>> log2(-1)
        4.532360141827194j
    """
    if is_real(z, NON_NEGATIVE):
        return realmath.log2(z)
    return ieee_divide(log(z), LN_2)


def log10(z: Numeric) -> Numeric:
    """
    Логарифм по основанию 10.

    Examples:
        >>> log10(-1)
        1.3643763538418412j
    """
    if is_real(z, NON_NEGATIVE):
        return realmath.log10(z)
    return ieee_divide(log(z), LN_10)


# =============================================================================
# КОРНИ
# =============================================================================


def sqrt(z: Numeric) -> Numeric:
    """
    Главное значение квадратного корня (Re >= 0).

    - z вещественный, z >= 0 → вещественный корень
    - z вещественный, z < 0 → i·sqrt(|z|)
    - z комплексный → формула половинного угла; знак мнимой части равен
      знаку y (y = -0.0 считается отрицательным)

    Examples:
        >>> sqrt(4)
        2.0
        >>> sqrt(-4)
        2j
        >>> sqrt(-1 + 0j)
        1j
        >>> sqrt(-1 - 0j)
        -1j
    """
    if is_real(z):
        if is_real(z, NON_NEGATIVE):
            return realmath.sqrt(z)
        return complex(0.0, realmath.sqrt(-z))

    z = complex(z)
    if has_negative_sign(z.imag):
        return sqrt(z.conjugate()).conjugate()

    r = math.hypot(z.real, z.imag)
    x = z.real
    return complex(realmath.sqrt((r + x) / 2.0), realmath.sqrt((r - x) / 2.0))


def cbrt(z: Numeric) -> Numeric:
    """
    Главное значение кубического корня: z ** (1/3).

    Для неотрицательного вещественного z используется realmath.cbrt
    (значение совпадает с math.cbrt). Для отрицательного вещественного z
    это комплексный корень с аргументом π/3, а не -cbrt(|z|).

    Examples:
        >>> cbrt(0.0)
        0.0
        >>> cbrt(-8)
        (1.0000000000000002+1.7320508075688772j)
        >>> cbrt(1 + 4j)
        (1.449461632813119+0.6858152562177092j)
    """
    if is_real(z, NON_NEGATIVE):
        return realmath.cbrt(z)
    return coerce_number(z) ** ONE_THIRD


# =============================================================================
# ТРИГОНОМЕТРИЯ
# =============================================================================


def sin(z: Numeric) -> Numeric:
    """
    Синус z (радианы).

    Examples:
        >>> sin(1 + 1j)
        (1.2984575814159773+0.6349639147847361j)
    """
    if is_real(z):
        return realmath.sin(z)

    z = complex(z)
    return complex(
        realmath.sin(z.real) * realmath.cosh(z.imag),
        realmath.cos(z.real) * realmath.sinh(z.imag),
    )


def cos(z: Numeric) -> Numeric:
    """
    Косинус z (радианы).

    Examples:
        >>> cos(1 + 1j)
        (0.8337300251311491-0.9888977057628651j)
    """
    if is_real(z):
        return realmath.cos(z)

    z = complex(z)
    return complex(
        realmath.cos(z.real) * realmath.cosh(z.imag),
        -realmath.sin(z.real) * realmath.sinh(z.imag),
    )


def tan(z: Numeric) -> Numeric:
    """
    Тангенс z (радианы): sin(z) / cos(z) в complex path.

    Examples:
        >>> tan(1 + 1j)
        (0.27175258531951174+1.0839233273386943j)
    """
    if is_real(z):
        return realmath.tan(z)
    return ieee_divide(sin(z), cos(z))


# =============================================================================
# ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ
# =============================================================================


def sinh(z: Numeric) -> Numeric:
    """
    Гиперболический синус z.

    Examples:
        >>> sinh(1 + 1j)
        (0.6349639147847361+1.2984575814159773j)
    """
    if is_real(z):
        return realmath.sinh(z)

    z = complex(z)
    return complex(
        realmath.sinh(z.real) * realmath.cos(z.imag),
        realmath.cosh(z.real) * realmath.sin(z.imag),
    )


def cosh(z: Numeric) -> Numeric:
    """
    Гиперболический косинус z.

    Examples:
        >>> cosh(1 + 1j)
        (0.8337300251311491+0.9888977057628651j)
    """
    if is_real(z):
        return realmath.cosh(z)

    z = complex(z)
    return complex(
        realmath.cosh(z.real) * realmath.cos(z.imag),
        realmath.sinh(z.real) * realmath.sin(z.imag),
    )


def tanh(z: Numeric) -> Numeric:
    """
    Гиперболический тангенс z: sinh(z) / cosh(z) в complex path.

    Examples:
        >>> tanh(1 + 1j)
        (1.0839233273386943+0.27175258531951174j)
    """
    if is_real(z):
        return realmath.tanh(z)
    return ieee_divide(sinh(z), cosh(z))


# =============================================================================
# ОБРАТНЫЕ ТРИГОНОМЕТРИЧЕСКИЕ ФУНКЦИИ
# =============================================================================


def asin(z: Numeric) -> Numeric:
    """
    Арксинус z.

    Real path только для вещественного z ∈ [-1, 1]. Вне отрезка
    вещественный аргумент даёт комплексный результат:
    asin(2) = π/2 - 1.3169578969248166i.

    Examples:
        >>> asin(1 + 1j)
        (0.6662394324925153+1.0612750619050355j)
    """
    if is_real(z, UNIT_INTERVAL):
        return realmath.asin(z)

    z = coerce_number(z)
    return MINUS_I * log(I * z + sqrt(1.0 - z * z))


def acos(z: Numeric) -> Numeric:
    """
    Арккосинус z.

    Real path только для вещественного z ∈ [-1, 1].

    Examples:
        >>> acos(1 + 1j)
        (0.9045568943023813-1.0612750619050357j)
    """
    if is_real(z, UNIT_INTERVAL):
        return realmath.acos(z)

    z = coerce_number(z)
    return MINUS_I * log(z + I * sqrt(1.0 - z * z))


def atan(z: Numeric) -> Numeric:
    """
    Арктангенс z.

    Examples:
        >>> atan(1 + 1j)
        (1.0172219678978514+0.4023594781085251j)
    """
    if is_real(z):
        return realmath.atan(z)

    z = complex(z)
    return ieee_divide(I * log(ieee_divide(I + z, I - z)), 2.0)


def atan2(y: Numeric, x: Numeric) -> Numeric:
    """
    Арктангенс y/x с учётом квадранта по знакам y и x.

    Real path только если оба аргумента вещественные.

    Args:
        y: Противолежащая компонента
        x: Прилежащая компонента

    Examples:
        >>> atan2(1.0, -1.0)
        2.356194490192345
        >>> atan2(1 + 1j, 0)
        (1.5707963267948966+0j)
    """
    if is_real(y) and is_real(x):
        return realmath.atan2(y, x)

    y = coerce_number(y)
    x = coerce_number(x)
    return MINUS_I * log(ieee_divide(x + I * y, sqrt(x * x + y * y)))


# =============================================================================
# ОБРАТНЫЕ ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ
# =============================================================================


def asinh(z: Numeric) -> Numeric:
    """
    Обратный гиперболический синус z.

    Examples:
        >>> asinh(1 + 1j)
        (1.0612750619050357+0.6662394324925153j)
    """
    if is_real(z):
        return realmath.asinh(z)

    z = complex(z)
    return log(z + sqrt(1.0 + z * z))


def acosh(z: Numeric) -> Numeric:
    """
    Обратный гиперболический косинус z.

    Real path только для вещественного z >= 1; acosh(0.5) = 1.0471975511965979i.

    Examples:
        >>> acosh(1 + 1j)
        (1.0612750619050357+0.9045568943023813j)
    """
    if is_real(z, AT_LEAST_ONE):
        return realmath.acosh(z)

    z = coerce_number(z)
    return log(z + sqrt(z * z - 1.0))


def atanh(z: Numeric) -> Numeric:
    """
    Обратный гиперболический тангенс z.

    Real path только для вещественного z ∈ [-1, 1]; atanh(±1) = ±inf.

    Examples:
        >>> atanh(1 + 1j)
        (0.4023594781085251+1.0172219678978514j)
    """
    if is_real(z, UNIT_INTERVAL):
        return realmath.atanh(z)

    z = coerce_number(z)
    return ieee_divide(log(ieee_divide(1.0 + z, 1.0 - z)), 2.0)
