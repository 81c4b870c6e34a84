"""
Safeguards — IEEE-754 деление и знаковые нули

Модуль обеспечивает поведение "как в плавающей точке" там, где Python
поднимает исключение:
- Деление на точный ноль → ±inf или NaN вместо ZeroDivisionError
- Различение -0.0 и +0.0 (нужно для сопряжённой симметрии sqrt)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление конечных значений на ненулевой знаменатель идентично оператору "/"
2. complex / float делится покомпонентно (inf не порождает NaN в соседней компоненте)
3. Деление на ноль никогда не поднимает исключение
4. Знак бесконечности = знак числителя × знак нуля в знаменателе
"""

import math


# =============================================================================
# ЗНАКОВЫЕ НУЛИ
# =============================================================================


def has_negative_sign(value: float) -> bool:
    """
    Проверка знакового бита float (учитывает -0.0).

    Args:
        value: Проверяемое значение

    Returns:
        True если знаковый бит установлен (value < 0 или value == -0.0)

    Examples:
        >>> has_negative_sign(-1.0)
        True
        >>> has_negative_sign(-0.0)
        True
        >>> has_negative_sign(0.0)
        False
    """
    return math.copysign(1.0, value) < 0


# =============================================================================
# IEEE ДЕЛЕНИЕ
# =============================================================================


def _divide_by_zero(numerator: float, zero: float) -> float:
    """Вещественное деление на ±0.0 по правилам IEEE-754"""
    if numerator == 0 or math.isnan(numerator):
        return math.nan

    if has_negative_sign(numerator) != has_negative_sign(zero):
        return -math.inf
    return math.inf


def ieee_divide(numerator, denominator):
    """
    Деление float/complex с IEEE-754 семантикой для нулевого знаменателя.

    Для ненулевого знаменателя результат совпадает с numerator / denominator.
    Комплексный числитель и вещественный знаменатель делятся покомпонентно:
    бесконечная компонента не превращает соседнюю в NaN (в Python < 3.14
    complex / float считается как complex / complex(float, 0)).
    Для нулевого комплексного знаменателя компоненты числителя делятся на
    ноль по отдельности (знак нуля берётся из вещественной части знаменателя).

    Args:
        numerator: Числитель (int, float или complex)
        denominator: Знаменатель (int, float или complex)

    Returns:
        Частное (float если оба операнда вещественные, иначе complex)

    Examples:
        >>> ieee_divide(1.0, 4.0)
        0.25
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
        >>> ieee_divide(1 + 1j, 0.0)
        (inf+infj)
        >>> ieee_divide(complex(-math.inf, 0.0), 2.0)
        (-inf+0j)
    """
    if isinstance(numerator, complex) and not isinstance(denominator, complex):
        return complex(
            ieee_divide(numerator.real, denominator),
            ieee_divide(numerator.imag, denominator),
        )

    if denominator != 0:
        return numerator / denominator

    zero = float(denominator.real)

    if isinstance(numerator, complex) or isinstance(denominator, complex):
        numerator = complex(numerator)
        return complex(
            _divide_by_zero(numerator.real, zero),
            _divide_by_zero(numerator.imag, zero),
        )

    return _divide_by_zero(float(numerator), zero)
