"""
Numeric — Классификация аргументов (REAL | COMPLEX)

Единый примитив, на котором построены все развилки real path / complex path:
"является ли значение вещественным и (опционально) лежит ли оно в области".

Правила классификации:
- numbers.Real (int, bool, float, Fraction, numpy float/int) → REAL
- numbers.Complex, не являющийся Real (complex, numpy complex) → COMPLEX
- объект без различения real/complex, но с __float__ или __index__
  (например, Decimal) → REAL (консервативно, как обычный float)
- объект только с __complex__ → COMPLEX
- всё остальное → NonNumericArgument (TypeError), без частичных вычислений

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. complex всегда COMPLEX, даже при нулевой мнимой части
2. Проверка области выполняется ТОЛЬКО после подтверждения REAL
   (сравнения к комплексным значениям не применяются)
"""

import numbers
from enum import Enum

from src.complexmath.intervals import RealInterval

# Любое значение, которое принимают функции библиотеки
Numeric = int | float | complex


class NonNumericArgument(TypeError):
    """
    Аргумент не является ни вещественным, ни комплексным числом.

    Поднимается до любых вычислений: функции библиотеки не возвращают
    "молча неверное" число для строк, None, коллекций и т.п.
    """

    pass


class NumberKind(str, Enum):
    """Дискриминант числового значения"""

    REAL = "real"
    COMPLEX = "complex"


def number_kind(value) -> NumberKind:
    """
    Определение вида числового значения.

    Args:
        value: Произвольное значение

    Returns:
        NumberKind.REAL или NumberKind.COMPLEX

    Raises:
        NonNumericArgument: Если значение не числовое

    Examples:
        >>> number_kind(2)
        <NumberKind.REAL: 'real'>
        >>> number_kind(1 + 0j)
        <NumberKind.COMPLEX: 'complex'>
    """
    if isinstance(value, numbers.Real):
        return NumberKind.REAL

    if isinstance(value, numbers.Complex):
        return NumberKind.COMPLEX

    # str/bytes не определяют __float__, но проверяем явно до duck typing
    if isinstance(value, (str, bytes)):
        raise NonNumericArgument(f"expected a real or complex number, got {type(value).__name__}")

    if hasattr(value, "__float__") or hasattr(value, "__index__"):
        return NumberKind.REAL

    if hasattr(value, "__complex__"):
        return NumberKind.COMPLEX

    raise NonNumericArgument(f"expected a real or complex number, got {type(value).__name__}")


def is_real(value, domain: RealInterval | None = None) -> bool:
    """
    Проверка real path: значение вещественное и лежит в области.

    Args:
        value: Проверяемое значение
        domain: Вещественная область функции (optional)

    Returns:
        True если value REAL и (domain не задан или domain.contains(value))

    Raises:
        NonNumericArgument: Если значение не числовое

    Examples:
        >>> from src.complexmath.intervals import UNIT_INTERVAL
        >>> is_real(0.5, UNIT_INTERVAL)
        True
        >>> is_real(2.0, UNIT_INTERVAL)
        False
        >>> is_real(0.5 + 0j, UNIT_INTERVAL)
        False
    """
    if number_kind(value) is not NumberKind.REAL:
        return False

    if domain is None:
        return True

    return domain.contains(value)


def coerce_number(value) -> float | complex:
    """
    Приведение значения к float (REAL) или complex (COMPLEX).

    Используется в complex path: промежуточные выражения от вещественного
    аргумента (1 - z*z, z*z - 1, ...) остаются вещественными и проходят
    через real path / отрицательную ветку sqrt этой же библиотеки.

    Args:
        value: Числовое значение

    Returns:
        float(value) для REAL, complex(value) для COMPLEX

    Raises:
        NonNumericArgument: Если значение не числовое
    """
    if number_kind(value) is NumberKind.REAL:
        return float(value)
    return complex(value)
