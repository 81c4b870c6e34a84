"""
complexmath — трансцендентные функции для вещественных и комплексных чисел

Функции принимают int, float или complex. Для вещественного аргумента в
вещественной области результат float; вне её (sqrt(-1), log(-1), asin(2))
результат автоматически становится complex вместо ValueError.

    >>> from src.complexmath import sqrt, log
    >>> sqrt(-4)
    2j
    >>> log(-1)
    3.141592653589793j
"""

# Function set
from src.complexmath.functions import (
    acos,
    acosh,
    asin,
    asinh,
    atan,
    atan2,
    atanh,
    cbrt,
    cos,
    cosh,
    exp,
    log,
    log2,
    log10,
    sin,
    sinh,
    sqrt,
    tan,
    tanh,
)

# Domains
from src.complexmath.intervals import (
    AT_LEAST_ONE,
    EVERYWHERE,
    NON_NEGATIVE,
    UNIT_INTERVAL,
    RealInterval,
)

# Classification
from src.complexmath.numeric import (
    NonNumericArgument,
    NumberKind,
    coerce_number,
    is_real,
    number_kind,
)

# Real-only helpers and constants
from src.complexmath.realmath import (
    e,
    erf,
    erfc,
    frexp,
    gamma,
    hypot,
    ldexp,
    lgamma,
    pi,
)

__all__ = [
    # Function set — Exponent & logarithms
    "exp",
    "log",
    "log2",
    "log10",
    # Function set — Roots
    "sqrt",
    "cbrt",
    # Function set — Trigonometric
    "sin",
    "cos",
    "tan",
    # Function set — Hyperbolic
    "sinh",
    "cosh",
    "tanh",
    # Function set — Inverse trigonometric
    "asin",
    "acos",
    "atan",
    "atan2",
    # Function set — Inverse hyperbolic
    "asinh",
    "acosh",
    "atanh",
    # Domains
    "RealInterval",
    "EVERYWHERE",
    "NON_NEGATIVE",
    "UNIT_INTERVAL",
    "AT_LEAST_ONE",
    # Classification
    "NumberKind",
    "NonNumericArgument",
    "number_kind",
    "is_real",
    "coerce_number",
    # Real-only helpers
    "erf",
    "erfc",
    "frexp",
    "gamma",
    "hypot",
    "ldexp",
    "lgamma",
    # Constants
    "e",
    "pi",
]
