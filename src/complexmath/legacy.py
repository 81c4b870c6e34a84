"""
Legacy — Устаревшие вещественные псевдонимы

Слой совместимости для кода, который вызывал вещественные (некомплексные)
версии функций через complexmath. Каждый псевдоним:
1. Выдаёт DeprecationWarning, указывающий на место вызова (stacklevel=2)
2. Делегирует в realmath (ValueError для аргументов вне вещественной области)

Видимость предупреждений управляется стандартными фильтрами warnings
(python -W, PYTHONWARNINGS, warnings.simplefilter). Основной набор функций
этот модуль не импортирует.

    >>> from src.complexmath import legacy
    >>> legacy.sqrt(4.0)  # DeprecationWarning
    2.0
"""

import functools
import warnings
from typing import Callable, Final

from src.complexmath import realmath

# Имена, для которых существуют устаревшие псевдонимы
LEGACY_ALIASES: Final[tuple[str, ...]] = (
    "exp",
    "log",
    "log2",
    "log10",
    "sqrt",
    "cbrt",
    "sin",
    "cos",
    "tan",
    "sinh",
    "cosh",
    "tanh",
    "asin",
    "acos",
    "atan",
    "atan2",
    "asinh",
    "acosh",
    "atanh",
)


def deprecation_message(name: str) -> str:
    """Текст предупреждения для псевдонима name"""
    return f"complexmath.legacy.{name} is deprecated; use complexmath.{name} or math.{name}"


def _deprecated_alias(name: str) -> Callable:
    """
    Построение устаревшего псевдонима для realmath.<name>.

    Args:
        name: Имя функции из LEGACY_ALIASES

    Returns:
        Функция с той же сигнатурой, что и realmath.<name>
    """
    target = getattr(realmath, name)
    message = deprecation_message(name)

    @functools.wraps(target)
    def alias(*args, **kwargs):
        warnings.warn(message, DeprecationWarning, stacklevel=2)
        return target(*args, **kwargs)

    return alias


exp = _deprecated_alias("exp")
log = _deprecated_alias("log")
log2 = _deprecated_alias("log2")
log10 = _deprecated_alias("log10")
sqrt = _deprecated_alias("sqrt")
cbrt = _deprecated_alias("cbrt")
sin = _deprecated_alias("sin")
cos = _deprecated_alias("cos")
tan = _deprecated_alias("tan")
sinh = _deprecated_alias("sinh")
cosh = _deprecated_alias("cosh")
tanh = _deprecated_alias("tanh")
asin = _deprecated_alias("asin")
acos = _deprecated_alias("acos")
atan = _deprecated_alias("atan")
atan2 = _deprecated_alias("atan2")
asinh = _deprecated_alias("asinh")
acosh = _deprecated_alias("acosh")
atanh = _deprecated_alias("atanh")

__all__ = ["LEGACY_ALIASES", "deprecation_message", *LEGACY_ALIASES]
