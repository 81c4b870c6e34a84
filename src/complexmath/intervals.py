"""
RealInterval — Вещественные области определения функций

Immutable Pydantic модель отрезка/луча на вещественной оси. Используется
политикой классификации аргументов: real path функции выбирается только
если аргумент вещественный И лежит в её вещественной области.

Области:
- NON_NEGATIVE: [0, +inf]   (log, log2, log10, sqrt, cbrt)
- UNIT_INTERVAL: [-1, 1]    (asin, acos, atanh)
- AT_LEAST_ONE: [1, +inf]   (acosh)
- EVERYWHERE: [-inf, +inf]  (exp, sin, cos, ..., atan, asinh)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. lower <= upper, границы не NaN (проверяется при создании)
2. NaN принадлежит любой области: вещественный NaN остаётся на real path
3. -0.0 принадлежит NON_NEGATIVE (как и +0.0)
"""

import math
from typing import Final

from pydantic import BaseModel, Field, field_validator


class RealInterval(BaseModel):
    """
    Интервал вещественной оси с открытыми или замкнутыми концами.

    Immutable модель (frozen=True). Бесконечные границы допустимы,
    NaN-границы запрещены.
    """

    lower: float = Field(-math.inf, description="Нижняя граница")
    upper: float = Field(math.inf, description="Верхняя граница")
    lower_closed: bool = Field(True, description="Включается ли нижняя граница")
    upper_closed: bool = Field(True, description="Включается ли верхняя граница")

    model_config = {"frozen": True}

    @field_validator("lower", "upper")
    @classmethod
    def validate_not_nan(cls, v: float) -> float:
        """Границы интервала не могут быть NaN"""
        if math.isnan(v):
            raise ValueError("interval bound must not be NaN")
        return v

    @field_validator("upper")
    @classmethod
    def validate_upper_not_below_lower(cls, v: float, info) -> float:
        """Проверка, что upper >= lower"""
        if "lower" in info.data:
            lower = info.data["lower"]
            if v < lower:
                raise ValueError(f"upper {v} must be >= lower {lower}")
        return v

    def contains(self, value) -> bool:
        """
        Принадлежность вещественного значения интервалу.

        Вызывается только для значений, уже классифицированных как REAL:
        сравнения с комплексными числами не определены.

        Args:
            value: Вещественное значение (int, float, Fraction, Decimal, ...)

        Returns:
            True если value лежит в интервале или является NaN

        Examples:
            >>> UNIT_INTERVAL.contains(0.5)
            True
            >>> UNIT_INTERVAL.contains(2)
            False
            >>> NON_NEGATIVE.contains(-0.0)
            True
            >>> NON_NEGATIVE.contains(float("nan"))
            True
        """
        if value != value:
            return True

        if self.lower_closed:
            above_lower = value >= self.lower
        else:
            above_lower = value > self.lower

        if self.upper_closed:
            below_upper = value <= self.upper
        else:
            below_upper = value < self.upper

        return above_lower and below_upper


# =============================================================================
# ОБЛАСТИ ОПРЕДЕЛЕНИЯ
# =============================================================================

# Вся вещественная ось: exp, sin, cos, tan, sinh, cosh, tanh, atan, asinh
EVERYWHERE: Final[RealInterval] = RealInterval()

# Неотрицательная полуось: log, log2, log10, sqrt, cbrt
NON_NEGATIVE: Final[RealInterval] = RealInterval(lower=0.0)

# Отрезок [-1, 1]: asin, acos, atanh
UNIT_INTERVAL: Final[RealInterval] = RealInterval(lower=-1.0, upper=1.0)

# Луч [1, +inf]: acosh
AT_LEAST_ONE: Final[RealInterval] = RealInterval(lower=1.0)
