"""
Тесты для Legacy — устаревшие вещественные псевдонимы

Проверяет:
1. DeprecationWarning с текстом и местом вызова
2. Делегирование в realmath (ValueError вне вещественной области)
3. Управление видимостью через фильтры warnings
"""

import math
import warnings

import pytest

from src.complexmath import functions, legacy, realmath


class TestDeprecatedAliases:
    """Тесты устаревших псевдонимов"""

    def test_warns_and_delegates(self) -> None:
        """legacy.sqrt предупреждает и возвращает вещественный результат"""
        with pytest.warns(DeprecationWarning, match="complexmath.legacy.sqrt is deprecated"):
            assert legacy.sqrt(4.0) == 2.0

    def test_message_names_replacements(self) -> None:
        """Текст указывает на complexmath.<name> и math.<name>"""
        assert legacy.deprecation_message("exp") == (
            "complexmath.legacy.exp is deprecated; use complexmath.exp or math.exp"
        )

    def test_warning_points_at_caller(self) -> None:
        """stacklevel=2: предупреждение относится к вызывающему коду"""
        with pytest.warns(DeprecationWarning) as record:
            legacy.cos(0.0)
        assert record[0].filename == __file__

    def test_out_of_domain_raises(self) -> None:
        """Вещественные псевдонимы не продвигают в complex"""
        with pytest.warns(DeprecationWarning):
            with pytest.raises(ValueError):
                legacy.sqrt(-1.0)

        with pytest.warns(DeprecationWarning):
            with pytest.raises(ValueError):
                legacy.asin(2.0)

    def test_keyword_arguments_passed_through(self) -> None:
        """log(x, base=...) через псевдоним"""
        with pytest.warns(DeprecationWarning):
            assert legacy.log(8, base=2) == math.log(8, 2)

    def test_two_argument_alias(self) -> None:
        """atan2(y, x) через псевдоним"""
        with pytest.warns(DeprecationWarning, match="atan2"):
            assert legacy.atan2(1.0, 1.0) == math.atan2(1.0, 1.0)

    def test_error_filter_makes_warning_fatal(self) -> None:
        """-W error::DeprecationWarning → исключение"""
        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            with pytest.raises(DeprecationWarning):
                legacy.exp(1.0)

    def test_ignore_filter_silences_warning(self) -> None:
        """Фильтр ignore → без предупреждения"""
        with warnings.catch_warnings(record=True) as record:
            warnings.simplefilter("ignore", DeprecationWarning)
            assert legacy.exp(0.0) == 1.0
        assert record == []

    @pytest.mark.parametrize("name", legacy.LEGACY_ALIASES)
    def test_every_function_has_alias(self, name: str) -> None:
        """Псевдоним есть для каждой функции набора"""
        alias = getattr(legacy, name)
        assert alias.__name__ == name
        assert alias.__wrapped__ is getattr(realmath, name)
        assert callable(getattr(functions, name))

    def test_function_set_does_not_warn(self) -> None:
        """Основной набор функций не выдаёт предупреждений"""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert functions.sqrt(4.0) == 2.0
            assert functions.sqrt(-4.0) == 2j
