"""
Тесты для Pydantic моделей опций

Проверяет:
1. Defaults и immutability (frozen=True)
2. Валидацию границ (ge/le, model_validator)
3. Приём enum'ов строками
4. camelCase сериализацию NumberFormatOptions
5. Формы decimals в FriendlyNumberOptions
"""

import pytest
from pydantic import ValidationError

from friendly_numbers.core.domain.options import (
    DEFAULT_LOCALE,
    DecimalsRange,
    DisplayStyle,
    FriendlyNumberOptions,
    GenerateScaleConfig,
    Notation,
    NumberFormatOptions,
    ScaleProgression,
    ScaleRounding,
    SignDisplay,
)


class TestGenerateScaleConfig:
    """Тесты для GenerateScaleConfig"""

    def test_defaults(self) -> None:
        config = GenerateScaleConfig()
        assert config.progression is ScaleProgression.FRIENDLY
        assert config.rounding is ScaleRounding.FRIENDLY
        assert config.significant_digits == 2
        assert config.steps == 10
        assert config.include_start is True
        assert config.include_end is True

    def test_enum_from_string(self) -> None:
        config = GenerateScaleConfig(progression="linear", rounding="half")
        assert config.progression is ScaleProgression.LINEAR
        assert config.rounding is ScaleRounding.HALF

    def test_unknown_progression_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GenerateScaleConfig(progression="logarithmic")

    def test_negative_steps_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GenerateScaleConfig(steps=-1)

    def test_zero_significant_digits_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GenerateScaleConfig(significant_digits=0)

    def test_frozen(self) -> None:
        config = GenerateScaleConfig()
        with pytest.raises(ValidationError):
            config.steps = 5


class TestNumberFormatOptions:
    """Тесты для NumberFormatOptions"""

    def test_empty_contract(self) -> None:
        """Не заданные поля не попадают в контракт"""
        assert NumberFormatOptions().to_contract() == {}

    def test_camel_case_contract(self) -> None:
        options = NumberFormatOptions(
            notation=Notation.COMPACT,
            sign_display=SignDisplay.EXCEPT_ZERO,
            maximum_fraction_digits=2,
        )
        assert options.to_contract() == {
            "notation": "compact",
            "signDisplay": "exceptZero",
            "maximumFractionDigits": 2,
        }

    def test_accepts_camel_case_input(self) -> None:
        options = NumberFormatOptions(minimumFractionDigits=1, currencyDisplay="code")
        assert options.minimum_fraction_digits == 1
        assert options.currency_display == "code"

    def test_fraction_digits_bounds(self) -> None:
        with pytest.raises(ValidationError):
            NumberFormatOptions(maximum_fraction_digits=101)

        with pytest.raises(ValidationError):
            NumberFormatOptions(minimum_fraction_digits=-1)

    def test_unknown_enum_rejected(self) -> None:
        with pytest.raises(ValidationError):
            NumberFormatOptions(notation="engineering")


class TestFriendlyNumberOptions:
    """Тесты для FriendlyNumberOptions"""

    def test_defaults(self) -> None:
        options = FriendlyNumberOptions()
        assert options.locale == DEFAULT_LOCALE
        assert options.display is None
        assert options.decimals == "auto"
        assert options.sign is False
        assert options.format is None

    def test_display_from_string(self) -> None:
        assert FriendlyNumberOptions(display="short").display is DisplayStyle.SHORT

    def test_fixed_decimals(self) -> None:
        assert FriendlyNumberOptions(decimals=2).decimals == 2

    def test_decimals_range_from_dict(self) -> None:
        options = FriendlyNumberOptions(decimals={"min": 1, "max": 3})
        assert options.decimals == DecimalsRange(min=1, max=3)

    def test_decimals_out_of_range_rejected(self) -> None:
        with pytest.raises(ValidationError, match="decimals must be in"):
            FriendlyNumberOptions(decimals=101)

        with pytest.raises(ValidationError):
            FriendlyNumberOptions(decimals=-1)

    def test_unknown_decimals_keyword_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FriendlyNumberOptions(decimals="many")

    def test_locale_list(self) -> None:
        options = FriendlyNumberOptions(locale=["xx-XX", "de-DE"])
        assert options.locale == ["xx-XX", "de-DE"]

    def test_raw_format_from_dict(self) -> None:
        options = FriendlyNumberOptions(format={"maximumFractionDigits": 4})
        assert options.format == NumberFormatOptions(maximum_fraction_digits=4)
