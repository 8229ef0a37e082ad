"""
Тесты для модуля Scaling

Проверяет:
1. Точность результата ограничена точностью входа
2. Clamp значащих цифр в [min, max]
3. Отключение округления (preserve_significant_digits=False)
4. Обратное масштабирование и ratio = 0
"""

import math

import pytest
from pydantic import ValidationError

from friendly_numbers.core.domain.options import ScaleOptions
from friendly_numbers.core.math.scaling import scale_number, scale_number_inverse


class TestScaleNumber:
    """Тесты для scale_number"""

    def test_days_to_years_precision(self) -> None:
        """7 × 365.25 → 3000: у "7" одна значащая цифра"""
        assert scale_number(7, 365.25) == 3000

    def test_two_digit_input(self) -> None:
        assert scale_number(2.5, 16) == 40

    def test_product_rounded_to_input_digits(self) -> None:
        """100 × 1.5 = 150 → 200 (одна значащая цифра у 100)"""
        assert scale_number(100, 1.5) == 200

    def test_no_preserve_returns_raw_product(self) -> None:
        options = ScaleOptions(preserve_significant_digits=False)
        assert scale_number(7, 365.25, options) == 2556.75
        assert scale_number(3, 0.5, options) == 1.5

    def test_min_significant_digits_raises_precision(self) -> None:
        """min_significant_digits поднимает точность коротких входов"""
        options = ScaleOptions(min_significant_digits=3)
        assert scale_number(7, 365.25, options) == 2560

    def test_max_significant_digits_caps_precision(self) -> None:
        options = ScaleOptions(max_significant_digits=2)
        assert scale_number(1.2345, 1000, options) == 1200

    def test_negative_value(self) -> None:
        assert scale_number(-7, 365.25) == -3000

    def test_zero_value(self) -> None:
        assert scale_number(0, 365.25) == 0

    def test_tiny_product(self) -> None:
        """Subnormal произведение округляется без OverflowError"""
        assert math.isclose(scale_number(1e-300, 1e-10), 1e-310, rel_tol=1e-6)

    def test_product_overflow(self) -> None:
        assert scale_number(1e300, 1e10) == math.inf

    def test_many_digits_clamped_by_float(self) -> None:
        options = ScaleOptions(min_significant_digits=400, max_significant_digits=400)
        assert scale_number(1.5, 2, options) == 3.0


class TestScaleNumberInverse:
    """Тесты для scale_number_inverse"""

    def test_inverse_rounds_to_input_digits(self) -> None:
        """40 / 16 = 2.5 → 3 (одна значащая цифра у 40)"""
        assert scale_number_inverse(40, 16) == 3

    def test_inverse_no_preserve(self) -> None:
        options = ScaleOptions(preserve_significant_digits=False)
        assert scale_number_inverse(40, 16, options) == 2.5

    def test_zero_ratio_gives_inf(self) -> None:
        """ratio = 0 → ±inf без исключения"""
        assert scale_number_inverse(40, 0) == math.inf
        assert scale_number_inverse(-40, 0) == -math.inf

    def test_zero_ratio_zero_value_gives_nan(self) -> None:
        assert math.isnan(scale_number_inverse(0, 0))

    @pytest.mark.parametrize("value", [7, 2.5, 365.25, -13.7, 1e-9])
    @pytest.mark.parametrize("ratio", [2, 16, 0.25, 1024])
    def test_inverse_exact_for_power_of_two_ratio(self, value: float, ratio: float) -> None:
        """Без округления обратное масштабирование восстанавливает value точно"""
        options = ScaleOptions(preserve_significant_digits=False)
        scaled = scale_number(value, ratio, options)
        assert scale_number_inverse(scaled, ratio, options) == value

    @pytest.mark.parametrize("value", [7, 2.5, 365.25, -13.7])
    @pytest.mark.parametrize("ratio", [49, 3, 365.25, 0.1])
    def test_inverse_within_float_error(self, value: float, ratio: float) -> None:
        """1 / ratio не представимо точно: восстановление с точностью до пары ulp"""
        options = ScaleOptions(preserve_significant_digits=False)
        scaled = scale_number(value, ratio, options)
        assert math.isclose(scale_number_inverse(scaled, ratio, options), value, rel_tol=1e-15)

    def test_inverse_with_precision_rounds_again(self) -> None:
        """С округлением обратный путь не обязан вернуть вход: 7 × 49 → 300 → 6"""
        assert scale_number(7, 49) == 300
        assert scale_number_inverse(scale_number(7, 49), 49) == 6


class TestScaleOptions:
    """Тесты для ScaleOptions"""

    def test_defaults(self) -> None:
        options = ScaleOptions()
        assert options.preserve_significant_digits is True
        assert options.min_significant_digits == 1
        assert options.max_significant_digits == 15

    def test_min_greater_than_max_rejected(self) -> None:
        with pytest.raises(ValidationError, match="min_significant_digits"):
            ScaleOptions(min_significant_digits=5, max_significant_digits=2)

    def test_zero_digits_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ScaleOptions(min_significant_digits=0)

    def test_frozen(self) -> None:
        options = ScaleOptions()
        with pytest.raises(ValidationError):
            options.min_significant_digits = 3
