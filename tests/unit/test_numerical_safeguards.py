"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. NaN/Inf проверки и вырожденные значения
2. IEEE-совместимые reciprocal и log10
3. Порядок числа и точное умножение на степень 10
4. Округление half away from zero и квантование
5. Clamp и валидацию параметров
"""

import math

import pytest

from friendly_numbers.core.math.numerical_safeguards import (
    clamp,
    decimal_magnitude,
    is_degenerate,
    is_valid_float,
    reciprocal,
    round_half_away_from_zero,
    round_to_epsilon,
    safe_log10,
    scale_by_power_of_ten,
    validate_non_negative,
)

# =============================================================================
# ТЕСТЫ NaN/Inf ПРОВЕРОК
# =============================================================================


class TestValidity:
    """Тесты для is_valid_float / is_degenerate"""

    def test_finite_values_valid(self) -> None:
        """Конечные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1e300)
        assert is_valid_float(1e-300)

    def test_nan_inf_invalid(self) -> None:
        """NaN и ±Inf невалидны"""
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))

    def test_degenerate_values(self) -> None:
        """0, -0, NaN, ±Inf вырожденные"""
        assert is_degenerate(0.0)
        assert is_degenerate(-0.0)
        assert is_degenerate(float("nan"))
        assert is_degenerate(float("-inf"))

    def test_regular_values_not_degenerate(self) -> None:
        assert not is_degenerate(1e-12)
        assert not is_degenerate(-42)


# =============================================================================
# ТЕСТЫ IEEE-СОВМЕСТИМЫХ ОПЕРАЦИЙ
# =============================================================================


class TestReciprocal:
    """Тесты для reciprocal"""

    def test_regular_value(self) -> None:
        assert reciprocal(16.0) == 0.0625
        assert reciprocal(-4.0) == -0.25

    def test_zero_gives_signed_inf(self) -> None:
        """1 / ±0 → ±inf вместо ZeroDivisionError"""
        assert reciprocal(0.0) == math.inf
        assert reciprocal(-0.0) == -math.inf
        assert reciprocal(0) == math.inf

    def test_inf_gives_zero(self) -> None:
        assert reciprocal(math.inf) == 0.0


class TestSafeLog10:
    """Тесты для safe_log10"""

    def test_positive_values(self) -> None:
        assert safe_log10(1000.0) == 3.0
        assert safe_log10(1.0) == 0.0

    def test_zero_gives_minus_inf(self) -> None:
        assert safe_log10(0.0) == -math.inf

    def test_negative_and_nan_give_nan(self) -> None:
        """Вне домена → NaN, без исключения"""
        assert math.isnan(safe_log10(-10.0))
        assert math.isnan(safe_log10(float("nan")))


class TestDecimalMagnitude:
    """Тесты для decimal_magnitude"""

    def test_magnitudes(self) -> None:
        assert decimal_magnitude(1234.0) == 3
        assert decimal_magnitude(1000.0) == 3
        assert decimal_magnitude(9.99) == 0
        assert decimal_magnitude(0.00012) == -4

    def test_sign_ignored(self) -> None:
        assert decimal_magnitude(-1234.0) == decimal_magnitude(1234.0)

    @pytest.mark.parametrize("value", [0.0, float("nan"), float("inf")])
    def test_degenerate_raises(self, value: float) -> None:
        with pytest.raises(ValueError, match="magnitude is undefined"):
            decimal_magnitude(value)


class TestScaleByPowerOfTen:
    """Тесты для scale_by_power_of_ten"""

    def test_positive_exponent(self) -> None:
        assert scale_by_power_of_ten(2.5, 3) == 2500.0
        assert scale_by_power_of_ten(12, 0) == 12.0

    def test_negative_exponent_is_exact(self) -> None:
        """Деление на точную степень 10 не даёт хвоста в младших разрядах"""
        assert scale_by_power_of_ten(12, -4) == 0.0012
        assert scale_by_power_of_ten(25, -1) == 2.5

    def test_out_of_range_exponent_no_overflow(self) -> None:
        """За пределами 10^308 результат inf или 0, без OverflowError"""
        assert scale_by_power_of_ten(1.0, 400) == math.inf
        assert scale_by_power_of_ten(-1.0, 400) == -math.inf
        assert scale_by_power_of_ten(1.0, -400) == 0.0

    def test_subnormal_scaled_in_two_steps(self) -> None:
        """1e-310 × 10^311 не теряет порядок"""
        assert math.isclose(scale_by_power_of_ten(1e-310, 311), 10.0, rel_tol=1e-9)
        assert math.isclose(scale_by_power_of_ten(10.0, -311), 1e-310, rel_tol=1e-9)

    def test_zero_and_non_finite_unchanged(self) -> None:
        assert scale_by_power_of_ten(0.0, 500) == 0.0
        assert scale_by_power_of_ten(math.inf, -500) == math.inf


# =============================================================================
# ТЕСТЫ ОКРУГЛЕНИЯ И КВАНТОВАНИЯ
# =============================================================================


class TestRoundHalfAwayFromZero:
    """Тесты для round_half_away_from_zero"""

    def test_halves_away_from_zero(self) -> None:
        """В отличие от банковского round(): 2.5 → 3, -2.5 → -3"""
        assert round_half_away_from_zero(2.5) == 3
        assert round_half_away_from_zero(0.5) == 1
        assert round_half_away_from_zero(-2.5) == -3
        assert round_half_away_from_zero(-0.5) == -1

    def test_regular_rounding(self) -> None:
        assert round_half_away_from_zero(12.34) == 12
        assert round_half_away_from_zero(12.6) == 13
        assert round_half_away_from_zero(-12.6) == -13

    def test_just_below_half(self) -> None:
        """Наибольший float меньше 0.5 округляется вниз"""
        assert round_half_away_from_zero(0.49999999999999994) == 0

    def test_large_values_unchanged(self) -> None:
        """От 2^52 значения уже целые и не сдвигаются на 1"""
        assert round_half_away_from_zero(4503599627370497.0) == 4503599627370497
        assert round_half_away_from_zero(-4503599627370497.0) == -4503599627370497
        assert round_half_away_from_zero(1e300) == int(1e300)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_raises(self, value: float) -> None:
        with pytest.raises(ValueError, match="non-finite"):
            round_half_away_from_zero(value)


class TestRoundToEpsilon:
    """Тесты для round_to_epsilon"""

    def test_round_to_step(self) -> None:
        assert round_to_epsilon(1234.0, 100.0) == 1200.0
        assert round_to_epsilon(125.0, 10.0) == 130.0

    def test_half_step(self) -> None:
        assert round_to_epsilon(2.642, 0.5) == 2.5
        assert round_to_epsilon(2.75, 0.5) == 3.0

    def test_negative_symmetric(self) -> None:
        assert round_to_epsilon(-125.0, 10.0) == -130.0

    def test_invalid_eps_raises(self) -> None:
        with pytest.raises(ValueError, match="eps must be positive"):
            round_to_epsilon(10.0, 0.0)

        with pytest.raises(ValueError, match="eps must be positive"):
            round_to_epsilon(10.0, -1.0)


class TestClamp:
    """Тесты для clamp"""

    def test_within_range(self) -> None:
        assert clamp(5, 1, 15) == 5

    def test_below_and_above(self) -> None:
        assert clamp(0, 1, 15) == 1
        assert clamp(17, 1, 15) == 15

    def test_open_bounds(self) -> None:
        assert clamp(100, min_value=1) == 100
        assert clamp(-100, max_value=15) == -100


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidateNonNegative:
    """Тесты для validate_non_negative"""

    def test_valid_values_pass(self) -> None:
        validate_non_negative(0, "count")
        validate_non_negative(5, "count")

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="count must be non-negative"):
            validate_non_negative(-1, "count")

    def test_nan_raises(self) -> None:
        with pytest.raises(ValueError, match="count must be a valid float"):
            validate_non_negative(float("nan"), "count")
