"""
Significant Digits — Подсчёт и округление по значащим цифрам

Модуль определяет точность числа через количество значащих цифр:
- Подсчёт значащих цифр по кратчайшему round-trip представлению float
- Точное округление (full) на границе значащих цифр
- Округление с прижатием следующей цифры к 0 или 5 (half)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 0, NaN, ±Inf — вырожденные входы: count → 0, round → значение без изменений
2. significant_digits <= 0 → значение без изменений
3. Знак сохраняется линейным масштабированием, без ветвления
4. Округление симметрично: half away from zero
5. Никогда не бросают исключений: экстремальные порядки (subnormal, ~1e308)
   обрабатываются без OverflowError

ФОРМУЛЫ:
    magnitude = floor(log10(|value|))
    scale = 10^(magnitude - significant_digits + 1)
    full: round(value / scale) * scale
    half: round(value / scale, step=0.5) * scale
"""

from decimal import Decimal

from friendly_numbers.core.domain.options import SignificantDigitsMode
from friendly_numbers.core.math.numerical_safeguards import (
    decimal_magnitude,
    is_degenerate,
    is_valid_float,
    round_to_epsilon,
    scale_by_power_of_ten,
)

# Шаги округления нормализованного значения (value / scale)
FULL_STEP = 1.0
HALF_STEP = 0.5


def count_significant_digits(value: float) -> int:
    """
    Количество значащих цифр числа.

    Берётся кратчайшее десятичное представление |value|, которое
    восстанавливает тот же float (как repr), в научной форме без хвостовых
    нулей. Считаются цифры мантиссы от первой ненулевой.

    Args:
        value: Любое число

    Returns:
        Количество значащих цифр; 0 для 0, NaN, ±Inf

    Examples:
        >>> count_significant_digits(1000)
        1
        >>> count_significant_digits(1200)
        2
        >>> count_significant_digits(0.00012)
        2
        >>> count_significant_digits(-123.45)
        5
    """
    value = float(value)
    if is_degenerate(value):
        return 0

    mantissa = Decimal(repr(abs(value))).normalize().as_tuple().digits

    return len(mantissa)


def _round_at_significant_digit(value: float, significant_digits: int, step: float) -> float:
    """
    Округление value / scale до кратного step, затем обратно × scale.

    Если value / scale не помещается в float (significant_digits больше,
    чем float способен хранить), value уже точнее запрошенного и
    возвращается без изменений.
    """
    exponent = decimal_magnitude(value) - significant_digits + 1
    normalized = scale_by_power_of_ten(value, -exponent)
    if not is_valid_float(normalized):
        return value

    return scale_by_power_of_ten(round_to_epsilon(normalized, step), exponent)


def round_to_significant_digits(value: float, significant_digits: int) -> float:
    """
    Округление до significant_digits значащих цифр.

    Args:
        value: Исходное значение
        significant_digits: Количество значащих цифр

    Returns:
        Округлённое значение; value без изменений для 0, NaN, ±Inf
        и significant_digits <= 0

    Examples:
        >>> round_to_significant_digits(1234, 2)
        1200.0
        >>> round_to_significant_digits(0.001234, 2)
        0.0012
        >>> round_to_significant_digits(-1234, 2)
        -1200.0
    """
    if is_degenerate(value) or significant_digits <= 0:
        return value

    return _round_at_significant_digit(value, significant_digits, FULL_STEP)


def round_to_half_significant_digits(value: float, significant_digits: int) -> float:
    """
    Округление до significant_digits значащих цифр с шагом 0.5.

    Цифра, следующая за сохранёнными значащими, прижимается к 0 или 5.
    Даёт более "круглые" значения: 1321 при 1 цифре → 1500 (full даёт 1000).

    Args:
        value: Исходное значение
        significant_digits: Количество значащих цифр

    Returns:
        Округлённое значение; value без изменений для 0, NaN, ±Inf
        и significant_digits <= 0

    Examples:
        >>> round_to_half_significant_digits(1321, 1)
        1500.0
        >>> round_to_half_significant_digits(1234, 2)
        1250.0
    """
    if is_degenerate(value) or significant_digits <= 0:
        return value

    return _round_at_significant_digit(value, significant_digits, HALF_STEP)


def to_significant_digits(
    value: float,
    significant_digits: int,
    mode: SignificantDigitsMode = SignificantDigitsMode.FULL,
) -> float:
    """
    Округление по значащим цифрам в выбранном режиме.

    Args:
        value: Исходное значение
        significant_digits: Количество значащих цифр
        mode: full (по умолчанию) или half

    Returns:
        Округлённое значение
    """
    if SignificantDigitsMode(mode) is SignificantDigitsMode.HALF:
        return round_to_half_significant_digits(value, significant_digits)

    return round_to_significant_digits(value, significant_digits)
