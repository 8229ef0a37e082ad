"""
Numerical Safeguards — Float Primitives

Базовые численные примитивы для significant-digit арифметики и генерации шкал:
- Проверка валидности float (NaN/Inf)
- Квантование с округлением half away from zero
- Clamp значения в диапазон
- IEEE-совместимые reciprocal и log10 (без исключений на 0 и отрицательных)
- Валидация аргументов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Округление всегда симметрично относительно нуля (half away from zero)
2. Деление на ноль и log10 вне домена дают inf/NaN, а не исключение
3. Все операции детерминированы и воспроизводимы
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание десятичной шкалы для magnitude
DECIMAL_BASE: Final[float] = 10.0

# Наибольший показатель 10^k, представимый конечным float
MAX_DECIMAL_EXPONENT: Final[int] = 308

# Начиная с 2^52 каждый float — целое число
EXACT_INTEGER_LIMIT: Final[float] = 2.0**52


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_degenerate(value: float) -> bool:
    """
    Вырожденное значение для significant-digit операций: 0, NaN или ±Inf.

    Examples:
        >>> is_degenerate(0.0)
        True
        >>> is_degenerate(float('nan'))
        True
        >>> is_degenerate(-12.5)
        False
    """
    return not is_valid_float(value) or value == 0


# =============================================================================
# IEEE-СОВМЕСТИМЫЕ ОПЕРАЦИИ
# =============================================================================


def reciprocal(value: float) -> float:
    """
    1 / value с IEEE-семантикой для нуля.

    Python бросает ZeroDivisionError, здесь 1 / ±0 → ±inf
    (знак берётся у нуля).

    Examples:
        >>> reciprocal(16.0)
        0.0625
        >>> reciprocal(0.0)
        inf
        >>> reciprocal(-0.0)
        -inf
    """
    if value == 0:
        return math.copysign(math.inf, value)
    return 1 / value


def safe_log10(value: float) -> float:
    """
    log10 без исключения вне домена.

    Returns:
        - log10(value) для value > 0
        - -inf для value == 0
        - NaN для value < 0 и для NaN

    Examples:
        >>> safe_log10(1000.0)
        3.0
        >>> safe_log10(0.0)
        -inf
    """
    if math.isnan(value) or value < 0:
        return math.nan
    if value == 0:
        return -math.inf
    return math.log10(value)


def decimal_magnitude(value: float) -> int:
    """
    Порядок числа: floor(log10(|value|)).

    Позиция старшей значащей цифры. Определено только для конечных
    ненулевых значений.

    Raises:
        ValueError: Если value равно 0, NaN или Inf

    Examples:
        >>> decimal_magnitude(1234.0)
        3
        >>> decimal_magnitude(-0.00012)
        -4
    """
    if is_degenerate(value):
        raise ValueError(f"magnitude is undefined for {value}")

    return math.floor(math.log10(abs(value)))


def _power_of_ten(exponent: int) -> float:
    """10^exponent без OverflowError: 0.0 или inf за пределами диапазона float"""
    return float(f"1e{exponent}")


def scale_by_power_of_ten(value: float, exponent: int) -> float:
    """
    value × 10^exponent.

    Для отрицательного exponent делим на точную степень 10 вместо умножения
    на неточную дробь: 12 × 10^-4 → 12 / 10000 == 0.0012,
    тогда как 12 * 1e-4 == 0.0012000000000000001.

    Показатель за пределами MAX_DECIMAL_EXPONENT применяется в два шага,
    чтобы subnormal значения (1e-310 × 10^311) не теряли порядок.
    Переполнение даёт ±inf, исчезновение порядка — 0, без исключения.

    Examples:
        >>> scale_by_power_of_ten(12, -4)
        0.0012
        >>> scale_by_power_of_ten(2.5, 3)
        2500.0
        >>> scale_by_power_of_ten(1.0, 400)
        inf
    """
    if value == 0 or not is_valid_float(value):
        return value

    if exponent > MAX_DECIMAL_EXPONENT:
        value = value * _power_of_ten(MAX_DECIMAL_EXPONENT)
        exponent -= MAX_DECIMAL_EXPONENT
    elif exponent < -MAX_DECIMAL_EXPONENT:
        value = value / _power_of_ten(MAX_DECIMAL_EXPONENT)
        exponent += MAX_DECIMAL_EXPONENT

    if exponent >= 0:
        return value * _power_of_ten(exponent)
    return value / _power_of_ten(-exponent)


# =============================================================================
# ОКРУГЛЕНИЕ И КВАНТОВАНИЕ
# =============================================================================


def round_half_away_from_zero(value: float) -> int:
    """
    Округление до целого, половины уходят от нуля.

    Встроенный round() использует банковское округление (2.5 → 2),
    здесь 2.5 → 3 и -2.5 → -3. Округление идёт по точному десятичному
    значению float, поэтому 0.49999999999999994 → 0, а значения
    от 2^52 (уже целые) возвращаются без изменений.

    Raises:
        ValueError: Если value равно NaN или ±Inf

    Examples:
        >>> round_half_away_from_zero(2.5)
        3
        >>> round_half_away_from_zero(-2.5)
        -3
        >>> round_half_away_from_zero(12.34)
        12
    """
    if not is_valid_float(value):
        raise ValueError(f"Cannot round non-finite value {value}")

    if abs(value) >= EXACT_INTEGER_LIMIT:
        return int(value)

    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def round_to_epsilon(value: float, eps: float) -> float:
    """
    Округление значения до ближайшего кратного eps.

    Использует round half away from zero: 125 / 10 = 12.5 → 13 шагов → 130.

    Args:
        value: Значение для округления
        eps: Шаг квантования

    Returns:
        Округлённое значение (количество шагов × eps)

    Raises:
        ValueError: Если eps <= 0 или value равно NaN/Inf

    Examples:
        >>> round_to_epsilon(1234.0, 100.0)
        1200.0
        >>> round_to_epsilon(125.0, 10.0)
        130.0
        >>> round_to_epsilon(2.642, 0.5)
        2.5
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    steps = round_half_away_from_zero(value / eps)

    return steps * eps


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(5, 1, 15)
        5
        >>> clamp(0, 1, 15)
        1
        >>> clamp(17, 1, 15)
        15
    """
    result = value

    if max_value is not None:
        result = min(result, max_value)

    if min_value is not None:
        result = max(result, min_value)

    return result


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
