"""
Scaling — Масштабирование с сохранением точности

Умножение значения на коэффициент (или обратный коэффициент) с ограничением
точности результата точностью входа: 7 дней × 365.25 не должно давать
больше значащих цифр, чем было у "7".

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. preserve_significant_digits=False → чистое произведение без округления
2. Точность результата = count_significant_digits(value),
   зажатое в [min_significant_digits, max_significant_digits]
3. ratio = 0 в scale_number_inverse → эффективный ratio ±inf,
   результат не конечен и возвращается без изменений (не исключение)
"""

from friendly_numbers.core.domain.options import ScaleOptions
from friendly_numbers.core.math.numerical_safeguards import clamp, reciprocal
from friendly_numbers.core.math.significant_digits import (
    count_significant_digits,
    round_to_significant_digits,
)


def scale_number(value: float, ratio: float, options: ScaleOptions | None = None) -> float:
    """
    Масштабирование value * ratio.

    Args:
        value: Исходное значение (измерение)
        ratio: Коэффициент пересчёта
        options: Опции точности (default: ScaleOptions())

    Returns:
        Произведение, округлённое до значащих цифр входа

    Examples:
        >>> scale_number(7, 365.25)
        3000.0
        >>> scale_number(2.5, 16)
        40.0
        >>> scale_number(7, 365.25, ScaleOptions(preserve_significant_digits=False))
        2556.75
    """
    options = options or ScaleOptions()

    scaled = value * ratio

    if not options.preserve_significant_digits:
        return scaled

    original_sig_digits = count_significant_digits(value)
    target_sig_digits = clamp(
        original_sig_digits,
        options.min_significant_digits,
        options.max_significant_digits,
    )

    return round_to_significant_digits(scaled, target_sig_digits)


def scale_number_inverse(
    value: float, ratio: float, options: ScaleOptions | None = None
) -> float:
    """
    Обратное масштабирование: scale_number(value, 1 / ratio).

    Args:
        value: Исходное значение
        ratio: Коэффициент прямого пересчёта
        options: Опции точности (default: ScaleOptions())

    Returns:
        value / ratio с той же политикой точности;
        для ratio = 0 — ±inf (или NaN для value = 0)

    Без округления scale_number_inverse(scale_number(v, r), r) возвращает v
    точно, если 1 / r представимо точно (степени двойки); иначе результат
    отличается от v не более чем на пару ulp (v = 7, r = 49).

    У 40 одна значащая цифра, поэтому 40 / 16 = 2.5 округляется до 3.

    Examples:
        >>> scale_number_inverse(40, 16)
        3.0
    """
    return scale_number(value, reciprocal(ratio), options)
