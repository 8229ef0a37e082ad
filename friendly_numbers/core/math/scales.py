"""
Scales — Генерация "красивых" числовых шкал

Упорядоченные последовательности точек для осей и тиков графиков:
- generate_scale: точки между start и end (linear / exponential / friendly)
- generate_scale_from_baseline: count точек от baseline без верхней границы
- round_to_friendly_number: прижатие к якорям {1, 2, 2.5, 5, 10} × 10^k
- apply_rounding: диспетчер режимов ScaleRounding

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. generate_scale: start < end, иначе InvalidRange
2. generate_scale возвращает отсортированные уникальные значения;
   коллизии после округления могут "съесть" include_start/include_end
3. friendly прогрессия игнорирует steps и rounding, шаг всегда ×2
   с последующим прижатием к friendly якорю
4. generate_scale_from_baseline возвращает ровно count значений,
   без сортировки и дедупликации
5. exponential прогрессия с start <= 0 не валидируется: -inf/NaN из log10
   распространяются в результат
"""

import logging
import math
from collections.abc import Callable
from typing import Final

from friendly_numbers.core.domain.options import (
    GenerateScaleConfig,
    ScaleProgression,
    ScaleRounding,
)
from friendly_numbers.core.math.numerical_safeguards import (
    DECIMAL_BASE,
    decimal_magnitude,
    safe_log10,
    scale_by_power_of_ten,
    validate_non_negative,
)
from friendly_numbers.core.math.significant_digits import (
    round_to_half_significant_digits,
    round_to_significant_digits,
)

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Якоря friendly округления: (верхняя граница нормализованного значения, якорь)
FRIENDLY_ANCHORS: Final[tuple[tuple[float, float], ...]] = (
    (1.0, 1.0),
    (2.0, 2.0),
    (2.5, 2.5),
    (5.0, 5.0),
)
FRIENDLY_ANCHOR_CEILING: Final[float] = 10.0

# Множитель шага friendly прогрессии generate_scale
FRIENDLY_PROGRESSION_MULTIPLIER: Final[float] = 2.0

# Цикл множителей friendly прогрессии generate_scale_from_baseline
BASELINE_FRIENDLY_MULTIPLIERS: Final[tuple[float, ...]] = (2.0, 2.5, 2.0)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidRange(ValueError):
    """
    Невалидный диапазон шкалы.

    Возникает в generate_scale, если start >= end (или границы не сравнимы,
    например NaN), а также для friendly прогрессии с start <= 0:
    удвоение неположительного значения никогда не достигает end.
    """

    pass


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_to_friendly_number(value: float) -> float:
    """
    Прижатие значения к ближайшему friendly числу.

    Нормализованное значение (1 <= n < 10) отображается на якоря:
    <=1 → 1, <=2 → 2, <=2.5 → 2.5, <=5 → 5, иначе → 10.

    Args:
        value: Исходное значение

    Returns:
        якорь × 10^magnitude со знаком value; 0 и NaN/Inf без изменений

    Examples:
        >>> round_to_friendly_number(130)
        200.0
        >>> round_to_friendly_number(2400)
        2500.0
        >>> round_to_friendly_number(-7)
        -10.0
    """
    if value == 0 or not math.isfinite(value):
        return value

    magnitude = decimal_magnitude(value)

    normalized = scale_by_power_of_ten(abs(value), -magnitude)

    friendly = FRIENDLY_ANCHOR_CEILING
    for upper_bound, anchor in FRIENDLY_ANCHORS:
        if normalized <= upper_bound:
            friendly = anchor
            break

    result = scale_by_power_of_ten(friendly, magnitude)
    return -result if value < 0 else result


def apply_rounding(
    value: float,
    rounding: ScaleRounding,
    significant_digits: int,
) -> float:
    """
    Округление точки шкалы в режиме rounding.

    Args:
        value: Точка шкалы
        rounding: none / significant / half / friendly
        significant_digits: Значащие цифры (friendly их игнорирует)

    Returns:
        Округлённое значение
    """
    rounding = ScaleRounding(rounding)

    if rounding is ScaleRounding.SIGNIFICANT:
        return round_to_significant_digits(value, significant_digits)
    if rounding is ScaleRounding.HALF:
        return round_to_half_significant_digits(value, significant_digits)
    if rounding is ScaleRounding.FRIENDLY:
        return round_to_friendly_number(value)

    return value


# =============================================================================
# ГЕНЕРАЦИЯ ШКАЛ
# =============================================================================


def _unique_sorted(values: list[float]) -> list[float]:
    """Уникальные значения по возрастанию; все NaN схлопываются в один в конце"""
    finite_or_inf = sorted({v for v in values if not math.isnan(v)})
    if any(math.isnan(v) for v in values):
        finite_or_inf.append(math.nan)
    return finite_or_inf


def _stepped_points(
    start: float,
    end: float,
    config: GenerateScaleConfig,
    point_at: Callable[[int], float],
) -> list[float]:
    """Общая схема linear/exponential: [start], steps промежуточных точек, [end]"""
    points: list[float] = []

    if config.include_start:
        points.append(apply_rounding(start, config.rounding, config.significant_digits))

    for i in range(1, config.steps + 1):
        points.append(apply_rounding(point_at(i), config.rounding, config.significant_digits))

    if config.include_end:
        points.append(apply_rounding(end, config.rounding, config.significant_digits))

    return points


def _friendly_points(start: float, end: float, config: GenerateScaleConfig) -> list[float]:
    """Удвоение с прижатием к friendly якорям до достижения end"""
    if start <= 0:
        raise InvalidRange(
            f"Friendly progression requires a positive start, got start={start}"
        )

    points: list[float] = []

    if config.include_start:
        points.append(round_to_friendly_number(start))

    # NOTE: множитель не зависит от мантиссы; чередование 2 / 2.5 не применяется
    current = start
    while current < end:
        current = round_to_friendly_number(current * FRIENDLY_PROGRESSION_MULTIPLIER)

        if current < end:
            points.append(current)
        elif config.include_end:
            points.append(round_to_friendly_number(end))

    return points


def generate_scale(
    start: float,
    end: float,
    config: GenerateScaleConfig | None = None,
) -> list[float]:
    """
    Шкала точек между start и end.

    Прогрессии:
    - linear: шаг (end - start) / (steps + 1)
    - exponential: тот же шаг в пространстве log10
    - friendly: ×2 с прижатием к {1, 2, 2.5, 5, 10} × 10^k, steps игнорируется

    Args:
        start: Начало диапазона
        end: Конец диапазона (строго больше start)
        config: Конфигурация (default: GenerateScaleConfig())

    Returns:
        Отсортированный список уникальных точек

    Raises:
        InvalidRange: Если start >= end, либо friendly прогрессия с start <= 0

    Examples:
        >>> generate_scale(100, 1000)
        [100.0, 200.0, 500.0, 1000.0]
        >>> generate_scale(0, 100, GenerateScaleConfig(progression="linear", steps=3, rounding="none"))
        [0, 25.0, 50.0, 75.0, 100]
    """
    config = config or GenerateScaleConfig()

    if not start < end:
        raise InvalidRange(f"Start must be less than end, got start={start}, end={end}")

    progression = ScaleProgression(config.progression)

    if progression is ScaleProgression.LINEAR:
        step = (end - start) / (config.steps + 1)
        points = _stepped_points(start, end, config, lambda i: start + step * i)
    elif progression is ScaleProgression.EXPONENTIAL:
        if start <= 0:
            logger.debug("Exponential scale with non-positive start=%s yields NaN points", start)
        log_start = safe_log10(start)
        log_end = safe_log10(end)
        log_step = (log_end - log_start) / (config.steps + 1)
        points = _stepped_points(
            start, end, config, lambda i: DECIMAL_BASE ** (log_start + log_step * i)
        )
    else:
        points = _friendly_points(start, end, config)

    return _unique_sorted(points)


def generate_scale_from_baseline(
    baseline: float,
    count: int,
    config: GenerateScaleConfig | None = None,
) -> list[float]:
    """
    count точек шкалы от baseline.

    Прогрессии:
    - linear: baseline × (i + 1)
    - exponential: baseline × 10^i
    - friendly: baseline, затем накопительное умножение на цикл [2, 2.5, 2]

    Каждая точка проходит apply_rounding с config.rounding.
    steps, include_start и include_end не используются.

    Args:
        baseline: Первая точка шкалы (до округления)
        count: Количество точек (>= 0)
        config: Конфигурация (default: GenerateScaleConfig())

    Returns:
        Список из ровно count точек в порядке генерации

    Raises:
        ValueError: Если count < 0

    Examples:
        >>> generate_scale_from_baseline(100, 5)
        [100.0, 200.0, 500.0, 1000.0, 2000.0]
    """
    config = config or GenerateScaleConfig()
    validate_non_negative(count, "count")

    progression = ScaleProgression(config.progression)

    def rounded(value: float) -> float:
        return apply_rounding(value, config.rounding, config.significant_digits)

    if progression is ScaleProgression.LINEAR:
        return [rounded(baseline * (i + 1)) for i in range(count)]

    if progression is ScaleProgression.EXPONENTIAL:
        return [rounded(baseline * DECIMAL_BASE**i) for i in range(count)]

    scale: list[float] = []
    current = baseline
    for i in range(count):
        if i > 0:
            current *= BASELINE_FRIENDLY_MULTIPLIERS[(i - 1) % len(BASELINE_FRIENDLY_MULTIPLIERS)]
        scale.append(rounded(current))

    return scale
