"""
Core math modules для friendly_numbers

Значащие цифры, масштабирование и генерация шкал.
"""

# Numerical Safeguards
from friendly_numbers.core.math.numerical_safeguards import (
    DECIMAL_BASE,
    clamp,
    decimal_magnitude,
    is_degenerate,
    is_valid_float,
    reciprocal,
    round_half_away_from_zero,
    round_to_epsilon,
    scale_by_power_of_ten,
    safe_log10,
    validate_non_negative,
)

# Significant Digits
from friendly_numbers.core.math.significant_digits import (
    count_significant_digits,
    round_to_half_significant_digits,
    round_to_significant_digits,
    to_significant_digits,
)

# Scaling
from friendly_numbers.core.math.scaling import scale_number, scale_number_inverse

# Scales
from friendly_numbers.core.math.scales import (
    BASELINE_FRIENDLY_MULTIPLIERS,
    FRIENDLY_PROGRESSION_MULTIPLIER,
    InvalidRange,
    apply_rounding,
    generate_scale,
    generate_scale_from_baseline,
    round_to_friendly_number,
)

__all__ = [
    # Numerical Safeguards
    "DECIMAL_BASE",
    "clamp",
    "decimal_magnitude",
    "is_degenerate",
    "is_valid_float",
    "reciprocal",
    "round_half_away_from_zero",
    "round_to_epsilon",
    "scale_by_power_of_ten",
    "safe_log10",
    "validate_non_negative",
    # Significant Digits
    "count_significant_digits",
    "round_to_significant_digits",
    "round_to_half_significant_digits",
    "to_significant_digits",
    # Scaling
    "scale_number",
    "scale_number_inverse",
    # Scales — Constants
    "BASELINE_FRIENDLY_MULTIPLIERS",
    "FRIENDLY_PROGRESSION_MULTIPLIER",
    # Scales — Exceptions
    "InvalidRange",
    # Scales — Functions
    "apply_rounding",
    "generate_scale",
    "generate_scale_from_baseline",
    "round_to_friendly_number",
]
