"""
friendly_numbers — human-friendly numeric presentation.

Significant-digit rounding, precision-preserving scaling, "nice" scale
generation for chart axes, and locale-aware formatting of numbers and ranges.
"""

from friendly_numbers.core.domain.options import (
    DecimalsRange,
    DisplayStyle,
    FriendlyNumberOptions,
    GenerateScaleConfig,
    NumberFormatOptions,
    ScaleOptions,
    ScaleProgression,
    ScaleRounding,
    SignificantDigitsMode,
)
from friendly_numbers.core.math.scales import (
    InvalidRange,
    apply_rounding,
    generate_scale,
    generate_scale_from_baseline,
    round_to_friendly_number,
)
from friendly_numbers.core.math.scaling import scale_number, scale_number_inverse
from friendly_numbers.core.math.significant_digits import (
    count_significant_digits,
    round_to_half_significant_digits,
    round_to_significant_digits,
    to_significant_digits,
)
from friendly_numbers.formatting import (
    BabelNumberFormatter,
    NumberFormatter,
    format_friendly_number,
)

__version__ = "0.1.0"

__all__ = [
    # Significant digits
    "SignificantDigitsMode",
    "count_significant_digits",
    "round_to_significant_digits",
    "round_to_half_significant_digits",
    "to_significant_digits",
    # Scaling
    "ScaleOptions",
    "scale_number",
    "scale_number_inverse",
    # Scales
    "GenerateScaleConfig",
    "InvalidRange",
    "ScaleProgression",
    "ScaleRounding",
    "apply_rounding",
    "generate_scale",
    "generate_scale_from_baseline",
    "round_to_friendly_number",
    # Formatting
    "DecimalsRange",
    "DisplayStyle",
    "FriendlyNumberOptions",
    "NumberFormatOptions",
    "NumberFormatter",
    "BabelNumberFormatter",
    "format_friendly_number",
]
