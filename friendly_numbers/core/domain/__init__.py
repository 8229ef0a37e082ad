"""
Domain models and value objects.

Contains option models and enums shared by the math and formatting layers.
"""

from friendly_numbers.core.domain.options import (
    DEFAULT_LOCALE,
    DEFAULT_MAX_SIGNIFICANT_DIGITS,
    DEFAULT_MIN_SIGNIFICANT_DIGITS,
    DEFAULT_SCALE_SIGNIFICANT_DIGITS,
    DEFAULT_SCALE_STEPS,
    MAX_FRACTION_DIGITS,
    CompactDisplay,
    CurrencyDisplay,
    CurrencySign,
    DecimalsRange,
    DisplayStyle,
    FriendlyNumberOptions,
    GenerateScaleConfig,
    Notation,
    NumberFormatOptions,
    NumberStyle,
    ScaleOptions,
    ScaleProgression,
    ScaleRounding,
    SignDisplay,
    SignificantDigitsMode,
    UnitDisplay,
)

__all__ = [
    # Constants
    "DEFAULT_LOCALE",
    "DEFAULT_MAX_SIGNIFICANT_DIGITS",
    "DEFAULT_MIN_SIGNIFICANT_DIGITS",
    "DEFAULT_SCALE_SIGNIFICANT_DIGITS",
    "DEFAULT_SCALE_STEPS",
    "MAX_FRACTION_DIGITS",
    # Rounding / scale enums
    "SignificantDigitsMode",
    "ScaleProgression",
    "ScaleRounding",
    # Formatter enums
    "DisplayStyle",
    "Notation",
    "SignDisplay",
    "NumberStyle",
    "CurrencyDisplay",
    "CurrencySign",
    "UnitDisplay",
    "CompactDisplay",
    # Option models
    "ScaleOptions",
    "GenerateScaleConfig",
    "NumberFormatOptions",
    "DecimalsRange",
    "FriendlyNumberOptions",
]
