"""
Locale-aware formatting layer.

format_friendly_number translates simplified options into formatter options;
the NumberFormatter protocol is the boundary to the locale formatter.
"""

from friendly_numbers.formatting.friendly import (
    build_format_options,
    format_friendly_number,
    intelligent_max_decimals,
    resolve_display_options,
)
from friendly_numbers.formatting.locale_formatter import (
    RANGE_SEPARATOR,
    BabelNumberFormatter,
    NumberFormatter,
    resolve_locale,
)

__all__ = [
    # Friendly formatter
    "format_friendly_number",
    "build_format_options",
    "resolve_display_options",
    "intelligent_max_decimals",
    # Locale formatter
    "NumberFormatter",
    "BabelNumberFormatter",
    "RANGE_SEPARATOR",
    "resolve_locale",
]
