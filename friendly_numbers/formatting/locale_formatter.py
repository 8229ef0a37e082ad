"""
Locale Formatter — Locale-aware форматирование чисел через Babel (CLDR)

Внешний коллаборатор friendly форматтера: принимает NumberFormatOptions
(подмножество Intl.NumberFormatOptions) и отдаёт строку.

Поддерживается:
- notation: standard / compact / scientific
- style: decimal / currency / unit / percent
- currencyDisplay: symbol / narrowSymbol (как symbol) / code / name
- currencySign: standard / accounting
- unitDisplay: short / long / narrow
- signDisplay: auto / always / exceptZero / never / negative
- minimumFractionDigits / maximumFractionDigits

Любая реализация протокола NumberFormatter может заменить BabelNumberFormatter.
Ошибки Babel (UnknownLocaleError, UnknownUnitError) пробрасываются как есть.
"""

import copy
import decimal
import math
from collections.abc import Sequence
from typing import Final, Protocol, runtime_checkable

from babel import Locale
from babel.core import UnknownLocaleError
from babel.numbers import (
    NumberPattern,
    format_compact_currency,
    format_compact_decimal,
    format_currency,
    get_currency_name,
    get_currency_precision,
    get_plus_sign_symbol,
)
from babel.units import format_unit

from friendly_numbers.core.domain.options import (
    CompactDisplay,
    CurrencyDisplay,
    CurrencySign,
    Notation,
    NumberFormatOptions,
    NumberStyle,
    SignDisplay,
    UnitDisplay,
)

# Разделитель концов диапазона
RANGE_SEPARATOR: Final[str] = " – "

# Множитель процентов
PERCENT_SCALE: Final[int] = 100

NBSP: Final[str] = "\u00a0"

# Система цифр CLDR (как default у babel.numbers)
NUMBERING_SYSTEM: Final[str] = "latn"


# =============================================================================
# PROTOCOL
# =============================================================================


@runtime_checkable
class NumberFormatter(Protocol):
    """Capability форматирования: format(value, options) и format_range(a, b, options)"""

    def format(
        self, value: float, options: NumberFormatOptions, locale: str | Sequence[str]
    ) -> str: ...

    def format_range(
        self,
        start: float,
        end: float,
        options: NumberFormatOptions,
        locale: str | Sequence[str],
    ) -> str: ...


# =============================================================================
# HELPERS
# =============================================================================


def resolve_locale(locale: str | Sequence[str]) -> Locale:
    """
    BCP 47 тег(и) → babel Locale.

    Для списка побеждает первая известная локаль.

    Raises:
        UnknownLocaleError: Если ни одна локаль не известна
        ValueError: Если тег синтаксически некорректен или список пуст
    """
    candidates = [locale] if isinstance(locale, str) else list(locale)
    if not candidates:
        raise ValueError("At least one locale is required")

    last_error: Exception | None = None
    for tag in candidates:
        try:
            return Locale.parse(tag.replace("-", "_"))
        except (UnknownLocaleError, ValueError) as e:
            last_error = e

    raise last_error


def _with_fraction_digits(
    pattern: NumberPattern,
    minimum: int | None,
    maximum: int | None,
    default: tuple[int, int] | None = None,
) -> NumberPattern:
    """
    Копия pattern с границами fraction digits.

    Не заданная граница берётся из default (или из самого pattern);
    maximum не может быть меньше minimum.
    """
    default_min, default_max = default or pattern.frac_prec

    if minimum is None:
        minimum = default_min if maximum is None else min(default_min, maximum)
    if maximum is None:
        maximum = max(default_max, minimum)

    result = copy.copy(pattern)
    result.frac_prec = (minimum, maximum)
    return result


def _with_currency_code(pattern: NumberPattern) -> NumberPattern:
    """Копия currency pattern, где символ валюты заменён её ISO кодом"""
    result = copy.copy(pattern)
    result.prefix = tuple(p.replace("¤", "¤¤" + NBSP) for p in pattern.prefix)
    result.suffix = tuple(s.replace("¤", "¤¤") for s in pattern.suffix)
    return result


def _displayed_fraction_digits(options: NumberFormatOptions, locale: Locale) -> int | None:
    """Знаки после запятой, до которых форматтер округлит значение; None для scientific"""
    notation = options.notation or Notation.STANDARD
    style = options.style or NumberStyle.DECIMAL

    if notation == Notation.SCIENTIFIC:
        return None
    if options.maximum_fraction_digits is not None:
        return options.maximum_fraction_digits
    if notation == Notation.COMPACT:
        return 0

    if style == NumberStyle.CURRENCY:
        default = get_currency_precision(options.currency)
    elif style == NumberStyle.PERCENT:
        default = locale.percent_formats[None].frac_prec[1]
    else:
        default = locale.decimal_formats[None].frac_prec[1]

    if options.minimum_fraction_digits is not None:
        return max(default, options.minimum_fraction_digits)
    return default


def _displays_as_zero(value: float, options: NumberFormatOptions, locale: Locale) -> bool:
    """Округлится ли value при отображении до нуля (0.0001 при 0 знаках → "0")"""
    if value == 0:
        return True

    digits = _displayed_fraction_digits(options, locale)
    if digits is None or not math.isfinite(value):
        return False

    shown = decimal.Decimal(repr(abs(value)))
    if (options.style or NumberStyle.DECIMAL) == NumberStyle.PERCENT:
        shown *= PERCENT_SCALE

    # half-up: ровно половина последнего разряда уже округляется от нуля
    return shown < decimal.Decimal(5).scaleb(-digits - 1)


def _sign_adjusted(
    value: float, sign_display: SignDisplay, shows_zero: bool
) -> tuple[float, bool]:
    """(значение для форматирования, нужен ли явный '+')"""
    if sign_display == SignDisplay.NEVER:
        return abs(value), False
    if sign_display == SignDisplay.ALWAYS:
        return value, math.copysign(1.0, value) > 0
    if sign_display == SignDisplay.EXCEPT_ZERO:
        if shows_zero:
            return 0.0, False
        return value, value > 0
    if sign_display == SignDisplay.NEGATIVE:
        if shows_zero:
            return 0.0, False
        return (value if value < 0 else abs(value)), False

    return value, False


# =============================================================================
# BABEL FORMATTER
# =============================================================================


class BabelNumberFormatter:
    """
    NumberFormatter на основе Babel.

    Округление последних цифр — half away from zero (ROUND_HALF_UP),
    как у Intl.NumberFormat.
    """

    def format(
        self,
        value: float,
        options: NumberFormatOptions,
        locale: str | Sequence[str],
    ) -> str:
        """
        Форматирование одного значения.

        Args:
            value: Число
            options: Опции форматтера
            locale: BCP 47 локаль(и)

        Returns:
            Отформатированная строка
        """
        babel_locale = resolve_locale(locale)
        sign_display = options.sign_display or SignDisplay.AUTO
        shows_zero = _displays_as_zero(value, options, babel_locale)
        signed_value, explicit_plus = _sign_adjusted(value, sign_display, shows_zero)

        with decimal.localcontext() as ctx:
            ctx.rounding = decimal.ROUND_HALF_UP
            text = self._format_signed(signed_value, options, babel_locale)

        if explicit_plus:
            text = get_plus_sign_symbol(babel_locale) + text
        return text

    def format_range(
        self,
        start: float,
        end: float,
        options: NumberFormatOptions,
        locale: str | Sequence[str],
    ) -> str:
        """Оба конца с одинаковыми опциями, через RANGE_SEPARATOR"""
        return (
            self.format(start, options, locale)
            + RANGE_SEPARATOR
            + self.format(end, options, locale)
        )

    # -------------------------------------------------------------------------

    def _format_signed(
        self, value: float, options: NumberFormatOptions, locale: Locale
    ) -> str:
        notation = options.notation or Notation.STANDARD
        style = options.style or NumberStyle.DECIMAL

        if notation == Notation.COMPACT:
            return self._format_compact(value, options, style, locale)
        if notation == Notation.SCIENTIFIC:
            number = self._format_scientific(value, options, style, locale)
            return self._wrap_style(number, options, style, locale)

        if style == NumberStyle.CURRENCY:
            return self._format_currency(value, options, locale)
        if style == NumberStyle.PERCENT:
            pattern = _with_fraction_digits(
                locale.percent_formats[None],
                options.minimum_fraction_digits,
                options.maximum_fraction_digits,
            )
            return pattern.apply(value, locale)

        pattern = _with_fraction_digits(
            locale.decimal_formats[None],
            options.minimum_fraction_digits,
            options.maximum_fraction_digits,
        )
        if style == NumberStyle.UNIT:
            return format_unit(
                value,
                options.unit,
                length=options.unit_display or UnitDisplay.SHORT.value,
                format=pattern,
                locale=locale,
            )
        return pattern.apply(value, locale)

    def _format_currency(
        self, value: float, options: NumberFormatOptions, locale: Locale
    ) -> str:
        precision = get_currency_precision(options.currency)
        display = options.currency_display or CurrencyDisplay.SYMBOL

        if display == CurrencyDisplay.NAME:
            pattern = _with_fraction_digits(
                locale.decimal_formats[None],
                options.minimum_fraction_digits,
                options.maximum_fraction_digits,
                default=(precision, precision),
            )
            return format_currency(
                value,
                options.currency,
                format=pattern,
                locale=locale,
                currency_digits=False,
                format_type="name",
            )

        format_type = (
            "accounting" if options.currency_sign == CurrencySign.ACCOUNTING else "standard"
        )
        pattern = _with_fraction_digits(
            locale.currency_formats.get(format_type) or locale.currency_formats["standard"],
            options.minimum_fraction_digits,
            options.maximum_fraction_digits,
            default=(precision, precision),
        )
        if display == CurrencyDisplay.CODE:
            pattern = _with_currency_code(pattern)

        return pattern.apply(value, locale, currency=options.currency, currency_digits=False)

    def _format_compact(
        self,
        value: float,
        options: NumberFormatOptions,
        style: NumberStyle,
        locale: Locale,
    ) -> str:
        compact_display = options.compact_display or CompactDisplay.SHORT.value
        fraction_digits = options.maximum_fraction_digits or 0

        if style == NumberStyle.PERCENT:
            value = value * PERCENT_SCALE

        if style == NumberStyle.CURRENCY:
            display = options.currency_display or CurrencyDisplay.SYMBOL
            accounting = options.currency_sign == CurrencySign.ACCOUNTING and value < 0
            amount = abs(value) if accounting else value

            if display == CurrencyDisplay.NAME:
                number = format_compact_decimal(
                    amount,
                    format_type=CompactDisplay.LONG.value,
                    locale=locale,
                    fraction_digits=fraction_digits,
                )
                text = f"{number} {get_currency_name(options.currency, count=abs(amount), locale=locale)}"
            elif display == CurrencyDisplay.CODE:
                number = format_compact_decimal(
                    amount,
                    format_type=compact_display,
                    locale=locale,
                    fraction_digits=fraction_digits,
                )
                text = f"{options.currency.upper()}{NBSP}{number}"
            else:
                text = format_compact_currency(
                    amount,
                    options.currency,
                    format_type=CompactDisplay.SHORT.value,
                    locale=locale,
                    fraction_digits=fraction_digits,
                )
            return f"({text})" if accounting else text

        number = format_compact_decimal(
            value,
            format_type=compact_display,
            locale=locale,
            fraction_digits=fraction_digits,
        )
        return self._wrap_style(number, options, style, locale)

    def _format_scientific(
        self,
        value: float,
        options: NumberFormatOptions,
        style: NumberStyle,
        locale: Locale,
    ) -> str:
        if style == NumberStyle.PERCENT:
            value = value * PERCENT_SCALE

        pattern = _with_fraction_digits(
            locale.scientific_formats[None],
            options.minimum_fraction_digits,
            options.maximum_fraction_digits,
        )
        return pattern.apply(value, locale)

    def _wrap_style(
        self,
        number: str,
        options: NumberFormatOptions,
        style: NumberStyle,
        locale: Locale,
    ) -> str:
        """Оформление уже отформатированного числа (compact/scientific) по style"""
        if style == NumberStyle.UNIT:
            return format_unit(
                number,
                options.unit,
                length=options.unit_display or UnitDisplay.SHORT.value,
                locale=locale,
            )
        if style == NumberStyle.PERCENT:
            return number + locale.number_symbols[NUMBERING_SYSTEM]["percentSign"]
        if style == NumberStyle.CURRENCY:
            return f"{number}{NBSP}{options.currency.upper()}"

        return number
