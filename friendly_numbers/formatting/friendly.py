"""
Friendly Formatter — Трансляция упрощённых опций в опции locale-форматтера

format_friendly_number принимает FriendlyNumberOptions, округляет значения
по значащим цифрам и делегирует рендеринг строки NumberFormatter.

Маппинг display:
    standard → "1,234"          (notation standard)
    short    → "1.2K"           (compact short; для 0 < |n| < 1 — scientific)
    long     → "1.2 thousand"   (compact long)

Валюта:
    display standard → symbol, short → narrowSymbol, long → name
    code=True        → code (независимо от display)
    accounting=True  → currencySign accounting ("($1,234)")

decimals:
    'auto' → max fraction digits по порядку числа, min = 0
    int    → min = max = n
    {min, max} → только заданные границы

Поля options.format (raw override) побеждают выведенные значения по одному полю.
"""

import logging

from friendly_numbers.core.contracts import validate_number_format_options
from friendly_numbers.core.domain.options import (
    CompactDisplay,
    CurrencyDisplay,
    CurrencySign,
    DecimalsRange,
    DisplayStyle,
    FriendlyNumberOptions,
    Notation,
    NumberFormatOptions,
    NumberStyle,
    SignDisplay,
    UnitDisplay,
)
from friendly_numbers.core.math.significant_digits import round_to_significant_digits
from friendly_numbers.formatting.locale_formatter import (
    BabelNumberFormatter,
    NumberFormatter,
)

logger = logging.getLogger(__name__)

# Форматтер по умолчанию (stateless)
_DEFAULT_FORMATTER = BabelNumberFormatter()

_CURRENCY_DISPLAY_BY_STYLE = {
    DisplayStyle.STANDARD: CurrencyDisplay.SYMBOL,
    DisplayStyle.SHORT: CurrencyDisplay.NARROW_SYMBOL,
    DisplayStyle.LONG: CurrencyDisplay.NAME,
}


def intelligent_max_decimals(value: float, compact: bool) -> int:
    """
    Максимум fraction digits для decimals='auto'.

    Чем больше порядок числа, тем меньше знаков после запятой.

    Args:
        value: Значение (после округления по значащим цифрам)
        compact: Используется compact нотация

    Returns:
        Максимальное количество fraction digits

    Examples:
        >>> intelligent_max_decimals(1234.56, compact=False)
        0
        >>> intelligent_max_decimals(1.234, compact=False)
        2
        >>> intelligent_max_decimals(1234567, compact=True)
        2
    """
    abs_value = abs(value)

    if compact:
        if abs_value >= 1000:
            return 2
        if abs_value >= 10:
            return 1
        return 2

    if abs_value >= 100:
        return 0
    if abs_value >= 10:
        return 1
    if abs_value >= 1:
        return 2
    if abs_value >= 0.01:
        return 3
    return 4


def resolve_display_options(
    display: DisplayStyle | None,
    currency: str | None,
    unit: str | None,
    code: bool,
    accounting: bool,
    value: float | None = None,
) -> NumberFormatOptions:
    """
    Опции отображения: notation и стиль символов валюты / единиц.

    Args:
        display: standard / short / long
        currency: Код валюты
        unit: Идентификатор единицы
        code: Код валюты вместо символа
        accounting: Бухгалтерский формат отрицательных
        value: Значение (для выбора scientific нотации малых чисел)

    Returns:
        NumberFormatOptions с notation, currency_display, currency_sign,
        unit_display, compact_display
    """
    fields: dict = {"notation": Notation.STANDARD}
    display = DisplayStyle(display) if display is not None else None

    if display in (DisplayStyle.SHORT, DisplayStyle.LONG):
        plain = not currency and not unit
        if display is DisplayStyle.SHORT and value is not None and plain and 0 < abs(value) < 1:
            fields["notation"] = Notation.SCIENTIFIC
        else:
            fields["notation"] = Notation.COMPACT
            fields["compact_display"] = (
                CompactDisplay.LONG if display is DisplayStyle.LONG else CompactDisplay.SHORT
            )

    if currency:
        if accounting:
            fields["currency_sign"] = CurrencySign.ACCOUNTING

        if code:
            fields["currency_display"] = CurrencyDisplay.CODE
        else:
            fields["currency_display"] = _CURRENCY_DISPLAY_BY_STYLE.get(
                display, CurrencyDisplay.SYMBOL
            )
    elif unit:
        fields["unit_display"] = (
            UnitDisplay.LONG if display is DisplayStyle.LONG else UnitDisplay.SHORT
        )

    return NumberFormatOptions(**fields)


def _fraction_digits(
    decimals: str | int | DecimalsRange,
    values: list[float],
    compact: bool,
) -> dict:
    if decimals == "auto":
        return {
            "minimum_fraction_digits": 0,
            "maximum_fraction_digits": max(intelligent_max_decimals(v, compact) for v in values),
        }
    if isinstance(decimals, DecimalsRange):
        bounds = {}
        if decimals.min is not None:
            bounds["minimum_fraction_digits"] = decimals.min
        if decimals.max is not None:
            bounds["maximum_fraction_digits"] = decimals.max
        return bounds

    return {"minimum_fraction_digits": decimals, "maximum_fraction_digits": decimals}


def build_format_options(
    values: list[float],
    options: FriendlyNumberOptions,
    display_value: float | None = None,
) -> NumberFormatOptions:
    """
    Итоговые опции форматтера для уже округлённых значений.

    Выбор scientific нотации для display=short смотрит на исходное
    (не округлённое) значение: 0.96 при significant_digits=1 остаётся
    научным, хотя округляется до 1.

    Args:
        values: Одно значение или два конца диапазона (после округления)
        options: Упрощённые опции
        display_value: Исходное значение для выбора нотации (default: values[0])

    Returns:
        NumberFormatOptions: выведенные поля, перекрытые options.format
    """
    display_options = resolve_display_options(
        options.display,
        options.currency,
        options.unit,
        options.code,
        options.accounting,
        values[0] if display_value is None else display_value,
    )
    compact = display_options.notation == Notation.COMPACT

    derived: dict = display_options.model_dump(exclude_none=True)
    derived["sign_display"] = SignDisplay.EXCEPT_ZERO if options.sign else SignDisplay.AUTO

    if options.currency:
        derived["style"] = NumberStyle.CURRENCY
        derived["currency"] = options.currency
    elif options.unit:
        derived["style"] = NumberStyle.UNIT
        derived["unit"] = options.unit
    elif options.percent:
        derived["style"] = NumberStyle.PERCENT

    derived.update(_fraction_digits(options.decimals, values, compact))

    if options.format is not None:
        derived.update(options.format.model_dump(exclude_none=True))

    return NumberFormatOptions(**derived)


def format_friendly_number(
    value: float | tuple[float, float] | list[float],
    options: FriendlyNumberOptions | None = None,
    formatter: NumberFormatter | None = None,
) -> str:
    """
    Human-friendly строка для числа или диапазона.

    Args:
        value: Число или пара (start, end)
        options: Упрощённые опции (default: FriendlyNumberOptions())
        formatter: Locale-форматтер (default: Babel)

    Returns:
        Отформатированная строка

    Raises:
        ValueError: Если диапазон задан не парой значений
        jsonschema.ValidationError: Если итоговые опции нарушают контракт
        babel.core.UnknownLocaleError: Неизвестная локаль (от форматтера)

    Examples:
        >>> format_friendly_number(1234.56)
        '1,235'
        >>> format_friendly_number(1234.56, FriendlyNumberOptions(significant_digits=2))
        '1,200'
        >>> format_friendly_number([100, 200], FriendlyNumberOptions(currency="USD"))
        '$100 – $200'
    """
    options = options or FriendlyNumberOptions()
    formatter = formatter or _DEFAULT_FORMATTER

    is_range = isinstance(value, (tuple, list))
    raw_values = list(value) if is_range else [value]
    if is_range and len(raw_values) != 2:
        raise ValueError(f"Range must contain exactly two values, got {len(raw_values)}")

    values = raw_values

    if options.significant_digits is not None and options.significant_digits > 0:
        values = [round_to_significant_digits(v, options.significant_digits) for v in values]

    format_options = build_format_options(values, options, display_value=raw_values[0])
    validate_number_format_options(format_options.to_contract())
    logger.debug("Resolved number format options: %s", format_options.to_contract())

    if is_range:
        return formatter.format_range(values[0], values[1], format_options, options.locale)

    return formatter.format(values[0], format_options, options.locale)
