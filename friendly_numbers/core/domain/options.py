"""
Options — Конфигурация операций округления, масштабирования и форматирования

Immutable Pydantic модели и перечисления для всех публичных операций:
- ScaleOptions: точность результата scale_number
- GenerateScaleConfig: прогрессия и округление генератора шкал
- NumberFormatOptions: объект опций для locale-форматтера
- FriendlyNumberOptions: упрощённые опции format_friendly_number

Все модели frozen=True, defaults применяются на границе вызова.
Enum'ы наследуют str, поэтому вместо членов можно передавать строки ("linear").
"""

from enum import Enum
from typing import Final, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Границы значащих цифр по умолчанию для scale_number
DEFAULT_MIN_SIGNIFICANT_DIGITS: Final[int] = 1
DEFAULT_MAX_SIGNIFICANT_DIGITS: Final[int] = 15

# Значащие цифры и шаги генератора шкал по умолчанию
DEFAULT_SCALE_SIGNIFICANT_DIGITS: Final[int] = 2
DEFAULT_SCALE_STEPS: Final[int] = 10

DEFAULT_LOCALE: Final[str] = "en-US"

# Верхняя граница fraction digits (как у Intl.NumberFormat)
MAX_FRACTION_DIGITS: Final[int] = 100


# =============================================================================
# ENUMS
# =============================================================================


class SignificantDigitsMode(str, Enum):
    """Режим округления по значащим цифрам"""

    FULL = "full"  # точное округление на границе значащих цифр
    HALF = "half"  # следующая цифра прижимается к 0 или 5


class ScaleProgression(str, Enum):
    """Шаг между точками шкалы"""

    LINEAR = "linear"
    EXPONENTIAL = "exponential"
    FRIENDLY = "friendly"


class ScaleRounding(str, Enum):
    """Округление точек шкалы"""

    NONE = "none"
    SIGNIFICANT = "significant"
    HALF = "half"
    FRIENDLY = "friendly"


class DisplayStyle(str, Enum):
    """
    Стиль отображения format_friendly_number.

    standard → "1,234", short → "1.2K", long → "1.2 thousand".
    Для 0 < |n| < 1 без валюты и единиц short даёт научную нотацию ("1.2E-4").
    """

    STANDARD = "standard"
    SHORT = "short"
    LONG = "long"


class Notation(str, Enum):
    STANDARD = "standard"
    COMPACT = "compact"
    SCIENTIFIC = "scientific"


class SignDisplay(str, Enum):
    AUTO = "auto"
    ALWAYS = "always"
    EXCEPT_ZERO = "exceptZero"
    NEVER = "never"
    NEGATIVE = "negative"


class NumberStyle(str, Enum):
    DECIMAL = "decimal"
    CURRENCY = "currency"
    UNIT = "unit"
    PERCENT = "percent"


class CurrencyDisplay(str, Enum):
    SYMBOL = "symbol"
    NARROW_SYMBOL = "narrowSymbol"
    CODE = "code"
    NAME = "name"


class CurrencySign(str, Enum):
    STANDARD = "standard"
    ACCOUNTING = "accounting"


class UnitDisplay(str, Enum):
    SHORT = "short"
    LONG = "long"
    NARROW = "narrow"


class CompactDisplay(str, Enum):
    SHORT = "short"
    LONG = "long"


# =============================================================================
# SCALING / SCALES
# =============================================================================


class ScaleOptions(BaseModel):
    """
    Опции scale_number.

    Точность результата ограничена количеством значащих цифр входного
    значения, зажатым в [min_significant_digits, max_significant_digits].
    """

    preserve_significant_digits: bool = Field(
        True, description="Округлять результат до значащих цифр входа"
    )
    min_significant_digits: int = Field(
        DEFAULT_MIN_SIGNIFICANT_DIGITS, ge=1, description="Нижняя граница значащих цифр"
    )
    max_significant_digits: int = Field(
        DEFAULT_MAX_SIGNIFICANT_DIGITS, ge=1, description="Верхняя граница значащих цифр"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_bounds_order(self) -> "ScaleOptions":
        """Проверка, что min_significant_digits <= max_significant_digits"""
        if self.min_significant_digits > self.max_significant_digits:
            raise ValueError(
                f"min_significant_digits {self.min_significant_digits} must be <= "
                f"max_significant_digits {self.max_significant_digits}"
            )
        return self


class GenerateScaleConfig(BaseModel):
    """
    Конфигурация generate_scale / generate_scale_from_baseline.

    steps, include_start и include_end используются только generate_scale.
    Для friendly прогрессии generate_scale игнорирует steps и rounding.
    """

    progression: ScaleProgression = Field(
        ScaleProgression.FRIENDLY, description="Шаг между точками"
    )
    rounding: ScaleRounding = Field(ScaleRounding.FRIENDLY, description="Округление точек")
    significant_digits: int = Field(
        DEFAULT_SCALE_SIGNIFICANT_DIGITS,
        ge=1,
        description="Значащие цифры для significant/half округления",
    )
    steps: int = Field(
        DEFAULT_SCALE_STEPS, ge=0, description="Промежуточные точки (linear/exponential)"
    )
    include_start: bool = Field(True, description="Включать начало диапазона")
    include_end: bool = Field(True, description="Включать конец диапазона")

    model_config = {"frozen": True}


# =============================================================================
# FORMATTING
# =============================================================================


class NumberFormatOptions(BaseModel):
    """
    Объект опций для locale-форматтера.

    Поля повторяют Intl.NumberFormatOptions; сериализуется в camelCase
    (model_dump(by_alias=True)), принимает оба написания.
    Не заданные поля (None) оставляют решение форматтеру.
    """

    notation: Notation | None = None
    sign_display: SignDisplay | None = None
    style: NumberStyle | None = None
    currency: str | None = None
    currency_display: CurrencyDisplay | None = None
    currency_sign: CurrencySign | None = None
    unit: str | None = None
    unit_display: UnitDisplay | None = None
    compact_display: CompactDisplay | None = None
    minimum_fraction_digits: int | None = Field(None, ge=0, le=MAX_FRACTION_DIGITS)
    maximum_fraction_digits: int | None = Field(None, ge=0, le=MAX_FRACTION_DIGITS)

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_contract(self) -> dict:
        """camelCase dict без пустых полей (формат контракта number_format_options)"""
        return self.model_dump(by_alias=True, exclude_none=True)


class DecimalsRange(BaseModel):
    """Границы fraction digits; не заданная граница не переопределяется"""

    min: int | None = Field(None, ge=0, le=MAX_FRACTION_DIGITS)
    max: int | None = Field(None, ge=0, le=MAX_FRACTION_DIGITS)

    model_config = {"frozen": True}


class FriendlyNumberOptions(BaseModel):
    """
    Упрощённые опции format_friendly_number.

    Транслируются в NumberFormatOptions; поля format (raw override)
    побеждают выведенные значения по одному полю.
    """

    locale: str | list[str] = Field(DEFAULT_LOCALE, description="BCP 47 локаль(и)")
    display: DisplayStyle | None = Field(None, description="standard / short / long")
    sign: bool = Field(False, description="Показывать знак (+/-), кроме нуля")
    currency: str | None = Field(None, description="Код валюты (USD, EUR)")
    code: bool = Field(False, description="Код валюты вместо символа")
    accounting: bool = Field(False, description="Бухгалтерский формат отрицательных")
    unit: str | None = Field(None, description="Единица (kilometer-per-hour)")
    percent: bool = Field(False, description="Проценты (0.12 → 12%)")
    significant_digits: int | None = Field(
        None, description="Округлить до значащих цифр перед форматированием"
    )
    decimals: Literal["auto"] | int | DecimalsRange = Field(
        "auto", description="'auto', фиксированное число или {min, max}"
    )
    format: NumberFormatOptions | None = Field(
        None, description="Raw опции форматтера (override)"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_fixed_decimals(self) -> "FriendlyNumberOptions":
        """Фиксированное число decimals в пределах [0, MAX_FRACTION_DIGITS]"""
        if isinstance(self.decimals, int) and not 0 <= self.decimals <= MAX_FRACTION_DIGITS:
            raise ValueError(
                f"decimals must be in [0, {MAX_FRACTION_DIGITS}], got {self.decimals}"
            )
        return self
