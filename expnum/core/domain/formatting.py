"""
Formatting — строковое представление в экспоненциальной записи

Формат:
    <mantissa с N знаками после точки><marker><+|-><|exponent|, минимум 3 цифры>

Примеры:
    (1.25, 10), N=4, 'E'  -> "1.2500E+010"
    (-2.0, -3), N=3, 'e'  -> "-2.000e-003"
    (1.1, 1000), N=6, 'E' -> "1.100000E+1000"
"""

import math
import re
from dataclasses import dataclass
from typing import Final

from expnum.core.errors import InvalidFormatArgument
from expnum.core.math.numerical_safeguards import MANTISSA_LIMIT

# =============================================================================
# CONFIG
# =============================================================================

# Знаков после десятичной точки по умолчанию
DEFAULT_SIGNIFICANT_DIGITS: Final[int] = 6

# Маркер экспоненты по умолчанию
DEFAULT_EXPONENT_MARKER: Final[str] = "E"

# Минимальная ширина модуля экспоненты (дополняется нулями слева)
EXPONENT_MIN_WIDTH: Final[int] = 3

# Format spec для __format__: "<digits><marker>", например "4e"
_FORMAT_SPEC_PATTERN: Final[re.Pattern[str]] = re.compile(r"^(\d+)(.)$")


@dataclass(frozen=True)
class FormatOptions:
    """Параметры форматирования.

    Проверяются при создании: отрицательное количество знаков и маркер
    длиной не в один символ отвергаются через InvalidFormatArgument.
    """

    significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS
    exponent_marker: str = DEFAULT_EXPONENT_MARKER
    exponent_min_width: int = EXPONENT_MIN_WIDTH

    def __post_init__(self) -> None:
        if self.significant_digits < 0:
            raise InvalidFormatArgument(
                f"significant_digits must be non-negative, got {self.significant_digits}"
            )
        if not isinstance(self.exponent_marker, str) or len(self.exponent_marker) != 1:
            raise InvalidFormatArgument(
                f"exponent_marker must be a single character, got {self.exponent_marker!r}"
            )
        if self.exponent_min_width < 1:
            raise InvalidFormatArgument(
                f"exponent_min_width must be positive, got {self.exponent_min_width}"
            )


DEFAULT_FORMAT: Final[FormatOptions] = FormatOptions()


# =============================================================================
# FORMATTER
# =============================================================================


def format_scientific(
    mantissa: float,
    exponent: int,
    options: FormatOptions = DEFAULT_FORMAT,
) -> str:
    """
    Рендер пары (mantissa, exponent).

    Мантисса выводится с фиксированным числом знаков (как "%.Nf"); если
    округление даёт 10, выводится 1.0... с экспонентой на единицу больше.
    Знак экспоненты выводится всегда, модуль экспоненты дополняется
    нулями до options.exponent_min_width.

    Args:
        mantissa: Мантисса (NaN/Inf выводятся как "nan"/"inf")
        exponent: Экспонента
        options: Параметры форматирования

    Returns:
        Строка вида "1.250000E+010"
    """
    digits = options.significant_digits
    text = f"{mantissa:.{digits}f}"

    # Округление 9.99... до "10.0..." переносится в экспоненту
    if math.isfinite(mantissa) and abs(mantissa) < MANTISSA_LIMIT <= abs(float(text)):
        text = ("-" if mantissa < 0 else "") + f"{1:.{digits}f}"
        exponent += 1

    sign = "+" if exponent >= 0 else "-"
    return (
        f"{text}"
        f"{options.exponent_marker}"
        f"{sign}{abs(exponent):0{options.exponent_min_width}d}"
    )


def parse_format_spec(format_spec: str) -> FormatOptions:
    """
    Разбор format spec вида "<digits><marker>".

    Examples:
        >>> parse_format_spec("4e")
        FormatOptions(significant_digits=4, exponent_marker='e', exponent_min_width=3)

    Raises:
        InvalidFormatArgument: Если spec не соответствует шаблону
    """
    matched = _FORMAT_SPEC_PATTERN.match(format_spec)
    if matched is None:
        raise InvalidFormatArgument(
            f"format spec must be '<digits><marker>', got {format_spec!r}"
        )
    return FormatOptions(
        significant_digits=int(matched.group(1)),
        exponent_marker=matched.group(2),
    )
