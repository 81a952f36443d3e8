"""
ExponentialNumber — число в нормализованной экспоненциальной записи

Значение = mantissa × 10^exponent, где mantissa — float (double),
exponent — целое фиксированной ширины (EXPONENT_BITS). Тип позволяет
работать с величинами далеко за пределами float (например 10^1000),
сохраняя относительную точность double.

Immutable Pydantic модель: любая операция возвращает новый экземпляр.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. FINITE и mantissa != 0 → 1 <= |mantissa| < 10
2. mantissa == 0 → exponent == 0 (единственный ноль)
3. Публичный конструктор всегда нормализует; _raw() — только для пар,
   которые вызывающий код уже привёл к нужной форме
4. Деление (и остаток) на ноль → NaN, не Infinity и не исключение
5. NaN распространяется через все бинарные операции

Поведение, сохранённое буквально (см. DESIGN.md):
- Сравнение при разных экспонентах упорядочивает по экспоненте без
  учёта знака: (-1, 5) > (-1, 3)
- a % b вычисляется как a - b * (a / b) с вещественным делением,
  поэтому результат близок к нулю
"""

import math
from decimal import Decimal
from enum import IntEnum
from fractions import Fraction
from numbers import Integral
from typing import Any, Callable, ClassVar, Optional, Union

from pydantic import BaseModel, model_validator

from expnum.core.domain.capabilities import NumberCapabilities
from expnum.core.domain.formatting import (
    DEFAULT_EXPONENT_MARKER,
    DEFAULT_SIGNIFICANT_DIGITS,
    FormatOptions,
    format_scientific,
    parse_format_spec,
)
from expnum.core.math.normalization import (
    NumberKind,
    align_digits,
    canonical_pair,
    normalize,
    split_digits,
    split_integer,
)
from expnum.core.math.numerical_safeguards import (
    RADIX,
    check_exponent,
    coerce_exponent,
    is_canonical_mantissa,
)

# Значения, неявно приводимые к ExponentialNumber в арифметике и сравнениях
NativeNumber = Union[int, float]


# =============================================================================
# ORDERING
# =============================================================================


class Ordering(IntEnum):
    """Результат compare()"""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _order(left: Union[int, float], right: Union[int, float]) -> Ordering:
    if left < right:
        return Ordering.LESS
    if left > right:
        return Ordering.GREATER
    return Ordering.EQUAL


def _order_mantissa(left: float, right: float) -> Ordering:
    """
    Полный порядок мантисс: NaN меньше любого числа и равен NaN.

    Examples:
        >>> _order_mantissa(float("nan"), float("-inf"))
        <Ordering.LESS: -1>
    """
    if math.isnan(left):
        return Ordering.EQUAL if math.isnan(right) else Ordering.LESS
    if math.isnan(right):
        return Ordering.GREATER
    return _order(left, right)


def _operator_pair(
    operation: Callable[["ExponentialNumber", "ExponentialNumber"], "ExponentialNumber"],
) -> tuple[Callable[..., Any], Callable[..., Any]]:
    """Прямой и отражённый оператор с неявным приведением операнда."""

    def forward(self: "ExponentialNumber", other: Any) -> Any:
        coerced = self._coerce(other)
        if coerced is NotImplemented:
            return NotImplemented
        return operation(self, coerced)

    def reverse(self: "ExponentialNumber", other: Any) -> Any:
        coerced = self._coerce(other)
        if coerced is NotImplemented:
            return NotImplemented
        return operation(coerced, self)

    return forward, reverse


# =============================================================================
# EXPONENTIAL NUMBER
# =============================================================================


class ExponentialNumber(BaseModel, NumberCapabilities):
    """
    Обобщённое число mantissa × 10^exponent.

    Ширина экспоненты задаётся в подклассах через EXPONENT_BITS
    (Huge — 64 бита, Humongous — 128 бит). Сам базовый класс не
    инстанцируется.

    Константы ZERO, ONE, MAX_VALUE, ... создаются один раз на вариант
    при импорте expnum.core.domain.variants.
    """

    EXPONENT_BITS: ClassVar[int]
    RADIX: ClassVar[int] = RADIX

    ZERO: ClassVar["ExponentialNumber"]
    ONE: ClassVar["ExponentialNumber"]
    ADDITIVE_IDENTITY: ClassVar["ExponentialNumber"]
    MULTIPLICATIVE_IDENTITY: ClassVar["ExponentialNumber"]
    MAX_VALUE: ClassVar["ExponentialNumber"]
    MIN_VALUE: ClassVar["ExponentialNumber"]

    mantissa: float = 0.0
    exponent: int = 0
    kind: NumberKind = NumberKind.FINITE

    model_config = {"frozen": True}  # Immutable

    def __init__(self, mantissa: NativeNumber = 0.0, exponent: int = 0, **data: Any) -> None:
        # model_validate() и model_dump() передают сюда все поля, включая kind
        super().__init__(mantissa=mantissa, exponent=exponent, **data)

    @model_validator(mode="before")
    @classmethod
    def normalize_pair(cls, data: Any) -> Any:
        """
        Normalizer: приведение входной пары к канонической форме.

        Классификация (kind) всегда вычисляется по мантиссе; переданное
        значение kind игнорируется.

        Raises:
            TypeError: Мантисса не int/float или экспонента не целая
            ExponentOverflowError: Экспонента не помещается в EXPONENT_BITS
        """
        if not isinstance(data, dict):
            return data

        bits = getattr(cls, "EXPONENT_BITS", None)
        if bits is None:
            raise TypeError(f"{cls.__name__} is generic; use Huge or Humongous")

        mantissa = data.get("mantissa", 0.0)
        exponent = coerce_exponent(data.get("exponent", 0))

        # Decimal и Fraction теряют точность: только явно, через from_decimal()
        if isinstance(mantissa, bool) or not isinstance(mantissa, (Integral, float)):
            raise TypeError(f"mantissa must be int or float, got {mantissa!r}")

        if isinstance(mantissa, Integral):
            mantissa, shift = split_integer(int(mantissa))
            exponent += shift

        pair = normalize(float(mantissa), exponent)
        check_exponent(pair.exponent, bits)
        return pair._asdict()

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def _raw(cls, mantissa: float, exponent: int) -> "ExponentialNumber":
        """
        Создание без нормализации.

        Только для пар, уже находящихся в нужной форме (смена знака,
        модуль, расширение экспоненты). Ноль и NaN/Inf всё равно
        канонизируются.
        """
        pair = canonical_pair(mantissa, exponent)
        return cls.model_construct(**pair._asdict())

    @classmethod
    def from_number(cls, value: NativeNumber) -> "ExponentialNumber":
        """
        Неявная конверсия из int/float: (value, 0) с нормализацией.

        int, не помещающийся во float, переводится через десятичные
        цифры без переполнения.
        """
        if isinstance(value, bool) or not isinstance(value, (Integral, float)):
            raise TypeError(f"expected int or float, got {type(value).__name__}")
        return cls(value, 0)

    @classmethod
    def from_decimal(cls, value: Union[Decimal, Fraction]) -> "ExponentialNumber":
        """
        Явная конверсия с потерей точности.

        Decimal: мантисса — старшие цифры (округление double), порядок
        переносится в экспоненту, поэтому Decimal("1e500") не становится
        Infinity. Fraction: через float().
        """
        if isinstance(value, Decimal):
            if not value.is_finite():
                return cls(float(value), 0)
            sign, digits, exponent = value.as_tuple()
            mantissa, exponent = split_digits(
                bool(sign), "".join(str(d) for d in digits), exponent
            )
            return cls(mantissa, exponent)

        if isinstance(value, Fraction):
            return cls(float(value), 0)

        raise TypeError(f"expected Decimal or Fraction, got {type(value).__name__}")

    @classmethod
    def widen(cls, value: "ExponentialNumber") -> "ExponentialNumber":
        """
        Расширение экспоненты: мантисса и экспонента копируются как есть.

        Raises:
            TypeError: Если исходный вариант шире целевого
        """
        if not isinstance(value, ExponentialNumber):
            raise TypeError(f"expected ExponentialNumber, got {type(value).__name__}")
        if value.EXPONENT_BITS > cls.EXPONENT_BITS:
            raise TypeError(f"cannot narrow {type(value).__name__} into {cls.__name__}")
        return cls._raw(value.mantissa, value.exponent)

    def _coerce(self, other: Any) -> Any:
        """Приведение операнда к type(self) или NotImplemented."""
        cls = type(self)
        if isinstance(other, cls):
            return other

        if isinstance(other, ExponentialNumber):
            if other.EXPONENT_BITS <= cls.EXPONENT_BITS:
                return cls.widen(other)
            return NotImplemented

        if isinstance(other, bool):
            return NotImplemented

        if isinstance(other, (Integral, float)):
            return cls.from_number(other)

        return NotImplemented

    def _promote(
        self, other: Any
    ) -> Optional[tuple["ExponentialNumber", "ExponentialNumber"]]:
        """Оба операнда в более широком из двух вариантов."""
        coerced = self._coerce(other)
        if coerced is not NotImplemented:
            return self, coerced

        if isinstance(other, ExponentialNumber):
            return type(other).widen(self), other

        return None

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def _add(self, other: "ExponentialNumber") -> "ExponentialNumber":
        """
        Сложение с выравниванием разрядов.

        Операнд с меньшей экспонентой сдвигается к большей (только деление,
        без переполнения в Infinity), поэтому сложение коммутативно.
        """
        cls = type(self)

        # Нулевой операнд: выравнивание могло бы обнулить второй операнд
        if other.mantissa == 0:
            return cls._raw(self.mantissa, self.exponent)
        if self.mantissa == 0:
            return cls._raw(other.mantissa, other.exponent)

        if self.exponent == other.exponent:
            return cls(self.mantissa + other.mantissa, self.exponent)

        if self.exponent > other.exponent:
            aligned = align_digits(other.mantissa, other.exponent, self.exponent)
            return cls(self.mantissa + aligned.mantissa, self.exponent)

        aligned = align_digits(self.mantissa, self.exponent, other.exponent)
        return cls(aligned.mantissa + other.mantissa, other.exponent)

    def _sub(self, other: "ExponentialNumber") -> "ExponentialNumber":
        return self._add(-other)

    def _mul(self, other: "ExponentialNumber") -> "ExponentialNumber":
        return type(self)(self.mantissa * other.mantissa, self.exponent + other.exponent)

    def _truediv(self, other: "ExponentialNumber") -> "ExponentialNumber":
        cls = type(self)
        if self.is_nan() or other.is_nan():
            return cls(math.nan, 0)
        if self.mantissa == 0:
            return cls.ZERO
        if other.mantissa == 0:
            return cls(math.nan, 0)
        return cls(self.mantissa / other.mantissa, self.exponent - other.exponent)

    def _mod(self, other: "ExponentialNumber") -> "ExponentialNumber":
        # TODO: перейти на усечённое частное a - b * trunc(a / b), когда будет
        # выбрана целочисленная семантика остатка
        cls = type(self)
        if self.is_nan() or other.is_nan():
            return cls(math.nan, 0)
        if self.mantissa == 0:
            return cls.ZERO
        if other.mantissa == 0:
            return cls(math.nan, 0)
        return self - other * (self / other)

    __add__, __radd__ = _operator_pair(_add)
    __sub__, __rsub__ = _operator_pair(_sub)
    __mul__, __rmul__ = _operator_pair(_mul)
    __truediv__, __rtruediv__ = _operator_pair(_truediv)
    __mod__, __rmod__ = _operator_pair(_mod)

    def __neg__(self) -> "ExponentialNumber":
        return type(self)._raw(-self.mantissa, self.exponent)

    def __pos__(self) -> "ExponentialNumber":
        return type(self)._raw(self.mantissa, self.exponent)

    def __abs__(self) -> "ExponentialNumber":
        return type(self)._raw(abs(self.mantissa), self.exponent)

    def increment(self) -> "ExponentialNumber":
        """self + ONE"""
        return self + type(self).ONE

    def decrement(self) -> "ExponentialNumber":
        """self - ONE"""
        return self - type(self).ONE

    @classmethod
    def max_magnitude(
        cls, x: "ExponentialNumber", y: "ExponentialNumber"
    ) -> "ExponentialNumber":
        """Больший из двух по compare() (не по модулю)."""
        return x if x > y else y

    @classmethod
    def min_magnitude(
        cls, x: "ExponentialNumber", y: "ExponentialNumber"
    ) -> "ExponentialNumber":
        """Меньший из двух по compare() (не по модулю)."""
        return x if x < y else y

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def _compare(self, other: "ExponentialNumber") -> Ordering:
        """
        Порядок двух значений одного варианта.

        1. Обе мантиссы 0 → EQUAL
        2. Ровно одна мантисса 0 → сравнение мантисс
        3. Равные экспоненты → сравнение мантисс
        4. Иначе → сравнение экспонент

        Мантиссы сравниваются в полном порядке: NaN меньше любого числа
        и равен другому NaN, поэтому результат определён всегда.
        """
        self_zero = self.mantissa == 0
        other_zero = other.mantissa == 0

        if self_zero and other_zero:
            return Ordering.EQUAL

        if self_zero != other_zero or self.exponent == other.exponent:
            return _order_mantissa(self.mantissa, other.mantissa)

        return _order(self.exponent, other.exponent)

    def compare(self, other: Union["ExponentialNumber", NativeNumber]) -> Ordering:
        """
        Сравнение с другим значением.

        В отличие от операторов <, ==, ... всегда возвращает Ordering,
        в том числе для NaN (полный порядок, см. _compare).

        Raises:
            TypeError: Операнд не приводится к ExponentialNumber
        """
        promoted = self._promote(other)
        if promoted is None:
            raise TypeError(f"cannot compare {type(self).__name__} with {type(other).__name__}")

        left, right = promoted
        return left._compare(right)

    def _ordered(self, other: Any, accepted: tuple[Ordering, ...]) -> Any:
        promoted = self._promote(other)
        if promoted is None:
            return NotImplemented

        left, right = promoted
        # Операторы следуют float: с NaN всё ложно, кроме !=
        if left.is_nan() or right.is_nan():
            return False
        return left._compare(right) in accepted

    def __lt__(self, other: Any) -> Any:
        return self._ordered(other, (Ordering.LESS,))

    def __le__(self, other: Any) -> Any:
        return self._ordered(other, (Ordering.LESS, Ordering.EQUAL))

    def __gt__(self, other: Any) -> Any:
        return self._ordered(other, (Ordering.GREATER,))

    def __ge__(self, other: Any) -> Any:
        return self._ordered(other, (Ordering.GREATER, Ordering.EQUAL))

    def __eq__(self, other: object) -> Any:
        return self._ordered(other, (Ordering.EQUAL,))

    def __ne__(self, other: object) -> Any:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        """
        Hash, согласованный с == для int и float.

        Если значение переводится во float и обратно без изменения пары,
        hash совпадает с hash(float(self)) (а значит и с hash равного int).
        Иначе (экспонента вне диапазона double) — hash пары.
        """
        if self.is_finite():
            as_float = float(self)
            pair = normalize(as_float, 0)
            if (pair.mantissa, pair.exponent) == (self.mantissa, self.exponent):
                return hash(as_float)
        return hash((self.mantissa, self.exponent))

    # =========================================================================
    # CLASSIFICATION
    # =========================================================================

    def is_nan(self) -> bool:
        return self.kind is NumberKind.NAN

    def is_infinity(self) -> bool:
        return self.kind is NumberKind.INFINITY

    def is_positive_infinity(self) -> bool:
        return self.is_infinity() and self.mantissa > 0

    def is_negative_infinity(self) -> bool:
        return self.is_infinity() and self.mantissa < 0

    def is_finite(self) -> bool:
        """True ровно тогда, когда значение не Infinity и не NaN."""
        return self.kind is NumberKind.FINITE

    def is_zero(self) -> bool:
        return self.mantissa == 0

    def is_negative(self) -> bool:
        return self.mantissa < 0

    def is_positive(self) -> bool:
        return self.mantissa > 0

    def is_normal(self) -> bool:
        """Мантисса в каноническом диапазоне 1 <= |m| < 10 (ноль не normal)."""
        return self.is_finite() and is_canonical_mantissa(self.mantissa)

    def is_canonical(self) -> bool:
        return self.is_normal()

    def is_subnormal(self) -> bool:
        return not self.is_normal()

    def is_real_number(self) -> bool:
        return True

    def is_complex_number(self) -> bool:
        return False

    def is_imaginary_number(self) -> bool:
        return False

    # =========================================================================
    # CONVERSION
    # =========================================================================

    def __bool__(self) -> bool:
        return self.mantissa != 0

    def __float__(self) -> float:
        """
        Значение как float.

        Вне диапазона double результат ±inf или 0.0 (без исключения).
        """
        if not self.is_finite():
            return self.mantissa
        return float(f"{self.mantissa!r}e{self.exponent}")

    def to_contract(self) -> dict[str, Any]:
        """
        Сериализованная форма (см. expnum.core.contracts).

        Returns:
            {"mantissa", "exponent", "kind", "exponent_bits"}
        """
        return {
            "mantissa": self.mantissa,
            "exponent": self.exponent,
            "kind": self.kind.value,
            "exponent_bits": self.EXPONENT_BITS,
        }

    # =========================================================================
    # FORMATTING
    # =========================================================================

    def to_string(
        self,
        significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS,
        exponent_marker: str = DEFAULT_EXPONENT_MARKER,
    ) -> str:
        """
        Строковое представление.

        Args:
            significant_digits: Знаков после десятичной точки (>= 0)
            exponent_marker: Символ маркера экспоненты

        Returns:
            Например "1.2500E+010" для (1.25, 10), 4, 'E'

        Raises:
            InvalidFormatArgument: significant_digits < 0 или маркер не один символ
        """
        options = FormatOptions(
            significant_digits=significant_digits,
            exponent_marker=exponent_marker,
        )
        return format_scientific(self.mantissa, self.exponent, options)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.mantissa!r}, {self.exponent!r})"

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return format_scientific(self.mantissa, self.exponent, parse_format_spec(format_spec))
