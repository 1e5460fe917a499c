"""
FixedDecimal — Знаковое десятичное число с фиксированной точкой

Immutable Pydantic модель: целое число units и разрядная сетка
(FixedPointFormat). По умолчанию signed 9 integer + 2 fractional digits,
т.е. диапазон ±999 999 999.99 с шагом 0.01.

Binary float не принимается ни в каком виде: все конструкторы работают
с int, str или Decimal и никогда не округляют.
"""

from decimal import Decimal, InvalidOperation
from typing import Union

from pydantic import BaseModel, Field, model_validator

from src.core.math.fixed_point import (
    FIXED_FRACTION_DIGITS_DEFAULT,
    FIXED_INTEGER_DIGITS_DEFAULT,
    FIXED_TOTAL_DIGITS_MAX,
    decimal_to_units,
    fits_in_digits,
    max_units,
    scale_factor,
    units_to_decimal,
    validate_digits,
)

FixedDecimalInput = Union["FixedDecimal", int, str, Decimal]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FixedDecimalFormatError(ValueError):
    """
    Значение не представимо в заданной разрядной сетке.

    Причины: binary float на входе, лишние дробные разряды, выход за
    max_units, NaN/Inf, несовпадение FixedPointFormat операндов.
    """

    pass


# =============================================================================
# FORMAT
# =============================================================================


class FixedPointFormat(BaseModel):
    """Разрядная сетка числа с фиксированной точкой (всегда signed)."""

    integer_digits: int = Field(
        default=FIXED_INTEGER_DIGITS_DEFAULT,
        ge=0,
        le=FIXED_TOTAL_DIGITS_MAX,
        description="Количество целых разрядов",
    )
    fraction_digits: int = Field(
        default=FIXED_FRACTION_DIGITS_DEFAULT,
        ge=0,
        le=FIXED_TOTAL_DIGITS_MAX,
        description="Количество дробных разрядов (scale)",
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_layout(self) -> "FixedPointFormat":
        validate_digits(self.integer_digits, self.fraction_digits)
        return self

    @property
    def scale(self) -> int:
        return scale_factor(self.fraction_digits)

    @property
    def max_units(self) -> int:
        return max_units(self.integer_digits, self.fraction_digits)

    def fits(self, units: int) -> bool:
        return fits_in_digits(units, self.integer_digits, self.fraction_digits)

    def __str__(self) -> str:
        return f"S9({self.integer_digits})V9({self.fraction_digits})"


# =============================================================================
# VALUE OBJECT
# =============================================================================


class FixedDecimal(BaseModel):
    """
    Значение с фиксированной точкой.

    Инварианты:
    - units всегда int (strict, bool/float отклоняются)
    - abs(units) <= fmt.max_units
    - value == units / 10^fmt.fraction_digits точно

    Immutable модель (frozen=True): сложение создаёт новый экземпляр.
    """

    units: int = Field(
        ..., strict=True, description="Значение × 10^fraction_digits (scaled integer)"
    )
    fmt: FixedPointFormat = Field(
        default_factory=FixedPointFormat, description="Разрядная сетка"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_range(self) -> "FixedDecimal":
        """Проверка, что units помещается в разрядную сетку."""
        if not self.fmt.fits(self.units):
            raise ValueError(
                f"units {self.units} out of range for {self.fmt} "
                f"(max {self.fmt.max_units})"
            )
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def of(
        cls, value: FixedDecimalInput, fmt: FixedPointFormat | None = None
    ) -> "FixedDecimal":
        """
        Точная конструкция из int, str, Decimal или FixedDecimal.

        Args:
            value: Исходное значение (float запрещён)
            fmt: Разрядная сетка (default: S9(9)V9(2))

        Returns:
            FixedDecimal в сетке fmt

        Raises:
            FixedDecimalFormatError: Если значение не представимо точно

        Examples:
            >>> FixedDecimal.of("-5.25").units
            -525
            >>> str(FixedDecimal.of(7))
            '7.00'
        """
        fmt = fmt or FixedPointFormat()

        if isinstance(value, FixedDecimal):
            if value.fmt != fmt:
                raise FixedDecimalFormatError(
                    f"Format mismatch: value is {value.fmt}, expected {fmt}"
                )
            return value

        decimal_value = _coerce_decimal(value)

        try:
            units = decimal_to_units(decimal_value, fmt.fraction_digits)
        except ValueError as e:
            raise FixedDecimalFormatError(str(e)) from e

        return cls.from_units(units, fmt)

    @classmethod
    def from_units(cls, units: int, fmt: FixedPointFormat | None = None) -> "FixedDecimal":
        """
        Конструкция из scaled integer.

        Raises:
            FixedDecimalFormatError: Если units не int или вне разрядной сетки
        """
        fmt = fmt or FixedPointFormat()

        if isinstance(units, bool) or not isinstance(units, int):
            raise FixedDecimalFormatError(
                f"units must be int, got {type(units).__name__}"
            )

        if not fmt.fits(units):
            raise FixedDecimalFormatError(
                f"Value {units_to_decimal(units, fmt.fraction_digits)} "
                f"out of range for {fmt}"
            )

        return cls(units=units, fmt=fmt)

    @classmethod
    def zero(cls, fmt: FixedPointFormat | None = None) -> "FixedDecimal":
        return cls(units=0, fmt=fmt or FixedPointFormat())

    # -------------------------------------------------------------------------
    # Представления
    # -------------------------------------------------------------------------

    @property
    def value(self) -> Decimal:
        """Точное Decimal значение с exponent = -fraction_digits."""
        return units_to_decimal(self.units, self.fmt.fraction_digits)

    def __str__(self) -> str:
        return str(self.value)


def _coerce_decimal(value: object) -> Decimal:
    """Приведение входа к Decimal без участия binary float."""
    # bool — подкласс int, float — неточен: оба отклоняются
    if isinstance(value, bool) or isinstance(value, float):
        raise FixedDecimalFormatError(
            f"Binary {type(value).__name__} is not accepted as fixed-point input: {value!r}"
        )

    if isinstance(value, Decimal):
        return value

    if isinstance(value, int):
        return Decimal(value)

    if isinstance(value, str):
        # Разделители "1_000.00" допускает Decimal, но не контракт adder_request
        if "_" in value:
            raise FixedDecimalFormatError(f"Not a decimal literal: {value!r}")
        try:
            return Decimal(value.strip())
        except InvalidOperation as e:
            raise FixedDecimalFormatError(f"Not a decimal literal: {value!r}") from e

    raise FixedDecimalFormatError(
        f"Unsupported fixed-point input type: {type(value).__name__}"
    )
