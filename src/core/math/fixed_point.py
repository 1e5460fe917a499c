"""
Fixed-Point Primitives — Scaled Integer Arithmetic

Модуль обеспечивает точную арифметику с фиксированной точкой:
- Значение хранится как целое число units = value × 10^fraction_digits
- Конверсия Decimal ↔ units без округления (точная или ValueError)
- Проверка разрядной сетки (integer_digits + fraction_digits)
- Saturation и high-order truncation для переполнений

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Binary float никогда не участвует в вычислениях
2. Конверсия Decimal → units никогда не округляет
3. max_units(i, f) = 10^(i+f) - 1 (симметрично для отрицательных)
4. Все операции детерминированы и воспроизводимы
"""

from decimal import Decimal
from typing import Final

# =============================================================================
# РАЗРЯДНАЯ СЕТКА ПО УМОЛЧАНИЮ (signed 9 integer + 2 fractional)
# =============================================================================

FIXED_INTEGER_DIGITS_DEFAULT: Final[int] = 9

FIXED_FRACTION_DIGITS_DEFAULT: Final[int] = 2

# Верхняя граница разрядов, защита от 10**huge
FIXED_TOTAL_DIGITS_MAX: Final[int] = 38


# =============================================================================
# РАЗРЯДНАЯ СЕТКА
# =============================================================================


def validate_digits(integer_digits: int, fraction_digits: int) -> None:
    """
    Проверка корректности разрядной сетки.

    Args:
        integer_digits: Количество целых разрядов
        fraction_digits: Количество дробных разрядов

    Raises:
        ValueError: Если разрядность отрицательна, нулевая или слишком велика
    """
    if integer_digits < 0 or fraction_digits < 0:
        raise ValueError(
            f"Digit counts must be non-negative, got "
            f"integer_digits={integer_digits}, fraction_digits={fraction_digits}"
        )

    total = integer_digits + fraction_digits
    if total == 0:
        raise ValueError("Fixed-point layout must have at least one digit")

    if total > FIXED_TOTAL_DIGITS_MAX:
        raise ValueError(
            f"Fixed-point layout of {total} digits exceeds maximum {FIXED_TOTAL_DIGITS_MAX}"
        )


def scale_factor(fraction_digits: int) -> int:
    """
    Множитель units для заданного числа дробных разрядов.

    Examples:
        >>> scale_factor(2)
        100
        >>> scale_factor(0)
        1
    """
    if fraction_digits < 0:
        raise ValueError(f"fraction_digits must be non-negative, got {fraction_digits}")
    return 10**fraction_digits


def max_units(integer_digits: int, fraction_digits: int) -> int:
    """
    Максимальное по модулю значение в units.

    Формула: 10^(integer_digits + fraction_digits) - 1

    Examples:
        >>> max_units(9, 2)
        99999999999
        >>> max_units(7, 2)
        999999999
    """
    validate_digits(integer_digits, fraction_digits)
    return 10 ** (integer_digits + fraction_digits) - 1


def fits_in_digits(units: int, integer_digits: int, fraction_digits: int) -> bool:
    """
    Проверка, помещается ли значение в разрядную сетку.

    Returns:
        True если abs(units) <= max_units(integer_digits, fraction_digits)
    """
    return abs(units) <= max_units(integer_digits, fraction_digits)


# =============================================================================
# ПЕРЕПОЛНЕНИЕ
# =============================================================================


def saturate_units(units: int, integer_digits: int, fraction_digits: int) -> tuple[int, bool]:
    """
    Saturation: clamp значения к границе разрядной сетки.

    Знак сохраняется, модуль ограничивается max_units.

    Returns:
        (saturated_units, was_clamped)

    Examples:
        >>> saturate_units(100, 1, 1)
        (99, True)
        >>> saturate_units(-100, 1, 1)
        (-99, True)
        >>> saturate_units(42, 1, 1)
        (42, False)
    """
    limit = max_units(integer_digits, fraction_digits)

    if units > limit:
        return (limit, True)
    if units < -limit:
        return (-limit, True)
    return (units, False)


def truncate_high_order(
    units: int, integer_digits: int, fraction_digits: int
) -> tuple[int, bool]:
    """
    Усечение старших разрядов (wraparound по модулю 10^(i+f)).

    Сохраняются младшие i+f разрядов модуля, знак исходного значения
    сохраняется. Ноль после усечения всегда неотрицательный.

    Returns:
        (truncated_units, was_truncated)

    Examples:
        >>> truncate_high_order(100000000000, 9, 2)
        (0, True)
        >>> truncate_high_order(-100000000123, 9, 2)
        (-123, True)
        >>> truncate_high_order(123, 9, 2)
        (123, False)
    """
    modulus = max_units(integer_digits, fraction_digits) + 1
    magnitude = abs(units)

    if magnitude < modulus:
        return (units, False)

    kept = magnitude % modulus
    return (-kept if units < 0 else kept, True)


# =============================================================================
# КОНВЕРСИЯ DECIMAL ↔ UNITS
# =============================================================================


def decimal_to_units(value: Decimal, fraction_digits: int) -> int:
    """
    Точная конверсия Decimal → units.

    Работает на уровне (sign, digits, exponent), без контекста decimal,
    поэтому результат никогда не округляется.

    Args:
        value: Конечное Decimal значение
        fraction_digits: Количество дробных разрядов

    Returns:
        value × 10^fraction_digits как int

    Raises:
        ValueError: Если value не конечное (NaN/Inf), слишком велико или
            содержит больше значащих дробных разрядов, чем fraction_digits

    Examples:
        >>> decimal_to_units(Decimal("-5.25"), 2)
        -525
        >>> decimal_to_units(Decimal("3.1"), 2)
        310
        >>> decimal_to_units(Decimal("1.500"), 2)
        150
    """
    if not value.is_finite():
        raise ValueError(f"Fixed-point value must be finite, got {value}")

    sign, digits, exponent = value.as_tuple()

    # Ноль с любым exponent (0E+200000000, 0E-100) равен нулю
    if not any(digits):
        return 0

    if value.adjusted() >= FIXED_TOTAL_DIGITS_MAX:
        raise ValueError(f"Value {value} exceeds {FIXED_TOTAL_DIGITS_MAX} integer digits")

    # Хвостовые нули не значимы: 1.000...0 == 1 (и не упирается в лимит int(str))
    significant = len(digits)
    while digits[significant - 1] == 0:
        significant -= 1
    exponent += len(digits) - significant

    shift = exponent + fraction_digits
    if shift < 0:
        raise ValueError(
            f"Value {value} has more than {fraction_digits} fractional digits"
        )

    # Значащих цифр не более adjusted + fraction_digits + 1
    coefficient = int("".join(str(d) for d in digits[:significant]))
    units = coefficient * 10**shift

    return -units if sign else units


def units_to_decimal(units: int, fraction_digits: int) -> Decimal:
    """
    Точная конверсия units → Decimal с exponent = -fraction_digits.

    Examples:
        >>> units_to_decimal(-215, 2)
        Decimal('-2.15')
        >>> units_to_decimal(0, 2)
        Decimal('0.00')
    """
    if fraction_digits < 0:
        raise ValueError(f"fraction_digits must be non-negative, got {fraction_digits}")

    sign = 1 if units < 0 else 0
    digits = tuple(int(c) for c in str(abs(units)))
    return Decimal((sign, digits, -fraction_digits))
