"""ADDER: сложение двух чисел с фиксированной точкой

Подпрограмма принимает два signed fixed-point слагаемых одной разрядной
сетки (по умолчанию S9(9)V9(2)) и возвращает их точную сумму в той же
сетке вместе с кодом возврата.

Граница сетки по умолчанию ±999 999 999.99 (9 целых разрядов), поэтому
9 999 999.99 + 0.01 = 10 000 000.00 без переполнения. Для границы
±9 999 999.99 используется FixedPointFormat(integer_digits=7).

Политика переполнения (сумма вне разрядной сетки) задаётся в AdderConfig:
- ERROR: сумма не записывается, status = SIZE_ERROR
- SATURATE: сумма ограничивается ±max, status = SUCCESS
- WRAP: старшие разряды отбрасываются, знак сохраняется, status = SUCCESS

Во всех трёх случаях AdderResult.overflow = True.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict

from src.adder.linkage import CONTRACT_SCHEMA_VERSION, AdderLinkage
from src.core.contracts import validate_adder_result
from src.core.domain.fixed_decimal import (
    FixedDecimal,
    FixedDecimalFormatError,
    FixedDecimalInput,
    FixedPointFormat,
)
from src.core.domain.status import StatusCode, validate_status_code
from src.core.math.fixed_point import saturate_units, truncate_high_order

logger = logging.getLogger(__name__)


# =============================================================================
# OVERFLOW POLICY
# =============================================================================


class OverflowPolicy(str, Enum):
    """Поведение при выходе суммы за разрядную сетку"""

    ERROR = "error"
    SATURATE = "saturate"
    WRAP = "wrap"


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class AdderResult:
    """Результат ADDER."""

    sum: FixedDecimal | None  # None только при ERROR policy и переполнении
    status: StatusCode
    overflow: bool

    # Детали
    details: str

    @property
    def succeeded(self) -> bool:
        return self.status == StatusCode.SUCCESS

    def to_contract(self) -> Dict[str, Any]:
        """
        Payload adder_result (десятичные значения строками), проверенный схемой.

        Raises:
            ValidationError (jsonschema): Если сетка шире S9(9)V9(2)
        """
        payload = {
            "schema_version": CONTRACT_SCHEMA_VERSION,
            "sum": None if self.sum is None else str(self.sum),
            "status": int(self.status),
            "overflow": self.overflow,
        }
        validate_adder_result(payload)
        return payload


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class AdderConfig:
    """Конфигурация ADDER.

    Все три операнда (два входа и выход) разделяют одну разрядную сетку fmt.
    """

    fmt: FixedPointFormat = field(default_factory=FixedPointFormat)
    overflow_policy: OverflowPolicy = OverflowPolicy.ERROR


# =============================================================================
# ADDER
# =============================================================================


class Adder:
    """ADDER: точная сумма двух fixed-point значений + код возврата.

    Stateless: хранит только frozen конфигурацию, безопасен для
    конкурентных вызовов.

    Порядок:
    1. Проверка, что оба слагаемых в сетке config.fmt
    2. Целочисленная сумма units (точная, без округления)
    3. Проверка разрядной сетки, при переполнении применяется policy
    """

    def __init__(self, config: AdderConfig | None = None):
        """Инициализация ADDER.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or AdderConfig()

    def add(self, addend_a: FixedDecimal, addend_b: FixedDecimal) -> AdderResult:
        """Сложение двух слагаемых.

        Args:
            addend_a: первое слагаемое
            addend_b: второе слагаемое

        Returns:
            AdderResult с суммой и кодом возврата

        Raises:
            FixedDecimalFormatError: если сетка слагаемого не совпадает с config.fmt
        """
        fmt = self.config.fmt
        self._check_format(addend_a, "addend_a")
        self._check_format(addend_b, "addend_b")

        raw_units = addend_a.units + addend_b.units

        if fmt.fits(raw_units):
            total = FixedDecimal.from_units(raw_units, fmt)
            return AdderResult(
                sum=total,
                status=StatusCode.SUCCESS,
                overflow=False,
                details=f"{addend_a} + {addend_b} = {total}",
            )

        return self._overflow_result(addend_a, addend_b, raw_units)

    def call(self, linkage: AdderLinkage) -> None:
        """Вызов в исходной конвенции: четыре параметра, два выходных.

        Читает addend_a/addend_b и записывает sum и status на месте.
        При SIZE_ERROR поле sum остаётся без изменений.

        Args:
            linkage: блок параметров вызывающей стороны
        """
        result = self.add(linkage.addend_a, linkage.addend_b)

        if result.sum is not None:
            linkage.sum = result.sum
        linkage.status = validate_status_code(int(result.status))

    def _check_format(self, addend: FixedDecimal, name: str) -> None:
        if addend.fmt != self.config.fmt:
            raise FixedDecimalFormatError(
                f"{name} format {addend.fmt} does not match adder format {self.config.fmt}"
            )

    def _overflow_result(
        self, addend_a: FixedDecimal, addend_b: FixedDecimal, raw_units: int
    ) -> AdderResult:
        fmt = self.config.fmt
        policy = self.config.overflow_policy

        logger.warning(
            "Fixed-point sum %s + %s exceeds %s, applying overflow policy %s",
            addend_a,
            addend_b,
            fmt,
            policy.value,
        )

        if policy == OverflowPolicy.SATURATE:
            units, _ = saturate_units(raw_units, fmt.integer_digits, fmt.fraction_digits)
            total = FixedDecimal.from_units(units, fmt)
            return AdderResult(
                sum=total,
                status=StatusCode.SUCCESS,
                overflow=True,
                details=f"size_overflow_saturated: {addend_a} + {addend_b} -> {total}",
            )

        if policy == OverflowPolicy.WRAP:
            units, _ = truncate_high_order(raw_units, fmt.integer_digits, fmt.fraction_digits)
            total = FixedDecimal.from_units(units, fmt)
            return AdderResult(
                sum=total,
                status=StatusCode.SUCCESS,
                overflow=True,
                details=f"size_overflow_truncated: {addend_a} + {addend_b} -> {total}",
            )

        return AdderResult(
            sum=None,
            status=StatusCode.SIZE_ERROR,
            overflow=True,
            details=f"size_error: {addend_a} + {addend_b} exceeds {fmt}",
        )


# =============================================================================
# CONVENIENCE FUNCTION
# =============================================================================


def add(
    addend_a: FixedDecimalInput,
    addend_b: FixedDecimalInput,
    config: AdderConfig | None = None,
) -> AdderResult:
    """
    Сложение с приведением входов к сетке config.fmt.

    По умолчанию сетка S9(9)V9(2): переполнение начинается после
    ±999 999 999.99, а не после ±9 999 999.99.

    Args:
        addend_a: первое слагаемое (FixedDecimal, int, str или Decimal)
        addend_b: второе слагаемое
        config: конфигурация ADDER (опционально)

    Returns:
        AdderResult

    Examples:
        >>> str(add("-5.25", "3.10").sum)
        '-2.15'
    """
    adder = Adder(config)
    fmt = adder.config.fmt
    return adder.add(FixedDecimal.of(addend_a, fmt), FixedDecimal.of(addend_b, fmt))

