"""
AdderLinkage — Блок параметров вызова ADDER

Четыре параметра в исходном порядке:
1. addend_a — первое слагаемое (вход)
2. addend_b — второе слагаемое (вход)
3. sum      — сумма (выход, записывается Adder.call)
4. status   — код возврата, signed 4-digit (выход)

В отличие от FixedDecimal запись мутабельна: Adder.call() записывает
выходные параметры на месте. validate_assignment=True гарантирует, что
записанные значения проходят те же проверки, что и при конструкции.

Контракт adder_request передаёт десятичные значения строками, чтобы
JSON number не вносил binary float погрешность. Payload проверяется
схемой на входе (from_contract) и на выходе (to_request_contract).
"""

from typing import Any, Dict

from pydantic import BaseModel, Field

from src.core.contracts import validate_adder_request
from src.core.domain.fixed_decimal import FixedDecimal, FixedPointFormat
from src.core.domain.status import STATUS_CODE_MAX, STATUS_CODE_MIN, StatusCode

CONTRACT_SCHEMA_VERSION = "1"


class AdderLinkage(BaseModel):
    """Мутабельный блок параметров вызывающей стороны."""

    addend_a: FixedDecimal = Field(..., description="Первое слагаемое")
    addend_b: FixedDecimal = Field(..., description="Второе слагаемое")
    sum: FixedDecimal | None = Field(
        default=None, description="Сумма (выход), не записывается при SIZE_ERROR"
    )
    status: int = Field(
        default=int(StatusCode.SUCCESS),
        ge=STATUS_CODE_MIN,
        le=STATUS_CODE_MAX,
        description="Код возврата (выход), signed 4-digit",
    )

    model_config = {"validate_assignment": True}

    @classmethod
    def from_contract(
        cls, data: Dict[str, Any], fmt: FixedPointFormat | None = None
    ) -> "AdderLinkage":
        """
        Построение записи из adder_request payload.

        Payload проверяется схемой adder_request до конструкции.

        Raises:
            ValidationError (jsonschema): Если payload не соответствует схеме
            FixedDecimalFormatError: Если значение не представимо в fmt
        """
        validate_adder_request(data)

        return cls(
            addend_a=FixedDecimal.of(data["addend_a"], fmt),
            addend_b=FixedDecimal.of(data["addend_b"], fmt),
        )

    def to_request_contract(self) -> Dict[str, Any]:
        """
        Payload adder_request, проверенный схемой.

        Схема описывает сетку не шире S9(9)V9(2).
        """
        payload = {
            "schema_version": CONTRACT_SCHEMA_VERSION,
            "addend_a": str(self.addend_a),
            "addend_b": str(self.addend_b),
        }
        validate_adder_request(payload)
        return payload
