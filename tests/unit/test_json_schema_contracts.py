"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов (JSON number вместо десятичной строки)
- Детекция нарушений constraints (pattern/min/max)
- Интеграция с AdderLinkage и AdderResult
"""

import pytest
from jsonschema import ValidationError

from src.adder import AdderLinkage, add
from src.core.contracts import (
    AdderRequestValidator,
    AdderResultValidator,
    SchemaLoader,
    validate_adder_request,
    validate_adder_result,
)


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_request():
    """Валидный adder_request для тестирования."""
    return {"schema_version": "1", "addend_a": "-5.25", "addend_b": "3.10"}


@pytest.fixture
def valid_result():
    """Валидный adder_result для тестирования."""
    return {"schema_version": "1", "sum": "-2.15", "status": 0, "overflow": False}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_schemas_load(self):
        loader = SchemaLoader()
        for name in ("adder_request", "adder_result"):
            schema = loader.load_schema(name)
            assert schema["title"] == name

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("adder_request") is loader.load_schema("adder_request")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema_rejected(self, tmp_path):
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# ADDER REQUEST
# =============================================================================


class TestAdderRequestContract:
    """Тесты adder_request"""

    def test_valid(self, valid_request):
        validate_adder_request(valid_request)
        assert AdderRequestValidator().is_valid(valid_request)

    @pytest.mark.parametrize("value", ["0", "+1.5", "-999999999.99", "123456789"])
    def test_valid_literals(self, valid_request, value):
        valid_request["addend_a"] = value
        validate_adder_request(valid_request)

    def test_missing_required(self, valid_request):
        del valid_request["addend_b"]
        with pytest.raises(ValidationError):
            validate_adder_request(valid_request)

    def test_json_number_rejected(self, valid_request):
        """JSON number несёт binary float погрешность"""
        valid_request["addend_a"] = 0.1
        with pytest.raises(ValidationError):
            validate_adder_request(valid_request)

    @pytest.mark.parametrize("value", ["1.005", "1234567890", "1e3", "12,50", ""])
    def test_pattern_violations(self, valid_request, value):
        valid_request["addend_a"] = value
        assert not AdderRequestValidator().is_valid(valid_request)

    def test_unknown_field_rejected(self, valid_request):
        valid_request["sum"] = "0.00"
        with pytest.raises(ValidationError):
            validate_adder_request(valid_request)

    def test_wrong_schema_version(self, valid_request):
        valid_request["schema_version"] = "2"
        with pytest.raises(ValidationError):
            validate_adder_request(valid_request)

    def test_iter_errors_reports_all(self):
        errors = list(AdderRequestValidator().iter_errors({"addend_a": 1}))
        assert len(errors) >= 2


# =============================================================================
# ADDER RESULT
# =============================================================================


class TestAdderResultContract:
    """Тесты adder_result"""

    def test_valid(self, valid_result):
        validate_adder_result(valid_result)

    def test_null_sum_allowed(self, valid_result):
        valid_result.update({"sum": None, "status": 1, "overflow": True})
        validate_adder_result(valid_result)

    def test_sum_requires_two_fraction_digits(self, valid_result):
        valid_result["sum"] = "-2.1"
        with pytest.raises(ValidationError):
            validate_adder_result(valid_result)

    @pytest.mark.parametrize("status", [-10000, 10000])
    def test_status_out_of_range(self, valid_result, status):
        valid_result["status"] = status
        assert not AdderResultValidator().is_valid(valid_result)

    def test_status_must_be_integer(self, valid_result):
        valid_result["status"] = "0"
        with pytest.raises(ValidationError):
            validate_adder_result(valid_result)


# =============================================================================
# INTEGRATION WITH MODELS
# =============================================================================


class TestContractIntegration:
    """Payload из моделей проходят схемы"""

    def test_linkage_request_round_trip(self, valid_request):
        validate_adder_request(valid_request)
        linkage = AdderLinkage.from_contract(valid_request)
        payload = linkage.to_request_contract()
        validate_adder_request(payload)
        assert payload == valid_request

    @pytest.mark.parametrize(
        "a, b",
        [("-5.25", "3.10"), ("0.01", "0.02"), ("999999999.99", "0.01")],
    )
    def test_adder_result_payload_valid(self, a, b):
        validate_adder_result(add(a, b).to_contract())
