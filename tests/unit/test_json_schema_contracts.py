"""
Tests for JSON Schema contract and converter serialization

Комплексное тестирование сериализации конвертеров:
- Валидность самой схемы
- Round-trip dict / JSON для всех вариантов
- Детекция нарушений required полей, типов и constraints
- Семантическая валидация параметров при восстановлении
"""

import json
import math

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    SCHEMA_NAME,
    SchemaLoader,
    UnitConverterValidator,
    validate_unit_converter,
)
from src.core.converter import (
    IDENTITY,
    AddConverter,
    CompoundConverter,
    ExpConverter,
    InvalidFactorError,
    InvalidOffsetError,
    LogConverter,
    MultiplyConverter,
    RationalConverter,
    UnitConverter,
    converter_from_dict,
    converter_from_json,
    converter_to_dict,
    converter_to_json,
)

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def fahrenheit_payload():
    """Сериализованный °C → °F."""
    return {
        "type": "compound",
        "first": {"type": "multiply", "factor": 1.8},
        "second": {"type": "add", "offset": 32.0},
    }


# =============================================================================
# SCHEMA
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_schema_is_valid(self) -> None:
        schema = SchemaLoader().load_schema(SCHEMA_NAME)
        assert schema["title"] == "UnitConverter"

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema(SCHEMA_NAME) is loader.load_schema(SCHEMA_NAME)

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_schema_dir(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nowhere")

    def test_invalid_schema_rejected(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


class TestContractValidation:
    """Валидация payload против контракта"""

    def test_valid_payload(self, fahrenheit_payload) -> None:
        validate_unit_converter(fahrenheit_payload)
        assert UnitConverterValidator().is_valid(fahrenheit_payload)

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"type": "unknown"},
            {"type": "multiply"},
            {"type": "multiply", "factor": "2.0"},
            {"type": "rational", "dividend": 1, "divisor": 0},
            {"type": "rational", "dividend": 1.5, "divisor": 2},
            {"type": "log", "base": -10.0},
            {"type": "identity", "factor": 2.0},
            {"type": "compound", "first": {"type": "identity"}},
        ],
    )
    def test_invalid_payload(self, payload) -> None:
        with pytest.raises(ValidationError):
            validate_unit_converter(payload)

    def test_nested_errors_reported(self, fahrenheit_payload) -> None:
        fahrenheit_payload["second"] = {"type": "add"}
        errors = list(UnitConverterValidator().iter_errors(fahrenheit_payload))
        assert errors


# =============================================================================
# SERIALIZATION
# =============================================================================


class TestSerialization:
    """Round-trip конвертеров"""

    @pytest.mark.parametrize(
        "converter",
        [
            IDENTITY,
            MultiplyConverter(2.5),
            RationalConverter(-3, 4),
            AddConverter(273.15),
            LogConverter(10.0),
            ExpConverter(2.0),
            CompoundConverter(MultiplyConverter(1.8), AddConverter(32.0)),
            CompoundConverter(
                CompoundConverter(LogConverter(10.0), MultiplyConverter(10.0)),
                AddConverter(-3.0),
            ),
        ],
    )
    def test_dict_round_trip(self, converter: UnitConverter) -> None:
        payload = converter_to_dict(converter)
        validate_unit_converter(payload)
        assert converter_from_dict(payload) == converter

    def test_compound_to_dict(self, fahrenheit_payload) -> None:
        converter = AddConverter(32.0).concatenate(MultiplyConverter(1.8))
        assert converter_to_dict(converter) == fahrenheit_payload

    def test_identity_restored_as_singleton(self) -> None:
        assert converter_to_dict(IDENTITY) == {"type": "identity"}
        assert converter_from_dict({"type": "identity"}) is IDENTITY

    def test_json_round_trip(self) -> None:
        text = converter_to_json(MultiplyConverter(2.5))
        assert json.loads(text) == {"type": "multiply", "factor": 2.5}
        assert converter_from_json(text) == MultiplyConverter(2.5)

    def test_compound_restored_without_simplification(self) -> None:
        """Структура цепочки сохраняется как есть"""
        payload = {
            "type": "compound",
            "first": {"type": "multiply", "factor": 2.0},
            "second": {"type": "multiply", "factor": 0.5},
        }
        restored = converter_from_dict(payload)
        assert isinstance(restored, CompoundConverter)
        assert restored.convert(3.0) == 3.0

    def test_identity_factor_rejected_on_restore(self) -> None:
        with pytest.raises(InvalidFactorError):
            converter_from_dict({"type": "multiply", "factor": 1.0})

    def test_zero_offset_rejected_on_restore(self) -> None:
        with pytest.raises(InvalidOffsetError):
            converter_from_json('{"type": "add", "offset": 0.0}')

    def test_unit_ratio_rejected_on_restore(self) -> None:
        with pytest.raises(InvalidFactorError):
            converter_from_dict({"type": "rational", "dividend": 2, "divisor": 2})

    @pytest.mark.parametrize("factor", [math.inf, -math.inf])
    def test_infinite_factor_json_round_trip(self, factor: float) -> None:
        """Результат обращения нулевого множителя переживает JSON"""
        converter = MultiplyConverter(factor)
        text = converter_to_json(converter)
        assert "Infinity" in text
        assert converter_from_json(text) == converter

    def test_zero_factor_inverse_json_round_trip(self) -> None:
        inverse = MultiplyConverter(0.0).inverse()
        assert converter_from_json(converter_to_json(inverse)) == MultiplyConverter(math.inf)

    def test_nan_factor_json_round_trip(self) -> None:
        text = converter_to_json(MultiplyConverter(float("nan")))
        assert json.loads(text) == {"type": "multiply", "factor": "NaN"}
        restored = converter_from_json(text)
        assert isinstance(restored, MultiplyConverter)
        assert math.isnan(restored.factor)

    def test_infinite_offset_in_chain_json_round_trip(self) -> None:
        converter = CompoundConverter(MultiplyConverter(-math.inf), AddConverter(math.inf))
        assert converter_from_json(converter_to_json(converter)) == converter

    def test_non_finite_dict_round_trip(self) -> None:
        converter = MultiplyConverter(math.inf)
        assert converter_from_dict(converter_to_dict(converter)) == converter

    def test_unknown_float_string_rejected(self) -> None:
        with pytest.raises(ValidationError):
            converter_from_dict({"type": "multiply", "factor": "inf"})

    def test_unsupported_converter(self) -> None:
        class Negate(UnitConverter):
            def convert(self, amount: float) -> float:
                return -amount

            def inverse(self) -> UnitConverter:
                return self

            def is_linear(self) -> bool:
                return True

        with pytest.raises(TypeError, match="Unsupported converter type: Negate"):
            converter_to_dict(Negate())
