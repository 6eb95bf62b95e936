"""
Сериализация конвертеров: dict / JSON

Формат: объект с тегом "type" (identity, multiply, rational, add, log, exp,
compound); compound вкладывает шаги first / second.

Путь разбора:
1. JSON Schema контракт (src/core/contracts/schema/unit_converter.json)
2. Immutable Pydantic модели (discriminated union по type)
3. build(): создание конвертера с обычной валидацией параметров

Неконечные factor / offset (результат обращения нулевого множителя)
в JSON кодируются строками "Infinity", "-Infinity", "NaN".

Цепочки восстанавливаются структурно (без упрощения), чтобы
to_dict(from_dict(payload)) возвращал исходный payload.
"""

import json
from typing import Annotated, Any, Dict, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter

from src.core.contracts import validate_unit_converter
from src.core.converter.base import IDENTITY, CompoundConverter, IdentityConverter, UnitConverter
from src.core.converter.logarithmic import ExpConverter, LogConverter
from src.core.converter.offset import AddConverter
from src.core.converter.scaling import MultiplyConverter, RationalConverter


# =============================================================================
# PYDANTIC MODELS
# =============================================================================


class IdentitySpec(BaseModel):
    """Тождественный конвертер."""

    type: Literal["identity"] = "identity"

    model_config = {"frozen": True, "extra": "forbid"}

    def build(self) -> UnitConverter:
        return IDENTITY


class MultiplySpec(BaseModel):
    """Умножение на float64 множитель."""

    type: Literal["multiply"] = "multiply"
    factor: float = Field(..., description="Множитель (не округляется до 1.0 в float32)")

    model_config = {"frozen": True, "extra": "forbid", "ser_json_inf_nan": "strings"}

    def build(self) -> UnitConverter:
        return MultiplyConverter(self.factor)


class RationalSpec(BaseModel):
    """Умножение на точное отношение целых."""

    type: Literal["rational"] = "rational"
    dividend: int = Field(..., description="Делимое")
    divisor: int = Field(..., gt=0, description="Делитель (положительный)")

    model_config = {"frozen": True, "extra": "forbid"}

    def build(self) -> UnitConverter:
        return RationalConverter(self.dividend, self.divisor)


class AddSpec(BaseModel):
    """Аффинное смещение."""

    type: Literal["add"] = "add"
    offset: float = Field(..., description="Смещение (не округляется до 0.0 в float32)")

    model_config = {"frozen": True, "extra": "forbid", "ser_json_inf_nan": "strings"}

    def build(self) -> UnitConverter:
        return AddConverter(self.offset)


class LogSpec(BaseModel):
    type: Literal["log"] = "log"
    base: float = Field(..., gt=0, description="Основание логарифма")

    model_config = {"frozen": True, "extra": "forbid"}

    def build(self) -> UnitConverter:
        return LogConverter(self.base)


class ExpSpec(BaseModel):
    type: Literal["exp"] = "exp"
    base: float = Field(..., gt=0, description="Основание степени")

    model_config = {"frozen": True, "extra": "forbid"}

    def build(self) -> UnitConverter:
        return ExpConverter(self.base)


class CompoundSpec(BaseModel):
    """Цепочка: сначала first, затем second."""

    type: Literal["compound"] = "compound"
    first: "ConverterSpec"
    second: "ConverterSpec"

    model_config = {"frozen": True, "extra": "forbid", "ser_json_inf_nan": "strings"}

    def build(self) -> UnitConverter:
        return CompoundConverter(first=self.first.build(), second=self.second.build())


ConverterSpec = Annotated[
    Union[IdentitySpec, MultiplySpec, RationalSpec, AddSpec, LogSpec, ExpSpec, CompoundSpec],
    Field(discriminator="type"),
]

CompoundSpec.model_rebuild()

_SPEC_ADAPTER: TypeAdapter = TypeAdapter(ConverterSpec)


# =============================================================================
# CONVERTER <-> MODEL
# =============================================================================


def converter_to_spec(converter: UnitConverter) -> BaseModel:
    """
    Pydantic-представление конвертера.

    Raises:
        TypeError: Если вариант конвертера не поддерживает сериализацию
    """
    if isinstance(converter, IdentityConverter):
        return IdentitySpec()
    if isinstance(converter, MultiplyConverter):
        return MultiplySpec(factor=converter.factor)
    if isinstance(converter, RationalConverter):
        return RationalSpec(dividend=converter.dividend, divisor=converter.divisor)
    if isinstance(converter, AddConverter):
        return AddSpec(offset=converter.offset)
    if isinstance(converter, LogConverter):
        return LogSpec(base=converter.base)
    if isinstance(converter, ExpConverter):
        return ExpSpec(base=converter.base)
    if isinstance(converter, CompoundConverter):
        return CompoundSpec(
            first=converter_to_spec(converter.first),
            second=converter_to_spec(converter.second),
        )
    raise TypeError(f"Unsupported converter type: {type(converter).__name__}")


def converter_to_dict(converter: UnitConverter) -> Dict[str, Any]:
    """Сериализация конвертера в dict (совместим с unit_converter.json)."""
    return converter_to_spec(converter).model_dump()


def converter_from_dict(data: Dict[str, Any]) -> UnitConverter:
    """
    Восстановление конвертера из dict.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют контракту
        InvalidFactorError / InvalidOffsetError: Если параметры недопустимы
            (например, multiply с factor 1.0)
    """
    validate_unit_converter(data)
    spec = _SPEC_ADAPTER.validate_python(data)
    return spec.build()


def converter_to_json(converter: UnitConverter) -> str:
    return converter_to_spec(converter).model_dump_json()


def converter_from_json(text: str) -> UnitConverter:
    return converter_from_dict(json.loads(text))
