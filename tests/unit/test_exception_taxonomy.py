"""Tests for the unified exception taxonomy.

Validates:
- ConverterError hierarchy and structured attributes
- Category classification (validation, computation, contract)
- ``to_error_dict()`` produces stable payload keys
- All domain exceptions are ConverterError subclasses
"""

from __future__ import annotations

from typing import ClassVar

from lld_converter.core.config import ConfigValidationError
from lld_converter.core.exceptions import (
    ComputationError,
    ContractError,
    ConverterError,
    DomainError,
    GridPositionError,
    LLDFormatError,
    MissingFieldError,
    SingularityError,
    ValidationError,
)


class TestConverterErrorBase:
    """ConverterError base class behavior."""

    def test_default_attributes(self) -> None:
        err = ConverterError("boom")
        assert err.message == "boom"
        assert err.field == ""
        assert err.stage == ""
        assert err.code == ""
        assert err.category == "general"

    def test_custom_attributes(self) -> None:
        err = ConverterError("fail", field="section", stage="calculator", code="X")
        assert err.field == "section"
        assert err.stage == "calculator"
        assert err.code == "X"

    def test_str_is_message(self) -> None:
        err = ConverterError("human-readable error")
        assert str(err) == "human-readable error"

    def test_to_error_dict_keys(self) -> None:
        err = ConverterError("x", field="f", stage="s", code="C")
        assert err.to_error_dict() == {
            "category": "general",
            "code": "C",
            "stage": "s",
            "field": "f",
            "message": "x",
        }


class TestCategoryBases:
    """Category base classes set correct defaults."""

    def test_validation_error(self) -> None:
        err = ValidationError("bad input")
        assert err.category == "validation"
        assert err.stage == "validation"

    def test_computation_error(self) -> None:
        err = ComputationError("nan")
        assert err.category == "computation"
        assert err.stage == "calculator"

    def test_contract_error(self) -> None:
        err = ContractError("not json")
        assert err.category == "contract"
        assert err.stage == "ingress"


class TestAllExceptionsAreConverterError:
    """Every custom exception inherits from ConverterError."""

    EXCEPTION_CLASSES: ClassVar[list[type[ConverterError]]] = [
        ValidationError,
        MissingFieldError,
        DomainError,
        LLDFormatError,
        ComputationError,
        GridPositionError,
        SingularityError,
        ContractError,
        ConfigValidationError,
    ]

    def test_all_subclass_converter_error(self) -> None:
        for cls in self.EXCEPTION_CLASSES:
            assert issubclass(cls, ConverterError), f"{cls.__name__} is not a ConverterError"


class TestConcreteExceptions:
    """Stage, code and context of concrete exceptions."""

    def test_missing_field_error(self) -> None:
        err = MissingFieldError(["section", "range"])
        assert err.missing_fields == ("section", "range")
        assert err.code == "LLD_INCOMPLETE"
        assert "section, range" in err.message
        assert err.category == "validation"

    def test_domain_error_code_names_field(self) -> None:
        err = DomainError("quarter_section", "XX", "Invalid Quarter Section: XX.")
        assert err.code == "INVALID_QUARTER_SECTION"
        assert err.field == "quarter_section"
        assert err.value == "XX"
        assert err.category == "validation"

    def test_lld_format_error(self) -> None:
        err = LLDFormatError("cannot parse")
        assert err.stage == "parse"
        assert err.code == "LLD_FORMAT_INVALID"

    def test_grid_position_error(self) -> None:
        err = GridPositionError("not in grid")
        assert err.category == "computation"
        assert err.code == "INVALID_GRID_POSITION"

    def test_singularity_error(self) -> None:
        err = SingularityError("pole")
        assert err.category == "computation"
        assert err.code == "LONGITUDE_UNDEFINED"

    def test_config_validation_error(self) -> None:
        err = ConfigValidationError("LLD_LOG_LEVEL", "LOUD", "must be a level")
        assert err.stage == "config"
        assert err.key == "LLD_LOG_LEVEL"
        assert err.value == "LOUD"
        assert "LLD_LOG_LEVEL='LOUD'" in str(err)
