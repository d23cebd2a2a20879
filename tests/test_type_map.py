"""Tests for the converter registry (core/type_map.py)."""

from __future__ import annotations

import pytest

from coltype.core.type_map import TypeMap, default_type_map
from coltype.core.types import DecimalType, IntegerType
from coltype.exceptions import ConfigurationError, UnknownTypeError
from coltype.infra.locale_parser import LocaleNumberParser


class TestDefaultTypeMap:
    def test_names(self) -> None:
        assert default_type_map().names() == ["decimal", "integer"]

    def test_converter_classes(self) -> None:
        types = default_type_map()
        assert isinstance(types.get("integer"), IntegerType)
        assert isinstance(types.get("decimal"), DecimalType)

    def test_locale_parsing_enabled(self) -> None:
        types = default_type_map(LocaleNumberParser(), use_locale_parser=True)
        decimal = types.get("decimal")
        assert isinstance(decimal, DecimalType)
        assert decimal.locale_parsing is True

    def test_locale_parsing_without_parser_fails_early(self) -> None:
        with pytest.raises(ConfigurationError):
            default_type_map(use_locale_parser=True)


class TestTypeMap:
    def test_unknown_type(self) -> None:
        with pytest.raises(UnknownTypeError) as exc_info:
            default_type_map().get("money")
        assert exc_info.value.hint == "Known types: decimal, integer"

    def test_empty_map_hint(self) -> None:
        with pytest.raises(UnknownTypeError) as exc_info:
            TypeMap().get("integer")
        assert exc_info.value.hint == "Known types: (none)"

    def test_set_and_contains(self) -> None:
        types = TypeMap()
        assert "int" not in types
        types.set("int", IntegerType())
        assert "int" in types
        assert len(types) == 1

    def test_set_replaces(self) -> None:
        first, second = IntegerType(), IntegerType()
        types = TypeMap({"integer": first})
        types.set("integer", second)
        assert types.get("integer") is second
