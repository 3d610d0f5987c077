"""フィールドアクセサのユニットテスト。"""

from types import SimpleNamespace

import pytest

from tenken.models.errors import FieldAccessError
from tenken.validators.accessor import accessor_from_getters, default_accessor


class TestDefaultAccessor:
    def test_mapping_record(self) -> None:
        assert default_accessor({"FirstName": "John"}, "FirstName") == "John"

    def test_mapping_value_none_is_returned(self) -> None:
        assert default_accessor({"FirstName": None}, "FirstName") is None

    def test_attribute_record(self) -> None:
        record = SimpleNamespace(FirstName="John")
        assert default_accessor(record, "FirstName") == "John"

    def test_missing_key_raises_error(self) -> None:
        with pytest.raises(FieldAccessError) as exc_info:
            default_accessor({}, "FirstName")
        assert exc_info.value.field == "FirstName"

    def test_missing_attribute_raises_error(self) -> None:
        with pytest.raises(FieldAccessError):
            default_accessor(SimpleNamespace(), "FirstName")


class TestAccessorFromGetters:
    def test_uses_registered_getter(self) -> None:
        access = accessor_from_getters({"FullName": lambda r: f"{r[0]} {r[1]}"})
        assert access(("Yamada", "Taro"), "FullName") == "Yamada Taro"

    def test_unregistered_field_raises_error(self) -> None:
        access = accessor_from_getters({})
        with pytest.raises(FieldAccessError):
            access({"FullName": "x"}, "FullName")
