"""制約宣言・違反データモデルのユニットテスト。"""

import pytest
from pydantic import ValidationError

from tenken.models.constraint import ConstraintSet, FieldConstraint, Rule
from tenken.models.violation import Violation


class TestRule:
    def test_tag_without_param(self) -> None:
        assert Rule(name="required").tag == "required"

    def test_tag_with_param(self) -> None:
        assert Rule(name="min", param="10").tag == "min=10"

    def test_rule_is_immutable(self) -> None:
        rule = Rule(name="required")
        with pytest.raises(ValidationError):
            rule.name = "min"  # type: ignore[misc]

    def test_rules_with_same_values_are_equal(self) -> None:
        assert Rule(name="min", param="3") == Rule(name="min", param="3")


class TestConstraintSet:
    def test_field_names_keep_declaration_order(self) -> None:
        constraints = ConstraintSet(
            name="user",
            fields=(
                FieldConstraint(field="FirstName", rules=(Rule(name="required"),)),
                FieldConstraint(field="FamilyName", rules=(Rule(name="required"),)),
            ),
        )
        assert constraints.field_names() == ["FirstName", "FamilyName"]

    def test_empty_constraint_set(self) -> None:
        assert ConstraintSet(name="empty").fields == ()


class TestViolation:
    def test_describe(self) -> None:
        violation = Violation(field="FamilyName", namespace="user.FamilyName", rule="required", value="")
        assert violation.describe() == (
            "Key: 'user.FamilyName' Error:Field validation for 'FamilyName' failed on the 'required' tag"
        )

    def test_param_defaults_to_none(self) -> None:
        violation = Violation(field="Color", namespace="user.Color", rule="iscolor", value="blurple")
        assert violation.param is None
        assert violation.value == "blurple"
