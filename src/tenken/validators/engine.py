"""宣言された制約に基づいてレコードを評価するエンジン。"""

import logging
from typing import Any

from tenken.models.constraint import ConstraintSet
from tenken.models.violation import Violation
from tenken.rules.builtin import OMITEMPTY, is_empty
from tenken.rules.registry import RuleRegistry
from tenken.validators.accessor import Accessor, default_accessor

logger = logging.getLogger(__name__)


class Validator:
    """制約宣言に従ってレコードを評価し、違反を全件収集する。"""

    def __init__(self, registry: RuleRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    def evaluate(
        self,
        record: Any,
        constraints: ConstraintSet,
        accessor: Accessor | None = None,
    ) -> list[Violation]:
        """レコードを制約宣言に基づいて評価する。

        フィールドの宣言順、フィールド内のルール順にすべてのルールを評価する。
        ``required`` が失敗しても同じフィールドの後続ルールは評価を続ける。

        Args:
            record: 評価対象のレコード。変更しない。
            constraints: レコード型の制約宣言。
            accessor: フィールド値の取得関数。Noneの場合はdefault_accessorを使用。

        Returns:
            検出された違反のリスト。違反がない場合は空リスト。

        Raises:
            FieldAccessError: 宣言済みフィールドの値を取得できない場合。
            UnsupportedValueError: ルールが扱えない種類の値だった場合。
            UnknownRuleError: 評価時にルールが登録されていない場合。
        """
        access = accessor or default_accessor
        violations: list[Violation] = []

        for field_constraint in constraints.fields:
            field = field_constraint.field
            value = access(record, field)

            for rule in field_constraint.rules:
                if rule.name == OMITEMPTY:
                    if is_empty(value):
                        break
                    continue

                spec = self._registry.lookup(rule.name)
                if spec.evaluator(value, rule.param):
                    continue

                violations.append(
                    Violation(
                        field=field,
                        namespace=f"{constraints.name}.{field}",
                        rule=rule.name,
                        param=rule.param,
                        value=value,
                    )
                )

        logger.debug("Evaluated %s: %d violation(s)", constraints.name, len(violations))
        return violations
