"""制約宣言の文字列・YAML・モデル定義からConstraintSetを組み立てる。"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from tenken.models.constraint import ConstraintSet, FieldConstraint, Rule
from tenken.models.errors import CatalogError, MalformedConstraintError
from tenken.rules.registry import RuleRegistry

RULE_SEPARATOR = ","
PARAM_SEPARATOR = "="


def separator_escape(rule_separator: str) -> str | None:
    """パラメータ中でルール区切り文字を表すエスケープ（`,` なら `0x2C`）を返す。"""
    if len(rule_separator) != 1:
        return None
    return f"0x{ord(rule_separator):02X}"


def parse_constraint(
    field: str,
    raw: str,
    registry: RuleRegistry,
    *,
    rule_separator: str = RULE_SEPARATOR,
    param_separator: str = PARAM_SEPARATOR,
) -> FieldConstraint:
    """1フィールド分の制約文字列を解析する。

    Args:
        field: フィールド識別子。
        raw: ``required,min=10`` のような制約文字列。
            パラメータ中の区切り文字は ``0x2C`` のようにエスケープする（``datetime=Jan 20x2C 2006``）。
        registry: ルール名とパラメータ要否を確認するためのレジストリ。

    Returns:
        宣言順のルールを持つFieldConstraint。

    Raises:
        MalformedConstraintError: ルール名が空、またはパラメータが不正な場合。
        UnknownRuleError: 未登録のルール名を参照した場合。
    """
    escape = separator_escape(rule_separator)
    rules: list[Rule] = []
    for part in raw.split(rule_separator):
        name, sep, param = part.strip().partition(param_separator)
        name = name.strip()
        if not name:
            raise MalformedConstraintError(field, raw, "empty rule name")

        spec = registry.lookup(name)
        if spec.param == "required":
            if not sep or not param:
                raise MalformedConstraintError(field, raw, f"rule {name!r} requires a parameter")
            if escape is not None:
                param = param.replace(escape, rule_separator)
            if spec.check is not None:
                try:
                    spec.check(param)
                except ValueError as e:
                    raise MalformedConstraintError(field, raw, f"invalid parameter for {name!r}: {param!r}") from e
            rules.append(Rule(name=name, param=param))
        else:
            if sep:
                raise MalformedConstraintError(field, raw, f"rule {name!r} takes no parameter")
            rules.append(Rule(name=name))

    return FieldConstraint(field=field, rules=tuple(rules))


def build_constraint_set(
    name: str,
    declarations: Mapping[str, str],
    registry: RuleRegistry,
    **options: str,
) -> ConstraintSet:
    """フィールド名→制約文字列のマッピングからConstraintSetを組み立てる。

    マッピングの順序がフィールドの評価順になる。
    """
    fields = tuple(parse_constraint(field, raw, registry, **options) for field, raw in declarations.items())
    return ConstraintSet(name=name, fields=fields)


def load_constraint_set(path: Path, registry: RuleRegistry, **options: str) -> ConstraintSet:
    """YAMLファイルから制約宣言を読み込む。

    ファイル形式::

        name: user
        fields:
          FamilyName: required
          FirstName: min=10

    Raises:
        CatalogError: ファイルが存在しない、または形式が不正な場合。
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise CatalogError(str(path), "file not found") from None
    except yaml.YAMLError as e:
        raise CatalogError(str(path), str(e)) from e

    if not isinstance(data, dict) or not isinstance(data.get("fields"), dict):
        raise CatalogError(str(path), "expected a mapping with a 'fields' mapping")

    name = str(data.get("name") or path.stem)
    declarations = {str(field): str(raw) for field, raw in data["fields"].items()}
    return build_constraint_set(name, declarations, registry, **options)


def constraint_set_from_model(
    model: type[BaseModel],
    registry: RuleRegistry,
    *,
    key: str = "validate",
    **options: str,
) -> ConstraintSet:
    """pydanticモデルのフィールド定義から制約宣言を組み立てる。

    ``Field(json_schema_extra={"validate": "required"})`` のように宣言されたフィールドだけを対象とする。
    """
    declarations: dict[str, str] = {}
    for field_name, info in model.model_fields.items():
        extra: Any = info.json_schema_extra
        if isinstance(extra, dict) and key in extra:
            declarations[field_name] = str(extra[key])
    return build_constraint_set(model.__name__, declarations, registry, **options)
