"""組み込みルールの評価関数。"""

import math
import re
from collections.abc import Sized
from typing import Any

from tenken.models.errors import UnsupportedValueError
from tenken.rules.colors import HEX_COLOR, HSL_COLOR, HSLA_COLOR, RGB_COLOR, RGBA_COLOR, is_color
from tenken.rules.layout import parses
from tenken.rules.registry import Evaluator, RuleRegistry

# 値が空であればフィールドの残りのルールを評価しないマーカー
OMITEMPTY = "omitempty"


def is_empty(value: Any) -> bool:
    """値がその型のゼロ値（None、空文字列、0、False、空コレクション）か判定する。"""
    if value is None:
        return True
    if isinstance(value, bool | int | float):
        return not value
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def _measure(rule: str, value: Any) -> float:
    """長さ・大小比較に使う値を取り出す。文字列とコレクションは長さ、数値は値そのもの。"""
    if isinstance(value, bool):
        raise UnsupportedValueError(rule, value)
    if isinstance(value, int | float):
        return value
    if isinstance(value, Sized):
        return len(value)
    raise UnsupportedValueError(rule, value)


def _require_str(rule: str, value: Any) -> str:
    if not isinstance(value, str):
        raise UnsupportedValueError(rule, value)
    return value


def _check_number(param: str) -> float:
    number = float(param)
    if not math.isfinite(number):
        raise ValueError(f"not a finite number: {param}")
    return number


def required(value: Any, param: str | None) -> bool:
    return not is_empty(value)


def omitempty(value: Any, param: str | None) -> bool:
    return True


def min_(value: Any, param: str | None) -> bool:
    return _measure("min", value) >= float(param or 0)


def max_(value: Any, param: str | None) -> bool:
    return _measure("max", value) <= float(param or 0)


def len_(value: Any, param: str | None) -> bool:
    return _measure("len", value) == float(param or 0)


def iscolor(value: Any, param: str | None) -> bool:
    return is_color(_require_str("iscolor", value))


def datetime_(value: Any, param: str | None) -> bool:
    return parses(_require_str("datetime", value), param or "")


def _pattern_rule(rule: str, pattern: re.Pattern[str]) -> Evaluator:
    def evaluate(value: Any, param: str | None) -> bool:
        return pattern.fullmatch(_require_str(rule, value)) is not None

    return evaluate


def register_builtin_rules(registry: RuleRegistry) -> None:
    """組み込みルールをレジストリに登録する。"""
    registry.register("required", required)
    registry.register(OMITEMPTY, omitempty)
    registry.register("min", min_, param="required", check=_check_number)
    registry.register("max", max_, param="required", check=_check_number)
    registry.register("len", len_, param="required", check=_check_number)
    registry.register("iscolor", iscolor)
    registry.register("hexcolor", _pattern_rule("hexcolor", HEX_COLOR))
    registry.register("rgb", _pattern_rule("rgb", RGB_COLOR))
    registry.register("rgba", _pattern_rule("rgba", RGBA_COLOR))
    registry.register("hsl", _pattern_rule("hsl", HSL_COLOR))
    registry.register("hsla", _pattern_rule("hsla", HSLA_COLOR))
    registry.register("datetime", datetime_, param="required")


def default_registry() -> RuleRegistry:
    """組み込みルールを登録済みの新しいレジストリを返す。"""
    registry = RuleRegistry()
    register_builtin_rules(registry)
    return registry
