"""ルール名と評価関数の対応を管理するレジストリ。"""

import logging
from collections.abc import Callable
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from tenken.models.errors import UnknownRuleError

logger = logging.getLogger(__name__)

Evaluator = Callable[[Any, str | None], bool]
ParamCheck = Callable[[str], object]
ParamMode = Literal["none", "required"]


class RuleSpec(BaseModel):
    """登録済みルールの定義。"""

    model_config = ConfigDict(frozen=True)

    name: str
    evaluator: Evaluator
    param: ParamMode = "none"
    check: ParamCheck | None = None


class RuleRegistry:
    """ルール名から評価関数を引くためのレジストリ。

    登録はセットアップ時に一度だけ行い、評価中は読み取り専用として扱う。
    """

    def __init__(self) -> None:
        self._specs: dict[str, RuleSpec] = {}

    def register(
        self,
        name: str,
        evaluator: Evaluator,
        *,
        param: ParamMode = "none",
        check: ParamCheck | None = None,
    ) -> None:
        """ルールを登録する。同名のルールは置き換える。

        Args:
            name: ルール名。
            evaluator: `(value, param) -> bool` の評価関数。Trueで合格。
            param: パラメータの要否。
            check: 宣言時にパラメータを検証する関数。不正な場合はValueErrorを送出する。
        """
        if not name:
            raise ValueError("rule name must not be empty")
        if name in self._specs:
            logger.debug("Replacing rule %r", name)
        self._specs[name] = RuleSpec(name=name, evaluator=evaluator, param=param, check=check)

    def lookup(self, name: str) -> RuleSpec:
        """ルール定義を取得する。

        Raises:
            UnknownRuleError: ルールが登録されていない場合。
        """
        spec = self._specs.get(name)
        if spec is None:
            raise UnknownRuleError(name)
        return spec

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def names(self) -> list[str]:
        return list(self._specs)
