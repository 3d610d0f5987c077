"""バリデーション違反関連のデータモデル。"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class Violation(BaseModel):
    """1つのルール評価が失敗した結果。"""

    model_config = ConfigDict(frozen=True)

    field: str
    namespace: str
    rule: str
    param: str | None = None
    value: Any = None

    def describe(self) -> str:
        """翻訳を通さない診断用の文字列を返す。"""
        return f"Key: '{self.namespace}' Error:Field validation for '{self.field}' failed on the '{self.rule}' tag"


class ViolationReport(BaseModel):
    """詳細表示用の違反情報とレンダリング済みメッセージ。"""

    namespace: str
    field: str
    rule: str
    param: str | None
    value: Any
    message: str
