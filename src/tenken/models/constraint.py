"""制約宣言のデータモデル。"""

from pydantic import BaseModel, ConfigDict


class Rule(BaseModel):
    """フィールドに付与された名前付きルール。"""

    model_config = ConfigDict(frozen=True)

    name: str
    param: str | None = None

    @property
    def tag(self) -> str:
        """宣言時の表記（`name` または `name=param`）を返す。"""
        if self.param is None:
            return self.name
        return f"{self.name}={self.param}"


class FieldConstraint(BaseModel):
    """1フィールドに対する順序付きルール列。"""

    model_config = ConfigDict(frozen=True)

    field: str
    rules: tuple[Rule, ...] = ()


class ConstraintSet(BaseModel):
    """レコード型ごとの制約宣言。フィールドの並びが評価順になる。"""

    model_config = ConfigDict(frozen=True)

    name: str
    fields: tuple[FieldConstraint, ...] = ()

    def field_names(self) -> list[str]:
        return [fc.field for fc in self.fields]
