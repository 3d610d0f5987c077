"""フィールド識別子を表示名に変換するリゾルバ。"""

from collections.abc import Mapping
from pathlib import Path

import yaml

from tenken.models.errors import CatalogError


class DisplayNameResolver:
    """フィールド識別子→ロケール別表示名の対応表。

    未登録のフィールドは識別子をそのまま返す。
    """

    def __init__(self, names: Mapping[str, str] | None = None) -> None:
        self._names: dict[str, str] = dict(names or {})

    @classmethod
    def from_yaml(cls, path: Path) -> "DisplayNameResolver":
        """フラットなYAMLマッピングから表示名を読み込む。

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

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise CatalogError(str(path), "expected a mapping of field to display name")
        return cls({str(k): str(v) for k, v in data.items()})

    def resolve(self, field: str) -> str:
        return self._names.get(field, field)

    def __contains__(self, field: object) -> bool:
        return field in self._names
