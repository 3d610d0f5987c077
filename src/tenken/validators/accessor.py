"""レコードからフィールド値を取り出すアクセサ。"""

from collections.abc import Callable, Mapping
from typing import Any

from tenken.models.errors import FieldAccessError

Accessor = Callable[[Any, str], Any]

_MISSING = object()


def default_accessor(record: Any, field: str) -> Any:
    """Mappingはキーで、それ以外は属性名でフィールド値を取得する。

    Raises:
        FieldAccessError: フィールドが存在しない場合。
    """
    if isinstance(record, Mapping):
        value = record.get(field, _MISSING)
    else:
        value = getattr(record, field, _MISSING)
    if value is _MISSING:
        raise FieldAccessError(field)
    return value


def accessor_from_getters(getters: Mapping[str, Callable[[Any], Any]]) -> Accessor:
    """フィールドごとの取得関数からアクセサを作る。"""

    def access(record: Any, field: str) -> Any:
        getter = getters.get(field)
        if getter is None:
            raise FieldAccessError(field)
        return getter(record)

    return access
