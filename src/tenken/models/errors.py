"""tenkenのカスタム例外クラス。"""

from typing import Any


class TenkenError(Exception):
    """tenkenの基底例外クラス。"""


class MalformedConstraintError(TenkenError):
    """制約宣言の文字列を解釈できない場合の例外。"""

    def __init__(self, field: str, raw: str, reason: str) -> None:
        super().__init__(f"Malformed constraint on field {field!r}: {raw!r} ({reason})")
        self.field = field
        self.raw = raw
        self.reason = reason


class UnknownRuleError(TenkenError):
    """評価関数が登録されていないルール名を参照した場合の例外。"""

    def __init__(self, rule: str) -> None:
        super().__init__(f"Unknown rule: {rule}")
        self.rule = rule


class DuplicateTemplateError(TenkenError):
    """既存のメッセージテンプレートを明示指定なしに上書きしようとした場合の例外。"""

    def __init__(self, locale: str, rule: str) -> None:
        super().__init__(
            f"Template for rule {rule!r} already exists in locale {locale!r}. "
            "Pass replace=True to override it."
        )
        self.locale = locale
        self.rule = rule


class TranslatorSealedError(TenkenError):
    """確定済みのTranslatorにテンプレートを登録しようとした場合の例外。"""

    def __init__(self, locale: str) -> None:
        super().__init__(f"Translator for locale {locale!r} is sealed; register templates before rendering")
        self.locale = locale


class FieldAccessError(TenkenError):
    """レコードから宣言済みフィールドの値を取得できない場合の例外。"""

    def __init__(self, field: str) -> None:
        super().__init__(f"Field not found on record: {field}")
        self.field = field


class UnsupportedValueError(TenkenError):
    """ルールが扱えない種類の値で評価された場合の例外。"""

    def __init__(self, rule: str, value: Any) -> None:
        super().__init__(f"Rule {rule!r} cannot evaluate value of type {type(value).__name__}")
        self.rule = rule
        self.value = value


class CatalogError(TenkenError):
    """カタログ・宣言ファイルの読み込みエラー。"""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to load {path}: {reason}")
        self.path = path
        self.reason = reason
