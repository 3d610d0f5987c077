"""レコード評価とメッセージ翻訳をまとめるサービス。"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from tenken.config import TenkenConfig
from tenken.constraints.parser import build_constraint_set, load_constraint_set
from tenken.i18n.display_names import DisplayNameResolver
from tenken.i18n.translator import Translator
from tenken.i18n.universal import UniversalTranslator
from tenken.models.constraint import ConstraintSet
from tenken.models.violation import ViolationReport
from tenken.rules.builtin import default_registry
from tenken.validators.accessor import Accessor
from tenken.validators.engine import Validator


class ValidationService:
    """制約の評価から、ロケール別メッセージの生成までを行う。

    Translatorと表示名はセットアップ時に一度だけ構成し、複数の評価で共有する。
    """

    def __init__(
        self,
        validator: Validator,
        translators: UniversalTranslator,
        *,
        default_locale: str,
        rule_separator: str = ",",
        param_separator: str = "=",
    ) -> None:
        self._validator = validator
        self._translators = translators
        self._default_locale = default_locale
        self._rule_separator = rule_separator
        self._param_separator = param_separator

    @property
    def validator(self) -> Validator:
        return self._validator

    def translator(self, locale: str | None = None) -> Translator:
        """ロケールのTranslatorを返す。テンプレートの追加登録はここから行う。"""
        return self._translators.get_translator(locale or self._default_locale)

    def build_constraints(self, name: str, declarations: Mapping[str, str]) -> ConstraintSet:
        """フィールド名→制約文字列のマッピングから制約宣言を組み立てる。"""
        return build_constraint_set(
            name,
            declarations,
            self._validator.registry,
            rule_separator=self._rule_separator,
            param_separator=self._param_separator,
        )

    def load_constraints(self, path: Path) -> ConstraintSet:
        """YAMLファイルから制約宣言を読み込む。"""
        return load_constraint_set(
            path,
            self._validator.registry,
            rule_separator=self._rule_separator,
            param_separator=self._param_separator,
        )

    def validate(
        self,
        record: Any,
        constraints: ConstraintSet,
        locale: str | None = None,
        accessor: Accessor | None = None,
    ) -> list[str]:
        """レコードを評価し、違反メッセージを宣言順に返す。

        Returns:
            翻訳済みメッセージのリスト。違反がない場合は空リスト。
        """
        violations = self._validator.evaluate(record, constraints, accessor)
        translator = self.translator(locale)
        return translator.render_all(violations)

    def explain(
        self,
        record: Any,
        constraints: ConstraintSet,
        locale: str | None = None,
        accessor: Accessor | None = None,
    ) -> list[ViolationReport]:
        """違反ごとの詳細情報（名前空間・ルール・パラメータ・実際の値）とメッセージを返す。"""
        violations = self._validator.evaluate(record, constraints, accessor)
        translator = self.translator(locale)
        return [
            ViolationReport(
                namespace=v.namespace,
                field=v.field,
                rule=v.rule,
                param=v.param,
                value=v.value,
                message=translator.render(v),
            )
            for v in violations
        ]


def create_service(
    config: TenkenConfig | None = None,
    display_names: Mapping[str, DisplayNameResolver] | None = None,
) -> ValidationService:
    """組み込みルールと既定カタログでValidationServiceを構成する。

    Args:
        config: 設定。Noneの場合はデフォルト設定を使用。
        display_names: ロケール→表示名リゾルバ。

    Returns:
        構成済みのValidationService。
    """
    if config is None:
        config = TenkenConfig()

    validator = Validator(default_registry())
    translators = UniversalTranslator(
        fallback=config.fallback_locale,
        locales=config.locales,
        catalog_dir=config.catalog_dir,
        display_names=display_names,
    )
    return ValidationService(
        validator,
        translators,
        default_locale=config.default_locale,
        rule_separator=config.rule_separator,
        param_separator=config.param_separator,
    )
