"""ロケール別のメッセージテンプレートと違反メッセージのレンダリング。"""

import logging
import re
from collections.abc import Callable, Iterable, Mapping

from tenken.i18n.display_names import DisplayNameResolver
from tenken.i18n.transform import transform
from tenken.models.errors import DuplicateTemplateError, TranslatorSealedError
from tenken.models.violation import Violation

logger = logging.getLogger(__name__)

ParamTransform = Callable[[str], str]

_PLACEHOLDER = re.compile(r"\{(\d+)\}")


class Translator:
    """1ロケール分のルール名→メッセージテンプレートを管理する。

    テンプレートは次の3層で解決する。後の層ほど優先される。

    1. 組み込みの既定テンプレート（コンストラクタの ``base``）
    2. カタログ追加（:meth:`add`）。既存テンプレートとの衝突は ``replace=True`` が必要
    3. カスタムルール（:meth:`register_rule`）。常に上書きし、パラメータ変換関数を持てる

    最初のレンダリング（または :meth:`seal`）で各層を1つの対応表にまとめ、以降の登録は受け付けない。
    """

    def __init__(
        self,
        locale: str,
        base: Mapping[str, str] | None = None,
        display_names: DisplayNameResolver | None = None,
    ) -> None:
        self._locale = locale
        self._base: dict[str, str] = dict(base or {})
        self._catalog: dict[str, str] = {}
        self._custom: dict[str, tuple[str, ParamTransform | None]] = {}
        self._display_names = display_names or DisplayNameResolver()
        self._templates: dict[str, str] | None = None
        self._transforms: dict[str, ParamTransform] = {}

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def display_names(self) -> DisplayNameResolver:
        return self._display_names

    @property
    def sealed(self) -> bool:
        return self._templates is not None

    def _ensure_open(self) -> None:
        if self.sealed:
            raise TranslatorSealedError(self._locale)

    def add(self, rule: str, template: str, *, replace: bool = False) -> None:
        """ルールのテンプレートをカタログに追加する。

        Args:
            rule: ルール名。
            template: ``{0}`` に表示名、``{1}`` にパラメータが入るテンプレート。
            replace: 既存テンプレートを置き換える場合はTrue。

        Raises:
            DuplicateTemplateError: 既存テンプレートがありreplaceがFalseの場合。
            TranslatorSealedError: 確定済みの場合。
        """
        self._ensure_open()
        if not replace and (rule in self._base or rule in self._catalog):
            raise DuplicateTemplateError(self._locale, rule)
        self._catalog[rule] = template

    def register_rule(self, rule: str, template: str, transform: ParamTransform | None = None) -> None:
        """カスタムルールのテンプレートを登録する。既存の層より常に優先される。

        Raises:
            TranslatorSealedError: 確定済みの場合。
        """
        self._ensure_open()
        self._custom[rule] = (template, transform)

    def seal(self) -> None:
        """各層を1つの対応表にまとめ、以降の登録を禁止する。"""
        if self._templates is not None:
            return
        templates = {**self._base, **self._catalog}
        for rule, (template, param_transform) in self._custom.items():
            templates[rule] = template
            if param_transform is not None:
                self._transforms[rule] = param_transform
        self._templates = templates

    def template_for(self, rule: str) -> str | None:
        self.seal()
        return (self._templates or {}).get(rule)

    def _display_param(self, rule: str, param: str) -> str:
        custom = self._transforms.get(rule)
        if custom is not None:
            return custom(param)
        return transform(rule, param)

    def render(self, violation: Violation, display_names: DisplayNameResolver | None = None) -> str:
        """違反をこのロケールのメッセージに変換する。

        テンプレートが無い場合は ``<表示名> <ルール名> <パラメータ>`` を返し、例外は送出しない。
        """
        names = display_names or self._display_names
        field_name = names.resolve(violation.field)
        template = self.template_for(violation.rule)

        if template is None:
            logger.warning(
                "No template for rule %r in locale %r; using generic message",
                violation.rule,
                self._locale,
            )
            parts = [field_name, violation.rule]
            if violation.param is not None:
                parts.append(violation.param)
            return " ".join(parts)

        params = [field_name]
        if violation.param is not None:
            params.append(self._display_param(violation.rule, violation.param))

        def substitute(match: re.Match[str]) -> str:
            index = int(match.group(1))
            return params[index] if index < len(params) else match.group(0)

        return _PLACEHOLDER.sub(substitute, template)

    def render_all(
        self,
        violations: Iterable[Violation],
        display_names: DisplayNameResolver | None = None,
    ) -> list[str]:
        return [self.render(v, display_names) for v in violations]
