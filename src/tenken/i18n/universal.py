"""複数ロケールのTranslatorを管理する。"""

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

import yaml

from tenken.i18n.display_names import DisplayNameResolver
from tenken.i18n.translator import Translator
from tenken.models.errors import CatalogError

logger = logging.getLogger(__name__)


def load_base_catalog(catalog_dir: Path, locale: str) -> dict[str, str]:
    """``<catalog_dir>/<locale>.yaml`` から既定テンプレートを読み込む。

    Raises:
        CatalogError: ファイルが存在しない、または形式が不正な場合。
    """
    catalog_file = catalog_dir / f"{locale}.yaml"
    try:
        with open(catalog_file, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise CatalogError(str(catalog_file), "catalog not found") from None
    except yaml.YAMLError as e:
        raise CatalogError(str(catalog_file), str(e)) from e

    if not isinstance(data, dict) or not isinstance(data.get("templates"), dict):
        raise CatalogError(str(catalog_file), "expected a mapping with a 'templates' mapping")
    return {str(rule): str(template) for rule, template in data["templates"].items()}


class UniversalTranslator:
    """ロケールごとのTranslatorを保持し、未対応ロケールはフォールバックへ委ねる。

    各ロケールの既定カタログは構築時にすべて読み込む。
    """

    def __init__(
        self,
        fallback: str,
        locales: Sequence[str],
        catalog_dir: Path,
        display_names: Mapping[str, DisplayNameResolver] | None = None,
    ) -> None:
        self._fallback = fallback
        self._locales = list(dict.fromkeys([fallback, *locales]))
        self._display_names = dict(display_names or {})
        self._translators: dict[str, Translator] = {
            locale: Translator(
                locale,
                base=load_base_catalog(catalog_dir, locale),
                display_names=self._display_names.get(locale),
            )
            for locale in self._locales
        }

    @property
    def fallback(self) -> str:
        return self._fallback

    @property
    def locales(self) -> list[str]:
        return list(self._locales)

    def find_translator(self, locale: str) -> Translator | None:
        """対応ロケールのTranslatorを返す。``ja-JP`` は ``ja`` にも一致する。"""
        for candidate in (locale, locale.replace("_", "-").split("-")[0]):
            if candidate in self._locales:
                return self._translators[candidate]
        return None

    def get_translator(self, locale: str) -> Translator:
        """ロケールのTranslatorを返す。未対応の場合はフォールバックのTranslatorを返す。"""
        translator = self.find_translator(locale)
        if translator is None:
            logger.warning("Locale %r is not supported; falling back to %r", locale, self._fallback)
            translator = self._translators[self._fallback]
        return translator
