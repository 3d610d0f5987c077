"""tenkenの設定管理。"""

from pathlib import Path

from pydantic_settings import BaseSettings

_PACKAGE_ROOT = Path(__file__).parent


class TenkenConfig(BaseSettings):
    """バリデーション設定。環境変数から読み込み可能。"""

    model_config = {"env_prefix": "TENKEN_"}

    catalog_dir: Path = _PACKAGE_ROOT / "catalogs"
    default_locale: str = "ja"
    fallback_locale: str = "en"
    locales: list[str] = ["ja", "en"]

    # 制約宣言の区切り文字
    rule_separator: str = ","
    param_separator: str = "="
